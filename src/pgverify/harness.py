"""Query execution against a PostgresInstance.

perform_query() opens a connection for the duration of one call, streams the
statement's rows through a server-side cursor and hands that cursor to an
async handler. Cursor and connection are closed however the handler exits.
"""
from __future__ import annotations

import logging
from collections.abc import Awaitable, Callable
from typing import TypeVar

from sqlalchemy import text
from sqlalchemy.exc import DBAPIError
from sqlalchemy.ext.asyncio import AsyncResult
from sqlalchemy.sql.expression import Executable

from pgverify.errors import QueryExecutionError
from pgverify.instance import PostgresInstance

logger = logging.getLogger(__name__)

T = TypeVar("T")

Query = str | Executable
ResultHandler = Callable[[AsyncResult], Awaitable[T]]


def _as_statement(query: Query) -> tuple[Executable, str]:
    """Return the executable statement and its SQL text for error messages."""
    if isinstance(query, str):
        if not query.strip():
            raise ValueError("query must not be empty")
        return text(query), query
    sql = str(query)
    if not sql.strip():
        raise ValueError("query must not be empty")
    return query, sql


def _describe(exc: DBAPIError) -> str:
    return str(exc.orig) if exc.orig is not None else str(exc)


async def perform_query(
    instance: PostgresInstance,
    query: Query,
    handler: ResultHandler[T],
) -> T:
    """Run one query on a fresh connection and pass its cursor to ``handler``.

    The handler receives the cursor positioned before the first row and may
    read as many rows as it likes. Whatever it returns is returned here.

    Args:
        instance: A started instance.
        query: SQL text, or a SQLAlchemy statement when result columns need
            explicit types (``text(...).columns(data=HSTORE)``).
        handler: Async callable consuming the forward-only cursor.

    Raises:
        ValueError: If the query is empty.
        QueryExecutionError: If the statement fails or rows cannot be fetched.
        DatabaseConnectionError: If no connection could be opened.
        ConnectionClosedError: If the instance has already been stopped.
    """
    statement, sql = _as_statement(query)

    async with instance.connect() as conn:
        logger.debug("Executing on %r: %s", instance, sql)
        try:
            result = await conn.stream(statement)
        except DBAPIError as exc:
            raise QueryExecutionError(sql, _describe(exc)) from exc

        try:
            return await handler(result)
        except DBAPIError as exc:
            raise QueryExecutionError(sql, _describe(exc)) from exc
        finally:
            await result.close()


async def to_string_list(result: AsyncResult) -> list[str | None]:
    """Collect the first column of every remaining row as a string.

    Reads in cursor order until the end of results; SQL NULLs stay None.
    The cursor is consumed, so a second call returns an empty list.
    """
    values: list[str | None] = []
    async for row in result:
        value = row[0]
        values.append(None if value is None else str(value))
    return values
