"""PostgreSQL feature acceptance harness.

Starts a throwaway PostgreSQL container per test, applies an init script,
runs a query and hands the streamed rows to an assertion callback.

Usage:
    from pgverify import PostgresInstance, perform_query, to_string_list

    async with PostgresInstance(init_script="init_ltree.sql") as instance:
        paths = await perform_query(
            instance,
            "SELECT path FROM test WHERE path <@ 'Top.Science'",
            to_string_list,
        )
"""
from pgverify.errors import (
    ConnectionClosedError,
    DatabaseConnectionError,
    HarnessError,
    InitScriptError,
    InstanceStateError,
    QueryExecutionError,
    StartupError,
)
from pgverify.harness import perform_query, to_string_list
from pgverify.instance import InstanceState, PostgresInstance

__all__ = [
    "ConnectionClosedError",
    "DatabaseConnectionError",
    "HarnessError",
    "InitScriptError",
    "InstanceState",
    "InstanceStateError",
    "PostgresInstance",
    "QueryExecutionError",
    "StartupError",
    "perform_query",
    "to_string_list",
]
