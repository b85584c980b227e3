"""Ephemeral PostgreSQL instances backed by Testcontainers.

Each test owns one PostgresInstance for its whole lifetime:

    Created → Started → (queries)* → Stopped

Stopped is terminal. The instance is an async context manager, so the
container is removed when the test ends whether it passed or not.
"""
from __future__ import annotations

import asyncio
import contextlib
import enum
import logging
from collections.abc import AsyncIterator, Callable
from pathlib import Path
from typing import Any

from sqlalchemy.engine import make_url
from sqlalchemy.exc import DBAPIError
from sqlalchemy.ext.asyncio import AsyncConnection, AsyncEngine, create_async_engine
from sqlalchemy.pool import NullPool
from testcontainers.postgres import PostgresContainer

from pgverify import config
from pgverify.errors import (
    ConnectionClosedError,
    DatabaseConnectionError,
    HarnessError,
    InstanceStateError,
    StartupError,
)
from pgverify.seeding import apply_init_script

logger = logging.getLogger(__name__)

ContainerFactory = Callable[..., PostgresContainer]


class InstanceState(enum.Enum):
    """Lifecycle of an instance: CREATED, then STARTED, then STOPPED (terminal)."""

    CREATED = "created"
    STARTED = "started"
    STOPPED = "stopped"


class PostgresInstance:
    """A throwaway PostgreSQL server, optionally seeded by an init script.

    The container is only created when start() runs, so constructing an
    instance never talks to Docker.

    Args:
        image: Docker image reference, e.g. ``postgres:10.14``.
        init_script: Packaged script name or path, run once after startup.
        username: Superuser created by the image entrypoint.
        password: Password for ``username``.
        dbname: Database created by the image entrypoint.
        container_factory: Builds the container; defaults to PostgresContainer.
    """

    def __init__(
        self,
        image: str = config.POSTGRES_IMAGE,
        *,
        init_script: str | Path | None = None,
        username: str = config.POSTGRES_USER,
        password: str = config.POSTGRES_PASSWORD,
        dbname: str = config.POSTGRES_DB,
        container_factory: ContainerFactory = PostgresContainer,
    ) -> None:
        self.image = image
        self.init_script = init_script
        self.username = username
        self.password = password
        self.dbname = dbname
        self._container_factory = container_factory
        self._container: Any = None
        self._engine: AsyncEngine | None = None
        self.state = InstanceState.CREATED

    def __repr__(self) -> str:
        return f"PostgresInstance(image={self.image!r}, state={self.state.value})"

    async def __aenter__(self) -> PostgresInstance:
        return await self.start()

    async def __aexit__(self, *exc_info: object) -> None:
        await self.stop()

    # -----------------------------------------------------------------------
    # Lifecycle
    # -----------------------------------------------------------------------

    async def start(self) -> PostgresInstance:
        """Start the container, wait for readiness and apply the init script.

        Raises:
            InstanceStateError: If the instance was already started or stopped.
            StartupError: If the container or the init script failed. The
                instance is torn down and left Stopped.
        """
        if self.state is not InstanceState.CREATED:
            raise InstanceStateError(f"Cannot start an instance that is {self.state.value}")

        try:
            self._container = self._container_factory(
                self.image,
                username=self.username,
                password=self.password,
                dbname=self.dbname,
            )
            await asyncio.to_thread(self._container.start)
        except Exception as exc:  # Docker reports failures through unrelated exception types
            await self._teardown()
            raise StartupError(f"PostgreSQL container {self.image!r} failed to start: {exc}") from exc

        try:
            self._engine = create_async_engine(self.connection_url(), poolclass=NullPool)
            self.state = InstanceState.STARTED
            logger.info("Started %s", self.image)

            if self.init_script is not None:
                await apply_init_script(self._engine, self.init_script)
        except HarnessError:
            await self._teardown()
            raise
        except Exception as exc:
            await self._teardown()
            raise StartupError(f"PostgreSQL instance {self.image!r} failed to initialise: {exc}") from exc

        return self

    async def stop(self) -> None:
        """Dispose the engine and remove the container. Safe to call twice."""
        if self.state is InstanceState.STOPPED:
            return
        await self._teardown()
        logger.info("Stopped %s", self.image)

    async def _teardown(self) -> None:
        self.state = InstanceState.STOPPED

        if self._engine is not None:
            engine, self._engine = self._engine, None
            await engine.dispose()

        if self._container is not None:
            container, self._container = self._container, None
            try:
                await asyncio.to_thread(container.stop)
            except Exception as exc:  # must not mask the test's own outcome
                logger.warning("Failed to stop container for %s: %s", self.image, exc)

    # -----------------------------------------------------------------------
    # Connections
    # -----------------------------------------------------------------------

    def connection_url(self, driver: str = "asyncpg") -> str:
        """SQLAlchemy URL of the running instance, using the given driver."""
        if self._container is None:
            raise InstanceStateError(f"{self!r} has no running container")
        url = make_url(self._container.get_connection_url())
        return url.set(drivername=f"postgresql+{driver}").render_as_string(hide_password=False)

    @contextlib.asynccontextmanager
    async def connect(self) -> AsyncIterator[AsyncConnection]:
        """Open a connection that is closed when the block exits.

        Raises:
            InstanceStateError: If the instance has not been started.
            ConnectionClosedError: If the instance has been stopped.
            DatabaseConnectionError: If the driver cannot connect.
        """
        if self.state is InstanceState.STOPPED:
            raise ConnectionClosedError(f"{self!r} is stopped; no further queries are possible")
        if self.state is not InstanceState.STARTED or self._engine is None:
            raise InstanceStateError(f"{self!r} has not been started")

        try:
            conn = await self._engine.connect()
        except (DBAPIError, OSError) as exc:
            raise DatabaseConnectionError(f"Could not connect to {self.image!r}: {exc}") from exc

        try:
            yield conn
        finally:
            await conn.close()
