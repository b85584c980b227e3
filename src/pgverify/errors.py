"""Error taxonomy for the query verification harness.

Every wrapped error keeps the original exception as ``__cause__`` and repeats
its message, so a failing test reports what the database or Docker said.
Assertion failures are plain ``AssertionError`` raised by the tests.
"""
from __future__ import annotations


class HarnessError(Exception):
    """Base class for all harness errors."""


class StartupError(HarnessError):
    """The database instance failed to start or become ready."""


class InitScriptError(StartupError):
    """An init script could not be found or failed while running."""

    def __init__(self, script: str, message: str) -> None:
        super().__init__(f"Init script {script!r} failed: {message}")
        self.script = script


class DatabaseConnectionError(HarnessError, ConnectionError):
    """The driver could not open a connection to the instance."""


class QueryExecutionError(HarnessError):
    """A statement failed to execute or its rows could not be fetched."""

    def __init__(self, sql: str, message: str) -> None:
        super().__init__(f"Query failed: {message}\n  SQL: {sql}")
        self.sql = sql


class InstanceStateError(HarnessError):
    """An operation is not legal in the instance's current lifecycle state."""


class ConnectionClosedError(InstanceStateError):
    """A query was attempted after the instance was stopped."""
