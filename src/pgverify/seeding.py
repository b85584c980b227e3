"""Init script loading and execution.

Init scripts are plain SQL files run once against a freshly started instance
to create extensions, tables and seed rows. They are referenced by name:
    - a bare file name resolves to a script shipped in ``pgverify/sql/``
    - anything that exists on disk is read from that path

Usage:
    from pgverify.seeding import apply_init_script
    await apply_init_script(engine, "init_hstore.sql")
"""
from __future__ import annotations

import logging
from importlib import resources
from importlib.resources.abc import Traversable
from pathlib import Path

import asyncpg
from sqlalchemy.ext.asyncio import AsyncEngine

from pgverify.errors import InitScriptError

logger = logging.getLogger(__name__)

SCRIPT_PACKAGE = "pgverify"
SCRIPT_DIR = "sql"


def available_scripts() -> list[str]:
    """Return the names of the init scripts shipped with the package."""
    directory = resources.files(SCRIPT_PACKAGE).joinpath(SCRIPT_DIR)
    return sorted(entry.name for entry in directory.iterdir() if entry.name.endswith(".sql"))


def load_init_script(script: str | Path) -> str:
    """Read an init script by packaged name or filesystem path.

    Raises:
        InitScriptError: If no such script exists or it is not UTF-8 text.
    """
    source: Path | Traversable = Path(script)
    if not source.is_file():
        source = resources.files(SCRIPT_PACKAGE).joinpath(SCRIPT_DIR, str(script))
        if not source.is_file():
            raise InitScriptError(
                str(script),
                f"not found (packaged scripts: {', '.join(available_scripts())})",
            )

    try:
        return source.read_text(encoding="utf-8")
    except UnicodeDecodeError as exc:
        raise InitScriptError(str(script), f"not valid UTF-8 ({exc.reason} at byte {exc.start})") from exc


async def apply_init_script(engine: AsyncEngine, script: str | Path) -> None:
    """Run a whole init script once against the engine's database.

    The script goes through asyncpg's simple query protocol, which accepts
    several statements in one call; SQLAlchemy's execute() would prepare it
    as a single statement.

    Raises:
        InitScriptError: If the script is missing or any statement fails.
    """
    sql = load_init_script(script)

    async with engine.connect() as conn:
        raw = await conn.get_raw_connection()
        try:
            await raw.driver_connection.execute(sql)
        except asyncpg.PostgresError as exc:
            raise InitScriptError(str(script), str(exc)) from exc

    logger.info("Applied init script %s", script)
