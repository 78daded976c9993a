#!/usr/bin/env python3
"""
Timelog CLI
-----------

Command-line interface over the Timelog store. Results are printed in the
interchange JSON form (identifiers as hyphenated hex, timestamps as
``YYYY-MM-DD HH:MM:SS``, absent optional timestamps as ``"null"``).

Command Structure:
    - init: Create the schema
    - label: add / show / find / search
    - activity: start / show

Usage:
    timelog --help
    timelog init
    timelog label add focus --scope work
    timelog label search fo
    timelog activity start run --start "2024-01-15 07:30:00"
"""
import asyncio
import json
from pathlib import Path
from typing import Any, Awaitable, Callable, TypeVar

import click

from timelog.core.logging_manager import TimelogLogger
from timelog.core.paths import DB_PATH, LOG_DIR
from timelog.database import TimelogDB

T = TypeVar("T")


@click.group()
@click.option(
    "--db-path",
    type=click.Path(),
    default=str(DB_PATH),
    help="Path to database file",
)
@click.option(
    "--log-dir",
    type=click.Path(),
    default=str(LOG_DIR),
    help="Path to log directory",
)
@click.option(
    "--verbose",
    is_flag=True,
    help="Show detailed errors and tracebacks",
)
@click.pass_context
def cli(ctx, db_path, log_dir, verbose):
    """Timelog activity store CLI"""
    ctx.ensure_object(dict)
    ctx.obj["db_path"] = Path(db_path)
    ctx.obj["log_dir"] = Path(log_dir)
    ctx.obj["verbose"] = verbose
    logger = TimelogLogger(Path(log_dir), component_name="cli")
    ctx.obj["logger"] = logger
    ctx.call_on_close(logger.close)


def get_db(ctx) -> TimelogDB:
    """Build a store from the paths on the click context."""
    return TimelogDB(db_path=ctx.obj["db_path"], log_dir=ctx.obj["log_dir"])


def run_with_db(ctx, operation: Callable[[TimelogDB], Awaitable[T]]) -> T:
    """
    Run one async store operation on a fresh event loop.

    The engine is disposed before the loop closes.
    """

    async def _runner() -> T:
        db = get_db(ctx)
        try:
            return await operation(db)
        finally:
            await db.dispose()

    return asyncio.run(_runner())


def echo_json(data: Any) -> None:
    click.echo(json.dumps(data, indent=2, ensure_ascii=False))


# Import and register command modules
# These imports must come after CLI group definition
from .setup import init  # noqa: E402
from .label import label  # noqa: E402
from .activity import activity  # noqa: E402

cli.add_command(init)
cli.add_command(label)
cli.add_command(activity)
