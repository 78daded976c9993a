"""
Activity Commands
-----------------

Commands:
    - activity start NAME [--description D] [--start "YYYY-MM-DD HH:MM:SS"]
    - activity show ID
"""
import sys

import click

from timelog.core.codecs import decode_id, decode_timestamp
from timelog.core.exceptions import DatabaseError, ParseError, ValidationError
from timelog.core.logging_manager import handle_cli_error
from timelog.dataclasses import ActivityNew
from . import echo_json, run_with_db


@click.group()
def activity():
    """Start and inspect activities."""
    pass


@activity.command("start")
@click.argument("name")
@click.option("--description", default=None, help="Optional description")
@click.option(
    "--start",
    "start_text",
    default=None,
    help="Start time as 'YYYY-MM-DD HH:MM:SS' (default: now)",
)
@click.pass_context
def start(ctx, name, description, start_text):
    """Start a new activity."""
    try:
        start_at = decode_timestamp(start_text) if start_text is not None else None
        new = ActivityNew(name=name, description=description, start=start_at)
        started = run_with_db(ctx, lambda db: db.activity_start(new))
        echo_json(started.to_dict())
    except (DatabaseError, ParseError, ValidationError) as e:
        handle_cli_error(ctx, e, "activity_start", {"name": name, "start": start_text})


@activity.command("show")
@click.argument("activity_id")
@click.pass_context
def show(ctx, activity_id):
    """Show an activity and its labels."""
    try:
        found = run_with_db(ctx, lambda db: db.activity_by_id(decode_id(activity_id)))
    except (DatabaseError, ParseError) as e:
        handle_cli_error(ctx, e, "activity_show", {"activity_id": activity_id})

    if found is None:
        click.echo(f"No activity with id {activity_id}", err=True)
        sys.exit(1)
    echo_json(found.to_dict())
