"""
Setup Commands
--------------

Commands:
    - init: Create the labels, activities and activity_labels tables
"""
import click

from timelog.core.exceptions import DatabaseError
from timelog.core.logging_manager import handle_cli_error
from . import run_with_db


@click.command()
@click.pass_context
def init(ctx):
    """Initialize the database schema."""
    try:
        click.echo("🗄️  Initializing database schema...")
        run_with_db(ctx, lambda db: db.initialize_schema())
        click.echo(f"✅ Database initialized at {ctx.obj['db_path']}")
    except DatabaseError as e:
        handle_cli_error(ctx, e, "init")
