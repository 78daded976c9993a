"""
Label Commands
--------------

Commands:
    - label add NAME [--scope S]
    - label show ID
    - label find NAME [--scope S]
    - label search QUERY [--scope S]
"""
import sys

import click

from timelog.core.codecs import decode_id
from timelog.core.exceptions import DatabaseError, ParseError, ValidationError
from timelog.core.logging_manager import handle_cli_error
from . import echo_json, run_with_db


@click.group()
def label():
    """Create, look up and search labels."""
    pass


@label.command("add")
@click.argument("name")
@click.option("--scope", default=None, help="Optional label scope")
@click.pass_context
def add(ctx, name, scope):
    """Create a new label."""
    try:
        created = run_with_db(ctx, lambda db: db.create_label(name, scope))
        echo_json(created.to_dict())
    except (DatabaseError, ValidationError) as e:
        handle_cli_error(ctx, e, "label_add", {"name": name, "scope": scope})


@label.command("show")
@click.argument("label_id")
@click.pass_context
def show(ctx, label_id):
    """Show a label by identifier."""
    try:
        found = run_with_db(ctx, lambda db: db.label_by_id(decode_id(label_id)))
    except (DatabaseError, ParseError) as e:
        handle_cli_error(ctx, e, "label_show", {"label_id": label_id})

    if found is None:
        click.echo(f"No label with id {label_id}", err=True)
        sys.exit(1)
    echo_json(found.to_dict())


@label.command("find")
@click.argument("name")
@click.option("--scope", default=None, help="Scope to match (global labels if omitted)")
@click.pass_context
def find(ctx, name, scope):
    """Find a label by exact name and scope."""
    try:
        found = run_with_db(ctx, lambda db: db.label_by_name(name, scope))
    except DatabaseError as e:
        handle_cli_error(ctx, e, "label_find", {"name": name, "scope": scope})

    if found is None:
        click.echo(f"No label named {name!r}", err=True)
        sys.exit(1)
    echo_json(found.to_dict())


@label.command("search")
@click.argument("query")
@click.option("--scope", default=None, help="Restrict matches to this scope")
@click.pass_context
def search(ctx, query, scope):
    """Prefix search over label names (and scopes when unscoped)."""
    try:
        hits = run_with_db(ctx, lambda db: db.label_search(query, scope))
        echo_json([hit.to_dict() for hit in hits])
    except DatabaseError as e:
        handle_cli_error(ctx, e, "label_search", {"query": query, "scope": scope})
