"""Database access for commands."""

import click
from fintrack.cli.error_handling import handle_domain_error
from fintrack.database.base import Database
from fintrack.database.factories import create_sqlite_database
from fintrack.domain.errors import DomainError


def get_db(ctx: click.Context) -> Database:
    """Return the database for this invocation, opening it on first use.

    Only commands that actually run reach this, so ``--help`` at any level
    never touches the file.
    """
    if "db" not in ctx.obj:
        try:
            db = create_sqlite_database(database_path=ctx.obj.get("db_path"))
        except DomainError as e:
            handle_domain_error(ctx, e)
        db.connect()
        db.initialize_schema()
        ctx.obj["db"] = db
        ctx.find_root().call_on_close(db.disconnect)
    return ctx.obj["db"]
