"""Main CLI entry point."""

import logging

import click
from fintrack.cli.prompts import ClickPrompter
from fintrack.database.factories import DB_PATH_ENV_VAR

# Import and register all commands at module level
from fintrack.cli.commands import (
    account,
    category,
    transaction,
    user,
)


@click.group()
@click.option(
    "--db-path",
    type=click.Path(dir_okay=False),
    help=f"Path to database file (overrides {DB_PATH_ENV_VAR} environment variable)",
    envvar=DB_PATH_ENV_VAR,
)
@click.option("--verbose", "-v", is_flag=True, help="Log database activity to stderr")
@click.pass_context
def cli(ctx, db_path: str | None, verbose: bool):
    """Fintrack - personal finance record keeper.

    Keep track of users, their bank accounts, spending categories and
    transactions in a local SQLite database. Any value not given as an
    option is asked for interactively.
    """
    ctx.ensure_object(dict)

    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )
    if verbose:
        logging.getLogger("fintrack").setLevel(logging.DEBUG)

    # Tests may supply their own prompter through obj
    ctx.obj.setdefault("prompter", ClickPrompter())

    # The database is opened by the first command that needs it
    ctx.obj["db_path"] = db_path


# Register all commands
user.register_commands(cli)
account.register_commands(cli)
category.register_commands(cli)
transaction.register_commands(cli)


def main():
    """Main entry point for CLI."""
    cli()


if __name__ == "__main__":
    main()
