"""User management commands."""

import click
from fintrack.cli.context import get_db
from fintrack.cli.error_handling import handle_domain_error
from fintrack.cli.lookup import EntityLookup
from fintrack.cli.options import lookup_options
from fintrack.cli.responses import account_response, user_response
from fintrack.cli.table import print_table
from fintrack.domain.account import AccountService
from fintrack.domain.errors import DomainError
from fintrack.domain.user import UserService


@click.group()
def user_group():
    """Manage users."""
    pass


@user_group.command("create")
@click.option("--name", "-n", help="The name of the user")
@click.pass_context
def create_user(ctx, name: str | None):
    """Create a new user.

    Examples:
        fintrack user create --name "John Doe"
        fintrack user create
    """
    prompter = ctx.obj["prompter"]
    service = UserService(get_db(ctx))

    try:
        if name is None:
            name = prompter.text("Name", help="Enter the name of the user")
        user = service.create_user(name=name)
        click.secho(f"Successfully created user with id {user.id}", fg="green")
    except DomainError as e:
        handle_domain_error(ctx, e)


@user_group.command("list")
@click.pass_context
def list_users(ctx):
    """List all users."""
    service = UserService(get_db(ctx))

    try:
        users = service.list_users()
    except DomainError as e:
        handle_domain_error(ctx, e)

    print_table([user_response(u) for u in users], "Users")


@user_group.command("get")
@lookup_options("user")
@click.pass_context
def get_user(ctx, entity_id: str | None, name: str | None):
    """Show a user and the accounts they hold.

    Examples:
        fintrack user get --id abcdefgh
        fintrack user get --name John
    """
    lookup = EntityLookup(get_db(ctx), ctx.obj["prompter"])

    try:
        user = lookup.user(user_id=entity_id, name=name)
        accounts = AccountService(get_db(ctx)).get_accounts_by_holder(user.id)
    except DomainError as e:
        handle_domain_error(ctx, e)

    print_table([user_response(user)], "User")
    if accounts:
        print_table([account_response(acc) for acc in accounts], "Accounts")


@user_group.command("update")
@lookup_options("user")
@click.pass_context
def update_user(ctx, entity_id: str | None, name: str | None):
    """Rename a user.

    The user is found by --id or --name; the new name is always asked for.
    """
    prompter = ctx.obj["prompter"]
    lookup = EntityLookup(get_db(ctx), prompter)

    try:
        user = lookup.user(user_id=entity_id, name=name)
        new_name = prompter.text(
            "New Name", help="Enter the new name of the user", default=user.name
        )
        user = lookup.users.update_user(user.id, name=new_name)
        click.secho(f"Successfully updated user {user.name}", fg="green")
    except DomainError as e:
        handle_domain_error(ctx, e)


@user_group.command("delete")
@lookup_options("user")
@click.pass_context
def delete_user(ctx, entity_id: str | None, name: str | None):
    """Delete a user.

    All accounts held by the user, and their transactions, are deleted too.
    """
    lookup = EntityLookup(get_db(ctx), ctx.obj["prompter"])

    try:
        user = lookup.user(user_id=entity_id, name=name)
        lookup.users.delete_user(user.id)
        click.secho(f"Successfully deleted user {user.name}", fg="green")
    except DomainError as e:
        handle_domain_error(ctx, e)


def register_commands(cli):
    """Register user commands with main CLI."""
    cli.add_command(user_group, name="user")
