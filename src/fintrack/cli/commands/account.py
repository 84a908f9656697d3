"""Account management commands."""

import click
from fintrack.cli.context import get_db
from fintrack.cli.error_handling import handle_domain_error
from fintrack.cli.lookup import EntityLookup
from fintrack.cli.options import lookup_options
from fintrack.cli.responses import account_response
from fintrack.cli.table import print_table
from fintrack.domain.account import AccountService
from fintrack.domain.errors import DomainError
from fintrack.utils.amount_parser import parse_amount


@click.group()
def account_group():
    """Manage accounts."""
    pass


@account_group.command("create")
@click.option("--name", "-n", help="The name of the account")
@click.option("--bank", "-b", help="The bank of the account")
@click.option("--account-number", "-a", help="The account number of the account")
@click.option("--balance", "-m", help="The balance of the account (e.g., 1000.50)")
@click.option("--holder-id", "-u", help="The id of the user holding the account")
@click.pass_context
def create_account(
    ctx,
    name: str | None,
    bank: str | None,
    account_number: str | None,
    balance: str | None,
    holder_id: str | None,
):
    """Create a new account.

    Missing values are asked for; the holder is picked from the list of
    users unless --holder-id is given. The account number is optional.

    Examples:
        fintrack account create -n "Checking" -b "Test Bank" -m 1000.50
        fintrack account create --name "Savings" --holder-id abcdefgh
    """
    prompter = ctx.obj["prompter"]
    lookup = EntityLookup(get_db(ctx), prompter)

    try:
        if name is None:
            name = prompter.text("Name", help="Enter the name of the account")
        if balance is None:
            balance = prompter.text("Balance", help="Enter the balance of the account")
        amount = parse_amount(balance)
        if bank is None:
            bank = prompter.text("Bank", help="Enter the bank of the account")
        if holder_id is None:
            holder_id = lookup.select_user().id
        else:
            holder_id = lookup.users.get_user(holder_id).id

        account = lookup.accounts.create_account(
            name=name,
            bank=bank,
            balance=amount,
            holder_id=holder_id,
            account_number=account_number,
        )
        click.secho(f"Successfully created account {account.name} ({account.id})", fg="green")
    except DomainError as e:
        handle_domain_error(ctx, e)


@account_group.command("list")
@click.option("--holder-id", "-u", help="Only show accounts held by this user id")
@click.pass_context
def list_accounts(ctx, holder_id: str | None):
    """List all accounts."""
    service = AccountService(get_db(ctx))

    try:
        accounts = service.list_accounts(holder_id=holder_id)
    except DomainError as e:
        handle_domain_error(ctx, e)

    print_table([account_response(acc) for acc in accounts], "Accounts")


@account_group.command("get")
@lookup_options("account")
@click.pass_context
def get_account(ctx, entity_id: str | None, name: str | None):
    """Show an account.

    Without --id or --name the account is picked from a list.
    """
    lookup = EntityLookup(get_db(ctx), ctx.obj["prompter"])

    try:
        account = lookup.account(account_id=entity_id, name=name)
    except DomainError as e:
        handle_domain_error(ctx, e)

    print_table([account_response(account)], "Account")


@account_group.command("update")
@lookup_options("account")
@click.pass_context
def update_account(ctx, entity_id: str | None, name: str | None):
    """Update an account.

    Every field is asked for again, with the current value as default.
    """
    prompter = ctx.obj["prompter"]
    lookup = EntityLookup(get_db(ctx), prompter)

    try:
        account = lookup.account(account_id=entity_id, name=name)

        new_name = prompter.text(
            "New Name", help="Enter the new name of the account", default=account.name
        )
        new_bank = prompter.text(
            "New Bank", help="Enter the new bank of the account", default=account.bank
        )
        new_number = prompter.text(
            "New Account Number",
            help="Enter the new account number (leave empty for none)",
            default=account.account_number or "",
        )
        new_balance = parse_amount(
            prompter.text(
                "New Balance",
                help="Enter the new balance of the account",
                default=f"{account.balance:.2f}",
            )
        )
        holder = lookup.select_user(default_id=account.holder_id)

        account = lookup.accounts.update_account(
            account.id,
            name=new_name,
            bank=new_bank,
            account_number=new_number,
            balance=new_balance,
            holder_id=holder.id,
        )
        click.secho(f"Successfully updated account {account.name}", fg="green")
    except DomainError as e:
        handle_domain_error(ctx, e)


@account_group.command("delete")
@lookup_options("account")
@click.pass_context
def delete_account(ctx, entity_id: str | None, name: str | None):
    """Delete an account and all of its transactions."""
    lookup = EntityLookup(get_db(ctx), ctx.obj["prompter"])

    try:
        account = lookup.account(account_id=entity_id, name=name)
        lookup.accounts.delete_account(account.id)
        click.secho(f"Successfully deleted account {account.name}", fg="green")
    except DomainError as e:
        handle_domain_error(ctx, e)


def register_commands(cli):
    """Register account commands with main CLI."""
    cli.add_command(account_group, name="account")
