"""Transaction management commands."""

import click
from fintrack.cli.context import get_db
from fintrack.cli.error_handling import handle_domain_error
from fintrack.cli.lookup import EntityLookup
from fintrack.cli.options import lookup_options
from fintrack.cli.responses import transaction_response
from fintrack.cli.table import print_table
from fintrack.domain.entities import TransactionType
from fintrack.domain.errors import DomainError
from fintrack.domain.transaction import TransactionService
from fintrack.utils.amount_parser import parse_minor_units

TYPE_CHOICES = [t.value for t in TransactionType]


@click.group()
def transaction_group():
    """Manage transactions."""
    pass


@transaction_group.command("create")
@click.option("--account-id", "-a", help="The account id of the transaction")
@click.option("--amount", "-m", help="The amount of the transaction (in cents)")
@click.option(
    "--type",
    "-t",
    "transaction_type",
    type=click.Choice(TYPE_CHOICES, case_sensitive=False),
    help="The type of the transaction",
)
@click.option("--description", "-d", help="The description of the transaction")
@click.option("--category-id", "-c", help="The category id of the transaction")
@click.pass_context
def create_transaction(
    ctx,
    account_id: str | None,
    amount: str | None,
    transaction_type: str | None,
    description: str | None,
    category_id: str | None,
):
    """Create a new transaction.

    Amounts are whole minor currency units, so 1250 means 12.50.

    Examples:
        fintrack transaction create -a abcdefgh -m 1250 -t debit -d "Lunch" -c qwertyui
        fintrack transaction create
    """
    prompter = ctx.obj["prompter"]
    lookup = EntityLookup(get_db(ctx), prompter)

    try:
        if account_id is None:
            account = lookup.select_account()
        else:
            account = lookup.accounts.get_account(account_id)
        if amount is None:
            amount = prompter.text("Amount", help="Enter the amount (in cents)")
        cents = parse_minor_units(amount)
        if transaction_type is None:
            transaction_type = prompter.select("Transaction Type", TYPE_CHOICES)
        if description is None:
            description = prompter.text(
                "Description", help="Enter the description of the transaction"
            )
        if category_id is None:
            category = lookup.select_category()
        else:
            category = lookup.categories.get_category(category_id)

        transaction = lookup.transactions.create_transaction(
            account_id=account.id,
            amount=cents,
            transaction_type=transaction_type,
            description=description,
            category_id=category.id,
        )
        click.secho(
            f"Successfully created transaction with id {transaction.id}", fg="green"
        )
    except DomainError as e:
        handle_domain_error(ctx, e)


@transaction_group.command("list")
@click.option("--account-id", "-a", help="Filter by account id")
@click.pass_context
def list_transactions(ctx, account_id: str | None):
    """List transactions, optionally for one account only."""
    service = TransactionService(get_db(ctx))

    try:
        transactions = service.list_transactions(account_id=account_id)
    except DomainError as e:
        handle_domain_error(ctx, e)

    print_table([transaction_response(txn) for txn in transactions], "Transactions")


@transaction_group.command("get")
@lookup_options("transaction", searched_field="description")
@click.pass_context
def get_transaction(ctx, entity_id: str | None, name: str | None):
    """Show a transaction.

    Without --id or --name the transaction is picked from a list.
    """
    lookup = EntityLookup(get_db(ctx), ctx.obj["prompter"])

    try:
        transaction = lookup.transaction(transaction_id=entity_id, name=name)
    except DomainError as e:
        handle_domain_error(ctx, e)

    print_table([transaction_response(transaction)], "Transaction")


@transaction_group.command("update")
@lookup_options("transaction", searched_field="description")
@click.pass_context
def update_transaction(ctx, entity_id: str | None, name: str | None):
    """Update a transaction.

    Account, amount, type, description and category are all asked for
    again, with the current values as defaults.
    """
    prompter = ctx.obj["prompter"]
    lookup = EntityLookup(get_db(ctx), prompter)

    try:
        transaction = lookup.transaction(transaction_id=entity_id, name=name)

        account = lookup.select_account(default_id=transaction.account_id)
        new_amount = parse_minor_units(
            prompter.text(
                "New Amount",
                help="Enter the new amount (in cents)",
                default=str(transaction.amount),
            )
        )
        new_type = prompter.select(
            "New Transaction Type", TYPE_CHOICES, default=transaction.transaction_type.value
        )
        new_description = prompter.text(
            "New Description",
            help="Enter the new description of the transaction",
            default=transaction.description,
        )
        category = lookup.select_category(default_id=transaction.category_id)

        transaction = lookup.transactions.update_transaction(
            transaction.id,
            account_id=account.id,
            amount=new_amount,
            transaction_type=new_type,
            description=new_description,
            category_id=category.id,
        )
        click.secho(f"Successfully updated transaction {transaction.id}", fg="green")
    except DomainError as e:
        handle_domain_error(ctx, e)


@transaction_group.command("delete")
@lookup_options("transaction", searched_field="description")
@click.pass_context
def delete_transaction(ctx, entity_id: str | None, name: str | None):
    """Delete a transaction."""
    lookup = EntityLookup(get_db(ctx), ctx.obj["prompter"])

    try:
        transaction = lookup.transaction(transaction_id=entity_id, name=name)
        lookup.transactions.delete_transaction(transaction.id)
        click.secho(f"Successfully deleted transaction {transaction.id}", fg="green")
    except DomainError as e:
        handle_domain_error(ctx, e)


def register_commands(cli: click.Group) -> None:
    """Register transaction commands with main CLI."""
    cli.add_command(transaction_group, name="transaction")
