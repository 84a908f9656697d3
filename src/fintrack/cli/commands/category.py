"""Category management commands."""

import click
from fintrack.cli.context import get_db
from fintrack.cli.error_handling import handle_domain_error
from fintrack.cli.lookup import EntityLookup
from fintrack.cli.options import lookup_options
from fintrack.cli.responses import category_response
from fintrack.cli.table import print_table
from fintrack.domain.category import CategoryService
from fintrack.domain.errors import DomainError


@click.group()
def category_group():
    """Manage categories."""
    pass


@category_group.command("create")
@click.option("--name", "-n", help="The name of the category")
@click.option("--icon", "-c", help="The icon of the category (emoji)")
@click.pass_context
def create_category(ctx, name: str | None, icon: str | None):
    """Create a new category.

    Examples:
        fintrack category create --name "Groceries" --icon "🛒"
    """
    prompter = ctx.obj["prompter"]
    service = CategoryService(get_db(ctx))

    try:
        if name is None:
            name = prompter.text("Name", help="Enter the name of the category")
        if icon is None:
            icon = prompter.text("Icon", help="Enter the icon of the category (emoji)")
        category = service.create_category(name=name, icon=icon)
        click.secho(f"Successfully created category with id {category.id}", fg="green")
    except DomainError as e:
        handle_domain_error(ctx, e)


@category_group.command("list")
@click.pass_context
def list_categories(ctx):
    """List all categories."""
    service = CategoryService(get_db(ctx))

    try:
        categories = service.list_categories()
    except DomainError as e:
        handle_domain_error(ctx, e)

    print_table([category_response(cat) for cat in categories], "Categories")


@category_group.command("get")
@lookup_options("category")
@click.pass_context
def get_category(ctx, entity_id: str | None, name: str | None):
    """Show a category."""
    lookup = EntityLookup(get_db(ctx), ctx.obj["prompter"])

    try:
        category = lookup.category(category_id=entity_id, name=name)
    except DomainError as e:
        handle_domain_error(ctx, e)

    print_table([category_response(category)], "Category")


@category_group.command("update")
@lookup_options("category")
@click.pass_context
def update_category(ctx, entity_id: str | None, name: str | None):
    """Change the name and icon of a category."""
    prompter = ctx.obj["prompter"]
    lookup = EntityLookup(get_db(ctx), prompter)

    try:
        category = lookup.category(category_id=entity_id, name=name)
        new_name = prompter.text(
            "New Name", help="Enter the new name of the category", default=category.name
        )
        new_icon = prompter.text(
            "New Icon", help="Enter the new icon of the category (emoji)", default=category.icon
        )
        category = lookup.categories.update_category(category.id, name=new_name, icon=new_icon)
        click.secho(f"Successfully updated category {category.icon} {category.name}", fg="green")
    except DomainError as e:
        handle_domain_error(ctx, e)


@category_group.command("delete")
@lookup_options("category")
@click.pass_context
def delete_category(ctx, entity_id: str | None, name: str | None):
    """Delete a category and every transaction filed under it."""
    lookup = EntityLookup(get_db(ctx), ctx.obj["prompter"])

    try:
        category = lookup.category(category_id=entity_id, name=name)
        lookup.categories.delete_category(category.id)
        click.secho(f"Successfully deleted category {category.icon} {category.name}", fg="green")
    except DomainError as e:
        handle_domain_error(ctx, e)


def register_commands(cli):
    """Register category commands with main CLI."""
    cli.add_command(category_group, name="category")
