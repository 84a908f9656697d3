"""Tests for category service and commands."""

import pytest

from fintrack.cli.main import cli
from fintrack.domain.category import CategoryService
from fintrack.domain.errors import NotFoundError, ValidationError


def test_create_category(category_service):
    """Test creating a category."""
    category = category_service.create_category(name="Food & Dining", icon="🍽️")

    assert category.name == "Food & Dining"
    assert category.icon == "🍽️"
    assert category_service.get_category(category.id) == category


def test_create_category_requires_icon(category_service):
    """Test that the icon may not be blank."""
    with pytest.raises(ValidationError, match="Icon is required"):
        category_service.create_category(name="Food", icon="")


def test_search_categories(category_service, food_categories):
    """Test substring search over category names."""
    assert len(category_service.search_categories("Food")) == 4
    assert len(category_service.search_categories("food")) == 4
    assert [c.name for c in category_service.search_categories("Fast")] == ["Fast Food"]
    assert category_service.search_categories("NonExistent") == []


def test_update_category(category_service, sample_category):
    """Test changing name and icon."""
    updated = category_service.update_category(sample_category.id, name="Restaurants", icon="🍴")

    assert (updated.name, updated.icon) == ("Restaurants", "🍴")
    assert updated.created_at == sample_category.created_at


def test_delete_category_not_found(category_service):
    """Test deleting a category that does not exist."""
    with pytest.raises(NotFoundError, match="Category 'missing' not found"):
        category_service.delete_category("missing")


def test_format_label(sample_category):
    """Test the label offered in selections."""
    assert CategoryService.format_label(sample_category) == "🛒 Groceries"


def test_cli_category_create(cli_runner, temp_db):
    """Test creating a category from options."""
    result = cli_runner.invoke(
        cli,
        ["--db-path", temp_db.database_path, "category", "create", "-n", "Groceries", "-c", "🛒"],
    )

    assert result.exit_code == 0
    assert "Successfully created category with id" in result.output
    categories = temp_db.list_categories()
    assert [(c.name, c.icon) for c in categories] == [("Groceries", "🛒")]


def test_cli_category_create_prompts(cli_runner, temp_db, canned_prompter):
    """Test that name and icon are asked for in order."""
    prompter = canned_prompter("Transportation", "🚗")

    result = cli_runner.invoke(
        cli,
        ["--db-path", temp_db.database_path, "category", "create"],
        obj={"prompter": prompter},
    )

    assert result.exit_code == 0
    assert [call[1] for call in prompter.calls] == ["Name", "Icon"]
    assert temp_db.list_categories()[0].name == "Transportation"


def test_cli_category_list(cli_runner, temp_db, food_categories):
    """Test listing categories."""
    result = cli_runner.invoke(cli, ["--db-path", temp_db.database_path, "category", "list"])

    assert result.exit_code == 0
    assert "Categories" in result.output
    for category in food_categories:
        assert category.name in result.output


def test_cli_category_list_empty(cli_runner, temp_db):
    """Test listing categories when there are none."""
    result = cli_runner.invoke(cli, ["--db-path", temp_db.database_path, "category", "list"])

    assert result.exit_code == 0
    assert "No categories found." in result.output


def test_cli_category_get_ambiguous(cli_runner, temp_db, food_categories, canned_prompter):
    """Test that a name hitting several categories offers a selection."""
    prompter = canned_prompter("🐕 Pet Food")

    result = cli_runner.invoke(
        cli,
        ["--db-path", temp_db.database_path, "category", "get", "--name", "Food"],
        obj={"prompter": prompter},
    )

    assert result.exit_code == 0
    assert prompter.last_options == ["🍎 Food", "🍟 Fast Food", "🚚 Food Delivery", "🐕 Pet Food"]
    assert food_categories[3].id in result.output


def test_cli_category_get_unique(cli_runner, temp_db, food_categories):
    """Test that a name hitting one category needs no selection."""
    result = cli_runner.invoke(
        cli, ["--db-path", temp_db.database_path, "category", "get", "--name", "Pet"]
    )

    assert result.exit_code == 0
    assert food_categories[3].id in result.output


def test_cli_category_get_no_match(cli_runner, temp_db, food_categories):
    """Test that a name matching no category exits with the not-found status."""
    result = cli_runner.invoke(
        cli, ["--db-path", temp_db.database_path, "category", "get", "--name", "NonExistent"]
    )

    assert result.exit_code == 1
    assert "No categories found with name 'NonExistent'" in result.output


def test_cli_category_get_prompts_for_name(cli_runner, temp_db, sample_category):
    """Test that get without options asks for a name on the terminal."""
    result = cli_runner.invoke(
        cli, ["--db-path", temp_db.database_path, "category", "get"], input="groc\n"
    )

    assert result.exit_code == 0
    assert sample_category.id in result.output


def test_cli_category_update(cli_runner, temp_db, sample_category, canned_prompter):
    """Test updating name and icon with the current values as defaults."""
    prompter = canned_prompter("Restaurants", None)

    result = cli_runner.invoke(
        cli,
        ["--db-path", temp_db.database_path, "category", "update", "--id", sample_category.id],
        obj={"prompter": prompter},
    )

    assert result.exit_code == 0
    assert "Successfully updated category 🛒 Restaurants" in result.output
    assert prompter.calls == [
        ("text", "New Name", "Groceries"),
        ("text", "New Icon", "🛒"),
    ]


def test_cli_category_delete(cli_runner, temp_db, sample_transaction, sample_category):
    """Test that deleting a category removes its transactions."""
    result = cli_runner.invoke(
        cli,
        ["--db-path", temp_db.database_path, "category", "delete", "--id", sample_category.id],
    )

    assert result.exit_code == 0
    assert "Successfully deleted category 🛒 Groceries" in result.output
    assert temp_db.list_categories() == []
    assert temp_db.list_transactions() == []
    assert len(temp_db.list_accounts()) == 1
