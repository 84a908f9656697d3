"""Tests for resolving the entity a command operates on."""

import pytest

from fintrack.cli.lookup import EntityLookup
from fintrack.domain.errors import NotFoundError, ValidationError


def test_id_wins_over_name(temp_db, sample_user, user_service, canned_prompter):
    """Test that an explicit id is used without searching or prompting."""
    user_service.create_user(name="Jane Doe")
    prompter = canned_prompter()
    lookup = EntityLookup(temp_db, prompter)

    assert lookup.user(user_id=sample_user.id, name="Jane") == sample_user
    assert prompter.calls == []


def test_unknown_id_is_not_found(temp_db, canned_prompter):
    lookup = EntityLookup(temp_db, canned_prompter())

    with pytest.raises(NotFoundError, match="Account 'missing' not found"):
        lookup.account(account_id="missing")


def test_unique_name_needs_no_prompt(temp_db, food_categories, canned_prompter):
    prompter = canned_prompter()
    lookup = EntityLookup(temp_db, prompter)

    assert lookup.category(name="Delivery") == food_categories[2]
    assert prompter.calls == []


def test_ambiguous_name_prompts_once(temp_db, food_categories, canned_prompter):
    prompter = canned_prompter("🍟 Fast Food")
    lookup = EntityLookup(temp_db, prompter)

    assert lookup.category(name="food") == food_categories[1]
    assert prompter.calls == [("select", "Select a category", None)]


def test_zero_matches_never_prompts(temp_db, food_categories, canned_prompter):
    prompter = canned_prompter()
    lookup = EntityLookup(temp_db, prompter)

    with pytest.raises(NotFoundError, match="No categories found with name 'Rent'"):
        lookup.category(name="Rent")
    assert prompter.calls == []


def test_unoffered_answer_is_rejected(temp_db, food_categories, canned_prompter):
    lookup = EntityLookup(temp_db, canned_prompter("Something else"))

    with pytest.raises(ValidationError, match="not one of the offered choices"):
        lookup.category(name="Food")


def test_category_without_options_asks_for_name(temp_db, food_categories, canned_prompter):
    prompter = canned_prompter("Pet")
    lookup = EntityLookup(temp_db, prompter)

    assert lookup.category() == food_categories[3]
    assert prompter.calls == [("text", "Name", None)]


def test_account_without_options_selects_from_all(temp_db, sample_account, canned_prompter):
    prompter = canned_prompter("Checking Account")
    lookup = EntityLookup(temp_db, prompter)

    assert lookup.account() == sample_account
    assert prompter.calls == [("select", "Select an account", None)]


def test_selection_defaults_to_current_value(temp_db, user_service, canned_prompter):
    john = user_service.create_user(name="John Doe")
    user_service.create_user(name="Jane Doe")
    prompter = canned_prompter(None)
    lookup = EntityLookup(temp_db, prompter)

    assert lookup.select_user(default_id=john.id) == john
    assert prompter.calls == [("select", "Select a user", "John Doe")]


def test_empty_selection_is_not_found(temp_db, canned_prompter):
    lookup = EntityLookup(temp_db, canned_prompter())

    with pytest.raises(NotFoundError, match="No transactions found. Create one first."):
        lookup.transaction()
