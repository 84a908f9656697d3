"""Category domain service."""

from dataclasses import replace

from fintrack.database.base import Database
from fintrack.domain.entities import Category, CategoryRequest
from fintrack.domain.errors import NotFoundError, category_not_found
from fintrack.domain.validation import require_text


class CategoryService:
    """Service for managing categories."""

    def __init__(self, db: Database):
        """Initialize category service.

        Args:
            db: Database instance
        """
        self.db = db

    def create_category(self, name: str, icon: str) -> Category:
        """Create a category.

        Args:
            name: Category name
            icon: Short display glyph, usually an emoji

        Returns:
            The created category

        Raises:
            ValidationError: If name or icon is blank
        """
        request = CategoryRequest(name=require_text(name, "Name"), icon=require_text(icon, "Icon"))
        return self.db.create_category(request)

    def get_category(self, category_id: str) -> Category:
        """Get category by ID.

        Raises:
            NotFoundError: If no category has this ID
        """
        category = self.db.get_category(category_id)
        if category is None:
            raise NotFoundError(category_not_found(category_id))
        return category

    def list_categories(self) -> list[Category]:
        """List all categories."""
        return self.db.list_categories()

    def search_categories(self, name: str) -> list[Category]:
        """List categories whose name contains ``name``."""
        return self.db.search_categories(name or "")

    def update_category(self, category_id: str, name: str, icon: str) -> Category:
        """Replace name and icon of a category.

        Raises:
            NotFoundError: If no category has this ID
            ValidationError: If name or icon is blank
        """
        category = self.get_category(category_id)
        updated = replace(category, name=require_text(name, "Name"), icon=require_text(icon, "Icon"))
        self.db.update_category(category_id, updated)
        return self.get_category(category_id)

    def delete_category(self, category_id: str) -> Category:
        """Delete a category together with the transactions filed under it.

        Raises:
            NotFoundError: If no category has this ID
        """
        category = self.get_category(category_id)
        self.db.delete_category(category_id)
        return category

    @staticmethod
    def format_label(category: Category) -> str:
        """Return the "icon name" label used when offering a choice."""
        return f"{category.icon} {category.name}"
