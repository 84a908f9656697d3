"""User domain service."""

from dataclasses import replace

from fintrack.database.base import Database
from fintrack.domain.entities import User, UserRequest
from fintrack.domain.errors import NotFoundError, user_not_found
from fintrack.domain.validation import require_text


class UserService:
    """Service for managing users (account holders)."""

    def __init__(self, db: Database):
        """Initialize user service.

        Args:
            db: Database instance
        """
        self.db = db

    def create_user(self, name: str) -> User:
        """Create a new user.

        Args:
            name: Display name

        Returns:
            The created user

        Raises:
            ValidationError: If name is blank
        """
        request = UserRequest(name=require_text(name, "Name"))
        return self.db.create_user(request)

    def get_user(self, user_id: str) -> User:
        """Get user by ID.

        Raises:
            NotFoundError: If no user has this ID
        """
        user = self.db.get_user(user_id)
        if user is None:
            raise NotFoundError(user_not_found(user_id))
        return user

    def list_users(self) -> list[User]:
        """List all users."""
        return self.db.list_users()

    def search_users(self, name: str) -> list[User]:
        """List users whose name contains ``name``. Blank matches everyone."""
        return self.db.search_users(name or "")

    def update_user(self, user_id: str, name: str) -> User:
        """Rename a user.

        Raises:
            NotFoundError: If no user has this ID
            ValidationError: If name is blank
        """
        user = self.get_user(user_id)
        updated = replace(user, name=require_text(name, "Name"))
        self.db.update_user(user_id, updated)
        return self.get_user(user_id)

    def delete_user(self, user_id: str) -> User:
        """Delete a user together with their accounts and transactions.

        Returns:
            The user as it was before deletion

        Raises:
            NotFoundError: If no user has this ID
        """
        user = self.get_user(user_id)
        self.db.delete_user(user_id)
        return user
