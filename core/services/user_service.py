# =============================================================================
# core/services/user_service.py - User Business Logic
# =============================================================================
# Handles user CRUD operations.
# Separates HTTP concerns from database access: routes call the service,
# the service calls the store and raises API exceptions for missing users.
# =============================================================================

import logging

from lib.user_store import UserStore
from core.models.user import User, UserIn
from app.exceptions import UserNotFoundError

logger = logging.getLogger(__name__)


class UserService:
    """
    Service for user management operations.

    Wraps one UserStore handle. StoreError from the store propagates
    unchanged and is mapped to HTTP 500 by the API layer.
    """

    def __init__(self, store: UserStore):
        self.store = store

    def list_users(self) -> list[User]:
        """Return every user (empty list when the table is empty)."""
        return [User(**row) for row in self.store.list_users()]

    def get_user(self, user_id: int) -> User:
        """
        Get a user by ID.

        Raises:
            UserNotFoundError: If no user has this id
        """
        row = self.store.fetch_user(user_id)

        if row is None:
            raise UserNotFoundError(
                user_id,
                message="User not found. Please ensure you have entered an existing ID.",
            )

        return User(**row)

    def create_user(self, data: UserIn) -> User:
        """
        Create a new user.

        Args:
            data: Submitted fields (any id in the body was already dropped)

        Returns:
            The submitted fields plus the id assigned by the store
        """
        user_id = self.store.insert_user(data.name, data.email, data.city)
        logger.info(f"Created user: {user_id}")

        return User(id=user_id, **data.model_dump())

    def update_user(self, user_id: int, data: UserIn) -> User:
        """
        Overwrite a user's fields.

        The id is not checked first; updating a missing user still returns
        the submitted representation.

        Args:
            user_id: Id from the request path
            data: New field values

        Returns:
            The submitted fields with the path id (not re-fetched)
        """
        matched = self.store.update_user(user_id, data.name, data.email, data.city)

        if matched == 0:
            logger.info(f"Update matched no user: {user_id}")
        else:
            logger.info(f"Updated user: {user_id}")

        return User(id=user_id, **data.model_dump())

    def delete_user(self, user_id: int) -> None:
        """
        Delete a user.

        Raises:
            UserNotFoundError: If no user has this id
        """
        if not self.store.delete_user(user_id):
            raise UserNotFoundError(
                user_id,
                message="User not found. Please ensure you have entered a valid ID.",
            )

        logger.info(f"Deleted user: {user_id}")
