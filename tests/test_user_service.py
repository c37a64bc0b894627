# =============================================================================
# tests/test_user_service.py - User Service Tests
# =============================================================================
# Unit tests for UserService with the store mocked out.
# =============================================================================

from unittest.mock import MagicMock

import pytest

from app.exceptions import UserNotFoundError
from core.models.user import User, UserIn
from core.services.user_service import UserService
from lib.user_store import StoreError, UserStore


@pytest.fixture
def mock_store():
    """UserStore double with the real method signatures."""
    return MagicMock(spec=UserStore)


@pytest.fixture
def service(mock_store):
    return UserService(mock_store)


class TestUserService:
    """Tests for UserService."""

    def test_list_users_wraps_rows(self, service, mock_store):
        """Store rows become User models."""
        mock_store.list_users.return_value = [
            {"id": 1, "name": "Ada", "email": "ada@example.com", "city": "London"},
        ]

        users = service.list_users()

        assert users == [User(id=1, name="Ada", email="ada@example.com", city="London")]

    def test_get_user_not_found(self, service, mock_store):
        """A None row raises UserNotFoundError with a 404 status."""
        mock_store.fetch_user.return_value = None

        with pytest.raises(UserNotFoundError) as exc_info:
            service.get_user(7)

        assert exc_info.value.status_code == 404
        assert exc_info.value.user_id == 7
        assert "existing ID" in exc_info.value.message

    def test_create_user_returns_store_id(self, service, mock_store):
        """The created user carries the id from the store."""
        mock_store.insert_user.return_value = 5

        user = service.create_user(UserIn(name="Ada", email="ada@example.com", city="London"))

        mock_store.insert_user.assert_called_once_with("Ada", "ada@example.com", "London")
        assert user.id == 5

    def test_update_user_echoes_without_fetch(self, service, mock_store):
        """Update never reads the row back."""
        mock_store.update_user.return_value = 0
        data = UserIn(name="Ada", email="ada@example.com", city="London")

        user = service.update_user(3, data)

        mock_store.update_user.assert_called_once_with(3, "Ada", "ada@example.com", "London")
        mock_store.fetch_user.assert_not_called()
        assert user == User(id=3, name="Ada", email="ada@example.com", city="London")

    def test_delete_user_not_found(self, service, mock_store):
        """A False result from the store raises UserNotFoundError."""
        mock_store.delete_user.return_value = False

        with pytest.raises(UserNotFoundError) as exc_info:
            service.delete_user(9)

        assert "valid ID" in exc_info.value.message

    def test_store_errors_propagate(self, service, mock_store):
        """StoreError is not swallowed or converted to not-found."""
        mock_store.fetch_user.side_effect = StoreError("down", code="FETCH_USER_FAILED")

        with pytest.raises(StoreError):
            service.get_user(1)
