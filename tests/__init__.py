# =============================================================================
# tests/ - Test Suite
# =============================================================================
# This package contains all tests for the Users API:
# - test_models.py: Unit tests for Pydantic model validation
# - test_user_store.py: Store adapter tests against in-memory SQLite
# - test_user_service.py: Service tests with a mocked store
# - test_users_api.py: HTTP tests for the user endpoints
# - test_health.py: HTTP tests for health and root endpoints
# - test_config.py: Settings parsing tests
#
# Run tests with: poetry run pytest
# =============================================================================
