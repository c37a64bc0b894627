# =============================================================================
# lib/ - Standalone Utility Modules
# =============================================================================
# This package contains reusable utilities:
# - user_store.py: SQLAlchemy adapter for the users table
# - utils.py: Shared utilities (base error class)
#
# These modules are self-contained and can be tested in isolation.
# =============================================================================

from lib.user_store import StoreError, UserStore, users_table
from lib.utils import ApplicationError

__all__ = [
    # Store
    "StoreError",
    "UserStore",
    "users_table",
    # Utils
    "ApplicationError",
]
