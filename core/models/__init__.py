# =============================================================================
# core/models/ - Pydantic Data Models
# =============================================================================
# This package contains Pydantic schemas for data validation:
# - user.py: User request/response schemas
#
# These models define the "contract" between API and clients.
# =============================================================================

from .user import User, UserIn

__all__ = [
    "User",
    "UserIn",
]
