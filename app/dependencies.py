# =============================================================================
# app/dependencies.py - Shared Dependencies
# =============================================================================
# FastAPI dependency injection for shared resources.
# These are injected into route handlers using Depends().
#
# The store lives on app.state (set by create_app), so there is no
# module-level connection object.
# =============================================================================

from typing import Annotated

from fastapi import Depends, Request

from core.services.user_service import UserService
from lib.user_store import UserStore


def get_user_store(request: Request) -> UserStore:
    """Return the store handle owned by the running application."""
    return request.app.state.store


def get_user_service(store: Annotated[UserStore, Depends(get_user_store)]) -> UserService:
    """Build a UserService bound to the application's store."""
    return UserService(store)


# Type aliases for dependency injection
UserStoreDep = Annotated[UserStore, Depends(get_user_store)]
UserServiceDep = Annotated[UserService, Depends(get_user_service)]
