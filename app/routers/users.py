# =============================================================================
# app/routers/users.py - User CRUD Endpoints
# =============================================================================
# One handler per operation. Each handler makes one service call; the
# service raises UserNotFoundError (404) and lets StoreError (500) through.
#
# Handlers are plain `def` so FastAPI runs them in its threadpool, one
# task per request, sharing the engine's connection pool.
# =============================================================================

from typing import Annotated

from fastapi import APIRouter, Path

from app.dependencies import UserServiceDep
from core.models.user import User, UserIn

router = APIRouter()

UserId = Annotated[int, Path(description="User ID")]


# =============================================================================
# Endpoints
# =============================================================================

@router.get("", response_model=list[User])
def list_users(service: UserServiceDep):
    """
    List all users.

    Returns an empty array when there are no users.
    """
    return service.list_users()


@router.get(
    "/{user_id}",
    response_model=User,
    responses={404: {"description": "User not found"}},
)
def get_user(user_id: UserId, service: UserServiceDep):
    """Get a user by ID."""
    return service.get_user(user_id)


@router.post("", response_model=User)
def create_user(user: UserIn, service: UserServiceDep):
    """
    Create a user.

    Any id in the body is ignored. Returns the submitted fields together
    with the id assigned by the database.
    """
    return service.create_user(user)


@router.put("/{user_id}", response_model=User)
def update_user(user_id: UserId, user: UserIn, service: UserServiceDep):
    """
    Update a user.

    Overwrites name, email and city. The user is not looked up first, so
    an unknown id still returns 200 with the submitted fields echoed.
    """
    return service.update_user(user_id, user)


@router.delete(
    "/{user_id}",
    response_model=str,
    responses={404: {"description": "User not found"}},
)
def delete_user(user_id: UserId, service: UserServiceDep):
    """
    Delete a user.

    Returns 404 if the user doesn't exist.
    """
    service.delete_user(user_id)
    return "User deleted."
