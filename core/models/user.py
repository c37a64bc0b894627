# =============================================================================
# core/models/user.py - User Schemas
# =============================================================================
# These models define the API contract for user operations:
# - UserIn: Request body for creating or updating a user
# - User: Output when returning a user to clients
#
# Text fields default to an empty string, so a body that omits a field
# stores an empty value for it. Non-string values are rejected.
# =============================================================================

from pydantic import BaseModel, ConfigDict, Field


class UserIn(BaseModel):
    """
    Schema for the body of POST /users and PUT /users/{id}.

    Any "id" key in the body is ignored (the store assigns ids on create,
    the path supplies it on update). Unknown keys are ignored as well.

    Example:
        {
            "name": "Ada Lovelace",
            "email": "ada@example.com",
            "city": "London"
        }
    """

    name: str = Field(
        default="",
        description="Display name of the user"
    )

    email: str = Field(
        default="",
        description="Email address (not validated)"
    )

    city: str = Field(
        default="",
        description="City the user lives in"
    )

    model_config = ConfigDict(
        extra="ignore",
        json_schema_extra={
            "examples": [
                {"name": "Ada Lovelace", "email": "ada@example.com", "city": "London"},
            ]
        },
    )


class User(UserIn):
    """
    Schema for returning a user to clients.

    Returned by:
    - GET /users (as a list)
    - GET /users/{id}
    - POST /users (with the newly assigned id)
    - PUT /users/{id} (echo of the submitted fields)
    """

    # Primary key assigned by the store
    id: int = Field(
        ...,
        description="Unique user identifier"
    )

    model_config = ConfigDict(
        # Rows come back from the store as dict-like mappings
        from_attributes=True,
        json_schema_extra={
            "example": {
                "id": 1,
                "name": "Ada Lovelace",
                "email": "ada@example.com",
                "city": "London",
            }
        },
    )
