"""
Pydantic schemas for the users API.

These schemas define the wire contract. Only structure and types are
checked; there is no content validation beyond that.
No business logic belongs here.
"""

from pydantic import BaseModel, StrictStr

# Identifiers are signed 64-bit integers in storage.
USER_ID_MIN = -(2**63)
USER_ID_MAX = 2**63 - 1


class CreateUserRequest(BaseModel):
    """Request body for POST /users."""

    username: StrictStr
    password: StrictStr


class UserResponse(BaseModel):
    """Response body for GET /users/{id}."""

    id: int
    username: str
    password: str


class ErrorResponse(BaseModel):
    """Body of every error response produced by this service."""

    message: str
