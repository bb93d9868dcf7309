"""
Data Transfer Objects for the users application layer.

DTOs carry data between the interface and application layers.
They are plain dataclasses with no behavior.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class CreateUserCommand:
    """Input DTO for creating a user.

    Attributes:
        username: Requested login name.
        password: Password as submitted by the client.
    """

    username: str
    password: str


@dataclass(frozen=True)
class GetUserQuery:
    """Input DTO for fetching a user by id."""

    user_id: int
