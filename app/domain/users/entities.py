"""
Domain entities for the users bounded context.

Entities contain no framework imports and no IO operations.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class User:
    """A registered user.

    Attributes:
        id: Identifier assigned by storage on creation. Never changes.
        username: Login name, unique across all users.
        password: Password exactly as submitted. No hashing is applied.
    """

    id: int
    username: str
    password: str
