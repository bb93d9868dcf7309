"""
Port interfaces (ABCs) for the users bounded context.

The write side and the read side are separate capabilities so a
deployment can back them with different adapters.
Infrastructure adapters implement these interfaces.
The domain layer never depends on concrete implementations.
"""

from abc import ABC, abstractmethod

from app.domain.users.entities import User


class UserWriteRepository(ABC):
    """Port for persisting new users."""

    @abstractmethod
    async def save(self, username: str, password: str) -> User:
        """Persist a new user and return it with its assigned id.

        Args:
            username: Login name. Must not already exist in storage.
            password: Password as submitted.

        Returns:
            The stored User.

        Raises:
            InternalError: If the username is taken or storage fails.
        """
        raise NotImplementedError


class UserReadRepository(ABC):
    """Port for fetching users by identifier."""

    @abstractmethod
    async def find_by_id(self, user_id: int) -> User:
        """Return the user with the given id.

        Raises:
            NotFoundError: If no user has this id.
            InternalError: On any other storage failure.
        """
        raise NotImplementedError
