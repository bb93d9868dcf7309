"""
Use case: Create a new user.

Input: CreateUserCommand (username, password)
Output: User
Side effects: One new user persisted on success.
Failure cases: InternalError (duplicate username, storage failure).
"""

import logging

from app.application.users.dtos import CreateUserCommand
from app.domain.users.entities import User
from app.domain.users.ports import UserWriteRepository

logger = logging.getLogger(__name__)


class CreateUserUseCase:
    """Persists a new user through the write repository.

    Uniqueness is left to the repository. Errors propagate unchanged.
    """

    def __init__(self, user_repo: UserWriteRepository) -> None:
        self._user_repo = user_repo

    async def execute(self, command: CreateUserCommand) -> User:
        """Run the create-user use case.

        Args:
            command: The username and password to store.

        Returns:
            The created user, including its assigned id.
        """
        logger.info("Creating user: username=%s", command.username)

        user = await self._user_repo.save(command.username, command.password)

        logger.info("Created user: id=%d", user.id)
        return user
