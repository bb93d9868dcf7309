"""
Use case: Retrieve a user by id.

Input: GetUserQuery (user_id)
Output: User
Side effects: None (read-only query).
Failure cases: NotFoundError, InternalError.
"""

import logging

from app.application.users.dtos import GetUserQuery
from app.domain.users.entities import User
from app.domain.users.ports import UserReadRepository

logger = logging.getLogger(__name__)


class GetUserUseCase:
    """Read-only query that fetches one user from the read repository."""

    def __init__(self, user_repo: UserReadRepository) -> None:
        self._user_repo = user_repo

    async def execute(self, query: GetUserQuery) -> User:
        """Run the get-user use case."""
        logger.debug("Retrieving user: id=%d", query.user_id)
        return await self._user_repo.find_by_id(query.user_id)
