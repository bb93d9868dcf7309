"""
Adapter: In-memory user repository.

Implements the UserWriteRepository and UserReadRepository ports
without any external storage. Data lives for the life of the process.
"""

import asyncio
from itertools import count

from app.domain.users.entities import User
from app.domain.users.errors import InternalError, NotFoundError
from app.domain.users.ports import UserReadRepository, UserWriteRepository


class InMemoryUserRepository(UserWriteRepository, UserReadRepository):
    """Process-local user storage.

    Ids start at 1 and increase monotonically. Writes are serialized
    by an asyncio lock so concurrent requests cannot claim the same
    username.
    """

    def __init__(self) -> None:
        self._users: dict[int, User] = {}
        self._ids_by_username: dict[str, int] = {}
        self._next_id = count(1)
        self._lock = asyncio.Lock()

    async def save(self, username: str, password: str) -> User:
        async with self._lock:
            if username in self._ids_by_username:
                raise InternalError("username already exists")
            user = User(id=next(self._next_id), username=username, password=password)
            self._users[user.id] = user
            self._ids_by_username[username] = user.id
        return user

    async def find_by_id(self, user_id: int) -> User:
        try:
            return self._users[user_id]
        except KeyError:
            raise NotFoundError("User", user_id) from None
