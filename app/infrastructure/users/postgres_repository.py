"""
Adapter: User repository backed by PostgreSQL.

Implements the UserWriteRepository and UserReadRepository ports.
Every call borrows a connection from the engine pool and runs in its
own transaction. Written against SQLAlchemy Core, so any async
dialect with RETURNING support works (tests use aiosqlite).
"""

import logging

from sqlalchemy import insert, select
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncEngine

from app.domain.users.entities import User
from app.domain.users.errors import InternalError, NotFoundError
from app.domain.users.ports import UserReadRepository, UserWriteRepository
from app.infrastructure.users.schema import users_table

logger = logging.getLogger(__name__)


class PostgresUserRepository(UserWriteRepository, UserReadRepository):
    """Stores users in the ``users`` table.

    Uniqueness of ``username`` is enforced by the table's UNIQUE
    constraint. All storage exceptions are reported as InternalError.
    """

    def __init__(self, engine: AsyncEngine) -> None:
        self._engine = engine

    async def save(self, username: str, password: str) -> User:
        """Insert a new user and return the stored row.

        Args:
            username: Login name to insert.
            password: Password to insert.

        Returns:
            The created User with the id assigned by the database.

        Raises:
            InternalError: On a duplicate username or any database error.
        """
        stmt = (
            insert(users_table)
            .values(username=username, password=password)
            .returning(users_table.c.id, users_table.c.username, users_table.c.password)
        )

        try:
            async with self._engine.begin() as conn:
                result = await conn.execute(stmt)
                row = result.one()
        except IntegrityError as exc:
            logger.warning("User insert rejected by constraint: username=%s", username)
            raise InternalError("username already exists") from exc
        except SQLAlchemyError as exc:
            logger.error("User insert failed: %s", type(exc).__name__)
            raise InternalError("failed to save user") from exc

        return User(id=row.id, username=row.username, password=row.password)

    async def find_by_id(self, user_id: int) -> User:
        """Return the user with the given id.

        Raises:
            NotFoundError: If no row matches.
            InternalError: On any database error.
        """
        stmt = select(
            users_table.c.id, users_table.c.username, users_table.c.password
        ).where(users_table.c.id == user_id)

        try:
            async with self._engine.connect() as conn:
                result = await conn.execute(stmt)
                row = result.one_or_none()
        except SQLAlchemyError as exc:
            logger.error("User lookup failed: %s", type(exc).__name__)
            raise InternalError("failed to load user") from exc

        if row is None:
            raise NotFoundError("User", user_id)

        return User(id=row.id, username=row.username, password=row.password)
