"""
Table definitions for user storage.

Schema creation here is a local-development convenience,
not a migration system.
"""

from sqlalchemy import BigInteger, Column, Integer, MetaData, Table, Text
from sqlalchemy.ext.asyncio import AsyncEngine

metadata = MetaData()

# SQLite only autoincrements INTEGER PRIMARY KEY columns.
_ID_TYPE = BigInteger().with_variant(Integer, "sqlite")

users_table = Table(
    "users",
    metadata,
    Column("id", _ID_TYPE, primary_key=True, autoincrement=True),
    Column("username", Text, nullable=False, unique=True),
    Column("password", Text, nullable=False),
)


async def create_schema(engine: AsyncEngine) -> None:
    """Create the users table if it does not exist yet."""
    async with engine.begin() as conn:
        await conn.run_sync(metadata.create_all)
