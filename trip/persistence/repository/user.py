"""PostgreSQL implementation of User repository."""

from typing import Optional

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from trip.domain.model import User
from trip.domain.repository import UserRepository
from trip.domain.value import UserId
from trip.persistence.mappers import row_to_user, user_to_dict
from trip.persistence.tables import users_table


class PostgresUserRepository(UserRepository):
    """PostgreSQL implementation of UserRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def find_by_id(self, user_id: UserId) -> Optional[User]:
        """Find a user by ID."""
        stmt = select(users_table).where(users_table.c.id == user_id)
        result = await self.session.execute(stmt)
        row = result.fetchone()
        return row_to_user(row._asdict()) if row else None

    async def find_by_name(self, name: str) -> Optional[User]:
        """Find a user by name."""
        stmt = select(users_table).where(users_table.c.name == name)
        result = await self.session.execute(stmt)
        row = result.fetchone()
        return row_to_user(row._asdict()) if row else None

    async def save(self, user: User) -> User:
        """Save a user (create or update)."""
        user_dict = user_to_dict(user)
        existing = await self.find_by_id(user.id)

        if existing:
            stmt = (
                users_table.update()
                .where(users_table.c.id == user.id)
                .values(**user_dict)
            )
        else:
            stmt = users_table.insert().values(**user_dict)

        await self.session.execute(stmt)
        await self.session.flush()
        return user
