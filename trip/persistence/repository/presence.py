"""PostgreSQL implementation of Presence repository."""

from datetime import datetime
from typing import List
from uuid import uuid4

from sqlalchemy import select
from sqlalchemy.dialects.postgresql import insert
from sqlalchemy.ext.asyncio import AsyncSession

from trip.domain.model import OnlineUser
from trip.domain.repository import PresenceRepository
from trip.persistence.mappers import row_to_online_user
from trip.persistence.tables import online_users_table


class PostgresPresenceRepository(PresenceRepository):
    """PostgreSQL implementation of PresenceRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def upsert(
        self, session_id: str, username: str, seen_at: datetime
    ) -> OnlineUser:
        """Insert or refresh the heartbeat row for a session."""
        stmt = (
            insert(online_users_table)
            .values(
                id=uuid4(),
                session_id=session_id,
                username=username,
                last_seen=seen_at,
            )
            .on_conflict_do_update(
                index_elements=[online_users_table.c.session_id],
                set_={"username": username, "last_seen": seen_at},
            )
            .returning(online_users_table)
        )
        result = await self.session.execute(stmt)
        row = result.fetchone()
        await self.session.flush()
        return row_to_online_user(row._asdict())  # type: ignore[union-attr]

    async def find_seen_since(self, since: datetime) -> List[OnlineUser]:
        """Find sessions seen at or after ``since``, most recent first."""
        stmt = (
            select(online_users_table)
            .where(online_users_table.c.last_seen >= since)
            .order_by(online_users_table.c.last_seen.desc())
        )
        result = await self.session.execute(stmt)
        return [row_to_online_user(row._asdict()) for row in result.fetchall()]
