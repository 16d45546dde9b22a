"""PostgreSQL implementation of Vote repository."""

from typing import List, Optional, Sequence

from sqlalchemy import and_, delete, insert, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from trip.domain.model import Vote
from trip.domain.repository import VoteRepository
from trip.domain.value import ItemId, ItemRef, ItemType, VoteId, VoteType
from trip.persistence.mappers import row_to_vote, vote_to_dict
from trip.persistence.tables import votes_table


class PostgresVoteRepository(VoteRepository):
    """PostgreSQL implementation of VoteRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    def _item_clause(self, ref: ItemRef):
        return and_(
            votes_table.c.item_type == ref.item_type.value,
            votes_table.c.item_id == ref.item_id,
        )

    async def find_by_id(self, vote_id: VoteId) -> Optional[Vote]:
        """Find a vote by ID."""
        stmt = select(votes_table).where(votes_table.c.id == vote_id)
        result = await self.session.execute(stmt)
        row = result.fetchone()
        return row_to_vote(row._asdict()) if row else None

    async def find_by_user_and_item(
        self, username: str, ref: ItemRef
    ) -> Optional[Vote]:
        """Find a user's vote on a specific item."""
        stmt = select(votes_table).where(
            and_(votes_table.c.username == username, self._item_clause(ref))
        )
        result = await self.session.execute(stmt)
        row = result.fetchone()
        return row_to_vote(row._asdict()) if row else None

    async def find_by_item(self, ref: ItemRef) -> List[Vote]:
        """Find all votes on one item."""
        stmt = (
            select(votes_table)
            .where(self._item_clause(ref))
            .order_by(votes_table.c.created_at)
        )
        result = await self.session.execute(stmt)
        return [row_to_vote(row._asdict()) for row in result.fetchall()]

    async def find_by_items(
        self, item_type: ItemType, item_ids: Sequence[ItemId]
    ) -> List[Vote]:
        """Find votes on many items of one type (batch query)."""
        if not item_ids:
            return []

        stmt = (
            select(votes_table)
            .where(
                and_(
                    votes_table.c.item_type == item_type.value,
                    votes_table.c.item_id.in_(item_ids),
                )
            )
            .order_by(votes_table.c.created_at)
        )
        result = await self.session.execute(stmt)
        return [row_to_vote(row._asdict()) for row in result.fetchall()]

    async def save(self, vote: Vote) -> Vote:
        """Save a vote (create)."""
        stmt = insert(votes_table).values(**vote_to_dict(vote))
        await self.session.execute(stmt)
        await self.session.flush()
        return vote

    async def update_vote_type(
        self, vote_id: VoteId, vote_type: VoteType
    ) -> Optional[Vote]:
        """Switch a vote's direction."""
        stmt = (
            update(votes_table)
            .where(votes_table.c.id == vote_id)
            .values(vote_type=vote_type.value)
            .returning(votes_table)
        )
        result = await self.session.execute(stmt)
        row = result.fetchone()
        if row is None:
            return None

        await self.session.flush()
        return row_to_vote(row._asdict())

    async def delete(self, vote_id: VoteId) -> bool:
        """Delete a vote."""
        stmt = delete(votes_table).where(votes_table.c.id == vote_id)
        result = await self.session.execute(stmt)
        await self.session.flush()
        return result.rowcount > 0  # type: ignore[attr-defined]

    async def delete_by_item(self, ref: ItemRef) -> int:
        """Delete every vote on an item."""
        stmt = delete(votes_table).where(self._item_clause(ref))
        result = await self.session.execute(stmt)
        await self.session.flush()
        return result.rowcount  # type: ignore[attr-defined]
