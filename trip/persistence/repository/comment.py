"""PostgreSQL implementation of Comment repository."""

from typing import List, Optional, Sequence

from sqlalchemy import and_, delete, insert, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from trip.domain.model import Comment
from trip.domain.repository import CommentRepository
from trip.domain.value import CommentId, ItemId, ItemRef, ItemType
from trip.persistence.mappers import comment_to_dict, row_to_comment
from trip.persistence.tables import comments_table


class PostgresCommentRepository(CommentRepository):
    """PostgreSQL implementation of CommentRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def find_by_id(self, comment_id: CommentId) -> Optional[Comment]:
        """Find a comment by ID."""
        stmt = select(comments_table).where(comments_table.c.id == comment_id)
        result = await self.session.execute(stmt)
        row = result.fetchone()
        return row_to_comment(row._asdict()) if row else None

    async def find_by_item(self, ref: ItemRef) -> List[Comment]:
        """Find all comments on an item, oldest first."""
        stmt = (
            select(comments_table)
            .where(
                and_(
                    comments_table.c.item_type == ref.item_type.value,
                    comments_table.c.item_id == ref.item_id,
                )
            )
            .order_by(comments_table.c.created_at)
        )
        result = await self.session.execute(stmt)
        return [row_to_comment(row._asdict()) for row in result.fetchall()]

    async def find_by_items(
        self, item_type: ItemType, item_ids: Sequence[ItemId]
    ) -> List[Comment]:
        """Find comments on many items of one type, oldest first."""
        if not item_ids:
            return []

        stmt = (
            select(comments_table)
            .where(
                and_(
                    comments_table.c.item_type == item_type.value,
                    comments_table.c.item_id.in_(item_ids),
                )
            )
            .order_by(comments_table.c.created_at)
        )
        result = await self.session.execute(stmt)
        return [row_to_comment(row._asdict()) for row in result.fetchall()]

    async def save(self, comment: Comment) -> Comment:
        """Save a new comment."""
        stmt = insert(comments_table).values(**comment_to_dict(comment))
        await self.session.execute(stmt)
        await self.session.flush()
        return comment

    async def update_content(
        self, comment_id: CommentId, content: str
    ) -> Optional[Comment]:
        """Update the content of a comment."""
        stmt = (
            update(comments_table)
            .where(comments_table.c.id == comment_id)
            .values(content=content)
            .returning(comments_table)
        )

        result = await self.session.execute(stmt)
        row = result.fetchone()

        if row is None:
            return None

        await self.session.flush()
        return row_to_comment(row._asdict())

    async def delete(self, comment_id: CommentId) -> bool:
        """Delete a comment."""
        stmt = delete(comments_table).where(comments_table.c.id == comment_id)
        result = await self.session.execute(stmt)
        await self.session.flush()
        return result.rowcount > 0  # type: ignore[attr-defined]

    async def delete_by_item(self, ref: ItemRef) -> int:
        """Delete every comment on an item."""
        stmt = delete(comments_table).where(
            and_(
                comments_table.c.item_type == ref.item_type.value,
                comments_table.c.item_id == ref.item_id,
            )
        )
        result = await self.session.execute(stmt)
        await self.session.flush()
        return result.rowcount  # type: ignore[attr-defined]
