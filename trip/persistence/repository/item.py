"""PostgreSQL implementation of the trip item repository."""

from typing import List, Optional

from sqlalchemy import delete, insert, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from trip.domain.model.item import TripItemBase
from trip.domain.repository import ItemRepository
from trip.domain.value import ItemRef, ItemType
from trip.persistence.mappers import item_to_dict, row_to_item
from trip.persistence.tables import ITEM_TABLES


class PostgresItemRepository(ItemRepository):
    """PostgreSQL implementation of ItemRepository.

    Each item type lives in its own table; ``ITEM_TABLES`` picks it.
    """

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def find_all(self, item_type: ItemType) -> List[TripItemBase]:
        """Find every item of one type."""
        table = ITEM_TABLES[item_type]
        stmt = select(table)
        if item_type == ItemType.HOTEL:
            stmt = stmt.order_by(table.c.per_person.asc(), table.c.created_at)
        else:
            stmt = stmt.order_by(table.c.created_at)

        result = await self.session.execute(stmt)
        return [row_to_item(item_type, row._asdict()) for row in result.fetchall()]

    async def find_by_ref(self, ref: ItemRef) -> Optional[TripItemBase]:
        """Find an item by reference."""
        table = ITEM_TABLES[ref.item_type]
        stmt = select(table).where(table.c.id == ref.item_id)
        result = await self.session.execute(stmt)
        row = result.fetchone()
        return row_to_item(ref.item_type, row._asdict()) if row else None

    async def save(self, item: TripItemBase) -> TripItemBase:
        """Save an item (create or update)."""
        ref = item.ref
        table = ITEM_TABLES[ref.item_type]
        item_dict = item_to_dict(item)

        existing = await self.find_by_ref(ref)
        if existing:
            stmt = update(table).where(table.c.id == item.id).values(**item_dict)
        else:
            stmt = insert(table).values(**item_dict)

        await self.session.execute(stmt)
        await self.session.flush()
        return item

    async def delete(self, ref: ItemRef) -> bool:
        """Delete an item."""
        table = ITEM_TABLES[ref.item_type]
        stmt = delete(table).where(table.c.id == ref.item_id)
        result = await self.session.execute(stmt)
        await self.session.flush()
        return result.rowcount > 0  # type: ignore[attr-defined]
