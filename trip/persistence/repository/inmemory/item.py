"""In-memory trip item repository for testing."""

from typing import Optional

from trip.domain.model.item import TripItemBase
from trip.domain.repository.item import ItemRepository
from trip.domain.value import ItemId, ItemRef, ItemType


class InMemoryItemRepository(ItemRepository):
    """In-memory implementation of ItemRepository for testing."""

    def __init__(self) -> None:
        self._items: dict[ItemType, dict[ItemId, TripItemBase]] = {
            item_type: {} for item_type in ItemType
        }

    async def find_all(self, item_type: ItemType) -> list[TripItemBase]:
        """Find every item of one type in insertion order (hotels by price)."""
        items = list(self._items[item_type].values())
        if item_type == ItemType.HOTEL:
            items.sort(key=lambda h: h.per_person)  # type: ignore[attr-defined]
        return items

    async def find_by_ref(self, ref: ItemRef) -> Optional[TripItemBase]:
        """Find an item by reference."""
        return self._items[ref.item_type].get(ref.item_id)

    async def save(self, item: TripItemBase) -> TripItemBase:
        """Save an item (create or update in place)."""
        self._items[item.ref.item_type][item.id] = item
        return item

    async def delete(self, ref: ItemRef) -> bool:
        """Delete an item."""
        return self._items[ref.item_type].pop(ref.item_id, None) is not None
