"""Trip item repository interface."""

from abc import ABC, abstractmethod
from typing import List, Optional

from trip.domain.model.item import TripItemBase
from trip.domain.value import ItemRef, ItemType


class ItemRepository(ABC):
    """Repository for all four trip item variants.

    The item type selects the underlying collection; callers address single
    items through an ItemRef.
    """

    @abstractmethod
    async def find_all(self, item_type: ItemType) -> List[TripItemBase]:
        """Find every item of one type.

        Hotels come back cheapest per person first; other types in creation
        order.

        Args:
            item_type: Which collection to read

        Returns:
            List of items
        """
        pass

    @abstractmethod
    async def find_by_ref(self, ref: ItemRef) -> Optional[TripItemBase]:
        """Find an item by reference.

        Args:
            ref: Item type and ID

        Returns:
            The item if found, None otherwise
        """
        pass

    @abstractmethod
    async def save(self, item: TripItemBase) -> TripItemBase:
        """Save an item (create or update).

        Args:
            item: The item to save

        Returns:
            The saved item
        """
        pass

    @abstractmethod
    async def delete(self, ref: ItemRef) -> bool:
        """Delete an item.

        Args:
            ref: Item type and ID

        Returns:
            True if an item was deleted, False if it did not exist
        """
        pass
