"""Comment entity."""

from datetime import datetime

from pydantic import Field

from trip.domain.model.common import DomainModel
from trip.domain.value import CommentId, ItemId, ItemRef, ItemType


class Comment(DomainModel):
    """A flat comment on a trip item.

    Only the author (matched by username) may edit or delete it.
    """

    id: CommentId
    username: str
    content: str = Field(min_length=1, max_length=5000)
    item_type: ItemType
    item_id: ItemId
    created_at: datetime = Field(default_factory=datetime.now)

    @property
    def ref(self) -> ItemRef:
        """Item this comment is attached to."""
        return ItemRef(item_type=self.item_type, item_id=self.item_id)
