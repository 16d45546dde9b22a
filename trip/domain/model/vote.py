"""Vote entity.

Each user has at most one vote per item, either up or down.
"""

from datetime import datetime

from pydantic import Field

from trip.domain.model.common import DomainModel
from trip.domain.value import ItemId, ItemRef, ItemType, VoteId, VoteType


class Vote(DomainModel):
    """Vote entity.

    Business rules:
    - One vote per (username, item), kept by the toggle protocol and a
      unique constraint in the database
    - Voting the same direction twice removes the vote
    """

    id: VoteId
    username: str
    vote_type: VoteType
    item_type: ItemType
    item_id: ItemId
    created_at: datetime = Field(default_factory=datetime.now)

    @property
    def ref(self) -> ItemRef:
        """Item this vote is attached to."""
        return ItemRef(item_type=self.item_type, item_id=self.item_id)
