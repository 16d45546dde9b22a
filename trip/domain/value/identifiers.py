"""Strongly typed identifiers for trip planner entities.

Using NewType keeps item, vote and comment IDs from being mixed up.
"""

from typing import NewType
from uuid import UUID

UserId = NewType("UserId", UUID)
ItemId = NewType("ItemId", UUID)
VoteId = NewType("VoteId", UUID)
CommentId = NewType("CommentId", UUID)
PresenceId = NewType("PresenceId", UUID)
