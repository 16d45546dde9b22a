"""Repository interfaces for the trip planner domain.

Repository interfaces are defined in the domain layer (dependency inversion).
Implementations live in the persistence layer.
"""

from trip.domain.repository.comment import CommentRepository
from trip.domain.repository.item import ItemRepository
from trip.domain.repository.presence import PresenceRepository
from trip.domain.repository.user import UserRepository
from trip.domain.repository.vote import VoteRepository

__all__ = [
    "CommentRepository",
    "ItemRepository",
    "PresenceRepository",
    "UserRepository",
    "VoteRepository",
]
