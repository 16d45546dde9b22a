"""PostgreSQL repository implementations."""

from trip.persistence.repository.comment import PostgresCommentRepository
from trip.persistence.repository.item import PostgresItemRepository
from trip.persistence.repository.presence import PostgresPresenceRepository
from trip.persistence.repository.user import PostgresUserRepository
from trip.persistence.repository.vote import PostgresVoteRepository

__all__ = [
    "PostgresCommentRepository",
    "PostgresItemRepository",
    "PostgresPresenceRepository",
    "PostgresUserRepository",
    "PostgresVoteRepository",
]
