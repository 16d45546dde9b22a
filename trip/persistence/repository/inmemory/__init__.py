"""In-memory repository implementations for testing."""

from .comment import InMemoryCommentRepository
from .item import InMemoryItemRepository
from .presence import InMemoryPresenceRepository
from .user import InMemoryUserRepository
from .vote import InMemoryVoteRepository

__all__ = [
    "InMemoryCommentRepository",
    "InMemoryItemRepository",
    "InMemoryPresenceRepository",
    "InMemoryUserRepository",
    "InMemoryVoteRepository",
]
