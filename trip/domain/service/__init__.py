"""Domain services."""

from .auth_service import AuthService
from .base import Service
from .comment_service import CommentService
from .item_service import ItemService
from .presence_service import PresenceService
from .session_service import SessionService
from .vote_service import VoteService

__all__ = [
    "AuthService",
    "CommentService",
    "ItemService",
    "PresenceService",
    "Service",
    "SessionService",
    "VoteService",
]
