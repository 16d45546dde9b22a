"""Mappers for converting between database rows and domain models.

Since we're using Pydantic domain models (immutable), we use manual mapping
instead of SQLAlchemy's classical imperative mapping.
"""

from typing import Any, Dict
from uuid import UUID

from trip.domain.model import Comment, OnlineUser, User, Vote
from trip.domain.model.item import ITEM_MODELS, TripItemBase
from trip.domain.value import (
    CommentId,
    ItemId,
    ItemType,
    PresenceId,
    UserId,
    VoteId,
    VoteType,
)


def _uuid(value: Any) -> UUID:
    return UUID(value) if isinstance(value, str) else value


def row_to_item(item_type: ItemType, row: Dict[str, Any]) -> TripItemBase:
    """Convert database row to the trip item variant for ``item_type``.

    Args:
        item_type: Which table the row came from
        row: Database row as dict

    Returns:
        Trip item domain model
    """
    model = ITEM_MODELS[item_type]
    return model.model_validate({**row, "id": ItemId(_uuid(row["id"]))})


def item_to_dict(item: TripItemBase) -> Dict[str, Any]:
    """Convert trip item to database dict.

    The item type is implied by the table, so it is not stored.
    """
    return item.model_dump(exclude={"item_type"})


def row_to_user(row: Dict[str, Any]) -> User:
    """Convert database row to User domain model."""
    return User(
        id=UserId(_uuid(row["id"])),
        name=row["name"],
        pin_hash=row["pin_hash"],
        created_at=row["created_at"],
    )


def user_to_dict(user: User) -> Dict[str, Any]:
    """Convert User domain model to database dict."""
    return user.model_dump()


def row_to_vote(row: Dict[str, Any]) -> Vote:
    """Convert database row to Vote domain model.

    Args:
        row: Database row as dict

    Returns:
        Vote domain model
    """
    return Vote(
        id=VoteId(_uuid(row["id"])),
        username=row["username"],
        vote_type=VoteType(row["vote_type"]),
        item_type=ItemType(row["item_type"]),
        item_id=ItemId(_uuid(row["item_id"])),
        created_at=row["created_at"],
    )


def vote_to_dict(vote: Vote) -> Dict[str, Any]:
    """Convert Vote domain model to database dict."""
    data = vote.model_dump()
    data["vote_type"] = vote.vote_type.value
    data["item_type"] = vote.item_type.value
    return data


def row_to_comment(row: Dict[str, Any]) -> Comment:
    """Convert database row to Comment domain model."""
    return Comment(
        id=CommentId(_uuid(row["id"])),
        username=row["username"],
        content=row["content"],
        item_type=ItemType(row["item_type"]),
        item_id=ItemId(_uuid(row["item_id"])),
        created_at=row["created_at"],
    )


def comment_to_dict(comment: Comment) -> Dict[str, Any]:
    """Convert Comment domain model to database dict."""
    data = comment.model_dump()
    data["item_type"] = comment.item_type.value
    return data


def row_to_online_user(row: Dict[str, Any]) -> OnlineUser:
    """Convert database row to OnlineUser domain model."""
    return OnlineUser(
        id=PresenceId(_uuid(row["id"])),
        username=row["username"],
        session_id=row["session_id"],
        last_seen=row["last_seen"],
    )
