"""Vote aggregation and the toggle protocol.

Shared by the server (which persists the outcome) and the client cache
(which applies the same outcome optimistically before the server answers).
"""

from collections.abc import Callable, Iterable, Sequence
from typing import Optional, TypeVar

from pydantic import BaseModel

from trip.domain.value import VoteAction, VoteType

V = TypeVar("V", bound=BaseModel)


def score(votes: Iterable[BaseModel]) -> int:
    """Net score: upvotes minus downvotes."""
    total = 0
    for vote in votes:
        if vote.vote_type == VoteType.UPVOTE:  # type: ignore[attr-defined]
            total += 1
        elif vote.vote_type == VoteType.DOWNVOTE:  # type: ignore[attr-defined]
            total -= 1
    return total


def find_user_vote(votes: Iterable[V], username: str) -> Optional[V]:
    """Return the vote cast by ``username``, if any."""
    for vote in votes:
        if vote.username == username:  # type: ignore[attr-defined]
            return vote
    return None


def resolve_toggle(existing: Optional[VoteType], requested: VoteType) -> VoteAction:
    """Decide what a vote request does given the user's current vote.

    - no vote: create one
    - same direction: remove it (toggle off)
    - other direction: switch it
    """
    if existing is None:
        return VoteAction.CREATED
    if existing == requested:
        return VoteAction.REMOVED
    return VoteAction.UPDATED


def apply_toggle(
    votes: Sequence[V],
    username: str,
    requested: VoteType,
    new_vote: Callable[[], V],
) -> tuple[tuple[V, ...], VoteAction]:
    """Apply the toggle protocol to an in-memory vote collection.

    Args:
        votes: Current votes on one item
        username: Acting user
        requested: Direction the user clicked
        new_vote: Builds the vote to append when one is created

    Returns:
        The new vote collection and the action taken
    """
    existing = find_user_vote(votes, username)
    action = resolve_toggle(
        existing.vote_type if existing is not None else None,  # type: ignore[attr-defined]
        requested,
    )

    if action == VoteAction.CREATED:
        return (*votes, new_vote()), action

    if action == VoteAction.REMOVED:
        return tuple(v for v in votes if v is not existing), action

    switched = existing.model_copy(update={"vote_type": requested})  # type: ignore[union-attr]
    return tuple(switched if v is existing else v for v in votes), action
