"""Optimistic effects.

Each function returns an ``Effect``: a function from a cached collection to
the collection as it should look once the server accepts the mutation.

The query cache re-applies pending effects whenever the confirmed value
changes, and a refetch can already contain the server's result of a
mutation whose response has not arrived yet. Effects therefore decide
their outcome against the collection they first see, which is the value at
the moment the mutation begins, and later applications reproduce that
outcome instead of toggling or appending again.
"""

from collections.abc import Callable
from datetime import datetime
from typing import Any, Mapping, Optional

from trip.client.ids import EntityId, is_local, new_local_id
from trip.client.models import CachedComment, CachedItem, CachedVote
from trip.domain.value import ItemType, VoteAction, VoteType
from trip.domain.voting import apply_toggle, find_user_vote

Collection = tuple[CachedItem, ...]
Effect = Callable[[Collection], Collection]

_UNRESOLVED = object()


def _replace_item(
    collection: Collection,
    item_id: EntityId,
    change: Callable[[CachedItem], CachedItem],
) -> Collection:
    return tuple(change(item) if item.id == item_id else item for item in collection)


def _find_item(collection: Collection, item_id: EntityId) -> Optional[CachedItem]:
    return next((item for item in collection if item.id == item_id), None)


def find_comment_owner(
    collection: Collection, comment_id: EntityId
) -> Optional[CachedItem]:
    """Find the item holding a comment by scanning every item's comments."""
    for item in collection:
        if any(c.id == comment_id for c in item.comments):
            return item
    return None


def vote_toggle(item_id: EntityId, username: str, vote_type: VoteType) -> Effect:
    """Toggle the user's vote on an item the way the server will.

    The toggle is resolved once, against the votes the item has when the
    effect is first applied. From then on the effect sets the user's vote
    to that result (``vote_type`` or no vote).
    """
    # One placeholder per mutation, so re-applying the effect is stable
    vote_id = new_local_id()
    created_at = datetime.now()
    target: Any = _UNRESOLVED

    def placeholder(item: CachedItem, direction: VoteType) -> CachedVote:
        return CachedVote(
            id=vote_id,
            username=username,
            vote_type=direction,
            item_type=item.item_type,
            item_id=item.id,
            created_at=created_at,
        )

    def set_vote(item: CachedItem) -> CachedItem:
        existing = find_user_vote(item.votes, username)
        if target is None:
            if existing is None:
                return item
            votes = tuple(v for v in item.votes if v is not existing)
        elif existing is None:
            votes = (*item.votes, placeholder(item, target))
        elif existing.vote_type == target:
            return item
        else:
            switched = existing.model_copy(update={"vote_type": target})
            votes = tuple(switched if v is existing else v for v in item.votes)
        return item.model_copy(update={"votes": votes})

    def effect(collection: Collection) -> Collection:
        nonlocal target
        if target is _UNRESOLVED:
            item = _find_item(collection, item_id)
            if item is None:
                return collection
            _, action = apply_toggle(
                item.votes, username, vote_type, lambda: placeholder(item, vote_type)
            )
            target = None if action == VoteAction.REMOVED else vote_type

        return _replace_item(collection, item_id, set_vote)

    return effect


def comment_add(
    item_type: ItemType, item_id: EntityId, username: str, content: str
) -> Effect:
    """Append a placeholder comment to an item.

    Skipped once the item holds a saved comment with the same author and
    content that was not there when the effect was first applied.
    """
    comment = CachedComment(
        id=new_local_id(),
        username=username,
        content=content,
        item_type=item_type,
        item_id=item_id,
        created_at=datetime.now(),
    )
    seen: Optional[set[EntityId]] = None

    def already_saved(item: CachedItem) -> bool:
        return any(
            c.id not in seen
            and not is_local(c.id)
            and c.username == username
            and c.content == content
            for c in item.comments
        )

    def effect(collection: Collection) -> Collection:
        nonlocal seen
        item = _find_item(collection, item_id)
        if item is None:
            return collection
        if seen is None:
            seen = {c.id for c in item.comments}
        elif already_saved(item):
            return collection

        return _replace_item(
            collection,
            item_id,
            lambda item: item.model_copy(update={"comments": (*item.comments, comment)}),
        )

    return effect


def comment_edit(comment_id: EntityId, content: str) -> Effect:
    """Replace a comment's content wherever it lives."""

    def effect(collection: Collection) -> Collection:
        owner = find_comment_owner(collection, comment_id)
        if owner is None:
            return collection

        comments = tuple(
            c.model_copy(update={"content": content}) if c.id == comment_id else c
            for c in owner.comments
        )
        return _replace_item(
            collection, owner.id, lambda item: item.model_copy(update={"comments": comments})
        )

    return effect


def comment_delete(comment_id: EntityId) -> Effect:
    """Remove a comment wherever it lives."""

    def effect(collection: Collection) -> Collection:
        owner = find_comment_owner(collection, comment_id)
        if owner is None:
            return collection

        comments = tuple(c for c in owner.comments if c.id != comment_id)
        return _replace_item(
            collection, owner.id, lambda item: item.model_copy(update={"comments": comments})
        )

    return effect


def item_add(item_type: ItemType, fields: Mapping[str, Any]) -> Effect:
    """Append a placeholder item with no votes or comments.

    Skipped once the collection holds a saved item with these field values
    that was not there when the effect was first applied.
    """
    item = CachedItem(id=new_local_id(), item_type=item_type, fields=dict(fields))
    seen: Optional[set[EntityId]] = None

    def already_saved(collection: Collection) -> bool:
        return any(
            other.id not in seen
            and not is_local(other.id)
            and all(other.get(name) == value for name, value in item.fields.items())
            for other in collection
        )

    def effect(collection: Collection) -> Collection:
        nonlocal seen
        if seen is None:
            seen = {other.id for other in collection}
        elif already_saved(collection):
            return collection
        return (*collection, item)

    return effect


def item_update(item_id: EntityId, fields: Mapping[str, Any]) -> Effect:
    """Shallow-merge new field values into an item."""
    changes = dict(fields)

    def effect(collection: Collection) -> Collection:
        return _replace_item(
            collection,
            item_id,
            lambda item: item.model_copy(update={"fields": {**item.fields, **changes}}),
        )

    return effect


def item_delete(item_id: EntityId) -> Effect:
    """Remove an item."""

    def effect(collection: Collection) -> Collection:
        return tuple(item for item in collection if item.id != item_id)

    return effect
