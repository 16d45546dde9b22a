"""Per-collection query cache with optimistic mutations.

Each collection keeps the last value the server confirmed (``base``) and an
ordered list of pending optimistic effects. The value readers see is always
the pending effects folded over the base, so a mutation that fails can be
dropped without disturbing any other mutation still in flight.
"""

import asyncio
import logging
from dataclasses import dataclass, field
from itertools import count
from typing import Optional

from trip.client.api import TripApiClient
from trip.client.optimistic import Collection, Effect
from trip.domain.value import ItemType

logger = logging.getLogger(__name__)

_tokens = count(1)


@dataclass(frozen=True)
class MutationToken:
    """Handle for one pending optimistic mutation."""

    id: int
    item_type: ItemType


@dataclass
class _Entry:
    base: Collection = ()
    loaded: bool = False
    pending: list[tuple[MutationToken, Effect]] = field(default_factory=list)
    value: Collection = ()
    refetch: Optional[asyncio.Task] = None

    def recompute(self) -> None:
        value = self.base
        for _, effect in self.pending:
            value = effect(value)
        self.value = value


class QueryCache:
    """Cache of the four item collections.

    Must be used from a single event loop.
    """

    def __init__(self, api: TripApiClient) -> None:
        self.api = api
        self._entries: dict[ItemType, _Entry] = {t: _Entry() for t in ItemType}

    def get(self, item_type: ItemType) -> Collection:
        """Current value, including pending optimistic effects."""
        return self._entries[item_type].value

    def is_loaded(self, item_type: ItemType) -> bool:
        """Whether the collection has been fetched at least once."""
        return self._entries[item_type].loaded

    def pending_count(self, item_type: ItemType) -> int:
        """Number of optimistic mutations not yet settled."""
        return len(self._entries[item_type].pending)

    def snapshot(self, item_type: ItemType) -> Collection:
        """Capture the current value. Collections are immutable tuples."""
        return self._entries[item_type].value

    async def fetch(self, item_type: ItemType, force: bool = False) -> Collection:
        """Load a collection, reusing an in-flight refetch when there is one.

        If the refetch is cancelled by a mutation starting, the current value
        is returned instead of propagating the cancellation.

        Raises:
            ClientError: If the server cannot be reached or rejects the read
        """
        entry = self._entries[item_type]
        running = entry.refetch is not None and not entry.refetch.done()
        if force or not running:
            if entry.loaded and not force:
                return entry.value
            self.invalidate(item_type)

        task = entry.refetch
        try:
            return await task
        except asyncio.CancelledError:
            current = asyncio.current_task()
            if current is not None and current.cancelling():
                raise
            return entry.value

    def invalidate(self, item_type: ItemType) -> asyncio.Task:
        """Start a refetch, replacing any refetch already running."""
        entry = self._entries[item_type]
        if entry.refetch is not None and not entry.refetch.done():
            entry.refetch.cancel()

        task = asyncio.create_task(
            self._refetch(item_type), name=f"refetch-{item_type.collection}"
        )
        task.add_done_callback(lambda t: self._refetch_done(item_type, t))
        entry.refetch = task
        return task

    async def cancel_refetch(self, item_type: ItemType) -> None:
        """Cancel the in-flight refetch and wait until it has stopped.

        After this returns, no read started earlier can overwrite the value.
        """
        task = self._entries[item_type].refetch
        if task is None or task.done():
            return
        task.cancel()
        await asyncio.wait([task])

    async def _refetch(self, item_type: ItemType) -> Collection:
        items = await self.api.list_items(item_type)
        entry = self._entries[item_type]
        entry.base = tuple(items)
        entry.loaded = True
        entry.recompute()
        logger.debug(
            f"Refetched {item_type.collection}: {len(items)} items, "
            f"{len(entry.pending)} pending"
        )
        return entry.value

    def _refetch_done(self, item_type: ItemType, task: asyncio.Task) -> None:
        if task.cancelled():
            return
        error = task.exception()
        if error is not None:
            # Readers keep the stale value; the next invalidate tries again
            logger.warning(f"Refetch of {item_type.collection} failed: {error}")

    # Optimistic mutations

    def begin(self, item_type: ItemType, effect: Effect) -> MutationToken:
        """Install an optimistic effect and return its token.

        Callers should ``await cancel_refetch(item_type)`` first so a refetch
        started before the mutation cannot land after it.

        The effect is first applied here, over the current value, which is
        where it decides its outcome.
        """
        entry = self._entries[item_type]
        token = MutationToken(next(_tokens), item_type)
        entry.pending.append((token, effect))
        entry.recompute()
        return token

    def commit(self, token: MutationToken) -> None:
        """Fold a confirmed effect into the base value.

        The value stays as displayed until the follow-up refetch replaces it
        with the server's version.
        """
        entry = self._entries[token.item_type]
        effect = self._remove(entry, token)
        if effect is None:
            return
        entry.base = effect(entry.base)
        entry.recompute()

    def rollback(self, token: MutationToken) -> None:
        """Drop a rejected effect.

        The value is rebuilt from the confirmed value and the remaining
        pending effects. With no other mutation pending and no refetch in
        between, that is exactly the value from before ``begin``.
        """
        entry = self._entries[token.item_type]
        if self._remove(entry, token) is None:
            return
        entry.recompute()
        logger.debug(f"Rolled back mutation {token.id} on {token.item_type.collection}")

    @staticmethod
    def _remove(entry: _Entry, token: MutationToken) -> Optional[Effect]:
        for index, (pending, effect) in enumerate(entry.pending):
            if pending.id == token.id:
                del entry.pending[index]
                return effect
        return None
