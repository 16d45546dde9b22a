"""Async client for the trip planner API.

Reads go through a per-collection query cache; writes are applied
optimistically and rolled back when the server rejects them.
"""

from trip.client.api import CurrentUser, TripApiClient
from trip.client.cache import QueryCache
from trip.client.error import (
    AuthenticationRequired,
    ClientError,
    ItemNotFound,
    PermissionDenied,
    RequestRejected,
    TransientError,
    ValidationRejected,
)
from trip.client.ids import EntityId, LocalId, PersistedId
from trip.client.models import CachedComment, CachedItem, CachedVote
from trip.client.mutations import MutationController

__all__ = [
    "AuthenticationRequired",
    "CachedComment",
    "CachedItem",
    "CachedVote",
    "ClientError",
    "CurrentUser",
    "EntityId",
    "ItemNotFound",
    "LocalId",
    "MutationController",
    "PermissionDenied",
    "PersistedId",
    "QueryCache",
    "RequestRejected",
    "TransientError",
    "TripApiClient",
    "ValidationRejected",
]
