"""Test configuration and fixtures."""

from datetime import datetime
from typing import Any
from uuid import uuid4

import logfire
import pytest

from trip.domain.model.comment import Comment
from trip.domain.model.item import Activity, Hotel, Restaurant
from trip.domain.model.vote import Vote
from trip.domain.value import CommentId, ItemId, ItemRef, VoteId, VoteType


@pytest.fixture(scope="session", autouse=True)
def quiet_logfire():
    """Keep telemetry local and off the console during tests."""
    logfire.configure(send_to_logfire=False, console=False)


def make_hotel(**overrides: Any) -> Hotel:
    """Helper to build a hotel with sensible defaults."""
    now = datetime.now()
    values: dict[str, Any] = {
        "id": ItemId(uuid4()),
        "name": "Hotel Clermont",
        "total_price": 900.0,
        "per_person": 450.0,
        "neighborhood": "Old Fourth Ward",
        "created_at": now,
        "updated_at": now,
    }
    values.update(overrides)
    return Hotel(**values)


def make_restaurant(**overrides: Any) -> Restaurant:
    """Helper to build a restaurant with sensible defaults."""
    values: dict[str, Any] = {
        "id": ItemId(uuid4()),
        "name": "Ticonderoga Club",
        "neighborhood": "Inman Park",
        "cuisine_type": "American",
        "price_range": "$$",
    }
    values.update(overrides)
    return Restaurant(**values)


def make_activity(**overrides: Any) -> Activity:
    """Helper to build an activity with sensible defaults."""
    values: dict[str, Any] = {
        "id": ItemId(uuid4()),
        "name": "Beltline walk",
        "neighborhood": "Old Fourth Ward",
        "price": "Free",
    }
    values.update(overrides)
    return Activity(**values)


def make_vote(ref: ItemRef, username: str, vote_type: VoteType) -> Vote:
    """Helper to build a vote on an item."""
    return Vote(
        id=VoteId(uuid4()),
        username=username,
        vote_type=vote_type,
        item_type=ref.item_type,
        item_id=ref.item_id,
        created_at=datetime.now(),
    )


def make_comment(ref: ItemRef, username: str, content: str) -> Comment:
    """Helper to build a comment on an item."""
    return Comment(
        id=CommentId(uuid4()),
        username=username,
        content=content,
        item_type=ref.item_type,
        item_id=ref.item_id,
        created_at=datetime.now(),
    )
