"""Unit tests for VoteService."""

from uuid import uuid4

import pytest

from trip.domain.error import NotFoundError
from trip.domain.repository import ItemRepository, VoteRepository
from trip.domain.service import VoteService
from trip.domain.value import ItemId, ItemRef, ItemType, VoteAction, VoteType
from trip.domain.voting import score
from tests.conftest import make_hotel
from tests.harness import create_env_fixture

# Unit test fixture - everything mocked, no database needed
unit_env = create_env_fixture()


class TestToggleVote:
    """Tests for toggle_vote method."""

    @pytest.mark.asyncio
    async def test_first_vote_is_created(self, unit_env):
        """A user's first vote on an item should be stored."""
        # Arrange
        vote_service = await unit_env.get(VoteService)
        vote_repo = await unit_env.get(VoteRepository)
        item_repo = await unit_env.get(ItemRepository)
        hotel = await item_repo.save(make_hotel())

        # Act
        action = await vote_service.toggle_vote("Taylor", hotel.ref, VoteType.UPVOTE)

        # Assert
        assert action == VoteAction.CREATED
        saved = await vote_repo.find_by_user_and_item("Taylor", hotel.ref)
        assert saved is not None
        assert saved.vote_type == VoteType.UPVOTE

    @pytest.mark.asyncio
    async def test_same_vote_twice_removes_it(self, unit_env):
        """Repeating a vote should toggle it off."""
        # Arrange
        vote_service = await unit_env.get(VoteService)
        vote_repo = await unit_env.get(VoteRepository)
        item_repo = await unit_env.get(ItemRepository)
        hotel = await item_repo.save(make_hotel())
        await vote_service.toggle_vote("Taylor", hotel.ref, VoteType.DOWNVOTE)

        # Act
        action = await vote_service.toggle_vote("Taylor", hotel.ref, VoteType.DOWNVOTE)

        # Assert
        assert action == VoteAction.REMOVED
        assert await vote_repo.find_by_item(hotel.ref) == []

    @pytest.mark.asyncio
    async def test_opposite_vote_switches_direction(self, unit_env):
        """Voting the other way should update the existing vote."""
        # Arrange
        vote_service = await unit_env.get(VoteService)
        vote_repo = await unit_env.get(VoteRepository)
        item_repo = await unit_env.get(ItemRepository)
        hotel = await item_repo.save(make_hotel())
        await vote_service.toggle_vote("Taylor", hotel.ref, VoteType.UPVOTE)

        # Act
        action = await vote_service.toggle_vote("Taylor", hotel.ref, VoteType.DOWNVOTE)

        # Assert
        assert action == VoteAction.UPDATED
        votes = await vote_repo.find_by_item(hotel.ref)
        assert len(votes) == 1
        assert votes[0].vote_type == VoteType.DOWNVOTE

    @pytest.mark.asyncio
    async def test_score_follows_votes_from_several_users(self, unit_env):
        """Score should equal upvotes minus downvotes across users."""
        # Arrange
        vote_service = await unit_env.get(VoteService)
        item_repo = await unit_env.get(ItemRepository)
        hotel = await item_repo.save(make_hotel())

        # Act
        await vote_service.toggle_vote("Taylor", hotel.ref, VoteType.UPVOTE)
        await vote_service.toggle_vote("Scarlett", hotel.ref, VoteType.UPVOTE)
        await vote_service.toggle_vote("Sam", hotel.ref, VoteType.DOWNVOTE)

        # Assert
        assert score(await vote_service.get_votes_for_item(hotel.ref)) == 1

    @pytest.mark.asyncio
    async def test_vote_on_missing_item_raises(self, unit_env):
        """Voting on an unknown item should raise NotFoundError."""
        # Arrange
        vote_service = await unit_env.get(VoteService)
        ref = ItemRef(item_type=ItemType.RESTAURANT, item_id=ItemId(uuid4()))

        # Act & Assert
        with pytest.raises(NotFoundError):
            await vote_service.toggle_vote("Taylor", ref, VoteType.UPVOTE)


class TestGetVotesForItems:
    """Tests for get_votes_for_items method."""

    @pytest.mark.asyncio
    async def test_groups_by_item(self, unit_env):
        """Votes should be grouped under their item IDs."""
        # Arrange
        vote_service = await unit_env.get(VoteService)
        item_repo = await unit_env.get(ItemRepository)
        first = await item_repo.save(make_hotel(name="First"))
        second = await item_repo.save(make_hotel(name="Second"))
        await vote_service.toggle_vote("Taylor", first.ref, VoteType.UPVOTE)
        await vote_service.toggle_vote("Scarlett", first.ref, VoteType.UPVOTE)

        # Act
        grouped = await vote_service.get_votes_for_items(
            ItemType.HOTEL, [first.id, second.id]
        )

        # Assert
        assert len(grouped[first.id]) == 2
        assert second.id not in grouped

    @pytest.mark.asyncio
    async def test_empty_ids(self, unit_env):
        """No IDs should return an empty mapping."""
        vote_service = await unit_env.get(VoteService)
        assert await vote_service.get_votes_for_items(ItemType.HOTEL, []) == {}
