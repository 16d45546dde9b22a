"""Unit tests for item use cases."""

from uuid import uuid4

import pytest

from trip.application.usecase.item import (
    CreateItemRequest,
    CreateItemUseCase,
    DeleteItemRequest,
    DeleteItemUseCase,
    ListItemsRequest,
    ListItemsUseCase,
    UpdateItemRequest,
    UpdateItemUseCase,
)
from trip.domain.error import NotFoundError
from trip.domain.repository import CommentRepository, ItemRepository, VoteRepository
from trip.domain.value import ItemType, VoteType
from tests.conftest import make_comment, make_restaurant, make_vote
from tests.harness import create_env_fixture

# Unit test fixture
unit_env = create_env_fixture()


class TestListItemsUseCase:
    """Tests for ListItemsUseCase."""

    @pytest.mark.asyncio
    async def test_items_carry_their_votes_and_comments(self, unit_env):
        """Each listed item should embed only its own votes and comments."""
        # Arrange
        use_case = await unit_env.get(ListItemsUseCase)
        item_repo = await unit_env.get(ItemRepository)
        vote_repo = await unit_env.get(VoteRepository)
        comment_repo = await unit_env.get(CommentRepository)

        liked = await item_repo.save(make_restaurant(name="Liked"))
        quiet = await item_repo.save(make_restaurant(name="Quiet"))
        await vote_repo.save(make_vote(liked.ref, "Taylor", VoteType.UPVOTE))
        await comment_repo.save(make_comment(liked.ref, "Scarlett", "Yes please"))

        # Act
        response = await use_case.execute(
            ListItemsRequest(item_type=ItemType.RESTAURANT)
        )

        # Assert
        by_name = {item.name: item for item in response.items}
        assert len(by_name["Liked"].votes) == 1
        assert by_name["Liked"].comments[0].content == "Yes please"
        assert by_name["Quiet"].votes == []
        assert by_name["Quiet"].comments == []

    @pytest.mark.asyncio
    async def test_serializes_camel_case(self, unit_env):
        """Listed items should serialize with camelCase keys."""
        # Arrange
        use_case = await unit_env.get(ListItemsUseCase)
        item_repo = await unit_env.get(ItemRepository)
        await item_repo.save(make_restaurant(cuisine_type="Thai"))

        # Act
        response = await use_case.execute(
            ListItemsRequest(item_type=ItemType.RESTAURANT)
        )
        data = response.items[0].model_dump(by_alias=True)

        # Assert
        assert data["cuisineType"] == "Thai"
        assert data["itemType"] == "restaurant"
        assert "createdAt" in data


class TestCreateAndUpdateItem:
    """Tests for CreateItemUseCase and UpdateItemUseCase."""

    @pytest.mark.asyncio
    async def test_created_item_has_empty_children(self, unit_env):
        """A new item should come back with no votes or comments."""
        # Arrange
        use_case = await unit_env.get(CreateItemUseCase)

        # Act
        response = await use_case.execute(
            CreateItemRequest(
                item_type=ItemType.ACTIVITY, fields={"name": "Aquarium", "price": "$45"}
            )
        )

        # Assert
        assert response.item.name == "Aquarium"
        assert response.item.votes == []
        assert response.item.comments == []

    @pytest.mark.asyncio
    async def test_update_keeps_votes(self, unit_env):
        """Updating an item should return it with its existing votes."""
        # Arrange
        use_case = await unit_env.get(UpdateItemUseCase)
        item_repo = await unit_env.get(ItemRepository)
        vote_repo = await unit_env.get(VoteRepository)
        restaurant = await item_repo.save(make_restaurant())
        await vote_repo.save(make_vote(restaurant.ref, "Taylor", VoteType.DOWNVOTE))

        # Act
        response = await use_case.execute(
            UpdateItemRequest(
                item_type=ItemType.RESTAURANT,
                item_id=str(restaurant.id),
                fields={"priceRange": "$$$$"},
            )
        )

        # Assert
        assert response.item.price_range == "$$$$"
        assert len(response.item.votes) == 1

    @pytest.mark.asyncio
    async def test_update_with_malformed_id_is_not_found(self, unit_env):
        """A non-UUID item ID should be reported as not found."""
        use_case = await unit_env.get(UpdateItemUseCase)

        with pytest.raises(NotFoundError):
            await use_case.execute(
                UpdateItemRequest(
                    item_type=ItemType.RESTAURANT, item_id="nope", fields={}
                )
            )


class TestDeleteItemUseCase:
    """Tests for DeleteItemUseCase."""

    @pytest.mark.asyncio
    async def test_delete_unknown_item(self, unit_env):
        """Deleting an unknown item should raise NotFoundError."""
        use_case = await unit_env.get(DeleteItemUseCase)

        with pytest.raises(NotFoundError):
            await use_case.execute(
                DeleteItemRequest(item_type=ItemType.HOTEL, item_id=str(uuid4()))
            )
