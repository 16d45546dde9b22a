"""Unit tests for ItemService."""

from uuid import uuid4

import pytest

from trip.domain.error import NotFoundError, ValidationError
from trip.domain.model.item import Hotel, Restaurant
from trip.domain.repository import CommentRepository, ItemRepository, VoteRepository
from trip.domain.service import ItemService
from trip.domain.value import ItemId, ItemRef, ItemType, VoteType
from tests.conftest import make_comment, make_hotel, make_vote
from tests.harness import create_env_fixture

# Unit test fixture - everything mocked, no database needed
unit_env = create_env_fixture()


class TestCreateItem:
    """Tests for create_item method."""

    @pytest.mark.asyncio
    async def test_create_hotel(self, unit_env):
        """Creating a hotel should store it with generated ID and timestamps."""
        # Arrange
        item_service = await unit_env.get(ItemService)
        item_repo = await unit_env.get(ItemRepository)

        # Act
        hotel = await item_service.create_item(
            ItemType.HOTEL, {"name": "Hotel Clermont", "per_person": 300}
        )

        # Assert
        assert isinstance(hotel, Hotel)
        assert hotel.id is not None
        assert hotel.per_person == 300
        assert hotel.created_at is not None
        assert await item_repo.find_by_ref(hotel.ref) == hotel

    @pytest.mark.asyncio
    async def test_create_accepts_camel_case_keys(self, unit_env):
        """Wire-format keys should map onto model fields."""
        # Arrange
        item_service = await unit_env.get(ItemService)

        # Act
        restaurant = await item_service.create_item(
            ItemType.RESTAURANT,
            {"name": "Staplehouse", "cuisineType": "New American", "priceRange": "$$$"},
        )

        # Assert
        assert isinstance(restaurant, Restaurant)
        assert restaurant.cuisine_type == "New American"
        assert restaurant.price_range == "$$$"

    @pytest.mark.asyncio
    async def test_create_missing_required_field_raises(self, unit_env):
        """A restaurant without a name should be rejected."""
        # Arrange
        item_service = await unit_env.get(ItemService)

        # Act & Assert
        with pytest.raises(ValidationError, match="Missing required fields: name"):
            await item_service.create_item(ItemType.RESTAURANT, {"cuisine_type": "Thai"})

    @pytest.mark.asyncio
    async def test_create_ignores_unknown_and_server_fields(self, unit_env):
        """Clients cannot set IDs, timestamps or unknown fields."""
        # Arrange
        item_service = await unit_env.get(ItemService)
        forced_id = str(uuid4())

        # Act
        flight = await item_service.create_item(
            ItemType.FLIGHT,
            {"traveler_name": "Taylor", "id": forced_id, "seat": "12A"},
        )

        # Assert
        assert str(flight.id) != forced_id
        assert flight.traveler_name == "Taylor"


class TestUpdateItem:
    """Tests for update_item method."""

    @pytest.mark.asyncio
    async def test_update_replaces_given_fields_only(self, unit_env):
        """Fields not supplied should keep their stored values."""
        # Arrange
        item_service = await unit_env.get(ItemService)
        item_repo = await unit_env.get(ItemRepository)
        hotel = await item_repo.save(make_hotel(neighborhood="Midtown"))

        # Act
        updated = await item_service.update_item(hotel.ref, {"per_person": 275})

        # Assert
        assert updated.per_person == 275
        assert updated.neighborhood == "Midtown"
        assert updated.name == hotel.name
        assert updated.created_at == hotel.created_at
        assert updated.updated_at >= hotel.updated_at

    @pytest.mark.asyncio
    async def test_update_missing_item_raises(self, unit_env):
        """Updating an unknown item should raise NotFoundError."""
        # Arrange
        item_service = await unit_env.get(ItemService)
        ref = ItemRef(item_type=ItemType.HOTEL, item_id=ItemId(uuid4()))

        # Act & Assert
        with pytest.raises(NotFoundError):
            await item_service.update_item(ref, {"name": "Nowhere"})

    @pytest.mark.asyncio
    async def test_update_with_invalid_value_raises(self, unit_env):
        """Blanking a required field should be rejected."""
        # Arrange
        item_service = await unit_env.get(ItemService)
        item_repo = await unit_env.get(ItemRepository)
        hotel = await item_repo.save(make_hotel())

        # Act & Assert
        with pytest.raises(ValidationError):
            await item_service.update_item(hotel.ref, {"name": ""})


class TestDeleteItem:
    """Tests for delete_item method."""

    @pytest.mark.asyncio
    async def test_delete_removes_votes_and_comments(self, unit_env):
        """Deleting an item should cascade to its votes and comments."""
        # Arrange
        item_service = await unit_env.get(ItemService)
        item_repo = await unit_env.get(ItemRepository)
        vote_repo = await unit_env.get(VoteRepository)
        comment_repo = await unit_env.get(CommentRepository)

        hotel = await item_repo.save(make_hotel())
        other = await item_repo.save(make_hotel(name="Other"))
        await vote_repo.save(make_vote(hotel.ref, "Taylor", VoteType.UPVOTE))
        await vote_repo.save(make_vote(other.ref, "Taylor", VoteType.UPVOTE))
        await comment_repo.save(make_comment(hotel.ref, "Taylor", "Great pool"))

        # Act
        await item_service.delete_item(hotel.ref)

        # Assert
        assert await item_repo.find_by_ref(hotel.ref) is None
        assert await vote_repo.find_by_item(hotel.ref) == []
        assert await comment_repo.find_by_item(hotel.ref) == []
        assert len(await vote_repo.find_by_item(other.ref)) == 1

    @pytest.mark.asyncio
    async def test_delete_missing_item_raises(self, unit_env):
        """Deleting an unknown item should raise NotFoundError."""
        # Arrange
        item_service = await unit_env.get(ItemService)
        ref = ItemRef(item_type=ItemType.ACTIVITY, item_id=ItemId(uuid4()))

        # Act & Assert
        with pytest.raises(NotFoundError):
            await item_service.delete_item(ref)


class TestListItems:
    """Tests for list_items method."""

    @pytest.mark.asyncio
    async def test_hotels_ordered_by_per_person_price(self, unit_env):
        """Hotels should list cheapest per-person first."""
        # Arrange
        item_service = await unit_env.get(ItemService)
        item_repo = await unit_env.get(ItemRepository)
        await item_repo.save(make_hotel(name="Pricey", per_person=500))
        await item_repo.save(make_hotel(name="Cheap", per_person=150))

        # Act
        hotels = await item_service.list_items(ItemType.HOTEL)

        # Assert
        assert [h.name for h in hotels] == ["Cheap", "Pricey"]

    @pytest.mark.asyncio
    async def test_list_is_per_type(self, unit_env):
        """Listing one type should not return items of another."""
        # Arrange
        item_service = await unit_env.get(ItemService)
        item_repo = await unit_env.get(ItemRepository)
        await item_repo.save(make_hotel())

        # Act
        restaurants = await item_service.list_items(ItemType.RESTAURANT)

        # Assert
        assert restaurants == []
