"""Route tests for the item collections."""

from uuid import uuid4

import pytest

from tests.harness import create_client_fixture

client = create_client_fixture()


def _create(client, collection, body):
    response = client.post(f"/api/{collection}", json=body)
    assert response.status_code == 200, response.text
    return response.json()


class TestCreateItem:
    """Tests for POST /api/<collection>."""

    def test_create_restaurant(self, client):
        """Creating returns the item in camelCase with empty children."""
        # Act
        data = _create(
            client,
            "restaurants",
            {"name": "Gunshow", "cuisineType": "American", "hasCocktails": True},
        )

        # Assert
        assert data["id"]
        assert data["itemType"] == "restaurant"
        assert data["cuisineType"] == "American"
        assert data["hasCocktails"] is True
        assert data["votes"] == []
        assert data["comments"] == []

    def test_missing_required_field_is_400(self, client):
        """A flight without a traveler name should be rejected."""
        response = client.post("/api/flights", json={"airline": "Delta"})

        assert response.status_code == 400
        assert "traveler" in response.json()["detail"].lower()

    def test_non_object_body_is_400(self, client):
        """Malformed bodies should be reported as 400, not 422."""
        response = client.post("/api/hotels", json=["not", "an", "object"])

        assert response.status_code == 400


class TestListItems:
    """Tests for GET /api/<collection>."""

    def test_list_includes_created_items(self, client):
        """Items created earlier should be listed with votes and comments."""
        # Arrange
        created = _create(client, "activities", {"name": "High Museum", "price": "$18"})

        # Act
        response = client.get("/api/activities")

        # Assert
        assert response.status_code == 200
        items = response.json()
        assert [i["id"] for i in items] == [created["id"]]
        assert items[0]["votes"] == []

    @pytest.mark.parametrize(
        "collection", ["flights", "hotels", "activities", "restaurants"]
    )
    def test_empty_collections(self, client, collection):
        """Every collection should list as an empty array initially."""
        response = client.get(f"/api/{collection}")

        assert response.status_code == 200
        assert response.json() == []


class TestUpdateItem:
    """Tests for PUT /api/<collection>."""

    def test_update_changes_only_given_fields(self, client):
        """Fields missing from the body should keep their values."""
        # Arrange
        hotel = _create(
            client, "hotels", {"name": "Ponce Hotel", "perPerson": 200, "neighborhood": "Midtown"}
        )

        # Act
        response = client.put("/api/hotels", json={"id": hotel["id"], "perPerson": 180})

        # Assert
        assert response.status_code == 200
        data = response.json()
        assert data["perPerson"] == 180
        assert data["neighborhood"] == "Midtown"

    def test_update_without_id_is_400(self, client):
        """The body must name the item."""
        response = client.put("/api/hotels", json={"name": "Nameless"})

        assert response.status_code == 400
        assert response.json()["detail"] == "ID required"

    def test_update_unknown_item_is_404(self, client):
        """Updating an unknown item should be 404."""
        response = client.put("/api/hotels", json={"id": str(uuid4()), "name": "Ghost"})

        assert response.status_code == 404


class TestDeleteItem:
    """Tests for DELETE /api/<collection>."""

    def test_delete_removes_item(self, client):
        """A deleted item should no longer be listed."""
        # Arrange
        flight = _create(client, "flights", {"travelerName": "Taylor"})

        # Act
        response = client.delete("/api/flights", params={"id": flight["id"]})

        # Assert
        assert response.status_code == 200
        assert response.json() == {"success": True}
        assert client.get("/api/flights").json() == []

    def test_delete_without_id_is_400(self, client):
        """The id query parameter is required."""
        response = client.delete("/api/flights")

        assert response.status_code == 400

    def test_delete_unknown_item_is_404(self, client):
        """Deleting an unknown item should be 404."""
        response = client.delete("/api/flights", params={"id": str(uuid4())})

        assert response.status_code == 404
