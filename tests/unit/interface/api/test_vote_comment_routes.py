"""Route tests for votes and comments."""

from uuid import uuid4

from tests.harness import create_client_fixture

client = create_client_fixture()


def _hotel(client):
    response = client.post("/api/hotels", json={"name": "Hotel Granada"})
    assert response.status_code == 200, response.text
    return response.json()


def _vote(client, item, username, vote_type):
    return client.post(
        "/api/votes",
        json={
            "username": username,
            "voteType": vote_type,
            "itemType": "hotel",
            "itemId": item["id"],
        },
    )


def _score(client, item_id):
    (item,) = [i for i in client.get("/api/hotels").json() if i["id"] == item_id]
    return sum(1 if v["voteType"] == "upvote" else -1 for v in item["votes"])


class TestVotes:
    """Tests for POST /api/votes."""

    def test_vote_sequence_actions_and_scores(self, client):
        """Up, up, down, down should create, remove, create, remove."""
        # Arrange
        hotel = _hotel(client)
        actions = []
        scores = []

        # Act
        for vote_type in ("upvote", "upvote", "downvote", "downvote"):
            response = _vote(client, hotel, "Taylor", vote_type)
            assert response.status_code == 200
            actions.append(response.json()["action"])
            scores.append(_score(client, hotel["id"]))

        # Assert
        assert actions == ["created", "removed", "created", "removed"]
        assert scores == [1, 0, -1, 0]

    def test_switching_direction_updates(self, client):
        """Voting the other way should report an update."""
        # Arrange
        hotel = _hotel(client)
        _vote(client, hotel, "Taylor", "upvote")

        # Act
        response = _vote(client, hotel, "Taylor", "downvote")

        # Assert
        assert response.json() == {"action": "updated"}
        assert _score(client, hotel["id"]) == -1

    def test_vote_on_unknown_item_is_404(self, client):
        """Voting on an unknown item should be 404."""
        response = _vote(client, {"id": str(uuid4())}, "Taylor", "upvote")

        assert response.status_code == 404

    def test_missing_fields_is_400(self, client):
        """An incomplete vote should name the missing fields."""
        response = client.post("/api/votes", json={"username": "Taylor"})

        assert response.status_code == 400
        assert response.json()["detail"].startswith("Missing required fields")

    def test_empty_username_is_400(self, client):
        """An empty username should be rejected and record no vote."""
        # Arrange
        hotel = _hotel(client)

        # Act
        response = _vote(client, hotel, "", "upvote")

        # Assert
        assert response.status_code == 400
        assert "username" in response.json()["detail"]
        assert _score(client, hotel["id"]) == 0


class TestComments:
    """Tests for /api/comments."""

    def _comment(self, client, hotel, username="Taylor", content="Nice lobby"):
        response = client.post(
            "/api/comments",
            json={
                "username": username,
                "content": content,
                "itemType": "hotel",
                "itemId": hotel["id"],
            },
        )
        assert response.status_code == 200, response.text
        return response.json()

    def test_add_and_list(self, client):
        """Comments should be listed oldest first and nested in the item."""
        # Arrange
        hotel = _hotel(client)
        self._comment(client, hotel, content="first")
        self._comment(client, hotel, username="Scarlett", content="second")

        # Act
        response = client.get(
            "/api/comments", params={"itemType": "hotel", "itemId": hotel["id"]}
        )

        # Assert
        assert [c["content"] for c in response.json()] == ["first", "second"]
        (listed,) = client.get("/api/hotels").json()
        assert len(listed["comments"]) == 2

    def test_author_can_edit(self, client):
        """The author should be able to edit their comment."""
        # Arrange
        comment = self._comment(client, _hotel(client))

        # Act
        response = client.patch(
            "/api/comments",
            json={"id": comment["id"], "username": "Taylor", "content": "Updated"},
        )

        # Assert
        assert response.status_code == 200
        assert response.json()["content"] == "Updated"

    def test_non_author_edit_is_403(self, client):
        """Editing someone else's comment should be forbidden."""
        # Arrange
        hotel = _hotel(client)
        comment = self._comment(client, hotel)

        # Act
        response = client.patch(
            "/api/comments",
            json={"id": comment["id"], "username": "Scarlett", "content": "Mine now"},
        )

        # Assert
        assert response.status_code == 403
        listed = client.get(
            "/api/comments", params={"itemType": "hotel", "itemId": hotel["id"]}
        ).json()
        assert listed[0]["content"] == "Nice lobby"

    def test_non_author_delete_is_403(self, client):
        """Deleting someone else's comment should be forbidden."""
        comment = self._comment(client, _hotel(client))

        response = client.delete(
            "/api/comments", params={"id": comment["id"], "username": "Scarlett"}
        )

        assert response.status_code == 403

    def test_delete_unknown_comment_is_404(self, client):
        """Deleting an unknown comment should be 404."""
        response = client.delete(
            "/api/comments", params={"id": str(uuid4()), "username": "Taylor"}
        )

        assert response.status_code == 404

    def test_empty_content_is_400(self, client):
        """Blank comments should be rejected."""
        hotel = _hotel(client)

        response = client.post(
            "/api/comments",
            json={
                "username": "Taylor",
                "content": "  ",
                "itemType": "hotel",
                "itemId": hotel["id"],
            },
        )

        assert response.status_code == 400

    def test_deleting_item_removes_its_comments(self, client):
        """Comments should go away with their item."""
        # Arrange
        hotel = _hotel(client)
        self._comment(client, hotel)

        # Act
        client.delete("/api/hotels", params={"id": hotel["id"]})

        # Assert
        response = client.get(
            "/api/comments", params={"itemType": "hotel", "itemId": hotel["id"]}
        )
        assert response.json() == []

    def test_empty_username_is_400(self, client):
        """An empty username counts as missing on every comment write."""
        # Arrange
        hotel = _hotel(client)
        comment = self._comment(client, hotel)

        # Act
        created = client.post(
            "/api/comments",
            json={
                "username": "",
                "content": "Anonymous",
                "itemType": "hotel",
                "itemId": hotel["id"],
            },
        )
        edited = client.patch(
            "/api/comments",
            json={"id": comment["id"], "username": "", "content": "Changed"},
        )
        deleted = client.delete(
            "/api/comments", params={"id": comment["id"], "username": ""}
        )

        # Assert
        assert [created.status_code, edited.status_code, deleted.status_code] == [
            400,
            400,
            400,
        ]
        listed = client.get(
            "/api/comments", params={"itemType": "hotel", "itemId": hotel["id"]}
        ).json()
        assert [c["content"] for c in listed] == ["Nice lobby"]
