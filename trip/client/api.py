"""HTTP client for the trip planner API."""

import logging
from typing import Any, Mapping, Optional

import httpx
from pydantic import BaseModel

from trip.client.error import AuthenticationRequired, TransientError, error_for_response
from trip.client.ids import EntityId
from trip.client.models import CachedComment, CachedItem, fields_to_wire
from trip.domain.value import ItemType, VoteAction, VoteType

logger = logging.getLogger(__name__)


class CurrentUser(BaseModel):
    """The logged-in user."""

    id: str
    name: str


class TripApiClient:
    """Thin async wrapper over the REST API.

    The session cookie set by ``login`` is kept by the underlying
    ``httpx.AsyncClient`` and sent with every later request.
    """

    def __init__(
        self,
        base_url: str = "http://localhost:8000",
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ) -> None:
        """Initialize the client.

        Args:
            base_url: API origin (without the ``/api`` prefix)
            transport: Custom transport, e.g. ``httpx.ASGITransport`` in tests
        """
        self._http = httpx.AsyncClient(base_url=base_url, transport=transport)
        self.current_user: Optional[CurrentUser] = None

    async def __aenter__(self) -> "TripApiClient":
        return self

    async def __aexit__(self, *exc_info: Any) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        """Close the underlying connection pool."""
        await self._http.aclose()

    async def _request(self, method: str, path: str, **kwargs: Any) -> Any:
        """Send a request and decode the JSON body.

        Raises:
            ClientError: For transport failures and error statuses
        """
        try:
            response = await self._http.request(method, f"/api{path}", **kwargs)
        except httpx.TransportError as e:
            logger.warning(f"{method} {path} failed: {e}")
            raise TransientError(f"{method} {path} failed: {e}") from e

        if response.is_error:
            error = error_for_response(response)
            logger.info(f"{method} {path} rejected: {error}")
            if isinstance(error, AuthenticationRequired):
                self.current_user = None
            raise error

        return response.json()

    # Auth

    async def login(self, name: str, pin: str) -> CurrentUser:
        """Log in and remember the user."""
        data = await self._request("POST", "/auth/login", json={"name": name, "pin": pin})
        self.current_user = CurrentUser.model_validate(data["user"])
        return self.current_user

    async def logout(self) -> None:
        """Clear the session on the server and locally."""
        await self._request("POST", "/auth/logout")
        self.current_user = None

    async def me(self) -> Optional[CurrentUser]:
        """Refresh ``current_user`` from the session cookie."""
        data = await self._request("GET", "/auth/me")
        user = data.get("user")
        self.current_user = CurrentUser.model_validate(user) if user else None
        return self.current_user

    # Items

    async def list_items(self, item_type: ItemType) -> list[CachedItem]:
        """Fetch one collection with votes and comments."""
        data = await self._request("GET", f"/{item_type.collection}")
        return [CachedItem.from_wire(item_type, item) for item in data]

    async def create_item(
        self, item_type: ItemType, fields: Mapping[str, Any]
    ) -> CachedItem:
        """Create an item from snake_case fields."""
        data = await self._request(
            "POST", f"/{item_type.collection}", json=fields_to_wire(item_type, fields)
        )
        return CachedItem.from_wire(item_type, data)

    async def update_item(
        self, item_type: ItemType, item_id: EntityId, fields: Mapping[str, Any]
    ) -> CachedItem:
        """Replace the given fields of an item."""
        body = {"id": str(item_id), **fields_to_wire(item_type, fields)}
        data = await self._request("PUT", f"/{item_type.collection}", json=body)
        return CachedItem.from_wire(item_type, data)

    async def delete_item(self, item_type: ItemType, item_id: EntityId) -> None:
        """Delete an item."""
        await self._request(
            "DELETE", f"/{item_type.collection}", params={"id": str(item_id)}
        )

    # Votes

    async def toggle_vote(
        self,
        username: str,
        vote_type: VoteType,
        item_type: ItemType,
        item_id: EntityId,
    ) -> VoteAction:
        """Vote on an item; voting the same way twice removes the vote."""
        data = await self._request(
            "POST",
            "/votes",
            json={
                "username": username,
                "voteType": vote_type.value,
                "itemType": item_type.value,
                "itemId": str(item_id),
            },
        )
        return VoteAction(data["action"])

    # Comments

    async def get_comments(
        self, item_type: ItemType, item_id: EntityId
    ) -> list[CachedComment]:
        """Fetch the comments on one item, oldest first."""
        data = await self._request(
            "GET",
            "/comments",
            params={"itemType": item_type.value, "itemId": str(item_id)},
        )
        return [CachedComment.model_validate(c) for c in data]

    async def add_comment(
        self, username: str, content: str, item_type: ItemType, item_id: EntityId
    ) -> CachedComment:
        """Comment on an item."""
        data = await self._request(
            "POST",
            "/comments",
            json={
                "username": username,
                "content": content,
                "itemType": item_type.value,
                "itemId": str(item_id),
            },
        )
        return CachedComment.model_validate(data)

    async def edit_comment(
        self, comment_id: EntityId, username: str, content: str
    ) -> CachedComment:
        """Edit a comment (author only)."""
        data = await self._request(
            "PATCH",
            "/comments",
            json={"id": str(comment_id), "username": username, "content": content},
        )
        return CachedComment.model_validate(data)

    async def delete_comment(self, comment_id: EntityId, username: str) -> None:
        """Delete a comment (author only)."""
        await self._request(
            "DELETE",
            "/comments",
            params={"id": str(comment_id), "username": username},
        )

    # Presence and version

    async def heartbeat(self, username: str, session_id: str) -> None:
        """Report that this session is alive."""
        await self._request(
            "POST", "/presence", json={"username": username, "sessionId": session_id}
        )

    async def online_users(self) -> list[dict[str, Any]]:
        """List sessions seen recently."""
        return await self._request("GET", "/presence")

    async def version(self) -> str:
        """Current server build version."""
        data = await self._request("GET", "/version")
        return data["version"]
