"""Presence domain service."""

from datetime import datetime, timedelta

import logfire

from trip.config import PresenceSettings
from trip.domain.model.presence import OnlineUser
from trip.domain.repository import PresenceRepository

from .base import Service


class PresenceService(Service):
    """Tracks which sessions have sent a recent heartbeat."""

    def __init__(
        self,
        presence_repository: PresenceRepository,
        presence_settings: PresenceSettings,
    ) -> None:
        """Initialize presence service.

        Args:
            presence_repository: Presence repository
            presence_settings: Online window configuration
        """
        self.presence_repository = presence_repository
        self.presence_settings = presence_settings

    async def heartbeat(self, username: str, session_id: str) -> OnlineUser:
        """Record that a session is alive."""
        with logfire.span(
            "presence_service.heartbeat", username=username, session_id=session_id
        ):
            return await self.presence_repository.upsert(
                session_id, username, datetime.now()
            )

    async def online_users(self, now: datetime | None = None) -> list[OnlineUser]:
        """List sessions seen within the online window, most recent first.

        Args:
            now: Reference time (defaults to the current time)
        """
        reference = now or datetime.now()
        since = reference - timedelta(
            seconds=self.presence_settings.online_window_seconds
        )
        users = await self.presence_repository.find_seen_since(since)
        logfire.debug("Online users listed", count=len(users))
        return users
