"""Presence repository interface."""

from abc import ABC, abstractmethod
from datetime import datetime
from typing import List

from trip.domain.model.presence import OnlineUser


class PresenceRepository(ABC):
    """Repository for session heartbeats."""

    @abstractmethod
    async def upsert(
        self, session_id: str, username: str, seen_at: datetime
    ) -> OnlineUser:
        """Record a heartbeat, creating the session row on first sight.

        Args:
            session_id: Browser session identifier
            username: User name reported by the session
            seen_at: Heartbeat time

        Returns:
            The stored presence row
        """
        pass

    @abstractmethod
    async def find_seen_since(self, since: datetime) -> List[OnlineUser]:
        """Find sessions seen at or after ``since``, most recent first."""
        pass
