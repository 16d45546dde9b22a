"""In-memory presence repository for testing."""

from datetime import datetime
from uuid import uuid4

from trip.domain.model.presence import OnlineUser
from trip.domain.repository.presence import PresenceRepository
from trip.domain.value import PresenceId


class InMemoryPresenceRepository(PresenceRepository):
    """In-memory implementation of PresenceRepository for testing."""

    def __init__(self) -> None:
        self._by_session: dict[str, OnlineUser] = {}

    async def upsert(
        self, session_id: str, username: str, seen_at: datetime
    ) -> OnlineUser:
        """Insert or refresh the heartbeat for a session."""
        existing = self._by_session.get(session_id)
        if existing:
            row = existing.model_copy(
                update={"username": username, "last_seen": seen_at}
            )
        else:
            row = OnlineUser(
                id=PresenceId(uuid4()),
                username=username,
                session_id=session_id,
                last_seen=seen_at,
            )
        self._by_session[session_id] = row
        return row

    async def find_seen_since(self, since: datetime) -> list[OnlineUser]:
        """Find sessions seen at or after ``since``, most recent first."""
        recent = [u for u in self._by_session.values() if u.last_seen >= since]
        return sorted(recent, key=lambda u: u.last_seen, reverse=True)
