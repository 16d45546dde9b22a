"""Presence heartbeat use case."""

from pydantic import BaseModel, Field

from trip.domain.service import PresenceService


class HeartbeatRequest(BaseModel):
    """Heartbeat request."""

    username: str = Field(min_length=1)
    session_id: str = Field(min_length=1)


class HeartbeatResponse(BaseModel):
    """Heartbeat response."""

    success: bool = True


class HeartbeatUseCase:
    """Use case for recording that a session is alive."""

    def __init__(self, presence_service: PresenceService) -> None:
        self.presence_service = presence_service

    async def execute(self, request: HeartbeatRequest) -> HeartbeatResponse:
        """Upsert the session's last-seen time."""
        await self.presence_service.heartbeat(request.username, request.session_id)
        return HeartbeatResponse()
