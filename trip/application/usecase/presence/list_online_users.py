"""List online users use case."""

from datetime import datetime

from trip.application.usecase.base import CamelModel
from trip.domain.service import PresenceService


class OnlineUserInfo(CamelModel):
    """One online session."""

    username: str
    session_id: str
    last_seen: datetime


class ListOnlineUsersResponse(CamelModel):
    """List online users response."""

    users: list[OnlineUserInfo]


class ListOnlineUsersUseCase:
    """Use case for listing sessions with a recent heartbeat."""

    def __init__(self, presence_service: PresenceService) -> None:
        """Initialize list online users use case.

        Args:
            presence_service: Presence domain service
        """
        self.presence_service = presence_service

    async def execute(self) -> ListOnlineUsersResponse:
        """Execute list online users flow.

        Returns:
            Sessions seen within the online window, most recent first
        """
        online = await self.presence_service.online_users()
        return ListOnlineUsersResponse(
            users=[
                OnlineUserInfo(
                    username=u.username, session_id=u.session_id, last_seen=u.last_seen
                )
                for u in online
            ]
        )
