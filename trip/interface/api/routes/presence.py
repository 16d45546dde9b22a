"""Presence routes."""

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter

from trip.application.usecase.base import CamelModel
from trip.application.usecase.presence import (
    HeartbeatRequest,
    HeartbeatResponse,
    HeartbeatUseCase,
    ListOnlineUsersUseCase,
    OnlineUserInfo,
)

router = APIRouter(prefix="/presence", tags=["presence"], route_class=DishkaRoute)


class HeartbeatAPIRequest(CamelModel):
    """Heartbeat request."""

    username: str
    session_id: str


@router.post("", response_model=HeartbeatResponse)
async def heartbeat(
    request: HeartbeatAPIRequest,
    heartbeat_use_case: FromDishka[HeartbeatUseCase],
) -> HeartbeatResponse:
    """Record that a browser session is alive."""
    return await heartbeat_use_case.execute(
        HeartbeatRequest(username=request.username, session_id=request.session_id)
    )


@router.get("", response_model=list[OnlineUserInfo])
async def list_online_users(
    list_online_users_use_case: FromDishka[ListOnlineUsersUseCase],
) -> list[OnlineUserInfo]:
    """List sessions seen within the online window, most recent first."""
    result = await list_online_users_use_case.execute()
    return result.users
