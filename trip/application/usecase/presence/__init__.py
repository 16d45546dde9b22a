"""Presence use cases."""

from .heartbeat import HeartbeatRequest, HeartbeatResponse, HeartbeatUseCase
from .list_online_users import (
    ListOnlineUsersResponse,
    ListOnlineUsersUseCase,
    OnlineUserInfo,
)

__all__ = [
    "HeartbeatRequest",
    "HeartbeatResponse",
    "HeartbeatUseCase",
    "ListOnlineUsersResponse",
    "ListOnlineUsersUseCase",
    "OnlineUserInfo",
]
