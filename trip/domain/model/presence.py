"""Online presence entity."""

from datetime import datetime

from pydantic import Field

from trip.domain.model.common import DomainModel
from trip.domain.value import PresenceId


class OnlineUser(DomainModel):
    """Last heartbeat of one browser session.

    Upserted by session id; considered online while ``last_seen`` is within
    the configured window.
    """

    id: PresenceId
    username: str
    session_id: str = Field(min_length=1, max_length=255)
    last_seen: datetime = Field(default_factory=datetime.now)
