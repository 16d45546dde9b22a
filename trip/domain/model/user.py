"""User entity.

Users are a fixed, seeded set that log in with a name and PIN.
"""

from datetime import datetime

from pydantic import Field

from trip.domain.model.common import DomainModel
from trip.domain.value import UserId


class User(DomainModel):
    """Trip member."""

    id: UserId
    name: str = Field(min_length=1, max_length=100)
    pin_hash: str
    created_at: datetime = Field(default_factory=datetime.now)
