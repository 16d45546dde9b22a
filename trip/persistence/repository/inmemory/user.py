"""In-memory user repository for testing."""

from typing import Optional

from trip.domain.model.user import User
from trip.domain.repository.user import UserRepository
from trip.domain.value import UserId


class InMemoryUserRepository(UserRepository):
    """In-memory implementation of UserRepository for testing."""

    def __init__(self) -> None:
        self._users: dict[UserId, User] = {}

    async def find_by_id(self, user_id: UserId) -> Optional[User]:
        """Find a user by ID."""
        return self._users.get(user_id)

    async def find_by_name(self, name: str) -> Optional[User]:
        """Find a user by name."""
        for user in self._users.values():
            if user.name == name:
                return user
        return None

    async def save(self, user: User) -> User:
        """Save a user."""
        self._users[user.id] = user
        return user
