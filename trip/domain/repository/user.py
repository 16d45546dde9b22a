"""User repository interface."""

from abc import ABC, abstractmethod
from typing import Optional

from trip.domain.model.user import User
from trip.domain.value import UserId


class UserRepository(ABC):
    """Repository for User entity."""

    @abstractmethod
    async def find_by_id(self, user_id: UserId) -> Optional[User]:
        """Find a user by ID."""
        pass

    @abstractmethod
    async def find_by_name(self, name: str) -> Optional[User]:
        """Find a user by their unique name."""
        pass

    @abstractmethod
    async def save(self, user: User) -> User:
        """Save a user (create or update)."""
        pass
