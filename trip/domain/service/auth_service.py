"""Authentication domain service.

Users log in with their name and a numeric PIN. Only a salted SHA-256 hash
of the PIN is stored.
"""

import hashlib
import hmac
from datetime import datetime
from uuid import UUID, uuid4

import logfire

from trip.config import AuthSettings
from trip.domain.error import InvalidCredentialsError
from trip.domain.model.user import User
from trip.domain.repository import UserRepository
from trip.domain.value import UserId

from .base import Service


class AuthService(Service):
    """Domain service for name + PIN authentication."""

    def __init__(
        self, user_repository: UserRepository, auth_settings: AuthSettings
    ) -> None:
        """Initialize auth service.

        Args:
            user_repository: User repository
            auth_settings: Authentication settings (PIN salt)
        """
        self.user_repository = user_repository
        self.auth_settings = auth_settings

    def hash_pin(self, pin: str) -> str:
        """Hash a PIN with the configured salt.

        Args:
            pin: Plain PIN

        Returns:
            Hex-encoded SHA-256 digest of ``pin + salt``
        """
        salted = pin + self.auth_settings.pin_salt
        return hashlib.sha256(salted.encode("utf-8")).hexdigest()

    async def validate_credentials(self, name: str, pin: str) -> User:
        """Check a name/PIN pair.

        Args:
            name: User name
            pin: Plain PIN

        Returns:
            The matching user

        Raises:
            InvalidCredentialsError: If the user is unknown or the PIN is wrong
        """
        with logfire.span("auth_service.validate_credentials", name=name):
            user = await self.user_repository.find_by_name(name)
            if user is None:
                logfire.warn("Login attempt for unknown user", name=name)
                raise InvalidCredentialsError()

            if not hmac.compare_digest(user.pin_hash, self.hash_pin(pin)):
                logfire.warn("Login attempt with wrong PIN", name=name)
                raise InvalidCredentialsError()

            logfire.info("Credentials validated", user_id=str(user.id), name=name)
            return user

    async def get_user(self, user_id: str) -> User | None:
        """Get a user by ID string, None if the ID is malformed or unknown."""
        try:
            parsed = UserId(UUID(user_id))
        except ValueError:
            return None
        return await self.user_repository.find_by_id(parsed)

    async def seed_user(self, name: str, pin: str) -> User:
        """Create a user, or reset the PIN of an existing one.

        Args:
            name: User name
            pin: Plain PIN

        Returns:
            The stored user
        """
        with logfire.span("auth_service.seed_user", name=name):
            existing = await self.user_repository.find_by_name(name)
            if existing is not None:
                user = existing.model_copy(update={"pin_hash": self.hash_pin(pin)})
            else:
                user = User(
                    id=UserId(uuid4()),
                    name=name,
                    pin_hash=self.hash_pin(pin),
                    created_at=datetime.now(),
                )
            saved = await self.user_repository.save(user)
            logfire.info(
                "User seeded", name=name, created=existing is None
            )
            return saved
