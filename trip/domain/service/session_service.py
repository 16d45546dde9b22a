"""Session token domain service."""

import logfire

from trip.config import AuthSettings
from trip.domain.model.user import User
from trip.util.error import SessionTokenError
from trip.util.session import (
    SessionPayload,
    create_session_token,
    verify_session_token,
)

from .base import Service


class SessionService(Service):
    """Domain service for session token operations."""

    def __init__(self, auth_settings: AuthSettings) -> None:
        """Initialize session service.

        Args:
            auth_settings: Authentication settings
        """
        self.auth_settings = auth_settings

    @property
    def cookie_name(self) -> str:
        """Name of the cookie carrying the session token."""
        return self.auth_settings.session_cookie_name

    @property
    def max_age_seconds(self) -> int:
        """Cookie lifetime, matching the token expiry."""
        return self.auth_settings.session_expiry_days * 24 * 60 * 60

    def create_token(self, user: User) -> str:
        """Create a session token for a user.

        Args:
            user: Authenticated user

        Returns:
            Signed session token
        """
        with logfire.span("session_service.create_token", user_id=str(user.id)):
            token = create_session_token(str(user.id), user.name, self.auth_settings)
            logfire.info("Session token created", user_id=str(user.id), name=user.name)
            return token

    def verify_token(self, token: str) -> SessionPayload:
        """Verify a session token.

        Raises:
            SessionTokenError: If the token is invalid or expired
        """
        with logfire.span("session_service.verify_token"):
            try:
                return verify_session_token(token, self.auth_settings)
            except SessionTokenError as e:
                logfire.info("Session token rejected", error=str(e))
                raise

    def read_session(self, token: str | None) -> SessionPayload | None:
        """Decode a session cookie without raising.

        Args:
            token: Cookie value (optional)

        Returns:
            Payload if the token is valid, None if missing or invalid
        """
        if not token:
            return None

        try:
            return self.verify_token(token)
        except SessionTokenError:
            # Invalid or expired token, treat as logged out
            return None
