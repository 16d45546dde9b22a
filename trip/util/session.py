"""Session token utilities.

Sessions are signed JWTs stored in an HTTP-only cookie.
"""

from datetime import datetime, timedelta, timezone

import jwt
from pydantic import BaseModel

from trip.config import AuthSettings
from trip.util.error import SessionTokenError


class SessionPayload(BaseModel):
    """Session token payload."""

    user_id: str
    name: str
    exp: datetime


def create_session_token(user_id: str, name: str, settings: AuthSettings) -> str:
    """Create a signed session token for the user.

    Args:
        user_id: User ID
        name: User display name
        settings: Authentication settings

    Returns:
        Encoded JWT token
    """
    expiry = datetime.now(timezone.utc) + timedelta(days=settings.session_expiry_days)

    payload = {
        "user_id": user_id,
        "name": name,
        "exp": expiry,
    }

    return jwt.encode(
        payload, settings.session_secret, algorithm=settings.session_algorithm
    )


def verify_session_token(token: str, settings: AuthSettings) -> SessionPayload:
    """Verify and decode a session token.

    Args:
        token: Session token to verify
        settings: Authentication settings

    Returns:
        Token payload if valid

    Raises:
        SessionTokenError: If token is invalid or expired
    """
    try:
        payload = jwt.decode(
            token, settings.session_secret, algorithms=[settings.session_algorithm]
        )
        return SessionPayload(**payload)
    except jwt.ExpiredSignatureError:
        raise SessionTokenError("Session has expired")
    except jwt.InvalidTokenError:
        raise SessionTokenError("Invalid session")
