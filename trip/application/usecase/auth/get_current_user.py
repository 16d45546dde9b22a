"""Get current user use case."""

from pydantic import BaseModel

from trip.domain.service import AuthService, SessionService

from .login import UserInfo


class GetCurrentUserRequest(BaseModel):
    """Get current user request."""

    token: str | None = None  # Session cookie value


class GetCurrentUserResponse(BaseModel):
    """Get current user response. ``user`` is None when logged out."""

    user: UserInfo | None = None


class GetCurrentUserUseCase:
    """Use case for resolving the session cookie to a user."""

    def __init__(
        self, session_service: SessionService, auth_service: AuthService
    ) -> None:
        """Initialize get current user use case.

        Args:
            session_service: Session token domain service
            auth_service: Authentication domain service
        """
        self.session_service = session_service
        self.auth_service = auth_service

    async def execute(self, request: GetCurrentUserRequest) -> GetCurrentUserResponse:
        """Execute get current user flow.

        Missing, invalid and expired tokens, as well as tokens for users that
        no longer exist, all read as logged out.
        """
        session = self.session_service.read_session(request.token)
        if session is None:
            return GetCurrentUserResponse()

        user = await self.auth_service.get_user(session.user_id)
        if user is None:
            return GetCurrentUserResponse()

        return GetCurrentUserResponse(user=UserInfo(id=str(user.id), name=user.name))
