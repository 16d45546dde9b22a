"""Login use case."""

import logfire
from pydantic import BaseModel

from trip.application.usecase.base import CamelModel
from trip.domain.service import AuthService, SessionService


class LoginRequest(BaseModel):
    """Login request."""

    name: str
    pin: str


class UserInfo(CamelModel):
    """Public view of a user."""

    id: str
    name: str


class LoginResponse(BaseModel):
    """Login response.

    The token is set as a cookie by the route and never sent in the body.
    """

    token: str
    user: UserInfo


class LoginUseCase:
    """Use case for logging in with a name and PIN."""

    def __init__(
        self, auth_service: AuthService, session_service: SessionService
    ) -> None:
        """Initialize login use case.

        Args:
            auth_service: Authentication domain service
            session_service: Session token domain service
        """
        self.auth_service = auth_service
        self.session_service = session_service

    async def execute(self, request: LoginRequest) -> LoginResponse:
        """Execute login flow.

        Returns:
            Session token and the logged-in user

        Raises:
            InvalidCredentialsError: If the name or PIN is wrong
        """
        with logfire.span("login", name=request.name):
            user = await self.auth_service.validate_credentials(
                request.name, request.pin
            )
            token = self.session_service.create_token(user)
            logfire.info("User logged in", user_id=str(user.id), name=user.name)
            return LoginResponse(
                token=token, user=UserInfo(id=str(user.id), name=user.name)
            )
