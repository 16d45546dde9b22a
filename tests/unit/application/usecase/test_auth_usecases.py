"""Unit tests for LoginUseCase and GetCurrentUserUseCase."""

from dishka import AsyncContainer
import pytest

from trip.application.usecase.auth import (
    GetCurrentUserRequest,
    GetCurrentUserUseCase,
    LoginRequest,
    LoginUseCase,
)
from trip.domain.error import InvalidCredentialsError
from trip.domain.service import AuthService, SessionService
from tests.harness import create_env_fixture

# Unit test fixture
unit_env = create_env_fixture()


class TestLoginUseCase:
    """Tests for LoginUseCase."""

    @pytest.mark.asyncio
    async def test_login_returns_token_for_user(self, unit_env: AsyncContainer):
        """Login with the right PIN should issue a token naming the user."""
        # Arrange
        auth_service = await unit_env.get(AuthService)
        session_service = await unit_env.get(SessionService)
        user = await auth_service.seed_user("Taylor", "1234")
        login_use_case = await unit_env.get(LoginUseCase)

        # Act
        result = await login_use_case.execute(LoginRequest(name="Taylor", pin="1234"))

        # Assert
        assert result.user.id == str(user.id)
        assert result.user.name == "Taylor"
        payload = session_service.verify_token(result.token)
        assert payload.user_id == str(user.id)

    @pytest.mark.asyncio
    async def test_login_with_wrong_pin_fails(self, unit_env: AsyncContainer):
        """Login with the wrong PIN should raise InvalidCredentialsError."""
        # Arrange
        auth_service = await unit_env.get(AuthService)
        await auth_service.seed_user("Taylor", "1234")
        login_use_case = await unit_env.get(LoginUseCase)

        # Act & Assert
        with pytest.raises(InvalidCredentialsError):
            await login_use_case.execute(LoginRequest(name="Taylor", pin="9999"))


class TestGetCurrentUserUseCase:
    """Tests for GetCurrentUserUseCase."""

    @pytest.mark.asyncio
    async def test_valid_token_resolves_user(self, unit_env: AsyncContainer):
        """A token from login should resolve back to the user."""
        # Arrange
        auth_service = await unit_env.get(AuthService)
        await auth_service.seed_user("Scarlett", "5678")
        login_use_case = await unit_env.get(LoginUseCase)
        use_case = await unit_env.get(GetCurrentUserUseCase)
        login = await login_use_case.execute(LoginRequest(name="Scarlett", pin="5678"))

        # Act
        result = await use_case.execute(GetCurrentUserRequest(token=login.token))

        # Assert
        assert result.user is not None
        assert result.user.name == "Scarlett"

    @pytest.mark.asyncio
    async def test_missing_or_bad_token_is_anonymous(self, unit_env: AsyncContainer):
        """No token, or a bad one, should read as logged out."""
        use_case = await unit_env.get(GetCurrentUserUseCase)

        assert (await use_case.execute(GetCurrentUserRequest())).user is None
        assert (
            await use_case.execute(GetCurrentUserRequest(token="garbage"))
        ).user is None
