"""Authentication routes."""

import logging

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, HTTPException, Request, Response, status
from pydantic import BaseModel

from trip.application.usecase.auth import (
    GetCurrentUserRequest,
    GetCurrentUserResponse,
    GetCurrentUserUseCase,
    LoginRequest,
    LoginUseCase,
    UserInfo,
)
from trip.config import Settings
from trip.domain.error import InvalidCredentialsError
from trip.domain.service import SessionService

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/auth", tags=["authentication"], route_class=DishkaRoute)


class LoginAPIRequest(BaseModel):
    """Login request."""

    name: str
    pin: str


class LoginAPIResponse(BaseModel):
    """Login response."""

    success: bool
    user: UserInfo


class LogoutResponse(BaseModel):
    """Logout response."""

    success: bool


@router.post("/login", response_model=LoginAPIResponse)
async def login(
    request: LoginAPIRequest,
    response: Response,
    login_use_case: FromDishka[LoginUseCase],
    session_service: FromDishka[SessionService],
    settings: FromDishka[Settings],
) -> LoginAPIResponse:
    """Log in with a name and PIN.

    On success the session token is set as an HTTP-only cookie.

    Example:
        POST /api/auth/login
        {"name": "Taylor", "pin": "1234"}

        Response: {"success": true, "user": {"id": "...", "name": "Taylor"}}
    """
    try:
        result = await login_use_case.execute(
            LoginRequest(name=request.name, pin=request.pin)
        )
    except InvalidCredentialsError:
        logger.info(f"Rejected login for {request.name}")
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED, detail="Invalid credentials"
        )

    response.set_cookie(
        key=session_service.cookie_name,
        value=result.token,
        httponly=True,
        secure=settings.secure_cookies,
        samesite="lax",
        path="/",
        max_age=session_service.max_age_seconds,
    )
    logger.info(f"Session cookie set for {result.user.name}")
    return LoginAPIResponse(success=True, user=result.user)


@router.post("/logout", response_model=LogoutResponse)
async def logout(
    response: Response,
    session_service: FromDishka[SessionService],
) -> LogoutResponse:
    """Log out by clearing the session cookie."""
    response.delete_cookie(key=session_service.cookie_name, path="/")
    return LogoutResponse(success=True)


@router.get("/me", response_model=GetCurrentUserResponse)
async def get_current_user(
    request: Request,
    get_current_user_use_case: FromDishka[GetCurrentUserUseCase],
    session_service: FromDishka[SessionService],
) -> GetCurrentUserResponse:
    """Get the logged-in user, or ``{"user": null}``.

    Safe to call without a session; it never fails with 401.
    """
    token = request.cookies.get(session_service.cookie_name)
    return await get_current_user_use_case.execute(GetCurrentUserRequest(token=token))
