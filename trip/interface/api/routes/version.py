"""Build version route.

Clients poll this and reload when the version changes between deploys.
"""

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Response
from pydantic import BaseModel

from trip.config import Settings

router = APIRouter(tags=["version"], route_class=DishkaRoute)

NO_CACHE_HEADERS = {
    "Cache-Control": "no-store, no-cache, must-revalidate, proxy-revalidate",
    "Pragma": "no-cache",
    "Expires": "0",
}


class VersionResponse(BaseModel):
    """Version response."""

    version: str


@router.get("/version", response_model=VersionResponse)
async def get_version(
    response: Response, settings: FromDishka[Settings]
) -> VersionResponse:
    """Return the running build version, never cached."""
    response.headers.update(NO_CACHE_HEADERS)
    return VersionResponse(version=settings.build_version)
