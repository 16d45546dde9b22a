"""Vote routes."""

import logfire
from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, HTTPException, status
from pydantic import Field

from trip.application.usecase.base import CamelModel
from trip.application.usecase.vote import (
    ToggleVoteRequest,
    ToggleVoteResponse,
    ToggleVoteUseCase,
)
from trip.domain.error import NotFoundError
from trip.domain.value import ItemType, VoteType

router = APIRouter(prefix="/votes", tags=["votes"], route_class=DishkaRoute)


class ToggleVoteAPIRequest(CamelModel):
    """API request for voting on an item."""

    username: str = Field(min_length=1)
    vote_type: VoteType
    item_type: ItemType
    item_id: str = Field(min_length=1)


@router.post("", response_model=ToggleVoteResponse)
async def toggle_vote(
    request: ToggleVoteAPIRequest,
    toggle_vote_use_case: FromDishka[ToggleVoteUseCase],
) -> ToggleVoteResponse:
    """Create, switch or remove the user's vote on an item.

    Example:
        POST /api/votes
        {"username": "Taylor", "voteType": "upvote", "itemType": "hotel", "itemId": "..."}

        Response: {"action": "created"}
    """
    try:
        return await toggle_vote_use_case.execute(
            ToggleVoteRequest(
                username=request.username,
                vote_type=request.vote_type,
                item_type=request.item_type,
                item_id=request.item_id,
            )
        )
    except NotFoundError as e:
        logfire.warn("Vote on missing item", item_id=request.item_id)
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    except ValueError as e:
        # Raced with a concurrent vote from the same user
        raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail=str(e))
