"""Toggle vote use case."""

from pydantic import BaseModel

from trip.application.usecase.base import parse_item_ref
from trip.domain.service import VoteService
from trip.domain.value import ItemType, VoteAction, VoteType


class ToggleVoteRequest(BaseModel):
    """Toggle vote request."""

    username: str
    vote_type: VoteType
    item_type: ItemType
    item_id: str  # UUID string


class ToggleVoteResponse(BaseModel):
    """Toggle vote response."""

    action: VoteAction


class ToggleVoteUseCase:
    """Use case for voting on an item.

    Voting again in the same direction removes the vote; voting the other
    way switches it.
    """

    def __init__(self, vote_service: VoteService) -> None:
        """Initialize toggle vote use case.

        Args:
            vote_service: Vote domain service
        """
        self.vote_service = vote_service

    async def execute(self, request: ToggleVoteRequest) -> ToggleVoteResponse:
        """Execute toggle vote flow.

        Raises:
            NotFoundError: If the item does not exist
        """
        ref = parse_item_ref(request.item_type, request.item_id)
        action = await self.vote_service.toggle_vote(
            request.username, ref, request.vote_type
        )
        return ToggleVoteResponse(action=action)
