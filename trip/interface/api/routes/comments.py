"""Comment routes."""

import logfire
from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, HTTPException, Query, status
from pydantic import Field

from trip.application.usecase.base import CamelModel
from trip.application.usecase.comment import (
    CreateCommentRequest,
    CreateCommentUseCase,
    DeleteCommentRequest,
    DeleteCommentResponse,
    DeleteCommentUseCase,
    GetCommentsRequest,
    GetCommentsUseCase,
    UpdateCommentRequest,
    UpdateCommentUseCase,
)
from trip.domain.error import NotAuthorizedError, NotFoundError, ValidationError
from trip.domain.model import Comment
from trip.domain.value import ItemType

router = APIRouter(prefix="/comments", tags=["comments"], route_class=DishkaRoute)


class CreateCommentAPIRequest(CamelModel):
    """API request for creating a comment."""

    username: str = Field(min_length=1)
    content: str
    item_type: ItemType
    item_id: str = Field(min_length=1)


class UpdateCommentAPIRequest(CamelModel):
    """API request for editing a comment."""

    id: str = Field(min_length=1)
    username: str = Field(min_length=1)
    content: str


@router.get("", response_model=list[Comment])
async def get_comments(
    get_comments_use_case: FromDishka[GetCommentsUseCase],
    item_type: ItemType = Query(alias="itemType"),
    item_id: str = Query(alias="itemId"),
) -> list[Comment]:
    """Get the comments on an item, oldest first."""
    result = await get_comments_use_case.execute(
        GetCommentsRequest(item_type=item_type, item_id=item_id)
    )
    return result.comments


@router.post("", response_model=Comment)
async def create_comment(
    request: CreateCommentAPIRequest,
    create_comment_use_case: FromDishka[CreateCommentUseCase],
) -> Comment:
    """Comment on an item."""
    try:
        result = await create_comment_use_case.execute(
            CreateCommentRequest(
                username=request.username,
                content=request.content,
                item_type=request.item_type,
                item_id=request.item_id,
            )
        )
        return result.comment
    except NotFoundError as e:
        logfire.warn("Comment on missing item", item_id=request.item_id)
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    except ValidationError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))


@router.patch("", response_model=Comment)
async def update_comment(
    request: UpdateCommentAPIRequest,
    update_comment_use_case: FromDishka[UpdateCommentUseCase],
) -> Comment:
    """Edit a comment's content. Only the author can edit."""
    try:
        result = await update_comment_use_case.execute(
            UpdateCommentRequest(
                comment_id=request.id,
                username=request.username,
                content=request.content,
            )
        )
        return result.comment
    except NotAuthorizedError as e:
        logfire.warn("Unauthorized comment update attempt", error=str(e))
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail="Not authorized to edit this comment",
        )
    except NotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    except ValidationError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))


@router.delete("", response_model=DeleteCommentResponse)
async def delete_comment(
    delete_comment_use_case: FromDishka[DeleteCommentUseCase],
    id: str = Query(min_length=1),
    username: str = Query(min_length=1),
) -> DeleteCommentResponse:
    """Delete a comment. Only the author can delete."""
    try:
        return await delete_comment_use_case.execute(
            DeleteCommentRequest(comment_id=id, username=username)
        )
    except NotAuthorizedError as e:
        logfire.warn("Unauthorized comment delete attempt", error=str(e))
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail="Not authorized to delete this comment",
        )
    except NotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
