"""Comment routes."""

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Cookie
from pydantic import BaseModel, Field

from discuss.application.usecase.comment import (
    CommentResponse,
    DeleteCommentRequest,
    DeleteCommentResponse,
    DeleteCommentUseCase,
    UpdateCommentRequest,
    UpdateCommentUseCase,
)
from discuss.domain.error import DomainError
from discuss.domain.service import JWTService
from discuss.interface.api.auth import require_user_id
from discuss.interface.error import to_http_exception

router = APIRouter(prefix="/comments", tags=["comments"], route_class=DishkaRoute)


class UpdateCommentAPIRequest(BaseModel):
    """API request for updating a comment."""

    content: str = Field(min_length=1)


@router.patch("/{comment_id}", response_model=CommentResponse)
async def update_comment(
    comment_id: str,
    request: UpdateCommentAPIRequest,
    update_comment_use_case: FromDishka[UpdateCommentUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> CommentResponse:
    """Update a comment's content.

    Only the comment author can edit, and deleted comments stay deleted.

    Args:
        comment_id: Comment UUID
        request: Update data (new content)
        update_comment_use_case: Update comment use case from DI
        jwt_service: JWT service for token verification (injected)
        auth_token: JWT token from cookie

    Returns:
        Updated comment with vote tallies

    Raises:
        HTTPException: 401 unauthenticated, 403 not the author, 404 missing,
            409 already deleted, 400 invalid content
    """
    user_id = require_user_id(jwt_service, auth_token, "edit comments")
    try:
        use_case_request = UpdateCommentRequest(
            comment_id=comment_id,
            user_id=user_id,
            content=request.content,
        )
        return await update_comment_use_case.execute(use_case_request)
    except (DomainError, ValueError) as e:
        raise to_http_exception(e, "edit this comment")


@router.delete("/{comment_id}", response_model=DeleteCommentResponse)
async def delete_comment(
    comment_id: str,
    delete_comment_use_case: FromDishka[DeleteCommentUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> DeleteCommentResponse:
    """Delete a comment.

    A comment with replies keeps its place in the thread with its content
    replaced by "[deleted]"; a comment without replies is removed.

    Args:
        comment_id: Comment UUID
        delete_comment_use_case: Delete comment use case from DI
        jwt_service: JWT service for token verification (injected)
        auth_token: JWT token from cookie

    Returns:
        Whether the comment was removed or soft-deleted
    """
    user_id = require_user_id(jwt_service, auth_token, "delete comments")
    try:
        use_case_request = DeleteCommentRequest(comment_id=comment_id, user_id=user_id)
        return await delete_comment_use_case.execute(use_case_request)
    except (DomainError, ValueError) as e:
        raise to_http_exception(e, "delete this comment")
