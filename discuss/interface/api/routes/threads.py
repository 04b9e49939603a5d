"""Thread routes, one router per kind of parent entity."""

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Cookie, Query, status
from pydantic import BaseModel, Field

from discuss.application.usecase.comment import (
    CommentResponse,
    CreateCommentRequest,
    CreateCommentUseCase,
    GetThreadRequest,
    GetThreadResponse,
    GetThreadUseCase,
)
from discuss.domain.error import DomainError
from discuss.domain.service import JWTService
from discuss.domain.value import ParentKind
from discuss.interface.api.auth import require_user_id
from discuss.interface.error import to_http_exception


class CreateCommentAPIRequest(BaseModel):
    """API request for creating a comment."""

    content: str = Field(min_length=1)
    parent_comment_id: str | None = None  # Comment being replied to


def create_thread_router(parent_kind: ParentKind, prefix: str) -> APIRouter:
    """Build the thread routes for one kind of parent entity.

    Args:
        parent_kind: Kind of parent entity served by the router
        prefix: URL prefix, e.g. "/posts"

    Returns:
        Router exposing GET and POST ``{prefix}/{parent_id}/comments``
    """
    router = APIRouter(prefix=prefix, tags=["comments"], route_class=DishkaRoute)
    kind = parent_kind.value

    @router.get(
        "/{parent_id}/comments",
        response_model=GetThreadResponse,
        name=f"get_{kind}_thread",
    )
    async def get_thread(
        parent_id: str,
        get_thread_use_case: FromDishka[GetThreadUseCase],
        jwt_service: FromDishka[JWTService],
        page: int | None = Query(default=None),
        limit: int | None = Query(default=None),
        auth_token: str | None = Cookie(default=None),
    ) -> GetThreadResponse:
        """Get one page of a thread as nested reply trees.

        Root comments are newest first; replies are oldest first. Out of
        range ``page`` and ``limit`` values are clamped. If authenticated,
        each comment carries the caller's own vote.
        """
        viewer_id = jwt_service.get_user_id_from_token(auth_token)
        try:
            request = GetThreadRequest(
                parent_kind=parent_kind,
                parent_id=parent_id,
                page=page,
                limit=limit,
                viewer_id=viewer_id,
            )
            return await get_thread_use_case.execute(request)
        except (DomainError, ValueError) as e:
            raise to_http_exception(e, "get thread")

    @router.post(
        "/{parent_id}/comments",
        response_model=CommentResponse,
        status_code=status.HTTP_201_CREATED,
        name=f"create_{kind}_comment",
    )
    async def create_comment(
        parent_id: str,
        request: CreateCommentAPIRequest,
        create_comment_use_case: FromDishka[CreateCommentUseCase],
        jwt_service: FromDishka[JWTService],
        auth_token: str | None = Cookie(default=None),
    ) -> CommentResponse:
        """Comment on the parent entity or reply to one of its comments.

        Requires authentication.
        """
        user_id = require_user_id(jwt_service, auth_token, "create comments")
        try:
            use_case_request = CreateCommentRequest(
                parent_kind=parent_kind,
                parent_id=parent_id,
                author_id=user_id,
                content=request.content,
                parent_comment_id=request.parent_comment_id,
            )
            return await create_comment_use_case.execute(use_case_request)
        except (DomainError, ValueError) as e:
            raise to_http_exception(e, "create comment")

    return router


posts_router = create_thread_router(ParentKind.POST, "/posts")
reviews_router = create_thread_router(ParentKind.REVIEW, "/reviews")

__all__ = ["create_thread_router", "posts_router", "reviews_router"]
