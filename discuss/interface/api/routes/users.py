"""User comment history routes."""

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Cookie, Query

from discuss.application.usecase.comment import (
    GetAuthorCommentsRequest,
    GetAuthorCommentsResponse,
    GetAuthorCommentsUseCase,
)
from discuss.domain.error import DomainError
from discuss.domain.service import JWTService
from discuss.domain.value import ParentKind
from discuss.interface.error import to_http_exception

router = APIRouter(prefix="/users", tags=["users"], route_class=DishkaRoute)


@router.get("/{user_id}/comments", response_model=GetAuthorCommentsResponse)
async def get_user_comments(
    user_id: str,
    get_author_comments_use_case: FromDishka[GetAuthorCommentsUseCase],
    jwt_service: FromDishka[JWTService],
    page: int | None = Query(default=None),
    limit: int | None = Query(default=None),
    parent_kind: ParentKind | None = Query(default=None),
    parent_id: str | None = Query(default=None),
    auth_token: str | None = Cookie(default=None),
) -> GetAuthorCommentsResponse:
    """Get a user's comments across all threads, newest first.

    Example:
        GET /users/123e4567-e89b-12d3-a456-426614174000/comments?parent_kind=post

    Args:
        user_id: Author UUID
        get_author_comments_use_case: Use case from DI
        jwt_service: JWT service for optional viewer identification
        page: Page number (clamped to >= 1)
        limit: Page size (clamped to the configured bounds)
        parent_kind: Only comments on this kind of entity
        parent_id: Only comments on this entity
        auth_token: JWT token from cookie (optional)

    Returns:
        One page of comments with vote tallies and pagination metadata
    """
    viewer_id = jwt_service.get_user_id_from_token(auth_token)
    try:
        request = GetAuthorCommentsRequest(
            author_id=user_id,
            page=page,
            limit=limit,
            viewer_id=viewer_id,
            parent_kind=parent_kind,
            parent_id=parent_id,
        )
        return await get_author_comments_use_case.execute(request)
    except (DomainError, ValueError) as e:
        raise to_http_exception(e, "get user comments")
