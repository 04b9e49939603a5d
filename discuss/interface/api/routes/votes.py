"""Comment vote routes."""

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Cookie

from discuss.application.usecase.vote import (
    RemoveVoteRequest,
    RemoveVoteResponse,
    RemoveVoteUseCase,
    VoteCommentRequest,
    VoteCommentResponse,
    VoteCommentUseCase,
)
from discuss.domain.error import DomainError
from discuss.domain.service import JWTService
from discuss.domain.value import VotePolarity
from discuss.interface.api.auth import require_user_id
from discuss.interface.error import to_http_exception

router = APIRouter(prefix="/comments", tags=["votes"], route_class=DishkaRoute)


async def _vote(
    comment_id: str,
    polarity: VotePolarity,
    vote_comment_use_case: VoteCommentUseCase,
    jwt_service: JWTService,
    auth_token: str | None,
) -> VoteCommentResponse:
    user_id = require_user_id(jwt_service, auth_token, "vote")
    try:
        request = VoteCommentRequest(
            comment_id=comment_id,
            user_id=user_id,
            polarity=polarity,
        )
        return await vote_comment_use_case.execute(request)
    except (DomainError, ValueError) as e:
        raise to_http_exception(e, "vote on comment")


@router.post("/{comment_id}/upvote", response_model=VoteCommentResponse)
async def upvote_comment(
    comment_id: str,
    vote_comment_use_case: FromDishka[VoteCommentUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> VoteCommentResponse:
    """Upvote a comment, replacing a downvote if there is one.

    Requires authentication. Upvoting twice keeps a single upvote.
    """
    return await _vote(
        comment_id, VotePolarity.UPVOTE, vote_comment_use_case, jwt_service, auth_token
    )


@router.post("/{comment_id}/downvote", response_model=VoteCommentResponse)
async def downvote_comment(
    comment_id: str,
    vote_comment_use_case: FromDishka[VoteCommentUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> VoteCommentResponse:
    """Downvote a comment, replacing an upvote if there is one.

    Requires authentication.
    """
    return await _vote(
        comment_id,
        VotePolarity.DOWNVOTE,
        vote_comment_use_case,
        jwt_service,
        auth_token,
    )


@router.delete("/{comment_id}/vote", response_model=RemoveVoteResponse)
async def remove_vote_from_comment(
    comment_id: str,
    remove_vote_use_case: FromDishka[RemoveVoteUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> RemoveVoteResponse:
    """Remove the caller's vote from a comment.

    Requires authentication. Answers 404 when there is no vote to remove.

    Args:
        comment_id: Comment UUID
        remove_vote_use_case: Remove vote use case from DI
        jwt_service: JWT service for token verification (injected)
        auth_token: JWT token from cookie

    Returns:
        Success status
    """
    user_id = require_user_id(jwt_service, auth_token, "remove vote")
    try:
        request = RemoveVoteRequest(comment_id=comment_id, user_id=user_id)
        return await remove_vote_use_case.execute(request)
    except (DomainError, ValueError) as e:
        raise to_http_exception(e, "remove vote")
