"""Comment use cases."""

from .create_comment import CreateCommentRequest, CreateCommentUseCase
from .delete_comment import (
    DeleteCommentRequest,
    DeleteCommentResponse,
    DeleteCommentUseCase,
)
from .get_author_comments import (
    GetAuthorCommentsRequest,
    GetAuthorCommentsResponse,
    GetAuthorCommentsUseCase,
)
from .get_thread import GetThreadRequest, GetThreadResponse, GetThreadUseCase
from .response import CommentNodeResponse, CommentResponse
from .update_comment import UpdateCommentRequest, UpdateCommentUseCase

__all__ = [
    "CommentNodeResponse",
    "CommentResponse",
    "CreateCommentRequest",
    "CreateCommentUseCase",
    "DeleteCommentRequest",
    "DeleteCommentResponse",
    "DeleteCommentUseCase",
    "GetAuthorCommentsRequest",
    "GetAuthorCommentsResponse",
    "GetAuthorCommentsUseCase",
    "GetThreadRequest",
    "GetThreadResponse",
    "GetThreadUseCase",
    "UpdateCommentRequest",
    "UpdateCommentUseCase",
]
