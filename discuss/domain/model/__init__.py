"""Domain model entities for discussion threads."""

from discuss.domain.model.comment import Comment
from discuss.domain.model.thread import CommentView, ThreadNode, ThreadPage
from discuss.domain.model.vote import CommentVote

__all__ = [
    "Comment",
    "CommentVote",
    "CommentView",
    "ThreadNode",
    "ThreadPage",
]
