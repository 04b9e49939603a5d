"""Read-side models for assembled discussion threads."""

from dataclasses import dataclass, field
from typing import Optional

from pydantic import Field

from discuss.domain.model.comment import Comment
from discuss.domain.model.common import DomainModel
from discuss.domain.value import Pagination, VotePolarity


class CommentView(DomainModel):
    """A comment annotated with its live vote tallies.

    Tallies are computed from vote rows on every read and never stored.
    """

    comment: Comment
    upvotes: int = Field(default=0, ge=0)
    downvotes: int = Field(default=0, ge=0)
    viewer_vote: Optional[VotePolarity] = None


@dataclass
class ThreadNode:
    """Node in a discussion tree.

    Holds an annotated comment and its direct replies in creation order.
    """

    view: CommentView
    replies: list["ThreadNode"] = field(default_factory=list)

    @property
    def comment(self) -> Comment:
        return self.view.comment


@dataclass
class ThreadPage:
    """One page of root comments, each carrying its complete reply subtree."""

    items: list[ThreadNode]
    total: int
    pagination: Pagination
