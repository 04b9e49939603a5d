"""Comment vote entity.

Each voter holds at most one vote per comment. Voting again replaces the
polarity of the existing vote instead of adding a second one.
"""

from datetime import datetime

from pydantic import Field

from discuss.domain.model.common import DomainModel
from discuss.domain.value import CommentId, UserId, VotePolarity


class CommentVote(DomainModel):
    """Vote cast on a comment.

    Identity is the (voter_id, comment_id) pair.
    """

    voter_id: UserId
    comment_id: CommentId
    polarity: VotePolarity
    created_at: datetime = Field(default_factory=datetime.now)
    updated_at: datetime = Field(default_factory=datetime.now)
