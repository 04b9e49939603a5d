"""Vote aggregation for comment listings."""

from collections import Counter
from typing import Iterable, Optional

import logfire

from discuss.domain.model import Comment, CommentView, CommentVote
from discuss.domain.repository import CommentVoteRepository
from discuss.domain.value import CommentId, UserId, VotePolarity


class VoteAggregator:
    """Computes per-comment vote tallies at read time.

    Comment votes have no stored counters: every read recounts the raw
    vote rows with a single batched query.
    """

    def __init__(self, vote_repository: CommentVoteRepository) -> None:
        """Initialize vote aggregator.

        Args:
            vote_repository: Comment vote repository
        """
        self.vote_repository = vote_repository

    async def annotate(
        self, comments: list[Comment], viewer_id: Optional[UserId] = None
    ) -> list[CommentView]:
        """Attach vote tallies and the viewer's own vote to each comment.

        Args:
            comments: Comments to annotate (order is preserved)
            viewer_id: Requesting user, if authenticated

        Returns:
            Annotated comments in the same order
        """
        with logfire.span(
            "vote_aggregator.annotate",
            comment_count=len(comments),
            viewer_id=str(viewer_id) if viewer_id else None,
        ):
            if not comments:
                return []

            votes = await self.vote_repository.find_by_comments(
                [comment.id for comment in comments]
            )
            logfire.info(
                "Votes fetched for annotation",
                comment_count=len(comments),
                vote_count=len(votes),
            )
            return self.tally(comments, votes, viewer_id)

    @staticmethod
    def tally(
        comments: list[Comment],
        votes: Iterable[CommentVote],
        viewer_id: Optional[UserId] = None,
    ) -> list[CommentView]:
        """Count votes per comment without touching storage.

        Args:
            comments: Comments to annotate
            votes: Raw vote rows for those comments
            viewer_id: Requesting user, if authenticated

        Returns:
            Annotated comments in the same order as ``comments``
        """
        counts: Counter[tuple[CommentId, VotePolarity]] = Counter()
        viewer_votes: dict[CommentId, VotePolarity] = {}

        for vote in votes:
            counts[(vote.comment_id, vote.polarity)] += 1
            if viewer_id is not None and vote.voter_id == viewer_id:
                viewer_votes[vote.comment_id] = vote.polarity

        return [
            CommentView(
                comment=comment,
                upvotes=counts[(comment.id, VotePolarity.UPVOTE)],
                downvotes=counts[(comment.id, VotePolarity.DOWNVOTE)],
                viewer_vote=viewer_votes.get(comment.id),
            )
            for comment in comments
        ]
