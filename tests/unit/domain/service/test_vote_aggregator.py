"""Unit tests for VoteAggregator."""

from uuid import uuid4

import pytest

from discuss.domain.model import CommentVote
from discuss.domain.repository import CommentVoteRepository
from discuss.domain.service import VoteAggregator
from discuss.domain.value import UserId, VotePolarity
from tests.factories import make_comment
from tests.harness import create_env_fixture

# Unit test fixture - everything mocked, no docker needed
unit_env = create_env_fixture()


class TestTally:
    """Tests for the storage-free tally."""

    def test_counts_each_polarity_per_comment(self, parent_id):
        """Upvotes and downvotes are counted per comment."""
        # Arrange
        first = make_comment(parent_id, 0)
        second = make_comment(parent_id, 1)
        votes = [
            CommentVote(voter_id=UserId(uuid4()), comment_id=first.id, polarity=VotePolarity.UPVOTE),
            CommentVote(voter_id=UserId(uuid4()), comment_id=first.id, polarity=VotePolarity.UPVOTE),
            CommentVote(voter_id=UserId(uuid4()), comment_id=first.id, polarity=VotePolarity.DOWNVOTE),
            CommentVote(voter_id=UserId(uuid4()), comment_id=second.id, polarity=VotePolarity.DOWNVOTE),
        ]

        # Act
        views = VoteAggregator.tally([first, second], votes)

        # Assert
        assert [(v.upvotes, v.downvotes) for v in views] == [(2, 1), (0, 1)]
        assert all(v.viewer_vote is None for v in views)

    def test_reports_viewer_vote(self, parent_id):
        """The viewer's own polarity is attached to the comments they voted on."""
        # Arrange
        viewer = UserId(uuid4())
        voted = make_comment(parent_id, 0)
        untouched = make_comment(parent_id, 1)
        votes = [
            CommentVote(voter_id=viewer, comment_id=voted.id, polarity=VotePolarity.DOWNVOTE),
            CommentVote(voter_id=UserId(uuid4()), comment_id=untouched.id, polarity=VotePolarity.UPVOTE),
        ]

        # Act
        views = VoteAggregator.tally([voted, untouched], votes, viewer_id=viewer)

        # Assert
        assert views[0].viewer_vote == VotePolarity.DOWNVOTE
        assert views[1].viewer_vote is None

    def test_comment_without_votes_has_zero_tallies(self, parent_id):
        """Comments nobody voted on still get a view with zero counts."""
        comment = make_comment(parent_id, 0)

        [view] = VoteAggregator.tally([comment], [])

        assert view.upvotes == 0
        assert view.downvotes == 0
        assert view.comment == comment


class TestAnnotate:
    """Tests for annotate against the vote repository."""

    @pytest.mark.asyncio
    async def test_annotate_reads_current_votes(self, unit_env, parent_id):
        """Annotation reflects the votes stored at read time."""
        # Arrange
        aggregator = await unit_env.get(VoteAggregator)
        vote_repo = await unit_env.get(CommentVoteRepository)
        comment = make_comment(parent_id, 0)
        viewer = UserId(uuid4())
        await vote_repo.upsert(viewer, comment.id, VotePolarity.UPVOTE)
        await vote_repo.upsert(UserId(uuid4()), comment.id, VotePolarity.UPVOTE)

        # Act
        [view] = await aggregator.annotate([comment], viewer_id=viewer)

        # Assert
        assert view.upvotes == 2
        assert view.downvotes == 0
        assert view.viewer_vote == VotePolarity.UPVOTE

        # A changed vote shows up on the next read
        await vote_repo.upsert(viewer, comment.id, VotePolarity.DOWNVOTE)
        [view] = await aggregator.annotate([comment], viewer_id=viewer)
        assert (view.upvotes, view.downvotes) == (1, 1)

    @pytest.mark.asyncio
    async def test_annotate_empty_list(self, unit_env):
        """Annotating nothing returns nothing."""
        aggregator = await unit_env.get(VoteAggregator)

        assert await aggregator.annotate([]) == []
