"""Unit tests for PaginationPolicy."""

from discuss.config import ThreadSettings
from discuss.domain.model import ThreadNode
from discuss.domain.service import PaginationPolicy
from tests.factories import make_comment, make_view


def _roots(parent_id, count):
    return [ThreadNode(view=make_view(make_comment(parent_id, i))) for i in range(count)]


class TestPageRequest:
    """Tests for page_request defaults and bounds."""

    def test_defaults_from_settings(self):
        """Missing page and limit fall back to configured defaults."""
        policy = PaginationPolicy(ThreadSettings(default_page_size=7, max_page_size=50))

        request = policy.page_request()

        assert request.page == 1
        assert request.limit == 7

    def test_limit_capped_by_settings(self):
        """Limits above the configured maximum are capped."""
        policy = PaginationPolicy(ThreadSettings(max_page_size=10, default_page_size=5))

        request = policy.page_request(page=2, limit=50)

        assert request.limit == 10
        assert request.offset == 10


class TestPaginate:
    """Tests for paginate method."""

    def test_total_counts_roots_regardless_of_page(self, parent_id):
        """Total is the number of roots for every page and limit."""
        # Arrange
        policy = PaginationPolicy(ThreadSettings())
        roots = _roots(parent_id, 5)

        # Act & Assert
        for page in (1, 2, 3, 4):
            for limit in (1, 2, 5, 100):
                result = policy.paginate(roots, policy.page_request(page, limit))
                assert result.total == 5
                assert len(result.items) <= limit

    def test_slices_requested_page(self, parent_id):
        """The requested window of roots is returned with page metadata."""
        # Arrange
        policy = PaginationPolicy(ThreadSettings())
        roots = _roots(parent_id, 5)

        # Act
        result = policy.paginate(roots, policy.page_request(page=3, limit=2))

        # Assert
        assert result.items == roots[4:]
        assert result.pagination.page == 3
        assert result.pagination.limit == 2
        assert result.pagination.pages == 3

    def test_page_past_the_end_is_empty(self, parent_id):
        """Pages beyond the last root return no items but keep the total."""
        policy = PaginationPolicy(ThreadSettings())

        result = policy.paginate(_roots(parent_id, 3), policy.page_request(page=9, limit=2))

        assert result.items == []
        assert result.total == 3

    def test_replies_are_not_paginated(self, parent_id):
        """A root on the page carries all its replies, whatever the limit."""
        # Arrange
        policy = PaginationPolicy(ThreadSettings())
        root = ThreadNode(view=make_view(make_comment(parent_id, 0)))
        root.replies = [
            ThreadNode(view=make_view(make_comment(parent_id, i, parent_comment_id=root.comment.id)))
            for i in range(1, 8)
        ]

        # Act
        result = policy.paginate([root], policy.page_request(page=1, limit=1))

        # Assert
        assert len(result.items[0].replies) == 7
