"""Unit tests for ThreadTreeBuilder."""

from uuid import uuid4

from discuss.domain.service import ThreadTreeBuilder
from discuss.domain.value import CommentId
from tests.factories import make_comment, make_view


def _ids(nodes):
    return [node.comment.id for node in nodes]


def _count_nodes(roots):
    count = 0
    stack = list(roots)
    while stack:
        node = stack.pop()
        count += 1
        stack.extend(node.replies)
    return count


class TestBuild:
    """Tests for build method."""

    def test_empty_thread_has_no_roots(self):
        """An empty thread should build an empty forest."""
        assert ThreadTreeBuilder().build([]) == []

    def test_roots_newest_first_replies_oldest_first(self, parent_id):
        """Roots are ordered newest first while replies keep creation order."""
        # Arrange
        r1 = make_comment(parent_id, 0)
        a = make_comment(parent_id, 1, parent_comment_id=r1.id)
        c = make_comment(parent_id, 2, parent_comment_id=a.id)
        b = make_comment(parent_id, 3, parent_comment_id=r1.id)
        r2 = make_comment(parent_id, 5)
        views = [make_view(x) for x in (r1, a, c, b, r2)]

        # Act
        roots = ThreadTreeBuilder().build(views)

        # Assert
        assert _ids(roots) == [r2.id, r1.id]
        first = roots[1]
        assert _ids(first.replies) == [a.id, b.id]
        assert _ids(first.replies[0].replies) == [c.id]
        assert first.replies[1].replies == []
        assert roots[0].replies == []

    def test_equal_timestamps_put_later_root_first(self, parent_id):
        """Roots created at the same instant come out in reverse input order."""
        # Arrange
        first = make_comment(parent_id, 0)
        second = make_comment(parent_id, 0)

        # Act
        roots = ThreadTreeBuilder().build([make_view(first), make_view(second)])

        # Assert
        assert _ids(roots) == [second.id, first.id]

    def test_orphan_reply_is_omitted(self, parent_id):
        """A reply whose parent is missing is left out of the tree."""
        # Arrange
        root = make_comment(parent_id, 0)
        orphan = make_comment(parent_id, 1, parent_comment_id=CommentId(uuid4()))
        views = [make_view(root), make_view(orphan)]

        # Act
        roots = ThreadTreeBuilder().build(views)

        # Assert
        assert _ids(roots) == [root.id]
        assert roots[0].replies == []
        assert _count_nodes(roots) == 1

    def test_descendants_of_orphan_are_omitted(self, parent_id):
        """Replies under an orphan are unreachable too."""
        # Arrange
        orphan = make_comment(parent_id, 0, parent_comment_id=CommentId(uuid4()))
        child = make_comment(parent_id, 1, parent_comment_id=orphan.id)

        # Act
        roots = ThreadTreeBuilder().build([make_view(orphan), make_view(child)])

        # Assert
        assert roots == []

    def test_soft_deleted_comment_keeps_its_replies(self, parent_id):
        """A soft-deleted comment stays in the tree with its replies attached."""
        # Arrange
        root = make_comment(parent_id, 0, deleted=True)
        reply = make_comment(parent_id, 1, parent_comment_id=root.id)

        # Act
        roots = ThreadTreeBuilder().build([make_view(root), make_view(reply)])

        # Assert
        assert roots[0].comment.content == "[deleted]"
        assert _ids(roots[0].replies) == [reply.id]

    def test_every_stored_comment_is_reachable(self, parent_id):
        """Roots plus reachable replies account for every comment."""
        # Arrange
        comments = [make_comment(parent_id, 0)]
        for minute in range(1, 40):
            # Each comment replies to one a third of the way back, or is a root
            target = comments[minute // 3] if minute % 4 else None
            comments.append(
                make_comment(
                    parent_id,
                    minute,
                    parent_comment_id=target.id if target else None,
                )
            )

        # Act
        roots = ThreadTreeBuilder().build([make_view(c) for c in comments])

        # Assert
        assert _count_nodes(roots) == len(comments)
        assert len(roots) == sum(1 for c in comments if c.is_root)

    def test_deep_chain_builds_without_recursion_limit(self, parent_id):
        """A reply chain deeper than the interpreter's recursion limit still builds."""
        # Arrange
        chain = [make_comment(parent_id, 0)]
        for minute in range(1, 3000):
            chain.append(
                make_comment(parent_id, minute, parent_comment_id=chain[-1].id)
            )

        # Act
        roots = ThreadTreeBuilder().build([make_view(c) for c in chain])

        # Assert
        assert len(roots) == 1
        assert _count_nodes(roots) == 3000
