"""Thread tree assembly.

Rebuilds the reply forest of a thread from its flat, creation-ordered list
of comments in two linear passes, without recursion or extra queries.
"""

import logfire

from discuss.domain.model import CommentView, ThreadNode
from discuss.domain.value import CommentId


class ThreadTreeBuilder:
    """Builds nested reply trees from a flat list of annotated comments."""

    def build(self, views: list[CommentView]) -> list[ThreadNode]:
        """Assemble the forest of a thread.

        Ordering:
        - Roots: newest first, so the latest discussions surface on top
        - Replies: oldest first, in natural conversation order

        A reply whose parent is not in ``views`` is left out of the tree.

        Args:
            views: Annotated comments of one thread, ordered by creation
                time ascending

        Returns:
            Root nodes with their replies attached
        """
        with logfire.span("thread_tree_builder.build", comment_count=len(views)):
            index: dict[CommentId, ThreadNode] = {}
            roots: list[ThreadNode] = []

            # Pass 1: index every node and pick out the roots
            for view in views:
                node = ThreadNode(view=view)
                index[view.comment.id] = node
                if view.comment.parent_comment_id is None:
                    roots.append(node)

            # Pass 2: attach replies to their parents
            orphans = 0
            for view in views:
                parent_comment_id = view.comment.parent_comment_id
                if parent_comment_id is None:
                    continue
                parent = index.get(parent_comment_id)
                if parent is None:
                    orphans += 1
                    logfire.warn(
                        "Reply references missing parent, omitting from tree",
                        comment_id=str(view.comment.id),
                        parent_comment_id=str(parent_comment_id),
                    )
                    continue
                parent.replies.append(index[view.comment.id])

            # Newest roots first; equal timestamps keep the later insert on top
            position = {id(node): i for i, node in enumerate(roots)}
            roots.sort(
                key=lambda node: (node.comment.created_at, position[id(node)]),
                reverse=True,
            )

            logfire.info(
                "Thread tree built",
                root_count=len(roots),
                comment_count=len(views),
                orphan_count=orphans,
            )
            return roots

