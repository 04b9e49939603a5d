"""Response models shared by comment use cases."""

from datetime import datetime

from pydantic import BaseModel

from discuss.domain.model import Comment, CommentView, ThreadNode
from discuss.domain.value import ParentKind, VotePolarity


class CommentResponse(BaseModel):
    """A comment with its vote tallies, as returned by the API."""

    comment_id: str
    parent_kind: ParentKind
    parent_id: str
    parent_comment_id: str | None
    author_id: str
    content: str
    deleted: bool
    upvotes: int
    downvotes: int
    viewer_vote: VotePolarity | None
    created_at: datetime
    updated_at: datetime

    @classmethod
    def from_comment(
        cls,
        comment: Comment,
        upvotes: int = 0,
        downvotes: int = 0,
        viewer_vote: VotePolarity | None = None,
    ) -> "CommentResponse":
        """Convert a stored comment to a response model.

        Args:
            comment: Domain comment
            upvotes: Number of upvotes
            downvotes: Number of downvotes
            viewer_vote: The requesting user's vote, if any

        Returns:
            API response model
        """
        return cls(
            comment_id=str(comment.id),
            parent_kind=comment.parent_kind,
            parent_id=str(comment.parent_id),
            parent_comment_id=str(comment.parent_comment_id)
            if comment.parent_comment_id
            else None,
            author_id=str(comment.author_id),
            content=comment.content,
            deleted=comment.is_deleted,
            upvotes=upvotes,
            downvotes=downvotes,
            viewer_vote=viewer_vote,
            created_at=comment.created_at,
            updated_at=comment.updated_at,
        )

    @classmethod
    def from_view(cls, view: CommentView) -> "CommentResponse":
        """Convert an annotated comment to a response model."""
        return cls.from_comment(
            view.comment,
            upvotes=view.upvotes,
            downvotes=view.downvotes,
            viewer_vote=view.viewer_vote,
        )


class CommentNodeResponse(CommentResponse):
    """Comment tree node for API response.

    Recursive structure mirroring the domain thread tree.
    """

    replies: list["CommentNodeResponse"]

    @classmethod
    def from_domain(cls, node: ThreadNode) -> "CommentNodeResponse":
        """Convert domain ThreadNode to response model.

        Children are converted before their parent using an explicit stack,
        so deep reply chains do not consume the call stack.

        Args:
            node: Domain thread node

        Returns:
            API response model with every reply converted
        """
        converted: dict[int, CommentNodeResponse] = {}
        stack: list[tuple[ThreadNode, bool]] = [(node, False)]
        while stack:
            current, children_done = stack.pop()
            if not children_done:
                stack.append((current, True))
                stack.extend((reply, False) for reply in current.replies)
                continue
            base = CommentResponse.from_view(current.view)
            converted[id(current)] = cls(
                **base.model_dump(),
                replies=[converted.pop(id(reply)) for reply in current.replies],
            )
        return converted[id(node)]
