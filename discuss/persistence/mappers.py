"""Mappers for converting between database rows and domain models.

Since we're using Pydantic domain models (immutable), we use manual mapping
instead of SQLAlchemy's classical imperative mapping.
"""

from typing import Any, Dict
from uuid import UUID

from discuss.domain.model import Comment, CommentVote
from discuss.domain.value import (
    CommentId,
    ParentId,
    ParentKind,
    UserId,
    VotePolarity,
)


def _uuid(value: Any) -> UUID:
    return UUID(value) if isinstance(value, str) else value


def row_to_comment(row: Dict[str, Any]) -> Comment:
    """Convert database row to Comment domain model.

    Args:
        row: Database row as dict

    Returns:
        Comment domain model
    """
    return Comment(
        id=CommentId(_uuid(row["id"])),
        parent_kind=ParentKind(row["parent_kind"]),
        parent_id=ParentId(_uuid(row["parent_id"])),
        author_id=UserId(_uuid(row["author_id"])),
        content=row["content"],
        parent_comment_id=CommentId(_uuid(row["parent_comment_id"]))
        if row.get("parent_comment_id")
        else None,
        depth=row["depth"],
        created_at=row["created_at"],
        updated_at=row["updated_at"],
        deleted_at=row.get("deleted_at"),
    )


def comment_to_dict(comment: Comment) -> Dict[str, Any]:
    """Convert Comment domain model to database dict.

    Args:
        comment: Comment domain model

    Returns:
        Dict suitable for database insertion
    """
    data = comment.model_dump()
    data["parent_kind"] = comment.parent_kind.value
    return data


def row_to_comment_vote(row: Dict[str, Any]) -> CommentVote:
    """Convert database row to CommentVote domain model.

    Args:
        row: Database row as dict

    Returns:
        CommentVote domain model
    """
    return CommentVote(
        voter_id=UserId(_uuid(row["voter_id"])),
        comment_id=CommentId(_uuid(row["comment_id"])),
        polarity=VotePolarity(row["polarity"]),
        created_at=row["created_at"],
        updated_at=row["updated_at"],
    )
