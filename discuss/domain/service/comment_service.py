"""Comment domain service."""

from datetime import datetime
from typing import Optional
from uuid import uuid4

import logfire

from discuss.config import ThreadSettings
from discuss.domain.error import (
    ContentDeletedError,
    NotFoundError,
    ThreadTooLargeError,
    VoteNotFoundError,
)
from discuss.domain.model import Comment, CommentVote
from discuss.domain.repository import CommentRepository, CommentVoteRepository
from discuss.domain.value import (
    CommentId,
    PageRequest,
    ParentId,
    ParentKind,
    UserId,
    VotePolarity,
)


class CommentService:
    """Domain service for comment and comment vote storage operations.

    Applies the storage-level rules (delete policy, vote upsert, edit guard)
    but no authorization; that is the lifecycle service's job.
    """

    def __init__(
        self,
        comment_repository: CommentRepository,
        vote_repository: CommentVoteRepository,
        thread_settings: ThreadSettings,
    ) -> None:
        """Initialize comment service.

        Args:
            comment_repository: Comment repository
            vote_repository: Comment vote repository
            thread_settings: Thread configuration
        """
        self.comment_repository = comment_repository
        self.vote_repository = vote_repository
        self.thread_settings = thread_settings

    async def find_comment(self, comment_id: CommentId) -> Comment | None:
        """Get a comment by ID.

        Args:
            comment_id: Comment ID

        Returns:
            Comment if found, None otherwise
        """
        with logfire.span("comment_service.find_comment", comment_id=str(comment_id)):
            comment = await self.comment_repository.find_by_id(comment_id)
            if comment:
                logfire.info("Comment found", comment_id=str(comment_id))
            else:
                logfire.warn("Comment not found", comment_id=str(comment_id))
            return comment

    async def get_comment(self, comment_id: CommentId) -> Comment:
        """Get a comment by ID.

        Raises:
            NotFoundError: If the comment does not exist
        """
        comment = await self.find_comment(comment_id)
        if comment is None:
            raise NotFoundError("Comment", str(comment_id))
        return comment

    async def list_thread(
        self, parent_kind: ParentKind, parent_id: ParentId
    ) -> list[Comment]:
        """Fetch the whole flat thread of a parent entity, oldest first.

        Args:
            parent_kind: Kind of the parent entity
            parent_id: Parent entity ID

        Returns:
            Every comment of the thread, soft-deleted ones included

        Raises:
            ThreadTooLargeError: If the thread exceeds the configured maximum
        """
        max_size = self.thread_settings.max_thread_size
        with logfire.span(
            "comment_service.list_thread",
            parent_kind=parent_kind.value,
            parent_id=str(parent_id),
            max_size=max_size,
        ):
            # One extra row tells an exactly-full thread from an oversized one
            comments = await self.comment_repository.find_by_parent(
                parent_kind, parent_id, limit=max_size + 1
            )
            if len(comments) > max_size:
                logfire.error(
                    "Thread exceeds maximum size",
                    parent_kind=parent_kind.value,
                    parent_id=str(parent_id),
                    max_size=max_size,
                )
                raise ThreadTooLargeError(str(parent_id), max_size)

            logfire.info(
                "Thread fetched",
                parent_kind=parent_kind.value,
                parent_id=str(parent_id),
                count=len(comments),
            )
            return comments

    async def list_by_author(
        self,
        author_id: UserId,
        page: PageRequest,
        parent_kind: Optional[ParentKind] = None,
        parent_id: Optional[ParentId] = None,
    ) -> tuple[list[Comment], int]:
        """Fetch one page of an author's comments, newest first.

        Args:
            author_id: Author user ID
            page: Page to fetch
            parent_kind: Restrict to one kind of parent entity
            parent_id: Restrict to one parent entity

        Returns:
            Tuple of (comments on the page, total matching comments)
        """
        with logfire.span(
            "comment_service.list_by_author",
            author_id=str(author_id),
            page=page.page,
            limit=page.limit,
        ):
            comments = await self.comment_repository.find_by_author(
                author_id,
                parent_kind=parent_kind,
                parent_id=parent_id,
                limit=page.limit,
                offset=page.offset,
            )
            total = await self.comment_repository.count_by_author(
                author_id, parent_kind=parent_kind, parent_id=parent_id
            )
            logfire.info(
                "Author comments fetched",
                author_id=str(author_id),
                count=len(comments),
                total=total,
            )
            return comments, total

    async def create_comment(
        self,
        author_id: UserId,
        parent_kind: ParentKind,
        parent_id: ParentId,
        content: str,
        parent_comment_id: CommentId | None = None,
        depth: int = 0,
    ) -> Comment:
        """Store a new root comment or reply.

        The caller is responsible for passing a ``parent_comment_id`` from
        the same thread and the matching ``depth``.

        Args:
            author_id: Author user ID
            parent_kind: Kind of the parent entity
            parent_id: Parent entity ID
            content: Comment text
            parent_comment_id: Comment being replied to (None for a root)
            depth: Nesting level of the new comment

        Returns:
            Created comment
        """
        with logfire.span(
            "comment_service.create_comment",
            parent_kind=parent_kind.value,
            parent_id=str(parent_id),
            author_id=str(author_id),
            parent_comment_id=str(parent_comment_id) if parent_comment_id else None,
        ):
            now = datetime.now()
            comment = Comment(
                id=CommentId(uuid4()),
                parent_kind=parent_kind,
                parent_id=parent_id,
                author_id=author_id,
                content=content,
                parent_comment_id=parent_comment_id,
                depth=depth,
                created_at=now,
                updated_at=now,
                deleted_at=None,
            )

            saved = await self.comment_repository.save(comment)
            logfire.info(
                "Comment created",
                comment_id=str(saved.id),
                parent_id=str(parent_id),
                is_reply=parent_comment_id is not None,
            )
            return saved

    async def update_content(self, comment_id: CommentId, content: str) -> Comment:
        """Replace the content of a comment.

        Args:
            comment_id: Comment ID
            content: New content

        Returns:
            Updated comment

        Raises:
            NotFoundError: If the comment does not exist
            ContentDeletedError: If the comment is soft-deleted
        """
        with logfire.span(
            "comment_service.update_content",
            comment_id=str(comment_id),
            content_length=len(content),
        ):
            updated = await self.comment_repository.update_content(comment_id, content)
            if updated is not None:
                logfire.info("Comment content updated", comment_id=str(comment_id))
                return updated

            # Tell a missing comment from a deleted one
            existing = await self.comment_repository.find_by_id(comment_id)
            if existing is None:
                logfire.warn("Comment not found for update", comment_id=str(comment_id))
                raise NotFoundError("Comment", str(comment_id))
            logfire.warn("Attempt to edit deleted comment", comment_id=str(comment_id))
            raise ContentDeletedError("comment", str(comment_id))

    async def delete_comment(self, comment_id: CommentId) -> bool:
        """Delete a comment, softly if it has replies.

        A comment with at least one reply keeps its row (and its replies)
        and has its content replaced; a leaf comment is removed.

        Args:
            comment_id: Comment ID

        Returns:
            True if the row was removed, False if it was soft-deleted

        Raises:
            NotFoundError: If the comment does not exist
        """
        with logfire.span("comment_service.delete_comment", comment_id=str(comment_id)):
            if await self.comment_repository.delete_if_leaf(comment_id):
                logfire.info("Comment removed", comment_id=str(comment_id))
                return True

            # Refused: either missing or it has replies
            deleted = await self.comment_repository.soft_delete(comment_id)
            if deleted is None:
                raise NotFoundError("Comment", str(comment_id))
            logfire.info("Comment soft-deleted", comment_id=str(comment_id))
            return False

    async def vote(
        self, voter_id: UserId, comment_id: CommentId, polarity: VotePolarity
    ) -> CommentVote:
        """Cast or change a vote on a comment.

        Args:
            voter_id: Voter user ID
            comment_id: Comment ID
            polarity: Vote direction

        Returns:
            The stored vote
        """
        with logfire.span(
            "comment_service.vote",
            comment_id=str(comment_id),
            voter_id=str(voter_id),
            polarity=polarity.value,
        ):
            vote = await self.vote_repository.upsert(voter_id, comment_id, polarity)
            logfire.info(
                "Comment vote stored",
                comment_id=str(comment_id),
                voter_id=str(voter_id),
                polarity=polarity.value,
            )
            return vote

    async def remove_vote(self, voter_id: UserId, comment_id: CommentId) -> None:
        """Retract a vote on a comment.

        Args:
            voter_id: Voter user ID
            comment_id: Comment ID

        Raises:
            VoteNotFoundError: If the voter has no vote on the comment
        """
        with logfire.span(
            "comment_service.remove_vote",
            comment_id=str(comment_id),
            voter_id=str(voter_id),
        ):
            deleted = await self.vote_repository.delete(voter_id, comment_id)
            if not deleted:
                logfire.warn(
                    "No vote to remove from comment",
                    comment_id=str(comment_id),
                    voter_id=str(voter_id),
                )
                raise VoteNotFoundError(str(comment_id), str(voter_id))
            logfire.info(
                "Vote removed from comment",
                comment_id=str(comment_id),
                voter_id=str(voter_id),
            )
