"""Comment lifecycle service."""

import logfire

from discuss.config import ThreadSettings
from discuss.domain.error import (
    ContentDeletedError,
    InvalidStateError,
    NotAuthorizedError,
    NotFoundError,
    ReplyTooDeepError,
    ValidationError,
)
from discuss.domain.model import Comment, CommentVote
from discuss.domain.repository import ParentEntityPort
from discuss.domain.value import CommentId, ParentId, ParentKind, UserId, VotePolarity

from .comment_service import CommentService


class CommentLifecycleService:
    """Enforces who may change a comment and when.

    A comment is either active, soft-deleted (terminal, kept because it has
    replies) or removed. Every mutation goes through here so that the parent
    entity's comment counter stays in step with the stored rows: it grows on
    every create and shrinks only when a row is actually removed.
    """

    def __init__(
        self,
        comment_service: CommentService,
        parent_ports: dict[ParentKind, ParentEntityPort],
        thread_settings: ThreadSettings,
    ) -> None:
        """Initialize lifecycle service.

        Args:
            comment_service: Comment domain service
            parent_ports: Parent entity port for each supported kind
            thread_settings: Thread configuration
        """
        self.comment_service = comment_service
        self.parent_ports = parent_ports
        self.thread_settings = thread_settings

    def _port(self, parent_kind: ParentKind) -> ParentEntityPort:
        port = self.parent_ports.get(parent_kind)
        if port is None:
            raise ValidationError(f"Unsupported parent kind: {parent_kind.value}")
        return port

    def _clean_content(self, content: str) -> str:
        cleaned = content.strip()
        if not cleaned:
            raise ValidationError("Comment content cannot be empty")
        max_length = self.thread_settings.max_content_length
        if len(cleaned) > max_length:
            raise ValidationError(
                f"Comment content exceeds {max_length} characters"
            )
        return cleaned

    async def create(
        self,
        actor_id: UserId,
        parent_kind: ParentKind,
        parent_id: ParentId,
        content: str,
        parent_comment_id: CommentId | None = None,
    ) -> Comment:
        """Create a root comment or a reply.

        Args:
            actor_id: Authenticated author
            parent_kind: Kind of the parent entity
            parent_id: Parent entity ID
            content: Comment text
            parent_comment_id: Comment being replied to (None for a root)

        Returns:
            Created comment

        Raises:
            ValidationError: If the content is empty or too long
            NotFoundError: If the parent entity or parent comment is missing
            InvalidStateError: If the parent comment belongs to another thread
            ReplyTooDeepError: If the reply would nest too deep
        """
        port = self._port(parent_kind)
        cleaned = self._clean_content(content)

        with logfire.span(
            "lifecycle.create",
            parent_kind=parent_kind.value,
            parent_id=str(parent_id),
            actor_id=str(actor_id),
        ):
            if not await port.exists(parent_id):
                logfire.warn(
                    "Parent entity not found",
                    parent_kind=parent_kind.value,
                    parent_id=str(parent_id),
                )
                raise NotFoundError(parent_kind.value.capitalize(), str(parent_id))

            depth = 0
            if parent_comment_id is not None:
                parent_comment = await self.comment_service.get_comment(
                    parent_comment_id
                )
                # Soft-deleted parents still accept replies
                if not parent_comment.belongs_to(parent_kind, parent_id):
                    logfire.warn(
                        "Reply parent belongs to another thread",
                        parent_comment_id=str(parent_comment_id),
                        parent_id=str(parent_id),
                    )
                    raise InvalidStateError(
                        "Parent comment does not belong to this thread"
                    )

                depth = parent_comment.depth + 1
                max_depth = self.thread_settings.max_reply_depth
                if depth > max_depth:
                    logfire.warn(
                        "Reply exceeds maximum depth",
                        parent_comment_id=str(parent_comment_id),
                        max_depth=max_depth,
                    )
                    raise ReplyTooDeepError(str(parent_comment_id), max_depth)

            comment = await self.comment_service.create_comment(
                author_id=actor_id,
                parent_kind=parent_kind,
                parent_id=parent_id,
                content=cleaned,
                parent_comment_id=parent_comment_id,
                depth=depth,
            )
            await port.increment_comment_count(parent_id)
            return comment

    async def update(
        self, actor_id: UserId, comment_id: CommentId, content: str
    ) -> Comment:
        """Edit a comment's content.

        Raises:
            NotFoundError: If the comment does not exist
            NotAuthorizedError: If the actor is not the author
            ContentDeletedError: If the comment is soft-deleted
            ValidationError: If the content is empty or too long
        """
        with logfire.span(
            "lifecycle.update", comment_id=str(comment_id), actor_id=str(actor_id)
        ):
            comment = await self.comment_service.get_comment(comment_id)
            if not comment.can_be_edited_by(actor_id):
                logfire.warn(
                    "Unauthorized comment edit",
                    comment_id=str(comment_id),
                    actor_id=str(actor_id),
                )
                raise NotAuthorizedError("comment", str(comment_id), str(actor_id))
            if comment.is_deleted:
                raise ContentDeletedError("comment", str(comment_id))

            cleaned = self._clean_content(content)
            return await self.comment_service.update_content(comment_id, cleaned)

    async def delete(self, actor_id: UserId, comment_id: CommentId) -> bool:
        """Delete a comment.

        Returns:
            True if the comment was removed, False if it was soft-deleted

        Raises:
            NotFoundError: If the comment does not exist
            NotAuthorizedError: If the actor is not the author
            ContentDeletedError: If the comment is already soft-deleted
        """
        with logfire.span(
            "lifecycle.delete", comment_id=str(comment_id), actor_id=str(actor_id)
        ):
            comment = await self.comment_service.get_comment(comment_id)
            if not comment.can_be_edited_by(actor_id):
                logfire.warn(
                    "Unauthorized comment delete",
                    comment_id=str(comment_id),
                    actor_id=str(actor_id),
                )
                raise NotAuthorizedError("comment", str(comment_id), str(actor_id))
            if comment.is_deleted:
                raise ContentDeletedError("comment", str(comment_id), action="delete")

            removed = await self.comment_service.delete_comment(comment_id)
            if removed:
                port = self._port(comment.parent_kind)
                await port.decrement_comment_count(comment.parent_id)
            return removed

    async def vote(
        self, actor_id: UserId, comment_id: CommentId, polarity: VotePolarity
    ) -> CommentVote:
        """Cast or change the actor's vote on a comment.

        Raises:
            NotFoundError: If the comment does not exist
        """
        await self.comment_service.get_comment(comment_id)
        return await self.comment_service.vote(actor_id, comment_id, polarity)

    async def remove_vote(self, actor_id: UserId, comment_id: CommentId) -> None:
        """Retract the actor's vote on a comment.

        Raises:
            NotFoundError: If the comment does not exist
            VoteNotFoundError: If the actor has not voted on it
        """
        await self.comment_service.get_comment(comment_id)
        await self.comment_service.remove_vote(actor_id, comment_id)
