"""Moderation domain service."""

import logfire

from petal.domain.model.comment import Comment
from petal.domain.repository import CommentRepository
from petal.domain.value import CommentId, ModerationAction, UserId

from .base import Service
from .comment_service import CommentService


class ModerationService(Service):
    """Domain service for moderator decisions on comments.

    Any decision can be taken from any status, so a comment filed as spam
    can be approved directly.
    """

    def __init__(
        self,
        comment_repository: CommentRepository,
        comment_service: CommentService,
    ) -> None:
        """Initialize moderation service.

        Args:
            comment_repository: Comment repository
            comment_service: Comment domain service
        """
        self.comment_repository = comment_repository
        self.comment_service = comment_service

    async def moderate(
        self,
        comment_id: CommentId,
        action: ModerationAction,
        moderator_id: UserId,
        reason: str | None = None,
    ) -> Comment:
        """Apply a moderator decision to a comment and persist it.

        Args:
            comment_id: Comment ID
            action: Decision to apply
            moderator_id: Moderator user ID
            reason: Optional reason (reject and spam fall back to a default)

        Returns:
            Moderated comment

        Raises:
            NotFoundError: If the comment does not exist
            ConcurrentModificationError: If the comment changed meanwhile
        """
        with logfire.span(
            "moderation_service.moderate",
            comment_id=str(comment_id),
            action=action.value,
            moderator_id=str(moderator_id),
        ):
            comment = await self.comment_service.require_comment(comment_id)
            previous_status = comment.status

            saved = await self.comment_repository.save(
                comment.moderate(action, moderator_id, reason)
            )
            logfire.info(
                "Comment moderated",
                comment_id=str(comment_id),
                action=action.value,
                from_status=previous_status.value,
                to_status=saved.status.value,
                moderator_id=str(moderator_id),
            )
            return saved

    async def approve(
        self, comment_id: CommentId, moderator_id: UserId, reason: str | None = None
    ) -> Comment:
        return await self.moderate(
            comment_id, ModerationAction.APPROVE, moderator_id, reason
        )

    async def reject(
        self, comment_id: CommentId, moderator_id: UserId, reason: str | None = None
    ) -> Comment:
        return await self.moderate(
            comment_id, ModerationAction.REJECT, moderator_id, reason
        )

    async def mark_as_spam(
        self, comment_id: CommentId, moderator_id: UserId, reason: str | None = None
    ) -> Comment:
        return await self.moderate(
            comment_id, ModerationAction.SPAM, moderator_id, reason
        )
