"""Moderate comment use case."""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel

from petal.application.usecase.base import BaseUseCase
from petal.domain.service import ModerationService
from petal.domain.value import CommentId, CommentStatus, ModerationAction, UserId


class ModerateCommentRequest(BaseModel):
    """Moderate comment request."""

    comment_id: str  # UUID string
    moderator_id: str  # User ID of the moderator
    action: ModerationAction
    reason: str | None = None


class ModerateCommentResponse(BaseModel):
    """Moderate comment response."""

    comment_id: str
    status: CommentStatus
    moderated_by: str
    moderated_at: datetime
    moderation_reason: str | None


class ModerateCommentUseCase(BaseUseCase):
    """Use case for approving, rejecting or flagging a comment."""

    def __init__(self, moderation_service: ModerationService) -> None:
        """Initialize moderate comment use case.

        Args:
            moderation_service: Moderation domain service
        """
        self.moderation_service = moderation_service

    async def execute(self, request: ModerateCommentRequest) -> ModerateCommentResponse:
        """Execute moderate comment flow.

        Args:
            request: Moderate comment request

        Returns:
            Comment's moderation state after the decision

        Raises:
            NotFoundError: If the comment does not exist
            ConcurrentModificationError: If the comment changed meanwhile
        """
        comment = await self.moderation_service.moderate(
            comment_id=CommentId(UUID(request.comment_id)),
            action=request.action,
            moderator_id=UserId(UUID(request.moderator_id)),
            reason=request.reason,
        )

        return ModerateCommentResponse(
            comment_id=str(comment.id),
            status=comment.status,
            moderated_by=str(comment.moderated_by),
            moderated_at=comment.moderated_at,
            moderation_reason=comment.moderation_reason,
        )
