"""Edit comment use case."""

from uuid import UUID

from pydantic import BaseModel

from petal.application.usecase.base import BaseUseCase
from petal.domain.service import CommentService
from petal.domain.value import CommentId, UserId

from .get_comments import CommentItem


class EditCommentRequest(BaseModel):
    """Edit comment request."""

    comment_id: str  # UUID string
    user_id: str  # Current user ID (must be the comment's author)
    content: str


class EditCommentUseCase(BaseUseCase):
    """Use case for a signed-in commenter changing their comment text."""

    def __init__(self, comment_service: CommentService) -> None:
        """Initialize edit comment use case.

        Args:
            comment_service: Comment domain service
        """
        self.comment_service = comment_service

    async def execute(self, request: EditCommentRequest) -> CommentItem:
        """Execute edit comment flow.

        Args:
            request: Edit comment request

        Returns:
            Updated comment

        Raises:
            NotFoundError: If the comment does not exist
            NotAuthorizedError: If the user did not write the comment
            ValidationError: If the new content has an invalid length
        """
        comment = await self.comment_service.edit_content(
            comment_id=CommentId(UUID(request.comment_id)),
            editor_id=UserId(UUID(request.user_id)),
            content=request.content,
        )
        return CommentItem.from_comment(comment)
