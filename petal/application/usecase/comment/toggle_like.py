"""Toggle like use case."""

from uuid import UUID

from pydantic import BaseModel

from petal.application.usecase.base import BaseUseCase
from petal.domain.service import CommentService
from petal.domain.value import CommentId, UserId


class ToggleLikeRequest(BaseModel):
    """Toggle like request."""

    comment_id: str  # UUID string
    user_id: str  # User ID from authenticated user


class ToggleLikeResponse(BaseModel):
    """Toggle like response."""

    comment_id: str
    liked: bool
    likes_count: int


class ToggleLikeUseCase(BaseUseCase):
    """Use case for liking or un-liking a comment."""

    def __init__(self, comment_service: CommentService) -> None:
        """Initialize toggle like use case.

        Args:
            comment_service: Comment domain service
        """
        self.comment_service = comment_service

    async def execute(self, request: ToggleLikeRequest) -> ToggleLikeResponse:
        """Execute toggle like flow.

        Args:
            request: Toggle like request

        Returns:
            Whether the user now likes the comment, and the like count

        Raises:
            NotFoundError: If the comment does not exist
        """
        user_id = UserId(UUID(request.user_id))

        comment = await self.comment_service.toggle_like(
            CommentId(UUID(request.comment_id)), user_id
        )

        return ToggleLikeResponse(
            comment_id=str(comment.id),
            liked=comment.has_liked(user_id),
            likes_count=comment.likes_count,
        )
