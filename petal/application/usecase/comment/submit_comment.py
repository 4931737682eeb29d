"""Submit comment use case."""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel

from petal.application.usecase.base import BaseUseCase
from petal.domain.error import NotFoundError
from petal.domain.model import CommentAuthor
from petal.domain.service import CommentService, PostService
from petal.domain.value import (
    CommentId,
    CommentStatus,
    Email,
    FavoriteFlower,
    Mood,
    PostId,
    UserId,
)


class SubmitCommentRequest(BaseModel):
    """Submit comment request."""

    post_id: str  # UUID string
    author_name: str
    author_email: str
    author_website: str = ""
    author_user_id: str | None = None  # Set when the commenter is signed in
    content: str
    parent_id: str | None = None  # Parent comment ID for replies
    ip_address: str
    user_agent: str
    favorite_flower: FavoriteFlower = FavoriteFlower.OTHER
    mood: Mood = Mood.OTHER


class SubmitCommentResponse(BaseModel):
    """Submit comment response.

    Spam-flagged submissions are acknowledged like any other; ``status``
    tells the caller whether the comment awaits review or was filed as spam.
    """

    comment_id: str
    post_id: str
    parent_id: str | None
    status: CommentStatus
    created_at: datetime
    message: str


class SubmitCommentUseCase(BaseUseCase):
    """Use case for submitting a comment on a post or a reply to a comment."""

    def __init__(
        self,
        comment_service: CommentService,
        post_service: PostService,
    ) -> None:
        """Initialize submit comment use case.

        Args:
            comment_service: Comment domain service
            post_service: Post domain service
        """
        self.comment_service = comment_service
        self.post_service = post_service

    async def execute(self, request: SubmitCommentRequest) -> SubmitCommentResponse:
        """Execute submit comment flow.

        Steps:
        1. Verify post exists via post service
        2. Build author details (validates name and email)
        3. Create comment via comment service (validates, scores, links reply)

        Args:
            request: Submit comment request

        Returns:
            Submit comment response

        Raises:
            NotFoundError: If the post or parent comment does not exist
            ValueError: If ids, author fields or content are invalid
        """
        post_id = PostId(UUID(request.post_id))

        post = await self.post_service.get_post_by_id(post_id)
        if not post:
            raise NotFoundError("Post", request.post_id)

        author = CommentAuthor(
            name=request.author_name,
            email=Email(request.author_email),
            website=request.author_website,
            user_id=UserId(UUID(request.author_user_id))
            if request.author_user_id
            else None,
        )

        comment = await self.comment_service.create_comment(
            post_id=post_id,
            author=author,
            content=request.content,
            ip_address=request.ip_address,
            user_agent=request.user_agent,
            parent_id=CommentId(UUID(request.parent_id)) if request.parent_id else None,
            favorite_flower=request.favorite_flower,
            mood=request.mood,
        )

        return SubmitCommentResponse(
            comment_id=str(comment.id),
            post_id=str(comment.post_id),
            parent_id=str(comment.parent_id) if comment.parent_id else None,
            status=comment.status,
            created_at=comment.created_at,
            message="Comment submitted and awaiting moderation",
        )
