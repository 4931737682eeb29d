"""Get comments use case."""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel

from petal.application.usecase.base import BaseUseCase
from petal.domain.model import Comment
from petal.domain.service import CommentService
from petal.domain.value import FavoriteFlower, Mood, PostId


class CommentItem(BaseModel):
    """Public view of a comment.

    Leaves out the commenter's email and network details.
    """

    comment_id: str
    post_id: str
    parent_id: str | None
    author_name: str
    author_website: str
    content: str
    likes_count: int
    replies_count: int
    favorite_flower: FavoriteFlower
    mood: Mood
    is_edited: bool
    edited_at: datetime | None
    created_at: datetime

    @classmethod
    def from_comment(cls, comment: Comment) -> "CommentItem":
        return cls(
            comment_id=str(comment.id),
            post_id=str(comment.post_id),
            parent_id=str(comment.parent_id) if comment.parent_id else None,
            author_name=comment.author.name,
            author_website=comment.author.website,
            content=comment.content,
            likes_count=comment.likes_count,
            replies_count=comment.replies_count,
            favorite_flower=comment.favorite_flower,
            mood=comment.mood,
            is_edited=comment.is_edited,
            edited_at=comment.edited_at,
            created_at=comment.created_at,
        )


class CommentThreadItem(CommentItem):
    """Top-level comment with its visible replies."""

    replies: list[CommentItem]


class GetCommentsRequest(BaseModel):
    """Get comments request."""

    post_id: str  # UUID string


class GetCommentsResponse(BaseModel):
    """Get comments response."""

    post_id: str
    comments: list[CommentThreadItem]
    total: int


class GetCommentsUseCase(BaseUseCase):
    """Use case for listing the approved comments of a post."""

    def __init__(self, comment_service: CommentService) -> None:
        """Initialize get comments use case.

        Args:
            comment_service: Comment domain service
        """
        self.comment_service = comment_service

    async def execute(self, request: GetCommentsRequest) -> GetCommentsResponse:
        """Execute get comments flow.

        Args:
            request: Get comments request with post ID

        Returns:
            Approved top-level comments (newest first), each with its
            approved replies (oldest first)
        """
        post_id = PostId(UUID(request.post_id))

        threads = await self.comment_service.get_approved_for_post(post_id)

        items = [
            CommentThreadItem(
                **CommentItem.from_comment(thread.comment).model_dump(),
                replies=[CommentItem.from_comment(reply) for reply in thread.replies],
            )
            for thread in threads
        ]

        return GetCommentsResponse(
            post_id=request.post_id,
            comments=items,
            total=len(items),
        )
