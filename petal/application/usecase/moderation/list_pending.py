"""List pending comments use case."""

from datetime import datetime

from pydantic import BaseModel, Field

from petal.application.usecase.base import BaseUseCase
from petal.domain.model import Comment, Post
from petal.domain.service import CommentService, PostService


class PostReference(BaseModel):
    """Just enough of a post for a moderator to find it."""

    post_id: str
    title: str
    slug: str


class PendingCommentItem(BaseModel):
    """Comment in the moderation queue, with submission details."""

    comment_id: str
    parent_id: str | None
    author_name: str
    author_email: str
    author_website: str
    content: str
    spam_score: int
    ip_address: str
    user_agent: str
    created_at: datetime
    post: PostReference | None  # None if the post has since disappeared

    @classmethod
    def from_comment(cls, comment: Comment, post: Post | None) -> "PendingCommentItem":
        return cls(
            comment_id=str(comment.id),
            parent_id=str(comment.parent_id) if comment.parent_id else None,
            author_name=comment.author.name,
            author_email=str(comment.author.email),
            author_website=comment.author.website,
            content=comment.content,
            spam_score=comment.spam_score,
            ip_address=comment.ip_address,
            user_agent=comment.user_agent,
            created_at=comment.created_at,
            post=PostReference(
                post_id=str(post.id), title=post.title, slug=str(post.slug)
            )
            if post
            else None,
        )


class ListPendingCommentsRequest(BaseModel):
    """List pending comments request."""

    limit: int = Field(default=100, ge=1, le=500)
    offset: int = Field(default=0, ge=0)


class ListPendingCommentsResponse(BaseModel):
    """List pending comments response."""

    comments: list[PendingCommentItem]
    total: int


class ListPendingCommentsUseCase(BaseUseCase):
    """Use case for the moderator queue."""

    def __init__(
        self, comment_service: CommentService, post_service: PostService
    ) -> None:
        """Initialize list pending comments use case.

        Args:
            comment_service: Comment domain service
            post_service: Post domain service
        """
        self.comment_service = comment_service
        self.post_service = post_service

    async def execute(
        self, request: ListPendingCommentsRequest
    ) -> ListPendingCommentsResponse:
        """Execute list pending comments flow.

        Args:
            request: Pagination parameters

        Returns:
            Pending comments, newest first, each with its post's title and slug
        """
        comments = await self.comment_service.get_pending_moderation(
            limit=request.limit, offset=request.offset
        )

        # Batch lookup for post context (avoid N+1)
        posts = await self.post_service.get_posts_by_ids(
            [comment.post_id for comment in comments]
        )

        items = [
            PendingCommentItem.from_comment(comment, posts.get(comment.post_id))
            for comment in comments
        ]

        return ListPendingCommentsResponse(comments=items, total=len(items))
