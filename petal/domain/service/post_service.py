"""Post domain service."""

import logfire

from petal.domain.model.post import Post
from petal.domain.repository import PostRepository
from petal.domain.value import PostId

from .base import Service


class PostService(Service):
    """Domain service for the post records comments refer to."""

    def __init__(self, post_repository: PostRepository) -> None:
        """Initialize post service.

        Args:
            post_repository: Post repository
        """
        self.post_repository = post_repository

    async def save_post(self, post: Post) -> Post:
        """Save a post.

        Args:
            post: Post to save

        Returns:
            Saved post
        """
        with logfire.span(
            "post_service.save_post", post_id=str(post.id), title=post.title
        ):
            saved = await self.post_repository.save(post)
            logfire.info("Post saved", post_id=str(saved.id))
            return saved

    async def get_post_by_id(self, post_id: PostId) -> Post | None:
        """Get a post by ID.

        Args:
            post_id: Post ID

        Returns:
            Post if found, None otherwise
        """
        with logfire.span("post_service.get_post_by_id", post_id=str(post_id)):
            post = await self.post_repository.find_by_id(post_id)

            if post:
                logfire.info("Post found", post_id=str(post_id), title=post.title)
            else:
                logfire.warn("Post not found", post_id=str(post_id))

            return post

    async def get_posts_by_ids(self, post_ids: list[PostId]) -> dict[PostId, Post]:
        """Get several posts at once, keyed by ID.

        Args:
            post_ids: Post IDs (duplicates allowed)

        Returns:
            Mapping of found post IDs to posts
        """
        unique_ids = list(dict.fromkeys(post_ids))
        if not unique_ids:
            return {}

        with logfire.span("post_service.get_posts_by_ids", count=len(unique_ids)):
            posts = await self.post_repository.find_by_ids(unique_ids)
            return {post.id: post for post in posts}
