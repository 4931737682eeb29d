"""In-memory post repository for testing."""

from typing import Optional, Sequence

from petal.domain.model.post import Post
from petal.domain.repository.post import PostRepository
from petal.domain.value import PostId


class InMemoryPostRepository(PostRepository):
    """In-memory implementation of PostRepository for testing."""

    def __init__(self) -> None:
        self._posts: dict[PostId, Post] = {}

    async def find_by_id(self, post_id: PostId) -> Optional[Post]:
        """Find a post by ID."""
        return self._posts.get(post_id)

    async def find_by_ids(self, post_ids: Sequence[PostId]) -> list[Post]:
        """Find posts by a batch of IDs."""
        return [self._posts[pid] for pid in set(post_ids) if pid in self._posts]

    async def save(self, post: Post) -> Post:
        """Save or update a post."""
        self._posts[post.id] = post
        return post
