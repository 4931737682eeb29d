"""Post repository interface."""

from abc import ABC, abstractmethod
from typing import List, Optional, Sequence

from petal.domain.model.post import Post
from petal.domain.value import PostId


class PostRepository(ABC):
    """Repository for the Post reference records comments point at."""

    @abstractmethod
    async def find_by_id(self, post_id: PostId) -> Optional[Post]:
        """Find a post by ID.

        Args:
            post_id: The post's unique identifier

        Returns:
            The post if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_by_ids(self, post_ids: Sequence[PostId]) -> List[Post]:
        """Find posts by a batch of IDs.

        Args:
            post_ids: IDs to look up (unknown IDs are skipped)

        Returns:
            Matching posts, in no particular order
        """
        pass

    @abstractmethod
    async def save(self, post: Post) -> Post:
        """Save a post (create or update).

        Args:
            post: The post to save

        Returns:
            The saved post
        """
        pass
