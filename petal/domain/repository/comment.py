"""Comment repository interface."""

from abc import ABC, abstractmethod
from typing import List, Optional, Sequence

from petal.domain.model.comment import Comment
from petal.domain.value import CommentId, CommentStatus, PostId


class CommentRepository(ABC):
    """Repository for Comment entity.

    Defines the contract for comment persistence operations.
    Implementations live in the infrastructure layer.
    """

    @abstractmethod
    async def find_by_id(self, comment_id: CommentId) -> Optional[Comment]:
        """Find a comment by ID.

        Args:
            comment_id: The comment's unique identifier

        Returns:
            The comment if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_by_ids(
        self,
        comment_ids: Sequence[CommentId],
        status: Optional[CommentStatus] = None,
    ) -> List[Comment]:
        """Find comments by a batch of IDs, oldest first.

        Args:
            comment_ids: IDs to look up (unknown IDs are skipped)
            status: Only return comments with this status

        Returns:
            Matching comments ordered by creation time ascending
        """
        pass

    @abstractmethod
    async def find_top_level_by_post(
        self, post_id: PostId, status: CommentStatus
    ) -> List[Comment]:
        """Find comments without a parent on a post, newest first.

        Args:
            post_id: The post ID
            status: Only return comments with this status

        Returns:
            Top-level comments ordered by creation time descending
        """
        pass

    @abstractmethod
    async def find_by_status(
        self,
        status: CommentStatus,
        limit: int = 100,
        offset: int = 0,
    ) -> List[Comment]:
        """Find comments across all posts by status, newest first.

        Args:
            status: Moderation status to filter on
            limit: Maximum number of comments to return
            offset: Number of comments to skip

        Returns:
            Comments ordered by creation time descending
        """
        pass

    @abstractmethod
    async def save(self, comment: Comment) -> Comment:
        """Save a comment (create or update).

        New comments are inserted as given. Existing comments are only
        written when the stored version equals ``comment.version``; the
        stored version is then incremented.

        Args:
            comment: The comment to save

        Returns:
            The saved comment, carrying its new version

        Raises:
            ConcurrentModificationError: If the stored version moved on
        """
        pass
