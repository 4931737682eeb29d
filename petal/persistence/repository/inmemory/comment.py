"""In-memory comment repository for testing."""

from typing import Optional, Sequence

from petal.domain.error import ConcurrentModificationError
from petal.domain.model.comment import Comment
from petal.domain.repository.comment import CommentRepository
from petal.domain.value import CommentId, CommentStatus, PostId


class InMemoryCommentRepository(CommentRepository):
    """In-memory implementation of CommentRepository for testing."""

    def __init__(self) -> None:
        self._comments: dict[CommentId, Comment] = {}

    async def find_by_id(self, comment_id: CommentId) -> Optional[Comment]:
        """Find a comment by ID."""
        return self._comments.get(comment_id)

    async def find_by_ids(
        self,
        comment_ids: Sequence[CommentId],
        status: Optional[CommentStatus] = None,
    ) -> list[Comment]:
        """Find comments by a batch of IDs, oldest first."""
        comments = [
            self._comments[cid] for cid in set(comment_ids) if cid in self._comments
        ]

        if status is not None:
            comments = [c for c in comments if c.status == status]

        comments.sort(key=lambda c: c.created_at)
        return comments

    async def find_top_level_by_post(
        self, post_id: PostId, status: CommentStatus
    ) -> list[Comment]:
        """Find comments without a parent on a post, newest first."""
        comments = [
            c
            for c in self._comments.values()
            if c.post_id == post_id and c.status == status and c.parent_id is None
        ]
        comments.sort(key=lambda c: c.created_at, reverse=True)
        return comments

    async def find_by_status(
        self,
        status: CommentStatus,
        limit: int = 100,
        offset: int = 0,
    ) -> list[Comment]:
        """Find comments by status, newest first."""
        comments = [c for c in self._comments.values() if c.status == status]
        comments.sort(key=lambda c: c.created_at, reverse=True)

        # Paginate
        return comments[offset : offset + limit]

    async def save(self, comment: Comment) -> Comment:
        """Save or update a comment, checking the stored version."""
        stored = self._comments.get(comment.id)
        if stored is None:
            self._comments[comment.id] = comment
            return comment

        if stored.version != comment.version:
            raise ConcurrentModificationError(
                "Comment", str(comment.id), comment.version
            )

        saved = comment.model_copy(update={"version": comment.version + 1})
        self._comments[comment.id] = saved
        return saved
