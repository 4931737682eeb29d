"""Domain model entities for the blog."""

from petal.domain.model.comment import (
    Comment,
    CommentAuthor,
    CommentLike,
    CommentThread,
)
from petal.domain.model.post import Post

__all__ = [
    "Comment",
    "CommentAuthor",
    "CommentLike",
    "CommentThread",
    "Post",
]
