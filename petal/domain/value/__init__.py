"""Domain value objects for the blog."""

from petal.domain.value.identifiers import CommentId, PostId, UserId
from petal.domain.value.types import (
    CommentStatus,
    Email,
    FavoriteFlower,
    ModerationAction,
    Mood,
    Slug,
    UserRole,
)

__all__ = [
    # Identifiers
    "UserId",
    "PostId",
    "CommentId",
    # Types
    "CommentStatus",
    "Email",
    "FavoriteFlower",
    "ModerationAction",
    "Mood",
    "Slug",
    "UserRole",
]
