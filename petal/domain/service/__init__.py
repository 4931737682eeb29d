"""Domain services."""

from .base import Service
from .comment_service import CommentService
from .jwt_service import JWTService
from .moderation_service import ModerationService
from .post_service import PostService
from .spam_filter import SpamFilter, calculate_spam_score

__all__ = [
    "CommentService",
    "JWTService",
    "ModerationService",
    "PostService",
    "Service",
    "SpamFilter",
    "calculate_spam_score",
]
