"""Moderation use cases."""

from .list_pending import (
    ListPendingCommentsRequest,
    ListPendingCommentsResponse,
    ListPendingCommentsUseCase,
    PendingCommentItem,
    PostReference,
)
from .moderate_comment import (
    ModerateCommentRequest,
    ModerateCommentResponse,
    ModerateCommentUseCase,
)

__all__ = [
    "ListPendingCommentsRequest",
    "ListPendingCommentsResponse",
    "ListPendingCommentsUseCase",
    "ModerateCommentRequest",
    "ModerateCommentResponse",
    "ModerateCommentUseCase",
    "PendingCommentItem",
    "PostReference",
]
