"""Comment entity.

Comments are remarks left by readers under a blog post. Every comment goes
through moderation before it is shown publicly: it is scored for spam when
submitted and later approved, rejected or flagged by a moderator.

Replies are one level deep in practice but nothing prevents deeper threads;
the parent keeps the ids of its replies in submission order.
"""

from datetime import datetime
from typing import Annotated, Any, Optional

from pydantic import BeforeValidator, Field

from petal.domain.error import ValidationError
from petal.domain.model.common import DomainModel, utcnow
from petal.domain.value import (
    CommentId,
    CommentStatus,
    Email,
    FavoriteFlower,
    ModerationAction,
    Mood,
    PostId,
    UserId,
)
from petal.domain.value.common import ValueObject

CONTENT_MIN_LENGTH = 3
CONTENT_MAX_LENGTH = 1000


def _strip(value: Any) -> Any:
    return value.strip() if isinstance(value, str) else value


StrippedStr = Annotated[str, BeforeValidator(_strip)]


class CommentAuthor(ValueObject):
    """Who wrote a comment, as entered on the submission form.

    ``user_id`` is set only when the commenter was signed in.
    """

    name: StrippedStr = Field(min_length=1, max_length=50)
    email: Email
    website: StrippedStr = ""
    user_id: Optional[UserId] = None


class CommentLike(ValueObject):
    """A single user's like on a comment."""

    user_id: UserId
    created_at: datetime = Field(default_factory=utcnow)


class Comment(DomainModel):
    """Comment entity.

    Spam score and initial status are fixed at creation. Moderation fields
    stay empty until a moderator acts. ``version`` is bumped by the
    repository on every update and guards against lost writes.
    """

    id: CommentId
    post_id: PostId
    author: CommentAuthor
    content: StrippedStr = Field(
        min_length=CONTENT_MIN_LENGTH, max_length=CONTENT_MAX_LENGTH
    )
    status: CommentStatus = CommentStatus.PENDING
    parent_id: Optional[CommentId] = None
    replies: list[CommentId] = Field(default_factory=list)
    likes: list[CommentLike] = Field(default_factory=list)

    # Moderation
    moderated_by: Optional[UserId] = None
    moderated_at: Optional[datetime] = None
    moderation_reason: Optional[str] = None

    # Spam detection
    ip_address: str = Field(min_length=1)
    user_agent: str = Field(min_length=1)
    spam_score: int = Field(default=0, ge=0, le=100)

    favorite_flower: FavoriteFlower = FavoriteFlower.OTHER
    mood: Mood = Mood.OTHER

    is_edited: bool = False
    edited_at: Optional[datetime] = None
    created_at: datetime = Field(default_factory=utcnow)
    updated_at: datetime = Field(default_factory=utcnow)
    version: int = Field(default=1, ge=1)

    @property
    def likes_count(self) -> int:
        return len(self.likes)

    @property
    def replies_count(self) -> int:
        return len(self.replies)

    @property
    def is_top_level(self) -> bool:
        return self.parent_id is None

    def has_liked(self, user_id: UserId) -> bool:
        """Whether the given user currently likes this comment."""
        return any(like.user_id == user_id for like in self.likes)

    def moderate(
        self,
        action: ModerationAction,
        moderator_id: UserId,
        reason: str | None = None,
        at: datetime | None = None,
    ) -> "Comment":
        """Apply a moderator decision.

        Moderator and timestamp are always overwritten. Without a reason the
        action's default is used; approving without a reason keeps whatever
        reason was recorded before.

        Args:
            action: Moderator decision
            moderator_id: User taking the decision
            reason: Optional free-text reason
            at: Decision time (defaults to now)

        Returns:
            New comment reflecting the decision
        """
        at = at or utcnow()
        reason = reason or action.default_reason
        return self.model_copy(
            update={
                "status": action.target_status,
                "moderated_by": moderator_id,
                "moderated_at": at,
                "moderation_reason": reason
                if reason is not None
                else self.moderation_reason,
                "updated_at": at,
            }
        )

    def approve(self, moderator_id: UserId, reason: str | None = None) -> "Comment":
        return self.moderate(ModerationAction.APPROVE, moderator_id, reason)

    def reject(self, moderator_id: UserId, reason: str | None = None) -> "Comment":
        return self.moderate(ModerationAction.REJECT, moderator_id, reason)

    def mark_as_spam(
        self, moderator_id: UserId, reason: str | None = None
    ) -> "Comment":
        return self.moderate(ModerationAction.SPAM, moderator_id, reason)

    def with_reply(self, reply_id: CommentId) -> "Comment":
        """Return a comment that lists ``reply_id`` among its replies.

        Adding a reply that is already listed returns the comment unchanged.
        """
        if reply_id in self.replies:
            return self
        return self.model_copy(
            update={"replies": [*self.replies, reply_id], "updated_at": utcnow()}
        )

    def toggle_like(self, user_id: UserId, at: datetime | None = None) -> "Comment":
        """Like the comment, or remove the like if the user already likes it."""
        at = at or utcnow()
        if self.has_liked(user_id):
            likes = [like for like in self.likes if like.user_id != user_id]
        else:
            likes = [*self.likes, CommentLike(user_id=user_id, created_at=at)]
        return self.model_copy(update={"likes": likes, "updated_at": at})

    def edit_content(self, content: str, at: datetime | None = None) -> "Comment":
        """Replace the comment text.

        Marks the comment as edited. Spam score and status are left alone.

        Raises:
            ValidationError: If the new text is outside the allowed length
        """
        content = content.strip()
        if not CONTENT_MIN_LENGTH <= len(content) <= CONTENT_MAX_LENGTH:
            raise ValidationError(
                f"Comment must be between {CONTENT_MIN_LENGTH} and "
                f"{CONTENT_MAX_LENGTH} characters"
            )
        if content == self.content:
            return self

        at = at or utcnow()
        return self.model_copy(
            update={
                "content": content,
                "is_edited": True,
                "edited_at": at,
                "updated_at": at,
            }
        )


class CommentThread(DomainModel):
    """A top-level comment together with the replies shown under it."""

    comment: Comment
    replies: list[Comment] = Field(default_factory=list)
