"""Domain value objects for the blog.

Value objects are immutable and defined by their values, not identity.
They encapsulate validation rules and business logic.
"""

import re
from enum import Enum

from pydantic import field_validator

from petal.domain.value.common import RootValueObject

EMAIL_PATTERN = re.compile(r"^\w+([.-]?\w+)*@\w+([.-]?\w+)*(\.\w{2,3})+$", re.ASCII)


class CommentStatus(str, Enum):
    """Moderation status of a comment."""

    PENDING = "pending"
    APPROVED = "approved"
    REJECTED = "rejected"
    SPAM = "spam"


class ModerationAction(str, Enum):
    """Decision a moderator can take on a comment.

    Every action is allowed from every status.
    """

    APPROVE = "approve"
    REJECT = "reject"
    SPAM = "spam"

    @property
    def target_status(self) -> CommentStatus:
        """Status a comment ends up in after this action."""
        return {
            ModerationAction.APPROVE: CommentStatus.APPROVED,
            ModerationAction.REJECT: CommentStatus.REJECTED,
            ModerationAction.SPAM: CommentStatus.SPAM,
        }[self]

    @property
    def default_reason(self) -> str | None:
        """Reason recorded when the moderator gives none."""
        return {
            ModerationAction.APPROVE: None,
            ModerationAction.REJECT: "Content violates community guidelines",
            ModerationAction.SPAM: "Detected as spam",
        }[self]


class FavoriteFlower(str, Enum):
    """Flower a commenter picked on the submission form."""

    ROSE = "rose"
    DAISY = "daisy"
    LAVENDER = "lavender"
    SUNFLOWER = "sunflower"
    TULIP = "tulip"
    LILY = "lily"
    ORCHID = "orchid"
    JASMINE = "jasmine"
    OTHER = "other"


class Mood(str, Enum):
    """Mood a commenter picked on the submission form."""

    HAPPY = "happy"
    INSPIRED = "inspired"
    PEACEFUL = "peaceful"
    EXCITED = "excited"
    GRATEFUL = "grateful"
    CURIOUS = "curious"
    OTHER = "other"


class UserRole(str, Enum):
    """Account roles carried in access tokens."""

    USER = "user"
    AUTHOR = "author"
    ADMIN = "admin"

    @property
    def can_moderate(self) -> bool:
        """Whether this role may approve, reject or flag comments."""
        return self is UserRole.ADMIN


class Email(RootValueObject[str]):
    """Commenter email address.

    Stored trimmed and lower-cased.
    """

    @field_validator("root")
    @classmethod
    def validate_email_format(cls, v: str) -> str:
        """Normalize and validate email."""
        v = v.strip().lower()
        if not EMAIL_PATTERN.match(v):
            raise ValueError("Please enter a valid email")
        return v


class Slug(RootValueObject[str]):
    """URL-safe slug for posts.

    Must be lowercase, alphanumeric with hyphens, 1-200 characters.
    """

    @field_validator("root")
    @classmethod
    def validate_slug_format(cls, v: str) -> str:
        """Validate slug format."""
        if not re.match(r"^[a-z0-9]+(?:-[a-z0-9]+)*$", v):
            raise ValueError(
                "Slug must be lowercase alphanumeric with hyphens, "
                "no leading/trailing hyphens or consecutive hyphens"
            )
        if len(v) > 200:
            raise ValueError("Slug must be 1-200 characters")
        return v
