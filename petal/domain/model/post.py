"""Post reference.

Posts are authored and rendered elsewhere in the blog; comments only need
to know that a post exists and how to point a moderator at it.
"""

from datetime import datetime

from pydantic import Field

from petal.domain.model.common import DomainModel, utcnow
from petal.domain.value import PostId, Slug


class Post(DomainModel):
    """Minimal blog post record."""

    id: PostId
    title: str = Field(min_length=1, max_length=200)
    slug: Slug
    created_at: datetime = Field(default_factory=utcnow)
