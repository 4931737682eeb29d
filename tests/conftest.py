"""Test configuration and fixtures."""

import re
from datetime import datetime
from uuid import UUID, uuid4

import logfire

from petal.domain.model import Comment, CommentAuthor, Post
from petal.domain.value import (
    CommentId,
    CommentStatus,
    Email,
    PostId,
    Slug,
    UserId,
)

# Keep telemetry local during tests
logfire.configure(send_to_logfire=False, console=False)


def make_slug(title: str, post_id: UUID | str | None = None) -> Slug:
    """Generate a slug for a test post.

    Args:
        title: Post title to generate slug from
        post_id: Optional post ID used when the title has no usable characters

    Returns:
        Valid Slug value object
    """
    slug_str = re.sub(r"[^a-z0-9]+", "-", title.lower())
    slug_str = re.sub(r"-+", "-", slug_str).strip("-")[:100]

    if not slug_str and post_id:
        slug_str = f"post-{str(post_id)[:8]}"
    elif not slug_str:
        slug_str = "test-post"

    return Slug(slug_str)


def make_post(title: str = "Spring in the Garden") -> Post:
    """Build a post record."""
    post_id = PostId(uuid4())
    return Post(id=post_id, title=title, slug=make_slug(title, post_id))


def make_author(
    name: str = "Rose Reader",
    email: str = "rose@example.com",
    user_id: UserId | None = None,
) -> CommentAuthor:
    """Build comment author details."""
    return CommentAuthor(name=name, email=Email(email), user_id=user_id)


def make_comment(
    post_id: PostId,
    content: str = "Lovely photos, thank you for sharing.",
    status: CommentStatus = CommentStatus.PENDING,
    parent_id: CommentId | None = None,
    created_at: datetime | None = None,
    author: CommentAuthor | None = None,
) -> Comment:
    """Build a comment without going through the spam filter."""
    extra = {"created_at": created_at} if created_at else {}
    return Comment(
        id=CommentId(uuid4()),
        post_id=post_id,
        author=author or make_author(),
        content=content,
        status=status,
        parent_id=parent_id,
        ip_address="203.0.113.7",
        user_agent="Mozilla/5.0",
        **extra,
    )
