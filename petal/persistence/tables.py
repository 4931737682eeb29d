"""SQLAlchemy table definitions for the blog.

These table definitions are used with SQLAlchemy Core queries.
They match the schema defined in Alembic migrations.
"""

from sqlalchemy import (
    Boolean,
    CheckConstraint,
    Column,
    Enum,
    ForeignKey,
    Index,
    Integer,
    MetaData,
    String,
    Table,
    Text,
)
from sqlalchemy.dialects.postgresql import ARRAY, JSONB, TIMESTAMP, UUID

# Metadata object for all tables
metadata = MetaData()

# ============================================================================
# POSTS TABLE (reference records; posts are authored elsewhere)
# ============================================================================
posts_table = Table(
    "posts",
    metadata,
    Column("id", UUID, primary_key=True, server_default="uuid_generate_v4()"),
    Column("title", String(200), nullable=False),
    Column("slug", String(200), nullable=False, unique=True),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
)

Index("idx_posts_slug", posts_table.c.slug, unique=True)

# ============================================================================
# COMMENTS TABLE
# ============================================================================
comments_table = Table(
    "comments",
    metadata,
    Column("id", UUID, primary_key=True, server_default="uuid_generate_v4()"),
    Column("post_id", UUID, ForeignKey("posts.id", ondelete="CASCADE"), nullable=False),
    Column(
        "parent_id", UUID, ForeignKey("comments.id", ondelete="SET NULL"), nullable=True
    ),
    # Author as entered on the form; user id only for signed-in commenters
    Column("author_name", String(50), nullable=False),
    Column("author_email", String(255), nullable=False),
    Column("author_website", Text, nullable=False, server_default=""),
    Column("author_user_id", UUID, nullable=True),
    Column("content", Text, nullable=False),
    Column(
        "status",
        Enum(
            "pending",
            "approved",
            "rejected",
            "spam",
            name="comment_status",
            create_type=False,
        ),
        nullable=False,
        server_default="pending",
    ),
    Column("replies", ARRAY(UUID), nullable=False, server_default="{}"),
    Column("likes", JSONB, nullable=False, server_default="[]"),
    Column("moderated_by", UUID, nullable=True),
    Column("moderated_at", TIMESTAMP(timezone=True), nullable=True),
    Column("moderation_reason", Text, nullable=True),
    Column("ip_address", String(64), nullable=False),
    Column("user_agent", Text, nullable=False),
    Column("spam_score", Integer, nullable=False, server_default="0"),
    Column("favorite_flower", String(20), nullable=False, server_default="other"),
    Column("mood", String(20), nullable=False, server_default="other"),
    Column("is_edited", Boolean, nullable=False, server_default="false"),
    Column("edited_at", TIMESTAMP(timezone=True), nullable=True),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    Column(
        "updated_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    Column("version", Integer, nullable=False, server_default="1"),
    CheckConstraint("spam_score BETWEEN 0 AND 100", name="spam_score_range"),
    CheckConstraint(
        "char_length(content) BETWEEN 3 AND 1000", name="content_length_range"
    ),
)

Index("idx_comments_post_id", comments_table.c.post_id)
Index("idx_comments_status", comments_table.c.status)
Index("idx_comments_created_at", comments_table.c.created_at.desc())
Index("idx_comments_parent_id", comments_table.c.parent_id)
Index("idx_comments_author_email", comments_table.c.author_email)
