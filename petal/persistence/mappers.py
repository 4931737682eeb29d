"""Mappers for converting between database rows and domain models.

Since we're using Pydantic domain models (immutable), we use manual mapping
instead of SQLAlchemy's ORM mapping.
"""

from typing import Any, Dict
from uuid import UUID

from petal.domain.model import Comment, CommentAuthor, CommentLike, Post
from petal.domain.value import (
    CommentId,
    CommentStatus,
    Email,
    FavoriteFlower,
    Mood,
    PostId,
    Slug,
    UserId,
)


def _uuid(value: Any) -> UUID:
    return UUID(value) if isinstance(value, str) else value


def _optional_uuid(value: Any) -> UUID | None:
    return _uuid(value) if value is not None else None


def row_to_post(row: Dict[str, Any]) -> Post:
    """Convert database row to Post domain model.

    Args:
        row: Database row as dict

    Returns:
        Post domain model
    """
    return Post(
        id=PostId(_uuid(row["id"])),
        title=row["title"],
        slug=Slug(row["slug"]),
        created_at=row["created_at"],
    )


def post_to_dict(post: Post) -> Dict[str, Any]:
    """Convert Post domain model to database dict.

    Args:
        post: Post domain model

    Returns:
        Dict suitable for database insertion/update
    """
    return post.model_dump()


def row_to_comment(row: Dict[str, Any]) -> Comment:
    """Convert database row to Comment domain model.

    Args:
        row: Database row as dict

    Returns:
        Comment domain model
    """
    author_user_id = _optional_uuid(row.get("author_user_id"))
    moderated_by = _optional_uuid(row.get("moderated_by"))
    parent_id = _optional_uuid(row.get("parent_id"))

    return Comment(
        id=CommentId(_uuid(row["id"])),
        post_id=PostId(_uuid(row["post_id"])),
        author=CommentAuthor(
            name=row["author_name"],
            email=Email(row["author_email"]),
            website=row.get("author_website") or "",
            user_id=UserId(author_user_id) if author_user_id else None,
        ),
        content=row["content"],
        status=CommentStatus(row["status"]),
        parent_id=CommentId(parent_id) if parent_id else None,
        replies=[CommentId(_uuid(rid)) for rid in row.get("replies") or []],
        likes=[
            CommentLike(
                user_id=UserId(_uuid(like["user_id"])),
                created_at=like["created_at"],
            )
            for like in row.get("likes") or []
        ],
        moderated_by=UserId(moderated_by) if moderated_by else None,
        moderated_at=row.get("moderated_at"),
        moderation_reason=row.get("moderation_reason"),
        ip_address=row["ip_address"],
        user_agent=row["user_agent"],
        spam_score=row["spam_score"],
        favorite_flower=FavoriteFlower(row["favorite_flower"]),
        mood=Mood(row["mood"]),
        is_edited=row["is_edited"],
        edited_at=row.get("edited_at"),
        created_at=row["created_at"],
        updated_at=row["updated_at"],
        version=row["version"],
    )


def comment_to_dict(comment: Comment) -> Dict[str, Any]:
    """Convert Comment domain model to database dict.

    The author is flattened into ``author_*`` columns and likes are
    serialized to JSON for the JSONB column.

    Args:
        comment: Comment domain model

    Returns:
        Dict suitable for database insertion/update
    """
    return {
        "id": comment.id,
        "post_id": comment.post_id,
        "parent_id": comment.parent_id,
        "author_name": comment.author.name,
        "author_email": str(comment.author.email),
        "author_website": comment.author.website,
        "author_user_id": comment.author.user_id,
        "content": comment.content,
        "status": comment.status.value,
        "replies": list(comment.replies),
        "likes": [like.model_dump(mode="json") for like in comment.likes],
        "moderated_by": comment.moderated_by,
        "moderated_at": comment.moderated_at,
        "moderation_reason": comment.moderation_reason,
        "ip_address": comment.ip_address,
        "user_agent": comment.user_agent,
        "spam_score": comment.spam_score,
        "favorite_flower": comment.favorite_flower.value,
        "mood": comment.mood.value,
        "is_edited": comment.is_edited,
        "edited_at": comment.edited_at,
        "created_at": comment.created_at,
        "updated_at": comment.updated_at,
        "version": comment.version,
    }
