"""PostgreSQL repository implementations."""

from petal.persistence.repository.comment import PostgresCommentRepository
from petal.persistence.repository.post import PostgresPostRepository

__all__ = [
    "PostgresCommentRepository",
    "PostgresPostRepository",
]
