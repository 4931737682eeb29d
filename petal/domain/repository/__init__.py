"""Repository interfaces for the blog domain.

Repository interfaces are defined in the domain layer (dependency inversion).
Implementations live in the infrastructure layer.
"""

from petal.domain.repository.comment import CommentRepository
from petal.domain.repository.post import PostRepository

__all__ = [
    "CommentRepository",
    "PostRepository",
]
