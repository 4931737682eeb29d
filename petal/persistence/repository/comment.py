"""PostgreSQL implementation of Comment repository."""

from typing import List, Optional, Sequence

from sqlalchemy import desc, select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from petal.domain.error import ConcurrentModificationError
from petal.domain.model import Comment
from petal.domain.repository import CommentRepository
from petal.domain.value import CommentId, CommentStatus, PostId
from petal.persistence.error import PersistenceError
from petal.persistence.mappers import comment_to_dict, row_to_comment
from petal.persistence.tables import comments_table


class PostgresCommentRepository(CommentRepository):
    """PostgreSQL implementation of CommentRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def find_by_id(self, comment_id: CommentId) -> Optional[Comment]:
        """Find a comment by ID."""
        stmt = select(comments_table).where(comments_table.c.id == comment_id)
        result = await self.session.execute(stmt)
        row = result.fetchone()
        return row_to_comment(row._asdict()) if row else None

    async def find_by_ids(
        self,
        comment_ids: Sequence[CommentId],
        status: Optional[CommentStatus] = None,
    ) -> List[Comment]:
        """Find comments by a batch of IDs, oldest first."""
        if not comment_ids:
            return []

        stmt = select(comments_table).where(comments_table.c.id.in_(comment_ids))

        if status is not None:
            stmt = stmt.where(comments_table.c.status == status.value)

        stmt = stmt.order_by(comments_table.c.created_at)

        result = await self.session.execute(stmt)
        return [row_to_comment(row._asdict()) for row in result.fetchall()]

    async def find_top_level_by_post(
        self, post_id: PostId, status: CommentStatus
    ) -> List[Comment]:
        """Find comments without a parent on a post, newest first."""
        stmt = (
            select(comments_table)
            .where(comments_table.c.post_id == post_id)
            .where(comments_table.c.status == status.value)
            .where(comments_table.c.parent_id.is_(None))
            .order_by(desc(comments_table.c.created_at))
        )

        result = await self.session.execute(stmt)
        return [row_to_comment(row._asdict()) for row in result.fetchall()]

    async def find_by_status(
        self,
        status: CommentStatus,
        limit: int = 100,
        offset: int = 0,
    ) -> List[Comment]:
        """Find comments by status, newest first."""
        stmt = (
            select(comments_table)
            .where(comments_table.c.status == status.value)
            .order_by(desc(comments_table.c.created_at))
            .limit(limit)
            .offset(offset)
        )

        result = await self.session.execute(stmt)
        return [row_to_comment(row._asdict()) for row in result.fetchall()]

    async def save(self, comment: Comment) -> Comment:
        """Save a comment (create or update).

        Updates are conditional on the stored version so that two writers
        working from the same read cannot overwrite each other.
        """
        try:
            version_stmt = select(comments_table.c.version).where(
                comments_table.c.id == comment.id
            )
            stored_version = (await self.session.execute(version_stmt)).scalar()

            if stored_version is None:
                stmt = comments_table.insert().values(**comment_to_dict(comment))
                await self.session.execute(stmt)
                await self.session.flush()
                return comment

            comment_dict = comment_to_dict(comment)
            comment_dict["version"] = comment.version + 1
            stmt = (
                comments_table.update()
                .where(comments_table.c.id == comment.id)
                .where(comments_table.c.version == comment.version)
                .values(**comment_dict)
            )
            result = await self.session.execute(stmt)
            await self.session.flush()
        except SQLAlchemyError as e:
            raise PersistenceError("save", "comment", str(comment.id)) from e

        if result.rowcount == 0:
            raise ConcurrentModificationError(
                "Comment", str(comment.id), comment.version
            )

        return comment.model_copy(update={"version": comment.version + 1})
