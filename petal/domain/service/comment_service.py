"""Comment domain service."""

from uuid import uuid4

import logfire

from petal.domain.error import NotAuthorizedError, NotFoundError, ValidationError
from petal.domain.model.comment import Comment, CommentAuthor, CommentThread
from petal.domain.repository import CommentRepository
from petal.domain.value import (
    CommentId,
    CommentStatus,
    FavoriteFlower,
    Mood,
    PostId,
    UserId,
)

from .base import Service
from .spam_filter import SpamFilter


class CommentService(Service):
    """Domain service for comment submission, engagement and listing."""

    def __init__(
        self, comment_repository: CommentRepository, spam_filter: SpamFilter
    ) -> None:
        """Initialize comment service.

        Args:
            comment_repository: Comment repository
            spam_filter: Scores new submissions
        """
        self.comment_repository = comment_repository
        self.spam_filter = spam_filter

    async def create_comment(
        self,
        post_id: PostId,
        author: CommentAuthor,
        content: str,
        ip_address: str,
        user_agent: str,
        parent_id: CommentId | None = None,
        favorite_flower: FavoriteFlower = FavoriteFlower.OTHER,
        mood: Mood = Mood.OTHER,
    ) -> Comment:
        """Submit a comment on a post or a reply to another comment.

        The comment is validated, scored for spam and saved with its starting
        status (``spam`` above the threshold, ``pending`` otherwise). A reply
        is also linked into its parent's reply list.

        Args:
            post_id: Post ID
            author: Author details from the submission form
            content: Comment text
            ip_address: Submitter IP address
            user_agent: Submitter user agent
            parent_id: Parent comment ID for replies (None for top-level)
            favorite_flower: Flower picked on the form
            mood: Mood picked on the form

        Returns:
            Saved comment

        Raises:
            pydantic.ValidationError: If content or author fields are invalid
            NotFoundError: If the parent comment does not exist
            ValidationError: If the parent comment is on another post
        """
        with logfire.span(
            "comment_service.create_comment",
            post_id=str(post_id),
            author_email=str(author.email),
            parent_id=str(parent_id) if parent_id else None,
        ):
            parent = None
            if parent_id:
                parent = await self.comment_repository.find_by_id(parent_id)
                if not parent:
                    logfire.error(
                        "Parent comment not found",
                        parent_id=str(parent_id),
                        post_id=str(post_id),
                    )
                    raise NotFoundError("Comment", str(parent_id))
                if parent.post_id != post_id:
                    logfire.error(
                        "Parent comment does not belong to post",
                        parent_id=str(parent_id),
                        parent_post_id=str(parent.post_id),
                        target_post_id=str(post_id),
                    )
                    raise ValidationError(
                        "Parent comment does not belong to this post"
                    )

            # Validate before scoring
            draft = Comment(
                id=CommentId(uuid4()),
                post_id=post_id,
                author=author,
                content=content,
                parent_id=parent_id,
                ip_address=ip_address,
                user_agent=user_agent,
                favorite_flower=favorite_flower,
                mood=mood,
            )

            spam_score = self.spam_filter.score(draft.content)
            comment = draft.model_copy(
                update={
                    "spam_score": spam_score,
                    "status": self.spam_filter.initial_status(spam_score),
                }
            )

            saved = await self.comment_repository.save(comment)

            if parent:
                await self.add_reply(parent.id, saved.id)

            if saved.status == CommentStatus.SPAM:
                logfire.warn(
                    "Comment flagged as spam on submission",
                    comment_id=str(saved.id),
                    post_id=str(post_id),
                    spam_score=spam_score,
                )
            else:
                logfire.info(
                    "Comment created",
                    comment_id=str(saved.id),
                    post_id=str(post_id),
                    spam_score=spam_score,
                )
            return saved

    async def get_comment_by_id(self, comment_id: CommentId) -> Comment | None:
        """Get a comment by ID.

        Args:
            comment_id: Comment ID

        Returns:
            Comment if found, None otherwise
        """
        with logfire.span(
            "comment_service.get_comment_by_id", comment_id=str(comment_id)
        ):
            comment = await self.comment_repository.find_by_id(comment_id)
            if comment:
                logfire.info("Comment found", comment_id=str(comment_id))
            else:
                logfire.warn("Comment not found", comment_id=str(comment_id))
            return comment

    async def require_comment(self, comment_id: CommentId) -> Comment:
        """Get a comment by ID or raise.

        Raises:
            NotFoundError: If the comment does not exist
        """
        comment = await self.get_comment_by_id(comment_id)
        if comment is None:
            raise NotFoundError("Comment", str(comment_id))
        return comment

    async def add_reply(self, comment_id: CommentId, reply_id: CommentId) -> Comment:
        """Link a reply to its parent comment.

        Linking the same reply twice leaves a single entry.

        Args:
            comment_id: Parent comment ID
            reply_id: Reply comment ID

        Returns:
            Parent comment after linking
        """
        with logfire.span(
            "comment_service.add_reply",
            comment_id=str(comment_id),
            reply_id=str(reply_id),
        ):
            comment = await self.require_comment(comment_id)
            saved = await self.comment_repository.save(comment.with_reply(reply_id))
            logfire.info(
                "Reply linked",
                comment_id=str(comment_id),
                reply_id=str(reply_id),
                replies_count=saved.replies_count,
            )
            return saved

    async def toggle_like(self, comment_id: CommentId, user_id: UserId) -> Comment:
        """Like a comment, or take the like back if the user already likes it.

        Args:
            comment_id: Comment ID
            user_id: User toggling the like

        Returns:
            Comment after the toggle

        Raises:
            NotFoundError: If the comment does not exist
            ConcurrentModificationError: If the comment changed meanwhile
        """
        with logfire.span(
            "comment_service.toggle_like",
            comment_id=str(comment_id),
            user_id=str(user_id),
        ):
            comment = await self.require_comment(comment_id)
            saved = await self.comment_repository.save(comment.toggle_like(user_id))
            logfire.info(
                "Comment like toggled",
                comment_id=str(comment_id),
                user_id=str(user_id),
                liked=saved.has_liked(user_id),
                likes_count=saved.likes_count,
            )
            return saved

    async def edit_content(
        self, comment_id: CommentId, editor_id: UserId, content: str
    ) -> Comment:
        """Update the text of a comment written by a signed-in user.

        The comment keeps its spam score and status.

        Args:
            comment_id: Comment ID
            editor_id: User requesting the edit
            content: New text

        Returns:
            Updated comment

        Raises:
            NotFoundError: If the comment does not exist
            NotAuthorizedError: If the editor is not the comment's author
            ValidationError: If the new text has an invalid length
        """
        with logfire.span(
            "comment_service.edit_content",
            comment_id=str(comment_id),
            editor_id=str(editor_id),
            text_length=len(content),
        ):
            comment = await self.require_comment(comment_id)
            if comment.author.user_id != editor_id:
                logfire.warn(
                    "Comment edit by non-author",
                    comment_id=str(comment_id),
                    editor_id=str(editor_id),
                )
                raise NotAuthorizedError("comment", str(comment_id), str(editor_id))

            edited = comment.edit_content(content)
            if edited is comment:
                return comment

            saved = await self.comment_repository.save(edited)
            logfire.info(
                "Comment content edited",
                comment_id=str(comment_id),
                text_length=len(saved.content),
            )
            return saved

    async def get_approved_for_post(self, post_id: PostId) -> list[CommentThread]:
        """Get the publicly visible comments of a post.

        Only approved top-level comments are returned, newest first. Each
        carries only its approved replies, oldest first.

        Args:
            post_id: Post ID

        Returns:
            Comment threads for the post
        """
        with logfire.span(
            "comment_service.get_approved_for_post", post_id=str(post_id)
        ):
            top_level = await self.comment_repository.find_top_level_by_post(
                post_id, CommentStatus.APPROVED
            )

            # One batch lookup for all replies
            reply_ids = [rid for comment in top_level for rid in comment.replies]
            replies = (
                await self.comment_repository.find_by_ids(
                    reply_ids, status=CommentStatus.APPROVED
                )
                if reply_ids
                else []
            )
            replies_by_id = {reply.id: reply for reply in replies}

            threads = []
            for comment in top_level:
                thread_replies = [
                    replies_by_id[rid] for rid in comment.replies if rid in replies_by_id
                ]
                thread_replies.sort(key=lambda c: c.created_at)
                threads.append(CommentThread(comment=comment, replies=thread_replies))

            logfire.info(
                "Approved comments retrieved for post",
                post_id=str(post_id),
                count=len(threads),
                reply_count=len(replies),
            )
            return threads

    async def get_pending_moderation(
        self, limit: int = 100, offset: int = 0
    ) -> list[Comment]:
        """Get comments waiting for a moderator, newest first.

        Args:
            limit: Maximum number of comments to return
            offset: Number of comments to skip

        Returns:
            Pending comments
        """
        with logfire.span(
            "comment_service.get_pending_moderation", limit=limit, offset=offset
        ):
            comments = await self.comment_repository.find_by_status(
                CommentStatus.PENDING, limit=limit, offset=offset
            )
            logfire.info("Pending comments retrieved", count=len(comments))
            return comments
