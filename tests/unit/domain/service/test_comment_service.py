"""Unit tests for CommentService."""

from datetime import datetime, timedelta, timezone
from uuid import uuid4

import pydantic
import pytest

from petal.domain.error import (
    ConcurrentModificationError,
    NotAuthorizedError,
    NotFoundError,
    ValidationError,
)
from petal.domain.repository import CommentRepository
from petal.domain.service import CommentService
from petal.domain.value import CommentId, CommentStatus, PostId, UserId
from tests.conftest import make_author, make_comment
from tests.harness import create_env_fixture

# Unit test fixture
unit_env = create_env_fixture()

BASE_TIME = datetime(2026, 4, 1, 8, 0, tzinfo=timezone.utc)


async def _submit(service: CommentService, post_id: PostId, **kwargs):
    kwargs.setdefault("content", "Your roses look wonderful this year.")
    return await service.create_comment(
        post_id=post_id,
        author=kwargs.pop("author", make_author()),
        ip_address="198.51.100.4",
        user_agent="Mozilla/5.0",
        **kwargs,
    )


class TestCreateComment:
    """Tests for create_comment."""

    @pytest.mark.asyncio
    async def test_clean_comment_is_pending(self, unit_env):
        """A clean submission waits for moderation."""
        # Arrange
        service = await unit_env.get(CommentService)
        repo = await unit_env.get(CommentRepository)
        post_id = PostId(uuid4())

        # Act
        comment = await _submit(service, post_id)

        # Assert
        assert comment.status == CommentStatus.PENDING
        assert comment.spam_score == 0
        assert comment.ip_address == "198.51.100.4"
        stored = await repo.find_by_id(comment.id)
        assert stored == comment

    @pytest.mark.asyncio
    async def test_three_links_stay_pending(self, unit_env):
        service = await unit_env.get(CommentService)

        comment = await _submit(
            service,
            PostId(uuid4()),
            content="Check this out https://a.com https://b.com https://c.com",
        )

        assert comment.spam_score == 30
        assert comment.status == CommentStatus.PENDING

    @pytest.mark.asyncio
    async def test_spammy_comment_is_filed_as_spam(self, unit_env):
        """Submissions at or above the threshold start as spam."""
        service = await unit_env.get(CommentService)

        comment = await _submit(
            service, PostId(uuid4()), content="WIN A FREE PRIZE NOW CASINO WINNER"
        )

        assert comment.spam_score == 95
        assert comment.status == CommentStatus.SPAM

    @pytest.mark.asyncio
    async def test_invalid_content_is_rejected_before_saving(self, unit_env):
        service = await unit_env.get(CommentService)
        repo = await unit_env.get(CommentRepository)

        with pytest.raises(pydantic.ValidationError):
            await _submit(service, PostId(uuid4()), content="  hi ")

        assert await repo.find_by_status(CommentStatus.PENDING) == []

    @pytest.mark.asyncio
    async def test_reply_is_linked_to_parent(self, unit_env):
        """Replying records the reply id on the parent."""
        # Arrange
        service = await unit_env.get(CommentService)
        repo = await unit_env.get(CommentRepository)
        post_id = PostId(uuid4())
        parent = await _submit(service, post_id)

        # Act
        reply = await _submit(
            service, post_id, content="Thanks, they loved the rain.", parent_id=parent.id
        )

        # Assert
        assert reply.parent_id == parent.id
        stored_parent = await repo.find_by_id(parent.id)
        assert stored_parent.replies == [reply.id]

    @pytest.mark.asyncio
    async def test_reply_to_missing_parent_raises(self, unit_env):
        service = await unit_env.get(CommentService)

        with pytest.raises(NotFoundError):
            await _submit(service, PostId(uuid4()), parent_id=CommentId(uuid4()))

    @pytest.mark.asyncio
    async def test_reply_to_comment_on_other_post_raises(self, unit_env):
        service = await unit_env.get(CommentService)
        parent = await _submit(service, PostId(uuid4()))

        with pytest.raises(ValidationError):
            await _submit(service, PostId(uuid4()), parent_id=parent.id)


class TestAddReply:
    """Tests for add_reply."""

    @pytest.mark.asyncio
    async def test_add_reply_twice_keeps_one_entry(self, unit_env):
        service = await unit_env.get(CommentService)
        repo = await unit_env.get(CommentRepository)
        parent = await repo.save(make_comment(PostId(uuid4())))
        reply_id = CommentId(uuid4())

        await service.add_reply(parent.id, reply_id)
        result = await service.add_reply(parent.id, reply_id)

        assert result.replies == [reply_id]

    @pytest.mark.asyncio
    async def test_add_reply_to_missing_comment_raises(self, unit_env):
        service = await unit_env.get(CommentService)

        with pytest.raises(NotFoundError):
            await service.add_reply(CommentId(uuid4()), CommentId(uuid4()))


class TestToggleLike:
    """Tests for toggle_like."""

    @pytest.mark.asyncio
    async def test_toggle_like_persists(self, unit_env):
        service = await unit_env.get(CommentService)
        repo = await unit_env.get(CommentRepository)
        comment = await repo.save(make_comment(PostId(uuid4())))
        user_id = UserId(uuid4())

        liked = await service.toggle_like(comment.id, user_id)
        unliked = await service.toggle_like(comment.id, user_id)

        assert liked.likes_count == 1
        assert unliked.likes_count == 0
        assert (await repo.find_by_id(comment.id)).likes == []

    @pytest.mark.asyncio
    async def test_toggle_like_on_missing_comment_raises(self, unit_env):
        service = await unit_env.get(CommentService)

        with pytest.raises(NotFoundError):
            await service.toggle_like(CommentId(uuid4()), UserId(uuid4()))


class TestEditContent:
    """Tests for edit_content."""

    @pytest.mark.asyncio
    async def test_author_can_edit(self, unit_env):
        service = await unit_env.get(CommentService)
        repo = await unit_env.get(CommentRepository)
        user_id = UserId(uuid4())
        comment = await repo.save(
            make_comment(PostId(uuid4()), author=make_author(user_id=user_id))
        )

        edited = await service.edit_content(comment.id, user_id, "A better comment")

        assert edited.content == "A better comment"
        assert edited.is_edited

    @pytest.mark.asyncio
    async def test_other_user_cannot_edit(self, unit_env):
        service = await unit_env.get(CommentService)
        repo = await unit_env.get(CommentRepository)
        comment = await repo.save(
            make_comment(PostId(uuid4()), author=make_author(user_id=UserId(uuid4())))
        )

        with pytest.raises(NotAuthorizedError):
            await service.edit_content(comment.id, UserId(uuid4()), "Hijacked text")

    @pytest.mark.asyncio
    async def test_anonymous_comment_cannot_be_edited(self, unit_env):
        service = await unit_env.get(CommentService)
        repo = await unit_env.get(CommentRepository)
        comment = await repo.save(make_comment(PostId(uuid4())))

        with pytest.raises(NotAuthorizedError):
            await service.edit_content(comment.id, UserId(uuid4()), "Any new text")


class TestGetApprovedForPost:
    """Tests for get_approved_for_post."""

    @pytest.mark.asyncio
    async def test_only_approved_comments_and_replies_are_listed(self, unit_env):
        """Pending, rejected and spam content stays hidden."""
        # Arrange
        service = await unit_env.get(CommentService)
        repo = await unit_env.get(CommentRepository)
        post_id = PostId(uuid4())

        older = make_comment(
            post_id, status=CommentStatus.APPROVED, created_at=BASE_TIME
        )
        newer = make_comment(
            post_id,
            status=CommentStatus.APPROVED,
            created_at=BASE_TIME + timedelta(hours=1),
        )
        hidden = make_comment(
            post_id, status=CommentStatus.PENDING, created_at=BASE_TIME
        )
        other_post = make_comment(PostId(uuid4()), status=CommentStatus.APPROVED)

        late_reply = make_comment(
            post_id,
            status=CommentStatus.APPROVED,
            parent_id=older.id,
            created_at=BASE_TIME + timedelta(hours=3),
        )
        early_reply = make_comment(
            post_id,
            status=CommentStatus.APPROVED,
            parent_id=older.id,
            created_at=BASE_TIME + timedelta(hours=2),
        )
        spam_reply = make_comment(
            post_id,
            status=CommentStatus.SPAM,
            parent_id=older.id,
            created_at=BASE_TIME + timedelta(hours=2),
        )
        older = older.model_copy(
            update={"replies": [late_reply.id, spam_reply.id, early_reply.id]}
        )

        for comment in (
            older,
            newer,
            hidden,
            other_post,
            late_reply,
            early_reply,
            spam_reply,
        ):
            await repo.save(comment)

        # Act
        threads = await service.get_approved_for_post(post_id)

        # Assert
        assert [t.comment.id for t in threads] == [newer.id, older.id]
        assert threads[0].replies == []
        assert [r.id for r in threads[1].replies] == [early_reply.id, late_reply.id]

    @pytest.mark.asyncio
    async def test_no_comments(self, unit_env):
        service = await unit_env.get(CommentService)

        assert await service.get_approved_for_post(PostId(uuid4())) == []


class TestGetPendingModeration:
    """Tests for get_pending_moderation."""

    @pytest.mark.asyncio
    async def test_pending_newest_first_with_paging(self, unit_env):
        service = await unit_env.get(CommentService)
        repo = await unit_env.get(CommentRepository)
        post_id = PostId(uuid4())
        pending = [
            await repo.save(
                make_comment(post_id, created_at=BASE_TIME + timedelta(minutes=i))
            )
            for i in range(3)
        ]
        await repo.save(make_comment(post_id, status=CommentStatus.SPAM))

        first_page = await service.get_pending_moderation(limit=2)
        second_page = await service.get_pending_moderation(limit=2, offset=2)

        assert [c.id for c in first_page] == [pending[2].id, pending[1].id]
        assert [c.id for c in second_page] == [pending[0].id]


class TestConcurrentModification:
    """Stale writes are refused."""

    @pytest.mark.asyncio
    async def test_saving_stale_copy_raises(self, unit_env):
        repo = await unit_env.get(CommentRepository)
        comment = await repo.save(make_comment(PostId(uuid4())))

        await repo.save(comment.approve(UserId(uuid4())))

        with pytest.raises(ConcurrentModificationError):
            await repo.save(comment.reject(UserId(uuid4())))

    @pytest.mark.asyncio
    async def test_each_update_bumps_version(self, unit_env):
        repo = await unit_env.get(CommentRepository)
        comment = await repo.save(make_comment(PostId(uuid4())))

        updated = await repo.save(comment.toggle_like(UserId(uuid4())))

        assert comment.version == 1
        assert updated.version == 2
