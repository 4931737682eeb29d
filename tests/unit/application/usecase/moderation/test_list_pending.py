"""Unit tests for ListPendingCommentsUseCase."""

from datetime import datetime, timedelta, timezone
from uuid import uuid4

import pytest

from petal.application.usecase.moderation import (
    ListPendingCommentsRequest,
    ListPendingCommentsUseCase,
)
from petal.domain.repository import CommentRepository, PostRepository
from petal.domain.value import CommentStatus, PostId
from tests.conftest import make_comment, make_post
from tests.harness import create_env_fixture

# Unit test fixture
unit_env = create_env_fixture()


class TestListPendingCommentsUseCase:
    """Tests for ListPendingCommentsUseCase."""

    @pytest.mark.asyncio
    async def test_pending_comments_carry_post_and_submitter_details(self, unit_env):
        # Arrange
        use_case = await unit_env.get(ListPendingCommentsUseCase)
        post_repo = await unit_env.get(PostRepository)
        comment_repo = await unit_env.get(CommentRepository)
        post = await post_repo.save(make_post("Orchids at Dusk"))
        base = datetime(2026, 2, 14, tzinfo=timezone.utc)

        older = await comment_repo.save(make_comment(post.id, created_at=base))
        newer = await comment_repo.save(
            make_comment(post.id, created_at=base + timedelta(hours=1))
        )
        await comment_repo.save(make_comment(post.id, status=CommentStatus.APPROVED))

        # Act
        response = await use_case.execute(ListPendingCommentsRequest())

        # Assert
        assert response.total == 2
        assert [c.comment_id for c in response.comments] == [
            str(newer.id),
            str(older.id),
        ]
        item = response.comments[0]
        assert item.author_email == "rose@example.com"
        assert item.ip_address == "203.0.113.7"
        assert item.post.title == "Orchids at Dusk"
        assert item.post.slug == "orchids-at-dusk"

    @pytest.mark.asyncio
    async def test_comment_on_unknown_post_has_no_post_reference(self, unit_env):
        use_case = await unit_env.get(ListPendingCommentsUseCase)
        comment_repo = await unit_env.get(CommentRepository)
        await comment_repo.save(make_comment(PostId(uuid4())))

        response = await use_case.execute(ListPendingCommentsRequest())

        assert response.comments[0].post is None

    @pytest.mark.asyncio
    async def test_paging(self, unit_env):
        use_case = await unit_env.get(ListPendingCommentsUseCase)
        comment_repo = await unit_env.get(CommentRepository)
        post_id = PostId(uuid4())
        base = datetime(2026, 2, 14, tzinfo=timezone.utc)
        for i in range(5):
            await comment_repo.save(
                make_comment(post_id, created_at=base + timedelta(minutes=i))
            )

        response = await use_case.execute(ListPendingCommentsRequest(limit=2, offset=4))

        assert response.total == 1
