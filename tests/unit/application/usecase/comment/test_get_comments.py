"""Unit tests for GetCommentsUseCase."""

from datetime import datetime, timedelta, timezone
from uuid import uuid4

import pytest

from petal.application.usecase.comment import GetCommentsRequest, GetCommentsUseCase
from petal.domain.repository import CommentRepository
from petal.domain.value import CommentStatus, PostId
from tests.conftest import make_comment
from tests.harness import create_env_fixture

# Unit test fixture
unit_env = create_env_fixture()


class TestGetCommentsUseCase:
    """Tests for GetCommentsUseCase."""

    @pytest.mark.asyncio
    async def test_returns_threads_without_private_fields(self, unit_env):
        """Public listing hides email and IP address."""
        # Arrange
        use_case = await unit_env.get(GetCommentsUseCase)
        repo = await unit_env.get(CommentRepository)
        post_id = PostId(uuid4())
        created = datetime(2026, 3, 1, tzinfo=timezone.utc)

        parent = make_comment(post_id, status=CommentStatus.APPROVED, created_at=created)
        reply = make_comment(
            post_id,
            status=CommentStatus.APPROVED,
            parent_id=parent.id,
            created_at=created + timedelta(minutes=5),
        )
        await repo.save(parent.with_reply(reply.id))
        await repo.save(reply)

        # Act
        response = await use_case.execute(GetCommentsRequest(post_id=str(post_id)))

        # Assert
        assert response.total == 1
        thread = response.comments[0]
        assert thread.comment_id == str(parent.id)
        assert thread.replies_count == 1
        assert [r.comment_id for r in thread.replies] == [str(reply.id)]

        dumped = response.model_dump()
        assert "author_email" not in dumped["comments"][0]
        assert "ip_address" not in dumped["comments"][0]

    @pytest.mark.asyncio
    async def test_empty_post(self, unit_env):
        use_case = await unit_env.get(GetCommentsUseCase)

        response = await use_case.execute(GetCommentsRequest(post_id=str(uuid4())))

        assert response.comments == []
        assert response.total == 0
