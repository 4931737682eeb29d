"""Fixtures for end-to-end API tests."""

import asyncio
from dataclasses import dataclass
from uuid import uuid4

import pytest
from fastapi.testclient import TestClient

from petal.config import AuthSettings
from petal.domain.model import Post
from petal.domain.repository import PostRepository
from petal.domain.value import UserRole
from petal.interface.api.app import create_app
from petal.util.jwt import create_token
from tests.conftest import make_post
from tests.di import build_test_container


@dataclass
class ApiEnv:
    """Test client plus what tests need to call it."""

    client: TestClient
    post: Post
    auth_settings: AuthSettings

    def token(self, role: UserRole = UserRole.USER, user_id: str | None = None) -> str:
        return create_token(user_id or str(uuid4()), role, self.auth_settings)

    def auth(self, role: UserRole = UserRole.USER, user_id: str | None = None):
        return {"Authorization": f"Bearer {self.token(role, user_id)}"}


@pytest.fixture
def api():
    """Create test client over an in-memory container with one post."""
    container = build_test_container()

    async def _seed() -> tuple[Post, AuthSettings]:
        post_repo = await container.get(PostRepository)
        auth_settings = await container.get(AuthSettings)
        return await post_repo.save(make_post()), auth_settings

    post, auth_settings = asyncio.run(_seed())

    app_instance = create_app(container=container)
    return ApiEnv(
        client=TestClient(app_instance), post=post, auth_settings=auth_settings
    )
