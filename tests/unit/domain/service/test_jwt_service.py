"""Unit tests for JWTService."""

from datetime import datetime, timedelta, timezone
from uuid import uuid4

import jwt
import pytest

from petal.config import AuthSettings
from petal.domain.service import JWTService
from petal.domain.value import UserRole
from petal.util.jwt import JWTError

TEST_SECRET = "unit-test-secret-key-at-least-32-bytes"


@pytest.fixture
def jwt_service() -> JWTService:
    return JWTService(auth_settings=AuthSettings(jwt_secret=TEST_SECRET))


class TestJWTService:
    """Tests for token creation and verification."""

    def test_round_trip_keeps_role(self, jwt_service):
        user_id = str(uuid4())

        payload = jwt_service.verify_token(
            jwt_service.create_token(user_id, UserRole.ADMIN)
        )

        assert payload.user_id == user_id
        assert payload.role == UserRole.ADMIN

    def test_default_role_is_user(self, jwt_service):
        payload = jwt_service.verify_token(jwt_service.create_token(str(uuid4())))

        assert payload.role == UserRole.USER

    def test_expired_token_raises(self, jwt_service):
        token = jwt.encode(
            {
                "user_id": str(uuid4()),
                "role": "user",
                "exp": datetime.now(timezone.utc) - timedelta(minutes=1),
            },
            TEST_SECRET,
            algorithm="HS256",
        )

        with pytest.raises(JWTError, match="expired"):
            jwt_service.verify_token(token)

    def test_token_signed_with_other_secret_raises(self, jwt_service):
        other = JWTService(
            auth_settings=AuthSettings(jwt_secret="another-secret-that-is-long-enough")
        )

        with pytest.raises(JWTError, match="Invalid token"):
            jwt_service.verify_token(other.create_token(str(uuid4())))

    def test_unknown_role_is_invalid(self, jwt_service):
        token = jwt.encode(
            {
                "user_id": str(uuid4()),
                "role": "superuser",
                "exp": datetime.now(timezone.utc) + timedelta(days=1),
            },
            TEST_SECRET,
            algorithm="HS256",
        )

        with pytest.raises(JWTError):
            jwt_service.verify_token(token)

    def test_get_payload_from_token_is_lenient(self, jwt_service):
        assert jwt_service.get_payload_from_token(None) is None
        assert jwt_service.get_payload_from_token("garbage") is None
