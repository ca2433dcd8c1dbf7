"""Unit tests for JWT utilities."""

from datetime import datetime, timedelta, timezone
from uuid import uuid4

import jwt
import pytest

from linkboard.config import AuthSettings
from linkboard.util.jwt import JWTError, create_token, verify_token


@pytest.fixture
def auth_settings() -> AuthSettings:
    return AuthSettings(jwt_secret="test-secret-key-with-enough-length-123")


class TestJWT:
    """Tests for token creation and verification."""

    def test_round_trip(self, auth_settings):
        user_id = str(uuid4())
        token = create_token(user_id, auth_settings)

        payload = verify_token(token, auth_settings)

        assert payload.user_id == user_id
        assert payload.exp > datetime.now(timezone.utc)

    def test_expired_token(self, auth_settings):
        token = jwt.encode(
            {
                "user_id": str(uuid4()),
                "exp": datetime.now(timezone.utc) - timedelta(minutes=1),
            },
            auth_settings.jwt_secret,
            algorithm=auth_settings.jwt_algorithm,
        )

        with pytest.raises(JWTError, match="expired"):
            verify_token(token, auth_settings)

    def test_wrong_secret(self, auth_settings):
        other = AuthSettings(jwt_secret="a-different-secret-of-similar-length")
        token = create_token(str(uuid4()), other)

        with pytest.raises(JWTError, match="Invalid"):
            verify_token(token, auth_settings)

    def test_payload_without_user_id(self, auth_settings):
        token = jwt.encode(
            {"exp": datetime.now(timezone.utc) + timedelta(minutes=5)},
            auth_settings.jwt_secret,
            algorithm=auth_settings.jwt_algorithm,
        )

        with pytest.raises(JWTError, match="Malformed"):
            verify_token(token, auth_settings)

    def test_signed_token_with_non_uuid_subject(self, auth_settings):
        """A correctly signed token still has to name an identity UUID."""
        token = create_token("not-a-uuid", auth_settings)

        with pytest.raises(JWTError, match="Malformed"):
            verify_token(token, auth_settings)
