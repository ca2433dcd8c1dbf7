"""Unit tests for mapping domain errors onto HTTP responses."""

from uuid import uuid4

import pytest
from fastapi import HTTPException

from linkboard.config import AuthSettings
from linkboard.domain.error import (
    BackingStoreError,
    DomainError,
    InvalidStateError,
    InvalidTransitionError,
    NotFoundError,
    UnauthorizedError,
    ValidationError,
)
from linkboard.domain.service import JWTService
from linkboard.interface.api.errors import (
    domain_error_to_http,
    require_user_id,
    unexpected_error_to_http,
)
from linkboard.util.jwt import create_token


class TestDomainErrorToHttp:
    """Tests for domain_error_to_http."""

    def test_backing_store_failure_is_service_unavailable(self):
        # Arrange
        error = BackingStoreError("find_by_status")
        error.__cause__ = ConnectionRefusedError("refused")

        # Act
        http_error = domain_error_to_http(error, "list posts")

        # Assert
        assert http_error.status_code == 503
        assert "refused" not in str(http_error.detail)

    def test_validation_error_names_field(self):
        http_error = domain_error_to_http(
            ValidationError("title", "must not be empty"), "submit post"
        )

        assert http_error.status_code == 422
        assert http_error.detail == {"field": "title", "message": "must not be empty"}

    @pytest.mark.parametrize(
        "error, expected",
        [
            (UnauthorizedError("moderate posts"), 403),
            (NotFoundError("Post", "abc"), 404),
            (InvalidTransitionError("abc", "approved"), 409),
            (InvalidStateError("abc", "pending"), 409),
            (DomainError("something else"), 400),
        ],
    )
    def test_status_codes(self, error, expected):
        assert domain_error_to_http(error, "operation").status_code == expected

    def test_unexpected_error_hides_details(self):
        http_error = unexpected_error_to_http(RuntimeError("secret"), "list posts")

        assert http_error.status_code == 500
        assert "secret" not in str(http_error.detail)


class TestRequireUserId:
    """Tests for require_user_id."""

    def test_valid_token(self):
        settings = AuthSettings(jwt_secret="test-secret")
        user_id = str(uuid4())
        token = create_token(user_id, settings)

        assert require_user_id(JWTService(settings), token) == user_id

    @pytest.mark.parametrize("token", [None, "", "not-a-jwt"])
    def test_missing_or_invalid_token(self, token):
        settings = AuthSettings(jwt_secret="test-secret")

        with pytest.raises(HTTPException) as exc_info:
            require_user_id(JWTService(settings), token)

        assert exc_info.value.status_code == 401
