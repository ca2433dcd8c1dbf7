"""Unit tests for database error translation."""

import pytest
from sqlalchemy.exc import IntegrityError, OperationalError

from linkboard.domain.error import BackingStoreError, NotFoundError
from linkboard.persistence.error import backing_store_errors


class TestBackingStoreErrors:
    """Tests for the backing_store_errors context manager."""

    def test_database_failure_is_translated(self):
        # Arrange
        cause = OperationalError("SELECT 1", {}, ConnectionRefusedError("refused"))

        # Act
        with pytest.raises(BackingStoreError) as exc_info:
            with backing_store_errors("find_by_status"):
                raise cause

        # Assert
        assert exc_info.value.operation == "find_by_status"
        assert exc_info.value.__cause__ is cause
        assert "find_by_status" in str(exc_info.value)

    def test_constraint_violation_is_translated(self):
        cause = IntegrityError("INSERT INTO votes", {}, Exception("duplicate key"))

        with pytest.raises(BackingStoreError) as exc_info:
            with backing_store_errors("apply_vote"):
                raise cause

        assert exc_info.value.__cause__ is cause

    def test_domain_errors_pass_through(self):
        with pytest.raises(NotFoundError):
            with backing_store_errors("apply_vote"):
                raise NotFoundError("Post", "missing")

    def test_success_is_untouched(self):
        with backing_store_errors("insert"):
            result = 1 + 1

        assert result == 2
