"""Unit tests for table definitions and row mapping."""

from datetime import datetime
from uuid import uuid4

import pytest
from pydantic import ValidationError as PydanticValidationError
from sqlalchemy import CheckConstraint

from linkboard.domain.value import ModerationStatus
from linkboard.persistence.mappers import row_to_post
from linkboard.persistence.tables import posts_table, votes_table


def _ondelete(table, column: str) -> str | None:
    (foreign_key,) = table.c[column].foreign_keys
    return foreign_key.ondelete


def _post_row(**overrides) -> dict:
    row = {
        "id": uuid4(),
        "title": "A post",
        "body": None,
        "url": "https://example.com",
        "author_id": uuid4(),
        "status": "approved",
        "vote_count": 0,
        "comment_count": 0,
        "created_at": datetime(2026, 5, 1),
        "moderator_id": uuid4(),
        "decided_at": datetime(2026, 5, 2),
    }
    row.update(overrides)
    return row


class TestDeleteRules:
    """Deleting a profile must not leave rows the domain cannot load."""

    def test_moderator_cannot_be_deleted_out_from_under_a_decision(self):
        assert _ondelete(posts_table, "moderator_id") == "RESTRICT"

    def test_voter_cannot_be_deleted_while_votes_count(self):
        # A cascade here would drop votes without adjusting vote_count
        assert _ondelete(votes_table, "voter_id") == "RESTRICT"

    def test_votes_go_with_their_post(self):
        assert _ondelete(votes_table, "post_id") == "CASCADE"

    def test_decided_posts_must_record_moderator(self):
        constraints = {
            c.name: str(c.sqltext)
            for c in posts_table.constraints
            if isinstance(c, CheckConstraint)
        }

        assert "moderator_id IS NULL" in constraints["decision_recorded"]
        assert "decided_at IS NULL" in constraints["decision_recorded"]


class TestRowToPost:
    """Tests for mapping post rows."""

    def test_decided_row_maps(self):
        # Arrange
        row = _post_row()

        # Act
        post = row_to_post(row)

        # Assert
        assert post.status == ModerationStatus.APPROVED
        assert post.moderator_id == row["moderator_id"]
        assert post.decided_at == row["decided_at"]

    def test_string_ids_are_parsed(self):
        row = _post_row(id=str(uuid4()), moderator_id=str(uuid4()))

        post = row_to_post(row)

        assert str(post.id) == row["id"]
        assert str(post.moderator_id) == row["moderator_id"]

    def test_decided_row_without_moderator_is_rejected(self):
        # The schema no longer allows this row; the model refuses it too
        row = _post_row(moderator_id=None)

        with pytest.raises(PydanticValidationError):
            row_to_post(row)
