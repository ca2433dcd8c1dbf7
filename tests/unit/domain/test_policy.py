"""Unit tests for access policy predicates."""

from uuid import uuid4

import pytest

from linkboard.domain import policy
from linkboard.domain.value import ModerationStatus, UserId
from tests.conftest import make_post, make_profile


class TestPolicy:
    """Tests for the access policy."""

    def test_anonymous_caller_can_do_nothing(self):
        post = make_post(UserId(uuid4()), status=ModerationStatus.APPROVED)

        assert not policy.is_authenticated(None)
        assert not policy.can_submit(None)
        assert not policy.can_moderate(None)
        assert not policy.can_vote(None, post)

    def test_member_can_submit_but_not_moderate(self):
        member = make_profile("bob")

        assert policy.can_submit(member)
        assert not policy.can_moderate(member)

    def test_admin_can_moderate(self):
        assert policy.can_moderate(make_profile("root", is_admin=True))

    @pytest.mark.parametrize(
        "status,allowed",
        [
            (ModerationStatus.APPROVED, True),
            (ModerationStatus.PENDING, False),
            (ModerationStatus.REJECTED, False),
        ],
    )
    def test_votes_only_on_approved_posts(self, status, allowed):
        member = make_profile("bob")
        post = make_post(UserId(uuid4()), status=status)

        assert policy.can_vote(member, post) is allowed
