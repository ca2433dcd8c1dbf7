"""Unit tests for CastVoteUseCase."""

from uuid import uuid4

import pytest

from linkboard.application.usecase.vote import CastVoteRequest, CastVoteUseCase
from linkboard.domain.error import NotFoundError, UnauthorizedError
from linkboard.domain.repository import PostRepository, ProfileRepository
from linkboard.domain.value import ModerationStatus
from tests.conftest import seed_post, seed_profile
from tests.harness import create_env_fixture

unit_env = create_env_fixture()


class TestCastVote:
    """Tests for CastVoteUseCase."""

    @pytest.mark.asyncio
    async def test_cast_then_swing(self, unit_env):
        # Arrange
        use_case = await unit_env.get(CastVoteUseCase)
        profile_repo = await unit_env.get(ProfileRepository)
        post_repo = await unit_env.get(PostRepository)
        author = await seed_profile(profile_repo, "author")
        voter = await seed_profile(profile_repo, "voter")
        post = await seed_post(post_repo, author, ModerationStatus.APPROVED)

        # Act
        first = await use_case.execute(
            CastVoteRequest(post_id=str(post.id), user_id=str(voter.id), value=1)
        )
        second = await use_case.execute(
            CastVoteRequest(post_id=str(post.id), user_id=str(voter.id), value=-1)
        )

        # Assert
        assert (first.vote_count, first.user_vote) == (1, 1)
        assert (second.vote_count, second.user_vote) == (-1, -1)
        assert second.post_id == str(post.id)

    @pytest.mark.asyncio
    async def test_unknown_identity_refused(self, unit_env):
        use_case = await unit_env.get(CastVoteUseCase)
        profile_repo = await unit_env.get(ProfileRepository)
        post_repo = await unit_env.get(PostRepository)
        author = await seed_profile(profile_repo, "author")
        post = await seed_post(post_repo, author, ModerationStatus.APPROVED)

        with pytest.raises(UnauthorizedError):
            await use_case.execute(
                CastVoteRequest(post_id=str(post.id), user_id=str(uuid4()), value=1)
            )

    @pytest.mark.asyncio
    async def test_unknown_post(self, unit_env):
        use_case = await unit_env.get(CastVoteUseCase)
        profile_repo = await unit_env.get(ProfileRepository)
        voter = await seed_profile(profile_repo, "voter")

        with pytest.raises(NotFoundError):
            await use_case.execute(
                CastVoteRequest(post_id=str(uuid4()), user_id=str(voter.id), value=1)
            )
