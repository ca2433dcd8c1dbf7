"""Unit tests for GetCurrentIdentityUseCase."""

from uuid import uuid4

import pytest

from linkboard.application.usecase.auth import (
    GetCurrentIdentityRequest,
    GetCurrentIdentityUseCase,
)
from linkboard.domain.error import NotFoundError
from linkboard.domain.repository import ProfileRepository
from linkboard.domain.service import JWTService
from linkboard.util.jwt import JWTError
from tests.conftest import seed_profile
from tests.harness import create_env_fixture

unit_env = create_env_fixture()


class TestGetCurrentIdentity:
    """Tests for GetCurrentIdentityUseCase."""

    @pytest.mark.asyncio
    async def test_resolves_profile_from_token(self, unit_env):
        # Arrange
        use_case = await unit_env.get(GetCurrentIdentityUseCase)
        jwt_service = await unit_env.get(JWTService)
        profile_repo = await unit_env.get(ProfileRepository)
        admin = await seed_profile(profile_repo, "root", is_admin=True)
        token = jwt_service.create_token(str(admin.id))

        # Act
        response = await use_case.execute(GetCurrentIdentityRequest(token=token))

        # Assert
        assert response.user_id == str(admin.id)
        assert response.display_name.root == "root"
        assert response.is_admin is True

    @pytest.mark.asyncio
    async def test_invalid_token(self, unit_env):
        use_case = await unit_env.get(GetCurrentIdentityUseCase)

        with pytest.raises(JWTError):
            await use_case.execute(GetCurrentIdentityRequest(token="garbage"))

    @pytest.mark.asyncio
    async def test_token_for_missing_profile(self, unit_env):
        use_case = await unit_env.get(GetCurrentIdentityUseCase)
        jwt_service = await unit_env.get(JWTService)
        token = jwt_service.create_token(str(uuid4()))

        with pytest.raises(NotFoundError):
            await use_case.execute(GetCurrentIdentityRequest(token=token))

    @pytest.mark.asyncio
    async def test_token_with_non_uuid_subject(self, unit_env):
        """A signed token whose subject is not a UUID is an invalid session."""
        use_case = await unit_env.get(GetCurrentIdentityUseCase)
        jwt_service = await unit_env.get(JWTService)
        token = jwt_service.create_token("not-a-uuid")

        with pytest.raises(JWTError):
            await use_case.execute(GetCurrentIdentityRequest(token=token))
