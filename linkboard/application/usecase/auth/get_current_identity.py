"""Get current identity use case."""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel

from linkboard.domain.service import JWTService, ProfileService
from linkboard.domain.value import DisplayName, UserId


class GetCurrentIdentityRequest(BaseModel):
    """Get current identity request."""

    token: str  # JWT token


class GetCurrentIdentityResponse(BaseModel):
    """Get current identity response."""

    user_id: str
    display_name: DisplayName
    is_admin: bool
    created_at: datetime


class GetCurrentIdentityUseCase:
    """Use case for getting the currently signed-in identity."""

    def __init__(self, jwt_service: JWTService, profile_service: ProfileService) -> None:
        """Initialize get current identity use case.

        Args:
            jwt_service: JWT token domain service
            profile_service: Profile domain service
        """
        self.jwt_service = jwt_service
        self.profile_service = profile_service

    async def execute(
        self, request: GetCurrentIdentityRequest
    ) -> GetCurrentIdentityResponse:
        """Execute get current identity flow.

        Args:
            request: Request with JWT token

        Returns:
            Profile of the signed-in identity

        Raises:
            JWTError: If token is invalid or expired
            NotFoundError: If the profile no longer exists
        """
        payload = self.jwt_service.verify_token(request.token)

        profile = await self.profile_service.get_profile(UserId(UUID(payload.user_id)))

        return GetCurrentIdentityResponse(
            user_id=str(profile.id),
            display_name=profile.display_name,
            is_admin=profile.is_admin,
            created_at=profile.created_at,
        )
