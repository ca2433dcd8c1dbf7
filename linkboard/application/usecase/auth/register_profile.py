"""Register profile use case."""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel

from linkboard.domain.service import JWTService, ProfileService
from linkboard.domain.value import DisplayName, UserId


class RegisterProfileRequest(BaseModel):
    """Register profile request."""

    token: str  # JWT token
    display_name: str


class RegisterProfileResponse(BaseModel):
    """Register profile response."""

    user_id: str
    display_name: DisplayName
    is_admin: bool
    created_at: datetime


class RegisterProfileUseCase:
    """Use case for creating or renaming the caller's own profile.

    The session token comes from the identity provider; this gives the
    identity a public name on the board. The admin flag is never set here.
    """

    def __init__(self, jwt_service: JWTService, profile_service: ProfileService) -> None:
        """Initialize register profile use case.

        Args:
            jwt_service: JWT token domain service
            profile_service: Profile domain service
        """
        self.jwt_service = jwt_service
        self.profile_service = profile_service

    async def execute(self, request: RegisterProfileRequest) -> RegisterProfileResponse:
        """Execute register profile flow.

        Args:
            request: Request with JWT token and the chosen display name

        Returns:
            Saved profile

        Raises:
            JWTError: If token is invalid or expired
            ValidationError: If the display name is malformed
        """
        payload = self.jwt_service.verify_token(request.token)

        profile = await self.profile_service.save_profile(
            UserId(UUID(payload.user_id)), request.display_name
        )

        return RegisterProfileResponse(
            user_id=str(profile.id),
            display_name=profile.display_name,
            is_admin=profile.is_admin,
            created_at=profile.created_at,
        )
