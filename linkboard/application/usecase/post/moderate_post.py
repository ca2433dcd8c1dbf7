"""Moderate post use case."""

from datetime import datetime
from typing import Literal
from uuid import UUID

from pydantic import BaseModel

from linkboard.domain.service import PostService, ProfileService
from linkboard.domain.value import ModerationStatus, PostId


class ModeratePostRequest(BaseModel):
    """Moderate post request."""

    post_id: str  # UUID string
    decision: Literal["approved", "rejected"]
    moderator_id: str | None  # User ID from session


class ModeratePostResponse(BaseModel):
    """Moderate post response."""

    post_id: str
    status: ModerationStatus
    moderator_id: str
    decided_at: datetime


class ModeratePostUseCase:
    """Use case for approving or rejecting a pending post."""

    def __init__(
        self, post_service: PostService, profile_service: ProfileService
    ) -> None:
        """Initialize moderate post use case.

        Args:
            post_service: Post domain service
            profile_service: Profile domain service
        """
        self.post_service = post_service
        self.profile_service = profile_service

    async def execute(self, request: ModeratePostRequest) -> ModeratePostResponse:
        """Execute moderate post flow.

        Args:
            request: Moderate post request

        Returns:
            Post status after the decision

        Raises:
            UnauthorizedError: If the caller is not an administrator
            NotFoundError: If post not found
            InvalidTransitionError: If the post was already moderated
        """
        moderator = await self.profile_service.find_identity(request.moderator_id)

        post = await self.post_service.decide(
            PostId(UUID(request.post_id)),
            ModerationStatus(request.decision),
            moderator,
        )

        return ModeratePostResponse(
            post_id=str(post.id),
            status=post.status,
            moderator_id=str(post.moderator_id),
            decided_at=post.decided_at,
        )
