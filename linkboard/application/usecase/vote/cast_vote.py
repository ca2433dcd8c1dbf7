"""Cast vote use case."""

from uuid import UUID

from pydantic import BaseModel

from linkboard.domain.service import ProfileService, VoteService
from linkboard.domain.value import PostId


class CastVoteRequest(BaseModel):
    """Cast vote request."""

    post_id: str  # UUID string
    user_id: str | None  # User ID from session
    value: int  # 1 for upvote, -1 for downvote


class CastVoteResponse(BaseModel):
    """Cast vote response."""

    post_id: str
    vote_count: int
    user_vote: int  # Caller's vote after the cast (0 = retracted)


class CastVoteUseCase:
    """Use case for voting on an approved post."""

    def __init__(
        self, vote_service: VoteService, profile_service: ProfileService
    ) -> None:
        """Initialize cast vote use case.

        Args:
            vote_service: Vote domain service
            profile_service: Profile domain service
        """
        self.vote_service = vote_service
        self.profile_service = profile_service

    async def execute(self, request: CastVoteRequest) -> CastVoteResponse:
        """Execute cast vote flow.

        Args:
            request: Cast vote request

        Returns:
            Aggregate and caller's vote after the cast

        Raises:
            ValidationError: If value is not 1 or -1
            UnauthorizedError: If the caller is not signed in
            NotFoundError: If post not found
            InvalidStateError: If the post is not approved
        """
        voter = await self.profile_service.find_identity(request.user_id)

        result = await self.vote_service.cast_vote(
            PostId(UUID(request.post_id)), voter, request.value
        )

        return CastVoteResponse(
            post_id=str(result.post_id),
            vote_count=result.vote_count,
            user_vote=result.user_vote,
        )
