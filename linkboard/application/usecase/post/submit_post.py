"""Submit post use case."""

from datetime import datetime

import logfire
from pydantic import BaseModel

from linkboard.domain.service import PostService, ProfileService
from linkboard.domain.value import ModerationStatus


class SubmitPostRequest(BaseModel):
    """Submit post request."""

    title: str
    body: str | None = None
    url: str | None = None
    author_id: str | None  # User ID from session (None if anonymous)


class SubmitPostResponse(BaseModel):
    """Submit post response."""

    post_id: str
    title: str
    body: str | None
    url: str | None
    author_id: str
    status: ModerationStatus
    vote_count: int
    comment_count: int
    created_at: datetime


class SubmitPostUseCase:
    """Use case for submitting a post to the moderation queue."""

    def __init__(
        self, post_service: PostService, profile_service: ProfileService
    ) -> None:
        """Initialize submit post use case.

        Args:
            post_service: Post domain service
            profile_service: Profile domain service
        """
        self.post_service = post_service
        self.profile_service = profile_service

    async def execute(self, request: SubmitPostRequest) -> SubmitPostResponse:
        """Execute submit post flow.

        Steps:
        1. Resolve the author's profile
        2. Validate and store the post as pending (via PostService)

        Args:
            request: Submit post request

        Returns:
            Stored post details

        Raises:
            UnauthorizedError: If the caller is not signed in
            ValidationError: If a field is malformed
        """
        author = await self.profile_service.find_identity(request.author_id)

        post = await self.post_service.submit(
            title=request.title,
            body=request.body,
            url=request.url,
            author=author,
        )

        logfire.info("Post awaiting review", post_id=str(post.id))

        return SubmitPostResponse(
            post_id=str(post.id),
            title=post.title,
            body=post.body,
            url=post.url,
            author_id=str(post.author_id),
            status=post.status,
            vote_count=post.vote_count,
            comment_count=post.comment_count,
            created_at=post.created_at,
        )
