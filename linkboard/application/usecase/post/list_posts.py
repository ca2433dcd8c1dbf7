"""List posts use cases.

The public feed shows approved posts; the moderation queue shows pending
posts to administrators. Both are newest first.
"""

from datetime import datetime

import logfire
from pydantic import BaseModel

from linkboard.domain import policy
from linkboard.domain.error import UnauthorizedError
from linkboard.domain.model import Post, Profile
from linkboard.domain.service import PostService, ProfileService, VoteService
from linkboard.domain.value import ModerationStatus, UserId

UNKNOWN_AUTHOR = "[deleted]"


class PostListItem(BaseModel):
    """Post list item in response."""

    post_id: str
    title: str
    body: str | None
    url: str | None
    author_id: str
    author_display_name: str
    status: ModerationStatus
    vote_count: int
    comment_count: int
    created_at: datetime
    user_vote: int = 0  # Caller's vote: 1, -1 or 0


class ListPostsRequest(BaseModel):
    """List posts request."""

    user_id: str | None = None  # Current user ID (if authenticated)


class ListPostsResponse(BaseModel):
    """List posts response."""

    posts: list[PostListItem]
    count: int


def _to_item(
    post: Post, authors: dict[UserId, Profile], user_vote: int = 0
) -> PostListItem:
    author = authors.get(post.author_id)
    return PostListItem(
        post_id=str(post.id),
        title=post.title,
        body=post.body,
        url=post.url,
        author_id=str(post.author_id),
        author_display_name=author.display_name.root if author else UNKNOWN_AUTHOR,
        status=post.status,
        vote_count=post.vote_count,
        comment_count=post.comment_count,
        created_at=post.created_at,
        user_vote=user_vote,
    )


class ListPostsUseCase:
    """Use case for listing the public feed of approved posts."""

    def __init__(
        self,
        post_service: PostService,
        vote_service: VoteService,
        profile_service: ProfileService,
    ) -> None:
        """Initialize list posts use case.

        Args:
            post_service: Post domain service
            vote_service: Vote domain service
            profile_service: Profile domain service
        """
        self.post_service = post_service
        self.vote_service = vote_service
        self.profile_service = profile_service

    async def execute(self, request: ListPostsRequest) -> ListPostsResponse:
        """Execute list posts flow.

        Args:
            request: List posts request

        Returns:
            Approved posts with author names and the caller's votes
        """
        with logfire.span("list_posts.execute", authenticated=bool(request.user_id)):
            posts = await self.post_service.list_approved()

            authors = await self.profile_service.get_profiles(
                [post.author_id for post in posts]
            )

            # Caller's votes, only when signed in
            user_votes = {}
            viewer = await self.profile_service.find_identity(request.user_id)
            if viewer and posts:
                user_votes = await self.vote_service.get_user_votes(
                    viewer.id, [post.id for post in posts]
                )

            items = [
                _to_item(post, authors, user_votes.get(post.id, 0)) for post in posts
            ]

            logfire.info("Feed listed", count=len(items))
            return ListPostsResponse(posts=items, count=len(items))


class ListPendingPostsRequest(BaseModel):
    """List pending posts request."""

    user_id: str | None  # Current user ID (must be an administrator)


class ListPendingPostsUseCase:
    """Use case for listing the moderation queue."""

    def __init__(
        self, post_service: PostService, profile_service: ProfileService
    ) -> None:
        """Initialize list pending posts use case.

        Args:
            post_service: Post domain service
            profile_service: Profile domain service
        """
        self.post_service = post_service
        self.profile_service = profile_service

    async def execute(self, request: ListPendingPostsRequest) -> ListPostsResponse:
        """Execute list pending posts flow.

        Args:
            request: List pending posts request

        Returns:
            Pending posts, newest first

        Raises:
            UnauthorizedError: If the caller is not an administrator
        """
        viewer = await self.profile_service.find_identity(request.user_id)
        if not policy.can_moderate(viewer):
            raise UnauthorizedError("view the moderation queue", request.user_id)

        posts = await self.post_service.list_pending()
        authors = await self.profile_service.get_profiles(
            [post.author_id for post in posts]
        )

        items = [_to_item(post, authors) for post in posts]
        return ListPostsResponse(posts=items, count=len(items))
