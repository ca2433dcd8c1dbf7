"""Vote domain service."""

from typing import Optional, Sequence

import logfire

from linkboard.domain import policy
from linkboard.domain.error import InvalidStateError, UnauthorizedError, ValidationError
from linkboard.domain.model import Profile, VoteResult
from linkboard.domain.repository import VoteRepository
from linkboard.domain.value import PostId, UserId, VoteValue

from .base import Service
from .post_service import PostService


class VoteService(Service):
    """Domain service for vote operations."""

    def __init__(
        self,
        vote_repository: VoteRepository,
        post_service: PostService,
    ) -> None:
        """Initialize vote service.

        Args:
            vote_repository: Vote repository
            post_service: Post domain service
        """
        self.vote_repository = vote_repository
        self.post_service = post_service

    async def cast_vote(
        self, post_id: PostId, voter: Optional[Profile], value: int
    ) -> VoteResult:
        """Cast, change or retract a vote on a post.

        Casting the value the voter already holds retracts it; casting the
        opposite value replaces it. The read-reconcile-write sequence runs
        inside ``VoteRepository.apply_vote``.

        Args:
            post_id: Post ID
            voter: Acting identity (None if anonymous)
            value: +1 or -1

        Returns:
            Post aggregate and the voter's net vote after the cast

        Raises:
            ValidationError: If value is not +1 or -1
            UnauthorizedError: If the caller is not signed in
            NotFoundError: If post not found
            InvalidStateError: If the post is not approved
        """
        try:
            vote_value = VoteValue(value)
        except ValueError:
            raise ValidationError("value", "Vote value must be 1 or -1")

        if voter is None or not policy.is_authenticated(voter):
            raise UnauthorizedError("vote")

        with logfire.span(
            "vote_service.cast_vote",
            post_id=str(post_id),
            voter_id=str(voter.id),
            value=int(vote_value),
        ):
            post = await self.post_service.get_post(post_id)
            if not policy.can_vote(voter, post):
                logfire.warn(
                    "Vote on non-approved post",
                    post_id=str(post_id),
                    status=post.status.value,
                )
                raise InvalidStateError(str(post_id), post.status.value)

            result = await self.vote_repository.apply_vote(
                post_id, voter.id, vote_value
            )

            logfire.info(
                "Vote cast",
                post_id=str(post_id),
                voter_id=str(voter.id),
                vote_count=result.vote_count,
                user_vote=result.user_vote,
            )
            return result

    async def get_user_votes(
        self, voter_id: UserId, post_ids: Sequence[PostId]
    ) -> dict[PostId, int]:
        """Look up a voter's net vote on each of the given posts.

        Args:
            voter_id: Voter's user ID
            post_ids: Posts to check

        Returns:
            Mapping of post ID to +1, -1 or 0 (no vote)
        """
        if not post_ids:
            return {}

        # Batch query to fetch all votes at once (avoid N+1)
        votes = await self.vote_repository.find_by_voter_and_posts(voter_id, post_ids)
        by_post = {vote.post_id: int(vote.value) for vote in votes}

        return {post_id: by_post.get(post_id, 0) for post_id in post_ids}
