"""Vote repository interface."""

from abc import ABC, abstractmethod
from typing import List, Optional, Sequence

from linkboard.domain.model.vote import Vote, VoteResult
from linkboard.domain.value import PostId, UserId, VoteValue


class VoteRepository(ABC):
    """Repository for Vote entity.

    Defines the contract for vote persistence operations.
    Implementations live in the infrastructure layer.
    """

    @abstractmethod
    async def find(self, post_id: PostId, voter_id: UserId) -> Optional[Vote]:
        """Find a voter's live vote on a post.

        Args:
            post_id: The post ID
            voter_id: The voter's user ID

        Returns:
            The vote if one exists, None otherwise
        """
        pass

    @abstractmethod
    async def find_by_post(self, post_id: PostId) -> List[Vote]:
        """Find all live votes on a post.

        Args:
            post_id: The post ID

        Returns:
            List of votes on the post
        """
        pass

    @abstractmethod
    async def find_by_voter_and_posts(
        self, voter_id: UserId, post_ids: Sequence[PostId]
    ) -> List[Vote]:
        """Find a voter's votes on multiple posts (batch query).

        Args:
            voter_id: The voter's user ID
            post_ids: Posts to check

        Returns:
            Votes by the voter on the given posts
        """
        pass

    @abstractmethod
    async def apply_vote(
        self, post_id: PostId, voter_id: UserId, value: VoteValue
    ) -> VoteResult:
        """Cast a vote atomically.

        Reads the existing vote, reconciles it with ``value`` using
        ``reconcile_vote``, writes the vote row and adjusts the post's
        aggregate as one unit. Implementations serialize concurrent casts
        for the same post and voter.

        Args:
            post_id: The post ID
            voter_id: The voter's user ID
            value: Value being cast

        Returns:
            Aggregate and voter net value after the cast

        Raises:
            NotFoundError: If the post does not exist
            InvalidStateError: If the post is not approved
        """
        pass

    @abstractmethod
    async def sum_for_post(self, post_id: PostId) -> int:
        """Sum the values of all live votes on a post.

        Args:
            post_id: The post ID

        Returns:
            Sum of vote values (0 when there are none)
        """
        pass
