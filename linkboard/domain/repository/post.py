"""Post repository interface."""

from abc import ABC, abstractmethod
from datetime import datetime
from typing import List, Optional

from linkboard.domain.model.post import Post
from linkboard.domain.value import ModerationStatus, PostId, UserId


class PostRepository(ABC):
    """Repository for Post aggregate.

    Defines the contract for post persistence operations.
    Implementations live in the infrastructure layer.
    """

    @abstractmethod
    async def find_by_id(self, post_id: PostId) -> Optional[Post]:
        """Find a post by ID.

        Args:
            post_id: The post's unique identifier

        Returns:
            The post if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_by_status(self, status: ModerationStatus) -> List[Post]:
        """Find all posts in a moderation status.

        Args:
            status: Moderation status to filter on

        Returns:
            Posts ordered by creation time, newest first
        """
        pass

    @abstractmethod
    async def insert(self, post: Post) -> Post:
        """Insert a new post.

        Args:
            post: The post to insert

        Returns:
            The stored post
        """
        pass

    @abstractmethod
    async def update_status(
        self,
        post_id: PostId,
        status: ModerationStatus,
        moderator_id: UserId,
        decided_at: datetime,
    ) -> Optional[Post]:
        """Record a moderation decision if the post is still pending.

        The check and the write are a single conditional update, so two
        concurrent decisions cannot both succeed.

        Args:
            post_id: The post ID
            status: Terminal status to set
            moderator_id: Identity making the decision
            decided_at: Decision time

        Returns:
            The updated post, or None if the post is missing or no longer pending
        """
        pass
