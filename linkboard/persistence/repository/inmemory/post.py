"""In-memory post repository for testing."""

from datetime import datetime
from typing import Optional

from linkboard.domain.model import Post
from linkboard.domain.repository import PostRepository
from linkboard.domain.value import ModerationStatus, PostId, UserId

from .store import InMemoryStore


class InMemoryPostRepository(PostRepository):
    """In-memory implementation of PostRepository for testing."""

    def __init__(self, store: InMemoryStore) -> None:
        self._store = store

    async def find_by_id(self, post_id: PostId) -> Optional[Post]:
        """Find a post by ID."""
        return self._store.posts.get(post_id)

    async def find_by_status(self, status: ModerationStatus) -> list[Post]:
        """Find posts in a moderation status, newest first."""
        posts = [p for p in self._store.posts.values() if p.status == status]
        return sorted(posts, key=lambda p: p.created_at, reverse=True)

    async def insert(self, post: Post) -> Post:
        """Insert a new post."""
        if post.id in self._store.posts:
            raise ValueError(f"Post {post.id} already exists")
        self._store.posts[post.id] = post
        return post

    async def update_status(
        self,
        post_id: PostId,
        status: ModerationStatus,
        moderator_id: UserId,
        decided_at: datetime,
    ) -> Optional[Post]:
        """Record a moderation decision if the post is still pending."""
        post = self._store.posts.get(post_id)
        if post is None or post.status != ModerationStatus.PENDING:
            return None

        updated = post.model_copy(
            update={
                "status": status,
                "moderator_id": moderator_id,
                "decided_at": decided_at,
            }
        )
        self._store.posts[post_id] = updated
        return updated
