"""In-memory vote repository for testing."""

from datetime import datetime
from typing import Optional, Sequence

from linkboard.domain.error import InvalidStateError, NotFoundError
from linkboard.domain.model import Vote, VoteAction, VoteResult, reconcile_vote
from linkboard.domain.repository import VoteRepository
from linkboard.domain.value import ModerationStatus, PostId, UserId, VoteValue

from .store import InMemoryStore


class InMemoryVoteRepository(VoteRepository):
    """In-memory implementation of VoteRepository for testing."""

    def __init__(self, store: InMemoryStore) -> None:
        self._store = store

    async def find(self, post_id: PostId, voter_id: UserId) -> Optional[Vote]:
        """Find a voter's live vote on a post."""
        return self._store.votes.get((post_id, voter_id))

    async def find_by_post(self, post_id: PostId) -> list[Vote]:
        """Find all live votes on a post."""
        return [v for (pid, _), v in self._store.votes.items() if pid == post_id]

    async def find_by_voter_and_posts(
        self, voter_id: UserId, post_ids: Sequence[PostId]
    ) -> list[Vote]:
        """Find a voter's votes on multiple posts (batch query)."""
        if not post_ids:
            return []

        wanted = set(post_ids)
        return [
            v
            for (pid, vid), v in self._store.votes.items()
            if vid == voter_id and pid in wanted
        ]

    async def apply_vote(
        self, post_id: PostId, voter_id: UserId, value: VoteValue
    ) -> VoteResult:
        """Cast a vote atomically.

        Holds the post's lock across the read-reconcile-write sequence.
        Locks are only created for stored posts.
        """
        if post_id not in self._store.posts:
            raise NotFoundError("Post", str(post_id))

        async with self._store.post_locks[post_id]:
            post = self._store.posts[post_id]
            if post.status != ModerationStatus.APPROVED:
                raise InvalidStateError(str(post_id), post.status.value)

            key = (post_id, voter_id)
            existing = self._store.votes.get(key)
            outcome = reconcile_vote(existing.value if existing else None, value)
            now = datetime.now()

            if outcome.action == VoteAction.INSERT:
                self._store.votes[key] = Vote(
                    post_id=post_id,
                    voter_id=voter_id,
                    value=value,
                    created_at=now,
                    updated_at=now,
                )
            elif outcome.action == VoteAction.REPLACE:
                self._store.votes[key] = existing.model_copy(
                    update={"value": VoteValue(value), "updated_at": now}
                )
            else:
                del self._store.votes[key]

            updated = post.model_copy(
                update={"vote_count": post.vote_count + outcome.delta}
            )
            self._store.posts[post_id] = updated

            return VoteResult(
                post_id=post_id,
                vote_count=updated.vote_count,
                user_vote=outcome.net_value,
            )

    async def sum_for_post(self, post_id: PostId) -> int:
        """Sum the values of all live votes on a post."""
        return sum(int(v.value) for v in await self.find_by_post(post_id))
