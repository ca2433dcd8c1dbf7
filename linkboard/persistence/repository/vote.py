"""PostgreSQL implementation of Vote repository."""

from typing import List, Optional, Sequence

import logfire
from sqlalchemy import and_, delete, func, insert, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from linkboard.domain.error import InvalidStateError, NotFoundError
from linkboard.domain.model import Vote, VoteAction, VoteResult, reconcile_vote
from linkboard.domain.repository import VoteRepository
from linkboard.domain.value import ModerationStatus, PostId, UserId, VoteValue
from linkboard.persistence.error import backing_store_errors
from linkboard.persistence.mappers import row_to_vote
from linkboard.persistence.tables import posts_table, votes_table


class PostgresVoteRepository(VoteRepository):
    """PostgreSQL implementation of VoteRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    def _key(self, post_id: PostId, voter_id: UserId):
        return and_(
            votes_table.c.post_id == post_id,
            votes_table.c.voter_id == voter_id,
        )

    async def find(self, post_id: PostId, voter_id: UserId) -> Optional[Vote]:
        """Find a voter's live vote on a post."""
        with backing_store_errors("find_vote"):
            stmt = select(votes_table).where(self._key(post_id, voter_id))
            result = await self.session.execute(stmt)
            row = result.mappings().first()
        return row_to_vote(dict(row)) if row else None

    async def find_by_post(self, post_id: PostId) -> List[Vote]:
        """Find all live votes on a post."""
        with backing_store_errors("find_votes_by_post"):
            stmt = select(votes_table).where(votes_table.c.post_id == post_id)
            result = await self.session.execute(stmt)
            rows = result.mappings().all()
        return [row_to_vote(dict(row)) for row in rows]

    async def find_by_voter_and_posts(
        self, voter_id: UserId, post_ids: Sequence[PostId]
    ) -> List[Vote]:
        """Find a voter's votes on multiple posts (batch query)."""
        if not post_ids:
            return []

        with backing_store_errors("find_votes_by_voter"):
            stmt = select(votes_table).where(
                and_(
                    votes_table.c.voter_id == voter_id,
                    votes_table.c.post_id.in_(list(post_ids)),
                )
            )
            result = await self.session.execute(stmt)
            rows = result.mappings().all()
        return [row_to_vote(dict(row)) for row in rows]

    async def apply_vote(
        self, post_id: PostId, voter_id: UserId, value: VoteValue
    ) -> VoteResult:
        """Cast a vote atomically.

        Locks the post row for the rest of the request transaction, so casts
        on the same post (from any voter) are serialized and the aggregate is
        adjusted with SQL-level arithmetic.
        """
        with logfire.span(
            "vote_repository.apply_vote",
            post_id=str(post_id),
            voter_id=str(voter_id),
            value=int(value),
        ):
            with backing_store_errors("apply_vote"):
                lock_stmt = (
                    select(posts_table.c.status)
                    .where(posts_table.c.id == post_id)
                    .with_for_update()
                )
                status = (await self.session.execute(lock_stmt)).scalar_one_or_none()

                if status is None:
                    raise NotFoundError("Post", str(post_id))
                if ModerationStatus(status) != ModerationStatus.APPROVED:
                    raise InvalidStateError(str(post_id), str(status))

                existing = await self.find(post_id, voter_id)
                outcome = reconcile_vote(existing.value if existing else None, value)

                if outcome.action == VoteAction.INSERT:
                    await self.session.execute(
                        insert(votes_table).values(
                            post_id=post_id, voter_id=voter_id, value=int(value)
                        )
                    )
                elif outcome.action == VoteAction.REPLACE:
                    await self.session.execute(
                        update(votes_table)
                        .where(self._key(post_id, voter_id))
                        .values(value=int(value), updated_at=func.now())
                    )
                else:
                    await self.session.execute(
                        delete(votes_table).where(self._key(post_id, voter_id))
                    )

                count_stmt = (
                    update(posts_table)
                    .where(posts_table.c.id == post_id)
                    .values(vote_count=posts_table.c.vote_count + outcome.delta)
                    .returning(posts_table.c.vote_count)
                )
                vote_count = (await self.session.execute(count_stmt)).scalar_one()
                await self.session.flush()

            logfire.info(
                "Vote applied",
                post_id=str(post_id),
                action=outcome.action.value,
                delta=outcome.delta,
                vote_count=vote_count,
            )
            return VoteResult(
                post_id=post_id, vote_count=vote_count, user_vote=outcome.net_value
            )

    async def sum_for_post(self, post_id: PostId) -> int:
        """Sum the values of all live votes on a post."""
        with backing_store_errors("sum_votes"):
            stmt = select(func.coalesce(func.sum(votes_table.c.value), 0)).where(
                votes_table.c.post_id == post_id
            )
            result = await self.session.execute(stmt)
            return int(result.scalar_one())
