"""PostgreSQL implementation of Post repository."""

from datetime import datetime
from typing import List, Optional

import logfire
from sqlalchemy import desc, insert, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from linkboard.domain.model import Post
from linkboard.domain.repository import PostRepository
from linkboard.domain.value import ModerationStatus, PostId, UserId
from linkboard.persistence.error import backing_store_errors
from linkboard.persistence.mappers import post_to_dict, row_to_post
from linkboard.persistence.tables import posts_table


class PostgresPostRepository(PostRepository):
    """PostgreSQL implementation of PostRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def find_by_id(self, post_id: PostId) -> Optional[Post]:
        """Find a post by ID."""
        with logfire.span("post_repository.find_by_id", post_id=str(post_id)):
            with backing_store_errors("find_post"):
                stmt = select(posts_table).where(posts_table.c.id == post_id)
                result = await self.session.execute(stmt)
                row = result.mappings().first()

            if not row:
                logfire.warn("Post not found", post_id=str(post_id))
                return None

            return row_to_post(dict(row))

    async def find_by_status(self, status: ModerationStatus) -> List[Post]:
        """Find posts in a moderation status, newest first."""
        with logfire.span("post_repository.find_by_status", status=status.value):
            with backing_store_errors("list_posts"):
                stmt = (
                    select(posts_table)
                    .where(posts_table.c.status == status.value)
                    .order_by(desc(posts_table.c.created_at))
                )
                result = await self.session.execute(stmt)
                rows = result.mappings().all()

            posts = [row_to_post(dict(row)) for row in rows]
            logfire.info("Found posts", status=status.value, count=len(posts))
            return posts

    async def insert(self, post: Post) -> Post:
        """Insert a new post."""
        with logfire.span("post_repository.insert", post_id=str(post.id)):
            with backing_store_errors("insert_post"):
                stmt = insert(posts_table).values(**post_to_dict(post))
                await self.session.execute(stmt)
                await self.session.flush()

            logfire.info("Post inserted", post_id=str(post.id))
            return post

    async def update_status(
        self,
        post_id: PostId,
        status: ModerationStatus,
        moderator_id: UserId,
        decided_at: datetime,
    ) -> Optional[Post]:
        """Record a moderation decision if the post is still pending.

        Uses a single conditional UPDATE so concurrent decisions can't both win.
        """
        with logfire.span(
            "post_repository.update_status",
            post_id=str(post_id),
            status=status.value,
        ):
            with backing_store_errors("update_post_status"):
                stmt = (
                    update(posts_table)
                    .where(posts_table.c.id == post_id)
                    .where(posts_table.c.status == ModerationStatus.PENDING.value)
                    .values(
                        status=status.value,
                        moderator_id=moderator_id,
                        decided_at=decided_at,
                    )
                    .returning(posts_table)
                )
                result = await self.session.execute(stmt)
                row = result.mappings().first()
                await self.session.flush()

            if row is None:
                logfire.warn("Post missing or no longer pending", post_id=str(post_id))
                return None

            return row_to_post(dict(row))
