"""Post domain service.

Owns the moderation lifecycle: submission, review queue, decisions.
"""

from datetime import datetime
from typing import Optional
from uuid import uuid4

import logfire

from linkboard.domain import policy
from linkboard.domain.error import (
    InvalidTransitionError,
    NotFoundError,
    UnauthorizedError,
    ValidationError,
)
from linkboard.domain.model import Post, Profile
from linkboard.domain.model.post import BODY_MAX_LENGTH, TITLE_MAX_LENGTH
from linkboard.domain.repository import PostRepository
from linkboard.domain.value import ModerationStatus, PostId, is_well_formed_url

from .base import Service


class PostService(Service):
    """Domain service for post operations."""

    def __init__(self, post_repository: PostRepository) -> None:
        """Initialize post service.

        Args:
            post_repository: Post repository
        """
        self.post_repository = post_repository

    async def submit(
        self,
        title: str,
        body: Optional[str],
        url: Optional[str],
        author: Optional[Profile],
    ) -> Post:
        """Submit a new post for review.

        Inputs are trimmed; a blank body or URL counts as absent.

        Args:
            title: Post title (required, at most 200 characters)
            body: Optional description (at most 1000 characters)
            url: Optional external link (absolute http/https URL)
            author: Submitting identity (None if anonymous)

        Returns:
            Stored post in the pending state

        Raises:
            UnauthorizedError: If the caller is not signed in
            ValidationError: If a field is malformed (field is named)
        """
        if author is None or not policy.can_submit(author):
            raise UnauthorizedError("submit posts")

        with logfire.span("post_service.submit", author_id=str(author.id)):
            title, body, url = self._validate_submission(title, body, url)

            post = Post(
                id=PostId(uuid4()),
                title=title,
                body=body,
                url=url,
                author_id=author.id,
                status=ModerationStatus.PENDING,
                vote_count=0,
                comment_count=0,
                created_at=datetime.now(),
            )

            saved = await self.post_repository.insert(post)
            logfire.info(
                "Post submitted for review",
                post_id=str(saved.id),
                author_id=str(author.id),
                has_url=saved.url is not None,
            )
            return saved

    async def decide(
        self,
        post_id: PostId,
        decision: ModerationStatus,
        moderator: Optional[Profile],
    ) -> Post:
        """Approve or reject a pending post.

        Args:
            post_id: Post ID
            decision: ``approved`` or ``rejected``
            moderator: Acting identity

        Returns:
            Post in its terminal state

        Raises:
            UnauthorizedError: If the caller is not an administrator
            ValidationError: If decision is not terminal
            NotFoundError: If post not found
            InvalidTransitionError: If the post was already moderated
        """
        if moderator is None or not policy.can_moderate(moderator):
            logfire.warn(
                "Moderation refused",
                post_id=str(post_id),
                user_id=str(moderator.id) if moderator else None,
            )
            raise UnauthorizedError(
                "moderate posts", str(moderator.id) if moderator else None
            )

        with logfire.span(
            "post_service.decide",
            post_id=str(post_id),
            decision=decision.value,
            moderator_id=str(moderator.id),
        ):
            post = await self.get_post(post_id)

            # Raises before anything is written
            now = datetime.now()
            decided = post.decide(decision, moderator.id, now)

            updated = await self.post_repository.update_status(
                post_id, decided.status, moderator.id, now
            )

            if updated is None:
                # Another decision landed between the read and the write
                current = await self.get_post(post_id)
                logfire.warn(
                    "Concurrent moderation decision",
                    post_id=str(post_id),
                    current_status=current.status.value,
                )
                raise InvalidTransitionError(str(post_id), current.status.value)

            logfire.info(
                "Post moderated",
                post_id=str(post_id),
                status=updated.status.value,
                moderator_id=str(moderator.id),
            )
            return updated

    async def get_post(self, post_id: PostId) -> Post:
        """Get a post by ID.

        Args:
            post_id: Post ID

        Returns:
            Post entity

        Raises:
            NotFoundError: If post not found
        """
        with logfire.span("post_service.get_post", post_id=str(post_id)):
            post = await self.post_repository.find_by_id(post_id)
            if not post:
                logfire.warn("Post not found", post_id=str(post_id))
                raise NotFoundError("Post", str(post_id))
            return post

    async def list_pending(self) -> list[Post]:
        """List posts awaiting review, newest first."""
        with logfire.span("post_service.list_pending"):
            posts = await self.post_repository.find_by_status(ModerationStatus.PENDING)
            logfire.info("Pending posts listed", count=len(posts))
            return posts

    async def list_approved(self) -> list[Post]:
        """List publicly visible posts, newest first."""
        with logfire.span("post_service.list_approved"):
            posts = await self.post_repository.find_by_status(
                ModerationStatus.APPROVED
            )
            logfire.info("Approved posts listed", count=len(posts))
            return posts

    @staticmethod
    def _validate_submission(
        title: str, body: Optional[str], url: Optional[str]
    ) -> tuple[str, Optional[str], Optional[str]]:
        """Normalize and validate submission fields.

        Returns:
            Trimmed (title, body, url) with blanks converted to None

        Raises:
            ValidationError: Naming the first offending field
        """
        title = (title or "").strip()
        body = (body or "").strip() or None
        url = (url or "").strip() or None

        if not title:
            raise ValidationError("title", "Title is required")
        if len(title) > TITLE_MAX_LENGTH:
            raise ValidationError(
                "title", f"Title must be at most {TITLE_MAX_LENGTH} characters"
            )
        if body is not None and len(body) > BODY_MAX_LENGTH:
            raise ValidationError(
                "body", f"Body must be at most {BODY_MAX_LENGTH} characters"
            )
        if url is not None and not is_well_formed_url(url):
            raise ValidationError("url", "URL must be an absolute http(s) URL")

        return title, body, url
