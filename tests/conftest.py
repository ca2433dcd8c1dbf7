"""Test configuration and helpers."""

from datetime import datetime, timedelta
from uuid import uuid4

import logfire

from linkboard.domain.model import Post, Profile
from linkboard.domain.repository import PostRepository, ProfileRepository
from linkboard.domain.value import DisplayName, ModerationStatus, PostId, UserId

# Keep telemetry local while testing
logfire.configure(send_to_logfire=False, console=False)

_EPOCH = datetime(2026, 1, 1, 12, 0, 0)


def make_profile(name: str = "alice", is_admin: bool = False) -> Profile:
    """Build a profile with a fresh ID."""
    return Profile(
        id=UserId(uuid4()),
        display_name=DisplayName(name),
        is_admin=is_admin,
    )


def make_post(
    author_id: UserId,
    title: str = "Interesting link",
    status: ModerationStatus = ModerationStatus.PENDING,
    minutes: int = 0,
    moderator_id: UserId | None = None,
) -> Post:
    """Build a post; ``minutes`` offsets created_at for ordering tests."""
    decided = status.is_terminal
    return Post(
        id=PostId(uuid4()),
        title=title,
        url="https://example.com/article",
        author_id=author_id,
        status=status,
        created_at=_EPOCH + timedelta(minutes=minutes),
        moderator_id=(moderator_id or UserId(uuid4())) if decided else None,
        decided_at=_EPOCH + timedelta(minutes=minutes + 1) if decided else None,
    )


async def seed_profile(
    profile_repo: ProfileRepository, name: str = "alice", is_admin: bool = False
) -> Profile:
    """Store and return a new profile."""
    return await profile_repo.save(make_profile(name, is_admin))


async def seed_post(
    post_repo: PostRepository,
    author: Profile,
    status: ModerationStatus = ModerationStatus.APPROVED,
    title: str = "Interesting link",
    minutes: int = 0,
) -> Post:
    """Store and return a post by ``author`` in the given status."""
    return await post_repo.insert(
        make_post(author.id, title=title, status=status, minutes=minutes)
    )
