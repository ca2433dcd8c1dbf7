"""Mappers for converting between database rows and domain models.

Since we're using Pydantic domain models (immutable), we use manual mapping
instead of SQLAlchemy's classical imperative mapping.
"""

from typing import Any, Dict
from uuid import UUID

from linkboard.domain.model import Post, Profile, Vote
from linkboard.domain.value import (
    DisplayName,
    ModerationStatus,
    PostId,
    UserId,
    VoteValue,
)


def _uuid(value: Any) -> UUID:
    return UUID(value) if isinstance(value, str) else value


def row_to_profile(row: Dict[str, Any]) -> Profile:
    """Convert database row to Profile domain model.

    Args:
        row: Database row as dict

    Returns:
        Profile domain model
    """
    return Profile(
        id=UserId(_uuid(row["id"])),
        display_name=DisplayName(row["display_name"]),
        is_admin=row["is_admin"],
        created_at=row["created_at"],
    )


def profile_to_dict(profile: Profile) -> Dict[str, Any]:
    """Convert Profile domain model to database dict.

    Args:
        profile: Profile domain model

    Returns:
        Dict suitable for database insertion/update
    """
    return profile.model_dump()


def row_to_post(row: Dict[str, Any]) -> Post:
    """Convert database row to Post domain model.

    Args:
        row: Database row as dict

    Returns:
        Post domain model
    """
    return Post(
        id=PostId(_uuid(row["id"])),
        title=row["title"],
        body=row.get("body"),
        url=row.get("url"),
        author_id=UserId(_uuid(row["author_id"])),
        status=ModerationStatus(row["status"]),
        vote_count=row["vote_count"],
        comment_count=row["comment_count"],
        created_at=row["created_at"],
        moderator_id=UserId(_uuid(row["moderator_id"]))
        if row.get("moderator_id")
        else None,
        decided_at=row.get("decided_at"),
    )


def post_to_dict(post: Post) -> Dict[str, Any]:
    """Convert Post domain model to database dict.

    Args:
        post: Post domain model

    Returns:
        Dict suitable for database insertion
    """
    data = post.model_dump()
    data["status"] = post.status.value
    return data


def row_to_vote(row: Dict[str, Any]) -> Vote:
    """Convert database row to Vote domain model.

    Args:
        row: Database row as dict

    Returns:
        Vote domain model
    """
    return Vote(
        post_id=PostId(_uuid(row["post_id"])),
        voter_id=UserId(_uuid(row["voter_id"])),
        value=VoteValue(row["value"]),
        created_at=row["created_at"],
        updated_at=row["updated_at"],
    )
