"""Domain model entities for Linkboard."""

from linkboard.domain.model.post import Post
from linkboard.domain.model.profile import Profile
from linkboard.domain.model.vote import (
    Vote,
    VoteAction,
    VoteOutcome,
    VoteResult,
    reconcile_vote,
)

__all__ = [
    "Post",
    "Profile",
    "Vote",
    "VoteAction",
    "VoteOutcome",
    "VoteResult",
    "reconcile_vote",
]
