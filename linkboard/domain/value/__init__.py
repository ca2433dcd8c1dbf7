"""Domain value objects for Linkboard."""

from linkboard.domain.value.identifiers import PostId, UserId
from linkboard.domain.value.types import (
    DisplayName,
    ModerationStatus,
    VoteValue,
    is_well_formed_url,
)

__all__ = [
    # Identifiers
    "UserId",
    "PostId",
    # Types
    "DisplayName",
    "ModerationStatus",
    "VoteValue",
    "is_well_formed_url",
]
