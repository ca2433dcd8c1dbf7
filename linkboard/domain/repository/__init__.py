"""Repository interfaces for Linkboard domain.

Repository interfaces are defined in the domain layer (dependency inversion).
Implementations live in the infrastructure layer.
"""

from linkboard.domain.repository.post import PostRepository
from linkboard.domain.repository.profile import ProfileRepository
from linkboard.domain.repository.vote import VoteRepository

__all__ = [
    "PostRepository",
    "ProfileRepository",
    "VoteRepository",
]
