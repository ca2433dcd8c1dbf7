"""PostgreSQL repository implementations."""

from .post import PostgresPostRepository
from .profile import PostgresProfileRepository
from .vote import PostgresVoteRepository

__all__ = [
    "PostgresPostRepository",
    "PostgresProfileRepository",
    "PostgresVoteRepository",
]
