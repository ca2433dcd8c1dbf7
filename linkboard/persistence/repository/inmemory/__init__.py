"""In-memory repository implementations for testing."""

from .post import InMemoryPostRepository
from .profile import InMemoryProfileRepository
from .store import InMemoryStore
from .vote import InMemoryVoteRepository

__all__ = [
    "InMemoryPostRepository",
    "InMemoryProfileRepository",
    "InMemoryStore",
    "InMemoryVoteRepository",
]
