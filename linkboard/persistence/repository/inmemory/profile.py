"""In-memory profile repository for testing."""

from typing import Optional, Sequence

from linkboard.domain.model import Profile
from linkboard.domain.repository import ProfileRepository
from linkboard.domain.value import UserId

from .store import InMemoryStore


class InMemoryProfileRepository(ProfileRepository):
    """In-memory implementation of ProfileRepository for testing."""

    def __init__(self, store: InMemoryStore) -> None:
        self._store = store

    async def find_by_id(self, user_id: UserId) -> Optional[Profile]:
        """Find a profile by ID."""
        return self._store.profiles.get(user_id)

    async def find_by_ids(self, user_ids: Sequence[UserId]) -> list[Profile]:
        """Find several profiles at once."""
        return [
            self._store.profiles[uid] for uid in user_ids if uid in self._store.profiles
        ]

    async def save(self, profile: Profile) -> Profile:
        """Save a profile (create or update)."""
        self._store.profiles[profile.id] = profile
        return profile
