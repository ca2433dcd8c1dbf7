"""Profile repository interface."""

from abc import ABC, abstractmethod
from typing import List, Optional, Sequence

from linkboard.domain.model.profile import Profile
from linkboard.domain.value import UserId


class ProfileRepository(ABC):
    """Repository for Profile entity.

    Defines the contract for profile persistence operations.
    Implementations live in the infrastructure layer.
    """

    @abstractmethod
    async def find_by_id(self, user_id: UserId) -> Optional[Profile]:
        """Find a profile by ID.

        Args:
            user_id: The identity's unique identifier

        Returns:
            The profile if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_by_ids(self, user_ids: Sequence[UserId]) -> List[Profile]:
        """Find several profiles at once (batch query).

        Args:
            user_ids: Identities to look up

        Returns:
            Profiles that exist among the given IDs
        """
        pass

    @abstractmethod
    async def save(self, profile: Profile) -> Profile:
        """Save a profile (create or update).

        Args:
            profile: The profile to save

        Returns:
            The saved profile
        """
        pass
