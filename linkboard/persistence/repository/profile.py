"""PostgreSQL implementation of Profile repository."""

from typing import List, Optional, Sequence

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from linkboard.domain.model import Profile
from linkboard.domain.repository import ProfileRepository
from linkboard.domain.value import UserId
from linkboard.persistence.error import backing_store_errors
from linkboard.persistence.mappers import profile_to_dict, row_to_profile
from linkboard.persistence.tables import profiles_table


class PostgresProfileRepository(ProfileRepository):
    """PostgreSQL implementation of ProfileRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def find_by_id(self, user_id: UserId) -> Optional[Profile]:
        """Find a profile by ID.

        Args:
            user_id: User ID to look up

        Returns:
            Profile if found, None otherwise
        """
        with backing_store_errors("find_profile"):
            stmt = select(profiles_table).where(profiles_table.c.id == user_id)
            result = await self.session.execute(stmt)
            row = result.mappings().first()
        return row_to_profile(dict(row)) if row else None

    async def find_by_ids(self, user_ids: Sequence[UserId]) -> List[Profile]:
        """Find several profiles at once."""
        if not user_ids:
            return []

        with backing_store_errors("find_profiles"):
            stmt = select(profiles_table).where(profiles_table.c.id.in_(list(user_ids)))
            result = await self.session.execute(stmt)
            rows = result.mappings().all()
        return [row_to_profile(dict(row)) for row in rows]

    async def save(self, profile: Profile) -> Profile:
        """Save a profile (create or update).

        Args:
            profile: Profile to save

        Returns:
            Saved profile
        """
        existing = await self.find_by_id(profile.id)

        profile_dict = profile_to_dict(profile)

        with backing_store_errors("save_profile"):
            if existing:
                stmt = (
                    profiles_table.update()
                    .where(profiles_table.c.id == profile.id)
                    .values(**profile_dict)
                )
            else:
                stmt = profiles_table.insert().values(**profile_dict)
            await self.session.execute(stmt)
            await self.session.flush()

        return profile
