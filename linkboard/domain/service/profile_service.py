"""Profile domain service."""

from typing import Sequence
from uuid import UUID

import logfire

from linkboard.domain.error import NotFoundError, ValidationError
from linkboard.domain.model import Profile
from linkboard.domain.repository import ProfileRepository
from linkboard.domain.value import DisplayName, UserId

from .base import Service


class ProfileService(Service):
    """Domain service for profile lookups and provisioning."""

    def __init__(self, profile_repository: ProfileRepository) -> None:
        """Initialize profile service.

        Args:
            profile_repository: Profile repository
        """
        self.profile_repository = profile_repository

    async def get_profile(self, user_id: UserId) -> Profile:
        """Get profile by ID.

        Args:
            user_id: User ID

        Returns:
            Profile entity

        Raises:
            NotFoundError: If profile not found
        """
        with logfire.span("profile_service.get_profile", user_id=str(user_id)):
            profile = await self.profile_repository.find_by_id(user_id)
            if not profile:
                logfire.warn("Profile not found", user_id=str(user_id))
                raise NotFoundError("Profile", str(user_id))
            logfire.info(
                "Profile found",
                user_id=str(user_id),
                display_name=profile.display_name.root,
                is_admin=profile.is_admin,
            )
            return profile

    async def get_profiles(self, user_ids: Sequence[UserId]) -> dict[UserId, Profile]:
        """Get several profiles keyed by ID.

        Missing IDs are left out of the result.

        Args:
            user_ids: User IDs to look up

        Returns:
            Dictionary mapping user ID to profile
        """
        unique_ids = list(dict.fromkeys(user_ids))
        if not unique_ids:
            return {}

        with logfire.span("profile_service.get_profiles", count=len(unique_ids)):
            profiles = await self.profile_repository.find_by_ids(unique_ids)
            return {profile.id: profile for profile in profiles}

    async def find_identity(self, user_id: str | None) -> Profile | None:
        """Resolve the acting identity for a request.

        Args:
            user_id: User ID taken from the session token (None if anonymous)

        Returns:
            Profile of the caller, or None when anonymous or unknown
        """
        if not user_id:
            return None

        try:
            uid = UserId(UUID(user_id))
        except ValueError:
            logfire.warn("Malformed user ID in session", user_id=user_id)
            return None

        profile = await self.profile_repository.find_by_id(uid)
        if profile is None:
            logfire.warn("Session references unknown profile", user_id=user_id)
        return profile

    async def save_profile(
        self, user_id: UserId, display_name: str, is_admin: bool | None = None
    ) -> Profile:
        """Create the profile for an identity, or rename an existing one.

        Args:
            user_id: Identity the profile belongs to
            display_name: Public name to show next to posts
            is_admin: New admin flag; None keeps the stored flag
                (new profiles start as members)

        Returns:
            Saved profile

        Raises:
            ValidationError: If the display name is blank or too long
        """
        try:
            name = DisplayName(display_name)
        except ValueError as e:
            raise ValidationError(
                "display_name", "Display name must be 1-255 characters"
            ) from e

        with logfire.span("profile_service.save_profile", user_id=str(user_id)):
            existing = await self.profile_repository.find_by_id(user_id)
            if existing is None:
                profile = Profile(id=user_id, display_name=name, is_admin=bool(is_admin))
            else:
                profile = existing.model_copy(
                    update={
                        "display_name": name,
                        "is_admin": existing.is_admin if is_admin is None else is_admin,
                    }
                )

            saved = await self.profile_repository.save(profile)
            logfire.info(
                "Profile saved",
                user_id=str(user_id),
                created=existing is None,
                is_admin=saved.is_admin,
            )
            return saved
