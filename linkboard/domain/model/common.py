"""Shared base for Linkboard entities."""

from pydantic import BaseModel, ConfigDict


class DomainModel(BaseModel):
    """Frozen pydantic base for posts, votes and profiles.

    State changes go through ``model_copy(update=...)`` and return a new
    instance; entities are never mutated in place.
    """

    model_config = ConfigDict(
        frozen=True,
        arbitrary_types_allowed=True,  # RootValueObject fields such as DisplayName
    )
