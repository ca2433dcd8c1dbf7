"""Domain value objects for Linkboard.

Value objects are immutable and defined by their values, not identity.
They encapsulate validation rules and business logic.
"""

from enum import Enum, IntEnum

from pydantic import AnyHttpUrl, TypeAdapter, field_validator

from linkboard.domain.value.common import RootValueObject

_http_url = TypeAdapter(AnyHttpUrl)


class ModerationStatus(str, Enum):
    """Moderation status of a post.

    ``pending`` is the initial state; ``approved`` and ``rejected`` are
    terminal.
    """

    PENDING = "pending"
    APPROVED = "approved"
    REJECTED = "rejected"

    @property
    def is_terminal(self) -> bool:
        """Whether no further transitions are allowed from this status."""
        return self is not ModerationStatus.PENDING


class VoteValue(IntEnum):
    """Signed endorsement of a post."""

    UP = 1
    DOWN = -1


class DisplayName(RootValueObject[str]):
    """Public name shown next to a user's posts."""

    @field_validator("root")
    @classmethod
    def validate_display_name(cls, v: str) -> str:
        """Validate display name is not blank and within length limits."""
        v = v.strip()
        if len(v) < 1 or len(v) > 255:
            raise ValueError("Display name must be 1-255 characters")
        return v


def is_well_formed_url(value: str) -> bool:
    """Check that ``value`` is an absolute http(s) URL."""
    try:
        _http_url.validate_python(value)
    except ValueError:
        return False
    return True
