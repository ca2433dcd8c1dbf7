"""Profile entity.

A profile is the application-side view of an authenticated identity.
"""

from datetime import datetime

from pydantic import Field

from linkboard.domain.model.common import DomainModel
from linkboard.domain.value import DisplayName, UserId


class Profile(DomainModel):
    """Authenticated identity with its public name and admin flag.

    ``is_admin`` is the only input to the moderation permission check.
    """

    id: UserId
    display_name: DisplayName
    is_admin: bool = False
    created_at: datetime = Field(default_factory=datetime.now)
