"""Access policy.

Pure predicates deciding whether an identity may perform an operation.
Anonymous callers are passed as ``None``. Services consult these before
any write, so a refused operation never partially applies.
"""

from typing import Optional

from linkboard.domain.model import Post, Profile
from linkboard.domain.value import ModerationStatus


def is_authenticated(identity: Optional[Profile]) -> bool:
    """Whether the caller is signed in."""
    return identity is not None


def can_moderate(identity: Optional[Profile]) -> bool:
    """Only administrators may approve or reject posts."""
    return identity is not None and identity.is_admin


def can_submit(identity: Optional[Profile]) -> bool:
    """Any authenticated identity may submit a post."""
    return is_authenticated(identity)


def can_vote(identity: Optional[Profile], post: Post) -> bool:
    """Authenticated identities may vote on approved posts."""
    return is_authenticated(identity) and post.status == ModerationStatus.APPROVED
