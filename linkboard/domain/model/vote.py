"""Vote entity and ledger rules.

Each user holds at most one live vote per post, worth +1 or -1.
Casting the same value again retracts the vote; casting the opposite
value replaces it.
"""

from datetime import datetime
from enum import Enum
from typing import Optional

from pydantic import Field

from linkboard.domain.model.common import DomainModel
from linkboard.domain.value import PostId, UserId, VoteValue
from linkboard.domain.value.common import ValueObject


class Vote(DomainModel):
    """Vote entity.

    Identified by the composite key ``(post_id, voter_id)``; the store
    enforces uniqueness of that pair.
    """

    post_id: PostId
    voter_id: UserId
    value: VoteValue
    created_at: datetime = Field(default_factory=datetime.now)
    updated_at: datetime = Field(default_factory=datetime.now)


class VoteAction(str, Enum):
    """Write required on the vote row to reconcile a cast."""

    INSERT = "insert"
    REPLACE = "replace"
    DELETE = "delete"


class VoteOutcome(ValueObject):
    """Result of reconciling a cast against the existing vote."""

    action: VoteAction
    delta: int  # Change to the post's aggregate
    net_value: int  # Voter's vote on the post afterwards (0 = none)


class VoteResult(ValueObject):
    """Confirmed ledger state after a cast."""

    post_id: PostId
    vote_count: int
    user_vote: int


def reconcile_vote(existing: Optional[VoteValue], value: VoteValue) -> VoteOutcome:
    """Decide how a cast changes the ledger.

    - no existing vote: insert, aggregate moves by ``value``
    - same value: delete (toggle-off), aggregate moves by ``-value``
    - opposite value: replace, aggregate swings by ``2 * value``

    Args:
        existing: Voter's current vote on the post, if any
        value: Value being cast

    Returns:
        Action to apply and its effect on the aggregate
    """
    value = VoteValue(value)

    if existing is None:
        return VoteOutcome(action=VoteAction.INSERT, delta=value, net_value=value)

    if existing == value:
        return VoteOutcome(action=VoteAction.DELETE, delta=-value, net_value=0)

    return VoteOutcome(
        action=VoteAction.REPLACE, delta=value - existing, net_value=value
    )
