"""Post aggregate root.

Posts are user submissions that wait in a moderation queue until an
administrator approves or rejects them. Only approved posts are public.
"""

from datetime import datetime
from typing import Optional

from pydantic import Field, model_validator

from linkboard.domain.error import InvalidTransitionError, ValidationError
from linkboard.domain.model.common import DomainModel
from linkboard.domain.value import ModerationStatus, PostId, UserId

TITLE_MAX_LENGTH = 200
BODY_MAX_LENGTH = 1000


class Post(DomainModel):
    """Post aggregate root.

    Lifecycle:
    - created as ``pending`` by a submission
    - moved exactly once to ``approved`` or ``rejected`` by a moderator
    - never deleted by the application
    """

    id: PostId
    title: str = Field(min_length=1, max_length=TITLE_MAX_LENGTH)
    body: Optional[str] = Field(default=None, max_length=BODY_MAX_LENGTH)
    url: Optional[str] = None
    author_id: UserId
    status: ModerationStatus = ModerationStatus.PENDING
    vote_count: int = 0  # Sum of live vote values, may be negative
    comment_count: int = Field(default=0, ge=0)
    created_at: datetime = Field(default_factory=datetime.now)
    moderator_id: Optional[UserId] = None
    decided_at: Optional[datetime] = None

    @model_validator(mode="after")
    def validate_decision_fields(self) -> "Post":
        """Terminal posts carry who decided and when; pending posts don't."""
        decided = self.moderator_id is not None and self.decided_at is not None
        if self.status.is_terminal and not decided:
            raise ValueError(
                f"{self.status.value} posts require moderator_id and decided_at"
            )
        if not self.status.is_terminal and (
            self.moderator_id is not None or self.decided_at is not None
        ):
            raise ValueError("Pending posts cannot carry a moderation decision")
        return self

    @property
    def is_public(self) -> bool:
        """Whether the post is visible in the public feed."""
        return self.status == ModerationStatus.APPROVED

    def decide(
        self,
        decision: ModerationStatus,
        moderator_id: UserId,
        at: datetime | None = None,
    ) -> "Post":
        """Apply a moderation decision.

        Pure transition: returns a new post and leaves this one untouched.
        Only the status, moderator and decision time change.

        Args:
            decision: ``approved`` or ``rejected``
            moderator_id: Identity making the decision
            at: Decision time (defaults to now)

        Returns:
            Post in the terminal state

        Raises:
            ValidationError: If decision is not a terminal status
            InvalidTransitionError: If the post was already moderated
        """
        if not decision.is_terminal:
            raise ValidationError(
                "decision", "Decision must be 'approved' or 'rejected'"
            )
        if self.status.is_terminal:
            raise InvalidTransitionError(str(self.id), self.status.value)

        return self.model_copy(
            update={
                "status": decision,
                "moderator_id": moderator_id,
                "decided_at": at or datetime.now(),
            }
        )
