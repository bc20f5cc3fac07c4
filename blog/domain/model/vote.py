"""Vote entity.

A vote records one user's current opinion on one question or answer.
"""

from datetime import datetime
from uuid import UUID

from pydantic import Field

from blog.domain.model.common import DomainModel, utcnow
from blog.domain.value import TargetType, UserId, VoteId, VoteType


class Vote(DomainModel):
    """Vote entity.

    Business rules:
    - At most one vote per (user, target type, target) - enforced by a
      database unique constraint
    - Repeating the same vote retracts it; the opposite vote flips it
    - Polymorphic reference to the target (question or answer)
    """

    id: VoteId
    user_id: UserId
    target_type: TargetType
    target_id: UUID  # QuestionId or AnswerId (both are UUIDs)
    vote_type: VoteType
    created_at: datetime = Field(default_factory=utcnow)
    updated_at: datetime = Field(default_factory=utcnow)
