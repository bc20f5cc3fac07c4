"""Base model for all domain entities."""

from datetime import datetime, timezone

from pydantic import BaseModel, ConfigDict


class DomainModel(BaseModel):
    """Base class for all domain models.

    Entities are immutable; changes go through ``model_copy(update=...)``
    and are persisted explicitly by a repository.
    """

    model_config = ConfigDict(frozen=True)


class VotableModel(DomainModel):
    """Entity carrying denormalized up/down vote counters.

    Counters are only changed by vote accounting and never go below zero.
    """

    upvote_count: int = 0
    downvote_count: int = 0

    @property
    def net_votes(self) -> int:
        """Upvotes minus downvotes."""
        return self.upvote_count - self.downvote_count


def utcnow() -> datetime:
    """Current time as a timezone-aware UTC datetime."""
    return datetime.now(timezone.utc)
