"""Shared contract for repositories of votable entities."""

from abc import ABC, abstractmethod
from typing import Optional
from uuid import UUID

from blog.domain.model.common import VotableModel


class VotableRepository(ABC):
    """Counter operations needed by vote accounting.

    Question and answer repositories both implement this, so the vote
    service can treat every target type the same way.
    """

    @abstractmethod
    async def find_by_id(self, target_id: UUID) -> Optional[VotableModel]:
        """Load a target without locking it."""
        pass

    @abstractmethod
    async def find_for_update(self, target_id: UUID) -> Optional[VotableModel]:
        """Load a target and lock its row until the current transaction ends.

        Concurrent vote casts on the same target serialize on this lock.

        Args:
            target_id: Question or answer ID

        Returns:
            The target if found, None otherwise
        """
        pass

    @abstractmethod
    async def adjust_vote_counts(
        self, target_id: UUID, upvote_delta: int, downvote_delta: int
    ) -> Optional[VotableModel]:
        """Atomically add deltas to the vote counters, each floored at 0.

        Args:
            target_id: Question or answer ID
            upvote_delta: Change to apply to upvote_count
            downvote_delta: Change to apply to downvote_count

        Returns:
            The target with updated counters, None if it no longer exists
        """
        pass
