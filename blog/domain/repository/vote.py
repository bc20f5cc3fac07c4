"""Vote repository interface."""

from abc import ABC, abstractmethod
from typing import List, Optional, Sequence
from uuid import UUID

from blog.domain.model.vote import Vote
from blog.domain.value import TargetType, UserId, VoteId, VoteType


class VoteRepository(ABC):
    """Repository for Vote entity.

    Defines the contract for vote persistence operations.
    Implementations live in the infrastructure layer.
    """

    @abstractmethod
    async def find_by_user_and_target(
        self,
        user_id: UserId,
        target_type: TargetType,
        target_id: UUID,
    ) -> Optional[Vote]:
        """Find a user's vote on a specific target.

        Args:
            user_id: The user's ID
            target_type: Type of target (question or answer)
            target_id: ID of the target

        Returns:
            The vote if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_by_user_and_targets(
        self,
        user_id: UserId,
        target_type: TargetType,
        target_ids: Sequence[UUID],
    ) -> List[Vote]:
        """Find a user's votes on multiple targets (batch query).

        Args:
            user_id: The user's ID
            target_type: Type of targets
            target_ids: IDs of the targets to check

        Returns:
            Votes by the user on the specified targets
        """
        pass

    @abstractmethod
    async def save(self, vote: Vote) -> Vote:
        """Insert a new vote.

        Raises:
            IntegrityError: If the user already voted on this target
        """
        pass

    @abstractmethod
    async def update_vote_type(self, vote_id: VoteId, vote_type: VoteType) -> None:
        """Flip an existing vote to ``vote_type``."""
        pass

    @abstractmethod
    async def delete(self, vote_id: VoteId) -> bool:
        """Delete a vote.

        Returns:
            True if a vote was deleted, False if none existed
        """
        pass

    @abstractmethod
    async def delete_by_targets(
        self, target_type: TargetType, target_ids: Sequence[UUID]
    ) -> int:
        """Delete every vote on the given targets.

        Returns:
            Number of votes deleted
        """
        pass
