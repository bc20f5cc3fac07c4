"""In-memory vote repository for testing."""

from typing import Optional, Sequence
from uuid import UUID

from sqlalchemy.exc import IntegrityError

from blog.domain.model.vote import Vote
from blog.domain.repository.vote import VoteRepository
from blog.domain.value import TargetType, UserId, VoteId, VoteType

from .store import InMemoryStore


class InMemoryVoteRepository(VoteRepository):
    """In-memory implementation of VoteRepository for testing."""

    def __init__(self, store: Optional[InMemoryStore] = None) -> None:
        self._store = store or InMemoryStore()

    @property
    def _votes(self) -> dict[UUID, Vote]:
        return self._store.votes

    async def find_by_user_and_target(
        self,
        user_id: UserId,
        target_type: TargetType,
        target_id: UUID,
    ) -> Optional[Vote]:
        for vote in self._votes.values():
            if (
                vote.user_id == user_id
                and vote.target_type == target_type
                and vote.target_id == target_id
            ):
                return vote
        return None

    async def find_by_user_and_targets(
        self,
        user_id: UserId,
        target_type: TargetType,
        target_ids: Sequence[UUID],
    ) -> list[Vote]:
        """Find a user's votes on multiple targets (batch query)."""
        if not target_ids:
            return []

        wanted = set(target_ids)
        return [
            v
            for v in self._votes.values()
            if v.user_id == user_id
            and v.target_type == target_type
            and v.target_id in wanted
        ]

    async def save(self, vote: Vote) -> Vote:
        """Save a vote.

        Raises:
            IntegrityError: If the user already voted on this target
        """
        existing = await self.find_by_user_and_target(
            vote.user_id, vote.target_type, vote.target_id
        )
        if existing:
            raise IntegrityError("Duplicate vote", None, Exception())

        self._votes[vote.id] = vote
        return vote

    async def update_vote_type(self, vote_id: VoteId, vote_type: VoteType) -> None:
        vote = self._votes.get(vote_id)
        if vote:
            self._votes[vote_id] = vote.model_copy(update={"vote_type": vote_type})

    async def delete(self, vote_id: VoteId) -> bool:
        return self._votes.pop(vote_id, None) is not None

    async def delete_by_targets(
        self, target_type: TargetType, target_ids: Sequence[UUID]
    ) -> int:
        wanted = set(target_ids)
        doomed = [
            v.id
            for v in self._votes.values()
            if v.target_type == target_type and v.target_id in wanted
        ]
        for vote_id in doomed:
            del self._votes[vote_id]
        return len(doomed)
