"""Unit tests for the in-memory vote repository."""

from uuid import uuid4

import pytest
from sqlalchemy.exc import IntegrityError

from blog.domain.model import Vote
from blog.domain.value import TargetType, UserId, VoteId, VoteType
from blog.persistence.repository.inmemory import InMemoryStore, InMemoryVoteRepository
from tests.harness import tally_votes


def _vote(user_id, target_id, vote_type=VoteType.UPVOTE) -> Vote:
    return Vote(
        id=VoteId(uuid4()),
        user_id=user_id,
        target_type=TargetType.QUESTION,
        target_id=target_id,
        vote_type=vote_type,
    )


class TestInMemoryVoteRepository:
    @pytest.mark.asyncio
    async def test_second_vote_by_same_user_violates_uniqueness(self):
        """Mirrors the (user, target_type, target_id) unique constraint."""
        # Arrange
        repo = InMemoryVoteRepository()
        user_id, target_id = UserId(uuid4()), uuid4()
        await repo.save(_vote(user_id, target_id))

        # Act & Assert
        with pytest.raises(IntegrityError):
            await repo.save(_vote(user_id, target_id, VoteType.DOWNVOTE))

    @pytest.mark.asyncio
    async def test_delete_by_targets_only_touches_given_targets(self):
        # Arrange
        store = InMemoryStore()
        repo = InMemoryVoteRepository(store)
        doomed, kept = uuid4(), uuid4()
        await repo.save(_vote(UserId(uuid4()), doomed))
        await repo.save(_vote(UserId(uuid4()), doomed))
        await repo.save(_vote(UserId(uuid4()), kept))

        # Act
        removed = await repo.delete_by_targets(TargetType.QUESTION, [doomed])

        # Assert
        assert removed == 2
        assert tally_votes(store, TargetType.QUESTION, kept, VoteType.UPVOTE) == 1
        assert tally_votes(store, TargetType.QUESTION, doomed, VoteType.UPVOTE) == 0
