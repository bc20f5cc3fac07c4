"""Vote domain service."""

from dataclasses import dataclass
from typing import Optional, Sequence
from uuid import UUID, uuid4

import logfire

from blog.domain.error import NotFoundError
from blog.domain.model.common import utcnow
from blog.domain.model.vote import Vote
from blog.domain.repository import (
    AnswerRepository,
    QuestionRepository,
    VotableRepository,
    VoteRepository,
)
from blog.domain.value import TargetType, UserId, VoteId, VoteOutcome, VoteType

from .base import Service


@dataclass(frozen=True)
class VoteResult:
    """Outcome of a cast-vote call and the target's counters afterwards."""

    outcome: VoteOutcome
    vote_type: Optional[VoteType]  # the actor's vote after the call
    upvote_count: int
    downvote_count: int

    @property
    def message(self) -> str:
        return self.outcome.value

    @property
    def net_votes(self) -> int:
        return self.upvote_count - self.downvote_count


def _counter_deltas(vote_type: VoteType, step: int) -> tuple[int, int]:
    """(upvote_delta, downvote_delta) for moving one ``vote_type`` counter."""
    if vote_type == VoteType.UPVOTE:
        return step, 0
    return 0, step


class VoteService(Service):
    """Domain service for vote accounting on questions and answers.

    ``cast_vote`` is the only way counters change. It must run inside a
    single transaction: the target row is locked first, then the vote row
    and the counters are written, so counters always equal the vote-row
    tallies even with concurrent callers.
    """

    def __init__(
        self,
        vote_repository: VoteRepository,
        question_repository: QuestionRepository,
        answer_repository: AnswerRepository,
    ) -> None:
        """Initialize vote service.

        Args:
            vote_repository: Vote repository
            question_repository: Question repository (question targets)
            answer_repository: Answer repository (answer targets)
        """
        self.vote_repository = vote_repository
        self._targets: dict[TargetType, VotableRepository] = {
            TargetType.QUESTION: question_repository,
            TargetType.ANSWER: answer_repository,
        }

    async def cast_vote(
        self,
        target_type: TargetType,
        target_id: UUID,
        vote_type: VoteType,
        actor_id: UserId,
    ) -> VoteResult:
        """Cast, retract or switch the actor's vote on a target.

        - No existing vote: create it and increment its counter.
        - Same vote type again: delete it and decrement its counter.
        - Opposite vote type: flip it, moving one count between counters.

        Args:
            target_type: Question or answer
            target_id: Target ID
            vote_type: Requested vote direction
            actor_id: Authenticated user casting the vote

        Returns:
            What happened and the updated counters

        Raises:
            NotFoundError: If the target does not exist
        """
        with logfire.span(
            "vote_service.cast_vote",
            target_type=target_type.value,
            target_id=str(target_id),
            vote_type=vote_type.value,
            user_id=str(actor_id),
        ):
            targets = self._targets[target_type]

            # Serializes concurrent casts on this target until commit
            target = await targets.find_for_update(target_id)
            if target is None:
                logfire.warn(
                    "Vote on non-existent target",
                    target_type=target_type.value,
                    target_id=str(target_id),
                )
                raise NotFoundError(target_type.value.capitalize(), str(target_id))

            existing = await self.vote_repository.find_by_user_and_target(
                user_id=actor_id, target_type=target_type, target_id=target_id
            )

            current: Optional[VoteType]
            if existing is None:
                now = utcnow()
                await self.vote_repository.save(
                    Vote(
                        id=VoteId(uuid4()),
                        user_id=actor_id,
                        target_type=target_type,
                        target_id=target_id,
                        vote_type=vote_type,
                        created_at=now,
                        updated_at=now,
                    )
                )
                outcome = VoteOutcome.CAST
                current = vote_type
                upvote_delta, downvote_delta = _counter_deltas(vote_type, 1)
            elif existing.vote_type == vote_type:
                await self.vote_repository.delete(existing.id)
                outcome = VoteOutcome.REMOVED
                current = None
                upvote_delta, downvote_delta = _counter_deltas(vote_type, -1)
            else:
                await self.vote_repository.update_vote_type(existing.id, vote_type)
                outcome = VoteOutcome.CHANGED
                current = vote_type
                up_new, down_new = _counter_deltas(vote_type, 1)
                up_old, down_old = _counter_deltas(existing.vote_type, -1)
                upvote_delta, downvote_delta = up_new + up_old, down_new + down_old

            updated = await targets.adjust_vote_counts(
                target_id, upvote_delta, downvote_delta
            )
            if updated is None:
                # Row lock held since find_for_update, so only reachable on
                # a broken repository
                logfire.error(
                    "Vote target vanished during vote",
                    target_type=target_type.value,
                    target_id=str(target_id),
                )
                raise NotFoundError(target_type.value.capitalize(), str(target_id))

            logfire.info(
                outcome.value.capitalize(),
                target_type=target_type.value,
                target_id=str(target_id),
                user_id=str(actor_id),
                upvote_count=updated.upvote_count,
                downvote_count=updated.downvote_count,
            )

            return VoteResult(
                outcome=outcome,
                vote_type=current,
                upvote_count=updated.upvote_count,
                downvote_count=updated.downvote_count,
            )

    async def get_vote_status(
        self, target_type: TargetType, target_id: UUID, actor_id: UserId
    ) -> Optional[VoteType]:
        """Get the actor's current vote on a target.

        Returns:
            The vote type, or None if the actor has not voted

        Raises:
            NotFoundError: If the target does not exist
        """
        with logfire.span(
            "vote_service.get_vote_status",
            target_type=target_type.value,
            target_id=str(target_id),
            user_id=str(actor_id),
        ):
            target = await self._targets[target_type].find_by_id(target_id)
            if target is None:
                raise NotFoundError(target_type.value.capitalize(), str(target_id))

            vote = await self.vote_repository.find_by_user_and_target(
                user_id=actor_id, target_type=target_type, target_id=target_id
            )
            return vote.vote_type if vote else None

    async def get_vote_statuses(
        self,
        target_type: TargetType,
        target_ids: Sequence[UUID],
        actor_id: UserId,
    ) -> dict[UUID, Optional[VoteType]]:
        """Map each target ID to the actor's vote on it (None if not voted).

        Args:
            target_type: Type shared by all targets
            target_ids: Targets to check
            actor_id: Voter

        Returns:
            Dictionary with an entry for every requested target
        """
        if not target_ids:
            return {}

        # Batch query to avoid N+1
        votes = await self.vote_repository.find_by_user_and_targets(
            user_id=actor_id, target_type=target_type, target_ids=target_ids
        )
        by_target = {vote.target_id: vote.vote_type for vote in votes}
        return {target_id: by_target.get(target_id) for target_id in target_ids}
