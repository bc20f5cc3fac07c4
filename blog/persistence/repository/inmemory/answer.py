"""In-memory answer repository for testing."""

from typing import Optional
from uuid import UUID

from blog.domain.model.answer import Answer
from blog.domain.repository.answer import AnswerRepository
from blog.domain.value import AnswerId, QuestionId

from .store import InMemoryStore


class InMemoryAnswerRepository(AnswerRepository):
    """In-memory implementation of AnswerRepository for testing."""

    def __init__(self, store: Optional[InMemoryStore] = None) -> None:
        self._store = store or InMemoryStore()

    @property
    def _answers(self) -> dict[UUID, Answer]:
        return self._store.answers

    async def find_by_id(self, answer_id: UUID) -> Optional[Answer]:
        return self._answers.get(answer_id)

    async def find_for_update(self, target_id: UUID) -> Optional[Answer]:
        return self._answers.get(target_id)

    async def adjust_vote_counts(
        self, target_id: UUID, upvote_delta: int, downvote_delta: int
    ) -> Optional[Answer]:
        answer = self._answers.get(target_id)
        if answer is None:
            return None
        updated = answer.model_copy(
            update={
                "upvote_count": max(answer.upvote_count + upvote_delta, 0),
                "downvote_count": max(answer.downvote_count + downvote_delta, 0),
            }
        )
        self._answers[target_id] = updated
        return updated

    async def find_by_question(self, question_id: QuestionId) -> list[Answer]:
        return [a for a in self._answers.values() if a.question_id == question_id]

    async def save(self, answer: Answer) -> Answer:
        existing = self._answers.get(answer.id)
        if existing:
            answer = existing.model_copy(
                update={"content": answer.content, "updated_at": answer.updated_at}
            )
        self._answers[answer.id] = answer
        return answer

    async def delete(self, answer_id: AnswerId) -> bool:
        return self._answers.pop(answer_id, None) is not None

    async def delete_by_question(self, question_id: QuestionId) -> int:
        doomed = [a.id for a in self._answers.values() if a.question_id == question_id]
        for answer_id in doomed:
            del self._answers[answer_id]
        return len(doomed)
