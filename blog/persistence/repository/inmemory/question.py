"""In-memory question repository for testing."""

from typing import Optional
from uuid import UUID

from blog.domain.model.question import Question
from blog.domain.repository.question import QuestionRepository, QuestionSortOrder
from blog.domain.value import PageRequest, QuestionId, UserId

from .store import InMemoryStore


class InMemoryQuestionRepository(QuestionRepository):
    """In-memory implementation of QuestionRepository for testing."""

    def __init__(self, store: Optional[InMemoryStore] = None) -> None:
        self._store = store or InMemoryStore()

    @property
    def _questions(self) -> dict[UUID, Question]:
        return self._store.questions

    def _filter(
        self,
        sort: QuestionSortOrder,
        search: Optional[str],
        tag: Optional[str],
        author_id: Optional[UserId],
    ) -> list[Question]:
        questions = list(self._questions.values())
        if search:
            needle = search.lower()
            questions = [
                q
                for q in questions
                if needle in q.title.lower() or needle in q.content.lower()
            ]
        if tag:
            questions = [q for q in questions if tag in q.tags]
        if author_id:
            questions = [q for q in questions if q.author_id == author_id]
        if sort == QuestionSortOrder.UNANSWERED:
            questions = [q for q in questions if q.answer_count == 0]
        return questions

    async def find_by_id(self, question_id: UUID) -> Optional[Question]:
        return self._questions.get(question_id)

    async def find_for_update(self, target_id: UUID) -> Optional[Question]:
        # Single event loop, no lock needed
        return self._questions.get(target_id)

    async def adjust_vote_counts(
        self, target_id: UUID, upvote_delta: int, downvote_delta: int
    ) -> Optional[Question]:
        question = self._questions.get(target_id)
        if question is None:
            return None
        updated = question.model_copy(
            update={
                "upvote_count": max(question.upvote_count + upvote_delta, 0),
                "downvote_count": max(question.downvote_count + downvote_delta, 0),
            }
        )
        self._questions[target_id] = updated
        return updated

    async def find_all(
        self,
        page: PageRequest,
        sort: QuestionSortOrder = QuestionSortOrder.RECENT,
        search: Optional[str] = None,
        tag: Optional[str] = None,
        author_id: Optional[UserId] = None,
    ) -> list[Question]:
        questions = self._filter(sort, search, tag, author_id)
        questions.sort(key=lambda q: q.created_at, reverse=True)
        if sort == QuestionSortOrder.VOTES:
            # Stable sort keeps newest-first among equal scores
            questions.sort(key=lambda q: q.net_votes, reverse=True)
        return questions[page.offset : page.offset + page.limit]

    async def count(
        self,
        sort: QuestionSortOrder = QuestionSortOrder.RECENT,
        search: Optional[str] = None,
        tag: Optional[str] = None,
        author_id: Optional[UserId] = None,
    ) -> int:
        return len(self._filter(sort, search, tag, author_id))

    async def save(self, question: Question) -> Question:
        existing = self._questions.get(question.id)
        if existing:
            # Counters are only changed through the adjust methods
            question = existing.model_copy(
                update={
                    "title": question.title,
                    "content": question.content,
                    "tags": question.tags,
                    "updated_at": question.updated_at,
                }
            )
        self._questions[question.id] = question
        return question

    async def delete(self, question_id: QuestionId) -> bool:
        return self._questions.pop(question_id, None) is not None

    async def increment_view_count(self, question_id: QuestionId) -> None:
        question = self._questions.get(question_id)
        if question:
            self._questions[question_id] = question.model_copy(
                update={"view_count": question.view_count + 1}
            )

    async def adjust_answer_count(self, question_id: QuestionId, delta: int) -> None:
        question = self._questions.get(question_id)
        if question:
            self._questions[question_id] = question.model_copy(
                update={"answer_count": max(question.answer_count + delta, 0)}
            )
