"""Answer repository interface."""

from abc import abstractmethod
from typing import List, Optional

from blog.domain.model.answer import Answer
from blog.domain.repository.votable import VotableRepository
from blog.domain.value import AnswerId, QuestionId


class AnswerRepository(VotableRepository):
    """Repository for Answer entity."""

    @abstractmethod
    async def find_by_id(self, answer_id: AnswerId) -> Optional[Answer]:
        """Find an answer by ID."""
        pass

    @abstractmethod
    async def find_by_question(self, question_id: QuestionId) -> List[Answer]:
        """Find all answers to a question (unordered)."""
        pass

    @abstractmethod
    async def save(self, answer: Answer) -> Answer:
        """Save an answer (create or update content)."""
        pass

    @abstractmethod
    async def delete(self, answer_id: AnswerId) -> bool:
        """Delete an answer.

        Returns:
            True if an answer was deleted, False if none existed
        """
        pass

    @abstractmethod
    async def delete_by_question(self, question_id: QuestionId) -> int:
        """Delete every answer to a question.

        Returns:
            Number of answers deleted
        """
        pass
