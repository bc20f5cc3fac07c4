"""Question repository interface."""

from abc import abstractmethod
from enum import Enum
from typing import List, Optional

from blog.domain.model.question import Question
from blog.domain.repository.votable import VotableRepository
from blog.domain.value import PageRequest, QuestionId, UserId


class QuestionSortOrder(str, Enum):
    """Sort order for question listings."""

    RECENT = "recent"  # created_at DESC
    VOTES = "votes"  # net votes DESC, then created_at DESC
    UNANSWERED = "unanswered"  # only answer_count = 0, created_at DESC


class QuestionRepository(VotableRepository):
    """Repository for Question aggregate."""

    @abstractmethod
    async def find_by_id(self, question_id: QuestionId) -> Optional[Question]:
        """Find a question by ID."""
        pass

    @abstractmethod
    async def find_all(
        self,
        page: PageRequest,
        sort: QuestionSortOrder = QuestionSortOrder.RECENT,
        search: Optional[str] = None,
        tag: Optional[str] = None,
        author_id: Optional[UserId] = None,
    ) -> List[Question]:
        """Find questions with filtering, sorting and pagination.

        Args:
            page: Page number and size
            sort: Sort order (UNANSWERED also filters)
            search: Case-insensitive substring matched on title or content
            tag: Only questions carrying this tag
            author_id: Only questions by this author

        Returns:
            Questions on the requested page
        """
        pass

    @abstractmethod
    async def count(
        self,
        sort: QuestionSortOrder = QuestionSortOrder.RECENT,
        search: Optional[str] = None,
        tag: Optional[str] = None,
        author_id: Optional[UserId] = None,
    ) -> int:
        """Count questions matching the listing filters."""
        pass

    @abstractmethod
    async def save(self, question: Question) -> Question:
        """Save a question (create or update content fields)."""
        pass

    @abstractmethod
    async def delete(self, question_id: QuestionId) -> bool:
        """Delete a question.

        Returns:
            True if a question was deleted, False if none existed
        """
        pass

    @abstractmethod
    async def increment_view_count(self, question_id: QuestionId) -> None:
        """Atomically increment the view counter by 1."""
        pass

    @abstractmethod
    async def adjust_answer_count(self, question_id: QuestionId, delta: int) -> None:
        """Atomically add ``delta`` to answer_count (floored at 0)."""
        pass
