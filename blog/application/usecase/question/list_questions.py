"""List questions use case."""

from typing import Optional
from uuid import UUID

import logfire
from pydantic import BaseModel, Field

from blog.application.usecase.view import QuestionView
from blog.domain.repository import QuestionSortOrder
from blog.domain.service import QuestionService, VoteService
from blog.domain.value import PageRequest, Pagination, TargetType, UserId


class ListQuestionsRequest(BaseModel):
    """List questions request."""

    page: int = Field(default=1, ge=1)
    limit: int = Field(default=10, ge=1, le=100)
    sort: QuestionSortOrder = QuestionSortOrder.RECENT
    search: Optional[str] = None
    tag: Optional[str] = None
    author_id: Optional[str] = None
    user_id: Optional[str] = None  # Current user ID (if authenticated)


class ListQuestionsResponse(BaseModel):
    """List questions response."""

    questions: list[QuestionView]
    pagination: Pagination


class ListQuestionsUseCase:
    """Use case for listing questions with filters and pagination."""

    def __init__(
        self, question_service: QuestionService, vote_service: VoteService
    ) -> None:
        """Initialize list questions use case.

        Args:
            question_service: Question domain service
            vote_service: Vote domain service (caller's votes)
        """
        self.question_service = question_service
        self.vote_service = vote_service

    async def execute(self, request: ListQuestionsRequest) -> ListQuestionsResponse:
        """Execute list questions flow.

        Args:
            request: Filters, sort order and page

        Returns:
            Questions on the page and pagination metadata
        """
        with logfire.span(
            "list_questions.execute",
            sort=request.sort.value,
            page=request.page,
            limit=request.limit,
        ):
            page = PageRequest(page=request.page, limit=request.limit)
            questions, total = await self.question_service.list_questions(
                page,
                sort=request.sort,
                search=request.search,
                tag=request.tag,
                author_id=UserId(UUID(request.author_id))
                if request.author_id
                else None,
            )

            # Batch query to avoid N+1
            user_votes = {}
            if request.user_id and questions:
                user_votes = await self.vote_service.get_vote_statuses(
                    TargetType.QUESTION,
                    [q.id for q in questions],
                    UserId(UUID(request.user_id)),
                )

            return ListQuestionsResponse(
                questions=[
                    QuestionView.from_question(q, user_vote=user_votes.get(q.id))
                    for q in questions
                ],
                pagination=Pagination.from_total(page, total),
            )
