"""Question domain service."""

from typing import List, Optional, Tuple
from uuid import UUID, uuid4

import logfire

from blog.domain.error import NotFoundError
from blog.domain.model.common import utcnow
from blog.domain.model.question import Question
from blog.domain.repository import (
    AnswerRepository,
    QuestionRepository,
    QuestionSortOrder,
    VoteRepository,
)
from blog.domain.value import PageRequest, QuestionId, TargetType, UserId

from .base import Service
from .permission import OwnershipPolicy


def normalize_tags(tags: List[str]) -> List[str]:
    """Trim, lowercase and de-duplicate tags, keeping first-seen order."""
    seen: list[str] = []
    for tag in tags:
        cleaned = tag.strip().lower()
        if cleaned and cleaned not in seen:
            seen.append(cleaned)
    return seen


class QuestionService(Service):
    """Domain service for question operations."""

    def __init__(
        self,
        question_repository: QuestionRepository,
        answer_repository: AnswerRepository,
        vote_repository: VoteRepository,
        ownership_policy: OwnershipPolicy,
    ) -> None:
        """Initialize question service.

        Args:
            question_repository: Question repository
            answer_repository: Answer repository (cascade on delete)
            vote_repository: Vote repository (cascade on delete)
            ownership_policy: Decides who may update or delete a question
        """
        self.question_repository = question_repository
        self.answer_repository = answer_repository
        self.vote_repository = vote_repository
        self.ownership_policy = ownership_policy

    async def create_question(
        self, author_id: UserId, title: str, content: str, tags: List[str]
    ) -> Question:
        """Create a question with zeroed counters."""
        with logfire.span("question_service.create_question", author_id=str(author_id)):
            now = utcnow()
            question = Question(
                id=QuestionId(uuid4()),
                title=title.strip(),
                content=content,
                author_id=author_id,
                tags=normalize_tags(tags),
                created_at=now,
                updated_at=now,
            )
            saved = await self.question_repository.save(question)
            logfire.info(
                "Question created", question_id=str(saved.id), author_id=str(author_id)
            )
            return saved

    async def get_question(
        self, question_id: QuestionId, count_view: bool = False
    ) -> Question:
        """Get a question by ID.

        Args:
            question_id: Question ID
            count_view: Atomically increment view_count before reading

        Raises:
            NotFoundError: If question not found
        """
        with logfire.span("question_service.get_question", question_id=str(question_id)):
            if count_view:
                await self.question_repository.increment_view_count(question_id)

            question = await self.question_repository.find_by_id(question_id)
            if not question:
                logfire.warn("Question not found", question_id=str(question_id))
                raise NotFoundError("Question", str(question_id))
            return question

    async def list_questions(
        self,
        page: PageRequest,
        sort: QuestionSortOrder = QuestionSortOrder.RECENT,
        search: Optional[str] = None,
        tag: Optional[str] = None,
        author_id: Optional[UserId] = None,
    ) -> Tuple[List[Question], int]:
        """List a page of questions and the total number matching.

        Returns:
            (questions on the page, total matching questions)
        """
        with logfire.span(
            "question_service.list_questions",
            page=page.page,
            limit=page.limit,
            sort=sort.value,
        ):
            search = search.strip() if search else None
            tag = tag.strip().lower() if tag else None
            questions = await self.question_repository.find_all(
                page, sort=sort, search=search, tag=tag, author_id=author_id
            )
            total = await self.question_repository.count(
                sort=sort, search=search, tag=tag, author_id=author_id
            )
            logfire.info("Questions listed", count=len(questions), total=total)
            return questions, total

    async def update_question(
        self,
        question_id: QuestionId,
        actor_id: UserId,
        title: Optional[str] = None,
        content: Optional[str] = None,
        tags: Optional[List[str]] = None,
    ) -> Question:
        """Update a question's content fields (owner only).

        Raises:
            NotFoundError: If question not found
            NotAuthorizedError: If the actor does not own the question
        """
        with logfire.span(
            "question_service.update_question",
            question_id=str(question_id),
            actor_id=str(actor_id),
        ):
            question = await self.get_question(question_id)
            self.ownership_policy.ensure_can_mutate(actor_id, question)

            changes: dict = {"updated_at": utcnow()}
            if title is not None:
                changes["title"] = title.strip()
            if content is not None:
                changes["content"] = content
            if tags is not None:
                changes["tags"] = normalize_tags(tags)

            # Re-validate through the model so length rules still apply
            updated = Question.model_validate(
                {**question.model_dump(), **changes}
            )
            saved = await self.question_repository.save(updated)
            logfire.info("Question updated", question_id=str(question_id))
            return saved

    async def delete_question(self, question_id: QuestionId, actor_id: UserId) -> None:
        """Delete a question with its answers and every vote on either (owner only).

        Raises:
            NotFoundError: If question not found
            NotAuthorizedError: If the actor does not own the question
        """
        with logfire.span(
            "question_service.delete_question",
            question_id=str(question_id),
            actor_id=str(actor_id),
        ):
            question = await self.get_question(question_id)
            self.ownership_policy.ensure_can_mutate(actor_id, question)

            answers = await self.answer_repository.find_by_question(question_id)
            answer_ids = [UUID(str(answer.id)) for answer in answers]
            await self.vote_repository.delete_by_targets(TargetType.ANSWER, answer_ids)
            await self.vote_repository.delete_by_targets(
                TargetType.QUESTION, [UUID(str(question_id))]
            )
            await self.answer_repository.delete_by_question(question_id)
            await self.question_repository.delete(question_id)

            logfire.info(
                "Question deleted",
                question_id=str(question_id),
                answers_deleted=len(answer_ids),
            )
