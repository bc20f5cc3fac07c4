"""Answer domain service."""

from typing import List
from uuid import UUID, uuid4

import logfire

from blog.domain.error import NotFoundError
from blog.domain.model.answer import Answer
from blog.domain.model.common import utcnow
from blog.domain.repository import AnswerRepository, QuestionRepository, VoteRepository
from blog.domain.value import AnswerId, QuestionId, TargetType, UserId

from .base import Service
from .permission import OwnershipPolicy


class AnswerService(Service):
    """Domain service for answer operations.

    Keeps the parent question's ``answer_count`` in step with the answers
    table. Both writes run in the request transaction.
    """

    def __init__(
        self,
        answer_repository: AnswerRepository,
        question_repository: QuestionRepository,
        vote_repository: VoteRepository,
        ownership_policy: OwnershipPolicy,
    ) -> None:
        """Initialize answer service.

        Args:
            answer_repository: Answer repository
            question_repository: Question repository (answer_count updates)
            vote_repository: Vote repository (cascade on delete)
            ownership_policy: Decides who may update or delete an answer
        """
        self.answer_repository = answer_repository
        self.question_repository = question_repository
        self.vote_repository = vote_repository
        self.ownership_policy = ownership_policy

    async def _require_question(self, question_id: QuestionId) -> None:
        question = await self.question_repository.find_by_id(question_id)
        if not question:
            logfire.warn("Question not found", question_id=str(question_id))
            raise NotFoundError("Question", str(question_id))

    async def create_answer(
        self, question_id: QuestionId, author_id: UserId, content: str
    ) -> Answer:
        """Answer a question and increment its answer_count.

        Raises:
            NotFoundError: If the question does not exist
        """
        with logfire.span(
            "answer_service.create_answer",
            question_id=str(question_id),
            author_id=str(author_id),
        ):
            await self._require_question(question_id)

            now = utcnow()
            answer = Answer(
                id=AnswerId(uuid4()),
                question_id=question_id,
                author_id=author_id,
                content=content,
                created_at=now,
                updated_at=now,
            )
            saved = await self.answer_repository.save(answer)
            await self.question_repository.adjust_answer_count(question_id, 1)

            logfire.info(
                "Answer created", answer_id=str(saved.id), question_id=str(question_id)
            )
            return saved

    async def get_answer(self, answer_id: AnswerId) -> Answer:
        """Get an answer by ID.

        Raises:
            NotFoundError: If answer not found
        """
        answer = await self.answer_repository.find_by_id(answer_id)
        if not answer:
            logfire.warn("Answer not found", answer_id=str(answer_id))
            raise NotFoundError("Answer", str(answer_id))
        return answer

    async def list_answers(self, question_id: QuestionId) -> List[Answer]:
        """List a question's answers, highest net votes first, then oldest first.

        Raises:
            NotFoundError: If the question does not exist
        """
        with logfire.span("answer_service.list_answers", question_id=str(question_id)):
            await self._require_question(question_id)
            answers = await self.answer_repository.find_by_question(question_id)
            answers.sort(key=lambda a: (-a.net_votes, a.created_at))
            logfire.info(
                "Answers listed", question_id=str(question_id), count=len(answers)
            )
            return answers

    async def update_answer(
        self, answer_id: AnswerId, actor_id: UserId, content: str
    ) -> Answer:
        """Replace an answer's content (owner only).

        Raises:
            NotFoundError: If answer not found
            NotAuthorizedError: If the actor does not own the answer
        """
        with logfire.span(
            "answer_service.update_answer",
            answer_id=str(answer_id),
            actor_id=str(actor_id),
        ):
            answer = await self.get_answer(answer_id)
            self.ownership_policy.ensure_can_mutate(actor_id, answer)

            updated = Answer.model_validate(
                {**answer.model_dump(), "content": content, "updated_at": utcnow()}
            )
            saved = await self.answer_repository.save(updated)
            logfire.info("Answer updated", answer_id=str(answer_id))
            return saved

    async def delete_answer(self, answer_id: AnswerId, actor_id: UserId) -> None:
        """Delete an answer and its votes (owner only).

        The parent's answer_count drops by exactly one, and only when a row
        was actually deleted.

        Raises:
            NotFoundError: If answer not found
            NotAuthorizedError: If the actor does not own the answer
        """
        with logfire.span(
            "answer_service.delete_answer",
            answer_id=str(answer_id),
            actor_id=str(actor_id),
        ):
            answer = await self.get_answer(answer_id)
            self.ownership_policy.ensure_can_mutate(actor_id, answer)

            await self.vote_repository.delete_by_targets(
                TargetType.ANSWER, [UUID(str(answer_id))]
            )
            deleted = await self.answer_repository.delete(answer_id)
            if not deleted:
                logfire.warn("Answer already deleted", answer_id=str(answer_id))
                raise NotFoundError("Answer", str(answer_id))

            await self.question_repository.adjust_answer_count(answer.question_id, -1)
            logfire.info(
                "Answer deleted",
                answer_id=str(answer_id),
                question_id=str(answer.question_id),
            )
