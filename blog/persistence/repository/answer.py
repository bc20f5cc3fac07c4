"""PostgreSQL implementation of Answer repository."""

from typing import List, Optional
from uuid import UUID

import logfire
from sqlalchemy import delete, func, insert, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from blog.domain.model import Answer
from blog.domain.repository import AnswerRepository
from blog.domain.value import AnswerId, QuestionId
from blog.persistence.mappers import answer_to_dict, row_to_answer
from blog.persistence.tables import answers_table


class PostgresAnswerRepository(AnswerRepository):
    """PostgreSQL implementation of AnswerRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def find_by_id(self, answer_id: UUID) -> Optional[Answer]:
        stmt = select(answers_table).where(answers_table.c.id == answer_id)
        result = await self.session.execute(stmt)
        row = result.fetchone()
        return row_to_answer(row._asdict()) if row else None

    async def find_for_update(self, target_id: UUID) -> Optional[Answer]:
        """Find an answer and lock its row (SELECT ... FOR UPDATE)."""
        stmt = (
            select(answers_table)
            .where(answers_table.c.id == target_id)
            .with_for_update()
        )
        result = await self.session.execute(stmt)
        row = result.fetchone()
        return row_to_answer(row._asdict()) if row else None

    async def adjust_vote_counts(
        self, target_id: UUID, upvote_delta: int, downvote_delta: int
    ) -> Optional[Answer]:
        """Apply both counter deltas in one UPDATE, clamped at zero."""
        with logfire.span(
            "answer_repository.adjust_vote_counts",
            answer_id=str(target_id),
            upvote_delta=upvote_delta,
            downvote_delta=downvote_delta,
        ):
            stmt = (
                update(answers_table)
                .where(answers_table.c.id == target_id)
                .values(
                    upvote_count=func.greatest(
                        answers_table.c.upvote_count + upvote_delta, 0
                    ),
                    downvote_count=func.greatest(
                        answers_table.c.downvote_count + downvote_delta, 0
                    ),
                )
                .returning(answers_table)
            )
            result = await self.session.execute(stmt)
            row = result.fetchone()
            await self.session.flush()
            return row_to_answer(row._asdict()) if row else None

    async def find_by_question(self, question_id: QuestionId) -> List[Answer]:
        stmt = select(answers_table).where(answers_table.c.question_id == question_id)
        result = await self.session.execute(stmt)
        return [row_to_answer(row._asdict()) for row in result.fetchall()]

    async def save(self, answer: Answer) -> Answer:
        """Insert an answer, or update its content (counters untouched)."""
        existing = await self.find_by_id(answer.id)
        if existing:
            stmt = (
                update(answers_table)
                .where(answers_table.c.id == answer.id)
                .values(content=answer.content, updated_at=answer.updated_at)
                .returning(answers_table)
            )
            result = await self.session.execute(stmt)
            saved = row_to_answer(result.fetchone()._asdict())
        else:
            stmt = insert(answers_table).values(**answer_to_dict(answer))
            await self.session.execute(stmt)
            saved = answer

        await self.session.flush()
        return saved

    async def delete(self, answer_id: AnswerId) -> bool:
        stmt = delete(answers_table).where(answers_table.c.id == answer_id)
        result = await self.session.execute(stmt)
        await self.session.flush()
        return result.rowcount > 0  # type: ignore[attr-defined]

    async def delete_by_question(self, question_id: QuestionId) -> int:
        stmt = delete(answers_table).where(answers_table.c.question_id == question_id)
        result = await self.session.execute(stmt)
        await self.session.flush()
        return result.rowcount  # type: ignore[attr-defined]
