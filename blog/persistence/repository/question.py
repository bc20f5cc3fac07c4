"""PostgreSQL implementation of Question repository."""

from typing import List, Optional
from uuid import UUID

import logfire
from sqlalchemy import delete, desc, func, insert, or_, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from blog.domain.model import Question
from blog.domain.repository import QuestionRepository, QuestionSortOrder
from blog.domain.value import PageRequest, QuestionId, UserId
from blog.persistence.mappers import question_to_dict, row_to_question
from blog.persistence.repository.query import contains_pattern
from blog.persistence.tables import questions_table


def _apply_filters(
    stmt,
    sort: QuestionSortOrder,
    search: Optional[str],
    tag: Optional[str],
    author_id: Optional[UserId],
):
    if search:
        pattern = contains_pattern(search)
        stmt = stmt.where(
            or_(
                questions_table.c.title.ilike(pattern, escape="\\"),
                questions_table.c.content.ilike(pattern, escape="\\"),
            )
        )
    if tag:
        stmt = stmt.where(questions_table.c.tags.any(tag))
    if author_id:
        stmt = stmt.where(questions_table.c.author_id == author_id)
    if sort == QuestionSortOrder.UNANSWERED:
        stmt = stmt.where(questions_table.c.answer_count == 0)
    return stmt


class PostgresQuestionRepository(QuestionRepository):
    """PostgreSQL implementation of QuestionRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def find_by_id(self, question_id: UUID) -> Optional[Question]:
        stmt = select(questions_table).where(questions_table.c.id == question_id)
        result = await self.session.execute(stmt)
        row = result.fetchone()
        return row_to_question(row._asdict()) if row else None

    async def find_for_update(self, target_id: UUID) -> Optional[Question]:
        """Find a question and lock its row (SELECT ... FOR UPDATE)."""
        stmt = (
            select(questions_table)
            .where(questions_table.c.id == target_id)
            .with_for_update()
        )
        result = await self.session.execute(stmt)
        row = result.fetchone()
        return row_to_question(row._asdict()) if row else None

    async def adjust_vote_counts(
        self, target_id: UUID, upvote_delta: int, downvote_delta: int
    ) -> Optional[Question]:
        """Apply both counter deltas in one UPDATE, clamped at zero."""
        with logfire.span(
            "question_repository.adjust_vote_counts",
            question_id=str(target_id),
            upvote_delta=upvote_delta,
            downvote_delta=downvote_delta,
        ):
            stmt = (
                update(questions_table)
                .where(questions_table.c.id == target_id)
                .values(
                    upvote_count=func.greatest(
                        questions_table.c.upvote_count + upvote_delta, 0
                    ),
                    downvote_count=func.greatest(
                        questions_table.c.downvote_count + downvote_delta, 0
                    ),
                )
                .returning(questions_table)
            )
            result = await self.session.execute(stmt)
            row = result.fetchone()
            await self.session.flush()
            return row_to_question(row._asdict()) if row else None

    async def find_all(
        self,
        page: PageRequest,
        sort: QuestionSortOrder = QuestionSortOrder.RECENT,
        search: Optional[str] = None,
        tag: Optional[str] = None,
        author_id: Optional[UserId] = None,
    ) -> List[Question]:
        """Find questions with filtering, sorting and pagination."""
        with logfire.span(
            "question_repository.find_all",
            sort=sort.value,
            search=search,
            tag=tag,
            limit=page.limit,
            offset=page.offset,
        ):
            stmt = _apply_filters(
                select(questions_table), sort, search, tag, author_id
            )

            if sort == QuestionSortOrder.VOTES:
                net_votes = (
                    questions_table.c.upvote_count - questions_table.c.downvote_count
                )
                stmt = stmt.order_by(desc(net_votes), desc(questions_table.c.created_at))
            else:
                stmt = stmt.order_by(desc(questions_table.c.created_at))

            stmt = stmt.limit(page.limit).offset(page.offset)

            result = await self.session.execute(stmt)
            questions = [row_to_question(row._asdict()) for row in result.fetchall()]
            logfire.info("Found questions", count=len(questions))
            return questions

    async def count(
        self,
        sort: QuestionSortOrder = QuestionSortOrder.RECENT,
        search: Optional[str] = None,
        tag: Optional[str] = None,
        author_id: Optional[UserId] = None,
    ) -> int:
        stmt = _apply_filters(
            select(func.count()).select_from(questions_table),
            sort,
            search,
            tag,
            author_id,
        )
        result = await self.session.execute(stmt)
        return result.scalar() or 0

    async def save(self, question: Question) -> Question:
        """Insert a question, or update its content fields.

        Counters are owned by the atomic adjust methods and are never
        written back from the model on update.
        """
        with logfire.span("question_repository.save", question_id=str(question.id)):
            existing = await self.find_by_id(question.id)
            if existing:
                stmt = (
                    update(questions_table)
                    .where(questions_table.c.id == question.id)
                    .values(
                        title=question.title,
                        content=question.content,
                        tags=question.tags,
                        updated_at=question.updated_at,
                    )
                    .returning(questions_table)
                )
                result = await self.session.execute(stmt)
                saved = row_to_question(result.fetchone()._asdict())
            else:
                stmt = insert(questions_table).values(**question_to_dict(question))
                await self.session.execute(stmt)
                saved = question

            await self.session.flush()
            return saved

    async def delete(self, question_id: QuestionId) -> bool:
        stmt = delete(questions_table).where(questions_table.c.id == question_id)
        result = await self.session.execute(stmt)
        await self.session.flush()
        return result.rowcount > 0  # type: ignore[attr-defined]

    async def increment_view_count(self, question_id: QuestionId) -> None:
        """Atomically increment view_count by 1."""
        stmt = (
            update(questions_table)
            .where(questions_table.c.id == question_id)
            .values(view_count=questions_table.c.view_count + 1)
        )
        await self.session.execute(stmt)
        await self.session.flush()

    async def adjust_answer_count(self, question_id: QuestionId, delta: int) -> None:
        """Atomically add ``delta`` to answer_count (minimum 0)."""
        stmt = (
            update(questions_table)
            .where(questions_table.c.id == question_id)
            .values(
                answer_count=func.greatest(questions_table.c.answer_count + delta, 0)
            )
        )
        await self.session.execute(stmt)
        await self.session.flush()
