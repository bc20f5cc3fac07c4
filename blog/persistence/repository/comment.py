"""PostgreSQL implementation of Comment repository."""

from typing import List, Optional

from sqlalchemy import delete, insert, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from blog.domain.model import Comment
from blog.domain.repository import CommentRepository
from blog.domain.value import CommentId, PostId
from blog.persistence.mappers import comment_to_dict, row_to_comment
from blog.persistence.tables import comments_table


class PostgresCommentRepository(CommentRepository):
    """PostgreSQL implementation of CommentRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def find_by_id(self, comment_id: CommentId) -> Optional[Comment]:
        stmt = select(comments_table).where(comments_table.c.id == comment_id)
        result = await self.session.execute(stmt)
        row = result.fetchone()
        return row_to_comment(row._asdict()) if row else None

    async def find_by_post(self, post_id: PostId) -> List[Comment]:
        stmt = (
            select(comments_table)
            .where(comments_table.c.post_id == post_id)
            .order_by(comments_table.c.created_at)
        )
        result = await self.session.execute(stmt)
        return [row_to_comment(row._asdict()) for row in result.fetchall()]

    async def save(self, comment: Comment) -> Comment:
        existing = await self.find_by_id(comment.id)
        if existing:
            stmt = (
                update(comments_table)
                .where(comments_table.c.id == comment.id)
                .values(content=comment.content, updated_at=comment.updated_at)
            )
        else:
            stmt = insert(comments_table).values(**comment_to_dict(comment))
        await self.session.execute(stmt)
        await self.session.flush()
        return comment

    async def delete(self, comment_id: CommentId) -> int:
        """Delete a comment and every reply below it.

        Walks the reply tree with a recursive CTE so the number of removed
        rows is known to the caller.
        """
        thread = (
            select(comments_table.c.id)
            .where(comments_table.c.id == comment_id)
            .cte("thread", recursive=True)
        )
        thread = thread.union_all(
            select(comments_table.c.id).where(
                comments_table.c.parent_id == thread.c.id
            )
        )
        stmt = delete(comments_table).where(
            comments_table.c.id.in_(select(thread.c.id))
        )
        result = await self.session.execute(stmt)
        await self.session.flush()
        return result.rowcount  # type: ignore[attr-defined]
