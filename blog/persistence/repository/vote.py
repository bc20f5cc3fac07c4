"""PostgreSQL implementation of Vote repository."""

from typing import List, Optional, Sequence
from uuid import UUID

from sqlalchemy import and_, delete, func, insert, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from blog.domain.model import Vote
from blog.domain.repository import VoteRepository
from blog.domain.value import TargetType, UserId, VoteId, VoteType
from blog.persistence.mappers import row_to_vote, vote_to_dict
from blog.persistence.tables import votes_table


class PostgresVoteRepository(VoteRepository):
    """PostgreSQL implementation of VoteRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def find_by_user_and_target(
        self,
        user_id: UserId,
        target_type: TargetType,
        target_id: UUID,
    ) -> Optional[Vote]:
        """Find a user's vote on a specific target."""
        stmt = select(votes_table).where(
            and_(
                votes_table.c.user_id == user_id,
                votes_table.c.target_type == target_type.value,
                votes_table.c.target_id == target_id,
            )
        )
        result = await self.session.execute(stmt)
        row = result.fetchone()
        return row_to_vote(row._asdict()) if row else None

    async def find_by_user_and_targets(
        self,
        user_id: UserId,
        target_type: TargetType,
        target_ids: Sequence[UUID],
    ) -> List[Vote]:
        """Find a user's votes on multiple targets (batch query)."""
        if not target_ids:
            return []

        stmt = select(votes_table).where(
            and_(
                votes_table.c.user_id == user_id,
                votes_table.c.target_type == target_type.value,
                votes_table.c.target_id.in_(target_ids),
            )
        )
        result = await self.session.execute(stmt)
        return [row_to_vote(row._asdict()) for row in result.fetchall()]

    async def save(self, vote: Vote) -> Vote:
        """Insert a vote (unique per user and target)."""
        stmt = insert(votes_table).values(**vote_to_dict(vote))
        await self.session.execute(stmt)
        await self.session.flush()
        return vote

    async def update_vote_type(self, vote_id: VoteId, vote_type: VoteType) -> None:
        stmt = (
            update(votes_table)
            .where(votes_table.c.id == vote_id)
            .values(vote_type=vote_type.value, updated_at=func.now())
        )
        await self.session.execute(stmt)
        await self.session.flush()

    async def delete(self, vote_id: VoteId) -> bool:
        stmt = delete(votes_table).where(votes_table.c.id == vote_id)
        result = await self.session.execute(stmt)
        await self.session.flush()
        return result.rowcount > 0  # type: ignore[attr-defined]

    async def delete_by_targets(
        self, target_type: TargetType, target_ids: Sequence[UUID]
    ) -> int:
        """Delete every vote on the given targets."""
        if not target_ids:
            return 0

        stmt = delete(votes_table).where(
            and_(
                votes_table.c.target_type == target_type.value,
                votes_table.c.target_id.in_(target_ids),
            )
        )
        result = await self.session.execute(stmt)
        await self.session.flush()
        return result.rowcount  # type: ignore[attr-defined]
