"""Cast vote use case."""

from typing import Optional
from uuid import UUID

from pydantic import BaseModel

from blog.domain.service import VoteService
from blog.domain.value import TargetType, UserId, VoteType


class CastVoteRequest(BaseModel):
    """Cast vote request."""

    target_type: TargetType
    target_id: str  # UUID string
    vote_type: VoteType
    user_id: str  # User ID from authenticated user


class CastVoteResponse(BaseModel):
    """Cast vote response."""

    success: bool
    message: str  # "vote cast", "vote removed" or "vote changed"
    vote_type: Optional[VoteType]  # Caller's vote after this call
    upvote_count: int
    downvote_count: int
    net_votes: int


class CastVoteUseCase:
    """Use case for voting on a question or answer."""

    def __init__(self, vote_service: VoteService) -> None:
        """Initialize cast vote use case.

        Args:
            vote_service: Vote domain service
        """
        self.vote_service = vote_service

    async def execute(self, request: CastVoteRequest) -> CastVoteResponse:
        """Execute cast vote flow.

        Args:
            request: Cast vote request

        Returns:
            What happened to the vote and the target's counters

        Raises:
            NotFoundError: If the target does not exist
        """
        result = await self.vote_service.cast_vote(
            target_type=request.target_type,
            target_id=UUID(request.target_id),
            vote_type=request.vote_type,
            actor_id=UserId(UUID(request.user_id)),
        )

        return CastVoteResponse(
            success=True,
            message=result.message,
            vote_type=result.vote_type,
            upvote_count=result.upvote_count,
            downvote_count=result.downvote_count,
            net_votes=result.net_votes,
        )
