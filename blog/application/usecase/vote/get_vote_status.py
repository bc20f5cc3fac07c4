"""Get vote status use case."""

from typing import Optional
from uuid import UUID

from pydantic import BaseModel

from blog.domain.service import VoteService
from blog.domain.value import TargetType, UserId, VoteType


class GetVoteStatusRequest(BaseModel):
    """Get vote status request."""

    target_type: TargetType
    target_id: str
    user_id: str


class GetVoteStatusResponse(BaseModel):
    """The caller's current vote, if any."""

    has_voted: bool
    vote_type: Optional[VoteType]


class GetVoteStatusUseCase:
    """Use case for reading the caller's vote on a question or answer."""

    def __init__(self, vote_service: VoteService) -> None:
        self.vote_service = vote_service

    async def execute(self, request: GetVoteStatusRequest) -> GetVoteStatusResponse:
        """Execute get vote status flow.

        Raises:
            NotFoundError: If the target does not exist
        """
        vote_type = await self.vote_service.get_vote_status(
            target_type=request.target_type,
            target_id=UUID(request.target_id),
            actor_id=UserId(UUID(request.user_id)),
        )
        return GetVoteStatusResponse(
            has_voted=vote_type is not None, vote_type=vote_type
        )
