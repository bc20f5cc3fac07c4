"""Answer routes (edit, delete and vote on an existing answer)."""

from uuid import UUID

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Request
from pydantic import BaseModel, Field

from blog.application.usecase.answer import (
    DeleteAnswerRequest,
    DeleteAnswerUseCase,
    UpdateAnswerRequest,
    UpdateAnswerUseCase,
)
from blog.application.usecase.view import AnswerView
from blog.application.usecase.vote import (
    CastVoteRequest,
    CastVoteResponse,
    CastVoteUseCase,
    GetVoteStatusRequest,
    GetVoteStatusResponse,
    GetVoteStatusUseCase,
)
from blog.domain.service import JWTService
from blog.domain.value import TargetType
from blog.interface.api.auth import BearerCredentials, authenticate
from blog.interface.api.response import ApiResponse, ok
from blog.interface.api.routes.questions import VoteAPIRequest

router = APIRouter(prefix="/qa/answers", tags=["qa"], route_class=DishkaRoute)


class UpdateAnswerAPIRequest(BaseModel):
    content: str = Field(min_length=10)


@router.put("/{answer_id}", response_model=ApiResponse[AnswerView])
async def update_answer(
    answer_id: UUID,
    http_request: Request,
    request: UpdateAnswerAPIRequest,
    credentials: BearerCredentials,
    update_answer_use_case: FromDishka[UpdateAnswerUseCase],
    jwt_service: FromDishka[JWTService],
) -> ApiResponse[AnswerView]:
    """Edit an answer (author only)."""
    identity = authenticate(http_request, credentials, jwt_service)
    result = await update_answer_use_case.execute(
        UpdateAnswerRequest(
            answer_id=str(answer_id),
            user_id=identity.user_id,
            content=request.content,
        )
    )
    return ok(result.answer, message="Answer updated")


@router.delete("/{answer_id}", response_model=ApiResponse[None])
async def delete_answer(
    answer_id: UUID,
    http_request: Request,
    credentials: BearerCredentials,
    delete_answer_use_case: FromDishka[DeleteAnswerUseCase],
    jwt_service: FromDishka[JWTService],
) -> ApiResponse[None]:
    """Delete an answer (author only). The question's answer count drops by one."""
    identity = authenticate(http_request, credentials, jwt_service)
    result = await delete_answer_use_case.execute(
        DeleteAnswerRequest(answer_id=str(answer_id), user_id=identity.user_id)
    )
    return ok(message=result.message)


@router.post("/{answer_id}/vote", response_model=ApiResponse[CastVoteResponse])
async def vote_on_answer(
    answer_id: UUID,
    http_request: Request,
    request: VoteAPIRequest,
    credentials: BearerCredentials,
    cast_vote_use_case: FromDishka[CastVoteUseCase],
    jwt_service: FromDishka[JWTService],
) -> ApiResponse[CastVoteResponse]:
    """Vote on an answer. Same toggle rules as question votes."""
    identity = authenticate(http_request, credentials, jwt_service)
    result = await cast_vote_use_case.execute(
        CastVoteRequest(
            target_type=TargetType.ANSWER,
            target_id=str(answer_id),
            vote_type=request.vote_type,
            user_id=identity.user_id,
        )
    )
    return ok(result, message=result.message)


@router.get(
    "/{answer_id}/vote-status", response_model=ApiResponse[GetVoteStatusResponse]
)
async def answer_vote_status(
    answer_id: UUID,
    http_request: Request,
    credentials: BearerCredentials,
    get_vote_status_use_case: FromDishka[GetVoteStatusUseCase],
    jwt_service: FromDishka[JWTService],
) -> ApiResponse[GetVoteStatusResponse]:
    identity = authenticate(http_request, credentials, jwt_service)
    result = await get_vote_status_use_case.execute(
        GetVoteStatusRequest(
            target_type=TargetType.ANSWER,
            target_id=str(answer_id),
            user_id=identity.user_id,
        )
    )
    return ok(result)
