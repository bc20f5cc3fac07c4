"""Q&A routes: questions, their answers and votes."""

from typing import Optional
from uuid import UUID

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Query, Request, status
from pydantic import BaseModel, ConfigDict, Field

from blog.application.usecase.answer import (
    CreateAnswerRequest,
    CreateAnswerUseCase,
    ListAnswersRequest,
    ListAnswersUseCase,
)
from blog.application.usecase.question import (
    CreateQuestionRequest,
    CreateQuestionUseCase,
    DeleteQuestionRequest,
    DeleteQuestionUseCase,
    GetQuestionRequest,
    GetQuestionUseCase,
    ListQuestionsRequest,
    ListQuestionsUseCase,
    UpdateQuestionRequest,
    UpdateQuestionUseCase,
)
from blog.application.usecase.view import AnswerView, QuestionView
from blog.application.usecase.vote import (
    CastVoteRequest,
    CastVoteResponse,
    CastVoteUseCase,
    GetVoteStatusRequest,
    GetVoteStatusResponse,
    GetVoteStatusUseCase,
)
from blog.config import PaginationSettings
from blog.domain.repository import QuestionSortOrder
from blog.domain.service import JWTService
from blog.domain.value import TargetType, VoteType
from blog.interface.api.auth import (
    BearerCredentials,
    authenticate,
    optional_identity,
)
from blog.interface.api.response import ApiResponse, ok

router = APIRouter(prefix="/qa", tags=["qa"], route_class=DishkaRoute)


class VoteAPIRequest(BaseModel):
    """Vote body. Accepts ``voteType`` or ``vote_type``."""

    model_config = ConfigDict(populate_by_name=True)

    vote_type: VoteType = Field(alias="voteType")


class CreateQuestionAPIRequest(BaseModel):
    title: str = Field(min_length=10, max_length=300)
    content: str = Field(min_length=10)
    tags: list[str] = Field(default_factory=list, max_length=5)


class UpdateQuestionAPIRequest(BaseModel):
    title: Optional[str] = Field(default=None, min_length=10, max_length=300)
    content: Optional[str] = Field(default=None, min_length=10)
    tags: Optional[list[str]] = Field(default=None, max_length=5)


class CreateAnswerAPIRequest(BaseModel):
    content: str = Field(min_length=10)


@router.post(
    "/questions",
    response_model=ApiResponse[QuestionView],
    status_code=status.HTTP_201_CREATED,
)
async def create_question(
    http_request: Request,
    request: CreateQuestionAPIRequest,
    credentials: BearerCredentials,
    create_question_use_case: FromDishka[CreateQuestionUseCase],
    jwt_service: FromDishka[JWTService],
) -> ApiResponse[QuestionView]:
    """Ask a question. Requires authentication."""
    identity = authenticate(http_request, credentials, jwt_service)
    result = await create_question_use_case.execute(
        CreateQuestionRequest(
            title=request.title,
            content=request.content,
            tags=request.tags,
            author_id=identity.user_id,
        )
    )
    return ok(result.question, message="Question created")


@router.get("/questions", response_model=ApiResponse[list[QuestionView]])
async def list_questions(
    http_request: Request,
    credentials: BearerCredentials,
    list_questions_use_case: FromDishka[ListQuestionsUseCase],
    jwt_service: FromDishka[JWTService],
    pagination_settings: FromDishka[PaginationSettings],
    page: int = Query(default=1, ge=1),
    limit: Optional[int] = Query(default=None, ge=1, le=100),
    sort: QuestionSortOrder = QuestionSortOrder.RECENT,
    search: Optional[str] = None,
    tag: Optional[str] = None,
    author_id: Optional[UUID] = None,
) -> ApiResponse[list[QuestionView]]:
    """List questions.

    Args:
        page: 1-based page number
        limit: Page size (default from settings)
        sort: recent, votes or unanswered
        search: Case-insensitive substring of title or content
        tag: Only questions carrying this tag
        author_id: Only questions by this user

    Example:
        GET /qa/questions?sort=votes&tag=options&page=2
    """
    identity = optional_identity(http_request, credentials, jwt_service)
    result = await list_questions_use_case.execute(
        ListQuestionsRequest(
            page=page,
            limit=limit or pagination_settings.default_limit,
            sort=sort,
            search=search,
            tag=tag,
            author_id=str(author_id) if author_id else None,
            user_id=identity.user_id if identity else None,
        )
    )
    return ok(result.questions, pagination=result.pagination)


@router.get("/questions/{question_id}", response_model=ApiResponse[QuestionView])
async def get_question(
    question_id: UUID,
    http_request: Request,
    credentials: BearerCredentials,
    get_question_use_case: FromDishka[GetQuestionUseCase],
    jwt_service: FromDishka[JWTService],
) -> ApiResponse[QuestionView]:
    """Get a question and count the view.

    Authenticated callers also get their own vote in ``user_vote``.
    """
    identity = optional_identity(http_request, credentials, jwt_service)
    result = await get_question_use_case.execute(
        GetQuestionRequest(
            question_id=str(question_id),
            user_id=identity.user_id if identity else None,
        )
    )
    return ok(result.question)


@router.put("/questions/{question_id}", response_model=ApiResponse[QuestionView])
async def update_question(
    question_id: UUID,
    http_request: Request,
    request: UpdateQuestionAPIRequest,
    credentials: BearerCredentials,
    update_question_use_case: FromDishka[UpdateQuestionUseCase],
    jwt_service: FromDishka[JWTService],
) -> ApiResponse[QuestionView]:
    """Edit a question (author only)."""
    identity = authenticate(http_request, credentials, jwt_service)
    result = await update_question_use_case.execute(
        UpdateQuestionRequest(
            question_id=str(question_id),
            user_id=identity.user_id,
            title=request.title,
            content=request.content,
            tags=request.tags,
        )
    )
    return ok(result.question, message="Question updated")


@router.delete("/questions/{question_id}", response_model=ApiResponse[None])
async def delete_question(
    question_id: UUID,
    http_request: Request,
    credentials: BearerCredentials,
    delete_question_use_case: FromDishka[DeleteQuestionUseCase],
    jwt_service: FromDishka[JWTService],
) -> ApiResponse[None]:
    """Delete a question with its answers and votes (author only)."""
    identity = authenticate(http_request, credentials, jwt_service)
    result = await delete_question_use_case.execute(
        DeleteQuestionRequest(question_id=str(question_id), user_id=identity.user_id)
    )
    return ok(message=result.message)


@router.post(
    "/questions/{question_id}/vote", response_model=ApiResponse[CastVoteResponse]
)
async def vote_on_question(
    question_id: UUID,
    http_request: Request,
    request: VoteAPIRequest,
    credentials: BearerCredentials,
    cast_vote_use_case: FromDishka[CastVoteUseCase],
    jwt_service: FromDishka[JWTService],
) -> ApiResponse[CastVoteResponse]:
    """Vote on a question.

    Repeating the same vote removes it; the opposite vote switches it.

    Example:
        POST /qa/questions/{id}/vote
        {"voteType": "upvote"}
    """
    identity = authenticate(http_request, credentials, jwt_service)
    result = await cast_vote_use_case.execute(
        CastVoteRequest(
            target_type=TargetType.QUESTION,
            target_id=str(question_id),
            vote_type=request.vote_type,
            user_id=identity.user_id,
        )
    )
    return ok(result, message=result.message)


@router.get(
    "/questions/{question_id}/vote-status",
    response_model=ApiResponse[GetVoteStatusResponse],
)
async def question_vote_status(
    question_id: UUID,
    http_request: Request,
    credentials: BearerCredentials,
    get_vote_status_use_case: FromDishka[GetVoteStatusUseCase],
    jwt_service: FromDishka[JWTService],
) -> ApiResponse[GetVoteStatusResponse]:
    """Get the caller's vote on a question."""
    identity = authenticate(http_request, credentials, jwt_service)
    result = await get_vote_status_use_case.execute(
        GetVoteStatusRequest(
            target_type=TargetType.QUESTION,
            target_id=str(question_id),
            user_id=identity.user_id,
        )
    )
    return ok(result)


@router.post(
    "/questions/{question_id}/answers",
    response_model=ApiResponse[AnswerView],
    status_code=status.HTTP_201_CREATED,
)
async def create_answer(
    question_id: UUID,
    http_request: Request,
    request: CreateAnswerAPIRequest,
    credentials: BearerCredentials,
    create_answer_use_case: FromDishka[CreateAnswerUseCase],
    jwt_service: FromDishka[JWTService],
) -> ApiResponse[AnswerView]:
    """Answer a question. Requires authentication."""
    identity = authenticate(http_request, credentials, jwt_service)
    result = await create_answer_use_case.execute(
        CreateAnswerRequest(
            question_id=str(question_id),
            content=request.content,
            author_id=identity.user_id,
        )
    )
    return ok(result.answer, message="Answer created")


@router.get(
    "/questions/{question_id}/answers", response_model=ApiResponse[list[AnswerView]]
)
async def list_answers(
    question_id: UUID,
    http_request: Request,
    credentials: BearerCredentials,
    list_answers_use_case: FromDishka[ListAnswersUseCase],
    jwt_service: FromDishka[JWTService],
) -> ApiResponse[list[AnswerView]]:
    """List a question's answers, highest net votes first."""
    identity = optional_identity(http_request, credentials, jwt_service)
    result = await list_answers_use_case.execute(
        ListAnswersRequest(
            question_id=str(question_id),
            user_id=identity.user_id if identity else None,
        )
    )
    return ok(result.answers)
