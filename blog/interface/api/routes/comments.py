"""Comment routes."""

from typing import Optional
from uuid import UUID

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Request, status
from pydantic import BaseModel, Field

from blog.application.usecase.comment import (
    CreateCommentRequest,
    CreateCommentUseCase,
    DeleteCommentRequest,
    DeleteCommentUseCase,
    ListCommentsRequest,
    ListCommentsUseCase,
)
from blog.application.usecase.view import CommentView
from blog.domain.service import JWTService
from blog.interface.api.auth import BearerCredentials, authenticate
from blog.interface.api.response import ApiResponse, ok

router = APIRouter(tags=["comments"], route_class=DishkaRoute)


class CreateCommentAPIRequest(BaseModel):
    """API request for creating a comment."""

    content: str = Field(min_length=1, max_length=5000)
    parent_id: Optional[UUID] = None


@router.get("/posts/{post_id}/comments", response_model=ApiResponse[list[CommentView]])
async def list_comments(
    post_id: UUID,
    list_comments_use_case: FromDishka[ListCommentsUseCase],
) -> ApiResponse[list[CommentView]]:
    """List a post's comments, oldest first.

    Replies carry ``parent_id`` and ``depth`` so clients can rebuild the thread.
    """
    result = await list_comments_use_case.execute(
        ListCommentsRequest(post_id=str(post_id))
    )
    return ok(result.comments)


@router.post(
    "/posts/{post_id}/comments",
    response_model=ApiResponse[CommentView],
    status_code=status.HTTP_201_CREATED,
)
async def create_comment(
    post_id: UUID,
    http_request: Request,
    request: CreateCommentAPIRequest,
    credentials: BearerCredentials,
    create_comment_use_case: FromDishka[CreateCommentUseCase],
    jwt_service: FromDishka[JWTService],
) -> ApiResponse[CommentView]:
    """Comment on a post, or reply when ``parent_id`` is given."""
    identity = authenticate(http_request, credentials, jwt_service)
    result = await create_comment_use_case.execute(
        CreateCommentRequest(
            post_id=str(post_id),
            content=request.content,
            parent_id=str(request.parent_id) if request.parent_id else None,
            author_id=identity.user_id,
        )
    )
    return ok(result.comment, message="Comment created")


@router.delete("/comments/{comment_id}", response_model=ApiResponse[None])
async def delete_comment(
    comment_id: UUID,
    http_request: Request,
    credentials: BearerCredentials,
    delete_comment_use_case: FromDishka[DeleteCommentUseCase],
    jwt_service: FromDishka[JWTService],
) -> ApiResponse[None]:
    """Delete a comment and its replies (author only)."""
    identity = authenticate(http_request, credentials, jwt_service)
    result = await delete_comment_use_case.execute(
        DeleteCommentRequest(comment_id=str(comment_id), user_id=identity.user_id)
    )
    return ok(message=result.message)
