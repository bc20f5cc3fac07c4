"""Post routes."""

from typing import Annotated, Optional
from uuid import UUID

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Path, Query, Request, status
from pydantic import BaseModel, Field

from blog.application.usecase.post import (
    CreatePostRequest,
    CreatePostUseCase,
    DeletePostRequest,
    DeletePostUseCase,
    GetPostRequest,
    GetPostUseCase,
    ListMyPostsRequest,
    ListMyPostsUseCase,
    ListPostsRequest,
    ListPostsUseCase,
    UpdatePostRequest,
    UpdatePostUseCase,
)
from blog.application.usecase.view import PostView
from blog.config import PaginationSettings
from blog.domain.service import JWTService
from blog.domain.value import SLUG_PATTERN, PostStatus, Slug
from blog.interface.api.auth import (
    BearerCredentials,
    authenticate,
    optional_identity,
)
from blog.interface.api.response import ApiResponse, ok

router = APIRouter(prefix="/posts", tags=["posts"], route_class=DishkaRoute)


class CreatePostAPIRequest(BaseModel):
    """API request for creating a post."""

    title: str = Field(min_length=1, max_length=300)
    content: str = Field(min_length=1)
    excerpt: Optional[str] = Field(default=None, max_length=500)
    category_id: Optional[UUID] = None
    tags: list[Slug] = Field(default_factory=list, max_length=10)
    status: PostStatus = PostStatus.DRAFT
    featured_image: Optional[str] = None
    allow_comments: bool = True


class UpdatePostAPIRequest(BaseModel):
    """API request for updating a post. Omitted fields stay unchanged."""

    title: Optional[str] = Field(default=None, min_length=1, max_length=300)
    content: Optional[str] = Field(default=None, min_length=1)
    excerpt: Optional[str] = Field(default=None, max_length=500)
    category_id: Optional[UUID] = None
    tags: Optional[list[Slug]] = Field(default=None, max_length=10)
    status: Optional[PostStatus] = None
    featured_image: Optional[str] = None
    allow_comments: Optional[bool] = None


@router.get("", response_model=ApiResponse[list[PostView]])
async def list_posts(
    list_posts_use_case: FromDishka[ListPostsUseCase],
    pagination_settings: FromDishka[PaginationSettings],
    page: int = Query(default=1, ge=1),
    limit: Optional[int] = Query(default=None, ge=1, le=100),
    category: Optional[str] = Query(default=None, pattern=SLUG_PATTERN),
    tag: Optional[str] = Query(default=None, pattern=SLUG_PATTERN),
    search: Optional[str] = None,
) -> ApiResponse[list[PostView]]:
    """List published posts, newest first.

    Example:
        GET /posts?category=market-microstructure&search=order%20book
    """
    result = await list_posts_use_case.execute(
        ListPostsRequest(
            page=page,
            limit=limit or pagination_settings.default_limit,
            category=category,
            tag=tag,
            search=search,
        )
    )
    return ok(result.posts, pagination=result.pagination)


@router.get("/mine", response_model=ApiResponse[list[PostView]])
async def list_my_posts(
    http_request: Request,
    credentials: BearerCredentials,
    list_my_posts_use_case: FromDishka[ListMyPostsUseCase],
    jwt_service: FromDishka[JWTService],
    pagination_settings: FromDishka[PaginationSettings],
    page: int = Query(default=1, ge=1),
    limit: Optional[int] = Query(default=None, ge=1, le=100),
    post_status: Optional[PostStatus] = Query(default=None, alias="status"),
) -> ApiResponse[list[PostView]]:
    """List the caller's posts, drafts included."""
    identity = authenticate(http_request, credentials, jwt_service)
    result = await list_my_posts_use_case.execute(
        ListMyPostsRequest(
            page=page,
            limit=limit or pagination_settings.default_limit,
            status=post_status,
            author_id=identity.user_id,
        )
    )
    return ok(result.posts, pagination=result.pagination)


@router.get("/{slug}", response_model=ApiResponse[PostView])
async def get_post(
    slug: Annotated[str, Path(pattern=SLUG_PATTERN, max_length=200)],
    http_request: Request,
    credentials: BearerCredentials,
    get_post_use_case: FromDishka[GetPostUseCase],
    jwt_service: FromDishka[JWTService],
) -> ApiResponse[PostView]:
    """Read a post by slug. Authors may also read their own drafts."""
    identity = optional_identity(http_request, credentials, jwt_service)
    result = await get_post_use_case.execute(
        GetPostRequest(
            slug=slug, viewer_id=identity.user_id if identity else None
        )
    )
    return ok(result.post)


@router.post(
    "", response_model=ApiResponse[PostView], status_code=status.HTTP_201_CREATED
)
async def create_post(
    http_request: Request,
    request: CreatePostAPIRequest,
    credentials: BearerCredentials,
    create_post_use_case: FromDishka[CreatePostUseCase],
    jwt_service: FromDishka[JWTService],
) -> ApiResponse[PostView]:
    """Create a post. Requires authentication."""
    identity = authenticate(http_request, credentials, jwt_service)
    result = await create_post_use_case.execute(
        CreatePostRequest(
            **request.model_dump(exclude={"category_id"}),
            category_id=str(request.category_id) if request.category_id else None,
            author_id=identity.user_id,
        )
    )
    return ok(result.post, message="Post created")


@router.put("/{post_id}", response_model=ApiResponse[PostView])
async def update_post(
    post_id: UUID,
    http_request: Request,
    request: UpdatePostAPIRequest,
    credentials: BearerCredentials,
    update_post_use_case: FromDishka[UpdatePostUseCase],
    jwt_service: FromDishka[JWTService],
) -> ApiResponse[PostView]:
    """Edit a post (author only)."""
    identity = authenticate(http_request, credentials, jwt_service)
    result = await update_post_use_case.execute(
        UpdatePostRequest(
            **request.model_dump(exclude={"category_id"}),
            category_id=str(request.category_id) if request.category_id else None,
            post_id=str(post_id),
            user_id=identity.user_id,
        )
    )
    return ok(result.post, message="Post updated")


@router.delete("/{post_id}", response_model=ApiResponse[None])
async def delete_post(
    post_id: UUID,
    http_request: Request,
    credentials: BearerCredentials,
    delete_post_use_case: FromDishka[DeletePostUseCase],
    jwt_service: FromDishka[JWTService],
) -> ApiResponse[None]:
    """Soft-delete a post (author only)."""
    identity = authenticate(http_request, credentials, jwt_service)
    result = await delete_post_use_case.execute(
        DeletePostRequest(post_id=str(post_id), user_id=identity.user_id)
    )
    return ok(message=result.message)
