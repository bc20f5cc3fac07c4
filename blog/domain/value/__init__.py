"""Domain value objects for the blog."""

from blog.domain.value.identifiers import (
    AnswerId,
    CategoryId,
    CommentId,
    PostId,
    QuestionId,
    TagId,
    UserId,
    VoteId,
)
from blog.domain.value.pagination import PageRequest, Pagination
from blog.domain.value.types import (
    Email,
    PostStatus,
    SLUG_PATTERN,
    Slug,
    TargetType,
    UserRole,
    VoteOutcome,
    VoteType,
)

__all__ = [
    # Identifiers
    "UserId",
    "CategoryId",
    "TagId",
    "PostId",
    "CommentId",
    "QuestionId",
    "AnswerId",
    "VoteId",
    # Types
    "Email",
    "PostStatus",
    "SLUG_PATTERN",
    "Slug",
    "TargetType",
    "UserRole",
    "VoteOutcome",
    "VoteType",
    # Pagination
    "PageRequest",
    "Pagination",
]
