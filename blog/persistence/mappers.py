"""Mappers for converting between database rows and domain models.

Since we're using Pydantic domain models (immutable), we use manual mapping
instead of SQLAlchemy's classical imperative mapping.
"""

from typing import Any, Dict, List, Optional
from uuid import UUID

from blog.domain.model import (
    Answer,
    Category,
    Comment,
    Post,
    Question,
    Tag,
    User,
    Vote,
)
from blog.domain.value import (
    AnswerId,
    CategoryId,
    CommentId,
    Email,
    PostId,
    PostStatus,
    QuestionId,
    Slug,
    TagId,
    TargetType,
    UserId,
    UserRole,
    VoteId,
    VoteType,
)


def _uuid(value: Any) -> UUID:
    return UUID(value) if isinstance(value, str) else value


def _optional_uuid(value: Any) -> Optional[UUID]:
    return _uuid(value) if value is not None else None


def row_to_user(row: Dict[str, Any]) -> User:
    """Convert database row to User domain model."""
    return User(
        id=UserId(_uuid(row["id"])),
        email=Email(row["email"]),
        name=row["name"],
        password_hash=row["password_hash"],
        bio=row.get("bio"),
        avatar_url=row.get("avatar_url"),
        role=UserRole(row["role"]),
        active=row["active"],
        login_attempts=row["login_attempts"],
        locked_until=row.get("locked_until"),
        last_login_at=row.get("last_login_at"),
        created_at=row["created_at"],
        updated_at=row["updated_at"],
    )


def user_to_dict(user: User) -> Dict[str, Any]:
    """Convert User domain model to database dict."""
    data = user.model_dump()
    data["role"] = user.role.value
    return data


def row_to_category(row: Dict[str, Any]) -> Category:
    return Category(
        id=CategoryId(_uuid(row["id"])),
        name=row["name"],
        slug=Slug(row["slug"]),
        description=row.get("description"),
        color=row.get("color"),
        created_at=row["created_at"],
    )


def category_to_dict(category: Category) -> Dict[str, Any]:
    return category.model_dump()


def row_to_tag(row: Dict[str, Any]) -> Tag:
    return Tag(
        id=TagId(_uuid(row["id"])),
        name=row["name"],
        slug=Slug(row["slug"]),
        description=row.get("description"),
        created_at=row["created_at"],
    )


def tag_to_dict(tag: Tag) -> Dict[str, Any]:
    return tag.model_dump()


def row_to_post(row: Dict[str, Any], tag_slugs: Optional[List[str]] = None) -> Post:
    """Convert database row to Post domain model.

    Args:
        row: Database row as dict
        tag_slugs: Slugs of the post's tags, in display order

    Returns:
        Post domain model
    """
    return Post(
        id=PostId(_uuid(row["id"])),
        title=row["title"],
        slug=Slug(row["slug"]),
        excerpt=row.get("excerpt"),
        content=row["content"],
        featured_image=row.get("featured_image"),
        status=PostStatus(row["status"]),
        published_at=row.get("published_at"),
        reading_time=row["reading_time"],
        view_count=row["view_count"],
        comment_count=row["comment_count"],
        allow_comments=row["allow_comments"],
        active=row["active"],
        author_id=UserId(_uuid(row["author_id"])),
        category_id=_optional_uuid(row.get("category_id")),
        tag_slugs=[Slug(slug) for slug in (tag_slugs or [])],
        created_at=row["created_at"],
        updated_at=row["updated_at"],
    )


def post_to_dict(post: Post) -> Dict[str, Any]:
    """Convert Post domain model to database dict.

    Tag links live in post_tags and are excluded here.
    """
    data = post.model_dump(exclude={"tag_slugs"})
    data["status"] = post.status.value
    return data


def row_to_comment(row: Dict[str, Any]) -> Comment:
    return Comment(
        id=CommentId(_uuid(row["id"])),
        post_id=PostId(_uuid(row["post_id"])),
        author_id=UserId(_uuid(row["author_id"])),
        content=row["content"],
        parent_id=_optional_uuid(row.get("parent_id")),
        depth=row["depth"],
        created_at=row["created_at"],
        updated_at=row["updated_at"],
    )


def comment_to_dict(comment: Comment) -> Dict[str, Any]:
    return comment.model_dump()


def row_to_question(row: Dict[str, Any]) -> Question:
    """Convert database row to Question domain model."""
    return Question(
        id=QuestionId(_uuid(row["id"])),
        title=row["title"],
        content=row["content"],
        author_id=UserId(_uuid(row["author_id"])),
        tags=list(row.get("tags") or []),
        upvote_count=row["upvote_count"],
        downvote_count=row["downvote_count"],
        answer_count=row["answer_count"],
        view_count=row["view_count"],
        created_at=row["created_at"],
        updated_at=row["updated_at"],
    )


def question_to_dict(question: Question) -> Dict[str, Any]:
    return question.model_dump()


def row_to_answer(row: Dict[str, Any]) -> Answer:
    """Convert database row to Answer domain model."""
    return Answer(
        id=AnswerId(_uuid(row["id"])),
        question_id=QuestionId(_uuid(row["question_id"])),
        author_id=UserId(_uuid(row["author_id"])),
        content=row["content"],
        upvote_count=row["upvote_count"],
        downvote_count=row["downvote_count"],
        created_at=row["created_at"],
        updated_at=row["updated_at"],
    )


def answer_to_dict(answer: Answer) -> Dict[str, Any]:
    return answer.model_dump()


def row_to_vote(row: Dict[str, Any]) -> Vote:
    """Convert database row to Vote domain model."""
    return Vote(
        id=VoteId(_uuid(row["id"])),
        user_id=UserId(_uuid(row["user_id"])),
        target_type=TargetType(row["target_type"]),
        target_id=_uuid(row["target_id"]),
        vote_type=VoteType(row["vote_type"]),
        created_at=row["created_at"],
        updated_at=row["updated_at"],
    )


def vote_to_dict(vote: Vote) -> Dict[str, Any]:
    """Convert Vote domain model to database dict."""
    data = vote.model_dump()
    data["target_type"] = vote.target_type.value
    data["vote_type"] = vote.vote_type.value
    return data
