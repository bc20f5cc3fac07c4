"""Response models shared by several use cases."""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel

from blog.domain.model import Answer, Category, Comment, Post, Question, Tag, User
from blog.domain.repository import UserListItem
from blog.domain.value import PostStatus, UserRole, VoteType


class UserView(BaseModel):
    """A user as seen by the user themself or by an admin."""

    user_id: str
    email: str
    name: str
    bio: Optional[str]
    avatar_url: Optional[str]
    role: UserRole
    active: bool
    last_login_at: Optional[datetime]
    created_at: datetime

    @classmethod
    def from_user(cls, user: User) -> "UserView":
        return cls(
            user_id=str(user.id),
            email=user.email.root,
            name=user.name,
            bio=user.bio,
            avatar_url=user.avatar_url,
            role=user.role,
            active=user.active,
            last_login_at=user.last_login_at,
            created_at=user.created_at,
        )


class AdminUserView(UserView):
    """User row in the admin listing."""

    post_count: int

    @classmethod
    def from_item(cls, item: UserListItem) -> "AdminUserView":
        return cls(
            **UserView.from_user(item.user).model_dump(), post_count=item.post_count
        )


class PublicUserView(BaseModel):
    """Public profile, without email or account state."""

    user_id: str
    name: str
    bio: Optional[str]
    avatar_url: Optional[str]
    role: UserRole
    created_at: datetime

    @classmethod
    def from_user(cls, user: User) -> "PublicUserView":
        return cls(
            user_id=str(user.id),
            name=user.name,
            bio=user.bio,
            avatar_url=user.avatar_url,
            role=user.role,
            created_at=user.created_at,
        )


class CategoryView(BaseModel):
    category_id: str
    name: str
    slug: str
    description: Optional[str]
    color: Optional[str]

    @classmethod
    def from_category(cls, category: Category) -> "CategoryView":
        return cls(
            category_id=str(category.id),
            name=category.name,
            slug=str(category.slug),
            description=category.description,
            color=category.color,
        )


class TagView(BaseModel):
    tag_id: str
    name: str
    slug: str
    description: Optional[str]

    @classmethod
    def from_tag(cls, tag: Tag) -> "TagView":
        return cls(
            tag_id=str(tag.id),
            name=tag.name,
            slug=str(tag.slug),
            description=tag.description,
        )


class PostView(BaseModel):
    post_id: str
    title: str
    slug: str
    excerpt: Optional[str]
    content: str
    featured_image: Optional[str]
    status: PostStatus
    published_at: Optional[datetime]
    reading_time: int
    view_count: int
    comment_count: int
    allow_comments: bool
    author_id: str
    category_id: Optional[str]
    tags: list[str]
    created_at: datetime
    updated_at: datetime

    @classmethod
    def from_post(cls, post: Post) -> "PostView":
        return cls(
            post_id=str(post.id),
            title=post.title,
            slug=str(post.slug),
            excerpt=post.excerpt,
            content=post.content,
            featured_image=post.featured_image,
            status=post.status,
            published_at=post.published_at,
            reading_time=post.reading_time,
            view_count=post.view_count,
            comment_count=post.comment_count,
            allow_comments=post.allow_comments,
            author_id=str(post.author_id),
            category_id=str(post.category_id) if post.category_id else None,
            tags=[str(slug) for slug in post.tag_slugs],
            created_at=post.created_at,
            updated_at=post.updated_at,
        )


class CommentView(BaseModel):
    comment_id: str
    post_id: str
    author_id: str
    content: str
    parent_id: Optional[str]
    depth: int
    created_at: datetime

    @classmethod
    def from_comment(cls, comment: Comment) -> "CommentView":
        return cls(
            comment_id=str(comment.id),
            post_id=str(comment.post_id),
            author_id=str(comment.author_id),
            content=comment.content,
            parent_id=str(comment.parent_id) if comment.parent_id else None,
            depth=comment.depth,
            created_at=comment.created_at,
        )


class QuestionView(BaseModel):
    question_id: str
    title: str
    content: str
    author_id: str
    tags: list[str]
    upvote_count: int
    downvote_count: int
    net_votes: int
    answer_count: int
    view_count: int
    created_at: datetime
    updated_at: datetime
    user_vote: Optional[VoteType] = None  # Caller's vote, when authenticated

    @classmethod
    def from_question(
        cls, question: Question, user_vote: Optional[VoteType] = None
    ) -> "QuestionView":
        return cls(
            question_id=str(question.id),
            title=question.title,
            content=question.content,
            author_id=str(question.author_id),
            tags=question.tags,
            upvote_count=question.upvote_count,
            downvote_count=question.downvote_count,
            net_votes=question.net_votes,
            answer_count=question.answer_count,
            view_count=question.view_count,
            created_at=question.created_at,
            updated_at=question.updated_at,
            user_vote=user_vote,
        )


class AnswerView(BaseModel):
    answer_id: str
    question_id: str
    author_id: str
    content: str
    upvote_count: int
    downvote_count: int
    net_votes: int
    created_at: datetime
    updated_at: datetime
    user_vote: Optional[VoteType] = None  # Caller's vote, when authenticated

    @classmethod
    def from_answer(
        cls, answer: Answer, user_vote: Optional[VoteType] = None
    ) -> "AnswerView":
        return cls(
            answer_id=str(answer.id),
            question_id=str(answer.question_id),
            author_id=str(answer.author_id),
            content=answer.content,
            upvote_count=answer.upvote_count,
            downvote_count=answer.downvote_count,
            net_votes=answer.net_votes,
            created_at=answer.created_at,
            updated_at=answer.updated_at,
            user_vote=user_vote,
        )
