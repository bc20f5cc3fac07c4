"""Question aggregate root for the Q&A section."""

from datetime import datetime

from pydantic import Field

from blog.domain.model.common import VotableModel, utcnow
from blog.domain.value import QuestionId, UserId


class Question(VotableModel):
    """A question that users answer and vote on.

    ``answer_count`` is denormalized from the answers table and is kept in
    step by answer creation and deletion.
    """

    id: QuestionId
    title: str = Field(min_length=10, max_length=300)
    content: str = Field(min_length=10)
    author_id: UserId
    tags: list[str] = Field(default_factory=list, max_length=5)
    upvote_count: int = Field(default=0, ge=0)
    downvote_count: int = Field(default=0, ge=0)
    answer_count: int = Field(default=0, ge=0)
    view_count: int = Field(default=0, ge=0)
    created_at: datetime = Field(default_factory=utcnow)
    updated_at: datetime = Field(default_factory=utcnow)
