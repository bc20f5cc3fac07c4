"""Answer entity."""

from datetime import datetime

from pydantic import Field

from blog.domain.model.common import VotableModel, utcnow
from blog.domain.value import AnswerId, QuestionId, UserId


class Answer(VotableModel):
    """An answer to a question. Answers are listed by net votes."""

    id: AnswerId
    question_id: QuestionId
    author_id: UserId
    content: str = Field(min_length=10)
    upvote_count: int = Field(default=0, ge=0)
    downvote_count: int = Field(default=0, ge=0)
    created_at: datetime = Field(default_factory=utcnow)
    updated_at: datetime = Field(default_factory=utcnow)
