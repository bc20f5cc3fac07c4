"""PostgreSQL repository implementations."""

from blog.persistence.repository.answer import PostgresAnswerRepository
from blog.persistence.repository.category import PostgresCategoryRepository
from blog.persistence.repository.comment import PostgresCommentRepository
from blog.persistence.repository.login_attempt import PostgresLoginAttemptRepository
from blog.persistence.repository.post import PostgresPostRepository
from blog.persistence.repository.question import PostgresQuestionRepository
from blog.persistence.repository.stats import PostgresStatsRepository
from blog.persistence.repository.tag import PostgresTagRepository
from blog.persistence.repository.user import PostgresUserRepository
from blog.persistence.repository.vote import PostgresVoteRepository

__all__ = [
    "PostgresAnswerRepository",
    "PostgresCategoryRepository",
    "PostgresCommentRepository",
    "PostgresLoginAttemptRepository",
    "PostgresPostRepository",
    "PostgresQuestionRepository",
    "PostgresStatsRepository",
    "PostgresTagRepository",
    "PostgresUserRepository",
    "PostgresVoteRepository",
]
