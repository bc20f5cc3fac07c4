"""In-memory repository implementations for testing."""

from .answer import InMemoryAnswerRepository
from .category import InMemoryCategoryRepository
from .comment import InMemoryCommentRepository
from .login_attempt import InMemoryLoginAttemptRepository
from .post import InMemoryPostRepository
from .question import InMemoryQuestionRepository
from .stats import InMemoryStatsRepository
from .store import InMemoryStore
from .tag import InMemoryTagRepository
from .user import InMemoryUserRepository
from .vote import InMemoryVoteRepository

__all__ = [
    "InMemoryAnswerRepository",
    "InMemoryCategoryRepository",
    "InMemoryCommentRepository",
    "InMemoryLoginAttemptRepository",
    "InMemoryPostRepository",
    "InMemoryQuestionRepository",
    "InMemoryStatsRepository",
    "InMemoryStore",
    "InMemoryTagRepository",
    "InMemoryUserRepository",
    "InMemoryVoteRepository",
]
