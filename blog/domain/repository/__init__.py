"""Repository interfaces for the blog domain.

Repository interfaces are defined in the domain layer (dependency inversion).
Implementations live in the infrastructure layer.
"""

from blog.domain.repository.answer import AnswerRepository
from blog.domain.repository.category import CategoryRepository
from blog.domain.repository.comment import CommentRepository
from blog.domain.repository.login_attempt import LoginAttemptRepository
from blog.domain.repository.post import PostRepository
from blog.domain.repository.question import QuestionRepository, QuestionSortOrder
from blog.domain.repository.stats import StatsRepository
from blog.domain.repository.tag import TagRepository
from blog.domain.repository.user import UserListItem, UserRepository
from blog.domain.repository.votable import VotableRepository
from blog.domain.repository.vote import VoteRepository

__all__ = [
    "AnswerRepository",
    "CategoryRepository",
    "CommentRepository",
    "LoginAttemptRepository",
    "PostRepository",
    "QuestionRepository",
    "QuestionSortOrder",
    "StatsRepository",
    "TagRepository",
    "UserListItem",
    "UserRepository",
    "VotableRepository",
    "VoteRepository",
]
