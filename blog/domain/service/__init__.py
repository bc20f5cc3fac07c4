"""Domain services."""

from .answer_service import AnswerService
from .auth_service import AuthService
from .base import Service
from .category_service import CategoryService
from .comment_service import CommentService
from .dashboard_service import DashboardService, DashboardStats
from .jwt_service import JWTService
from .permission import OwnershipPolicy, default_ownership_policy
from .post_service import PostService, reading_time
from .question_service import QuestionService
from .tag_service import TagService
from .user_service import UserService
from .vote_service import VoteResult, VoteService

__all__ = [
    "AnswerService",
    "AuthService",
    "CategoryService",
    "CommentService",
    "DashboardService",
    "DashboardStats",
    "JWTService",
    "OwnershipPolicy",
    "PostService",
    "QuestionService",
    "Service",
    "TagService",
    "UserService",
    "VoteResult",
    "VoteService",
    "default_ownership_policy",
    "reading_time",
]
