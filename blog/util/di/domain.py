"""Domain layer DI providers."""

from dishka import Scope, provide

from blog.config import AuthSettings
from blog.domain.repository import (
    AnswerRepository,
    CategoryRepository,
    CommentRepository,
    LoginAttemptRepository,
    PostRepository,
    QuestionRepository,
    StatsRepository,
    TagRepository,
    UserRepository,
    VoteRepository,
)
from blog.domain.service import (
    AnswerService,
    AuthService,
    CategoryService,
    CommentService,
    DashboardService,
    JWTService,
    OwnershipPolicy,
    PostService,
    QuestionService,
    TagService,
    UserService,
    VoteService,
    default_ownership_policy,
)
from blog.util.di.base import ProviderBase


class ProdDomainProvider(ProviderBase):
    """Production domain services provider - concrete, no mocks needed.

    Domain services are REQUEST-scoped to align with repository/session lifecycle.
    Each HTTP request gets fresh service instances with their own transaction.
    """

    scope = Scope.REQUEST

    @provide(scope=Scope.APP)
    def get_ownership_policy(self) -> OwnershipPolicy:
        """Provide the ownership rules shared by every request."""
        return default_ownership_policy()

    @provide
    def get_auth_service(
        self,
        user_repository: UserRepository,
        login_attempt_repository: LoginAttemptRepository,
        auth_settings: AuthSettings,
    ) -> AuthService:
        """Provide password authentication domain service."""
        return AuthService(
            user_repository=user_repository,
            login_attempt_repository=login_attempt_repository,
            auth_settings=auth_settings,
        )

    @provide
    def get_jwt_service(self, auth_settings: AuthSettings) -> JWTService:
        """Provide JWT token domain service."""
        return JWTService(auth_settings=auth_settings)

    @provide
    def get_user_service(self, user_repository: UserRepository) -> UserService:
        """Provide user domain service."""
        return UserService(user_repository=user_repository)

    @provide
    def get_vote_service(
        self,
        vote_repository: VoteRepository,
        question_repository: QuestionRepository,
        answer_repository: AnswerRepository,
    ) -> VoteService:
        """Provide vote domain service."""
        return VoteService(
            vote_repository=vote_repository,
            question_repository=question_repository,
            answer_repository=answer_repository,
        )

    @provide
    def get_question_service(
        self,
        question_repository: QuestionRepository,
        answer_repository: AnswerRepository,
        vote_repository: VoteRepository,
        ownership_policy: OwnershipPolicy,
    ) -> QuestionService:
        """Provide question domain service."""
        return QuestionService(
            question_repository=question_repository,
            answer_repository=answer_repository,
            vote_repository=vote_repository,
            ownership_policy=ownership_policy,
        )

    @provide
    def get_answer_service(
        self,
        answer_repository: AnswerRepository,
        question_repository: QuestionRepository,
        vote_repository: VoteRepository,
        ownership_policy: OwnershipPolicy,
    ) -> AnswerService:
        """Provide answer domain service."""
        return AnswerService(
            answer_repository=answer_repository,
            question_repository=question_repository,
            vote_repository=vote_repository,
            ownership_policy=ownership_policy,
        )

    @provide
    def get_post_service(
        self,
        post_repository: PostRepository,
        category_repository: CategoryRepository,
        tag_repository: TagRepository,
        ownership_policy: OwnershipPolicy,
    ) -> PostService:
        """Provide post domain service."""
        return PostService(
            post_repository=post_repository,
            category_repository=category_repository,
            tag_repository=tag_repository,
            ownership_policy=ownership_policy,
        )

    @provide
    def get_comment_service(
        self,
        comment_repository: CommentRepository,
        post_repository: PostRepository,
        ownership_policy: OwnershipPolicy,
    ) -> CommentService:
        """Provide comment domain service."""
        return CommentService(
            comment_repository=comment_repository,
            post_repository=post_repository,
            ownership_policy=ownership_policy,
        )

    @provide
    def get_category_service(
        self, category_repository: CategoryRepository
    ) -> CategoryService:
        """Provide category domain service."""
        return CategoryService(category_repository=category_repository)

    @provide
    def get_tag_service(self, tag_repository: TagRepository) -> TagService:
        """Provide tag domain service."""
        return TagService(tag_repository=tag_repository)

    @provide
    def get_dashboard_service(
        self, stats_repository: StatsRepository
    ) -> DashboardService:
        """Provide dashboard statistics domain service."""
        return DashboardService(stats_repository=stats_repository)
