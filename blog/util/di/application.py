"""Application layer DI providers."""

from dishka import Scope, provide

from blog.application.usecase.answer import (
    CreateAnswerUseCase,
    DeleteAnswerUseCase,
    ListAnswersUseCase,
    UpdateAnswerUseCase,
)
from blog.application.usecase.auth import (
    ChangePasswordUseCase,
    GetCurrentUserUseCase,
    LoginUseCase,
    RegisterUseCase,
)
from blog.application.usecase.category import (
    CreateCategoryUseCase,
    ListCategoriesUseCase,
)
from blog.application.usecase.comment import (
    CreateCommentUseCase,
    DeleteCommentUseCase,
    ListCommentsUseCase,
)
from blog.application.usecase.dashboard import GetDashboardStatsUseCase
from blog.application.usecase.post import (
    CreatePostUseCase,
    DeletePostUseCase,
    GetPostUseCase,
    ListMyPostsUseCase,
    ListPostsUseCase,
    UpdatePostUseCase,
)
from blog.application.usecase.question import (
    CreateQuestionUseCase,
    DeleteQuestionUseCase,
    GetQuestionUseCase,
    ListQuestionsUseCase,
    UpdateQuestionUseCase,
)
from blog.application.usecase.tag import GetTagUseCase, ListTagsUseCase, UpdateTagUseCase
from blog.application.usecase.user import (
    GetUserProfileUseCase,
    ListUsersUseCase,
    SetUserActiveUseCase,
    UpdateUserProfileUseCase,
)
from blog.application.usecase.vote import CastVoteUseCase, GetVoteStatusUseCase
from blog.domain.service import (
    AnswerService,
    AuthService,
    CategoryService,
    CommentService,
    DashboardService,
    JWTService,
    PostService,
    QuestionService,
    TagService,
    UserService,
    VoteService,
)
from blog.util.di.base import ProviderBase


class ProdApplicationProvider(ProviderBase):
    """Production application use cases provider - concrete, no mocks needed."""

    scope = Scope.REQUEST

    # Auth use cases
    @provide
    def get_register_use_case(
        self, auth_service: AuthService, jwt_service: JWTService
    ) -> RegisterUseCase:
        """Provide register use case."""
        return RegisterUseCase(auth_service=auth_service, jwt_service=jwt_service)

    @provide
    def get_login_use_case(
        self, auth_service: AuthService, jwt_service: JWTService
    ) -> LoginUseCase:
        """Provide login use case."""
        return LoginUseCase(auth_service=auth_service, jwt_service=jwt_service)

    @provide
    def get_current_user_use_case(
        self, user_service: UserService
    ) -> GetCurrentUserUseCase:
        """Provide get current user use case."""
        return GetCurrentUserUseCase(user_service=user_service)

    @provide
    def get_change_password_use_case(
        self, auth_service: AuthService
    ) -> ChangePasswordUseCase:
        """Provide change password use case."""
        return ChangePasswordUseCase(auth_service=auth_service)

    # Vote use cases
    @provide
    def get_cast_vote_use_case(self, vote_service: VoteService) -> CastVoteUseCase:
        """Provide cast vote use case."""
        return CastVoteUseCase(vote_service=vote_service)

    @provide
    def get_vote_status_use_case(
        self, vote_service: VoteService
    ) -> GetVoteStatusUseCase:
        """Provide vote status use case."""
        return GetVoteStatusUseCase(vote_service=vote_service)

    # Question use cases
    @provide
    def get_create_question_use_case(
        self, question_service: QuestionService
    ) -> CreateQuestionUseCase:
        """Provide create question use case."""
        return CreateQuestionUseCase(question_service=question_service)

    @provide
    def get_get_question_use_case(
        self, question_service: QuestionService, vote_service: VoteService
    ) -> GetQuestionUseCase:
        """Provide get question use case."""
        return GetQuestionUseCase(
            question_service=question_service, vote_service=vote_service
        )

    @provide
    def get_list_questions_use_case(
        self, question_service: QuestionService, vote_service: VoteService
    ) -> ListQuestionsUseCase:
        """Provide list questions use case."""
        return ListQuestionsUseCase(
            question_service=question_service, vote_service=vote_service
        )

    @provide
    def get_update_question_use_case(
        self, question_service: QuestionService
    ) -> UpdateQuestionUseCase:
        """Provide update question use case."""
        return UpdateQuestionUseCase(question_service=question_service)

    @provide
    def get_delete_question_use_case(
        self, question_service: QuestionService
    ) -> DeleteQuestionUseCase:
        """Provide delete question use case."""
        return DeleteQuestionUseCase(question_service=question_service)

    # Answer use cases
    @provide
    def get_create_answer_use_case(
        self, answer_service: AnswerService
    ) -> CreateAnswerUseCase:
        """Provide create answer use case."""
        return CreateAnswerUseCase(answer_service=answer_service)

    @provide
    def get_list_answers_use_case(
        self, answer_service: AnswerService, vote_service: VoteService
    ) -> ListAnswersUseCase:
        """Provide list answers use case."""
        return ListAnswersUseCase(
            answer_service=answer_service, vote_service=vote_service
        )

    @provide
    def get_update_answer_use_case(
        self, answer_service: AnswerService
    ) -> UpdateAnswerUseCase:
        """Provide update answer use case."""
        return UpdateAnswerUseCase(answer_service=answer_service)

    @provide
    def get_delete_answer_use_case(
        self, answer_service: AnswerService
    ) -> DeleteAnswerUseCase:
        """Provide delete answer use case."""
        return DeleteAnswerUseCase(answer_service=answer_service)

    # Post use cases
    @provide
    def get_create_post_use_case(self, post_service: PostService) -> CreatePostUseCase:
        """Provide create post use case."""
        return CreatePostUseCase(post_service=post_service)

    @provide
    def get_get_post_use_case(self, post_service: PostService) -> GetPostUseCase:
        """Provide get post use case."""
        return GetPostUseCase(post_service=post_service)

    @provide
    def get_list_posts_use_case(self, post_service: PostService) -> ListPostsUseCase:
        """Provide list posts use case."""
        return ListPostsUseCase(post_service=post_service)

    @provide
    def get_list_my_posts_use_case(
        self, post_service: PostService
    ) -> ListMyPostsUseCase:
        """Provide list my posts use case."""
        return ListMyPostsUseCase(post_service=post_service)

    @provide
    def get_update_post_use_case(self, post_service: PostService) -> UpdatePostUseCase:
        """Provide update post use case."""
        return UpdatePostUseCase(post_service=post_service)

    @provide
    def get_delete_post_use_case(self, post_service: PostService) -> DeletePostUseCase:
        """Provide delete post use case."""
        return DeletePostUseCase(post_service=post_service)

    # Comment use cases
    @provide
    def get_create_comment_use_case(
        self, comment_service: CommentService
    ) -> CreateCommentUseCase:
        """Provide create comment use case."""
        return CreateCommentUseCase(comment_service=comment_service)

    @provide
    def get_list_comments_use_case(
        self, comment_service: CommentService
    ) -> ListCommentsUseCase:
        """Provide list comments use case."""
        return ListCommentsUseCase(comment_service=comment_service)

    @provide
    def get_delete_comment_use_case(
        self, comment_service: CommentService
    ) -> DeleteCommentUseCase:
        """Provide delete comment use case."""
        return DeleteCommentUseCase(comment_service=comment_service)

    # Category use cases
    @provide
    def get_list_categories_use_case(
        self, category_service: CategoryService
    ) -> ListCategoriesUseCase:
        """Provide list categories use case."""
        return ListCategoriesUseCase(category_service=category_service)

    @provide
    def get_create_category_use_case(
        self, category_service: CategoryService
    ) -> CreateCategoryUseCase:
        """Provide create category use case."""
        return CreateCategoryUseCase(category_service=category_service)

    # Tag use cases
    @provide
    def get_list_tags_use_case(self, tag_service: TagService) -> ListTagsUseCase:
        """Provide list tags use case."""
        return ListTagsUseCase(tag_service=tag_service)

    @provide
    def get_get_tag_use_case(self, tag_service: TagService) -> GetTagUseCase:
        """Provide get tag use case."""
        return GetTagUseCase(tag_service=tag_service)

    @provide
    def get_update_tag_use_case(self, tag_service: TagService) -> UpdateTagUseCase:
        """Provide update tag use case."""
        return UpdateTagUseCase(tag_service=tag_service)

    # User use cases
    @provide
    def get_get_user_profile_use_case(
        self, user_service: UserService
    ) -> GetUserProfileUseCase:
        """Provide get user profile use case."""
        return GetUserProfileUseCase(user_service=user_service)

    @provide
    def get_update_user_profile_use_case(
        self, user_service: UserService
    ) -> UpdateUserProfileUseCase:
        """Provide update user profile use case."""
        return UpdateUserProfileUseCase(user_service=user_service)

    @provide
    def get_list_users_use_case(self, user_service: UserService) -> ListUsersUseCase:
        """Provide admin list users use case."""
        return ListUsersUseCase(user_service=user_service)

    @provide
    def get_set_user_active_use_case(
        self, user_service: UserService
    ) -> SetUserActiveUseCase:
        """Provide admin deactivate/restore use case."""
        return SetUserActiveUseCase(user_service=user_service)

    # Dashboard use cases
    @provide
    def get_dashboard_stats_use_case(
        self, dashboard_service: DashboardService
    ) -> GetDashboardStatsUseCase:
        """Provide dashboard stats use case."""
        return GetDashboardStatsUseCase(dashboard_service=dashboard_service)
