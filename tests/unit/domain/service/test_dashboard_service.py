"""Unit tests for DashboardService."""

from uuid import uuid4

import pytest

from blog.domain.service import (
    AnswerService,
    AuthService,
    CategoryService,
    DashboardService,
    PostService,
    QuestionService,
)
from blog.domain.value import Email, PostStatus, UserRole
from tests.harness import create_env_fixture

unit_env = create_env_fixture()


class TestGetStats:
    @pytest.mark.asyncio
    async def test_empty_site_is_all_zeros(self, unit_env):
        dashboard_service = await unit_env.get(DashboardService)

        stats = await dashboard_service.get_stats()

        assert stats.total_posts == 0
        assert stats.total_views == 0
        assert stats.total_users == 0
        assert stats.total_questions == 0

    @pytest.mark.asyncio
    async def test_counts_every_section(self, unit_env):
        # Arrange
        dashboard_service = await unit_env.get(DashboardService)
        auth_service = await unit_env.get(AuthService)
        post_service = await unit_env.get(PostService)
        category_service = await unit_env.get(CategoryService)
        question_service = await unit_env.get(QuestionService)
        answer_service = await unit_env.get(AnswerService)

        admin = await auth_service.register(
            Email("admin@example.com"), "password123", "Admin", role=UserRole.ADMIN
        )
        reader = await auth_service.register(
            Email("reader@example.com"), "password123", "Reader"
        )
        await category_service.create_category("Derivatives")
        post = await post_service.create_post(
            admin.id, "Greeks explained", "body", status=PostStatus.PUBLISHED
        )
        await post_service.get_post_by_slug(post.slug)
        deleted = await post_service.create_post(admin.id, "Gone soon", "body")
        await post_service.delete_post(deleted.id, admin.id)
        question = await question_service.create_question(
            reader.id, "What is gamma scalping?", "And when does it pay?", []
        )
        await answer_service.create_answer(
            question.id, admin.id, "Trading around a long gamma position."
        )

        # Act
        stats = await dashboard_service.get_stats()

        # Assert
        assert stats.total_posts == 1
        assert stats.total_views == 1
        assert stats.total_users == 2
        assert stats.total_authors == 1
        assert stats.total_categories == 1
        assert stats.total_questions == 1
        assert stats.total_answers == 1
