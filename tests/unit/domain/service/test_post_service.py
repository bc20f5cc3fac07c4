"""Unit tests for PostService."""

from uuid import uuid4

import pytest

from blog.domain.error import NotAuthorizedError, NotFoundError, ValidationError
from blog.domain.model import Tag
from blog.domain.repository import TagRepository
from blog.domain.service import CategoryService, PostService, reading_time
from blog.domain.value import (
    CategoryId,
    PageRequest,
    PostStatus,
    Slug,
    TagId,
    UserId,
)
from tests.harness import create_env_fixture

unit_env = create_env_fixture()


class TestReadingTime:
    def test_rounds_up_to_whole_minutes(self):
        assert reading_time("word " * 201) == 2

    def test_at_least_one_minute(self):
        assert reading_time("short") == 1


class TestCreatePost:
    """Tests for create_post."""

    @pytest.mark.asyncio
    async def test_slug_gets_numeric_suffix_on_collision(self, unit_env):
        # Arrange
        post_service = await unit_env.get(PostService)
        author_id = UserId(uuid4())

        # Act
        first = await post_service.create_post(author_id, "Mean Reversion 101", "body")
        second = await post_service.create_post(author_id, "Mean Reversion 101", "body")

        # Assert
        assert first.slug == Slug("mean-reversion-101")
        assert second.slug == Slug("mean-reversion-101-2")

    @pytest.mark.asyncio
    async def test_published_post_gets_published_at(self, unit_env):
        # Arrange
        post_service = await unit_env.get(PostService)

        # Act
        draft = await post_service.create_post(UserId(uuid4()), "Draft", "body")
        published = await post_service.create_post(
            UserId(uuid4()), "Live", "body", status=PostStatus.PUBLISHED
        )

        # Assert
        assert draft.published_at is None
        assert published.published_at is not None

    @pytest.mark.asyncio
    async def test_unknown_category_raises(self, unit_env):
        post_service = await unit_env.get(PostService)

        with pytest.raises(NotFoundError):
            await post_service.create_post(
                UserId(uuid4()), "Title", "body", category_id=CategoryId(uuid4())
            )

    @pytest.mark.asyncio
    async def test_unknown_tag_raises(self, unit_env):
        # Arrange
        post_service = await unit_env.get(PostService)
        tag_repo = await unit_env.get(TagRepository)
        await tag_repo.save(Tag(id=TagId(uuid4()), name="Python", slug=Slug("python")))

        # Act & Assert
        with pytest.raises(ValidationError, match="rust"):
            await post_service.create_post(
                UserId(uuid4()),
                "Title",
                "body",
                tag_slugs=[Slug("python"), Slug("rust")],
            )


class TestGetPostBySlug:
    @pytest.mark.asyncio
    async def test_public_view_is_counted(self, unit_env):
        # Arrange
        post_service = await unit_env.get(PostService)
        post = await post_service.create_post(
            UserId(uuid4()), "Counted", "body", status=PostStatus.PUBLISHED
        )

        # Act
        await post_service.get_post_by_slug(post.slug)
        viewed = await post_service.get_post_by_slug(post.slug)

        # Assert
        assert viewed.view_count == 2

    @pytest.mark.asyncio
    async def test_draft_hidden_from_others(self, unit_env):
        # Arrange
        post_service = await unit_env.get(PostService)
        author_id = UserId(uuid4())
        draft = await post_service.create_post(author_id, "Secret draft", "body")

        # Act & Assert
        with pytest.raises(NotFoundError):
            await post_service.get_post_by_slug(draft.slug, viewer_id=UserId(uuid4()))

        own = await post_service.get_post_by_slug(draft.slug, viewer_id=author_id)
        assert own.view_count == 0


class TestListPublished:
    @pytest.mark.asyncio
    async def test_filters_by_category_and_excludes_drafts(self, unit_env):
        # Arrange
        post_service = await unit_env.get(PostService)
        category_service = await unit_env.get(CategoryService)
        category = await category_service.create_category("Market Microstructure")
        author_id = UserId(uuid4())
        in_category = await post_service.create_post(
            author_id,
            "Order book dynamics",
            "body",
            category_id=category.id,
            status=PostStatus.PUBLISHED,
        )
        await post_service.create_post(
            author_id, "Elsewhere", "body", status=PostStatus.PUBLISHED
        )
        await post_service.create_post(
            author_id, "Unfinished", "body", category_id=category.id
        )

        # Act
        posts, total = await post_service.list_published(
            PageRequest(), category=category.slug
        )

        # Assert
        assert total == 1
        assert [p.id for p in posts] == [in_category.id]


class TestUpdateAndDeletePost:
    @pytest.mark.asyncio
    async def test_update_keeps_slug_and_recomputes_reading_time(self, unit_env):
        # Arrange
        post_service = await unit_env.get(PostService)
        author_id = UserId(uuid4())
        post = await post_service.create_post(author_id, "Original title", "body")

        # Act
        updated = await post_service.update_post(
            post.id, author_id, title="New title", content="word " * 450
        )

        # Assert
        assert updated.slug == post.slug
        assert updated.title == "New title"
        assert updated.reading_time == 3

    @pytest.mark.asyncio
    async def test_non_owner_cannot_delete(self, unit_env):
        # Arrange
        post_service = await unit_env.get(PostService)
        post = await post_service.create_post(UserId(uuid4()), "Mine", "body")

        # Act & Assert
        with pytest.raises(NotAuthorizedError):
            await post_service.delete_post(post.id, UserId(uuid4()))

    @pytest.mark.asyncio
    async def test_deleted_post_is_gone(self, unit_env):
        # Arrange
        post_service = await unit_env.get(PostService)
        author_id = UserId(uuid4())
        post = await post_service.create_post(author_id, "Ephemeral", "body")

        # Act
        await post_service.delete_post(post.id, author_id)

        # Assert
        with pytest.raises(NotFoundError):
            await post_service.get_post(post.id)
