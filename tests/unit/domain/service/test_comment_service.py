"""Unit tests for CommentService."""

from uuid import uuid4

import pytest

from blog.domain.error import (
    BusinessRuleViolationError,
    NotAuthorizedError,
    NotFoundError,
)
from blog.domain.service import CommentService, PostService
from blog.domain.value import CommentId, PostStatus, UserId
from tests.harness import create_env_fixture

unit_env = create_env_fixture()


async def _publish(env, allow_comments=True):
    post_service = await env.get(PostService)
    return await post_service.create_post(
        UserId(uuid4()),
        "Commentable post",
        "body",
        status=PostStatus.PUBLISHED,
        allow_comments=allow_comments,
    )


class TestCreateComment:
    """Tests for create_comment."""

    @pytest.mark.asyncio
    async def test_top_level_comment_has_depth_zero(self, unit_env):
        # Arrange
        comment_service = await unit_env.get(CommentService)
        post_service = await unit_env.get(PostService)
        post = await _publish(unit_env)

        # Act
        comment = await comment_service.create_comment(
            post.id, UserId(uuid4()), "Great read"
        )

        # Assert
        assert comment.depth == 0
        assert comment.parent_id is None
        stored = await post_service.get_post(post.id)
        assert stored.comment_count == 1

    @pytest.mark.asyncio
    async def test_reply_increments_depth(self, unit_env):
        # Arrange
        comment_service = await unit_env.get(CommentService)
        post = await _publish(unit_env)
        parent = await comment_service.create_comment(
            post.id, UserId(uuid4()), "Parent"
        )

        # Act
        reply = await comment_service.create_comment(
            post.id, UserId(uuid4()), "Reply", parent_id=parent.id
        )

        # Assert
        assert reply.depth == 1
        assert reply.parent_id == parent.id

    @pytest.mark.asyncio
    async def test_missing_parent_raises(self, unit_env):
        comment_service = await unit_env.get(CommentService)
        post = await _publish(unit_env)

        with pytest.raises(NotFoundError):
            await comment_service.create_comment(
                post.id, UserId(uuid4()), "Orphan", parent_id=CommentId(uuid4())
            )

    @pytest.mark.asyncio
    async def test_parent_on_other_post_rejected(self, unit_env):
        # Arrange
        comment_service = await unit_env.get(CommentService)
        post = await _publish(unit_env)
        other = await _publish(unit_env)
        parent = await comment_service.create_comment(
            other.id, UserId(uuid4()), "Elsewhere"
        )

        # Act & Assert
        with pytest.raises(BusinessRuleViolationError):
            await comment_service.create_comment(
                post.id, UserId(uuid4()), "Cross-post reply", parent_id=parent.id
            )

    @pytest.mark.asyncio
    async def test_comments_disabled(self, unit_env):
        comment_service = await unit_env.get(CommentService)
        post = await _publish(unit_env, allow_comments=False)

        with pytest.raises(BusinessRuleViolationError):
            await comment_service.create_comment(post.id, UserId(uuid4()), "Hello")


class TestDeleteComment:
    @pytest.mark.asyncio
    async def test_non_owner_cannot_delete(self, unit_env):
        # Arrange
        comment_service = await unit_env.get(CommentService)
        post = await _publish(unit_env)
        comment = await comment_service.create_comment(
            post.id, UserId(uuid4()), "Mine"
        )

        # Act & Assert
        with pytest.raises(NotAuthorizedError):
            await comment_service.delete_comment(comment.id, UserId(uuid4()))

    @pytest.mark.asyncio
    async def test_owner_delete_removes_it_from_listing(self, unit_env):
        # Arrange
        comment_service = await unit_env.get(CommentService)
        post = await _publish(unit_env)
        author_id = UserId(uuid4())
        comment = await comment_service.create_comment(post.id, author_id, "Mine")

        # Act
        await comment_service.delete_comment(comment.id, author_id)

        # Assert
        assert await comment_service.list_comments(post.id) == []
