"""Comment domain service."""

from typing import List, Optional
from uuid import uuid4

import logfire

from blog.domain.error import BusinessRuleViolationError, NotFoundError
from blog.domain.model.comment import Comment
from blog.domain.model.common import utcnow
from blog.domain.repository import CommentRepository, PostRepository
from blog.domain.value import CommentId, PostId, UserId

from .base import Service
from .permission import OwnershipPolicy


class CommentService(Service):
    """Domain service for comment operations."""

    def __init__(
        self,
        comment_repository: CommentRepository,
        post_repository: PostRepository,
        ownership_policy: OwnershipPolicy,
    ) -> None:
        """Initialize comment service.

        Args:
            comment_repository: Comment repository
            post_repository: Post repository (comment_count updates)
            ownership_policy: Decides who may delete a comment
        """
        self.comment_repository = comment_repository
        self.post_repository = post_repository
        self.ownership_policy = ownership_policy

    async def create_comment(
        self,
        post_id: PostId,
        author_id: UserId,
        content: str,
        parent_id: Optional[CommentId] = None,
    ) -> Comment:
        """Comment on a post or reply to another comment.

        Raises:
            NotFoundError: If the post or parent comment does not exist
            BusinessRuleViolationError: If comments are closed, or the parent
                belongs to another post
        """
        with logfire.span(
            "comment_service.create_comment",
            post_id=str(post_id),
            author_id=str(author_id),
            parent_id=str(parent_id) if parent_id else None,
        ):
            post = await self.post_repository.find_by_id(post_id)
            if not post or not post.is_public:
                logfire.warn("Comment on unavailable post", post_id=str(post_id))
                raise NotFoundError("Post", str(post_id))
            if not post.allow_comments:
                raise BusinessRuleViolationError("Comments are disabled for this post")

            depth = 0
            if parent_id:
                parent = await self.comment_repository.find_by_id(parent_id)
                if not parent:
                    logfire.warn("Parent comment not found", parent_id=str(parent_id))
                    raise NotFoundError("Comment", str(parent_id))
                if parent.post_id != post_id:
                    logfire.error(
                        "Parent comment belongs to different post",
                        parent_id=str(parent_id),
                        parent_post_id=str(parent.post_id),
                        post_id=str(post_id),
                    )
                    raise BusinessRuleViolationError(
                        "Parent comment belongs to a different post"
                    )
                depth = parent.depth + 1

            now = utcnow()
            comment = Comment(
                id=CommentId(uuid4()),
                post_id=post_id,
                author_id=author_id,
                content=content,
                parent_id=parent_id,
                depth=depth,
                created_at=now,
                updated_at=now,
            )
            saved = await self.comment_repository.save(comment)
            await self.post_repository.adjust_comment_count(post_id, 1)

            logfire.info(
                "Comment created",
                comment_id=str(saved.id),
                post_id=str(post_id),
                depth=depth,
            )
            return saved

    async def list_comments(self, post_id: PostId) -> List[Comment]:
        """List a post's comments, oldest first.

        Raises:
            NotFoundError: If the post does not exist
        """
        with logfire.span("comment_service.list_comments", post_id=str(post_id)):
            post = await self.post_repository.find_by_id(post_id)
            if not post or not post.active:
                raise NotFoundError("Post", str(post_id))
            return await self.comment_repository.find_by_post(post_id)

    async def delete_comment(self, comment_id: CommentId, actor_id: UserId) -> None:
        """Delete a comment and its replies (owner only).

        Raises:
            NotFoundError: If the comment does not exist
            NotAuthorizedError: If the actor does not own the comment
        """
        with logfire.span(
            "comment_service.delete_comment",
            comment_id=str(comment_id),
            actor_id=str(actor_id),
        ):
            comment = await self.comment_repository.find_by_id(comment_id)
            if not comment:
                raise NotFoundError("Comment", str(comment_id))
            self.ownership_policy.ensure_can_mutate(actor_id, comment)

            deleted = await self.comment_repository.delete(comment_id)
            if deleted:
                await self.post_repository.adjust_comment_count(
                    comment.post_id, -deleted
                )
            logfire.info(
                "Comment deleted", comment_id=str(comment_id), removed=deleted
            )
