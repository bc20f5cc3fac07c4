"""Post domain service."""

import math
from typing import List, Optional, Tuple
from uuid import uuid4

import logfire

from blog.domain.error import NotFoundError, ValidationError
from blog.domain.model.common import utcnow
from blog.domain.model.post import Post
from blog.domain.repository import CategoryRepository, PostRepository, TagRepository
from blog.domain.value import (
    CategoryId,
    PageRequest,
    PostId,
    PostStatus,
    Slug,
    UserId,
)

from .base import Service
from .permission import OwnershipPolicy

WORDS_PER_MINUTE = 200


def reading_time(content: str) -> int:
    """Estimated reading time in whole minutes (at least 1)."""
    words = len(content.split())
    return max(1, math.ceil(words / WORDS_PER_MINUTE))


class PostService(Service):
    """Domain service for post operations."""

    def __init__(
        self,
        post_repository: PostRepository,
        category_repository: CategoryRepository,
        tag_repository: TagRepository,
        ownership_policy: OwnershipPolicy,
    ) -> None:
        """Initialize post service.

        Args:
            post_repository: Post repository
            category_repository: Category repository (category validation)
            tag_repository: Tag repository (tag validation)
            ownership_policy: Decides who may update or delete a post
        """
        self.post_repository = post_repository
        self.category_repository = category_repository
        self.tag_repository = tag_repository
        self.ownership_policy = ownership_policy

    async def _unique_slug(self, title: str) -> Slug:
        base = Slug.from_text(title, fallback="post")
        candidate = base
        suffix = 1
        while await self.post_repository.slug_exists(candidate):
            suffix += 1
            candidate = Slug(f"{base.root}-{suffix}")
        return candidate

    async def _check_category(self, category_id: Optional[CategoryId]) -> None:
        if category_id is None:
            return
        if not await self.category_repository.find_by_id(category_id):
            raise NotFoundError("Category", str(category_id))

    async def _known_tags(self, tag_slugs: List[Slug]) -> List[Slug]:
        if not tag_slugs:
            return []
        tags = await self.tag_repository.find_by_slugs(tag_slugs)
        known = {tag.slug for tag in tags}
        missing = [str(slug) for slug in tag_slugs if slug not in known]
        if missing:
            raise ValidationError(f"Unknown tags: {', '.join(missing)}")
        # Preserve request order, drop duplicates
        return list(dict.fromkeys(tag_slugs))

    async def create_post(
        self,
        author_id: UserId,
        title: str,
        content: str,
        excerpt: Optional[str] = None,
        category_id: Optional[CategoryId] = None,
        tag_slugs: Optional[List[Slug]] = None,
        status: PostStatus = PostStatus.DRAFT,
        featured_image: Optional[str] = None,
        allow_comments: bool = True,
    ) -> Post:
        """Create a post with a unique slug derived from its title.

        Raises:
            NotFoundError: If the category does not exist
            ValidationError: If a tag slug is unknown
        """
        with logfire.span(
            "post_service.create_post", author_id=str(author_id), title=title
        ):
            await self._check_category(category_id)
            tags = await self._known_tags(tag_slugs or [])

            now = utcnow()
            post = Post(
                id=PostId(uuid4()),
                title=title.strip(),
                slug=await self._unique_slug(title),
                excerpt=excerpt,
                content=content,
                featured_image=featured_image,
                status=status,
                published_at=now if status == PostStatus.PUBLISHED else None,
                reading_time=reading_time(content),
                allow_comments=allow_comments,
                author_id=author_id,
                category_id=category_id,
                tag_slugs=tags,
                created_at=now,
                updated_at=now,
            )
            saved = await self.post_repository.save(post)
            logfire.info("Post created", post_id=str(saved.id), slug=str(saved.slug))
            return saved

    async def get_post(self, post_id: PostId) -> Post:
        """Get an active post by ID (any status).

        Raises:
            NotFoundError: If the post does not exist or was deleted
        """
        post = await self.post_repository.find_by_id(post_id)
        if not post or not post.active:
            logfire.warn("Post not found", post_id=str(post_id))
            raise NotFoundError("Post", str(post_id))
        return post

    async def get_post_by_slug(
        self, slug: Slug, viewer_id: Optional[UserId] = None
    ) -> Post:
        """Get a post by slug and count the view.

        Drafts and archived posts are only visible to their author; their
        views are not counted.

        Raises:
            NotFoundError: If not found or not visible to the viewer
        """
        with logfire.span("post_service.get_post_by_slug", slug=str(slug)):
            post = await self.post_repository.find_by_slug(slug)
            if not post or not post.active:
                logfire.warn("Post not found by slug", slug=str(slug))
                raise NotFoundError("Post", str(slug))

            if not post.is_public:
                if viewer_id is None or post.author_id != viewer_id:
                    logfire.warn("Unpublished post requested", slug=str(slug))
                    raise NotFoundError("Post", str(slug))
                return post

            await self.post_repository.increment_view_count(post.id)
            return post.model_copy(update={"view_count": post.view_count + 1})

    async def list_published(
        self,
        page: PageRequest,
        category: Optional[Slug] = None,
        tag: Optional[Slug] = None,
        search: Optional[str] = None,
    ) -> Tuple[List[Post], int]:
        """List a page of published posts and the total number matching."""
        with logfire.span(
            "post_service.list_published", page=page.page, limit=page.limit
        ):
            search = search.strip() if search else None
            posts = await self.post_repository.find_published(
                page, category=category, tag=tag, search=search
            )
            total = await self.post_repository.count_published(
                category=category, tag=tag, search=search
            )
            return posts, total

    async def list_by_author(
        self,
        author_id: UserId,
        page: PageRequest,
        status: Optional[PostStatus] = None,
    ) -> Tuple[List[Post], int]:
        """List a page of an author's posts (any status unless given)."""
        with logfire.span("post_service.list_by_author", author_id=str(author_id)):
            posts = await self.post_repository.find_by_author(
                author_id, page, status=status
            )
            total = await self.post_repository.count_by_author(author_id, status=status)
            return posts, total

    async def update_post(
        self,
        post_id: PostId,
        actor_id: UserId,
        title: Optional[str] = None,
        content: Optional[str] = None,
        excerpt: Optional[str] = None,
        category_id: Optional[CategoryId] = None,
        tag_slugs: Optional[List[Slug]] = None,
        status: Optional[PostStatus] = None,
        featured_image: Optional[str] = None,
        allow_comments: Optional[bool] = None,
    ) -> Post:
        """Update a post (owner only). The slug never changes.

        Raises:
            NotFoundError: If the post or category does not exist
            NotAuthorizedError: If the actor does not own the post
            ValidationError: If a tag slug is unknown
        """
        with logfire.span(
            "post_service.update_post", post_id=str(post_id), actor_id=str(actor_id)
        ):
            post = await self.get_post(post_id)
            self.ownership_policy.ensure_can_mutate(actor_id, post)

            changes: dict = {"updated_at": utcnow()}
            if title is not None:
                changes["title"] = title.strip()
            if content is not None:
                changes["content"] = content
                changes["reading_time"] = reading_time(content)
            if excerpt is not None:
                changes["excerpt"] = excerpt
            if category_id is not None:
                await self._check_category(category_id)
                changes["category_id"] = category_id
            if tag_slugs is not None:
                changes["tag_slugs"] = await self._known_tags(tag_slugs)
            if featured_image is not None:
                changes["featured_image"] = featured_image
            if allow_comments is not None:
                changes["allow_comments"] = allow_comments
            if status is not None:
                changes["status"] = status
                if status == PostStatus.PUBLISHED and post.published_at is None:
                    changes["published_at"] = changes["updated_at"]

            updated = Post.model_validate({**post.model_dump(), **changes})
            saved = await self.post_repository.save(updated)
            logfire.info("Post updated", post_id=str(post_id))
            return saved

    async def delete_post(self, post_id: PostId, actor_id: UserId) -> None:
        """Soft-delete a post (owner only).

        Raises:
            NotFoundError: If the post does not exist
            NotAuthorizedError: If the actor does not own the post
        """
        with logfire.span(
            "post_service.delete_post", post_id=str(post_id), actor_id=str(actor_id)
        ):
            post = await self.get_post(post_id)
            self.ownership_policy.ensure_can_mutate(actor_id, post)
            await self.post_repository.save(
                post.model_copy(update={"active": False, "updated_at": utcnow()})
            )
            logfire.info("Post deleted", post_id=str(post_id))
