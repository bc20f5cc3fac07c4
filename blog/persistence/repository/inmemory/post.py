"""In-memory post repository for testing."""

from typing import Optional
from uuid import UUID

from blog.domain.model.post import Post
from blog.domain.repository.post import PostRepository
from blog.domain.value import PageRequest, PostId, PostStatus, Slug, UserId

from .store import InMemoryStore


class InMemoryPostRepository(PostRepository):
    """In-memory implementation of PostRepository for testing."""

    def __init__(self, store: Optional[InMemoryStore] = None) -> None:
        self._store = store or InMemoryStore()

    @property
    def _posts(self) -> dict[UUID, Post]:
        return self._store.posts

    def _published(
        self,
        category: Optional[Slug],
        tag: Optional[Slug],
        search: Optional[str],
    ) -> list[Post]:
        posts = [p for p in self._posts.values() if p.is_public]
        if category is not None:
            category_ids = {
                c.id for c in self._store.categories.values() if c.slug == category
            }
            posts = [p for p in posts if p.category_id in category_ids]
        if tag is not None:
            posts = [p for p in posts if tag in p.tag_slugs]
        if search:
            needle = search.lower()
            posts = [
                p
                for p in posts
                if needle in p.title.lower()
                or needle in (p.excerpt or "").lower()
                or needle in p.content.lower()
            ]
        return posts

    def _by_author(
        self, author_id: UserId, status: Optional[PostStatus]
    ) -> list[Post]:
        return [
            p
            for p in self._posts.values()
            if p.author_id == author_id
            and p.active
            and (status is None or p.status == status)
        ]

    async def find_by_id(self, post_id: PostId) -> Optional[Post]:
        return self._posts.get(post_id)

    async def find_by_slug(self, slug: Slug) -> Optional[Post]:
        for post in self._posts.values():
            if post.slug == slug:
                return post
        return None

    async def slug_exists(self, slug: Slug) -> bool:
        """Check if a slug exists (globally - includes inactive posts)."""
        return any(post.slug == slug for post in self._posts.values())

    async def find_published(
        self,
        page: PageRequest,
        category: Optional[Slug] = None,
        tag: Optional[Slug] = None,
        search: Optional[str] = None,
    ) -> list[Post]:
        posts = self._published(category, tag, search)
        posts.sort(key=lambda p: (p.published_at or p.created_at), reverse=True)
        return posts[page.offset : page.offset + page.limit]

    async def count_published(
        self,
        category: Optional[Slug] = None,
        tag: Optional[Slug] = None,
        search: Optional[str] = None,
    ) -> int:
        return len(self._published(category, tag, search))

    async def find_by_author(
        self,
        author_id: UserId,
        page: PageRequest,
        status: Optional[PostStatus] = None,
    ) -> list[Post]:
        posts = self._by_author(author_id, status)
        posts.sort(key=lambda p: p.created_at, reverse=True)
        return posts[page.offset : page.offset + page.limit]

    async def count_by_author(
        self, author_id: UserId, status: Optional[PostStatus] = None
    ) -> int:
        return len(self._by_author(author_id, status))

    async def save(self, post: Post) -> Post:
        existing = self._posts.get(post.id)
        if existing:
            # Counters are only changed through the atomic methods
            post = post.model_copy(
                update={
                    "view_count": existing.view_count,
                    "comment_count": existing.comment_count,
                }
            )
        self._posts[post.id] = post
        return post

    async def increment_view_count(self, post_id: PostId) -> None:
        post = self._posts.get(post_id)
        if post:
            self._posts[post_id] = post.model_copy(
                update={"view_count": post.view_count + 1}
            )

    async def adjust_comment_count(self, post_id: PostId, delta: int) -> None:
        post = self._posts.get(post_id)
        if post:
            self._posts[post_id] = post.model_copy(
                update={"comment_count": max(post.comment_count + delta, 0)}
            )
