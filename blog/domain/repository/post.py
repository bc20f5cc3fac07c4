"""Post repository interface."""

from abc import ABC, abstractmethod
from typing import List, Optional

from blog.domain.model.post import Post
from blog.domain.value import PageRequest, PostId, PostStatus, Slug, UserId


class PostRepository(ABC):
    """Repository for Post aggregate.

    Defines the contract for post persistence operations.
    Implementations live in the infrastructure layer.
    """

    @abstractmethod
    async def find_by_id(self, post_id: PostId) -> Optional[Post]:
        """Find a post by ID (any status, including inactive)."""
        pass

    @abstractmethod
    async def find_by_slug(self, slug: Slug) -> Optional[Post]:
        """Find a post by slug (any status, including inactive)."""
        pass

    @abstractmethod
    async def slug_exists(self, slug: Slug) -> bool:
        """Check whether a slug is taken (globally, including inactive posts)."""
        pass

    @abstractmethod
    async def find_published(
        self,
        page: PageRequest,
        category: Optional[Slug] = None,
        tag: Optional[Slug] = None,
        search: Optional[str] = None,
    ) -> List[Post]:
        """Find published, active posts, newest publication first.

        Args:
            page: Page number and size
            category: Filter by category slug
            tag: Filter by tag slug
            search: Case-insensitive substring matched on title, excerpt, content

        Returns:
            Posts on the requested page
        """
        pass

    @abstractmethod
    async def count_published(
        self,
        category: Optional[Slug] = None,
        tag: Optional[Slug] = None,
        search: Optional[str] = None,
    ) -> int:
        """Count published, active posts matching the filters."""
        pass

    @abstractmethod
    async def find_by_author(
        self,
        author_id: UserId,
        page: PageRequest,
        status: Optional[PostStatus] = None,
    ) -> List[Post]:
        """Find an author's active posts in any (or the given) status, newest first."""
        pass

    @abstractmethod
    async def count_by_author(
        self, author_id: UserId, status: Optional[PostStatus] = None
    ) -> int:
        """Count an author's active posts."""
        pass

    @abstractmethod
    async def save(self, post: Post) -> Post:
        """Save a post (create or update), including its tag links."""
        pass

    @abstractmethod
    async def increment_view_count(self, post_id: PostId) -> None:
        """Atomically increment the view counter by 1."""
        pass

    @abstractmethod
    async def adjust_comment_count(self, post_id: PostId, delta: int) -> None:
        """Atomically add ``delta`` to the comment counter (floored at 0)."""
        pass
