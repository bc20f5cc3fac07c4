"""Comment repository interface."""

from abc import ABC, abstractmethod
from typing import List, Optional

from blog.domain.model.comment import Comment
from blog.domain.value import CommentId, PostId


class CommentRepository(ABC):
    """Repository for Comment entity."""

    @abstractmethod
    async def find_by_id(self, comment_id: CommentId) -> Optional[Comment]:
        """Find a comment by ID."""
        pass

    @abstractmethod
    async def find_by_post(self, post_id: PostId) -> List[Comment]:
        """Find all comments on a post, oldest first."""
        pass

    @abstractmethod
    async def save(self, comment: Comment) -> Comment:
        """Save a comment (create or update)."""
        pass

    @abstractmethod
    async def delete(self, comment_id: CommentId) -> int:
        """Delete a comment together with its replies.

        Returns:
            Number of comments deleted (0 if the comment did not exist)
        """
        pass
