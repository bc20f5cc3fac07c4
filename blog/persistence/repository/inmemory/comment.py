"""In-memory comment repository for testing."""

from typing import Optional
from uuid import UUID

from blog.domain.model.comment import Comment
from blog.domain.repository.comment import CommentRepository
from blog.domain.value import CommentId, PostId

from .store import InMemoryStore


class InMemoryCommentRepository(CommentRepository):
    """In-memory implementation of CommentRepository for testing."""

    def __init__(self, store: Optional[InMemoryStore] = None) -> None:
        self._store = store or InMemoryStore()

    @property
    def _comments(self) -> dict[UUID, Comment]:
        return self._store.comments

    async def find_by_id(self, comment_id: CommentId) -> Optional[Comment]:
        return self._comments.get(comment_id)

    async def find_by_post(self, post_id: PostId) -> list[Comment]:
        comments = [c for c in self._comments.values() if c.post_id == post_id]
        comments.sort(key=lambda c: c.created_at)
        return comments

    async def save(self, comment: Comment) -> Comment:
        self._comments[comment.id] = comment
        return comment

    async def delete(self, comment_id: CommentId) -> int:
        """Delete a comment and every reply below it."""
        if comment_id not in self._comments:
            return 0

        doomed = {comment_id}
        frontier = [comment_id]
        while frontier:
            parent = frontier.pop()
            for c in self._comments.values():
                if c.parent_id == parent and c.id not in doomed:
                    doomed.add(c.id)
                    frontier.append(c.id)

        for cid in doomed:
            del self._comments[cid]
        return len(doomed)
