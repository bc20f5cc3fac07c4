"""Shared state for the in-memory repositories."""

from dataclasses import dataclass, field
from uuid import UUID

from blog.domain.model import (
    Answer,
    Category,
    Comment,
    Post,
    Question,
    Tag,
    User,
    Vote,
)


@dataclass
class InMemoryStore:
    """One dict per table.

    Repositories built on the same store see each other's writes, so
    cross-table queries (post counts per user, tag lookups) behave like
    the database.
    """

    users: dict[UUID, User] = field(default_factory=dict)
    categories: dict[UUID, Category] = field(default_factory=dict)
    tags: dict[UUID, Tag] = field(default_factory=dict)
    posts: dict[UUID, Post] = field(default_factory=dict)
    comments: dict[UUID, Comment] = field(default_factory=dict)
    questions: dict[UUID, Question] = field(default_factory=dict)
    answers: dict[UUID, Answer] = field(default_factory=dict)
    votes: dict[UUID, Vote] = field(default_factory=dict)

    def clear(self) -> None:
        for table in (
            self.users,
            self.categories,
            self.tags,
            self.posts,
            self.comments,
            self.questions,
            self.answers,
            self.votes,
        ):
            table.clear()
