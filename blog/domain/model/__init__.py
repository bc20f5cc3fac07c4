"""Domain model entities for the blog."""

from blog.domain.model.answer import Answer
from blog.domain.model.category import Category
from blog.domain.model.comment import Comment
from blog.domain.model.common import DomainModel, VotableModel
from blog.domain.model.post import Post
from blog.domain.model.question import Question
from blog.domain.model.tag import Tag
from blog.domain.model.user import User
from blog.domain.model.vote import Vote

__all__ = [
    "DomainModel",
    "VotableModel",
    "User",
    "Category",
    "Tag",
    "Post",
    "Comment",
    "Question",
    "Answer",
    "Vote",
]
