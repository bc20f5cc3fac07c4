"""Strongly typed identifiers for blog domain entities.

Using NewType for strong typing prevents mixing up different entity IDs
and makes the code more self-documenting.
"""

from typing import NewType
from uuid import UUID

# Core domain entity identifiers
UserId = NewType("UserId", UUID)
CategoryId = NewType("CategoryId", UUID)
TagId = NewType("TagId", UUID)
PostId = NewType("PostId", UUID)
CommentId = NewType("CommentId", UUID)
QuestionId = NewType("QuestionId", UUID)
AnswerId = NewType("AnswerId", UUID)
VoteId = NewType("VoteId", UUID)
