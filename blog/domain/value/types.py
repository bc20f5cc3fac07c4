"""Domain value objects for the blog.

Value objects are immutable and defined by their values, not identity.
They encapsulate validation rules and business logic.
"""

import re
import unicodedata
from enum import Enum

from pydantic import field_validator

from blog.domain.value.common import RootValueObject


class VoteType(str, Enum):
    """Direction of a vote on a question or answer."""

    UPVOTE = "upvote"
    DOWNVOTE = "downvote"


class TargetType(str, Enum):
    """Type of entity that can be voted on."""

    QUESTION = "question"
    ANSWER = "answer"


class VoteOutcome(str, Enum):
    """What a cast-vote call did to the actor's vote.

    The value doubles as the human-readable status message.
    """

    CAST = "vote cast"
    REMOVED = "vote removed"
    CHANGED = "vote changed"


class UserRole(str, Enum):
    """Account role."""

    USER = "user"
    ADMIN = "admin"


class PostStatus(str, Enum):
    """Publication status of a post."""

    DRAFT = "draft"
    PUBLISHED = "published"
    ARCHIVED = "archived"


SLUG_PATTERN = r"^[a-z0-9]+(?:-[a-z0-9]+)*$"


class Slug(RootValueObject[str]):
    """URL-safe slug for posts, categories and tags.

    Must be lowercase, alphanumeric with hyphens, 1-200 characters.
    Examples: 'intro-to-backtesting', 'python'
    """

    @field_validator("root")
    @classmethod
    def validate_slug_format(cls, v: str) -> str:
        """Validate slug format."""
        if not re.match(SLUG_PATTERN, v):
            raise ValueError(
                "Slug must be lowercase alphanumeric with hyphens, "
                "no leading/trailing hyphens or consecutive hyphens"
            )
        if len(v) > 200:
            raise ValueError("Slug must be 1-200 characters")
        return v

    @classmethod
    def from_text(cls, text: str, fallback: str = "item") -> "Slug":
        """Derive a slug from free text such as a title or name.

        Accented letters are folded to ASCII, everything else that is not
        alphanumeric becomes a single hyphen.
        """
        folded = (
            unicodedata.normalize("NFKD", text).encode("ascii", "ignore").decode()
        )
        slug = re.sub(r"[^a-z0-9]+", "-", folded.lower()).strip("-")
        # Leave room for a "-N" suffix when disambiguating
        slug = slug[:180].rstrip("-")
        return cls(slug or fallback)


class Email(RootValueObject[str]):
    """Email address, normalized to lowercase."""

    @field_validator("root")
    @classmethod
    def validate_email_format(cls, v: str) -> str:
        """Validate a plausible address and lowercase it."""
        v = v.strip().lower()
        if len(v) > 255 or not re.match(r"^[^@\s]+@[^@\s]+\.[^@\s]+$", v):
            raise ValueError("Invalid email address")
        return v
