"""User aggregate root.

Users sign up with email and password. Admins manage other accounts
and see the dashboard.
"""

from datetime import datetime
from typing import Optional

from pydantic import Field

from blog.domain.model.common import DomainModel, utcnow
from blog.domain.value import Email, UserId, UserRole


class User(DomainModel):
    """User aggregate root.

    ``active`` is the soft-delete flag used by admin deactivation.
    ``login_attempts`` and ``locked_until`` drive the login lockout.
    """

    id: UserId
    email: Email
    name: str = Field(min_length=1, max_length=100)
    password_hash: str
    bio: Optional[str] = Field(default=None, max_length=500)
    avatar_url: Optional[str] = None
    role: UserRole = UserRole.USER
    active: bool = True
    login_attempts: int = Field(default=0, ge=0)
    locked_until: Optional[datetime] = None
    last_login_at: Optional[datetime] = None
    created_at: datetime = Field(default_factory=utcnow)
    updated_at: datetime = Field(default_factory=utcnow)

    @property
    def is_admin(self) -> bool:
        return self.role == UserRole.ADMIN

    def is_locked(self, now: datetime) -> bool:
        """Whether the account is temporarily locked at ``now``."""
        return self.locked_until is not None and self.locked_until > now
