"""User repository interface."""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import List, Optional

from blog.domain.model.user import User
from blog.domain.value import Email, PageRequest, UserId, UserRole


@dataclass
class UserListItem:
    """User row for the admin listing, with the number of active posts."""

    user: User
    post_count: int


class UserRepository(ABC):
    """Repository for User aggregate."""

    @abstractmethod
    async def find_by_id(self, user_id: UserId) -> Optional[User]:
        """Find a user by ID.

        Args:
            user_id: The user's unique identifier

        Returns:
            The user if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_by_email(self, email: Email) -> Optional[User]:
        """Find a user by email address.

        Args:
            email: Normalized email address

        Returns:
            The user if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_all(
        self,
        page: PageRequest,
        active: bool = True,
        search: Optional[str] = None,
        role: Optional[UserRole] = None,
    ) -> List[UserListItem]:
        """Find users for the admin listing, newest first.

        Args:
            page: Page number and size
            active: Only users whose active flag equals this value
            search: Case-insensitive substring matched on name or email
            role: Restrict to one role (None for all roles)

        Returns:
            Users on the requested page with their active post counts
        """
        pass

    @abstractmethod
    async def count(
        self,
        active: bool = True,
        search: Optional[str] = None,
        role: Optional[UserRole] = None,
    ) -> int:
        """Count users matching the admin listing filters."""
        pass

    @abstractmethod
    async def save(self, user: User) -> User:
        """Save a user (create or update).

        Args:
            user: The user to save

        Returns:
            The saved user
        """
        pass
