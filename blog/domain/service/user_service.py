"""User domain service."""

from typing import List, Optional, Tuple

import logfire

from blog.domain.error import NotFoundError
from blog.domain.model.common import utcnow
from blog.domain.model import User
from blog.domain.repository import UserListItem, UserRepository
from blog.domain.value import PageRequest, UserId, UserRole

from .base import Service


class UserService(Service):
    """Domain service for user operations."""

    def __init__(self, user_repository: UserRepository) -> None:
        """Initialize user service.

        Args:
            user_repository: User repository
        """
        self.user_repository = user_repository

    async def get_by_id(self, user_id: UserId) -> User:
        """Get user by ID.

        Raises:
            NotFoundError: If user not found
        """
        with logfire.span("user_service.get_by_id", user_id=str(user_id)):
            user = await self.user_repository.find_by_id(user_id)
            if not user:
                logfire.warn("User not found", user_id=str(user_id))
                raise NotFoundError("User", str(user_id))
            return user

    async def list_users(
        self,
        page: PageRequest,
        active: bool = True,
        search: Optional[str] = None,
        role: Optional[UserRole] = None,
    ) -> Tuple[List[UserListItem], int]:
        """List a page of users for the admin screen.

        Args:
            page: Page number and size
            active: Active (True) or deactivated (False) accounts
            search: Name or email substring
            role: Restrict to one role, None for all

        Returns:
            (users with post counts, total matching users)
        """
        with logfire.span(
            "user_service.list_users",
            page=page.page,
            limit=page.limit,
            active=active,
            role=role.value if role else "all",
        ):
            search = search.strip() if search else None
            items = await self.user_repository.find_all(
                page, active=active, search=search, role=role
            )
            total = await self.user_repository.count(
                active=active, search=search, role=role
            )
            logfire.info("Users listed", count=len(items), total=total)
            return items, total

    async def update_profile(
        self,
        user_id: UserId,
        name: Optional[str] = None,
        bio: Optional[str] = None,
        avatar_url: Optional[str] = None,
    ) -> User:
        """Update the profile fields a user may change on their own account."""
        with logfire.span("user_service.update_profile", user_id=str(user_id)):
            user = await self.get_by_id(user_id)
            changes: dict = {"updated_at": utcnow()}
            if name is not None:
                changes["name"] = name.strip()
            if bio is not None:
                changes["bio"] = bio
            if avatar_url is not None:
                changes["avatar_url"] = avatar_url
            updated = User.model_validate({**user.model_dump(), **changes})
            saved = await self.user_repository.save(updated)
            logfire.info("Profile updated", user_id=str(user_id))
            return saved

    async def set_active(self, user_id: UserId, active: bool) -> User:
        """Deactivate (soft-delete) or restore an account.

        Raises:
            NotFoundError: If user not found
        """
        with logfire.span(
            "user_service.set_active", user_id=str(user_id), active=active
        ):
            user = await self.get_by_id(user_id)
            saved = await self.user_repository.save(
                user.model_copy(update={"active": active, "updated_at": utcnow()})
            )
            logfire.info(
                "User restored" if active else "User deactivated",
                user_id=str(user_id),
            )
            return saved
