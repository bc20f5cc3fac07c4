"""Authentication domain service."""

from datetime import datetime, timedelta
from typing import Optional
from uuid import uuid4

import logfire

from blog.config import AuthSettings
from blog.domain.error import AuthenticationError, ConflictError, NotFoundError
from blog.domain.model import User
from blog.domain.model.common import utcnow
from blog.domain.repository import LoginAttemptRepository, UserRepository
from blog.domain.value import Email, UserId, UserRole
from blog.util.password import hash_password, verify_password

from .base import Service


class AuthService(Service):
    """Domain service for email/password registration and login.

    Repeated failed logins lock the account for a while. Deactivated
    accounts cannot log in.
    """

    def __init__(
        self,
        user_repository: UserRepository,
        login_attempt_repository: LoginAttemptRepository,
        auth_settings: AuthSettings,
    ) -> None:
        """Initialize auth service.

        Args:
            user_repository: User repository
            login_attempt_repository: Records failures outside the request
                transaction
            auth_settings: Hashing cost and lockout thresholds
        """
        self.user_repository = user_repository
        self.login_attempt_repository = login_attempt_repository
        self.auth_settings = auth_settings

    async def register(
        self,
        email: Email,
        password: str,
        name: str,
        bio: Optional[str] = None,
        role: UserRole = UserRole.USER,
    ) -> User:
        """Create an account.

        Raises:
            ConflictError: If the email is already registered
        """
        with logfire.span("auth_service.register", email=email.root, role=role.value):
            if await self.user_repository.find_by_email(email):
                logfire.warn("Registration with existing email", email=email.root)
                raise ConflictError("Email is already registered")

            now = utcnow()
            user = User(
                id=UserId(uuid4()),
                email=email,
                name=name.strip(),
                password_hash=hash_password(password, self.auth_settings.bcrypt_rounds),
                bio=bio,
                role=role,
                created_at=now,
                updated_at=now,
            )
            saved = await self.user_repository.save(user)
            logfire.info("User registered", user_id=str(saved.id), role=role.value)
            return saved

    async def authenticate(self, email: Email, password: str) -> User:
        """Check credentials and record the login attempt.

        Returns:
            The user, with attempts reset and last_login_at set

        Raises:
            AuthenticationError: If credentials are wrong or the account is
                locked or deactivated
        """
        with logfire.span("auth_service.authenticate", email=email.root):
            now = utcnow()
            user = await self.user_repository.find_by_email(email)
            if not user:
                logfire.warn("Login for unknown email", email=email.root)
                raise AuthenticationError("Invalid email or password")

            if not user.active:
                logfire.warn("Login to deactivated account", user_id=str(user.id))
                raise AuthenticationError("Account is deactivated")

            if user.is_locked(now):
                logfire.warn(
                    "Login to locked account",
                    user_id=str(user.id),
                    locked_until=user.locked_until.isoformat(),
                )
                raise AuthenticationError(
                    "Account is temporarily locked, try again later"
                )

            if not verify_password(password, user.password_hash):
                await self._record_failed_login(user, now)
                raise AuthenticationError("Invalid email or password")

            saved = await self.user_repository.save(
                user.model_copy(
                    update={
                        "login_attempts": 0,
                        "locked_until": None,
                        "last_login_at": now,
                    }
                )
            )
            logfire.info("User logged in", user_id=str(saved.id))
            return saved

    async def change_password(
        self, user_id: UserId, current_password: str, new_password: str
    ) -> User:
        """Replace the password after checking the current one.

        Raises:
            NotFoundError: If the user doesn't exist
            AuthenticationError: If the current password is wrong or the
                account is deactivated
        """
        with logfire.span("auth_service.change_password", user_id=str(user_id)):
            user = await self.user_repository.find_by_id(user_id)
            if not user:
                raise NotFoundError("User", str(user_id))
            if not user.active:
                raise AuthenticationError("Account is deactivated")
            if not verify_password(current_password, user.password_hash):
                logfire.warn("Password change with wrong password", user_id=str(user_id))
                raise AuthenticationError("Current password is incorrect")

            saved = await self.user_repository.save(
                user.model_copy(
                    update={
                        "password_hash": hash_password(
                            new_password, self.auth_settings.bcrypt_rounds
                        ),
                        "updated_at": utcnow(),
                    }
                )
            )
            logfire.info("Password changed", user_id=str(user_id))
            return saved

    async def _record_failed_login(self, user: User, now: datetime) -> None:
        attempts = await self.login_attempt_repository.record_failure(
            user.id,
            max_attempts=self.auth_settings.max_login_attempts,
            lock_until=now + timedelta(minutes=self.auth_settings.lockout_minutes),
        )
        logfire.warn(
            "Failed login",
            user_id=str(user.id),
            attempts=attempts,
            locked=attempts is not None
            and attempts >= self.auth_settings.max_login_attempts,
        )
