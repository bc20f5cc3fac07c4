"""Login attempt repository interface."""

from abc import ABC, abstractmethod
from datetime import datetime
from typing import Optional

from blog.domain.value import UserId


class LoginAttemptRepository(ABC):
    """Records failed logins outside the request transaction.

    A failed login ends the request with an error, which rolls the
    request's own writes back. The attempt counter must survive that, so
    implementations persist it independently.
    """

    @abstractmethod
    async def record_failure(
        self, user_id: UserId, max_attempts: int, lock_until: datetime
    ) -> Optional[int]:
        """Atomically add one failed attempt, locking the account at the limit.

        Args:
            user_id: Account that failed to log in
            max_attempts: Attempt count at which the account gets locked
            lock_until: Lock expiry applied once the limit is reached

        Returns:
            The attempt count after this failure, None if the user is gone
        """
        pass
