"""In-memory login attempt repository for testing."""

from datetime import datetime
from typing import Optional

from blog.domain.model.common import utcnow
from blog.domain.repository.login_attempt import LoginAttemptRepository
from blog.domain.value import UserId

from .store import InMemoryStore


class InMemoryLoginAttemptRepository(LoginAttemptRepository):
    """In-memory implementation of LoginAttemptRepository for testing."""

    def __init__(self, store: Optional[InMemoryStore] = None) -> None:
        self._store = store or InMemoryStore()

    async def record_failure(
        self, user_id: UserId, max_attempts: int, lock_until: datetime
    ) -> Optional[int]:
        user = self._store.users.get(user_id)
        if not user:
            return None
        attempts = user.login_attempts + 1
        self._store.users[user_id] = user.model_copy(
            update={
                "login_attempts": attempts,
                "locked_until": lock_until
                if attempts >= max_attempts
                else user.locked_until,
                "updated_at": utcnow(),
            }
        )
        return attempts
