"""In-memory user repository for testing."""

from typing import Optional

from blog.domain.model.user import User
from blog.domain.repository.user import UserListItem, UserRepository
from blog.domain.value import Email, PageRequest, UserId, UserRole

from .store import InMemoryStore


class InMemoryUserRepository(UserRepository):
    """In-memory implementation of UserRepository for testing."""

    def __init__(self, store: Optional[InMemoryStore] = None) -> None:
        self._store = store or InMemoryStore()

    def _filter(
        self, active: bool, search: Optional[str], role: Optional[UserRole]
    ) -> list[User]:
        users = [u for u in self._store.users.values() if u.active == active]
        if search:
            needle = search.lower()
            users = [
                u
                for u in users
                if needle in u.name.lower() or needle in u.email.root
            ]
        if role:
            users = [u for u in users if u.role == role]
        return users

    async def find_by_id(self, user_id: UserId) -> Optional[User]:
        return self._store.users.get(user_id)

    async def find_by_email(self, email: Email) -> Optional[User]:
        for user in self._store.users.values():
            if user.email == email:
                return user
        return None

    async def find_all(
        self,
        page: PageRequest,
        active: bool = True,
        search: Optional[str] = None,
        role: Optional[UserRole] = None,
    ) -> list[UserListItem]:
        users = self._filter(active, search, role)
        users.sort(key=lambda u: u.created_at, reverse=True)
        return [
            UserListItem(
                user=u,
                post_count=sum(
                    1
                    for p in self._store.posts.values()
                    if p.author_id == u.id and p.active
                ),
            )
            for u in users[page.offset : page.offset + page.limit]
        ]

    async def count(
        self,
        active: bool = True,
        search: Optional[str] = None,
        role: Optional[UserRole] = None,
    ) -> int:
        return len(self._filter(active, search, role))

    async def save(self, user: User) -> User:
        self._store.users[user.id] = user
        return user
