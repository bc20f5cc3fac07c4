"""Recording stand-in for the database session.

Lets tests drive the production persistence provider without PostgreSQL
and check whether a request scope committed or rolled back.
"""

from dishka import Provider, Scope, provide
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker


class _EmptyResult:
    def fetchone(self):
        return None

    def fetchall(self):
        return []

    def scalar(self):
        return None


class RecordingSession:
    """Records the transaction calls made on it, in order."""

    def __init__(self) -> None:
        self.events: list[str] = []

    async def __aenter__(self) -> "RecordingSession":
        return self

    async def __aexit__(self, *exc_info) -> None:
        self.events.append("close")

    async def execute(self, stmt) -> _EmptyResult:
        self.events.append("execute")
        return _EmptyResult()

    async def flush(self) -> None:
        self.events.append("flush")

    async def commit(self) -> None:
        self.events.append("commit")

    async def rollback(self) -> None:
        self.events.append("rollback")


class RecordingSessionProvider(Provider):
    """Overrides the session factory so every session is ``session``.

    Register it after ProdPersistenceProvider; the later factory wins.
    """

    def __init__(self, session: RecordingSession) -> None:
        super().__init__()
        self.session = session

    @provide(scope=Scope.APP)
    def get_session_factory(self) -> async_sessionmaker[AsyncSession]:
        return lambda: self.session
