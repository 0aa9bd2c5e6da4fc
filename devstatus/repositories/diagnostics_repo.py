"""Read-only diagnostic queries against the sample database."""

from collections.abc import Sequence

from sqlalchemy import Row, func, select, text
from sqlalchemy.ext.asyncio import AsyncSession

from devstatus.models.post import Post
from devstatus.models.user import User


class DiagnosticsRepository:
    """Encapsulates the queries the status probe runs."""

    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def ping(self) -> int:
        """Round-trip a trivial query."""
        result = await self._session.execute(text("SELECT 1"))
        return int(result.scalar_one())

    async def count_users(self) -> int:
        """Count rows in the users table."""
        result = await self._session.execute(select(func.count()).select_from(User))
        return int(result.scalar_one())

    async def recent_published_posts(self, limit: int = 5) -> Sequence[Row]:
        """Most recent published posts, newest first."""
        result = await self._session.execute(
            select(Post.title, Post.created_at)
            .where(Post.published.is_(True))
            .order_by(Post.created_at.desc())
            .limit(limit)
        )
        return result.all()
