"""One-shot database connectivity probe for the status page."""

from collections.abc import Callable
from datetime import datetime

import structlog
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker

from devstatus.core.database import create_probe_engine
from devstatus.core.mode import RuntimeMode
from devstatus.core.settings import DatabaseConfig
from devstatus.repositories.diagnostics_repo import DiagnosticsRepository
from devstatus.schemas.status_schema import (
    PostSummary,
    ProbeFailure,
    ProbeSuccess,
)

logger = structlog.get_logger()

EngineFactory = Callable[[DatabaseConfig], AsyncEngine]

# Errors that classify as a connection or query failure. ImportError covers
# a URL naming a driver that is not installed.
PROBE_ERRORS: tuple[type[BaseException], ...] = (
    SQLAlchemyError,
    OSError,
    TimeoutError,
    ImportError,
)


def _format_timestamp(value: object) -> str:
    if isinstance(value, datetime):
        return value.strftime("%Y-%m-%d %H:%M:%S")
    return "" if value is None else str(value)


class DatabaseProbe:
    """Connects once, runs the mode-appropriate queries, never raises.

    Production only checks that a query round-trips. Development also
    counts users and samples the most recent published posts.
    """

    def __init__(
        self,
        config: DatabaseConfig,
        mode: RuntimeMode,
        engine_factory: EngineFactory = create_probe_engine,
    ) -> None:
        self._config = config
        self._mode = mode
        self._engine_factory = engine_factory

    async def run(self) -> ProbeSuccess | ProbeFailure:
        """Run the probe and return a tagged result."""
        engine: AsyncEngine | None = None
        try:
            engine = self._engine_factory(self._config)
            session_factory = async_sessionmaker(
                engine, class_=AsyncSession, expire_on_commit=False
            )
            async with session_factory() as session:
                result = await self._query(DiagnosticsRepository(session))
        except PROBE_ERRORS as exc:
            logger.warning(
                "Database probe failed",
                host=self._config.host,
                database=self._config.name,
                error=str(exc),
            )
            return ProbeFailure(detail=str(exc))
        finally:
            if engine is not None:
                await engine.dispose()

        logger.debug("Database probe succeeded", mode=self._mode.value)
        return result

    async def _query(self, repo: DiagnosticsRepository) -> ProbeSuccess:
        if self._mode is RuntimeMode.PRODUCTION:
            await repo.ping()
            return ProbeSuccess()

        user_count = await repo.count_users()
        rows = await repo.recent_published_posts(self._config.recent_posts_limit)
        return ProbeSuccess(
            user_count=user_count,
            recent_posts=[
                PostSummary(
                    title=row.title or "",
                    created_at=_format_timestamp(row.created_at),
                )
                for row in rows
            ],
        )
