"""Pytest configuration and fixtures."""

from collections.abc import AsyncGenerator, Callable
from datetime import datetime
from pathlib import Path
from typing import Any

import pytest
from httpx import ASGITransport, AsyncClient
from sqlalchemy import text
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine

from devstatus.core.config import Settings
from devstatus.core.database import Base
from devstatus.main import create_app
from devstatus.models.post import Post
from devstatus.models.user import User
from devstatus.schemas.status_schema import EnvironmentFacts

DEV_DOCUMENT_ROOT = "/srv/nixvm/public"
DEV_INTERPRETER = "/opt/nixvm/venv/bin/python3"

# --- Test DB (SQLite file, stands in for MariaDB) ---


async def _seed(url: str) -> None:
    engine = create_async_engine(url, echo=False)
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    session_factory = async_sessionmaker(engine, class_=AsyncSession)
    async with session_factory() as session:
        session.add_all(
            [
                User(username="alice", email="alice@example.com"),
                User(username="bob", email="bob@example.com"),
                User(username="carol", email="carol@example.com"),
            ]
        )
        session.add_all(
            [
                Post(title="Hello NixVM", published=True, created_at=datetime(2024, 1, 1, 9, 0)),
                Post(title="Second post", published=True, created_at=datetime(2024, 2, 1, 9, 0)),
                Post(title="Draft <b>notes</b>", published=False, created_at=datetime(2024, 3, 1, 9, 0)),
            ]
        )
        await session.commit()
    await engine.dispose()


@pytest.fixture
async def sample_db_url(tmp_path: Path) -> str:
    """URL of a seeded SQLite database with users and posts tables."""
    url = f"sqlite+aiosqlite:///{tmp_path / 'nixvm_sample.db'}"
    await _seed(url)
    return url


@pytest.fixture
async def untitled_post_db_url(tmp_path: Path) -> str:
    """URL of a database whose posts table allows a NULL title."""
    url = f"sqlite+aiosqlite:///{tmp_path / 'untitled.db'}"
    engine = create_async_engine(url, echo=False)
    async with engine.begin() as conn:
        await conn.execute(
            text("CREATE TABLE users (id INTEGER PRIMARY KEY, username VARCHAR(50), email VARCHAR(100))")
        )
        await conn.execute(
            text(
                "CREATE TABLE posts (id INTEGER PRIMARY KEY, title VARCHAR(200), "
                "published BOOLEAN, created_at DATETIME)"
            )
        )
        await conn.execute(text("INSERT INTO users (username, email) VALUES ('alice', 'alice@example.com')"))
        await conn.execute(
            text("INSERT INTO posts (title, published, created_at) VALUES (NULL, 1, '2024-01-01 09:00:00')")
        )
    await engine.dispose()
    return url


@pytest.fixture
def empty_db_url(tmp_path: Path) -> str:
    """URL of an SQLite database without the sample tables."""
    return f"sqlite+aiosqlite:///{tmp_path / 'empty.db'}"


@pytest.fixture
def unreachable_db_url(tmp_path: Path) -> str:
    """URL whose database file can never be opened."""
    return f"sqlite+aiosqlite:///{tmp_path / 'missing-dir' / 'nixvm.db'}"


@pytest.fixture
async def db_session(sample_db_url: str) -> AsyncGenerator[AsyncSession, None]:
    """Provide a raw async session for repository tests."""
    engine = create_async_engine(sample_db_url, echo=False)
    async with async_sessionmaker(engine, class_=AsyncSession)() as session:
        yield session
    await engine.dispose()


# --- Settings ---


@pytest.fixture
def make_settings(
    monkeypatch: pytest.MonkeyPatch,
) -> Callable[..., Settings]:
    """Build Settings isolated from the host environment and .env file."""
    for name in ("APP_ENV", "DATABASE_URL", "DOCUMENT_ROOT"):
        monkeypatch.delenv(name, raising=False)

    def _make(**overrides: Any) -> Settings:
        overrides.setdefault("document_root", Path(DEV_DOCUMENT_ROOT))
        return Settings(_env_file=None, **overrides)  # type: ignore[call-arg]

    return _make


@pytest.fixture
def facts() -> EnvironmentFacts:
    """Fixed environment facts with recognizable paths."""
    return EnvironmentFacts(
        python_version="3.12.4",
        python_implementation="CPython",
        capabilities=["uvicorn", "anyio", "sqlalchemy", "click", "fastapi"],
        server_software="uvicorn/0.30.1",
        document_root=DEV_DOCUMENT_ROOT,
        interpreter_path=DEV_INTERPRETER,
        timestamp=datetime(2024, 5, 1, 12, 30, 0),
    )


# --- App & client fixtures ---


@pytest.fixture
def client_for() -> Callable[[Settings], AsyncClient]:
    """Create an async test client for an app built from the given settings."""

    def _client(settings: Settings) -> AsyncClient:
        application = create_app(settings)
        transport = ASGITransport(app=application)
        return AsyncClient(transport=transport, base_url="http://test")

    return _client
