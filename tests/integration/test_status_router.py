"""Integration tests for the status page and health endpoints."""

from collections.abc import Callable

from httpx import AsyncClient

from devstatus.core.config import Settings
from devstatus.schemas.status_schema import GENERIC_FAILURE_MESSAGE
from tests.conftest import DEV_DOCUMENT_ROOT


class TestStatusPage:
    """GET / end-to-end in both modes."""

    async def test_absent_signal_renders_development(
        self,
        make_settings: Callable[..., Settings],
        client_for: Callable[[Settings], AsyncClient],
        sample_db_url: str,
    ) -> None:
        settings = make_settings(database_url=sample_db_url)
        async with client_for(settings) as client:
            resp = await client.get("/")
        assert resp.status_code == 200
        assert resp.headers["content-type"].startswith("text/html")
        assert "Development Environment" in resp.text
        assert 'id="developer-links"' in resp.text
        assert f"Document Root: {DEV_DOCUMENT_ROOT}" in resp.text
        assert "Users in database: 3" in resp.text
        assert "Hello NixVM" in resp.text
        assert "Draft" not in resp.text

    async def test_production_hides_paths_and_links(
        self,
        make_settings: Callable[..., Settings],
        client_for: Callable[[Settings], AsyncClient],
        sample_db_url: str,
    ) -> None:
        settings = make_settings(app_env="production", database_url=sample_db_url)
        async with client_for(settings) as client:
            resp = await client.get("/")
        assert resp.status_code == 200
        assert "Production Environment" in resp.text
        assert DEV_DOCUMENT_ROOT not in resp.text
        assert 'id="developer-links"' not in resp.text
        assert "Database connection verified (details hidden in production)" in resp.text
        assert "Users in database" not in resp.text
        assert "Hello NixVM" not in resp.text

    async def test_post_without_title_still_renders(
        self,
        make_settings: Callable[..., Settings],
        client_for: Callable[[Settings], AsyncClient],
        untitled_post_db_url: str,
    ) -> None:
        settings = make_settings(database_url=untitled_post_db_url)
        async with client_for(settings) as client:
            resp = await client.get("/")
        assert resp.status_code == 200
        assert "Users in database: 1" in resp.text
        assert "(2024-01-01 09:00:00)" in resp.text
        assert "Database Connection Failed" not in resp.text

    async def test_unreachable_database_development(
        self,
        make_settings: Callable[..., Settings],
        client_for: Callable[[Settings], AsyncClient],
        unreachable_db_url: str,
    ) -> None:
        settings = make_settings(database_url=unreachable_db_url)
        async with client_for(settings) as client:
            resp = await client.get("/")
        assert resp.status_code == 200
        assert "Database Connection Failed:" in resp.text
        assert "unable to open database file" in resp.text
        assert resp.text.rstrip().endswith("</html>")

    async def test_unreachable_database_production(
        self,
        make_settings: Callable[..., Settings],
        client_for: Callable[[Settings], AsyncClient],
        unreachable_db_url: str,
    ) -> None:
        settings = make_settings(app_env="production", database_url=unreachable_db_url)
        async with client_for(settings) as client:
            resp = await client.get("/")
        assert resp.status_code == 200
        assert "Database Connection Failed:" in resp.text
        assert GENERIC_FAILURE_MESSAGE in resp.text
        assert "unable to open database file" not in resp.text
        assert resp.text.rstrip().endswith("</html>")


class TestHealthEndpoints:
    """JSON health surface."""

    async def test_health(
        self,
        make_settings: Callable[..., Settings],
        client_for: Callable[[Settings], AsyncClient],
    ) -> None:
        async with client_for(make_settings(app_env="production")) as client:
            resp = await client.get("/health")
        assert resp.status_code == 200
        assert resp.json()["data"] == {"status": "healthy", "environment": "production"}

    async def test_database_health_connected(
        self,
        make_settings: Callable[..., Settings],
        client_for: Callable[[Settings], AsyncClient],
        sample_db_url: str,
    ) -> None:
        settings = make_settings(database_url=sample_db_url)
        async with client_for(settings) as client:
            resp = await client.get("/health/database")
        assert resp.status_code == 200
        assert resp.json()["data"] == {
            "connected": True,
            "environment": "development",
            "user_count": 3,
        }

    async def test_database_health_failure_production(
        self,
        make_settings: Callable[..., Settings],
        client_for: Callable[[Settings], AsyncClient],
        unreachable_db_url: str,
    ) -> None:
        settings = make_settings(app_env="production", database_url=unreachable_db_url)
        async with client_for(settings) as client:
            resp = await client.get("/health/database")
        assert resp.status_code == 503
        assert resp.json() == {
            "status": 503,
            "message": GENERIC_FAILURE_MESSAGE,
            "code": "CONNECTION_OR_QUERY_FAILURE",
        }

    async def test_database_health_failure_development(
        self,
        make_settings: Callable[..., Settings],
        client_for: Callable[[Settings], AsyncClient],
        unreachable_db_url: str,
    ) -> None:
        settings = make_settings(database_url=unreachable_db_url)
        async with client_for(settings) as client:
            resp = await client.get("/health/database")
        assert resp.status_code == 503
        assert "unable to open database file" in resp.json()["message"]
