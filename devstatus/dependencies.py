"""Request-scoped dependencies for the application."""

from fastapi import Depends, Request

from devstatus.core.config import Settings
from devstatus.services.database_probe import DatabaseProbe
from devstatus.services.status_service import StatusService


def get_settings(request: Request) -> Settings:
    """Settings built once in ``create_app`` and stored on app state."""
    return request.app.state.settings


def get_database_probe(
    settings: Settings = Depends(get_settings),
) -> DatabaseProbe:
    """Get a DatabaseProbe for the configured database and mode."""
    return DatabaseProbe(config=settings.database, mode=settings.mode)


def get_status_service(
    settings: Settings = Depends(get_settings),
    probe: DatabaseProbe = Depends(get_database_probe),
) -> StatusService:
    """Get StatusService with all dependencies."""
    return StatusService(app_config=settings.app, probe=probe)
