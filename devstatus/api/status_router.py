"""Status page and health endpoints."""

from typing import Annotated

from fastapi import APIRouter, Depends
from fastapi.responses import HTMLResponse

from devstatus.core.config import Settings
from devstatus.dependencies import get_settings, get_status_service
from devstatus.schemas.response_schema import ApiResponse, ServiceHealth, success_response
from devstatus.schemas.status_schema import DatabaseHealth
from devstatus.services.status_service import StatusService

router = APIRouter(tags=["status"])

SettingsDep = Annotated[Settings, Depends(get_settings)]
StatusServiceDep = Annotated[StatusService, Depends(get_status_service)]


@router.get("/", response_class=HTMLResponse)
async def status_page(status_service: StatusServiceDep) -> HTMLResponse:
    """Environment status page. Always 200; probe failures are rendered."""
    return HTMLResponse(await status_service.render_page())


@router.get("/health", response_model=ApiResponse[ServiceHealth])
async def health_check(settings: SettingsDep) -> dict:
    """Liveness endpoint."""
    return success_response(ServiceHealth(environment=settings.mode))


@router.get("/health/database", response_model=ApiResponse[DatabaseHealth])
async def database_health(status_service: StatusServiceDep) -> dict:
    """Database reachability; 503 with a mode-gated message on failure."""
    result = await status_service.database_health()
    return success_response(result)
