"""Status page assembly."""

from collections.abc import Callable

import structlog

from devstatus.core.exceptions import DatabaseUnavailableError
from devstatus.core.settings import AppConfig
from devstatus.schemas.status_schema import (
    DatabaseHealth,
    EnvironmentFacts,
    ProbeFailure,
)
from devstatus.services.database_probe import DatabaseProbe
from devstatus.services.environment_facts import collect_environment_facts
from devstatus.services.report_renderer import render_status_page

logger = structlog.get_logger()

FactsCollector = Callable[[AppConfig], EnvironmentFacts]


class StatusService:
    """Combines environment facts and the database probe into a report."""

    def __init__(
        self,
        app_config: AppConfig,
        probe: DatabaseProbe,
        collect_facts: FactsCollector = collect_environment_facts,
    ) -> None:
        self._app_config = app_config
        self._probe = probe
        self._collect_facts = collect_facts

    async def render_page(self) -> str:
        """Render the full HTML status page; probe failures are rendered."""
        facts = self._collect_facts(self._app_config)
        probe_result = await self._probe.run()
        logger.info(
            "Rendering status page",
            environment=self._app_config.mode.value,
            database=probe_result.outcome,
        )
        return render_status_page(
            self._app_config.mode,
            facts,
            probe_result,
            app_name=self._app_config.name,
            app_version=self._app_config.version,
        )

    async def database_health(self) -> DatabaseHealth:
        """Probe the database for the JSON health endpoint.

        Raises:
            DatabaseUnavailableError: With a mode-gated message on failure.
        """
        mode = self._app_config.mode
        result = await self._probe.run()
        if isinstance(result, ProbeFailure):
            raise DatabaseUnavailableError(message=result.public_message(mode))
        return DatabaseHealth(
            connected=True,
            environment=mode.value,
            user_count=result.user_count,
        )
