"""Domain-specific configuration models."""

from devstatus.core.settings.admin_tool_config import AdminToolConfig
from devstatus.core.settings.app_config import AppConfig, ErrorReporting
from devstatus.core.settings.database_config import DatabaseConfig
from devstatus.core.settings.server_config import ServerConfig

__all__ = [
    "AdminToolConfig",
    "AppConfig",
    "DatabaseConfig",
    "ErrorReporting",
    "ServerConfig",
]
