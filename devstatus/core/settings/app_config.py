"""Application environment configuration."""

from pathlib import Path

from pydantic import BaseModel

from devstatus.core.mode import RuntimeMode, resolve_mode


class ErrorReporting(BaseModel, frozen=True):
    """Error visibility toggles derived from the runtime mode."""

    debug: bool
    show_tracebacks: bool
    log_level: str

    @classmethod
    def for_mode(cls, mode: RuntimeMode) -> "ErrorReporting":
        if mode is RuntimeMode.PRODUCTION:
            return cls(debug=False, show_tracebacks=False, log_level="WARNING")
        return cls(debug=True, show_tracebacks=True, log_level="DEBUG")


class AppConfig(BaseModel, frozen=True):
    """Application environment settings."""

    name: str
    env: str
    version: str
    document_root: Path

    @property
    def mode(self) -> RuntimeMode:
        """Runtime mode resolved from the raw environment signal."""
        return resolve_mode(self.env)

    @property
    def is_development(self) -> bool:
        """Check if running in development mode."""
        return self.mode is RuntimeMode.DEVELOPMENT

    @property
    def is_production(self) -> bool:
        """Check if running in production mode."""
        return self.mode is RuntimeMode.PRODUCTION

    @property
    def error_reporting(self) -> ErrorReporting:
        """Error visibility for the current mode."""
        return ErrorReporting.for_mode(self.mode)
