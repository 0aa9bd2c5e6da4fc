"""Status report and probe result schemas."""

from datetime import datetime
from enum import Enum
from typing import Literal

from pydantic import BaseModel, Field

from devstatus.core.mode import RuntimeMode

GENERIC_FAILURE_MESSAGE = "Connection error (details hidden in production for security)"


class ErrorKind(str, Enum):
    """Failure classes the probe can report."""

    CONNECTION_OR_QUERY_FAILURE = "connection_or_query_failure"


class PostSummary(BaseModel, frozen=True):
    """A sampled post row."""

    title: str
    created_at: str


class ProbeSuccess(BaseModel, frozen=True):
    """The probe connected; details are only filled in development."""

    outcome: Literal["success"] = "success"
    user_count: int | None = None
    recent_posts: list[PostSummary] = Field(default_factory=list)


class ProbeFailure(BaseModel, frozen=True):
    """The probe failed to connect or query."""

    outcome: Literal["failure"] = "failure"
    kind: ErrorKind = ErrorKind.CONNECTION_OR_QUERY_FAILURE
    detail: str

    def public_message(self, mode: RuntimeMode) -> str:
        """Failure text safe to show in the given mode."""
        if mode is RuntimeMode.DEVELOPMENT:
            return self.detail
        return GENERIC_FAILURE_MESSAGE


class CapabilityEntry(BaseModel, frozen=True):
    """One line of the capability list."""

    name: str
    emphasized: bool


class EnvironmentFacts(BaseModel, frozen=True):
    """Introspected runtime facts; ``None`` marks an unavailable fact."""

    python_version: str | None = None
    python_implementation: str | None = None
    capabilities: list[str] = Field(default_factory=list)
    server_software: str | None = None
    document_root: str | None = None
    interpreter_path: str | None = None
    timestamp: datetime | None = None


class DatabaseHealth(BaseModel):
    """JSON body for the database health endpoint."""

    connected: bool
    environment: str
    user_count: int | None = None
