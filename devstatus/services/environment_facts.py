"""Introspection of the running environment."""

import platform
import re
import sys
from collections.abc import Iterable
from datetime import datetime
from importlib import metadata

from devstatus.core.settings import AppConfig
from devstatus.schemas.status_schema import CapabilityEntry, EnvironmentFacts

# Packages the stack needs; highlighted on the status page.
KEY_CAPABILITIES: frozenset[str] = frozenset(
    {
        "aiomysql",
        "fastapi",
        "jinja2",
        "pydantic",
        "pydantic-settings",
        "pymysql",
        "sqlalchemy",
        "structlog",
        "uvicorn",
    }
)

SERVER_PACKAGE = "uvicorn"


def canonical_name(name: str) -> str:
    """Normalize a distribution name (PEP 503)."""
    return re.sub(r"[-_.]+", "-", name).lower()


def installed_capabilities() -> list[str]:
    """Canonical names of every installed distribution."""
    names = {
        canonical_name(dist.metadata["Name"])
        for dist in metadata.distributions()
        if dist.metadata["Name"]
    }
    return sorted(names)


def format_capabilities(
    names: Iterable[str], key_names: frozenset[str] = KEY_CAPABILITIES
) -> list[CapabilityEntry]:
    """Sort capabilities and flag the ones in the key allow-list."""
    return [
        CapabilityEntry(name=name, emphasized=name in key_names)
        for name in sorted(set(names))
    ]


def server_software() -> str | None:
    try:
        return f"{SERVER_PACKAGE}/{metadata.version(SERVER_PACKAGE)}"
    except metadata.PackageNotFoundError:
        return None


def collect_environment_facts(
    app_config: AppConfig, now: datetime | None = None
) -> EnvironmentFacts:
    """Gather the facts shown on the status page.

    Everything is collected regardless of mode; the renderer decides what
    to disclose.
    """
    return EnvironmentFacts(
        python_version=platform.python_version(),
        python_implementation=platform.python_implementation(),
        capabilities=installed_capabilities(),
        server_software=server_software(),
        document_root=str(app_config.document_root),
        interpreter_path=sys.executable or None,
        timestamp=now or datetime.now().astimezone(),
    )
