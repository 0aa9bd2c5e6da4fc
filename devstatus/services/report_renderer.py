"""HTML rendering of the environment status page."""

from functools import lru_cache
from pathlib import Path

from jinja2 import Environment, FileSystemLoader, Template

from devstatus.core.mode import RuntimeMode
from devstatus.core.settings import ErrorReporting
from devstatus.schemas.status_schema import (
    EnvironmentFacts,
    ProbeFailure,
    ProbeSuccess,
)
from devstatus.services.environment_facts import format_capabilities

TEMPLATE_DIR = Path(__file__).resolve().parent.parent / "templates"
STATUS_TEMPLATE = "status.html"

PLACEHOLDER = "n/a"

DEVELOPER_LINKS: tuple[tuple[str, str], ...] = (
    ("Main site", "http://localhost"),
    ("Alternative", "http://dev.nixvm.localhost"),
    ("phpMyAdmin", "http://localhost:8081"),
)

# Fixed hints for the local docker stack, not real secrets.
CREDENTIAL_HINTS: tuple[tuple[str, str], ...] = (
    ("Host", "db (or localhost:3306)"),
    ("Database", "nixvm_dev / nixvm_sample"),
    ("User", "nixvm_user"),
    ("Password", "nixvm_pass"),
    ("Root Password", "rootpassword"),
)

GETTING_STARTED = """\
# Start the development environment
docker compose up -d

# Or use Nix
nix develop

# Install Python dependencies
pip install -e ".[test]"

# Serve the status page
python -m scripts.run_server
# http://localhost:8000"""


@lru_cache
def _status_template() -> Template:
    env = Environment(
        loader=FileSystemLoader(TEMPLATE_DIR),
        autoescape=True,
        trim_blocks=True,
        lstrip_blocks=True,
    )
    return env.get_template(STATUS_TEMPLATE)


def _short_version(version: str | None) -> str:
    if not version:
        return ""
    return ".".join(version.split(".")[:2])


def render_status_page(
    mode: RuntimeMode,
    facts: EnvironmentFacts,
    probe: ProbeSuccess | ProbeFailure,
    *,
    app_name: str,
    app_version: str,
) -> str:
    """Render the status page for the given mode.

    Development shows every fact, the error reporting toggles, the probe's
    raw failure text and the developer links. Production hides file-system
    paths, toggles and failure detail.
    """
    is_production = mode is RuntimeMode.PRODUCTION
    title = " ".join(
        part
        for part in (
            app_name,
            "Python",
            _short_version(facts.python_version),
            mode.label,
            "Environment",
        )
        if part
    )
    failure_message = (
        probe.public_message(mode) if isinstance(probe, ProbeFailure) else None
    )
    timestamp = (
        facts.timestamp.strftime("%Y-%m-%d %H:%M:%S %Z").rstrip()
        if facts.timestamp
        else PLACEHOLDER
    )
    return _status_template().render(
        title=title,
        mode_label=mode.label,
        is_production=is_production,
        app_version=app_version,
        facts=facts,
        timestamp=timestamp,
        error_reporting=ErrorReporting.for_mode(mode),
        capabilities=format_capabilities(facts.capabilities),
        probe=probe,
        failure_message=failure_message,
        developer_links=DEVELOPER_LINKS,
        credential_hints=CREDENTIAL_HINTS,
        getting_started=GETTING_STARTED,
        placeholder=PLACEHOLDER,
    )
