"""Render the environment status page without a web server.

Usage:
    python -m scripts.render_status --output status.html

Always exits 0; a failing database probe is rendered into the page.
"""

import argparse
import asyncio
from pathlib import Path

from devstatus.core.config import Settings
from devstatus.core.logging import configure_logging
from devstatus.services.database_probe import DatabaseProbe
from devstatus.services.status_service import StatusService


async def render(settings: Settings) -> str:
    """Render the page for the given settings."""
    probe = DatabaseProbe(config=settings.database, mode=settings.mode)
    return await StatusService(app_config=settings.app, probe=probe).render_page()


def main() -> None:
    parser = argparse.ArgumentParser(description="Render the status page")
    parser.add_argument("--output", type=Path, help="Write HTML here instead of stdout")
    args = parser.parse_args()

    settings = Settings()
    configure_logging(settings.app)
    page = asyncio.run(render(settings))
    if args.output:
        args.output.write_text(page, encoding="utf-8")
        print(f"Wrote {args.output} ({settings.mode.label} mode)")
    else:
        print(page)


if __name__ == "__main__":
    main()
