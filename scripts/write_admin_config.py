"""Write config.inc.php for the phpMyAdmin container.

Usage:
    python -m scripts.write_admin_config --output docker/phpmyadmin/config.inc.php
"""

import argparse
from pathlib import Path

from devstatus.core.config import Settings
from devstatus.services.admin_tool import render_config_inc_php


def main() -> None:
    parser = argparse.ArgumentParser(description="Generate phpMyAdmin config")
    parser.add_argument(
        "--output",
        type=Path,
        default=Path("docker/phpmyadmin/config.inc.php"),
        help="Destination file",
    )
    args = parser.parse_args()

    settings = Settings()
    args.output.parent.mkdir(parents=True, exist_ok=True)
    args.output.write_text(render_config_inc_php(settings.admin_tool), encoding="utf-8")
    print(f"Generated {args.output} (server {settings.admin_tool.host}:{settings.admin_tool.port})")


if __name__ == "__main__":
    main()
