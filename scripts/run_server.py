"""Serve the status page with uvicorn.

Usage:
    python -m scripts.run_server
"""

import uvicorn

from devstatus.core.config import Settings


def main() -> None:
    settings = Settings()
    uvicorn.run(
        "devstatus.main:app",
        host=settings.server.host,
        port=settings.server.port,
        reload=settings.server.reload,
        log_level=settings.app.error_reporting.log_level.lower(),
    )


if __name__ == "__main__":
    main()
