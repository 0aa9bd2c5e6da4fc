"""structlog configuration."""

import logging

import structlog

from devstatus.core.settings import AppConfig


def configure_logging(app_config: AppConfig) -> None:
    """Configure structlog with the level implied by the runtime mode."""
    level = logging.getLevelName(app_config.error_reporting.log_level)
    renderer = (
        structlog.dev.ConsoleRenderer()
        if app_config.is_development
        else structlog.processors.JSONRenderer()
    )
    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            renderer,
        ],
        wrapper_class=structlog.make_filtering_bound_logger(level),
        cache_logger_on_first_use=False,
    )
