"""Async database engine for one-shot diagnostic connections."""

from sqlalchemy.ext.asyncio import AsyncEngine, create_async_engine
from sqlalchemy.orm import DeclarativeBase
from sqlalchemy.pool import NullPool

from devstatus.core.settings import DatabaseConfig


class Base(DeclarativeBase):
    """Declarative base for the tables the probe reads."""


def create_probe_engine(config: DatabaseConfig, echo: bool = False) -> AsyncEngine:
    """Create an engine that opens exactly one connection per checkout.

    Connections are never pooled; the caller disposes the engine once the
    probe is done.
    """
    return create_async_engine(
        config.async_url,
        poolclass=NullPool,
        connect_args=config.connect_args,
        echo=echo,
    )
