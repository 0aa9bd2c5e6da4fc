"""Application configuration using Pydantic Settings V2."""

from functools import cached_property
from pathlib import Path

from pydantic import Field, SecretStr
from pydantic_settings import BaseSettings, SettingsConfigDict

from devstatus.core.mode import RuntimeMode
from devstatus.core.settings import (
    AdminToolConfig,
    AppConfig,
    DatabaseConfig,
    ServerConfig,
)


class Settings(BaseSettings):
    """Application settings loaded from environment variables.

    Flat fields are loaded directly from environment variables; empty
    values count as unset and fall back to the defaults below.
    Domain properties provide grouped access (e.g. settings.database.host).

    A single instance is built at process start and passed explicitly to
    the components that need it.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        env_ignore_empty=True,
        extra="ignore",
    )

    # App
    app_name: str = Field(
        default="NixVM",
        description="Application display name",
    )
    app_env: str = Field(
        default="development",
        description="Runtime mode signal; only 'production' selects production",
    )
    app_version: str = Field(
        default="1.0.0",
        description="Application version",
    )
    document_root: Path = Field(
        default_factory=Path.cwd,
        description="Served document root, shown in development only",
    )

    # Database probe
    db_host: str = Field(
        default="db",
        description="Database host",
    )
    db_port: int = Field(
        default=3306,
        ge=1,
        le=65535,
        description="Database port",
    )
    db_name: str = Field(
        default="nixvm_sample",
        description="Database name",
    )
    db_user: str = Field(
        default="nixvm_user",
        description="Database user",
    )
    db_password: SecretStr = Field(
        default=SecretStr("nixvm_pass"),
        description="Database password",
    )
    database_url: SecretStr | None = Field(
        default=None,
        description="Async database URL overriding the DB_* parts",
    )
    db_connect_timeout: int = Field(
        default=5,
        ge=1,
        le=60,
        description="Probe connect timeout in seconds",
    )
    recent_posts_limit: int = Field(
        default=5,
        ge=1,
        le=50,
        description="Recent posts sampled by the development probe",
    )

    # Admin tool (phpMyAdmin)
    pma_host: str = Field(
        default="db",
        description="phpMyAdmin server host",
    )
    pma_port: str = Field(
        default="3306",
        description="phpMyAdmin server port",
    )
    pma_user: str = Field(
        default="nixvm_user",
        description="phpMyAdmin login user",
    )
    pma_password: SecretStr = Field(
        default=SecretStr("nixvm_pass"),
        description="phpMyAdmin login password",
    )

    # Server
    host: str = Field(
        default="0.0.0.0",
        description="Server host",
    )
    port: int = Field(
        default=8000,
        ge=1,
        le=65535,
        description="Server port",
    )

    # --- Domain properties ---

    @cached_property
    def app(self) -> AppConfig:
        """Application environment configuration."""
        return AppConfig(
            name=self.app_name,
            env=self.app_env,
            version=self.app_version,
            document_root=self.document_root,
        )

    @cached_property
    def database(self) -> DatabaseConfig:
        """Database connection configuration."""
        return DatabaseConfig(
            host=self.db_host,
            port=self.db_port,
            name=self.db_name,
            user=self.db_user,
            password=self.db_password,
            url_override=self.database_url,
            connect_timeout=self.db_connect_timeout,
            recent_posts_limit=self.recent_posts_limit,
        )

    @cached_property
    def admin_tool(self) -> AdminToolConfig:
        """phpMyAdmin server configuration."""
        return AdminToolConfig(
            host=self.pma_host,
            port=self.pma_port,
            user=self.pma_user,
            password=self.pma_password,
        )

    @cached_property
    def server(self) -> ServerConfig:
        """Server configuration."""
        return ServerConfig(
            host=self.host,
            port=self.port,
            reload=self.app.is_development,
        )

    # --- Convenience properties (delegate to domain configs) ---

    @property
    def mode(self) -> RuntimeMode:
        """Resolved runtime mode."""
        return self.app.mode

    @property
    def is_development(self) -> bool:
        """Check if running in development mode."""
        return self.app.is_development
