"""Database connection configuration."""

from typing import Any

from pydantic import BaseModel, SecretStr
from sqlalchemy.engine import URL, make_url


class DatabaseConfig(BaseModel, frozen=True):
    """Database connection settings used by the diagnostic probe."""

    host: str
    port: int
    name: str
    user: str
    password: SecretStr
    url_override: SecretStr | None = None
    connect_timeout: int = 5
    recent_posts_limit: int = 5

    @property
    def async_url(self) -> str:
        """Async DB URL, with charset for MySQL."""
        if self.url_override is not None:
            base = self.url_override.get_secret_value()
            if base.startswith("mysql") and "?" not in base:
                return f"{base}?charset=utf8mb4"
            return base
        url = URL.create(
            "mysql+aiomysql",
            username=self.user,
            password=self.password.get_secret_value(),
            host=self.host,
            port=self.port,
            database=self.name,
            query={"charset": "utf8mb4"},
        )
        return url.render_as_string(hide_password=False)

    @property
    def connect_args(self) -> dict[str, Any]:
        """Driver keyword arguments; bounds the connect attempt for MySQL."""
        if make_url(self.async_url).get_backend_name() == "mysql":
            return {"connect_timeout": self.connect_timeout}
        return {}
