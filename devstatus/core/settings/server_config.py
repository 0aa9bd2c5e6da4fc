"""Server configuration."""

from pydantic import BaseModel


class ServerConfig(BaseModel, frozen=True):
    """Uvicorn bind settings."""

    host: str
    port: int
    reload: bool = False

    @property
    def base_url(self) -> str:
        """Local URL the status page is served on."""
        host = "localhost" if self.host in ("0.0.0.0", "") else self.host
        return f"http://{host}:{self.port}"
