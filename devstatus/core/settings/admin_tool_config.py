"""phpMyAdmin server block configuration."""

from pydantic import BaseModel, SecretStr


class AdminToolConfig(BaseModel, frozen=True):
    """Server values handed to the database admin tool."""

    host: str
    port: str
    user: str
    password: SecretStr
