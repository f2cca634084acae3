# The module is to define the configuration settings for the application.
# Date: 2026-10-18
# Version: 1.0.0

import sys
from functools import lru_cache
from typing import Literal, Optional

from pydantic import SecretStr, ValidationError, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from gusto_mcp.utils.logger import console


class Settings(BaseSettings):
    """
    The Settings class holds the configuration of the Gusto MCP server.
    Values are read from the process environment and an optional .env file.
    The instance is frozen: it is built once at startup and never mutated.
    Attributes:
        GUSTO_ACCESS_TOKEN (SecretStr): OAuth2 bearer token for the Gusto API.
        GUSTO_API_BASE_URL (str): Base URL every endpoint path is appended to.
        MCP_NAME (str): Short server name, advertised as '<name>-mcp'.
        MCP_VERSION (str): Version advertised to the calling agent.
        HTTP_TIMEOUT (Optional[float]): Upstream timeout in seconds; None keeps the httpx default.
        TRANSPORT (str): 'stdio' for the MCP stream, 'http' for the FastAPI surface.
        HTTP_HOST (str): Bind address for the HTTP transport.
        HTTP_PORT (int): Bind port for the HTTP transport.
        LOG_LEVEL (str): Logging level name for the console logger.
    """
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        frozen=True,
    )

    # GUSTO
    GUSTO_ACCESS_TOKEN: SecretStr
    GUSTO_API_BASE_URL: str = "https://api.gusto.com/v1"

    # SERVER IDENTITY
    MCP_NAME: str = "gusto"
    MCP_VERSION: str = "1.0.0"

    # UPSTREAM HTTP
    HTTP_TIMEOUT: Optional[float] = None

    # TRANSPORT
    TRANSPORT: Literal["stdio", "http"] = "stdio"
    HTTP_HOST: str = "127.0.0.1"
    HTTP_PORT: int = 8000

    LOG_LEVEL: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "INFO"

    @field_validator("GUSTO_ACCESS_TOKEN")
    @classmethod
    def _token_not_blank(cls, value: SecretStr) -> SecretStr:
        # An empty token counts as no token at all.
        if not value.get_secret_value().strip():
            raise ValueError("GUSTO_ACCESS_TOKEN must not be empty")
        return value

    @field_validator("LOG_LEVEL", mode="before")
    @classmethod
    def _normalize_log_level(cls, value):
        return value.upper() if isinstance(value, str) else value


# lru_cache to cache the settings instance.
@lru_cache
def get_settings() -> Settings:
    return Settings()


def load_settings_or_exit() -> Settings:
    """
    Loads the settings at process start. A missing or invalid configuration is
    the only fatal condition of the server: it is reported on stderr and the
    process exits with status 1.
    """
    try:
        return get_settings()
    except ValidationError as e:
        missing = [".".join(str(part) for part in err["loc"]) for err in e.errors()]
        if "GUSTO_ACCESS_TOKEN" in missing:
            console.display_error_panel(
                "Configuration Error",
                "Error: GUSTO_ACCESS_TOKEN environment variable required\n"
                "Obtain an OAuth2 access token from Gusto's developer portal",
            )
        else:
            console.display_error_panel("Configuration Error", f"Error: invalid settings for {', '.join(missing)}")
        sys.exit(1)


if __name__ == "__main__":
    settings = load_settings_or_exit()
    print(settings.model_dump_json(indent=4))
