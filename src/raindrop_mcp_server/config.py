"""Process configuration for the Raindrop MCP Server."""

import os
from typing import Optional

from pydantic import BaseModel, Field

from raindrop_mcp_server.errors import ConfigurationError

DEFAULT_API_BASE = "https://api.raindrop.io/rest/v1"


class Settings(BaseModel):
    """Settings resolved once at startup and shared by every tool call."""

    raindrop_token: Optional[str] = Field(
        None, description="Raindrop.io API token sent as a bearer token"
    )
    api_base_url: str = Field(
        default=DEFAULT_API_BASE, description="Base URL of the Raindrop REST API"
    )
    timeout: float = Field(
        default=30.0, gt=0, description="Seconds to wait for a Raindrop response"
    )
    log_level: str = Field(default="WARNING", description="Logging level name")

    @classmethod
    def from_env(cls) -> "Settings":
        """Build settings from RAINDROP_* environment variables."""
        return cls(
            raindrop_token=os.getenv("RAINDROP_TOKEN") or None,
            api_base_url=os.getenv("RAINDROP_API_BASE", DEFAULT_API_BASE),
            timeout=float(os.getenv("RAINDROP_TIMEOUT", "30")),
            log_level=os.getenv("RAINDROP_LOG_LEVEL", "WARNING").upper(),
        )

    def require_token(self) -> str:
        """Return the API token, or raise if it was never configured."""
        if not self.raindrop_token:
            raise ConfigurationError("RAINDROP_TOKEN is not set")
        return self.raindrop_token
