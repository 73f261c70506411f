"""Environment-driven configuration for the LinkedIn client."""

import dataclasses
import os
from dataclasses import dataclass

from dotenv import load_dotenv

DEFAULT_API_HOST = "https://api.linkedin.com"
DEFAULT_API_VERSION = "/v1"


@dataclass(frozen=True, slots=True)
class Settings:
    """Container for runtime configuration."""

    client_id: str | None = None
    client_secret: str | None = None
    access_token: str | None = None
    redirect_uri: str | None = None
    api_host: str = DEFAULT_API_HOST
    api_version: str = DEFAULT_API_VERSION
    api_timeout: float = 30.0
    mcp_sse_port: int = 8000

    @property
    def api_base_url(self) -> str:
        return f"{self.api_host.rstrip('/')}/{self.api_version.strip('/')}"

    @classmethod
    def load(cls) -> "Settings":
        """
        Load configuration from environment variables.

        Python-dotenv is used so developers can rely on a local .env file without
        exporting variables globally.
        """
        load_dotenv()

        api_timeout_raw = os.getenv("API_TIMEOUT", "").strip() or "30"
        try:
            api_timeout = float(api_timeout_raw)
        except ValueError as exc:
            raise ValueError("API_TIMEOUT must be a numeric value.") from exc
        if api_timeout <= 0:
            raise ValueError("API_TIMEOUT must be greater than zero.")

        mcp_sse_port_raw = os.getenv("MCP_SSE_PORT", "").strip() or "8000"
        try:
            mcp_sse_port = int(mcp_sse_port_raw)
        except ValueError as exc:
            raise ValueError("MCP_SSE_PORT must be an integer.") from exc
        if mcp_sse_port <= 0:
            raise ValueError("MCP_SSE_PORT must be greater than zero.")

        return cls(
            client_id=_optional_env("LINKEDIN_CLIENT_ID"),
            client_secret=_optional_env("LINKEDIN_CLIENT_SECRET"),
            access_token=_optional_env("LINKEDIN_ACCESS_TOKEN"),
            redirect_uri=_optional_env("LINKEDIN_REDIRECT_URI"),
            api_host=_optional_env("LINKEDIN_API_HOST") or DEFAULT_API_HOST,
            api_version=_optional_env("LINKEDIN_API_VERSION") or DEFAULT_API_VERSION,
            api_timeout=api_timeout,
            mcp_sse_port=mcp_sse_port,
        )

    def require_access_token(self) -> str:
        if not self.access_token:
            raise ValueError("LINKEDIN_ACCESS_TOKEN is required but was not provided.")
        return self.access_token


def _optional_env(name: str) -> str | None:
    return os.getenv(name, "").strip() or None


_configured: Settings | None = None


def configure(**overrides: object) -> Settings:
    """Set process-wide defaults used when values are not passed explicitly."""
    global _configured
    _configured = dataclasses.replace(current_settings(), **overrides)
    return _configured


def current_settings() -> Settings:
    """Return the configured settings, or plain defaults if none were set."""
    return _configured if _configured is not None else Settings()


def reset_configuration() -> None:
    global _configured
    _configured = None
