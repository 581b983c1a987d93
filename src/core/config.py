"""Core configuration.

Why here:
- Centralizes environment variables (pydantic-settings) without leaking into the CLI.
- Lets adapters (MCP session, HTTP probe) read config consistently.

There is no config file: values come from `LEARNCLI_*` environment variables
or fall back to the fixed defaults below.
"""

from __future__ import annotations

from importlib.metadata import PackageNotFoundError, version

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_ENDPOINT_URL = "https://learn.microsoft.com/api/mcp"
DEFAULT_TOOL_NAME = "microsoft_docs_search"
CLIENT_NAME = "learncli"


def _package_version() -> str:
    try:
        return version(CLIENT_NAME)
    except PackageNotFoundError:
        # Running from a source checkout (`python -m main`) without an install.
        return "0+unknown"


CLIENT_VERSION = _package_version()


class AppSettings(BaseSettings):
    """Central application settings.

    Why pydantic-settings:
    - Typed and validated at the edge (env vars) without polluting the Core.
    - One configuration contract shared by the CLI and the adapters.
    """

    model_config = SettingsConfigDict(
        env_prefix="LEARNCLI_",
        extra="ignore",
        case_sensitive=False,
    )

    endpoint_url: str = Field(
        default=DEFAULT_ENDPOINT_URL,
        min_length=8,
        description="MCP endpoint of the remote documentation service.",
    )
    tool_name: str = Field(
        default=DEFAULT_TOOL_NAME,
        min_length=1,
        description="Remote tool invoked for `docs -q` searches.",
    )
    client_name: str = Field(
        default=CLIENT_NAME,
        min_length=1,
        description="Client name sent during the MCP handshake.",
    )
    client_version: str = Field(
        default=CLIENT_VERSION,
        min_length=1,
        description="Client version sent during the MCP handshake.",
    )

    http_timeout_seconds: float = Field(
        default=30.0,
        gt=0,
        description="Timeout for HTTP requests and MCP reads (seconds).",
    )
    user_agent: str = Field(
        default=f"{CLIENT_NAME}/{CLIENT_VERSION}",
        min_length=1,
        description="User-Agent for outbound HTTP requests.",
    )

    probe_endpoint: bool = Field(
        default=False,
        description="Issue a lightweight HTTP probe before opening the MCP session.",
    )
    debug: bool = Field(
        default=False,
        description="Enable verbose step-by-step tracing.",
    )
