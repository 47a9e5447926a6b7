"""Shared settings loaded from environment / .env file."""

from __future__ import annotations

from enum import StrEnum

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class CheckPolicy(StrEnum):
    """When the directive checker runs relative to brace well-formedness."""

    TOLERANT = "tolerant"  # always check, even over broken brace structure
    GATED = "gated"  # check only when every brace is matched


class Settings(BaseSettings):
    """Configuration for the templint CLI, REST API and MCP server.

    Values are read from ``TEMPLINT_``-prefixed environment variables and
    from a ``.env`` file in the working directory.
    """

    model_config = SettingsConfigDict(
        env_prefix="TEMPLINT_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Shared
    log_level: str = "INFO"

    # Analysis
    context_padding: int = Field(default=35, ge=0)
    check_policy: CheckPolicy = CheckPolicy.TOLERANT

    # Document discovery
    extensions: list[str] = Field(default_factory=lambda: [".rtf"])
    recursive: bool = False
    encoding: str = "utf-8"
    extract_rich_text: bool = True
    workers: int = Field(default=1, ge=1)

    # REST API
    api_server_host: str = "localhost"
    api_server_port: int = 8000

    # MCP
    mcp_transport: str = "stdio"  # stdio | http | sse
    mcp_server_host: str = "localhost"
    mcp_server_port: int = 9000
