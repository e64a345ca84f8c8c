"""Configuration management for the API service."""

from __future__ import annotations

import os
from dataclasses import dataclass

from integrations.github.models import DEFAULT_ORG, DEFAULT_TIMEOUT, GITHUB_API_BASE_URL


@dataclass
class APIConfig:
    """Configuration for the API service."""

    # GitHub configuration
    org: str = DEFAULT_ORG
    github_api_url: str = GITHUB_API_BASE_URL
    request_timeout: float = DEFAULT_TIMEOUT

    # API configuration
    api_host: str = "0.0.0.0"
    api_port: int = 8000

    @classmethod
    def from_env(cls) -> APIConfig:
        """Create configuration from environment variables."""
        return cls(
            org=os.getenv("GITHUB_ORG", DEFAULT_ORG),
            github_api_url=os.getenv("GITHUB_API_URL", GITHUB_API_BASE_URL),
            request_timeout=float(os.getenv("GITHUB_TIMEOUT", str(DEFAULT_TIMEOUT))),
            api_host=os.getenv("API_HOST", "0.0.0.0"),
            api_port=int(os.getenv("API_PORT", "8000")),
        )
