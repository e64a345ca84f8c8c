"""Shared configuration objects and the CLI colour palette."""

from __future__ import annotations

import os
from dataclasses import dataclass

from colorama import Fore, Style

from integrations.github.models import DEFAULT_ORG, DEFAULT_TIMEOUT, GITHUB_API_BASE_URL


class Colors:
    """Color and styling utilities for terminal output."""

    HEADER = Fore.CYAN + Style.BRIGHT
    SUCCESS = Fore.GREEN + Style.BRIGHT
    WARNING = Fore.YELLOW + Style.BRIGHT
    ERROR = Fore.RED + Style.BRIGHT
    INFO = Fore.BLUE + Style.BRIGHT
    PROGRESS = Fore.CYAN
    REPO_NAME = Fore.MAGENTA + Style.BRIGHT
    FORKS = Fore.YELLOW + Style.BRIGHT
    LOGIN = Fore.GREEN
    URL = Fore.BLUE + Style.DIM
    DESCRIPTION = Fore.WHITE + Style.DIM
    RESET = Style.RESET_ALL


@dataclass
class ViewerConfig:
    """Configuration for a viewer session."""

    org: str = DEFAULT_ORG
    api_url: str = GITHUB_API_BASE_URL
    timeout: float = DEFAULT_TIMEOUT
    repo_id: str | None = None
    interactive: bool = False
    verbose: bool = False

    @classmethod
    def from_env(cls) -> ViewerConfig:
        """Create configuration from environment variables."""
        return cls(
            org=os.getenv("GITHUB_ORG", DEFAULT_ORG),
            api_url=os.getenv("GITHUB_API_URL", GITHUB_API_BASE_URL),
            timeout=float(os.getenv("GITHUB_TIMEOUT", str(DEFAULT_TIMEOUT))),
        )
