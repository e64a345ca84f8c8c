"""
Models and constants for the GitHub integration.

This module contains exception classes, constants, and the data types
parsed from GitHub REST API responses.
"""

from __future__ import annotations

import json
from dataclasses import dataclass
from typing import Any

# =============================================================================
# Constants
# =============================================================================

GITHUB_API_BASE_URL = "https://api.github.com"
GITHUB_ORG_REPOS_PATH = "/orgs/{org}/repos"
GITHUB_RATE_LIMIT_PATH = "/rate_limit"

DEFAULT_ORG = "HackYourFuture"

# Timeouts (seconds)
DEFAULT_TIMEOUT = 30

# Placeholder rendered for fields of an unknown repository
PLACEHOLDER = "N/A"


def org_repos_url(org: str, base_url: str = GITHUB_API_BASE_URL) -> str:
    """Return the repository listing URL for *org*."""
    return base_url.rstrip("/") + GITHUB_ORG_REPOS_PATH.format(org=org)


def rate_limit_url(base_url: str = GITHUB_API_BASE_URL) -> str:
    """Return the rate-limit status URL for *base_url*."""
    return base_url.rstrip("/") + GITHUB_RATE_LIMIT_PATH


# =============================================================================
# Exceptions
# =============================================================================


class GitHubAPIError(Exception):
    """Raised when a GitHub API request fails."""

    def __init__(self, message: str, status_code: int | None = None) -> None:
        super().__init__(message)
        self.status_code = status_code


class GitHubNetworkError(GitHubAPIError):
    """Raised when a network error occurs (DNS, connection, timeout)."""


class GitHubRateLimitError(GitHubAPIError):
    """Raised when GitHub API rate limit is exceeded."""


# =============================================================================
# Response types
# =============================================================================


@dataclass(frozen=True)
class Repository:
    """A repository entry from the organization listing, kept verbatim."""

    id: Any
    name: str | None
    description: str | None
    forks: int | None
    updated_at: str | None
    contributors_url: str | None

    @classmethod
    def from_api(cls, data: dict[str, Any]) -> Repository:
        """Build a Repository from one element of the ``/orgs/<org>/repos`` array.

        Only ``id`` is required; every other field falls back to None.
        """
        return cls(
            id=data["id"],
            name=data.get("name"),
            description=data.get("description"),
            forks=data.get("forks"),
            updated_at=data.get("updated_at"),
            contributors_url=data.get("contributors_url"),
        )

    @property
    def key(self) -> str:
        return str(self.id)

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "name": self.name,
            "description": self.description,
            "forks": self.forks,
            "updated_at": self.updated_at,
            "contributors_url": self.contributors_url,
        }


@dataclass(frozen=True)
class Contributor:
    """A contributor credited on a repository."""

    login: str | None
    avatar_url: str | None
    contributions: int | None

    @classmethod
    def from_api(cls, data: dict[str, Any]) -> Contributor:
        return cls(
            login=data.get("login"),
            avatar_url=data.get("avatar_url"),
            contributions=data.get("contributions"),
        )

    @classmethod
    def list_from_json(cls, raw_json: str) -> list[Contributor]:
        """Parse a ``/repos/<owner>/<repo>/contributors`` body into Contributors."""
        return [cls.from_api(item) for item in json.loads(raw_json)]

    def to_dict(self) -> dict[str, Any]:
        return {
            "login": self.login,
            "avatar_url": self.avatar_url,
            "contributions": self.contributions,
        }


@dataclass(frozen=True)
class RateLimitStatus:
    """Core rate-limit quota as reported by ``/rate_limit``."""

    remaining: int
    reset: int
    limit: int

    @classmethod
    def from_api(cls, data: dict[str, Any]) -> RateLimitStatus:
        rate = data["rate"]
        return cls(
            remaining=int(rate["remaining"]),
            reset=int(rate["reset"]),
            limit=int(rate["limit"]),
        )
