"""Helpers for interacting with GitHub's REST API."""

from __future__ import annotations

import json
import logging
from typing import Any

import requests

from .models import (
    DEFAULT_TIMEOUT,
    GITHUB_API_BASE_URL,
    Contributor,
    GitHubAPIError,
    GitHubNetworkError,
    GitHubRateLimitError,
    RateLimitStatus,
    org_repos_url,
    rate_limit_url,
)

logger = logging.getLogger(__name__)


class RestAPI:
    """Unauthenticated wrapper around the GitHub REST endpoints the viewer reads."""

    def __init__(self, base_url: str = GITHUB_API_BASE_URL, timeout: float = DEFAULT_TIMEOUT) -> None:
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout

    @property
    def _headers(self) -> dict[str, str]:
        return {"Accept": "application/vnd.github.v3+json"}

    def _raise_for_status(self, url: str, response: requests.Response) -> None:
        if response.status_code == 200:
            return
        remaining = response.headers.get("X-RateLimit-Remaining")
        if response.status_code in (403, 429) and remaining == "0":
            reset = response.headers.get("X-RateLimit-Reset", "unknown")
            raise GitHubRateLimitError(
                f"GitHub API rate limit exceeded (resets at {reset})",
                status_code=response.status_code,
            )
        raise GitHubAPIError(
            f"GitHub REST API request to {url} failed with status {response.status_code}: {response.text}",
            status_code=response.status_code,
        )

    def fetch(self, url: str) -> str:
        """GET *url* and return the response body.

        Only a 200 response counts as success. There is no retry: every
        failure is raised to the caller.

        Raises:
            GitHubNetworkError: The request could not be completed.
            GitHubRateLimitError: The quota is exhausted.
            GitHubAPIError: Any other non-200 status.
        """
        logger.debug("GET %s", url)
        try:
            response = requests.get(url, headers=self._headers, timeout=self.timeout)
        except requests.exceptions.Timeout as exc:
            raise GitHubNetworkError(f"Request timeout while fetching {url}: {exc}") from exc
        except requests.exceptions.RequestException as exc:
            raise GitHubNetworkError(f"Network error while fetching {url}: {exc}") from exc

        self._raise_for_status(url, response)
        return response.text

    def fetch_json(self, url: str) -> Any:
        """GET *url* and decode the body as JSON.

        Raises:
            GitHubAPIError: As raised by ``fetch``.
            ValueError: The body is not valid JSON.
        """
        return json.loads(self.fetch(url))

    def org_repos_url(self, org: str) -> str:
        return org_repos_url(org, self.base_url)

    def get_org_repositories(self, org: str) -> str:
        """Return the raw JSON array of repositories for *org* (first page only)."""
        return self.fetch(self.org_repos_url(org))

    def get_contributors(self, contributors_url: str) -> list[Contributor]:
        """Fetch and parse the contributors listed at *contributors_url*.

        Args:
            contributors_url: The repository's ``contributors_url`` field

        Returns:
            Contributors in API order
        """
        return Contributor.list_from_json(self.fetch(contributors_url))

    def get_rate_limit(self) -> RateLimitStatus:
        """Return the core quota reported by ``/rate_limit``."""
        return RateLimitStatus.from_api(self.fetch_json(rate_limit_url(self.base_url)))
