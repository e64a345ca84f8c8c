"""Tests for the GitHub REST API client."""

from __future__ import annotations

import json
from unittest.mock import MagicMock, patch

import pytest
import requests

from integrations.github.github import RestAPI
from integrations.github.models import (
    Contributor,
    GitHubAPIError,
    GitHubNetworkError,
    GitHubRateLimitError,
    RateLimitStatus,
)


def make_response(status_code=200, body="", headers=None):
    response = MagicMock()
    response.status_code = status_code
    response.text = body
    response.headers = headers or {}
    return response


class TestRestAPIInit:
    """Tests for RestAPI construction."""

    def test_defaults(self):
        client = RestAPI()
        assert client.base_url == "https://api.github.com"
        assert client.timeout == 30

    def test_custom_base_url_trailing_slash(self):
        client = RestAPI(base_url="http://localhost:9000/")
        assert client.base_url == "http://localhost:9000"

    def test_headers_have_no_authorization(self):
        headers = RestAPI()._headers
        assert headers["Accept"] == "application/vnd.github.v3+json"
        assert "Authorization" not in headers

    def test_org_repos_url(self):
        assert RestAPI().org_repos_url("acme") == "https://api.github.com/orgs/acme/repos"


class TestFetch:
    """Tests for RestAPI.fetch."""

    @patch("integrations.github.github.requests.get")
    def test_fetch_success_returns_body(self, mock_get):
        mock_get.return_value = make_response(200, "[]")

        client = RestAPI(timeout=5)
        assert client.fetch("https://api.github.com/x") == "[]"

        mock_get.assert_called_once_with(
            "https://api.github.com/x",
            headers={"Accept": "application/vnd.github.v3+json"},
            timeout=5,
        )

    @patch("integrations.github.github.requests.get")
    def test_fetch_not_found_raises(self, mock_get):
        mock_get.return_value = make_response(404, '{"message": "Not Found"}')

        with pytest.raises(GitHubAPIError) as exc_info:
            RestAPI().fetch("https://api.github.com/orgs/missing/repos")

        assert exc_info.value.status_code == 404
        assert "404" in str(exc_info.value)
        assert not isinstance(exc_info.value, GitHubRateLimitError)

    @patch("integrations.github.github.requests.get")
    def test_fetch_non_200_success_status_raises(self, mock_get):
        mock_get.return_value = make_response(204, "")

        with pytest.raises(GitHubAPIError) as exc_info:
            RestAPI().fetch("https://api.github.com/x")

        assert exc_info.value.status_code == 204

    @patch("integrations.github.github.requests.get")
    def test_fetch_rate_limited_raises(self, mock_get):
        mock_get.return_value = make_response(
            403,
            '{"message": "API rate limit exceeded"}',
            {"X-RateLimit-Remaining": "0", "X-RateLimit-Reset": "1700000000"},
        )

        with pytest.raises(GitHubRateLimitError) as exc_info:
            RestAPI().fetch("https://api.github.com/x")

        assert exc_info.value.status_code == 403
        assert "1700000000" in str(exc_info.value)

    @patch("integrations.github.github.requests.get")
    def test_fetch_forbidden_with_quota_left_is_not_rate_limit(self, mock_get):
        mock_get.return_value = make_response(403, "Forbidden", {"X-RateLimit-Remaining": "12"})

        with pytest.raises(GitHubAPIError) as exc_info:
            RestAPI().fetch("https://api.github.com/x")

        assert not isinstance(exc_info.value, GitHubRateLimitError)

    @patch("integrations.github.github.requests.get")
    def test_fetch_timeout_raises_network_error(self, mock_get):
        mock_get.side_effect = requests.exceptions.Timeout("Request timed out")

        with pytest.raises(GitHubNetworkError) as exc_info:
            RestAPI().fetch("https://api.github.com/x")

        assert "timeout" in str(exc_info.value).lower()
        assert mock_get.call_count == 1

    @patch("integrations.github.github.requests.get")
    def test_fetch_connection_error_raises_network_error(self, mock_get):
        mock_get.side_effect = requests.exceptions.ConnectionError("DNS failure")

        with pytest.raises(GitHubNetworkError) as exc_info:
            RestAPI().fetch("https://api.github.com/x")

        assert "DNS failure" in str(exc_info.value)
        assert mock_get.call_count == 1


class TestTypedRequests:
    """Tests for the typed helpers built on fetch."""

    @patch("integrations.github.github.requests.get")
    def test_fetch_json(self, mock_get):
        mock_get.return_value = make_response(200, '{"a": 1}')
        assert RestAPI().fetch_json("https://api.github.com/x") == {"a": 1}

    @patch("integrations.github.github.requests.get")
    def test_fetch_json_malformed_raises_value_error(self, mock_get):
        mock_get.return_value = make_response(200, "<html>")
        with pytest.raises(ValueError):
            RestAPI().fetch_json("https://api.github.com/x")

    @patch("integrations.github.github.requests.get")
    def test_get_org_repositories_returns_raw_body(self, mock_get, sample_repositories_json):
        mock_get.return_value = make_response(200, sample_repositories_json)

        body = RestAPI().get_org_repositories("HackYourFuture")

        assert body == sample_repositories_json
        assert mock_get.call_args[0][0] == "https://api.github.com/orgs/HackYourFuture/repos"

    @patch("integrations.github.github.requests.get")
    def test_get_contributors(self, mock_get, sample_contributors):
        mock_get.return_value = make_response(200, json.dumps(sample_contributors))

        contributors = RestAPI().get_contributors("https://api.github.com/repos/o/r/contributors")

        assert contributors == [
            Contributor(login="bob", avatar_url="u", contributions=7),
            Contributor(login="alice", avatar_url="https://avatars.example/alice", contributions=31),
        ]

    @patch("integrations.github.github.requests.get")
    def test_get_rate_limit(self, mock_get, sample_rate_limit):
        mock_get.return_value = make_response(200, json.dumps(sample_rate_limit))

        status = RestAPI(base_url="http://localhost:9000").get_rate_limit()

        assert status == RateLimitStatus(remaining=58, reset=1700000000, limit=60)
        assert mock_get.call_args[0][0] == "http://localhost:9000/rate_limit"
