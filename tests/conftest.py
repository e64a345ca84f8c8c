"""Pytest configuration and shared fixtures for repoviewer tests."""

from __future__ import annotations

import json
import os
import sys
from unittest.mock import MagicMock

import pytest

# Add the project root to the path
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from integrations.github.models import RateLimitStatus  # noqa: E402
from viewer.presenters import PresentationPort  # noqa: E402


class RecordingPresenter(PresentationPort):
    """Presenter that keeps the last value written to every region."""

    def __init__(self):
        self.options = None
        self.on_select = None
        self.detail = None
        self.contributors = None
        self.rate_limit = None
        self.calls = []

    def set_repository_options(self, options, on_select):
        self.options = list(options)
        self.on_select = on_select
        self.calls.append("options")

    def set_detail(self, fields):
        self.detail = list(fields)
        self.calls.append("detail")

    def set_contributors(self, contributors):
        self.contributors = list(contributors)
        self.calls.append("contributors")

    def set_rate_limit(self, status, reset_time):
        self.rate_limit = (status, reset_time)
        self.calls.append("rate_limit")


@pytest.fixture
def sample_repositories():
    """Repository objects as returned by /orgs/<org>/repos."""
    return [
        {
            "id": 42,
            "name": "Alpha",
            "description": "Desc",
            "forks": 3,
            "updated_at": "2020-01-01T00:00:00Z",
            "contributors_url": "https://api.github.com/repos/HackYourFuture/Alpha/contributors",
        },
        {
            "id": 7,
            "name": "Beta",
            "description": None,
            "forks": 0,
            "updated_at": "2021-06-15T12:30:00Z",
            "contributors_url": "https://api.github.com/repos/HackYourFuture/Beta/contributors",
        },
        {
            "id": 1001,
            "name": "Gamma",
            "description": "Third repository",
            "forks": 12,
            "updated_at": "2022-03-09T08:05:00Z",
            "contributors_url": "https://api.github.com/repos/HackYourFuture/Gamma/contributors",
        },
    ]


@pytest.fixture
def sample_repositories_json(sample_repositories):
    return json.dumps(sample_repositories)


@pytest.fixture
def sample_contributors():
    return [
        {"login": "bob", "avatar_url": "u", "contributions": 7},
        {"login": "alice", "avatar_url": "https://avatars.example/alice", "contributions": 31},
    ]


@pytest.fixture
def sample_rate_limit():
    return {"rate": {"remaining": 58, "reset": 1700000000, "limit": 60}}


@pytest.fixture
def mock_client(sample_repositories_json, sample_contributors, sample_rate_limit):
    """A RestAPI stand-in serving the sample payloads."""
    client = MagicMock()
    client.get_org_repositories.return_value = sample_repositories_json
    client.fetch.return_value = json.dumps(sample_contributors)
    client.get_rate_limit.return_value = RateLimitStatus.from_api(sample_rate_limit)
    return client


@pytest.fixture
def presenter():
    return RecordingPresenter()


@pytest.fixture
def mock_colors():
    """Create a mock Colors class for testing."""
    mock = MagicMock()
    mock.HEADER = ""
    mock.SUCCESS = ""
    mock.WARNING = ""
    mock.ERROR = ""
    mock.INFO = ""
    mock.PROGRESS = ""
    mock.REPO_NAME = ""
    mock.FORKS = ""
    mock.LOGIN = ""
    mock.URL = ""
    mock.DESCRIPTION = ""
    mock.RESET = ""
    return mock
