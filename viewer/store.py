"""In-memory store of the repositories fetched for an organization."""

from __future__ import annotations

import json
from collections.abc import Iterable, Iterator, Mapping
from typing import Any

from integrations.github.models import Repository


class RepositoryStore(Mapping[str, Repository]):
    """Read-only mapping from repository id (as a string) to Repository.

    Iteration follows the order of the API response. A store is never
    updated in place; a new organization fetch builds a new store.
    """

    def __init__(self, repositories: Iterable[Repository] = ()) -> None:
        self._repositories: dict[str, Repository] = {repo.key: repo for repo in repositories}

    @classmethod
    def from_api(cls, items: Iterable[dict[str, Any]]) -> RepositoryStore:
        return cls(Repository.from_api(item) for item in items)

    @classmethod
    def from_json(cls, raw_json: str) -> RepositoryStore:
        """Parse the ``/orgs/<org>/repos`` body into a store.

        Raises:
            ValueError: *raw_json* is not valid JSON.
            KeyError: An entry has no ``id``.
        """
        return cls.from_api(json.loads(raw_json))

    def __getitem__(self, repository_id: str) -> Repository:
        return self._repositories[str(repository_id)]

    def __iter__(self) -> Iterator[str]:
        return iter(self._repositories)

    def __len__(self) -> int:
        return len(self._repositories)

    def __contains__(self, repository_id: object) -> bool:
        return str(repository_id) in self._repositories

    def __repr__(self) -> str:
        return f"RepositoryStore({len(self)} repositories)"

    def options(self) -> list[tuple[str, str]]:
        """Return ``(value, label)`` pairs for a selection control, in store order."""
        return [(key, "" if repo.name is None else str(repo.name)) for key, repo in self._repositories.items()]
