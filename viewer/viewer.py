"""Fetch, parse and render flow for an organization's repositories."""

from __future__ import annotations

import itertools
import logging
from datetime import datetime, tzinfo

from integrations.github.github import RestAPI
from integrations.github.models import DEFAULT_ORG, Contributor, RateLimitStatus

from .formatting import detail_fields, format_reset_time
from .presenters import PresentationPort
from .store import RepositoryStore

logger = logging.getLogger(__name__)


class OrgViewer:
    """Drives a presenter from the GitHub REST API.

    The repository store is owned by the viewer and replaced by a single
    assignment after each organization fetch. GitHub errors raised by the
    client propagate to the caller.
    """

    def __init__(
        self,
        client: RestAPI,
        presenter: PresentationPort,
        org: str = DEFAULT_ORG,
        tz: tzinfo | None = None,
    ) -> None:
        self.client = client
        self.presenter = presenter
        self.org = org
        self.tz = tz
        self.store = RepositoryStore()
        self._generations = itertools.count(1)
        self._current_generation = 0

    def start(self) -> RepositoryStore:
        """Report the quota, then fetch and render the repository list."""
        self.report_rate_limit()
        return self.on_repositories_fetched(self.client.get_org_repositories(self.org))

    def report_rate_limit(self) -> RateLimitStatus:
        status = self.client.get_rate_limit()
        logger.info("rate-limit, remaining: %s", status.remaining)
        logger.info("rate-limit resets at: %s", datetime.fromtimestamp(status.reset, self.tz))
        self.presenter.set_rate_limit(status, format_reset_time(status.reset, self.tz))
        return status

    def on_repositories_fetched(self, raw_json: str) -> RepositoryStore:
        """Replace the store from a ``/orgs/<org>/repos`` body and render the list.

        The presenter's option list is only published here, so a presenter
        is expected to receive it once per organization fetch.
        """
        store = RepositoryStore.from_json(raw_json)
        self.store = store
        logger.info("Received and parsed %d repositories from server.", len(store))
        self.presenter.set_repository_options(store.options(), self.select)
        self.report_rate_limit()
        return store

    def select(self, repository_id: str) -> list[Contributor] | None:
        """Selection-change handler: show the detail, then load contributors."""
        self.show_repository(repository_id)
        return self.load_contributors(repository_id)

    def show_repository(self, repository_id: str) -> None:
        self.presenter.set_detail(detail_fields(self.store.get(str(repository_id))))

    def load_contributors(self, repository_id: str) -> list[Contributor] | None:
        """Fetch and render the contributors of *repository_id*.

        Returns the rendered contributors, or None when a newer selection
        superseded this one before the response arrived.
        """
        generation = next(self._generations)
        self._current_generation = generation

        repository = self.store.get(str(repository_id))
        if repository is None or not repository.contributors_url:
            logger.warning("No contributors URL for repository %s", repository_id)
            self.presenter.set_contributors([])
            return []

        raw_json = self.client.fetch(repository.contributors_url)
        return self.on_contributors_fetched(raw_json, generation)

    def on_contributors_fetched(self, raw_json: str, generation: int | None = None) -> list[Contributor] | None:
        contributors = Contributor.list_from_json(raw_json)
        rendered: list[Contributor] | None = contributors
        if generation is not None and generation != self._current_generation:
            logger.debug("Dropping contributors of superseded selection %d", generation)
            rendered = None
        else:
            self.presenter.set_contributors(contributors)
        # the contributors request consumed quota either way
        self.report_rate_limit()
        return rendered
