"""FastAPI service exposing the repository viewer over HTTP."""

from __future__ import annotations

import logging

from fastapi import FastAPI, HTTPException, status
from fastapi.responses import HTMLResponse
from pydantic import BaseModel

from integrations.github.github import RestAPI
from integrations.github.models import GitHubAPIError, GitHubRateLimitError, Repository
from viewer import HtmlPresenter, OrgViewer, RepositoryStore
from viewer.formatting import format_reset_time

from .config import APIConfig
from .validators import validate_org_name, validate_repo_id

logger = logging.getLogger(__name__)


class RepositoryResponse(BaseModel):
    """A repository of the configured organization."""

    id: int
    name: str | None = None
    description: str | None = None
    forks: int | None = None
    updated_at: str | None = None
    contributors_url: str | None = None


class ContributorResponse(BaseModel):
    """A contributor of a repository."""

    login: str | None = None
    avatar_url: str | None = None
    contributions: int | None = None


class RateLimitResponse(BaseModel):
    """Remaining quota and its reset time."""

    remaining: int
    reset: int
    limit: int
    resets_at: str


app = FastAPI(title="Repoviewer API", version="1.0.0")


# Global state, set by init_api
api_config: APIConfig | None = None
github_client: RestAPI | None = None


def init_api(config: APIConfig) -> None:
    """Initialize the API with configuration.

    Args:
        config: API configuration

    Raises:
        ValueError: If the configured organization name is invalid
    """
    global api_config, github_client  # noqa: PLW0603

    validate_org_name(config.org)
    api_config = config
    github_client = RestAPI(base_url=config.github_api_url, timeout=config.request_timeout)


def _require_client() -> tuple[APIConfig, RestAPI]:
    if not api_config or not github_client:
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="API not initialized",
        )
    return api_config, github_client


def _github_error(exc: GitHubAPIError) -> HTTPException:
    if isinstance(exc, GitHubRateLimitError):
        return HTTPException(status_code=status.HTTP_429_TOO_MANY_REQUESTS, detail=str(exc))
    return HTTPException(status_code=status.HTTP_502_BAD_GATEWAY, detail=str(exc))


def _checked_repo_id(repo_id: str) -> str:
    try:
        return validate_repo_id(repo_id)
    except ValueError as exc:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(exc)) from exc


def _load_store() -> tuple[RestAPI, RepositoryStore]:
    config, client = _require_client()
    try:
        return client, RepositoryStore.from_json(client.get_org_repositories(config.org))
    except GitHubAPIError as exc:
        raise _github_error(exc) from exc


def _lookup(store: RepositoryStore, repo_id: str) -> Repository:
    repository = store.get(repo_id)
    if repository is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"Repository {repo_id} not found",
        )
    return repository


@app.get("/", response_class=HTMLResponse)
def index(repo: str | None = None) -> HTMLResponse:
    """Render the viewer page, optionally with a selected repository.

    Args:
        repo: Repository id selected in the page's select control
    """
    config, client = _require_client()
    selected = _checked_repo_id(repo) if repo else None

    presenter = HtmlPresenter(selected=selected)
    viewer = OrgViewer(client, presenter, org=config.org)
    try:
        viewer.start()
    except GitHubAPIError as exc:
        raise _github_error(exc) from exc

    # the list is already rendered, so a failed selection only loses its contributors
    if selected and presenter.on_select:
        try:
            presenter.on_select(selected)
        except GitHubAPIError as exc:
            logger.warning("Selection of repository %s failed: %s", selected, exc)
            presenter.set_error(str(exc))

    return HTMLResponse(presenter.render_page(f"{config.org} repositories"))


@app.get("/api/v1/repositories", response_model=list[RepositoryResponse])
def list_repositories() -> list[RepositoryResponse]:
    """List the repositories of the configured organization, in API order."""
    _, store = _load_store()
    return [RepositoryResponse(**repo.to_dict()) for repo in store.values()]


@app.get("/api/v1/repositories/{repo_id}", response_model=RepositoryResponse)
def get_repository(repo_id: str) -> RepositoryResponse:
    repo_id = _checked_repo_id(repo_id)
    _, store = _load_store()
    return RepositoryResponse(**_lookup(store, repo_id).to_dict())


@app.get("/api/v1/repositories/{repo_id}/contributors", response_model=list[ContributorResponse])
def get_repository_contributors(repo_id: str) -> list[ContributorResponse]:
    """List the contributors of a repository (first page only).

    Args:
        repo_id: Repository id

    Returns:
        Contributors in API order
    """
    repo_id = _checked_repo_id(repo_id)
    client, store = _load_store()
    repository = _lookup(store, repo_id)
    if not repository.contributors_url:
        return []
    try:
        contributors = client.get_contributors(repository.contributors_url)
    except GitHubAPIError as exc:
        raise _github_error(exc) from exc
    return [ContributorResponse(**contributor.to_dict()) for contributor in contributors]


@app.get("/api/v1/rate-limit", response_model=RateLimitResponse)
def get_rate_limit() -> RateLimitResponse:
    _, client = _require_client()
    try:
        rate = client.get_rate_limit()
    except GitHubAPIError as exc:
        raise _github_error(exc) from exc
    return RateLimitResponse(
        remaining=rate.remaining,
        reset=rate.reset,
        limit=rate.limit,
        resets_at=format_reset_time(rate.reset),
    )


if __name__ == "__main__":
    import uvicorn

    config = APIConfig.from_env()
    init_api(config)

    uvicorn.run(app, host=config.api_host, port=config.api_port)
