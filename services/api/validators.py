"""Input validation functions for API endpoints."""

from __future__ import annotations

import re


def validate_org_name(org: str) -> str:
    """Validate a GitHub organization login.

    Args:
        org: Organization login to validate

    Returns:
        Validated organization login

    Raises:
        ValueError: If the login format is invalid
    """
    if not org:
        raise ValueError("Organization name cannot be empty")

    # Alphanumeric and single hyphens, not starting or ending with a hyphen
    pattern = r"^[a-zA-Z0-9](?:[a-zA-Z0-9]|-(?=[a-zA-Z0-9]))*$"
    if not re.match(pattern, org):
        raise ValueError(f"Invalid organization name: {org}")

    if len(org) > 39:
        raise ValueError(f"Organization name too long: {org}. Must be <= 39 characters")

    return org


def validate_repo_id(repo_id: str) -> str:
    """Validate a repository identifier.

    Args:
        repo_id: Repository id to validate

    Returns:
        The id with surrounding whitespace removed

    Raises:
        ValueError: If repo_id is not a positive integer
    """
    repo_id = repo_id.strip()
    if not repo_id.isdigit() or int(repo_id) <= 0:
        raise ValueError(f"repo_id must be a positive integer, got: {repo_id!r}")
    return repo_id
