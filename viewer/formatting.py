"""Text formatting shared by the presenters."""

from __future__ import annotations

from datetime import datetime, tzinfo
from typing import Any

from integrations.github.models import PLACEHOLDER, Repository


def prepend_zero_if_needed(quantity: int) -> str:
    """Return *quantity* as two digits, e.g. ``5`` -> ``"05"``."""
    return f"0{quantity}" if quantity < 10 else str(quantity)


def format_reset_time(reset: int, tz: tzinfo | None = None) -> str:
    """Format an epoch-seconds reset timestamp as ``HH:MM``.

    With *tz* left as None the local wall-clock time is used.
    """
    moment = datetime.fromtimestamp(reset, tz)
    return f"{prepend_zero_if_needed(moment.hour)}:{prepend_zero_if_needed(moment.minute)}"


def format_field(value: Any) -> str:
    if value is None:
        return PLACEHOLDER
    return str(value)


def detail_fields(repository: Repository | None) -> list[tuple[str, str]]:
    """Return the labelled fields of the detail region.

    An unknown repository yields the same labels with placeholder values.
    """
    if repository is None:
        values: list[Any] = [None, None, None, None]
    else:
        values = [repository.name, repository.description, repository.forks, repository.updated_at]
    labels = ["Repository", "Description", "Forks", "Updated"]
    return [(label, format_field(value)) for label, value in zip(labels, values)]
