"""Presentation port and its terminal and HTML implementations."""

from __future__ import annotations

import html
from abc import ABC, abstractmethod
from collections.abc import Callable, Sequence
from typing import Any

from integrations.github.models import Contributor, RateLimitStatus
from models import Colors

from .formatting import format_field

SelectHandler = Callable[[str], Any]


class PresentationPort(ABC):
    """Rendering sink for the viewer.

    Every ``set_*`` call replaces the content of its region.
    """

    @abstractmethod
    def set_repository_options(self, options: Sequence[tuple[str, str]], on_select: SelectHandler) -> None:
        """Publish ``(value, label)`` options and the selection-change handler."""

    @abstractmethod
    def set_detail(self, fields: Sequence[tuple[str, str]]) -> None:
        """Show the labelled fields of the selected repository."""

    @abstractmethod
    def set_contributors(self, contributors: Sequence[Contributor]) -> None:
        """Show the contributors of the selected repository."""

    @abstractmethod
    def set_rate_limit(self, status: RateLimitStatus, reset_time: str) -> None:
        """Show the remaining quota and the ``HH:MM`` reset time."""


class TerminalPresenter(PresentationPort):
    """Writes each region to stdout using the CLI palette."""

    def __init__(self, colors: Any = Colors) -> None:
        self.colors = colors
        self.options: list[tuple[str, str]] = []
        self.on_select: SelectHandler | None = None

    def set_repository_options(self, options: Sequence[tuple[str, str]], on_select: SelectHandler) -> None:
        c = self.colors
        self.options = list(options)
        self.on_select = on_select
        print(f"{c.SUCCESS}📚 REPOSITORIES ({len(self.options)}):{c.RESET}")
        for value, label in self.options:
            print(f"   {c.INFO}{value:>10}{c.RESET}  {c.REPO_NAME}{label}{c.RESET}")
        print()

    def set_detail(self, fields: Sequence[tuple[str, str]]) -> None:
        c = self.colors
        print(f"{c.HEADER}{'─' * 80}{c.RESET}")
        for label, value in fields:
            print(f"    {c.INFO}{label}:{c.RESET} {value}")
        print()

    def set_contributors(self, contributors: Sequence[Contributor]) -> None:
        c = self.colors
        print(f"{c.SUCCESS}👥 CONTRIBUTORS ({len(contributors)}):{c.RESET}")
        for contributor in contributors:
            print(
                f"    {c.LOGIN}{format_field(contributor.login)}{c.RESET} "
                f"{c.FORKS}{format_field(contributor.contributions)}{c.RESET} "
                f"{c.URL}{format_field(contributor.avatar_url)}{c.RESET}"
            )
        print()

    def set_rate_limit(self, status: RateLimitStatus, reset_time: str) -> None:
        c = self.colors
        print(
            f"{c.PROGRESS}⏳ Remaining: {status.remaining}{c.RESET} "
            f"{c.PROGRESS}New {status.limit} given at: {reset_time}{c.RESET}"
        )


class HtmlPresenter(PresentationPort):
    """Renders each region as an HTML fragment.

    The fragments carry the ids and classes the page styles: the
    ``#repositories`` select, ``.repository-info``, ``.contributors-list``,
    ``.remaining`` and ``.resets-at``.
    """

    def __init__(self, selected: str | None = None) -> None:
        self.selected = selected
        self.repository_options = ""
        self.detail = ""
        self.contributors = ""
        self.remaining = ""
        self.resets_at = ""
        self.error = ""
        self.on_select: SelectHandler | None = None

    def set_repository_options(self, options: Sequence[tuple[str, str]], on_select: SelectHandler) -> None:
        self.on_select = on_select
        rendered = []
        for value, label in options:
            selected = " selected" if value == self.selected else ""
            rendered.append(f'<option value="{html.escape(value)}"{selected}>{html.escape(label)}</option>')
        self.repository_options = "\n".join(rendered)

    def set_detail(self, fields: Sequence[tuple[str, str]]) -> None:
        items = "\n".join(
            f'<li class="repository-info-item"><strong>{html.escape(label)}:</strong>'
            f"<span>{html.escape(value)}</span></li>"
            for label, value in fields
        )
        self.detail = f"<ul>\n{items}\n</ul>"

    def set_contributors(self, contributors: Sequence[Contributor]) -> None:
        items = []
        for contributor in contributors:
            avatar = html.escape(format_field(contributor.avatar_url))
            login = html.escape(format_field(contributor.login))
            contributions = html.escape(format_field(contributor.contributions))
            items.append(
                '<li class="contributor-info-item">'
                f'<img width="100px" src="{avatar}">'
                f'<span class="contributor-login">{login}</span>'
                f'<span class="contributor-contributions">{contributions}</span>'
                "</li>"
            )
        self.contributors = "\n".join(items)

    def set_rate_limit(self, status: RateLimitStatus, reset_time: str) -> None:
        self.remaining = f"<strong>Remaining:</strong> {status.remaining}"
        self.resets_at = f"<strong>New {status.limit} given at: </strong> {html.escape(reset_time)}"

    def set_error(self, message: str) -> None:
        """Show a failure note and clear the contributor region."""
        self.error = html.escape(message)
        self.contributors = ""

    def render_page(self, title: str) -> str:
        """Assemble the full page from the current regions."""
        title = html.escape(title)
        return f"""<!DOCTYPE html>
<html>
<head>
  <meta charset="utf-8">
  <title>{title}</title>
</head>
<body>
  <h1>{title}</h1>
  <div class="rate-limit">
    <p class="remaining">{self.remaining}</p>
    <p class="resets-at">{self.resets_at}</p>
  </div>
  <form method="get" action="/">
    <select id="repositories" name="repo" onchange="this.form.submit()">
      <option value="">Select a repository</option>
      {self.repository_options}
    </select>
  </form>
  <p class="error">{self.error}</p>
  <div class="repository-info">{self.detail}</div>
  <ul class="contributors-list">{self.contributors}</ul>
</body>
</html>
"""
