"""Organization repository viewer."""

from __future__ import annotations

from .presenters import HtmlPresenter, PresentationPort, TerminalPresenter
from .store import RepositoryStore
from .viewer import OrgViewer

__all__ = ["HtmlPresenter", "OrgViewer", "PresentationPort", "RepositoryStore", "TerminalPresenter"]
