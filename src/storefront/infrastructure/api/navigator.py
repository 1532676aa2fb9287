"""Where the client sends the shopper when it must change view."""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod

logger = logging.getLogger(__name__)


class Navigator(ABC):

    @abstractmethod
    def redirect(self, path: str) -> None:
        """Move the user to ``path`` regardless of the current view."""


class RecordingNavigator(Navigator):
    """Remembers the last redirect; the CLI reads it after a command runs."""

    def __init__(self) -> None:
        self.history: list[str] = []

    @property
    def current(self) -> str | None:
        return self.history[-1] if self.history else None

    def redirect(self, path: str) -> None:
        logger.info("Redirecting to %s", path)
        self.history.append(path)
