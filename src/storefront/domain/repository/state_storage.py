"""Abstract durable key-value storage for client state.

Defined in the domain layer so stores never depend on infrastructure.
Concrete implementations (JSON files, in-memory) live elsewhere. Values
are opaque strings, the way browser local storage holds them.
"""

from __future__ import annotations

from abc import ABC, abstractmethod


class StateStorage(ABC):

    @abstractmethod
    def read(self, key: str) -> str | None:
        """Return the stored payload for ``key``, or None if absent."""

    @abstractmethod
    def write(self, key: str, payload: str) -> None:
        """Store ``payload`` under ``key``, replacing any previous value."""

    @abstractmethod
    def remove(self, key: str) -> None:
        """Forget ``key``. Removing an absent key is not an error."""
