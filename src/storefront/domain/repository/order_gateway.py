"""Abstract access to order placement and tracking."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any


class OrderGateway(ABC):

    @abstractmethod
    def place(self, payload: dict[str, Any], *, guest: bool) -> dict[str, Any]:
        """Submit an order and return the created order record."""

    @abstractmethod
    def list_mine(self) -> list[dict[str, Any]]:
        """Return the signed-in user's orders, newest first."""

    @abstractmethod
    def lookup_guest(self, order_id: str, phone: str) -> dict[str, Any] | None:
        """Find a guest order by its id or code and the phone used at checkout."""
