"""Abstract credential exchange with the remote API."""

from __future__ import annotations

from abc import ABC, abstractmethod

from storefront.domain.model.session import User


class AuthGateway(ABC):

    @abstractmethod
    def authenticate(self, email: str, password: str) -> tuple[User, str]:
        """Exchange credentials for the user record and a session token."""
