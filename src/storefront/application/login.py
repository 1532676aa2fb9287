"""Application service: Login use case."""

from __future__ import annotations

from storefront.application.auth_store import AuthStore
from storefront.domain.exceptions import ValidationError
from storefront.domain.model.session import User
from storefront.domain.repository.auth_gateway import AuthGateway


class LoginHandler:

    def __init__(self, auth_gateway: AuthGateway, auth_store: AuthStore) -> None:
        self._gateway = auth_gateway
        self._auth = auth_store

    def handle(self, email: str, password: str) -> User:
        """Exchange credentials for a session and keep it in the auth store."""
        if not email or not email.strip():
            raise ValidationError("Email is required")
        if not password:
            raise ValidationError("Password is required")

        user, token = self._gateway.authenticate(email.strip(), password)
        self._auth.login(user, token)
        return user
