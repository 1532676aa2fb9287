"""Auth store: current user and API token.

Anonymous -> Authenticated only through ``login``; Authenticated ->
Anonymous only through ``logout``. Token expiry is not modelled here: the
API client forces ``logout`` when the server answers 401.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from typing import Any

from storefront.application.persistent_store import StoreHandle
from storefront.domain.model import session
from storefront.domain.model.session import SessionState, User

logger = logging.getLogger(__name__)

REDUCERS = {
    "login": session.log_in,
    "logout": session.log_out,
    "update_user": session.update_user,
}


class AuthStore:

    def __init__(
        self,
        handle: StoreHandle[SessionState],
        session_reset: Callable[[], None],
    ) -> None:
        self._handle = handle
        self._session_reset = session_reset

    # --- Transitions ----------------------------------------------------------

    def login(self, user: User, token: str) -> None:
        """Store the user and token together."""
        if user is None or not token:
            logger.warning("Ignoring login without both a user and a token")
        self._handle.dispatch("login", user, token)

    def logout(self) -> None:
        """Tear down the chat session, then forget the user and token.

        The reset runs first so it can still read session context. The
        user and token are cleared even if the reset fails.
        """
        try:
            self._session_reset()
        except Exception:
            logger.exception("Chat session reset failed during logout")
        self._handle.dispatch("logout")
        logger.info("Signed out")

    def update_user(self, **changes: Any) -> None:
        """Merge profile fields into the signed-in user; no-op when anonymous."""
        self._handle.dispatch("update_user", changes)

    # --- Queries --------------------------------------------------------------

    @property
    def state(self) -> SessionState:
        return self._handle.get_state()

    @property
    def user(self) -> User | None:
        return self.state.user

    @property
    def token(self) -> str | None:
        return self.state.token

    @property
    def is_authenticated(self) -> bool:
        return self.state.is_authenticated
