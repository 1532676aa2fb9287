"""Live-chat session bookkeeping.

The chat widget identifies anonymous shoppers by a session id kept in
durable storage, and holds at most one live channel per role
(``customer`` for the widget, ``admin`` for the back-office inbox). The
transport behind a channel is out of scope here; anything with a
``disconnect()`` method can be attached.
"""

from __future__ import annotations

import logging
import secrets
import string
import time
from typing import Protocol

from storefront.domain.repository.state_storage import StateStorage

logger = logging.getLogger(__name__)

SESSION_ID_KEY = "chat_session_id"

_BASE36 = string.digits + string.ascii_lowercase


class ChatChannel(Protocol):

    def disconnect(self) -> None: ...


def new_session_id() -> str:
    """``session_<epoch ms>_<13 random base36 chars>``."""
    suffix = "".join(secrets.choice(_BASE36) for _ in range(13))
    return f"session_{int(time.time() * 1000)}_{suffix}"


class ChatSession:

    def __init__(self, storage: StateStorage) -> None:
        self._storage = storage
        self._channels: dict[str, ChatChannel] = {}

    def session_id(self) -> str:
        """Return the stored anonymous session id, creating one if needed."""
        session_id = self._storage.read(SESSION_ID_KEY)
        if session_id:
            return session_id.strip()
        session_id = new_session_id()
        self._storage.write(SESSION_ID_KEY, session_id)
        return session_id

    def attach(self, role: str, channel: ChatChannel) -> None:
        """Register the live channel for ``role``, replacing any previous one."""
        previous = self._channels.get(role)
        if previous is not None and previous is not channel:
            previous.disconnect()
        self._channels[role] = channel

    def channel(self, role: str) -> ChatChannel | None:
        return self._channels.get(role)

    def disconnect(self, role: str) -> None:
        channel = self._channels.pop(role, None)
        if channel is not None:
            channel.disconnect()

    def reset(self) -> None:
        """Close every live channel and forget the anonymous session id.

        A channel that fails to close is logged and dropped; the rest are
        still closed.
        """
        for role in list(self._channels):
            try:
                self.disconnect(role)
            except Exception as exc:
                logger.warning("Could not close %s chat channel: %s", role, exc)
        try:
            self._storage.remove(SESSION_ID_KEY)
        except OSError as exc:
            logger.warning("Could not clear chat session id: %s", exc)
        logger.info("Chat session reset")
