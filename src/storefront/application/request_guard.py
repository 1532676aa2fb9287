"""Generation tokens for discarding stale responses.

The API client is last-write-wins. A view that may fire the same kind of
request again before the previous one answers (paging, search as you
type) takes a token before each call and applies a result only while
its token is still the latest.
"""

from __future__ import annotations

import itertools
import threading


class LatestRequestGuard:

    def __init__(self) -> None:
        self._counter = itertools.count(1)
        self._latest = 0
        self._lock = threading.Lock()

    def begin(self) -> int:
        """Start a request; any earlier token becomes stale."""
        with self._lock:
            self._latest = next(self._counter)
            return self._latest

    def is_current(self, token: int) -> bool:
        with self._lock:
            return token == self._latest
