"""Counter of requests within a sliding time window."""

from __future__ import annotations

from collections import deque

WINDOW = 3000


class RecentCounter:
    """Counts pings in the inclusive window ``[t - 3000, t]``.

    Ping times must not decrease.
    """

    def __init__(self) -> None:
        self._calls: deque[int] = deque()

    def ping(self, t: int) -> int:
        """Record a ping at time ``t`` and return the pings in the window."""
        self._calls.append(t)
        while self._calls[0] < t - WINDOW:
            self._calls.popleft()
        return len(self._calls)