"""
Fixed-interval pacing between consecutive batch items.
"""

from __future__ import annotations

import time
from collections.abc import Callable


class RequestPacer:
    """
    Suspends the caller for a fixed interval between upstream-bound items.
    """

    def __init__(
        self,
        *,
        interval_seconds: float,
        sleep: Callable[[float], None] = time.sleep,
    ) -> None:
        self._interval_seconds = max(0.0, interval_seconds)
        self._sleep = sleep

    @property
    def interval_seconds(self) -> float:
        return self._interval_seconds

    def wait(self) -> float:
        """
        Sleep for the configured interval and return the seconds slept.
        """

        if self._interval_seconds <= 0:
            return 0.0
        self._sleep(self._interval_seconds)
        return self._interval_seconds
