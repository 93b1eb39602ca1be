from __future__ import annotations

import logging
from datetime import datetime, timezone
from threading import Lock
from typing import Callable, Optional


logger = logging.getLogger(__name__)

DEFAULT_DAILY_LIMIT = 1000


def utcnow() -> datetime:
    return datetime.now(tz=timezone.utc)


class QuotaTracker:
    """Gate upstream calls to a fixed number per calendar day.

    The day is taken from ``clock`` rather than the wall clock so tests can
    move time forward. The counter is checked after it is incremented, so with
    a limit of 1000 only 999 calls are allowed per day and the 1000th call is
    the first one denied.
    """

    def __init__(
        self,
        limit: int = DEFAULT_DAILY_LIMIT,
        clock: Callable[[], datetime] = utcnow,
    ) -> None:
        if limit < 1:
            raise ValueError("limit must be a positive number of calls")
        self.limit = limit
        self._clock = clock
        self._calls_today = 0
        self._last_call: Optional[datetime] = None
        self._lock = Lock()

    @property
    def calls_today(self) -> int:
        with self._lock:
            return self._calls_today

    def try_consume(self) -> bool:
        """Count one call and return whether it may proceed upstream."""
        with self._lock:
            now = self._clock()
            if self._last_call is None or self._last_call.date() != now.date():
                if self._calls_today:
                    logger.debug("Resetting daily API call counter after %d calls", self._calls_today)
                self._calls_today = 0
            self._calls_today += 1
            calls = self._calls_today
            if calls >= self.limit:
                return False
            self._last_call = now
        logger.debug("API call number %d today", calls)
        return True


__all__ = ["DEFAULT_DAILY_LIMIT", "QuotaTracker", "utcnow"]
