from __future__ import annotations

import time
from threading import Lock
from typing import Callable, Dict, Optional, Tuple

from .entities import RainReport


class ReportCache:
    """In-process TTL cache for rain reports.

    Mirrors the ``get``/``set`` signature of Django cache backends so the
    service accepts either one. Entries expire a fixed time after they are
    written.
    """

    def __init__(self, time_func: Callable[[], float] = time.monotonic) -> None:
        self._time_func = time_func
        self._entries: Dict[str, Tuple[float, RainReport]] = {}
        self._lock = Lock()

    def get(self, key: str) -> Optional[RainReport]:
        with self._lock:
            entry = self._entries.get(key)
            if entry is None:
                return None
            expires_at, report = entry
            if expires_at <= self._time_func():
                del self._entries[key]
                return None
            return report

    def set(self, key: str, report: RainReport, timeout: float) -> None:
        with self._lock:
            self._entries[key] = (self._time_func() + timeout, report)

    def clear(self) -> None:
        with self._lock:
            self._entries.clear()

    def __len__(self) -> int:
        with self._lock:
            return len(self._entries)


__all__ = ["ReportCache"]
