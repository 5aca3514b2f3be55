"""Unconfirmed transaction state manager.

Unconfirmed transactions have no single destination, so replies are
distributed with a simple publish/subscribe model keyed on id ranges.
"""

from __future__ import annotations

import queue
import threading
import time
from dataclasses import dataclass, field
from typing import Any, Optional

DEFAULT_OVERALL_TIMEOUT = 10.0
DEFAULT_LAST_RECEIVED_TIMEOUT = 1.0


@dataclass(eq=False)
class _Subscriber:
    start: int
    end: int
    timeout: float
    last_received_timeout: float
    last_received: float = field(default_factory=time.monotonic)
    data: queue.Queue[Any] = field(default_factory=queue.Queue)
    lock: threading.Lock = field(default_factory=threading.Lock)

    def remaining(self) -> float:
        with self.lock:
            return self.last_received + self.last_received_timeout - time.monotonic()


class Manager:
    """Thread-safe hub passing published data to subscribers of an id range."""

    def __init__(
        self,
        subscriber_timeout: float = DEFAULT_OVERALL_TIMEOUT,
        last_received_timeout: float = DEFAULT_LAST_RECEIVED_TIMEOUT,
    ) -> None:
        self._lock = threading.Lock()
        self._subs: list[_Subscriber] = []
        self._sub_timeout = subscriber_timeout
        self._last_received_timeout = last_received_timeout

    def publish(self, ident: int, data: Any) -> None:
        """Deliver data to every subscriber whose range holds ident."""
        with self._lock:
            for sub in self._subs:
                if sub.start <= ident <= sub.end:
                    with sub.lock:
                        sub.last_received = time.monotonic()
                        sub.data.put(data)

    def subscribe(
        self,
        start: int,
        end: int,
        timeout: Optional[float] = None,
        last_received_timeout: Optional[float] = None,
    ) -> list[Any]:
        """Collect data published for ids in [start, end].

        Returns once nothing has arrived for last_received_timeout seconds or
        once timeout seconds have passed in all.
        """
        with self._lock:
            sub = _Subscriber(
                start=start,
                end=end,
                timeout=self._sub_timeout if timeout is None else timeout,
                last_received_timeout=(
                    self._last_received_timeout
                    if last_received_timeout is None
                    else last_received_timeout
                ),
            )
            self._subs.append(sub)
        try:
            return self._collect(sub)
        finally:
            with self._lock:
                self._subs.remove(sub)

    @staticmethod
    def _collect(sub: _Subscriber) -> list[Any]:
        store: list[Any] = []
        deadline = time.monotonic() + sub.timeout
        while True:
            wait = min(deadline - time.monotonic(), sub.remaining())
            if wait <= 0:
                return store
            try:
                store.append(sub.data.get(timeout=wait))
            except queue.Empty:
                return store