"""Transaction state manager for confirmed requests.

Each outstanding confirmed request holds an invoke id. Replies that arrive
for an id are handed to whoever is waiting on it.
"""

from __future__ import annotations

import queue
import threading
import time
from typing import Any, Optional

MAX_TRANSACTION = 255
_INVALID_ID = 0


class TransactionError(Exception):
    """Raised when a transaction cannot be started, found or completed."""


class TransactionManager:
    """Hands out invoke ids and passes replies to the waiting requester."""

    def __init__(self, size: int) -> None:
        self._lock = threading.Lock()
        self._states: dict[int, queue.Queue[Any]] = {}
        self._free_ids: queue.Queue[int] = queue.Queue()
        for ident in range(_INVALID_ID + 1, MAX_TRANSACTION):
            self._free_ids.put(ident)
        self._space = threading.Semaphore(size)

    def _channel(self, invoke_id: int) -> Optional[queue.Queue[Any]]:
        with self._lock:
            return self._states.get(invoke_id)

    def send(self, invoke_id: int, data: Any) -> None:
        """Deliver data to the transaction with the given invoke id."""
        channel = self._channel(invoke_id)
        if channel is None:
            raise TransactionError(f"id {invoke_id} is not receiving")
        channel.put(data)

    def receive(self, invoke_id: int, timeout: Optional[float] = None) -> Any:
        """Wait up to timeout seconds for data sent to the invoke id."""
        channel = self._channel(invoke_id)
        if channel is None:
            raise TransactionError(f"id {invoke_id} is not sending")
        try:
            return channel.get(timeout=timeout)
        except queue.Empty:
            raise TransactionError(f"Receive timed out ({timeout}s)") from None

    def acquire(self, timeout: Optional[float] = None) -> int:
        """Reserve a free invoke id, waiting up to timeout seconds."""
        deadline = None if timeout is None else time.monotonic() + timeout
        if not self._space.acquire(timeout=timeout):
            raise TransactionError("no free space: deadline exceeded")
        remaining = None if deadline is None else max(0.0, deadline - time.monotonic())
        try:
            ident = self._free_ids.get(timeout=remaining)
        except queue.Empty:
            self._space.release()
            raise TransactionError("unable to get a free id: deadline exceeded") from None
        with self._lock:
            self._states[ident] = queue.Queue()
        return ident

    def release(self, invoke_id: int) -> None:
        """Make the invoke id available for reuse."""
        with self._lock:
            if self._states.pop(invoke_id, None) is None:
                raise TransactionError(
                    f"id {invoke_id} does not exist in the transactions"
                )
        self._free_ids.put(invoke_id)
        self._space.release()