"""Exclusive-access guard used by the lock-object demo.

A Guard is either FREE or HELD by exactly one thread. It is not reentrant:
acquiring it twice from the same thread blocks forever, like the bare lock
it wraps.

The guard keeps a small amount of instrumentation (current and peak number
of holders) under a separate stats lock, so the peak reflects what actually
happened inside the critical section rather than what the guard promises.
"""

import threading
import logging
from enum import Enum
from typing import Optional

logger = logging.getLogger(__name__)


class GuardState(Enum):
    """Lifecycle state of a Guard."""
    FREE = "free"
    HELD = "held"


class Guard:
    """Mutual-exclusion primitive with holder instrumentation.

    Usable as a context manager:

        guard = Guard("counter")
        with guard:
            ...  # critical section

    Attributes:
        name: Label used in log messages
    """

    def __init__(self, name: str = "guard"):
        self.name = name
        self._lock = threading.Lock()

        self._stats_lock = threading.Lock()
        self._holders = 0
        self._peak_holders = 0
        self._acquisitions = 0

    def acquire(self, blocking: bool = True, timeout: Optional[float] = None) -> bool:
        """Acquire the guard, blocking until it is FREE.

        Args:
            blocking: If False, return immediately when the guard is HELD
            timeout: Maximum seconds to wait; ignored when not blocking

        Returns:
            True if the guard was acquired
        """
        if timeout is None or not blocking:
            acquired = self._lock.acquire(blocking)
        else:
            acquired = self._lock.acquire(blocking, timeout)

        if acquired:
            with self._stats_lock:
                self._holders += 1
                self._acquisitions += 1
                if self._holders > self._peak_holders:
                    self._peak_holders = self._holders
        return acquired

    def release(self) -> None:
        """Release the guard (HELD -> FREE).

        Raises:
            RuntimeError: If the guard is not held
        """
        with self._stats_lock:
            if self._holders == 0:
                raise RuntimeError(f"Guard '{self.name}' released while FREE")
            self._holders -= 1
        self._lock.release()

    def __enter__(self) -> "Guard":
        self.acquire()
        return self

    def __exit__(self, exc_type, exc, tb) -> bool:
        self.release()
        return False

    @property
    def state(self) -> GuardState:
        return GuardState.HELD if self._lock.locked() else GuardState.FREE

    @property
    def peak_holders(self) -> int:
        """Highest number of threads ever seen inside the critical section."""
        with self._stats_lock:
            return self._peak_holders

    @property
    def acquisitions(self) -> int:
        with self._stats_lock:
            return self._acquisitions

    def __repr__(self) -> str:
        return f"Guard(name={self.name!r}, state={self.state.value})"
