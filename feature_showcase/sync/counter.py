"""Thread-safe counter and the worker run that exercises it.

The counter owns both its integer and its guard; the only way to change the
value is ``increment()``. ``run_workers`` starts one thread per worker and
joins all of them before the final value is read, so the final read needs
no guard.
"""

import threading
import time
import logging
from dataclasses import dataclass
from typing import Optional, Callable, Dict, Any, List

from feature_showcase.sync.guard import Guard

logger = logging.getLogger(__name__)


class ThreadSafeCounter:
    """Integer counter guarded by an exclusive lock.

    Attributes:
        guard: The Guard protecting the value (exposed for inspection)
    """

    def __init__(self, guard: Optional[Guard] = None):
        self.guard = guard or Guard("counter")
        self._value = 0

    @property
    def value(self) -> int:
        """Current value. Read it only after every writer has been joined."""
        return self._value

    def increment(self) -> None:
        with self.guard:
            self._value += 1


@dataclass
class RunReport:
    """Result of a worker run against a ThreadSafeCounter."""

    workers: int
    increments_per_worker: int
    final_value: int
    peak_holders: int
    duration_ms: float = 0.0

    @property
    def expected(self) -> int:
        return self.workers * self.increments_per_worker

    @property
    def consistent(self) -> bool:
        """True if no update was lost or double counted."""
        return self.final_value == self.expected

    def to_dict(self) -> Dict[str, Any]:
        return {
            "workers": self.workers,
            "increments_per_worker": self.increments_per_worker,
            "expected": self.expected,
            "final_value": self.final_value,
            "peak_holders": self.peak_holders,
            "consistent": self.consistent,
            "duration_ms": self.duration_ms,
        }


def run_workers(
    counter: ThreadSafeCounter,
    workers: int,
    increments_per_worker: int,
    on_complete: Optional[Callable[[int], None]] = None,
) -> RunReport:
    """Increment ``counter`` from ``workers`` threads and wait for all of them.

    Args:
        counter: Shared counter
        workers: Number of threads to start
        increments_per_worker: Increments each thread performs
        on_complete: Called with the 1-based worker number when that
            worker finishes its loop (runs on the worker thread)

    Returns:
        RunReport with the final value read after every thread joined

    Raises:
        ValueError: If either count is negative
        Exception: The first error raised on any worker thread, re-raised
            after all workers have been joined
    """
    if workers < 0:
        raise ValueError(f"workers must be >= 0, got {workers}")
    if increments_per_worker < 0:
        raise ValueError(f"increments_per_worker must be >= 0, got {increments_per_worker}")

    errors: List[Exception] = []
    errors_lock = threading.Lock()

    def work(worker_number: int) -> None:
        try:
            for _ in range(increments_per_worker):
                counter.increment()
            if on_complete:
                on_complete(worker_number)
        except Exception as e:
            logger.error(f"Worker {worker_number} failed: {e}")
            with errors_lock:
                errors.append(e)

    started = time.perf_counter()

    threads = [
        threading.Thread(target=work, args=(i + 1,), name=f"counter-worker-{i + 1}")
        for i in range(workers)
    ]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()

    # Re-raise on the caller's thread once every worker has stopped
    if errors:
        raise errors[0]

    report = RunReport(
        workers=workers,
        increments_per_worker=increments_per_worker,
        final_value=counter.value,
        peak_holders=counter.guard.peak_holders,
        duration_ms=(time.perf_counter() - started) * 1000,
    )
    logger.debug(
        f"Worker run finished: {report.final_value}/{report.expected} "
        f"in {report.duration_ms:.1f} ms"
    )
    return report
