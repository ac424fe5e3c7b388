"""Synchronization primitives for the lock-object demo.

This module provides:
- Guard: Exclusive-access primitive (FREE / HELD) with holder instrumentation
- ThreadSafeCounter: Integer counter whose only mutator runs under a Guard
- run_workers: Thread-per-worker increments, joined before the final read
- SharedResource: Sequential callers holding a guard for simulated work
"""

from feature_showcase.sync.guard import Guard, GuardState
from feature_showcase.sync.counter import ThreadSafeCounter, RunReport, run_workers
from feature_showcase.sync.resource import SharedResource

__all__ = [
    "Guard",
    "GuardState",
    "ThreadSafeCounter",
    "RunReport",
    "run_workers",
    "SharedResource",
]
