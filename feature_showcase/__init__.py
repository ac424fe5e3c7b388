"""Feature Showcase - a guided tour of language features in small examples.

Each example is a self-contained ``run()`` that prints a short demonstration.
A driver runs them in a fixed order behind a single error boundary. The
lock-object example is backed by a real synchronized counter that several
threads increment concurrently.

Quick Start:
    from feature_showcase import run_examples

    exit_code = run_examples()

    # Or drive the counter directly
    from feature_showcase import ThreadSafeCounter, run_workers

    report = run_workers(ThreadSafeCounter(), workers=5, increments_per_worker=100)
    assert report.final_value == 500

Classes:
    ShowcaseConfig: Global run configuration
    CounterConfig: Settings for the lock-object demo
    Guard: Exclusive-access primitive with holder instrumentation
    ThreadSafeCounter: Counter whose only mutator runs under a Guard
    SharedResource: Resource used by sequential callers under a Guard
"""

__version__ = "1.0.0"
__license__ = "MIT"

from .config import ShowcaseConfig, CounterConfig, LogFormat

from .sync import (
    Guard,
    GuardState,
    ThreadSafeCounter,
    RunReport,
    run_workers,
    SharedResource,
)

from .driver import build_examples, run_examples

__all__ = [
    "__version__",
    "__license__",
    "ShowcaseConfig",
    "CounterConfig",
    "LogFormat",
    "Guard",
    "GuardState",
    "ThreadSafeCounter",
    "RunReport",
    "run_workers",
    "SharedResource",
    "build_examples",
    "run_examples",
]
