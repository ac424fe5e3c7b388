"""Lock objects guarding shared state.

Several threads increment one counter; every increment runs under the
counter's guard, so the final value is exactly workers x increments.
"""

import logging
from typing import Optional

from feature_showcase.config import CounterConfig
from feature_showcase.sync import ThreadSafeCounter, SharedResource, run_workers

logger = logging.getLogger(__name__)


def run(config: Optional[CounterConfig] = None) -> None:
    """Run the counter and shared-resource demos.

    Raises:
        RuntimeError: If the counter lost or double counted an update
    """
    config = config or CounterConfig()

    print("\n=== Lock Object Example ===")

    counter = ThreadSafeCounter()
    report = run_workers(
        counter,
        config.workers,
        config.increments_per_worker,
        on_complete=lambda n: print(f"Thread {n} completed"),
    )

    print(f"Final counter value: {report.final_value} (expected: {report.expected})")
    if not report.consistent:
        raise RuntimeError(
            f"Counter mismatch: got {report.final_value}, expected {report.expected}"
        )
    logger.debug(f"Counter run: {report.to_dict()}")

    resource = SharedResource(hold_seconds=config.resource_hold_seconds)
    for user in config.resource_users:
        resource.use_resource(user)
