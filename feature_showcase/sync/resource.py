"""A resource that callers take turns using under a guard."""

import time
import logging

from feature_showcase.sync.guard import Guard

logger = logging.getLogger(__name__)


class SharedResource:
    """Prints who is using it while holding its guard for a short time."""

    def __init__(self, hold_seconds: float = 0.01):
        self.hold_seconds = hold_seconds
        self.guard = Guard("shared-resource")

    def use_resource(self, user: str) -> None:
        with self.guard:
            print(f"{user} accessing resource...")
            time.sleep(self.hold_seconds)
            print(f"{user} finished with resource")
        logger.debug(f"{user} released {self.guard.name}")
