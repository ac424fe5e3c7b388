"""Driver that runs every feature example in a fixed order.

There is exactly one error boundary: the first exception raised by any
example stops the run, its message and traceback are printed once, and
``run_examples`` returns a non-zero exit code. Nothing is retried and no
later example runs.

Example:
    from feature_showcase.driver import run_examples

    exit_code = run_examples()
"""

import functools
import logging
import traceback
from typing import Callable, List, Optional, Sequence, Tuple

from .config import ShowcaseConfig
from .features import FEATURES, lock_object

logger = logging.getLogger(__name__)

Example = Tuple[str, Callable[[], None]]

BANNER_WIDTH = 62

WELCOME_LINES = [
    "This application demonstrates language features one by one,",
    "each in a small self-contained example.",
]


def _banner(title: str) -> str:
    rule = "═" * BANNER_WIDTH
    return f"╔{rule}╗\n║{title.center(BANNER_WIDTH)}║\n╚{rule}╝"


def build_examples(config: Optional[ShowcaseConfig] = None) -> List[Example]:
    """Return the ordered example registry bound to ``config``.

    Only the lock-object example takes settings; every entry in the result
    is callable with no arguments.
    """
    config = config or ShowcaseConfig()

    examples: List[Example] = []
    for name, runner in FEATURES:
        if runner is lock_object.run:
            runner = functools.partial(lock_object.run, config.counter)
        examples.append((name, runner))
    return examples


def run_examples(
    examples: Optional[Sequence[Example]] = None,
    config: Optional[ShowcaseConfig] = None,
) -> int:
    """Run examples in order behind a single error boundary.

    Args:
        examples: Ordered (name, runner) pairs; defaults to build_examples(config)
        config: Showcase configuration used when building the default list

    Returns:
        Exit code (0 when every example completed, 1 after the first failure)
    """
    if examples is None:
        examples = build_examples(config)

    print(_banner("Welcome to the Language Features Showcase"))
    print()
    for line in WELCOME_LINES:
        print(line)
    print()

    current = None
    try:
        for name, runner in examples:
            current = name
            logger.debug(f"Running example: {name}")
            runner()
            logger.debug(f"Example complete: {name}")

        print("\n" + _banner("All Examples Completed Successfully!"))
        return 0

    except Exception as e:
        print(f"\n❌ Error: {e}")
        print(f"Stack Trace: {traceback.format_exc()}")
        logger.error(f"Example '{current}' failed: {e}", exc_info=True)
        return 1
