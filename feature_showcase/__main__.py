"""Entry point for the feature showcase.

Usage:
    python -m feature_showcase

Runs every feature example in order. Takes no arguments; exits 0 when all
examples complete and 1 after the first failure.
"""

import sys

from feature_showcase.config import ShowcaseConfig
from feature_showcase.driver import run_examples
from feature_showcase.utils.logging import configure_root_logger


def main() -> int:
    """Configure logging and run the showcase.

    Returns:
        Exit code from the driver
    """
    config = ShowcaseConfig()
    configure_root_logger(
        level=config.log_level,
        json_output=config.json_logs,
        log_file=config.log_file,
    )
    return run_examples(config=config)


if __name__ == "__main__":
    sys.exit(main())
