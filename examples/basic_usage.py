#!/usr/bin/env python3
"""Basic usage example for the feature showcase.

This example demonstrates:
1. Building a ShowcaseConfig with custom counter settings
2. Configuring diagnostic logging
3. Listing the ordered example registry
4. Running the showcase and checking its exit code

Run this example:
    python basic_usage.py
"""

import sys

from feature_showcase import ShowcaseConfig, CounterConfig, build_examples, run_examples
from feature_showcase.utils.logging import configure_root_logger


def main():
    # -------------------------------------------------------------------------
    # Step 1: Configuration
    # -------------------------------------------------------------------------
    config = ShowcaseConfig(
        counter=CounterConfig(
            workers=3,
            increments_per_worker=1000,
            resource_users=["Reader", "Writer"],
            resource_hold_seconds=0.005,
        ),
        log_level="info",
    )

    # -------------------------------------------------------------------------
    # Step 2: Logging goes to stderr, demo output to stdout
    # -------------------------------------------------------------------------
    configure_root_logger(level=config.log_level, json_output=config.json_logs)

    # -------------------------------------------------------------------------
    # Step 3: The registry is a plain ordered list
    # -------------------------------------------------------------------------
    print("Examples in run order:")
    for position, (name, _) in enumerate(build_examples(config), start=1):
        print(f"  {position}. {name}")
    print()

    # -------------------------------------------------------------------------
    # Step 4: Run everything behind the driver's error boundary
    # -------------------------------------------------------------------------
    exit_code = run_examples(config=config)
    print(f"\nDriver exit code: {exit_code}")
    return exit_code


if __name__ == "__main__":
    sys.exit(main())
