"""Example scripts for the feature showcase.

Available examples:

basic_usage.py
    Run the full showcase programmatically with a custom configuration.
    Start here to understand the driver and its exit code.

counter_stress.py
    Drive the synchronized counter with larger worker counts.
    Shows the run report and the guard's peak-holder instrumentation.

Run any example:
    python examples/basic_usage.py
    python examples/counter_stress.py
"""
