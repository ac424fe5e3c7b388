#!/usr/bin/env python3
"""Stress the synchronized counter with growing worker counts.

This example demonstrates:
1. Running run_workers directly, without the showcase driver
2. Reading the RunReport (expected vs final value, duration)
3. Checking the guard never had more than one holder

Run this example:
    python counter_stress.py
"""

import json

from feature_showcase import ThreadSafeCounter, run_workers


def main():
    print("=" * 60)
    print("Synchronized Counter - Stress Example")
    print("=" * 60)

    for workers, increments in [(1, 10_000), (4, 5_000), (16, 2_000), (64, 500)]:
        counter = ThreadSafeCounter()
        report = run_workers(counter, workers, increments)

        status = "OK" if report.consistent and report.peak_holders <= 1 else "MISMATCH"
        print(f"\n[{status}] {workers} workers x {increments} increments")
        print(f"    Final value: {report.final_value:,} (expected {report.expected:,})")
        print(f"    Peak holders: {report.peak_holders}")
        print(f"    Duration: {report.duration_ms:.1f} ms")

    print("\nLast report as JSON:")
    print(json.dumps(report.to_dict(), indent=2))

    print("\n" + "=" * 60)
    print("Example complete!")
    print("=" * 60)


if __name__ == "__main__":
    main()
