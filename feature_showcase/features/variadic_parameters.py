"""Variadic parameters fed from any iterable container.

``*numbers`` collects positional arguments into a tuple; at the call site
``*`` unpacks a list, tuple, deque, set or generator alike.
"""

from collections import deque


def sum_values(*numbers: int) -> int:
    return sum(numbers)


def average(*numbers: int) -> float:
    return sum(numbers) / len(numbers) if numbers else 0


def max_value(*numbers: int) -> int:
    if not numbers:
        return 0
    return max(numbers)


def display_items(title: str, *items: str) -> None:
    print(f"{title}:")
    for item in items:
        print(f"  - {item}")


def run() -> None:
    print("\n=== Variadic Parameters Example ===")

    print(f"Sum of 1, 2, 3: {sum_values(1, 2, 3)}")
    print(f"Average of 10, 20, 30, 40: {average(*[10, 20, 30, 40])}")
    print(f"Max of 5, 15, 8, 23, 4: {max_value(*deque([5, 15, 8, 23, 4]))}")
    print(f"Sum of empty: {sum_values()}")
    print(f"Sum of squares 1..4: {sum_values(*(n * n for n in range(1, 5)))}")
    print(f"Max of a set: {max_value(*{7, 3, 11})}")

    display_items("My Items", *("Apple", "Banana", "Cherry"))
