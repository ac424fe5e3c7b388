"""Collection literals and unpacking.

Literal syntax builds lists, tuples, sets and dicts in one expression, and
``*`` / ``**`` splice other collections into the literal.
"""


def _join(values) -> str:
    return ", ".join(str(v) for v in values)


def run() -> None:
    print("\n=== Collection Literals Example ===")

    numbers = [1, 2, 3, 4, 5]
    print(f"Array: [{_join(numbers)}]")

    fruits = ["Apple", "Banana", "Orange", "Mango"]
    print(f"List: [{_join(fruits)}]")

    more_numbers = [6, 7, 8]
    combined = [*numbers, *more_numbers]
    print(f"Combined with spread: [{_join(combined)}]")

    more_fruits = ("Grape", "Pear")
    all_fruits = ["Strawberry", *fruits, "Kiwi", *more_fruits]
    print(f"Mixed fruits: [{_join(all_fruits)}]")

    empty = []
    print(f"Empty collection: [{_join(empty)}]")

    # Tuples are the immutable counterpart of the list literal
    view = (10, 20, 30, 40)
    print(f"Tuple: [{_join(view)}]")

    unique = {*numbers, *[3, 4, 9]}
    print(f"Set union: {{{_join(sorted(unique))}}}")

    defaults = {"theme": "light", "lang": "en"}
    overrides = {"theme": "dark"}
    settings = {**defaults, **overrides, "beta": True}
    print(f"Merged dict: {settings}")
