"""Default parameter values on lambdas."""

from decimal import Decimal

greet = lambda name="Guest": f"Hello, {name}!"  # noqa: E731

calculate_total = lambda price, tax=Decimal("0.10"), discount=Decimal("0"): (  # noqa: E731
    price + price * tax - discount
)

above = lambda number, threshold=5: number > threshold  # noqa: E731


def run() -> None:
    print("\n=== Default Lambda Parameters Example ===")

    print(greet())
    print(greet("Alice"))

    price = Decimal("100")
    print(f"Total (no tax/discount specified): ${calculate_total(price):.2f}")
    print(f"Total (with custom tax): ${calculate_total(price, Decimal('0.15')):.2f}")
    print(
        "Total (with tax and discount): "
        f"${calculate_total(price, Decimal('0.15'), Decimal('10')):.2f}"
    )

    numbers = list(range(1, 11))
    filtered = [n for n in numbers if above(n)]
    print(f"Numbers > 5: [{', '.join(str(n) for n in filtered)}]")
