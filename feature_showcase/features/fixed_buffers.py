"""Fixed-size inline buffers.

A FixedBuffer is allocated once at its final length: items can be read and
overwritten by index, but the buffer never grows or shrinks.
"""

from typing import Generic, Iterable, Iterator, List, TypeVar

T = TypeVar("T")


class FixedBuffer(Generic[T]):
    """Preallocated buffer of ``length`` slots, each starting as ``fill``."""

    __slots__ = ("_items",)

    def __init__(self, length: int, fill: T):
        if length < 0:
            raise ValueError(f"length must be >= 0, got {length}")
        self._items: List[T] = [fill] * length

    def _check(self, index: int) -> int:
        if not -len(self._items) <= index < len(self._items):
            raise IndexError(f"buffer index {index} out of range for length {len(self._items)}")
        return index

    def __getitem__(self, index: int) -> T:
        return self._items[self._check(index)]

    def __setitem__(self, index: int, value: T) -> None:
        self._items[self._check(index)] = value

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[T]:
        return iter(self._items)

    def __repr__(self) -> str:
        return f"FixedBuffer({self._items!r})"


def calculate_sum(values: Iterable[int]) -> int:
    total = 0
    for value in values:
        total += value
    return total


def run() -> None:
    print("\n=== Fixed Buffers Example ===")

    buffer: FixedBuffer[int] = FixedBuffer(10, 0)
    for i in range(len(buffer)):
        buffer[i] = i * 10

    print("Buffer contents: " + "".join(f"{value} " for value in buffer))
    print(f"Sum of buffer: {calculate_sum(buffer)}")

    char_buffer: FixedBuffer[str] = FixedBuffer(10, "\0")
    text = "Hello!"
    for i, char in enumerate(text[:len(char_buffer)]):
        char_buffer[i] = char

    print("Char buffer: " + "".join(char_buffer[i] for i in range(len(text))))
