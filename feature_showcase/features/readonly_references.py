"""Passing read-only references instead of mutable copies.

Python passes object references, so the cost of "by value" only appears
when the caller copies explicitly. Frozen dataclasses, tuples and
``MappingProxyType`` let a function receive the shared object while being
unable to change it.
"""

import copy
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Mapping, Tuple


@dataclass(frozen=True)
class LargeRecord:
    id: int
    name: str
    data: Tuple[int, ...] = field(default_factory=tuple)


@dataclass(frozen=True)
class Vector3D:
    x: float
    y: float
    z: float


def process_record(record: LargeRecord) -> None:
    print(f"Processing record with ID: {record.id}")
    print(f"Data length: {len(record.data)}")
    print(f"Sum of first 10 elements: {sum(record.data[:10])}")


def describe_settings(settings: Mapping[str, str]) -> None:
    for key, value in settings.items():
        print(f"  {key} = {value}")


def process_by_value(point: Vector3D) -> Vector3D:
    print(f"  Point: ({point.x}, {point.y}, {point.z})")
    return point


def process_by_reference(point: Vector3D) -> Vector3D:
    print(f"  Point: ({point.x}, {point.y}, {point.z})")
    return point


def run() -> None:
    print("\n=== Read-only References Example ===")

    record = LargeRecord(id=1, name="Large Data Structure", data=tuple(range(100)))
    process_record(record)

    print(f"Original record ID: {record.id}")
    print(f"Original record Name: {record.name}")

    settings = {"mode": "fast"}
    view = MappingProxyType(settings)
    settings["mode"] = "safe"
    print("Read-only view sees owner updates:")
    describe_settings(view)

    point = Vector3D(10.0, 20.0, 30.0)

    print("\nPassing a copy:")
    received = process_by_value(copy.copy(point))
    print(f"  Same object: {received is point}")

    print("\nPassing the shared immutable reference:")
    received = process_by_reference(point)
    print(f"  Same object: {received is point}")
