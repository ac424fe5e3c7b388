"""Aliases for tuple, list, dict and nested generic types."""

from typing import Dict, List, NamedTuple, Tuple


class Point2D(NamedTuple):
    x: float
    y: float


class Point3D(NamedTuple):
    x: float
    y: float
    z: float


StringArray = List[str]
IntMatrix = List[List[int]]
StringDictionary = Dict[str, str]
PersonList = List[Tuple[str, int]]


def run() -> None:
    print("\n=== Type Aliases Example ===")

    point_2d = Point2D(10.5, 20.3)
    print(f"2D Point: X={point_2d.x}, Y={point_2d.y}")

    point_3d = Point3D(5.0, 10.0, 15.0)
    print(f"3D Point: X={point_3d.x}, Y={point_3d.y}, Z={point_3d.z}")

    fruits: StringArray = ["Apple", "Banana", "Orange"]
    print(f"Fruits: {', '.join(fruits)}")

    matrix: IntMatrix = [
        [1, 2, 3],
        [4, 5, 6],
        [7, 8, 9],
    ]
    print("Matrix:")
    for row in matrix:
        print(f"  [{', '.join(str(v) for v in row)}]")

    config: StringDictionary = {
        "AppName": "FeatureShowcase",
        "Version": "1.0",
        "Author": "Demo",
    }
    print("Configuration:")
    for key, value in config.items():
        print(f"  {key}: {value}")

    people: PersonList = [("Alice", 30), ("Bob", 25), ("Charlie", 35)]
    print("People:")
    for name, age in people:
        print(f"  {name}, Age: {age}")
