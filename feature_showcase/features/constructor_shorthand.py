"""Constructor shorthand with dataclasses.

Field declarations double as constructor parameters; subclasses extend the
parent's parameter list, and ``frozen=True`` gives a read-only value type.
"""

from dataclasses import dataclass


@dataclass
class Person:
    name: str
    age: int

    def display_info(self) -> None:
        print(f"Person: {self.name}, Age: {self.age}")


@dataclass
class Employee(Person):
    department: str

    def display_info(self) -> None:
        print(f"Employee: {self.name}, Age: {self.age}, Department: {self.department}")


@dataclass(frozen=True)
class Point:
    x: int
    y: int

    def __str__(self) -> str:
        return f"({self.x}, {self.y})"


def run() -> None:
    print("\n=== Constructor Shorthand Example ===")

    person = Person("John Doe", 30)
    person.display_info()

    employee = Employee("Jane Smith", 28, "Engineering")
    employee.display_info()

    point = Point(10, 20)
    print(f"Point: {point}")
