"""Tests for the individual feature examples.

Each example is checked for the values it prints, plus the small helpers
(FixedBuffer, variadic functions, lambdas) it demonstrates.
"""

from dataclasses import FrozenInstanceError
from decimal import Decimal

import pytest

from feature_showcase.config import CounterConfig
from feature_showcase.features import (
    collection_literals,
    constructor_shorthand,
    default_lambda_parameters,
    variadic_parameters,
    lock_object,
    fixed_buffers,
    type_aliases,
    readonly_references,
)


def output_lines(capsys):
    return capsys.readouterr().out.splitlines()


class TestCollectionLiterals:

    def test_output(self, capsys):
        collection_literals.run()
        lines = output_lines(capsys)
        assert "Array: [1, 2, 3, 4, 5]" in lines
        assert "List: [Apple, Banana, Orange, Mango]" in lines
        assert "Combined with spread: [1, 2, 3, 4, 5, 6, 7, 8]" in lines
        assert "Mixed fruits: [Strawberry, Apple, Banana, Orange, Mango, Kiwi, Grape, Pear]" in lines
        assert "Empty collection: []" in lines
        assert "Tuple: [10, 20, 30, 40]" in lines
        assert "Set union: {1, 2, 3, 4, 5, 9}" in lines
        assert "Merged dict: {'theme': 'dark', 'lang': 'en', 'beta': True}" in lines


class TestConstructorShorthand:

    def test_output(self, capsys):
        constructor_shorthand.run()
        lines = output_lines(capsys)
        assert "Person: John Doe, Age: 30" in lines
        assert "Employee: Jane Smith, Age: 28, Department: Engineering" in lines
        assert "Point: (10, 20)" in lines

    def test_employee_is_person(self):
        employee = constructor_shorthand.Employee("Jane", 28, "Ops")
        assert isinstance(employee, constructor_shorthand.Person)
        assert employee.department == "Ops"

    def test_point_is_frozen(self):
        point = constructor_shorthand.Point(1, 2)
        with pytest.raises(FrozenInstanceError):
            point.x = 5


class TestDefaultLambdaParameters:

    def test_output(self, capsys):
        default_lambda_parameters.run()
        lines = output_lines(capsys)
        assert lines[2:4] == ["Hello, Guest!", "Hello, Alice!"]
        assert "Total (no tax/discount specified): $110.00" in lines
        assert "Total (with custom tax): $115.00" in lines
        assert "Total (with tax and discount): $105.00" in lines
        assert "Numbers > 5: [6, 7, 8, 9, 10]" in lines

    def test_defaults(self):
        assert default_lambda_parameters.greet() == "Hello, Guest!"
        assert default_lambda_parameters.calculate_total(Decimal("200")) == Decimal("220")
        assert default_lambda_parameters.above(6) is True
        assert default_lambda_parameters.above(6, threshold=10) is False


class TestVariadicParameters:

    def test_output(self, capsys):
        variadic_parameters.run()
        lines = output_lines(capsys)
        assert "Sum of 1, 2, 3: 6" in lines
        assert "Average of 10, 20, 30, 40: 25.0" in lines
        assert "Max of 5, 15, 8, 23, 4: 23" in lines
        assert "Sum of empty: 0" in lines
        assert "Sum of squares 1..4: 30" in lines
        assert "Max of a set: 11" in lines
        assert lines[-4:] == ["My Items:", "  - Apple", "  - Banana", "  - Cherry"]

    def test_empty_calls(self):
        assert variadic_parameters.sum_values() == 0
        assert variadic_parameters.average() == 0
        assert variadic_parameters.max_value() == 0

    def test_display_without_items(self, capsys):
        variadic_parameters.display_items("Nothing")
        assert output_lines(capsys) == ["Nothing:"]


class TestLockObject:

    def test_default_output(self, capsys):
        lock_object.run(CounterConfig(resource_hold_seconds=0.0))
        lines = output_lines(capsys)

        completed = sorted(line for line in lines if line.endswith("completed"))
        assert completed == [f"Thread {n} completed" for n in range(1, 6)]
        assert "Final counter value: 500 (expected: 500)" in lines
        assert lines[-4:] == [
            "User 1 accessing resource...",
            "User 1 finished with resource",
            "User 2 accessing resource...",
            "User 2 finished with resource",
        ]

    def test_zero_workers(self, capsys):
        lock_object.run(CounterConfig(workers=0, resource_users=[], resource_hold_seconds=0.0))
        assert "Final counter value: 0 (expected: 0)" in output_lines(capsys)

    def test_mismatch_raises(self, monkeypatch, capsys):
        """A lost update surfaces as an error the driver will catch."""
        from feature_showcase.sync import RunReport

        def lossy_run(counter, workers, increments, on_complete=None):
            return RunReport(workers=workers, increments_per_worker=increments,
                             final_value=workers * increments - 1, peak_holders=2)

        monkeypatch.setattr(lock_object, "run_workers", lossy_run)
        with pytest.raises(RuntimeError, match="Counter mismatch"):
            lock_object.run(CounterConfig(resource_hold_seconds=0.0))


class TestFixedBuffers:

    def test_output(self, capsys):
        fixed_buffers.run()
        lines = output_lines(capsys)
        assert "Buffer contents: 0 10 20 30 40 50 60 70 80 90 " in lines
        assert "Sum of buffer: 450" in lines
        assert "Char buffer: Hello!" in lines

    def test_fixed_length(self):
        buffer = fixed_buffers.FixedBuffer(3, 0)
        assert len(buffer) == 3
        assert list(buffer) == [0, 0, 0]
        assert not hasattr(buffer, "append")

    def test_set_and_get(self):
        buffer = fixed_buffers.FixedBuffer(3, "")
        buffer[0] = "a"
        buffer[-1] = "z"
        assert list(buffer) == ["a", "", "z"]

    @pytest.mark.parametrize("index", [3, 10, -4])
    def test_out_of_range(self, index):
        buffer = fixed_buffers.FixedBuffer(3, 0)
        with pytest.raises(IndexError):
            buffer[index]
        with pytest.raises(IndexError):
            buffer[index] = 1

    def test_negative_length_raises(self):
        with pytest.raises(ValueError):
            fixed_buffers.FixedBuffer(-1, 0)

    def test_no_instance_dict(self):
        with pytest.raises(AttributeError):
            fixed_buffers.FixedBuffer(1, 0).extra = True


class TestTypeAliases:

    def test_output(self, capsys):
        type_aliases.run()
        lines = output_lines(capsys)
        assert "2D Point: X=10.5, Y=20.3" in lines
        assert "3D Point: X=5.0, Y=10.0, Z=15.0" in lines
        assert "Fruits: Apple, Banana, Orange" in lines
        assert ["  [1, 2, 3]", "  [4, 5, 6]", "  [7, 8, 9]"] == [
            line for line in lines if line.startswith("  [")
        ]
        assert "  AppName: FeatureShowcase" in lines
        assert "  Charlie, Age: 35" in lines

    def test_point_unpacks_like_tuple(self):
        x, y = type_aliases.Point2D(1.0, 2.0)
        assert (x, y) == (1.0, 2.0)


class TestReadonlyReferences:

    def test_output(self, capsys):
        readonly_references.run()
        lines = output_lines(capsys)
        assert "Processing record with ID: 1" in lines
        assert "Data length: 100" in lines
        assert "Sum of first 10 elements: 45" in lines
        assert "Original record Name: Large Data Structure" in lines
        assert "  mode = safe" in lines
        assert lines.count("  Point: (10.0, 20.0, 30.0)") == 2
        assert "  Same object: False" in lines
        assert lines[-3:] == [
            "Passing the shared immutable reference:",
            "  Point: (10.0, 20.0, 30.0)",
            "  Same object: True",
        ]

    def test_record_is_immutable(self):
        record = readonly_references.LargeRecord(id=1, name="r", data=(1, 2))
        with pytest.raises(FrozenInstanceError):
            record.id = 2
        with pytest.raises(TypeError):
            record.data[0] = 5
