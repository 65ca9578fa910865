"""Tests for the organisation domain models."""

import pytest
from pydantic import TypeAdapter, ValidationError

from orgtree.domain.organisation import Department, Employee, EmployeeRole, Task, Unit


class TestUnitParsing:
    def test_discriminates_on_type(self):
        unit = TypeAdapter(Unit).validate_python(
            {
                "type": "department",
                "name": "HQ",
                "children": [
                    {"type": "employee", "name": "A", "role": "A", "tasks": [{"id": 1, "duration": 5}]},
                    {"type": "department", "name": "Eng", "children": []},
                ],
            }
        )

        assert isinstance(unit, Department)
        assert isinstance(unit.children[0], Employee)
        assert isinstance(unit.children[1], Department)
        assert unit.children[0].tasks == [Task(id=1, duration=5)]

    def test_unknown_type_is_rejected(self):
        with pytest.raises(ValidationError):
            TypeAdapter(Unit).validate_python({"type": "team", "name": "X"})

    def test_negative_duration_is_rejected(self):
        with pytest.raises(ValidationError):
            Task(id=1, duration=-1)

    def test_unknown_role_code_is_accepted(self):
        employee = Employee(name="Q", role="Z")
        assert employee.role == "Z"
        assert employee.tasks == []

    def test_children_order_is_preserved(self):
        names = ["c", "a", "b"]
        department = Department(name="D", children=[Department(name=n) for n in names])
        assert [child.name for child in department.children] == names


class TestImmutability:
    def test_models_are_frozen(self):
        department = Department(name="HQ")
        with pytest.raises(ValidationError):
            department.name = "Other"

        task = Task(id=1, duration=2)
        with pytest.raises(ValidationError):
            task.duration = 3


def test_role_codes():
    assert EmployeeRole("C") is EmployeeRole.MANAGER
    assert EmployeeRole("B") is EmployeeRole.SUPERVISOR
    assert EmployeeRole("A") is EmployeeRole.WORKER
    assert EmployeeRole("X") is EmployeeRole.CONTRACTOR
