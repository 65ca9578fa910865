"""Visitor contract for organisation traversals."""

from typing import Generic

from .models import Department, Employee, Task
from .types import C


class Visitor(Generic[C]):
    """Base class for organisation visitors.

    Every callback is a no-op, so a subclass only overrides the events it
    cares about. The traversal functions also accept objects that do not
    inherit from this class; callbacks they lack are skipped.
    """

    def visit_department(self, department: Department, context: C) -> None:
        """Called for each department, before its children."""

    def visit_employee(self, employee: Employee, context: C) -> None:
        """Called for each employee, before its tasks."""

    def visit_task(self, task: Task, context: C) -> None:
        """Called for each task of an employee."""
