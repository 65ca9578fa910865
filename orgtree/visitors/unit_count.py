"""Visitor that counts departments, employees and tasks."""

from pydantic import BaseModel

from orgtree.domain.organisation.models import Department, Employee, Task
from orgtree.domain.organisation.types import TraversalContext
from orgtree.domain.organisation.visitor import Visitor


class UnitCounts(BaseModel):
    """Node counts of an organisation tree."""

    departments: int = 0
    employees: int = 0
    tasks: int = 0
    max_depth: int = 0


class UnitCountVisitor(Visitor[TraversalContext]):
    """Tallies every node reported by a traversal.

    Tasks count towards max_depth, so a full walk reports the depth of
    the deepest task rather than the deepest employee.
    """

    def __init__(self) -> None:
        self._counts = UnitCounts()

    @property
    def counts(self) -> UnitCounts:
        return self._counts.model_copy()

    def _seen(self, context: TraversalContext) -> None:
        self._counts.max_depth = max(self._counts.max_depth, context.level)

    def visit_department(self, department: Department, context: TraversalContext) -> None:
        self._counts.departments += 1
        self._seen(context)

    def visit_employee(self, employee: Employee, context: TraversalContext) -> None:
        self._counts.employees += 1
        self._seen(context)

    def visit_task(self, task: Task, context: TraversalContext) -> None:
        self._counts.tasks += 1
        self._seen(context)
