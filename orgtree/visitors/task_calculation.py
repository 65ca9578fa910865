"""Visitor that sums task durations."""

from orgtree.domain.organisation.models import Task
from orgtree.domain.organisation.types import TraversalContext
from orgtree.domain.organisation.visitor import Visitor


class TaskCalculationVisitor(Visitor[TraversalContext]):
    """Adds up the duration of every visited task, in hours."""

    def __init__(self) -> None:
        self._total_work = 0

    @property
    def total_work(self) -> int:
        return self._total_work

    def visit_task(self, task: Task, context: TraversalContext) -> None:
        self._total_work += task.duration

    def reset(self) -> None:
        self._total_work = 0
