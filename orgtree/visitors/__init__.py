"""Concrete visitors for organisation trees.

OrganisationTreeVisitor - Renders a tree report
TaskCalculationVisitor - Sums task durations
UnitCountVisitor - Counts departments, employees and tasks
"""

from orgtree.visitors.organisation_tree import OrganisationTreeVisitor
from orgtree.visitors.task_calculation import TaskCalculationVisitor
from orgtree.visitors.unit_count import UnitCounts, UnitCountVisitor

__all__ = [
    "OrganisationTreeVisitor",
    "TaskCalculationVisitor",
    "UnitCountVisitor",
    "UnitCounts",
]
