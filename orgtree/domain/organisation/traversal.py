"""Depth-first traversals over an organisation tree.

All functions in this module are pure walks - they return nothing and
only report nodes to the visitor. Each one filters which callbacks fire:

    visit_all_units        departments, employees and tasks
    visit_all_departments  departments only, never enters employees
    visit_all_employees    employees only
    visit_all_tasks        tasks only

Walks are pre-order: a parent's callback fires before its children's.
"""

from typing import Any

from .models import Department, Employee, Task
from .types import C, TraversalContext, child_context


def _notify(visitor: Any, callback: str, item: Department | Employee | Task, context: C) -> None:
    """Invoke a visitor callback if the visitor provides it."""
    handler = getattr(visitor, callback, None)
    if handler is not None:
        handler(item, context)


def _visit_tasks(employee: Employee, visitor: Any, context: C) -> None:
    # Tasks are indexed against the task list, one level below the employee.
    total = len(employee.tasks)
    for index, task in enumerate(employee.tasks):
        _notify(visitor, "visit_task", task, child_context(context, index, total))


def visit_all_units(unit: Department | Employee, visitor: Any, context: C | None = None) -> None:
    """Visit every department, employee and task below (and including) unit.

    Args:
        unit: Root of the walk
        visitor: Object with any of visit_department/visit_employee/visit_task
        context: Context of unit; defaults to level 0, not last
    """
    if context is None:
        context = TraversalContext()

    if isinstance(unit, Department):
        _notify(visitor, "visit_department", unit, context)
        total = len(unit.children)
        for index, child in enumerate(unit.children):
            visit_all_units(child, visitor, child_context(context, index, total))
    elif isinstance(unit, Employee):
        _notify(visitor, "visit_employee", unit, context)
        _visit_tasks(unit, visitor, context)


def visit_all_departments(unit: Department | Employee, visitor: Any, context: C | None = None) -> None:
    """Visit departments only.

    Sibling positions still count employees, so a department followed by
    an employee is not "last" even though the employee is never reported.
    """
    if context is None:
        context = TraversalContext()

    if isinstance(unit, Department):
        _notify(visitor, "visit_department", unit, context)
        total = len(unit.children)
        for index, child in enumerate(unit.children):
            visit_all_departments(child, visitor, child_context(context, index, total))


def visit_all_employees(unit: Department | Employee, visitor: Any, context: C | None = None) -> None:
    """Visit employees only, descending through departments to find them."""
    if context is None:
        context = TraversalContext()

    if isinstance(unit, Department):
        total = len(unit.children)
        for index, child in enumerate(unit.children):
            visit_all_employees(child, visitor, child_context(context, index, total))
    elif isinstance(unit, Employee):
        _notify(visitor, "visit_employee", unit, context)


def visit_all_tasks(unit: Department | Employee, visitor: Any, context: C | None = None) -> None:
    """Visit tasks only, descending through departments and employees."""
    if context is None:
        context = TraversalContext()

    if isinstance(unit, Department):
        total = len(unit.children)
        for index, child in enumerate(unit.children):
            visit_all_tasks(child, visitor, child_context(context, index, total))
    elif isinstance(unit, Employee):
        _visit_tasks(unit, visitor, context)
