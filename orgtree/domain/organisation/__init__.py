"""Organisation domain - the unit tree and its traversals.

Key Types:
    Department - Grouping node with ordered children
    Employee - Leaf unit with a role code and tasks
    Task - Unit of work with a duration in hours
    Unit - Department or Employee, discriminated on "type"
    EmployeeRole - Known role codes
    TraversalContext - Depth and last-sibling flag of a visited node
    Visitor - Base class with no-op callbacks

Traversal Functions:
    visit_all_units - Departments, employees and tasks
    visit_all_departments - Departments only
    visit_all_employees - Employees only
    visit_all_tasks - Tasks only
"""

from .models import Department, Employee, EmployeeRole, Task, Unit
from .traversal import (
    visit_all_departments,
    visit_all_employees,
    visit_all_tasks,
    visit_all_units,
)
from .types import TraversalContext, child_context
from .visitor import Visitor

__all__ = [
    # Models
    "Department",
    "Employee",
    "EmployeeRole",
    "Task",
    "Unit",
    # Traversal
    "TraversalContext",
    "child_context",
    "Visitor",
    "visit_all_units",
    "visit_all_departments",
    "visit_all_employees",
    "visit_all_tasks",
]
