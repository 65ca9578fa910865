"""Report CLI commands.

Commands that walk an organisation with visitors and print the result:
the total task duration and the tree report.
"""

from enum import Enum
from pathlib import Path
from typing import Optional

import typer

from orgtree.domain.organisation.models import Department, Employee
from orgtree.domain.organisation.traversal import (
    visit_all_departments,
    visit_all_employees,
    visit_all_tasks,
    visit_all_units,
)
from orgtree.interfaces.cli.common import (
    DATA_ENV_VAR,
    create_tree_visitor,
    load_organisation,
    resolve_display_config,
)
from orgtree.visitors.task_calculation import TaskCalculationVisitor

app = typer.Typer(help="Organisation report commands")


class TreeScope(str, Enum):
    """Which nodes the tree command shows."""

    UNITS = "units"
    DEPARTMENTS = "departments"
    EMPLOYEES = "employees"


_WALKS = {
    TreeScope.UNITS: visit_all_units,
    TreeScope.DEPARTMENTS: visit_all_departments,
    TreeScope.EMPLOYEES: visit_all_employees,
}


def total_duration(organisation: Department | Employee) -> int:
    """Sum of all task durations in hours."""
    visitor = TaskCalculationVisitor()
    visit_all_tasks(organisation, visitor)
    return visitor.total_work


def format_total(total: int) -> str:
    return f"Total Task Duration: {total} hours"


# =============================================================================
# Commands
# =============================================================================


@app.command("all")
def report(
    data: Optional[Path] = typer.Option(
        None, "--data", "-d", help="Organisation JSON file (default: built-in sample)", envvar=DATA_ENV_VAR
    ),
    no_color: bool = typer.Option(False, "--no-color", help="Disable ANSI styling"),
) -> None:
    """Print the total duration, the full tree and the departments-only tree.

    Example:
        orgtree report all --data organisation.json
    """
    organisation = load_organisation(data)
    visitor = create_tree_visitor(resolve_display_config(no_color))

    typer.echo(format_total(total_duration(organisation)))

    visit_all_units(organisation, visitor)
    typer.echo(visitor.rendered_tree)

    # Start the departments report from a clean slate instead of appending.
    visitor.reset()
    visit_all_departments(organisation, visitor)
    typer.echo(visitor.rendered_tree)


@app.command("tree")
def tree(
    scope: TreeScope = typer.Option(TreeScope.UNITS, "--scope", "-s", help="Nodes to include"),
    data: Optional[Path] = typer.Option(
        None, "--data", "-d", help="Organisation JSON file (default: built-in sample)", envvar=DATA_ENV_VAR
    ),
    no_color: bool = typer.Option(False, "--no-color", help="Disable ANSI styling"),
) -> None:
    """Print the organisation tree.

    Example:
        orgtree report tree --scope departments
    """
    organisation = load_organisation(data)
    visitor = create_tree_visitor(resolve_display_config(no_color))
    _WALKS[scope](organisation, visitor)
    typer.echo(visitor.rendered_tree, nl=False)


@app.command("total")
def total(
    data: Optional[Path] = typer.Option(
        None, "--data", "-d", help="Organisation JSON file (default: built-in sample)", envvar=DATA_ENV_VAR
    ),
) -> None:
    """Print the total task duration."""
    typer.echo(format_total(total_duration(load_organisation(data))))
