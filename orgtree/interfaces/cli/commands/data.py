"""Organisation data CLI commands.

Commands for producing and checking organisation JSON files that the
report commands accept through --data.
"""

from pathlib import Path

import typer

from orgtree.domain.organisation.traversal import visit_all_units
from orgtree.domain.shared.result import is_err
from orgtree.infrastructure.storage import OrganisationRepository
from orgtree.interfaces.cli.common import print_error, print_header, print_success
from orgtree.sample_data import PUSH_BASED
from orgtree.visitors.unit_count import UnitCountVisitor

app = typer.Typer(help="Organisation data commands")


@app.command("sample")
def sample(
    indent: int = typer.Option(2, "--indent", help="JSON indentation"),
) -> None:
    """Print the built-in sample organisation as JSON.

    Example:
        orgtree data sample > organisation.json
    """
    typer.echo(PUSH_BASED.model_dump_json(indent=indent))


@app.command("validate")
def validate(
    path: Path = typer.Argument(..., help="Organisation JSON file to check"),
) -> None:
    """Check that a file holds a well-formed organisation and summarise it."""
    result = OrganisationRepository().load(path)
    if is_err(result):
        print_error(result.error)
        raise typer.Exit(1)

    visitor = UnitCountVisitor()
    visit_all_units(result.value, visitor)
    counts = visitor.counts

    print_header(f"Organisation: {result.value.name}")
    typer.echo(f"Departments: {counts.departments}")
    typer.echo(f"Employees:   {counts.employees}")
    typer.echo(f"Tasks:       {counts.tasks}")
    typer.echo(f"Max depth:   {counts.max_depth}")
    print_success(f"{path} is valid")
