"""CLI command groups for orgtree.

Command groups:
- report: Total duration and tree reports
- data: Sample output and validation of organisation files

Each command group is a Typer app that gets registered
with the main app using app.add_typer().
"""

from orgtree.interfaces.cli.commands import data, report

__all__ = ["report", "data"]
