"""CLI interface for orgtree using Typer.

Usage:
    orgtree show                # Total duration plus both tree reports
    orgtree tree -s employees   # Tree report for one scope
    orgtree total               # Total task duration only
    orgtree sample              # Dump the sample organisation as JSON

The CLI is structured as:
- app: Main Typer application
- commands/: Individual command groups (report, data)
- common.py: Shared utilities for CLI commands
- main.py: Entry point that runs the app
"""

from pathlib import Path
from typing import Optional

import typer

from orgtree import __version__
from orgtree.interfaces.cli.commands import data, report
from orgtree.interfaces.cli.commands.report import TreeScope
from orgtree.interfaces.cli.common import DATA_ENV_VAR, configure_logging

app = typer.Typer(
    name="orgtree",
    help="Organisation tree reports",
    add_completion=False,
    no_args_is_help=True,
)


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        typer.echo(f"orgtree version {__version__}")
        raise typer.Exit()


@app.callback()
def main(
    version: Optional[bool] = typer.Option(
        None,
        "--version",
        "-V",
        help="Show version and exit",
        callback=version_callback,
        is_eager=True,
    ),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Log debug output to stderr"),
) -> None:
    """orgtree - walk an organisation of departments, employees and tasks.

    Reports the total task duration and renders the organisation as a tree.
    """
    configure_logging(verbose)


# =============================================================================
# Register Command Groups
# =============================================================================

app.add_typer(report.app, name="report")
app.add_typer(data.app, name="data")


# =============================================================================
# Top-Level Shortcuts for Common Commands
# =============================================================================


@app.command("show")
def show(
    data_file: Optional[Path] = typer.Option(
        None, "--data", "-d", help="Organisation JSON file (default: built-in sample)", envvar=DATA_ENV_VAR
    ),
    no_color: bool = typer.Option(False, "--no-color", help="Disable ANSI styling"),
) -> None:
    """Full report (shortcut for 'report all')."""
    report.report(data=data_file, no_color=no_color)


@app.command("tree")
def tree(
    scope: TreeScope = typer.Option(TreeScope.UNITS, "--scope", "-s", help="Nodes to include"),
    data_file: Optional[Path] = typer.Option(
        None, "--data", "-d", help="Organisation JSON file (default: built-in sample)", envvar=DATA_ENV_VAR
    ),
    no_color: bool = typer.Option(False, "--no-color", help="Disable ANSI styling"),
) -> None:
    """Print the tree (shortcut for 'report tree')."""
    report.tree(scope=scope, data=data_file, no_color=no_color)


@app.command("total")
def total(
    data_file: Optional[Path] = typer.Option(
        None, "--data", "-d", help="Organisation JSON file (default: built-in sample)", envvar=DATA_ENV_VAR
    ),
) -> None:
    """Print the total duration (shortcut for 'report total')."""
    report.total(data=data_file)


@app.command("sample")
def sample(
    indent: int = typer.Option(2, "--indent", help="JSON indentation"),
) -> None:
    """Dump the sample organisation (shortcut for 'data sample')."""
    data.sample(indent=indent)


__all__ = ["app"]
