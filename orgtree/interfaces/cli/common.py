"""Shared utilities for orgtree CLI commands.

This module provides common utilities used across CLI commands:
- Loading the organisation (sample or --data file)
- Resolving display settings and building visitors from them
- Logging setup for the --verbose flag
- Formatted output helpers (error, success, header)
"""

import logging
from pathlib import Path
from typing import Optional

import typer
from rich.console import Console
from rich.logging import RichHandler

from orgtree.domain.organisation.models import Department, Employee
from orgtree.domain.shared.result import is_err
from orgtree.global_config import (
    DisplayConfig,
    build_organisation_theme,
    build_tree_theme,
    get_display_config,
)
from orgtree.infrastructure.storage import OrganisationRepository
from orgtree.rendering.organisation import OrganisationRenderer
from orgtree.rendering.tree import TreeRenderer
from orgtree.sample_data import PUSH_BASED
from orgtree.visitors.organisation_tree import OrganisationTreeVisitor

logger = logging.getLogger(__name__)

DATA_ENV_VAR = "ORGTREE_DATA"


def configure_logging(verbose: bool) -> None:
    """Send orgtree log records to stderr, DEBUG when verbose, WARNING otherwise.

    Repeated calls replace the handler instead of stacking a new one.
    Records stop at the orgtree logger so a root handler configured by the
    host does not print them a second time.
    """
    package_logger = logging.getLogger("orgtree")
    package_logger.handlers.clear()
    package_logger.addHandler(RichHandler(console=Console(stderr=True), show_time=False, show_path=False))
    package_logger.setLevel(logging.DEBUG if verbose else logging.WARNING)
    package_logger.propagate = False


def load_organisation(data: Optional[Path]) -> Department | Employee:
    """Load the organisation to report on.

    Args:
        data: JSON file from --data / ORGTREE_DATA, or None for the sample.

    Returns:
        Root unit of the organisation.

    Raises:
        typer.Exit: If the file cannot be loaded.
    """
    if data is None:
        logger.debug("No data file given, using the built-in sample")
        return PUSH_BASED

    result = OrganisationRepository().load(data)
    if is_err(result):
        print_error(result.error)
        raise typer.Exit(1)
    return result.value


def resolve_display_config(no_color: bool = False) -> DisplayConfig:
    """Global display config with the --no-color flag applied."""
    config = get_display_config()
    if no_color:
        config = config.model_copy(update={"color": False})
    return config


def create_tree_visitor(config: DisplayConfig) -> OrganisationTreeVisitor:
    """Build an OrganisationTreeVisitor themed from the display config."""
    return OrganisationTreeVisitor(
        OrganisationRenderer(build_organisation_theme(config)),
        TreeRenderer(build_tree_theme(config)),
    )


def print_error(msg: str) -> None:
    """Print a formatted error message.

    Args:
        msg: Error message to display
    """
    typer.echo(typer.style(f"Error: {msg}", fg=typer.colors.RED), err=True)


def print_success(msg: str) -> None:
    """Print a formatted success message.

    Args:
        msg: Success message to display
    """
    typer.echo(typer.style(msg, fg=typer.colors.GREEN))


def print_separator(char: str = "=", width: int = 60) -> None:
    """Print a separator line."""
    typer.echo(char * width)


def print_header(title: str, width: int = 60) -> None:
    """Print a formatted header with separators."""
    print_separator("=", width)
    typer.echo(title)
    print_separator("=", width)


__all__ = [
    "DATA_ENV_VAR",
    "configure_logging",
    "load_organisation",
    "resolve_display_config",
    "create_tree_visitor",
    "print_error",
    "print_success",
    "print_separator",
    "print_header",
]
