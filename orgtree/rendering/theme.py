"""Colour and glyph tables for the renderers.

Themes are frozen value objects. Styles are plain str -> str callables so a
theme without colour just uses the identity function.
"""

from collections.abc import Callable, Mapping
from dataclasses import dataclass, field

import typer

from orgtree.domain.organisation.models import EmployeeRole

Style = Callable[[str], str]

UNKNOWN_ROLE = "Unknown Role"

ROLE_LABELS: dict[str, str] = {
    EmployeeRole.MANAGER.value: "Manager",
    EmployeeRole.SUPERVISOR.value: "Supervisor",
    EmployeeRole.WORKER.value: "Engineer",
    EmployeeRole.CONTRACTOR.value: "Contractor",
}

# Contractors have no glyph of their own and use the unknown-person glyph.
EMPLOYEE_GLYPHS: dict[str, str] = {
    EmployeeRole.WORKER.value: "👩‍💻",
    EmployeeRole.SUPERVISOR.value: "👩‍⚕️",
    EmployeeRole.MANAGER.value: "👩‍💼",
}


def plain(text: str) -> str:
    """Identity style, used when colour is off."""
    return text


def styled(**styles: object) -> Style:
    """Return a style that wraps text in ANSI codes via typer.style.

    Example:
        warn = styled(fg=typer.colors.YELLOW, bold=True)
        warn("careful")
    """

    def apply(text: str) -> str:
        return typer.style(text, **styles)

    return apply


def role_label(role: str) -> str:
    """Human-readable label for a role code, "Unknown Role" if unrecognised."""
    return ROLE_LABELS.get(role, UNKNOWN_ROLE)


@dataclass(frozen=True)
class OrganisationStyle:
    """Styles applied to each part of a rendered label."""

    department: Style = plain
    employee: Style = plain
    role: Style = plain
    task: Style = plain


@dataclass(frozen=True)
class RoleDecorators:
    """Brackets placed around the role label."""

    start: str = "≺🎖️"
    end: str = "≻"


@dataclass(frozen=True)
class OrganisationDecoration:
    """Glyphs used by the organisation renderer."""

    department: str = "🏢"
    employees: Mapping[str, str] = field(default_factory=lambda: dict(EMPLOYEE_GLYPHS))
    unknown_employee: str = "👤"
    task: str = "🛠️"
    task_separator: str = "|"
    role_decorators: RoleDecorators = field(default_factory=RoleDecorators)


@dataclass(frozen=True)
class OrganisationTheme:
    """Everything the organisation renderer needs to format a label."""

    style: OrganisationStyle = field(default_factory=OrganisationStyle)
    decoration: OrganisationDecoration = field(default_factory=OrganisationDecoration)
    role_label: Callable[[str], str] = role_label


@dataclass(frozen=True)
class TreeTheme:
    """Glyphs for tree branches.

    Attributes:
        style: Applied to every branch glyph
        end: Branch for the last child
        middle: Branch for any other child
        line: Continuation bar under an unfinished ancestor
        indent_space: Blank of the same width under a finished ancestor
    """

    style: Style = plain
    end: str = "└── "
    middle: str = "├── "
    line: str = "│   "
    indent_space: str = "    "


def default_organisation_theme(color: bool = True) -> OrganisationTheme:
    """Build the stock organisation theme.

    Args:
        color: Emit ANSI styling when True

    Returns:
        Theme with the default glyph tables
    """
    if not color:
        return OrganisationTheme()

    dim = styled(dim=True)
    return OrganisationTheme(
        style=OrganisationStyle(
            department=styled(fg=typer.colors.BRIGHT_BLACK, bold=True),
            employee=styled(bold=True),
            role=styled(fg=typer.colors.YELLOW),
            task=styled(fg=typer.colors.BRIGHT_GREEN),
        ),
        decoration=OrganisationDecoration(task_separator=dim("|")),
    )


def default_tree_theme(color: bool = True) -> TreeTheme:
    """Build the stock tree theme, dimmed when color is True."""
    if not color:
        return TreeTheme()
    return TreeTheme(style=styled(dim=True))
