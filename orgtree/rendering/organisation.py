"""Label formatting for departments and employees.

The renderer knows nothing about tree position, so the same instance can
be shared by any visitor that needs labels.
"""

from orgtree.domain.organisation.models import Department, Employee

from .theme import OrganisationTheme, default_organisation_theme


class OrganisationRenderer:
    """Formats organisation units as single-line labels.

    Example:
        renderer = OrganisationRenderer()
        renderer.render_department(Department(name="Engineering"))
        # 🏢 Engineering
        renderer.render_employee(Employee(name="Alice", role="C", tasks=[...]))
        # 👩‍💼 Alice ≺🎖️Manager≻ | 2🛠️
    """

    def __init__(self, theme: OrganisationTheme | None = None) -> None:
        self._theme = theme or default_organisation_theme()

    def render_department(self, department: Department) -> str:
        """Department glyph followed by its name."""
        theme = self._theme
        return theme.style.department(f"{theme.decoration.department} {department.name}")

    def render_employee(self, employee: Employee) -> str:
        """Role glyph, name, bracketed role label and task count.

        Unrecognised role codes fall back to the unknown-person glyph and
        the "Unknown Role" label.
        """
        theme = self._theme
        decoration = theme.decoration

        glyph = decoration.employees.get(employee.role, decoration.unknown_employee)
        brackets = decoration.role_decorators
        role_text = theme.style.role(f"{brackets.start}{theme.role_label(employee.role)}{brackets.end}")
        tasks_text = theme.style.task(f"{len(employee.tasks)}{decoration.task}")

        return (
            f"{theme.style.employee(f'{glyph} {employee.name}')} "
            f"{role_text} {decoration.task_separator} {tasks_text}"
        )
