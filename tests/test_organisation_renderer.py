"""Tests for unit label formatting."""

from rich.text import Text

from orgtree.domain.organisation import Department, Employee, Task
from orgtree.rendering import (
    OrganisationDecoration,
    OrganisationRenderer,
    OrganisationTheme,
    RoleDecorators,
    default_organisation_theme,
    role_label,
)


def tasks(n: int) -> list[Task]:
    return [Task(id=i, duration=1) for i in range(n)]


class TestRenderDepartment:
    def test_glyph_and_name(self):
        renderer = OrganisationRenderer(OrganisationTheme())
        assert renderer.render_department(Department(name="Engineering")) == "🏢 Engineering"

    def test_custom_glyph(self):
        theme = OrganisationTheme(decoration=OrganisationDecoration(department="[D]"))
        assert OrganisationRenderer(theme).render_department(Department(name="Ops")) == "[D] Ops"


class TestRenderEmployee:
    def test_manager(self):
        renderer = OrganisationRenderer(OrganisationTheme())
        employee = Employee(name="Alice", role="C", tasks=tasks(2))
        assert renderer.render_employee(employee) == "👩‍💼 Alice ≺🎖️Manager≻ | 2🛠️"

    def test_supervisor_and_worker(self):
        renderer = OrganisationRenderer(OrganisationTheme())
        assert renderer.render_employee(Employee(name="Bob", role="B", tasks=tasks(1))) == (
            "👩‍⚕️ Bob ≺🎖️Supervisor≻ | 1🛠️"
        )
        assert renderer.render_employee(Employee(name="Carol", role="A")) == "👩‍💻 Carol ≺🎖️Engineer≻ | 0🛠️"

    def test_contractor_uses_unknown_glyph_with_label(self):
        renderer = OrganisationRenderer(OrganisationTheme())
        employee = Employee(name="Vojtech", role="X", tasks=tasks(3))
        assert renderer.render_employee(employee) == "👤 Vojtech ≺🎖️Contractor≻ | 3🛠️"

    def test_unrecognised_role_falls_back(self):
        renderer = OrganisationRenderer(OrganisationTheme())
        employee = Employee(name="Quinn", role="Z", tasks=tasks(1))
        assert renderer.render_employee(employee) == "👤 Quinn ≺🎖️Unknown Role≻ | 1🛠️"

    def test_custom_decorators_and_labels(self):
        theme = OrganisationTheme(
            decoration=OrganisationDecoration(
                employees={"A": "*"},
                unknown_employee="?",
                task="t",
                task_separator="/",
                role_decorators=RoleDecorators(start="(", end=")"),
            ),
            role_label=lambda role: role.lower(),
        )
        renderer = OrganisationRenderer(theme)

        assert renderer.render_employee(Employee(name="Ann", role="A", tasks=tasks(2))) == "* Ann (a) / 2t"
        assert renderer.render_employee(Employee(name="Cy", role="C")) == "? Cy (c) / 0t"

    def test_styled_output_strips_to_plain(self):
        employee = Employee(name="Alice", role="C", tasks=tasks(2))
        styled = OrganisationRenderer(default_organisation_theme(color=True)).render_employee(employee)
        plain = OrganisationRenderer(default_organisation_theme(color=False)).render_employee(employee)

        assert "\x1b[" in styled
        assert Text.from_ansi(styled).plain == plain


def test_role_label():
    assert role_label("C") == "Manager"
    assert role_label("B") == "Supervisor"
    assert role_label("A") == "Engineer"
    assert role_label("X") == "Contractor"
    assert role_label("?") == "Unknown Role"
