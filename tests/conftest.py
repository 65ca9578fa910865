"""Shared fixtures for orgtree tests."""

import logging

import pytest

from orgtree.domain.organisation import Department, Employee, Task, TraversalContext
from orgtree.rendering import OrganisationRenderer, OrganisationTheme, TreeRenderer, TreeTheme
from orgtree.visitors import OrganisationTreeVisitor


class RecordingVisitor:
    """Duck-typed visitor that records every callback it receives."""

    def __init__(self) -> None:
        self.events: list[tuple[str, str, TraversalContext]] = []

    def visit_department(self, department: Department, context: TraversalContext) -> None:
        self.events.append(("department", department.name, context))

    def visit_employee(self, employee: Employee, context: TraversalContext) -> None:
        self.events.append(("employee", employee.name, context))

    def visit_task(self, task: Task, context: TraversalContext) -> None:
        self.events.append(("task", str(task.id), context))

    def kinds(self) -> list[str]:
        return [kind for kind, _, _ in self.events]

    def names(self, kind: str) -> list[str]:
        return [name for k, name, _ in self.events if k == kind]


@pytest.fixture(autouse=True)
def isolated_config(tmp_path, monkeypatch):
    """Keep the user's ~/.orgtree config and ORGTREE_DATA out of tests."""
    monkeypatch.setenv("ORGTREE_CONFIG", str(tmp_path / "no-config.json"))
    monkeypatch.delenv("ORGTREE_DATA", raising=False)


@pytest.fixture(autouse=True)
def restore_package_logger():
    """Undo configure_logging so caplog sees orgtree records in later tests."""
    yield
    package_logger = logging.getLogger("orgtree")
    package_logger.handlers.clear()
    package_logger.setLevel(logging.NOTSET)
    package_logger.propagate = True


@pytest.fixture
def hq() -> Department:
    """HQ [A (worker, 5h + 3h), Eng [B (supervisor, 2h)]]."""
    return Department(
        name="HQ",
        children=[
            Employee(name="A", role="A", tasks=[Task(id=1, duration=5), Task(id=2, duration=3)]),
            Department(
                name="Eng",
                children=[Employee(name="B", role="B", tasks=[Task(id=3, duration=2)])],
            ),
        ],
    )


@pytest.fixture
def nested() -> Department:
    """Three levels with departments and employees mixed at each level.

    Root
    ├── Ops
    │   ├── Infra
    │   │   ├── Ivy (2 tasks)
    │   │   └── Ian (0 tasks)
    │   └── Olga (1 task)
    ├── Empty
    └── Rita (3 tasks)
    """
    return Department(
        name="Root",
        children=[
            Department(
                name="Ops",
                children=[
                    Department(
                        name="Infra",
                        children=[
                            Employee(
                                name="Ivy",
                                role="C",
                                tasks=[Task(id=10, duration=4), Task(id=11, duration=1)],
                            ),
                            Employee(name="Ian", role="A", tasks=[]),
                        ],
                    ),
                    Employee(name="Olga", role="X", tasks=[Task(id=12, duration=6)]),
                ],
            ),
            Department(name="Empty", children=[]),
            Employee(
                name="Rita",
                role="A",
                tasks=[Task(id=13, duration=2), Task(id=14, duration=0), Task(id=15, duration=7)],
            ),
        ],
    )


@pytest.fixture
def recorder() -> RecordingVisitor:
    return RecordingVisitor()


@pytest.fixture
def plain_visitor() -> OrganisationTreeVisitor:
    """Tree visitor with no ANSI styling."""
    return OrganisationTreeVisitor(OrganisationRenderer(OrganisationTheme()), TreeRenderer(TreeTheme()))
