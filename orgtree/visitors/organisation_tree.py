"""Visitor that renders the organisation as an indented tree report."""

from orgtree.domain.organisation.models import Department, Employee
from orgtree.domain.organisation.types import TraversalContext
from orgtree.domain.organisation.visitor import Visitor
from orgtree.rendering.organisation import OrganisationRenderer
from orgtree.rendering.tree import TreeRenderer


class OrganisationTreeVisitor(Visitor[TraversalContext]):
    """Builds a multi-line report, one line per department and employee.

    Running several traversals against the same instance appends their
    reports back to back. Call reset() to start a fresh report.

    Example:
        visitor = OrganisationTreeVisitor()
        visit_all_units(PUSH_BASED, visitor)
        print(visitor.rendered_tree)
    """

    def __init__(
        self,
        organisation_renderer: OrganisationRenderer | None = None,
        tree_renderer: TreeRenderer | None = None,
    ) -> None:
        self._organisation_renderer = organisation_renderer or OrganisationRenderer()
        self._tree_renderer = tree_renderer or TreeRenderer()
        self._lines: list[str] = []

    @property
    def rendered_tree(self) -> str:
        """Accumulated report, each line terminated by a newline."""
        return "".join(f"{line}\n" for line in self._lines)

    def add_to_rendered_tree(self, line: str) -> None:
        self._lines.append(line)

    def visit_department(self, department: Department, context: TraversalContext) -> None:
        label = self._organisation_renderer.render_department(department)

        # The root has no ancestors and no siblings, so no prefix.
        if context.level == 0:
            self.add_to_rendered_tree(label)
            return

        indent = self._tree_renderer.render_indent(context)
        self.add_to_rendered_tree(f"{indent}{label}")
        self._tree_renderer.update_active_branch_levels(context)

    def visit_employee(self, employee: Employee, context: TraversalContext) -> None:
        # Employees are never the root.
        indent = self._tree_renderer.render_indent(context)
        self.add_to_rendered_tree(f"{indent}{self._organisation_renderer.render_employee(employee)}")

    def reset(self) -> None:
        """Drop the accumulated report and the branch state."""
        self._lines.clear()
        self._tree_renderer.reset()
