"""Tree indentation renderer.

Turns a TraversalContext into the prefix drawn before a node's label.
Whether depth k shows a continuation bar depends on whether the ancestor
at depth k still has siblings to come, which the node's own context does
not carry. The renderer remembers it in a set of active levels that is
updated as nodes are rendered in pre-order.
"""

from orgtree.domain.organisation.types import TraversalContext

from .theme import TreeTheme, default_tree_theme


class TreeRenderer:
    """Stateful indentation renderer for one walk.

    Call render_indent() for a node, then update_active_branch_levels()
    with the same context, for every node in pre-order. The root is
    rendered by the caller without an indent.

    Example:
        renderer = TreeRenderer()
        for context in contexts_in_pre_order:
            prefix = renderer.render_indent(context)
            renderer.update_active_branch_levels(context)

    Rendered output:
        ├── Department A
        │   ├── Employee 1
        │   └── Employee 2
        └── Department B
            └── Employee 3
    """

    def __init__(self, theme: TreeTheme | None = None) -> None:
        self._theme = theme or default_tree_theme()
        self._active_levels: set[int] = set()

    @property
    def active_levels(self) -> frozenset[int]:
        """Levels at which an ancestor still has siblings to come."""
        return frozenset(self._active_levels)

    def render_indent(self, context: TraversalContext) -> str:
        """Compute the prefix for a node.

        Each level above the node gets a continuation bar if it is active,
        blank padding otherwise. The node's own branch glyph follows: the
        end glyph for a last child, the middle glyph otherwise.

        Args:
            context: Context of the node being rendered

        Returns:
            Styled indentation string
        """
        theme = self._theme
        parts = [
            theme.style(theme.line) if level in self._active_levels else theme.indent_space
            for level in range(context.level)
        ]
        parts.append(theme.style(theme.end if context.last else theme.middle))
        return "".join(parts)

    def update_active_branch_levels(self, context: TraversalContext) -> None:
        """Record whether the node's level still has siblings to come.

        A node that is not last keeps its level active so descendants draw
        a bar under it; a last node closes the level.
        """
        if context.last:
            self._active_levels.discard(context.level)
        else:
            self._active_levels.add(context.level)

    def reset(self) -> None:
        """Forget all active levels before walking an unrelated tree."""
        self._active_levels.clear()
