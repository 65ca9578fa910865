"""Rendering for orgtree.

Two independent renderers: TreeRenderer draws branch prefixes from a
traversal context, OrganisationRenderer formats unit labels from a theme.
"""

from orgtree.rendering.organisation import OrganisationRenderer
from orgtree.rendering.theme import (
    OrganisationDecoration,
    OrganisationStyle,
    OrganisationTheme,
    RoleDecorators,
    TreeTheme,
    default_organisation_theme,
    default_tree_theme,
    role_label,
)
from orgtree.rendering.tree import TreeRenderer

__all__ = [
    "OrganisationRenderer",
    "TreeRenderer",
    "OrganisationTheme",
    "OrganisationStyle",
    "OrganisationDecoration",
    "RoleDecorators",
    "TreeTheme",
    "default_organisation_theme",
    "default_tree_theme",
    "role_label",
]
