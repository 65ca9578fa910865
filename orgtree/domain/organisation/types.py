"""Traversal value objects.

Immutable values threaded through a tree walk so that callbacks know
where a node sits without inspecting its ancestors.
"""

from dataclasses import dataclass, replace
from typing import TypeVar


@dataclass(frozen=True)
class TraversalContext:
    """Position of a node during a walk.

    Attributes:
        level: Depth of the node, the root is 0
        last: True when the node is the final one in its parent's list

    Example:
        A              # level 0, last False
        ├── C          # level 1, last False
        │   ├── D      # level 2, last False
        │   └── E      # level 2, last True
        └── B          # level 1, last True

    Subclasses may add fields; child_context() carries them over untouched.
    """

    level: int = 0
    last: bool = False


C = TypeVar("C", bound=TraversalContext)


def child_context(parent: C, index: int, total: int) -> C:
    """Derive the context of the index-th of total children.

    Args:
        parent: Context of the parent node
        index: Zero-based position of the child
        total: Number of siblings including the child

    Returns:
        New context one level deeper, same type as parent
    """
    return replace(parent, level=parent.level + 1, last=index == total - 1)
