"""orgtree CLI.

This module re-exports the CLI from orgtree.interfaces.cli so that
`python -m orgtree.cli` works as a shortcut.
"""

from orgtree.interfaces.cli import app
from orgtree.interfaces.cli.main import main

__all__ = ["app", "main"]

if __name__ == "__main__":
    main()
