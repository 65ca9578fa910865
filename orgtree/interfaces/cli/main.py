"""Entry point for the orgtree CLI.

Usage:
    python -m orgtree.interfaces.cli.main

Or via installed entry point:
    orgtree <command>
"""

from orgtree.interfaces.cli import app


def main() -> None:
    """Run the orgtree CLI application."""
    app()


if __name__ == "__main__":
    main()
