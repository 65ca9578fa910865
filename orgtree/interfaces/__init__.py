"""Interface layer for orgtree.

- cli: Typer command-line application
"""
