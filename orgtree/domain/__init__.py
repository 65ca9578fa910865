"""Domain layer for orgtree.

Pure models and traversal functions. Nothing in this package does I/O.
"""
