"""Shared domain utilities for orgtree.

Example usage:
    >>> from orgtree.domain.shared import Ok, Err, Result, is_ok
    >>>
    >>> def find_department(name: str) -> Result[dict, str]:
    ...     if name == "not-found":
    ...         return Err("Department not found")
    ...     return Ok({"type": "department", "name": name, "children": []})
"""

from orgtree.domain.shared.result import (
    Err,
    Ok,
    Result,
    flat_map,
    is_err,
    is_ok,
    unwrap_or,
)

__all__ = [
    "Ok",
    "Err",
    "Result",
    "is_ok",
    "is_err",
    "flat_map",
    "unwrap_or",
]
