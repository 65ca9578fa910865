"""Storage infrastructure for orgtree.

Read-only loading of organisation trees, using Result monads for explicit
error handling.
"""

from orgtree.infrastructure.storage.json_storage import JsonStorage
from orgtree.infrastructure.storage.repositories import OrganisationRepository

__all__ = [
    "JsonStorage",
    "OrganisationRepository",
]
