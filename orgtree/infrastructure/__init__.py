"""Infrastructure layer for orgtree.

Adapters between the pure domain and the outside world:

- storage: reading organisation trees from JSON files
"""

from orgtree.infrastructure.storage import JsonStorage, OrganisationRepository

__all__ = [
    "JsonStorage",
    "OrganisationRepository",
]
