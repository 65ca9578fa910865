"""Repository for organisation trees stored as JSON.

Wraps JsonStorage and validates the document into domain models,
returning Result types for explicit error handling.
"""

import logging
from pathlib import Path
from typing import Any

from pydantic import TypeAdapter, ValidationError

from orgtree.domain.organisation.models import Department, Employee, Unit
from orgtree.domain.shared.result import Err, Ok, Result, flat_map, is_err
from orgtree.infrastructure.storage.json_storage import JsonStorage

logger = logging.getLogger(__name__)

_UNIT_ADAPTER: TypeAdapter[Department | Employee] = TypeAdapter(Unit)


class OrganisationRepository:
    """Read-only repository for organisation trees.

    The file holds one unit in the model's shape: a department with
    "children" or an employee with "role" and "tasks", each tagged
    with a "type" field.
    """

    def __init__(self, storage: JsonStorage | None = None) -> None:
        """Initialize the repository.

        Args:
            storage: JsonStorage instance to use. Creates new one if not provided.
        """
        self._storage = storage or JsonStorage()

    def load(self, path: Path) -> Result[Department | Employee, str]:
        """Load an organisation tree from a JSON file.

        Args:
            path: Path to the JSON document.

        Returns:
            Ok(unit) with the root unit, Err(str) with error message if failed.
        """
        result = flat_map(self._storage.load_json(path), lambda data: self.parse(data, source=str(path)))
        if is_err(result):
            logger.warning(f"Could not load organisation: {result.error}")
        return result

    def parse(self, data: Any, source: str = "<data>") -> Result[Department | Employee, str]:
        """Validate already-decoded JSON into a unit tree.

        Args:
            data: Decoded JSON document.
            source: Where the data came from, used in error messages.

        Returns:
            Ok(unit) if the data has the right shape, Err(str) otherwise.
        """
        try:
            unit = _UNIT_ADAPTER.validate_python(data)
        except ValidationError as e:
            return Err(f"Invalid organisation data in {source}: {e}")

        logger.debug(f"Loaded organisation '{unit.name}' from {source}")
        return Ok(unit)
