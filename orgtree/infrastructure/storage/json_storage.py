"""JSON file reading with Result-based error handling.

Provides a thin wrapper around file I/O for JSON data, returning Result
types instead of raising exceptions.
"""

import json
import logging
from pathlib import Path
from typing import Any

from orgtree.domain.shared.result import Err, Ok, Result

logger = logging.getLogger(__name__)


class JsonStorage:
    """Low-level JSON file input with Result-based error handling.

    This class does not contain any domain logic - just file I/O.

    Example:
        storage = JsonStorage()
        result = storage.load_json(Path("organisation.json"))
        if is_ok(result):
            data = result.value
        else:
            print(f"Error: {result.error}")
    """

    def load_json(self, path: Path) -> Result[Any, str]:
        """Load JSON data from a file.

        Args:
            path: Path to the JSON file to read.

        Returns:
            Ok(data) if successful, Err(str) with error message if failed.
        """
        try:
            if not path.exists():
                return Err(f"File not found: {path}")

            logger.debug(f"Reading JSON from {path}")
            content = path.read_text(encoding="utf-8")
            return Ok(json.loads(content))

        except json.JSONDecodeError as e:
            return Err(f"Invalid JSON in {path}: {e}")
        except PermissionError:
            return Err(f"Permission denied reading {path}")
        except OSError as e:
            return Err(f"Error reading {path}: {e}")
