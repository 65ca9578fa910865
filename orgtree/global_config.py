"""Global display configuration for orgtree.

Stores user preferences for report rendering in ~/.orgtree/config.json,
or in the file named by the ORGTREE_CONFIG environment variable.

Example config.json:
    {
        "color": false,
        "employee_glyphs": {"X": "🧑‍🔧"},
        "role_labels": {"A": "Worker"}
    }
"""

import logging
import os
from dataclasses import replace
from pathlib import Path
from typing import Optional

from pydantic import BaseModel, Field, ValidationError

from orgtree.domain.shared.result import Err, Ok, Result, is_err, unwrap_or
from orgtree.infrastructure.storage.json_storage import JsonStorage
from orgtree.rendering.theme import (
    ROLE_LABELS,
    UNKNOWN_ROLE,
    OrganisationTheme,
    TreeTheme,
    default_organisation_theme,
    default_tree_theme,
)

logger = logging.getLogger(__name__)

CONFIG_ENV_VAR = "ORGTREE_CONFIG"


class DisplayConfig(BaseModel):
    """Rendering overrides. Unset fields keep the built-in theme."""

    color: bool = True
    department_glyph: Optional[str] = None
    unknown_employee_glyph: Optional[str] = None
    task_glyph: Optional[str] = None
    employee_glyphs: dict[str, str] = Field(default_factory=dict)
    role_labels: dict[str, str] = Field(default_factory=dict)


def get_config_dir() -> Path:
    """Get the orgtree config directory."""
    return Path.home() / ".orgtree"


def get_config_path() -> Path:
    """Resolve the config file, preferring ORGTREE_CONFIG."""
    env_path = os.environ.get(CONFIG_ENV_VAR)
    if env_path:
        return Path(env_path)
    return get_config_dir() / "config.json"


def load_display_config(path: Path) -> Result[DisplayConfig, str]:
    """Load display configuration from a JSON file.

    Args:
        path: Config file to read

    Returns:
        Ok(DisplayConfig), defaults if the file does not exist,
        or Err(str) when the file is unreadable or has the wrong shape
    """
    if not path.exists():
        return Ok(DisplayConfig())

    result = JsonStorage().load_json(path)
    if is_err(result):
        return result

    try:
        return Ok(DisplayConfig.model_validate(result.value))
    except ValidationError as e:
        return Err(f"Invalid display config in {path}: {e}")


def get_display_config() -> DisplayConfig:
    """Load the global display configuration, falling back to defaults."""
    path = get_config_path()
    result = load_display_config(path)
    if is_err(result):
        logger.warning(f"Ignoring display config: {result.error}")
    return unwrap_or(result, DisplayConfig())


def build_organisation_theme(config: DisplayConfig) -> OrganisationTheme:
    """Apply config overrides to the default organisation theme."""
    theme = default_organisation_theme(color=config.color)
    decoration = theme.decoration

    # An empty string is a real override: it blanks the glyph.
    overrides = {
        "department": config.department_glyph,
        "unknown_employee": config.unknown_employee_glyph,
        "task": config.task_glyph,
    }
    decoration = replace(
        decoration,
        **{field: glyph for field, glyph in overrides.items() if glyph is not None},
        employees={**decoration.employees, **config.employee_glyphs},
    )

    labels = {**ROLE_LABELS, **config.role_labels}

    def role_label(role: str) -> str:
        return labels.get(role, UNKNOWN_ROLE)

    return replace(theme, decoration=decoration, role_label=role_label)


def build_tree_theme(config: DisplayConfig) -> TreeTheme:
    """Tree theme for the configured colour setting."""
    return default_tree_theme(color=config.color)
