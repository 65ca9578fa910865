"""Tests for the display configuration."""

import json

from orgtree.domain.organisation import Department, Employee, TraversalContext
from orgtree.domain.shared import is_err
from orgtree.global_config import (
    DisplayConfig,
    build_organisation_theme,
    build_tree_theme,
    get_config_path,
    get_display_config,
    load_display_config,
)
from orgtree.rendering import OrganisationRenderer, TreeRenderer


def test_missing_file_gives_defaults(tmp_path):
    result = load_display_config(tmp_path / "absent.json")
    assert result.value == DisplayConfig()


def test_env_var_selects_file(tmp_path, monkeypatch):
    path = tmp_path / "config.json"
    path.write_text(json.dumps({"color": False, "role_labels": {"A": "Worker"}}), encoding="utf-8")
    monkeypatch.setenv("ORGTREE_CONFIG", str(path))

    assert get_config_path() == path
    config = get_display_config()
    assert config.color is False
    assert config.role_labels == {"A": "Worker"}


def test_invalid_file_falls_back(tmp_path, monkeypatch):
    path = tmp_path / "config.json"
    path.write_text(json.dumps({"color": "sometimes"}), encoding="utf-8")
    monkeypatch.setenv("ORGTREE_CONFIG", str(path))

    assert is_err(load_display_config(path))
    assert get_display_config() == DisplayConfig()


def test_theme_overrides():
    config = DisplayConfig(
        color=False,
        department_glyph="D",
        unknown_employee_glyph="?",
        task_glyph="t",
        employee_glyphs={"X": "x"},
        role_labels={"A": "Worker"},
    )
    renderer = OrganisationRenderer(build_organisation_theme(config))

    assert renderer.render_department(Department(name="HQ")) == "D HQ"
    assert renderer.render_employee(Employee(name="Ann", role="A")) == "👩‍💻 Ann ≺🎖️Worker≻ | 0t"
    assert renderer.render_employee(Employee(name="Vo", role="X")) == "x Vo ≺🎖️Contractor≻ | 0t"
    assert renderer.render_employee(Employee(name="Q", role="Q")) == "? Q ≺🎖️Unknown Role≻ | 0t"


def test_empty_glyph_overrides_blank_the_glyph():
    config = DisplayConfig(
        color=False,
        department_glyph="",
        unknown_employee_glyph="",
        task_glyph="",
        employee_glyphs={"X": ""},
    )
    renderer = OrganisationRenderer(build_organisation_theme(config))

    assert renderer.render_department(Department(name="HQ")) == " HQ"
    assert renderer.render_employee(Employee(name="Vo", role="X")) == " Vo ≺🎖️Contractor≻ | 0"
    assert renderer.render_employee(Employee(name="Q", role="Q")) == " Q ≺🎖️Unknown Role≻ | 0"


def test_no_color_tree_theme():
    renderer = TreeRenderer(build_tree_theme(DisplayConfig(color=False)))
    assert renderer.render_indent(TraversalContext(level=1, last=True)) == "    └── "
