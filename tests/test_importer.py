"""Tests for themevars.core.importer."""

from __future__ import annotations

import json

import pytest

from themevars.core.importer import (
    build_theme,
    find_duplicate_keys,
    merge_rows,
    parse_css_variables,
    parse_import_text,
    theme_to_rows,
)
from themevars.errors import ErrorCode, ThemeVarsError

CSS_BLOCK = """
:root {
  --bg : #ffffff;
  --text:#000;
  --shadow: 0 1px 3px rgba(0,0,0,0.12);
  color: red;
}
"""


def test_parse_css_variables():
    assert parse_css_variables(CSS_BLOCK) == [
        ("--bg", "#ffffff"),
        ("--text", "#000"),
        ("--shadow", "0 1px 3px rgba(0,0,0,0.12)"),
    ]


class TestParseImportText:
    def test_json_record(self):
        text = json.dumps({"name": "Ocean", "variables": {"--bg": "#003", "--fg": "#fff"}})
        draft = parse_import_text(text)
        assert draft.name == "Ocean"
        assert draft.rows == [("--bg", "#003"), ("--fg", "#fff")]

    def test_css_fallback(self):
        draft = parse_import_text(CSS_BLOCK)
        assert draft.name is None
        assert len(draft.rows) == 3

    def test_json_without_record_keys_rejected(self):
        with pytest.raises(ThemeVarsError) as excinfo:
            parse_import_text('{"theme": "x"}')
        assert excinfo.value.code is ErrorCode.IMPORT_INVALID_FORMAT

    def test_json_scalar_rejected(self):
        with pytest.raises(ThemeVarsError) as excinfo:
            parse_import_text("42")
        assert excinfo.value.code is ErrorCode.IMPORT_INVALID_FORMAT

    def test_no_variables_found(self):
        with pytest.raises(ThemeVarsError) as excinfo:
            parse_import_text("body { color: red; }")
        assert excinfo.value.code is ErrorCode.IMPORT_NO_VARIABLES
        assert excinfo.value.message == "No valid variables found."


class TestBuildTheme:
    def test_duplicate_keys_become_multi_valued(self):
        rows = [("--gap", "4px"), ("--bg", "#fff"), ("--gap", "1rem")]
        assert find_duplicate_keys(rows) == ["--gap"]
        theme = build_theme("Compact", rows)
        assert theme.variables == {"--gap": "4px | 1rem", "--bg": "#fff"}

    def test_blank_rows_are_dropped(self):
        assert merge_rows([("", "1px"), ("--a", "  "), (" --b ", " 2px ")]) == {"--b": "2px"}

    def test_name_required(self):
        with pytest.raises(ThemeVarsError) as excinfo:
            build_theme("  ", [("--a", "1")])
        assert excinfo.value.code is ErrorCode.THEME_NAME_REQUIRED

    def test_name_must_be_unique(self):
        with pytest.raises(ThemeVarsError) as excinfo:
            build_theme("Dark", [("--a", "1")], existing_names=["Light", "Dark"])
        assert excinfo.value.code is ErrorCode.THEME_EXISTS

    def test_needs_a_variable(self):
        with pytest.raises(ThemeVarsError) as excinfo:
            build_theme("Empty", [("--a", "")])
        assert excinfo.value.code is ErrorCode.THEME_NO_VARIABLES

    def test_rows_round_trip(self):
        theme = build_theme("T", [("--a", "1"), ("--a", "2")])
        assert theme_to_rows(theme) == [("--a", "1 | 2")]
