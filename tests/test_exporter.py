"""Tests for themevars.core.exporter."""

from __future__ import annotations

import json

import pytest

from themevars.core.exporter import (
    DEFAULT_MAPPING,
    SavedMapping,
    generate_css,
    parse_mapping,
    theme_selector,
    upsert_mapping,
)
from themevars.core.values import Theme
from themevars.errors import ErrorCode, ThemeVarsError

LIGHT = Theme(
    "Light Theme",
    {"--brand": "#3b82f6", "--color-primary": "var(--brand)", "--bg": "#ffffff"},
)
DARK = Theme("Dark", {"--color-primary": "#60a5fa"})


class TestParseMapping:
    def test_preserves_declaration_order(self):
        mapping = parse_mapping('{"--b": "--y", "--a": "--x"}')
        assert list(mapping.items()) == [("--b", "--y"), ("--a", "--x")]

    @pytest.mark.parametrize(
        ("text", "code"),
        [
            ("", ErrorCode.MAPPING_REQUIRED),
            ("   ", ErrorCode.MAPPING_REQUIRED),
            ("{not json", ErrorCode.MAPPING_INVALID_JSON),
            ('["--a", "--b"]', ErrorCode.MAPPING_INVALID_FORMAT),
            ("null", ErrorCode.MAPPING_INVALID_FORMAT),
            ('{"--a": 3}', ErrorCode.MAPPING_INVALID_FORMAT),
        ],
    )
    def test_rejections(self, text, code):
        with pytest.raises(ThemeVarsError) as excinfo:
            parse_mapping(text)
        assert excinfo.value.code is code

    def test_default_mapping_is_valid(self):
        assert parse_mapping(json.dumps(DEFAULT_MAPPING)) == DEFAULT_MAPPING


def test_theme_selector():
    assert theme_selector("Light  Theme") == ".theme-light-theme"
    assert theme_selector("Dark") == ".theme-dark"


def test_generate_css_blocks():
    mapping = {"--primary": "--color-primary", "--background": "--bg"}
    css = generate_css(mapping, [LIGHT, DARK], LIGHT)
    assert css == (
        "/* Light Theme */\n"
        ".theme-light-theme {\n"
        "  --primary: #3b82f6;\n"
        "  --background: #ffffff;\n"
        "}\n"
        "\n"
        "/* Dark */\n"
        ".theme-dark {\n"
        "  --primary: #60a5fa;\n"
        "  /* --background: --bg not found */\n"
        "}\n"
        "\n"
        ":root {\n"
        "  --primary: #3b82f6;\n"
        "  --background: #ffffff;\n"
        "}\n"
    )


def test_missing_source_is_a_comment_not_an_error():
    css = generate_css({"--primary": "--color-primary"}, [Theme("Bare", {"--x": "1"})])
    assert "/* --primary: --color-primary not found */" in css
    assert ":root" not in css


def test_root_block_omits_missing_sources():
    css = generate_css({"--background": "--bg"}, [DARK], DARK)
    root = css.split(":root {\n", 1)[1]
    assert root == "}\n"


def test_unresolvable_reference_is_emitted_as_written():
    theme = Theme("T", {"--a": "var(--gone)", "--loop": "var(--loop)"})
    css = generate_css({"--x": "--a", "--y": "--loop"}, [theme])
    assert "  --x: var(--gone);\n" in css
    assert "  --y: var(--loop);\n" in css


def test_mutual_cycle_emits_the_reference_that_closes_it():
    theme = Theme("T", {"--a": "var(--b)", "--b": "var(--a)"})
    css = generate_css({"--x": "--a", "--y": "--b"}, [theme])
    assert "  --x: var(--b);\n" in css
    assert "  --y: var(--a);\n" in css


def test_multi_valued_source_stays_on_one_line():
    theme = Theme("T", {"--pad": "var(--gap) | 1rem", "--gap": "4px", "--ref": "var(--pad)"})
    css = generate_css({"--p": "--pad", "--r": "--ref"}, [theme])
    assert "  --p: var(--gap) | 1rem;\n" in css
    assert "  --r: 4px | 1rem;\n" in css


def test_output_is_reproducible():
    mapping = dict(DEFAULT_MAPPING)
    assert generate_css(mapping, [LIGHT, DARK], DARK) == generate_css(mapping, [LIGHT, DARK], DARK)


def test_upsert_mapping_replaces_by_name():
    saved = [SavedMapping("a", {"--x": "--y"}), SavedMapping("b", {})]
    updated = upsert_mapping(saved, SavedMapping("a", {"--z": "--w"}))
    assert [item.name for item in updated] == ["b", "a"]
    assert updated[-1].mapping == {"--z": "--w"}
