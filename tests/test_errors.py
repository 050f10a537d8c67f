"""Tests for themevars.errors."""

from __future__ import annotations

import json
from pathlib import Path

from themevars.errors import (
    ERROR_MESSAGES,
    ErrorCode,
    ThemeVarsError,
    classify_exception,
    format_error_for_user,
)


def test_every_code_has_a_message():
    assert set(ERROR_MESSAGES) == set(ErrorCode)


def test_default_message_and_dict():
    error = ThemeVarsError(ErrorCode.IMPORT_NO_VARIABLES, details={"length": 12})
    assert error.message == "No valid variables found."
    data = error.to_dict()
    assert data["code"] == "IMPORT_NO_VARIABLES"
    assert data["details"] == {"length": 12}
    assert "length=12" in str(error)


def test_classify_exception():
    try:
        json.loads("{")
    except json.JSONDecodeError as exc:
        assert classify_exception(exc).code is ErrorCode.MAPPING_INVALID_JSON

    denied = classify_exception(PermissionError("denied"), Path("out.css"))
    assert denied.code is ErrorCode.FILE_ACCESS_DENIED
    assert denied.path == Path("out.css")

    assert classify_exception(RuntimeError("boom")).code is ErrorCode.OPERATION_FAILED


def test_format_error_for_user():
    error = ThemeVarsError(ErrorCode.THEME_EXISTS, path=Path("/tmp/themes.json"))
    text = format_error_for_user(error)
    assert text.startswith("A theme with this name already exists.")
    assert "themes.json" in text
    assert "OPERATION" not in format_error_for_user(ValueError("bad"))
