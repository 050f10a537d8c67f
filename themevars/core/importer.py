"""Import of pasted theme text and validation of theme forms."""

from __future__ import annotations

import json
import re
from dataclasses import dataclass, field
from typing import Iterable, Mapping

from themevars.core.values import Theme, join_values
from themevars.errors import ErrorCode, ThemeVarsError

_CSS_DECLARATION_RE = re.compile(r"(--[\w-]+)\s*:\s*([^;]+);")

VariableRow = tuple[str, str]


@dataclass(frozen=True, slots=True)
class ThemeDraft:
    """Variables parsed from pasted text, not yet validated into a Theme."""

    name: str | None
    rows: list[VariableRow] = field(default_factory=list)


def parse_css_variables(text: str) -> list[VariableRow]:
    """Extract ``--name: value;`` declarations in document order."""
    return [
        (match.group(1).strip(), match.group(2).strip())
        for match in _CSS_DECLARATION_RE.finditer(text)
    ]


def parse_import_text(text: str) -> ThemeDraft:
    """Parse a JSON theme record, falling back to CSS declarations.

    JSON that parses but is not a ``{"name", "variables"}`` record is
    rejected. Text that is not JSON and holds no declarations is rejected
    as having no valid variables.
    """
    try:
        data = json.loads(text)
    except json.JSONDecodeError:
        rows = parse_css_variables(text)
        if not rows:
            raise ThemeVarsError(ErrorCode.IMPORT_NO_VARIABLES)
        return ThemeDraft(name=None, rows=rows)

    if not isinstance(data, dict):
        raise ThemeVarsError(ErrorCode.IMPORT_INVALID_FORMAT, details={"type": type(data).__name__})
    name = data.get("name")
    variables = data.get("variables")
    if not name or not isinstance(name, str) or not isinstance(variables, Mapping):
        raise ThemeVarsError(ErrorCode.IMPORT_INVALID_FORMAT)
    return ThemeDraft(
        name=name,
        rows=[(str(key), str(value)) for key, value in variables.items()],
    )


def find_duplicate_keys(rows: Iterable[VariableRow]) -> list[str]:
    """Names that appear more than once, in first-repeat order."""
    seen: set[str] = set()
    duplicates: list[str] = []
    for key, _value in rows:
        cleaned = key.strip()
        if not cleaned:
            continue
        if cleaned in seen and cleaned not in duplicates:
            duplicates.append(cleaned)
        seen.add(cleaned)
    return duplicates


def merge_rows(rows: Iterable[VariableRow]) -> dict[str, str]:
    """Collapse rows into variables; repeated names become multi-valued."""
    grouped: dict[str, list[str]] = {}
    for key, value in rows:
        name = key.strip()
        cleaned = value.strip()
        if not name or not cleaned:
            continue
        grouped.setdefault(name, []).append(cleaned)
    return {name: join_values(values) for name, values in grouped.items()}


def build_theme(
    name: str,
    rows: Iterable[VariableRow],
    existing_names: Iterable[str] = (),
) -> Theme:
    """Validate a theme form and build the Theme it describes."""
    cleaned_name = name.strip()
    if not cleaned_name:
        raise ThemeVarsError(ErrorCode.THEME_NAME_REQUIRED)
    if cleaned_name in set(existing_names):
        raise ThemeVarsError(ErrorCode.THEME_EXISTS, details={"name": cleaned_name})

    variables = merge_rows(rows)
    if not variables:
        raise ThemeVarsError(ErrorCode.THEME_NO_VARIABLES)
    return Theme(name=cleaned_name, variables=variables)


def theme_to_rows(theme: Theme) -> list[VariableRow]:
    """Rows for editing a theme; multi-valued entries stay on one row."""
    return list(theme.variables.items())
