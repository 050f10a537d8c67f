"""Export selected themes as CSS blocks under mapped variable names."""

from __future__ import annotations

import json
import logging
import re
from dataclasses import dataclass, field
from typing import Mapping, Sequence

from themevars.core.resolver import VariableResolver
from themevars.core.values import Theme
from themevars.errors import ErrorCode, ThemeVarsError

logger = logging.getLogger(__name__)

ROOT_SELECTOR = ":root"

# Target (exported) name -> source name inside each theme.
DEFAULT_MAPPING: dict[str, str] = {
    "--color-primary": "--primary",
    "--color-secondary": "--secondary",
    "--color-success": "--success",
    "--color-danger": "--danger",
    "--color-warning": "--warning",
    "--color-info": "--info",
    "--background": "--bg",
    "--foreground": "--text",
}

_WHITESPACE_RE = re.compile(r"\s+")


@dataclass(frozen=True, slots=True)
class SavedMapping:
    """A named mapping kept in settings for reuse."""

    name: str
    mapping: dict[str, str] = field(default_factory=dict)

    def to_dict(self) -> dict[str, object]:
        return {"name": self.name, "mapping": dict(self.mapping)}


def parse_mapping(text: str) -> dict[str, str]:
    """Parse mapping JSON text into an ordered target -> source dict.

    Raises ThemeVarsError for empty text, invalid JSON, or anything other
    than an object of strings.
    """
    if not text.strip():
        raise ThemeVarsError(ErrorCode.MAPPING_REQUIRED)
    try:
        data = json.loads(text)
    except json.JSONDecodeError as exc:
        raise ThemeVarsError(
            ErrorCode.MAPPING_INVALID_JSON,
            details={"line": exc.lineno, "column": exc.colno},
        ) from exc
    return validate_mapping(data)


def validate_mapping(data: object) -> dict[str, str]:
    if not isinstance(data, dict):
        raise ThemeVarsError(
            ErrorCode.MAPPING_INVALID_FORMAT,
            details={"type": type(data).__name__},
        )
    mapping: dict[str, str] = {}
    for target, source in data.items():
        if not isinstance(source, str):
            raise ThemeVarsError(ErrorCode.MAPPING_INVALID_FORMAT, details={"key": target})
        mapping[target] = source
    return mapping


def upsert_mapping(saved: Sequence[SavedMapping], mapping: SavedMapping) -> list[SavedMapping]:
    """Replace a saved mapping of the same name, appending it last."""
    return [item for item in saved if item.name != mapping.name] + [mapping]


def theme_selector(theme_name: str) -> str:
    return f".theme-{_WHITESPACE_RE.sub('-', theme_name.lower())}"


def generate_css(
    mapping: Mapping[str, str],
    themes: Sequence[Theme],
    root_theme: Theme | None = None,
    resolver: VariableResolver | None = None,
) -> str:
    """Render one block per theme, then a ``:root`` block for ``root_theme``.

    Inside theme blocks a missing source becomes a comment line; the root
    block leaves it out. Output depends only on the order of ``mapping``,
    ``themes`` and each theme's variables.
    """
    if resolver is None:
        resolver = VariableResolver(themes if root_theme is None else [*themes, root_theme])

    output: list[str] = []
    for theme in themes:
        output.append(f"/* {theme.name} */\n")
        output.append(f"{theme_selector(theme.name)} {{\n")
        for target, source in mapping.items():
            value = _export_value(resolver, theme, source)
            if value is None:
                logger.debug("export: %s has no %s", theme.name, source)
                output.append(f"  /* {target}: {source} not found */\n")
            else:
                output.append(f"  {target}: {value};\n")
        output.append("}\n\n")

    if root_theme is not None:
        output.append(f"{ROOT_SELECTOR} {{\n")
        for target, source in mapping.items():
            value = _export_value(resolver, root_theme, source)
            if value is not None:
                output.append(f"  {target}: {value};\n")
        output.append("}\n")

    return "".join(output)


def _export_value(resolver: VariableResolver, theme: Theme, source: str) -> str | None:
    raw = theme.get(source)
    if not raw:
        return None
    if resolver.get_theme(theme.name) is not theme:
        resolver = VariableResolver([theme])
    return resolver.resolve(raw, theme.name).output_value
