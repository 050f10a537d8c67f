"""Raw value model: references, multi-valued entries and themes."""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from typing import Mapping

SEPARATOR = " | "
VARIABLE_PREFIX = "--"

_REFERENCE_RE = re.compile(r"^\s*var\(\s*(--[\w-]+)\s*\)\s*$")


def normalize_name(name: str) -> str:
    """Return ``name`` trimmed and carrying the ``--`` prefix."""
    cleaned = name.strip()
    if not cleaned.startswith(VARIABLE_PREFIX):
        cleaned = f"{VARIABLE_PREFIX}{cleaned}"
    return cleaned


def strip_prefix(name: str) -> str:
    cleaned = name.strip()
    if cleaned.startswith(VARIABLE_PREFIX):
        return cleaned[len(VARIABLE_PREFIX):]
    return cleaned


def reference_name(value: str) -> str | None:
    """Return the referenced variable when ``value`` is exactly ``var(--name)``.

    Values that mix a literal with a reference (``1px solid var(--border)``)
    are literals and return None.
    """
    match = _REFERENCE_RE.match(value)
    if match is None:
        return None
    return match.group(1)


def is_multi_value(value: str) -> bool:
    return SEPARATOR in value


def split_values(value: str) -> list[str]:
    """Split a multi-valued entry on the top-level separator."""
    return value.split(SEPARATOR)


def join_values(values: list[str]) -> str:
    return SEPARATOR.join(values)


@dataclass(frozen=True, slots=True)
class RawValue:
    """A raw property value broken into its alternatives."""

    text: str
    parts: tuple[str, ...]

    @property
    def is_multi(self) -> bool:
        return len(self.parts) > 1

    @property
    def references(self) -> tuple[str | None, ...]:
        return tuple(reference_name(part) for part in self.parts)


def parse_value(text: str) -> RawValue:
    if is_multi_value(text):
        return RawValue(text=text, parts=tuple(split_values(text)))
    return RawValue(text=text, parts=(text,))


@dataclass(frozen=True, slots=True)
class Theme:
    """A named collection of variables, in insertion order."""

    name: str
    variables: dict[str, str] = field(default_factory=dict)

    def get(self, name: str) -> str | None:
        """Look up a variable by name, with or without the ``--`` prefix."""
        value = self.variables.get(name)
        if value is None:
            value = self.variables.get(normalize_name(name))
        return value

    def __contains__(self, name: object) -> bool:
        return isinstance(name, str) and self.get(name) is not None

    @classmethod
    def from_dict(cls, data: Mapping[str, object]) -> "Theme":
        name = data.get("name")
        variables = data.get("variables")
        if not isinstance(name, str) or not isinstance(variables, Mapping):
            raise ValueError("Theme record needs a string 'name' and a 'variables' object")
        return cls(
            name=name,
            variables={str(key): str(value) for key, value in variables.items()},
        )

    def to_dict(self) -> dict[str, object]:
        return {"name": self.name, "variables": dict(self.variables)}
