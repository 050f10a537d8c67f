"""Resolution chain steps and results."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Union

from themevars.core.values import SEPARATOR

SEPARATOR_MARKER = "---SEPARATOR---"


@dataclass(frozen=True, slots=True)
class Value:
    """A concrete value visited while resolving: a literal or a reference."""

    text: str

    is_marker = False

    def __str__(self) -> str:
        return self.text


@dataclass(frozen=True, slots=True)
class CircularReference:
    """The named variable was already visited on the current path."""

    name: str

    is_marker = True

    def __str__(self) -> str:
        return f"[circular: {self.name}]"


@dataclass(frozen=True, slots=True)
class MissingVariable:
    name: str

    is_marker = True

    def __str__(self) -> str:
        return f"[variable not found: {self.name}]"


@dataclass(frozen=True, slots=True)
class MissingTheme:
    name: str

    is_marker = True

    def __str__(self) -> str:
        return f"[theme not found: {self.name}]"


@dataclass(frozen=True, slots=True)
class Separator:
    """Boundary between the sub-chains of a multi-valued entry."""

    is_marker = True

    def __str__(self) -> str:
        return SEPARATOR_MARKER


ChainStep = Union[Value, CircularReference, MissingVariable, MissingTheme, Separator]
ErrorStep = Union[CircularReference, MissingVariable, MissingTheme]


@dataclass(frozen=True, slots=True)
class Resolution:
    """Every step visited from ``value`` to its terminal step."""

    value: str
    steps: tuple[ChainStep, ...]

    @property
    def chain(self) -> list[str]:
        return [str(step) for step in self.steps]

    @property
    def terminal(self) -> ChainStep:
        return self.steps[-1]

    @property
    def final_value(self) -> str:
        return str(self.terminal)

    @property
    def is_resolved(self) -> bool:
        """True when every branch ends in a concrete value."""
        return not self.errors

    @property
    def is_reference(self) -> bool:
        return len(self.steps) > 1

    @property
    def errors(self) -> list[ErrorStep]:
        return [
            step
            for step in self.steps
            if isinstance(step, (CircularReference, MissingVariable, MissingTheme))
        ]

    def segments(self) -> list[tuple[ChainStep, ...]]:
        """Split the steps on separators, one segment per sibling sub-chain."""
        groups: list[list[ChainStep]] = [[]]
        for step in self.steps:
            if isinstance(step, Separator):
                groups.append([])
                continue
            groups[-1].append(step)
        return [tuple(group) for group in groups]

    @property
    def output_value(self) -> str:
        """Single-line value: the last concrete value of each segment.

        A branch that ends in a marker contributes the last value visited
        before it, so an unresolvable reference is emitted unchanged.
        """
        finals: list[str] = []
        for segment in self.segments():
            values = [str(step) for step in segment if not step.is_marker]
            if values:
                finals.append(values[-1])
        return SEPARATOR.join(finals)
