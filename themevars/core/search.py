"""Search over variable names across themes."""

from __future__ import annotations

from collections import OrderedDict
from dataclasses import dataclass, field
from typing import Iterable, Sequence

from themevars.core.chain import Resolution
from themevars.core.resolver import VariableResolver
from themevars.core.values import Theme, is_multi_value, normalize_name, split_values, strip_prefix

ABSENT_VALUE = "—"
RECENT_NEEDLES = 8

IndexEntry = tuple[str, str]


@dataclass(frozen=True, slots=True)
class SearchRow:
    """One result line: a theme and the value it holds for the variable.

    Rows expanded from a multi-valued entry carry a 1-based ``position`` and
    ``is_duplicate`` so callers can group them.
    """

    theme: str
    theme_name: str
    variable: str | None
    value: str
    resolution: Resolution | None = None
    is_duplicate: bool = False
    position: int | None = None

    @property
    def chain(self) -> list[str] | None:
        if self.resolution is None:
            return None
        return self.resolution.chain

    @property
    def is_absent(self) -> bool:
        return self.resolution is None


@dataclass(frozen=True, slots=True)
class SearchResult:
    query: str
    partial: bool
    rows: list[SearchRow] = field(default_factory=list)

    def for_theme(self, theme_name: str) -> list[SearchRow]:
        return [row for row in self.rows if row.theme_name == theme_name]


def tokenize(name: str) -> list[str]:
    """Index tokens for a variable name: the bare name and its segments."""
    bare = strip_prefix(name).lower()
    tokens = [bare]
    for segment in bare.split("-"):
        if segment and segment not in tokens:
            tokens.append(segment)
    return tokens


class SearchIndex:
    """Token index over ``(theme, variable)`` pairs.

    Partial queries scan the distinct tokens rather than every variable of
    every theme, and a needle that extends a recent one only rescans that
    needle's tokens. The bare name is itself a token, so the union of
    matching tokens equals a linear substring scan.
    """

    def __init__(
        self,
        themes: Sequence[Theme] = (),
        resolver: VariableResolver | None = None,
        recent_needles: int = RECENT_NEEDLES,
    ) -> None:
        self._resolver = resolver if resolver is not None else VariableResolver(themes)
        self._themes: Sequence[Theme] = ()
        self._tokens: dict[str, list[IndexEntry]] = {}
        self._positions: dict[IndexEntry, tuple[int, int]] = {}
        self._recent_needles = max(recent_needles, 0)
        self._recent: OrderedDict[str, tuple[str, ...]] = OrderedDict()
        self.rebuild(themes)

    @property
    def themes(self) -> Sequence[Theme]:
        return self._themes

    def rebuild(self, themes: Sequence[Theme]) -> None:
        self._themes = themes
        self._resolver.set_themes(themes)
        self._tokens = {}
        self._positions = {}
        self._recent.clear()
        for theme_index, theme in enumerate(themes):
            for variable_index, name in enumerate(theme.variables):
                entry = (theme.name, name)
                self._positions.setdefault(entry, (theme_index, variable_index))
                for token in tokenize(name):
                    self._tokens.setdefault(token, []).append(entry)

    def entries(self, token: str) -> list[IndexEntry]:
        return list(self._tokens.get(token.lower(), []))

    def query(self, term: str, *, partial: bool = False) -> SearchResult:
        if partial:
            return self._query_partial(term)
        return self._query_exact(term)

    def _query_exact(self, term: str) -> SearchResult:
        cleaned = term.strip()
        if not cleaned:
            return SearchResult(query="", partial=False)
        variable = normalize_name(cleaned)

        rows: list[SearchRow] = []
        for theme in self._themes:
            raw = theme.variables.get(variable)
            if not raw:
                rows.append(_absent_row(theme))
                continue
            rows.extend(self._rows_for(theme, variable, raw))
        return SearchResult(query=variable, partial=False, rows=rows)

    def _query_partial(self, term: str) -> SearchResult:
        needle = strip_prefix(term.strip()).lower()
        if not needle:
            return SearchResult(query="", partial=True)

        by_theme: dict[int, list[str]] = {}
        for entry in self._partial_matches(needle):
            theme_index, _ = self._positions[entry]
            by_theme.setdefault(theme_index, []).append(entry[1])

        rows: list[SearchRow] = []
        for theme_index, theme in enumerate(self._themes):
            names = by_theme.get(theme_index)
            if not names:
                rows.append(_absent_row(theme))
                continue
            for name in names:
                rows.extend(self._rows_for(theme, name, theme.variables[name]))
        return SearchResult(query=needle, partial=True, rows=rows)

    def _partial_matches(self, needle: str) -> list[IndexEntry]:
        """Entries whose name contains ``needle``, in theme then variable order."""
        found: set[IndexEntry] = set()
        for token in self._matching_tokens(needle):
            found.update(self._tokens[token])
        return sorted(found, key=self._positions.__getitem__)

    def _matching_tokens(self, needle: str) -> tuple[str, ...]:
        cached = self._recent.get(needle)
        if cached is not None:
            self._recent.move_to_end(needle)
            return cached

        candidates: Iterable[str] = self._tokens
        narrowest: str | None = None
        for previous in self._recent:
            if previous in needle and (narrowest is None or len(previous) > len(narrowest)):
                narrowest = previous
        if narrowest is not None:
            candidates = self._recent[narrowest]

        tokens = tuple(token for token in candidates if needle in token)
        if self._recent_needles:
            self._recent[needle] = tokens
            while len(self._recent) > self._recent_needles:
                self._recent.popitem(last=False)
        return tokens

    def _rows_for(self, theme: Theme, name: str, raw: str) -> list[SearchRow]:
        if not is_multi_value(raw):
            return [
                SearchRow(
                    theme=theme.name,
                    theme_name=theme.name,
                    variable=name,
                    value=raw,
                    resolution=self._resolver.resolve(raw, theme.name, visited=(name,)),
                )
            ]
        return [
            SearchRow(
                theme=f"{theme.name} ({position})",
                theme_name=theme.name,
                variable=name,
                value=part,
                resolution=self._resolver.resolve(part, theme.name, visited=(name,)),
                is_duplicate=True,
                position=position,
            )
            for position, part in enumerate(split_values(raw), start=1)
        ]


def _absent_row(theme: Theme) -> SearchRow:
    return SearchRow(theme=theme.name, theme_name=theme.name, variable=None, value=ABSENT_VALUE)


def build_index(themes: Sequence[Theme], resolver: VariableResolver | None = None) -> SearchIndex:
    return SearchIndex(themes, resolver=resolver)
