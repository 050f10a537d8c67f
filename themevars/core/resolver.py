"""Variable resolution through ``var(--name)`` reference chains."""

from __future__ import annotations

from typing import Iterable, Sequence

from themevars.core.cache import ResolutionCache, make_key
from themevars.core.chain import (
    ChainStep,
    CircularReference,
    MissingTheme,
    MissingVariable,
    Resolution,
    Separator,
    Value,
)
from themevars.core.values import Theme, is_multi_value, reference_name, split_values


class VariableResolver:
    """Resolves raw values against a snapshot of themes.

    The snapshot is treated as immutable. Replacing it with a different
    collection object through :meth:`set_themes` clears the memo.
    """

    def __init__(
        self,
        themes: Sequence[Theme] = (),
        cache: ResolutionCache | None = None,
    ) -> None:
        self._cache = cache if cache is not None else ResolutionCache()
        self._themes: Sequence[Theme] = ()
        self._by_name: dict[str, Theme] = {}
        self.set_themes(themes)

    @property
    def themes(self) -> Sequence[Theme]:
        return self._themes

    @property
    def cache(self) -> ResolutionCache:
        return self._cache

    def set_themes(self, themes: Sequence[Theme]) -> None:
        if themes is self._themes:
            return
        self._themes = themes
        self._by_name = {theme.name: theme for theme in themes}
        self._cache.clear()

    def get_theme(self, name: str) -> Theme | None:
        return self._by_name.get(name)

    def resolve(
        self,
        value: str,
        theme_name: str,
        visited: Iterable[str] | None = None,
    ) -> Resolution:
        """Resolve ``value`` inside ``theme_name`` down to its terminal step.

        ``visited`` holds the names already walked on the current path; a
        reference to one of them ends the chain with a circular marker.
        """
        path = set(visited) if visited is not None else set()
        return Resolution(value=value, steps=self._resolve(value, theme_name, path))

    def resolve_chain(
        self,
        value: str,
        theme_name: str,
        visited: Iterable[str] | None = None,
    ) -> list[str]:
        return self.resolve(value, theme_name, visited).chain

    def resolve_parts(self, value: str, theme_name: str) -> list[Resolution]:
        """Resolve each alternative of a raw value separately, one row each."""
        if not is_multi_value(value):
            return [self.resolve(value, theme_name)]
        return [self.resolve(part, theme_name) for part in split_values(value)]

    def resolve_flat(self, value: str, theme_name: str) -> Resolution:
        """Resolve every alternative of a raw value into one separated chain."""
        if not is_multi_value(value):
            return self.resolve(value, theme_name)
        steps: list[ChainStep] = []
        for index, part in enumerate(split_values(value)):
            if index:
                steps.append(Separator())
            steps.extend(self._resolve(part, theme_name, set()))
        return Resolution(value=value, steps=tuple(steps))

    def _resolve(self, value: str, theme_name: str, visited: set[str]) -> tuple[ChainStep, ...]:
        key = make_key(theme_name, value, visited)
        cached = self._cache.get(key)
        if cached is not None:
            return cached
        steps = self._walk(value, theme_name, visited)
        self._cache.put(key, steps)
        return steps

    def _walk(self, value: str, theme_name: str, visited: set[str]) -> tuple[ChainStep, ...]:
        steps: list[ChainStep] = [Value(value)]

        name = reference_name(value)
        if name is None:
            return tuple(steps)

        if name in visited:
            steps.append(CircularReference(name))
            return tuple(steps)
        visited.add(name)

        theme = self._by_name.get(theme_name)
        if theme is None:
            steps.append(MissingTheme(theme_name))
            return tuple(steps)

        referenced = theme.variables.get(name)
        if not referenced:
            steps.append(MissingVariable(name))
            return tuple(steps)

        if is_multi_value(referenced):
            # Siblings get their own copy: only ancestors count as cycles.
            for index, part in enumerate(split_values(referenced)):
                if index:
                    steps.append(Separator())
                steps.extend(self._resolve(part, theme_name, set(visited)))
            return tuple(steps)

        steps.extend(self._resolve(referenced, theme_name, visited))
        return tuple(steps)


def resolve_chain(
    value: str,
    theme_name: str,
    themes: Sequence[Theme],
    visited: Iterable[str] | None = None,
) -> list[str]:
    """One-shot resolution without a long-lived resolver."""
    return VariableResolver(themes).resolve_chain(value, theme_name, visited)
