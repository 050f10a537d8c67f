"""In-memory memo for variable resolution."""

from __future__ import annotations

from typing import Iterable

from themevars.core.chain import ChainStep

CacheKey = tuple[str, str, tuple[str, ...]]


def make_key(theme_name: str, value: str, visited: Iterable[str]) -> CacheKey:
    return (theme_name, value, tuple(sorted(visited)))


class ResolutionCache:
    """Caches resolved step tuples per (theme, value, visited) key.

    Owned by a single resolver. Not safe for concurrent mutation; give each
    thread its own instance.
    """

    def __init__(self) -> None:
        self._entries: dict[CacheKey, tuple[ChainStep, ...]] = {}
        self.hits = 0
        self.misses = 0

    def get(self, key: CacheKey) -> tuple[ChainStep, ...] | None:
        steps = self._entries.get(key)
        if steps is None:
            self.misses += 1
        else:
            self.hits += 1
        return steps

    def put(self, key: CacheKey, steps: tuple[ChainStep, ...]) -> None:
        self._entries[key] = steps

    def clear(self) -> None:
        """Drop every entry and reset the counters."""
        self._entries.clear()
        self.hits = 0
        self.misses = 0

    def __len__(self) -> int:
        return len(self._entries)

    def __contains__(self, key: object) -> bool:
        return key in self._entries
