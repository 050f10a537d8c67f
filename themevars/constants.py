"""ThemeVars constants."""

from __future__ import annotations

from themevars.core.values import Theme

DEFAULT_THEME_RECORDS: tuple[dict[str, object], ...] = (
    {
        "name": "Light Theme",
        "variables": {
            "--bg": "#ffffff",
            "--text": "#000000",
            "--color-primary": "#3b82f6",
        },
    },
    {
        "name": "Dark Theme",
        "variables": {
            "--bg": "#000000",
            "--text": "#ffffff",
            "--color-primary": "#60a5fa",
        },
    },
)


def default_themes() -> tuple[Theme, ...]:
    return tuple(Theme.from_dict(record) for record in DEFAULT_THEME_RECORDS)
