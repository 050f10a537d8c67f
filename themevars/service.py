"""Theme collection service: snapshot ownership, search and export."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Iterable, Sequence

from PySide6.QtCore import QObject, Signal

from themevars.config.settings import AppSettings
from themevars.core.chain import Resolution
from themevars.core.conversions import ValueConversions, convert_value
from themevars.core.exporter import SavedMapping, generate_css, parse_mapping, upsert_mapping
from themevars.core.importer import ThemeDraft, build_theme, parse_import_text
from themevars.core.resolver import VariableResolver
from themevars.core.search import SearchIndex, SearchResult
from themevars.core.values import Theme
from themevars.errors import ErrorCode, ThemeVarsError, classify_exception

logger = logging.getLogger(__name__)


class ThemeService(QObject):
    """Owns the theme snapshot, its resolver memo and its search index.

    Every mutation replaces the snapshot tuple, which clears the memo and
    rebuilds the index before ``themes_changed`` is emitted.
    """

    themes_changed = Signal(int)
    mappings_changed = Signal()

    def __init__(
        self,
        settings: AppSettings,
        themes: Iterable[Theme] = (),
        parent: QObject | None = None,
    ) -> None:
        super().__init__(parent)
        self._settings = settings
        self._themes: tuple[Theme, ...] = tuple(themes)
        self._resolver = VariableResolver(self._themes)
        self._index = SearchIndex(self._themes, resolver=self._resolver)

    @property
    def themes(self) -> tuple[Theme, ...]:
        return self._themes

    @property
    def theme_names(self) -> list[str]:
        return [theme.name for theme in self._themes]

    @property
    def resolver(self) -> VariableResolver:
        return self._resolver

    def get_theme(self, name: str) -> Theme | None:
        return self._resolver.get_theme(name)

    # -- collection --

    def set_themes(self, themes: Iterable[Theme]) -> None:
        self._themes = tuple(themes)
        self._index.rebuild(self._themes)
        logger.info("theme collection replaced: %d themes", len(self._themes))
        self.themes_changed.emit(len(self._themes))

    def add_theme(self, theme: Theme) -> None:
        if self.get_theme(theme.name) is not None:
            raise ThemeVarsError(ErrorCode.THEME_EXISTS, details={"name": theme.name})
        self.set_themes([*self._themes, theme])

    def update_theme(self, original_name: str, theme: Theme) -> None:
        """Replace ``original_name`` in place, keeping its position."""
        if self.get_theme(original_name) is None:
            raise ThemeVarsError(ErrorCode.THEME_NOT_FOUND, details={"name": original_name})
        if theme.name != original_name and self.get_theme(theme.name) is not None:
            raise ThemeVarsError(ErrorCode.THEME_EXISTS, details={"name": theme.name})
        self.set_themes(
            theme if existing.name == original_name else existing for existing in self._themes
        )

    def delete_theme(self, name: str) -> bool:
        if self.get_theme(name) is None:
            return False
        self.set_themes(theme for theme in self._themes if theme.name != name)
        return True

    def create_theme(
        self,
        name: str,
        rows: Iterable[tuple[str, str]],
        *,
        replacing: str | None = None,
    ) -> Theme:
        """Validate a theme form and add it, or replace ``replacing``."""
        existing = [other for other in self.theme_names if other != replacing]
        theme = build_theme(name, rows, existing)
        if replacing is None:
            self.add_theme(theme)
        else:
            self.update_theme(replacing, theme)
        return theme

    def import_theme(self, text: str) -> ThemeDraft:
        """Parse pasted text into a draft; nothing is applied on failure."""
        try:
            return parse_import_text(text)
        except ThemeVarsError as exc:
            logger.warning("theme import rejected: %s", exc.code.name)
            raise

    # -- lookups --

    def resolve(self, value: str, theme_name: str) -> Resolution:
        return self._resolver.resolve(value, theme_name)

    def search(self, term: str, partial: bool | None = None) -> SearchResult:
        if partial is None:
            partial = self._settings.search_partial
        return self._index.query(term, partial=partial)

    def conversions(self, value: str) -> ValueConversions:
        return convert_value(value)

    # -- export --

    def export_css(
        self,
        mapping_text: str,
        selected: Sequence[str],
        root: str | None = None,
    ) -> str:
        """Render the export for ``selected`` themes, in the given order.

        ``root`` defaults to the first selected theme.
        """
        mapping = parse_mapping(mapping_text)
        themes = self._selected_themes(selected)
        root_name = root or themes[0].name
        root_theme = self.get_theme(root_name)
        if root_theme is None:
            raise ThemeVarsError(ErrorCode.THEME_NOT_FOUND, details={"name": root_name})
        return generate_css(mapping, themes, root_theme, resolver=self._resolver)

    def export_to_file(
        self,
        mapping_text: str,
        selected: Sequence[str],
        root: str | None = None,
        *,
        file_name: str | None = None,
        directory: Path | None = None,
    ) -> Path:
        """Write the export as ``<file_name>.css``; validates before writing."""
        name = (file_name if file_name is not None else self._settings.export_file_name).strip()
        if not name:
            raise ThemeVarsError(ErrorCode.EXPORT_FILE_NAME_REQUIRED)
        content = self.export_css(mapping_text, selected, root)

        target_dir = directory if directory is not None else self._settings.export_dir
        path = target_dir / f"{name}.css"
        try:
            target_dir.mkdir(parents=True, exist_ok=True)
            path.write_text(content, encoding="utf-8", newline="\n")
        except OSError as exc:
            raise classify_exception(exc, path) from exc
        self._settings.export_file_name = name
        logger.info("exported %d themes to %s", len(selected), path)
        return path

    def _selected_themes(self, selected: Sequence[str]) -> list[Theme]:
        if not selected:
            raise ThemeVarsError(ErrorCode.EXPORT_NO_THEMES)
        themes: list[Theme] = []
        for name in selected:
            theme = self.get_theme(name)
            if theme is None:
                raise ThemeVarsError(ErrorCode.THEME_NOT_FOUND, details={"name": name})
            themes.append(theme)
        return themes

    # -- saved mappings --

    def saved_mappings(self) -> list[SavedMapping]:
        return self._settings.saved_mappings

    def save_mapping(self, name: str, mapping_text: str) -> SavedMapping:
        cleaned = name.strip()
        if not cleaned:
            raise ThemeVarsError(ErrorCode.MAPPING_NAME_REQUIRED)
        saved = SavedMapping(name=cleaned, mapping=parse_mapping(mapping_text))
        self._settings.saved_mappings = upsert_mapping(self._settings.saved_mappings, saved)
        self.mappings_changed.emit()
        return saved

    def delete_mapping(self, name: str) -> bool:
        current = self._settings.saved_mappings
        remaining = [item for item in current if item.name != name]
        if len(remaining) == len(current):
            return False
        self._settings.saved_mappings = remaining
        self.mappings_changed.emit()
        return True
