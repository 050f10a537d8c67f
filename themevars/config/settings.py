"""Application settings via QSettings."""

from __future__ import annotations

import json
import os
from pathlib import Path

from PySide6.QtCore import QSettings

from themevars.core.exporter import SavedMapping

DEFAULT_EXPORT_FILE_NAME = "tailwind-themes"


class AppSettings:
    """Wraps QSettings for persistent app configuration.

    Pass ``path`` to keep settings in a standalone INI file.
    """

    def __init__(self, path: str | Path | None = None) -> None:
        if path is None:
            self._qs = QSettings("ThemeVars", "ThemeVars")
        else:
            self._qs = QSettings(str(path), QSettings.Format.IniFormat)

    def sync(self) -> None:
        self._qs.sync()

    # -- export --

    @property
    def export_file_name(self) -> str:
        raw = self._qs.value("export/file_name", DEFAULT_EXPORT_FILE_NAME, type=str)
        value = (raw or "").strip()
        return value or DEFAULT_EXPORT_FILE_NAME

    @export_file_name.setter
    def export_file_name(self, value: str) -> None:
        cleaned = (value or "").strip() or DEFAULT_EXPORT_FILE_NAME
        self._qs.setValue("export/file_name", cleaned)

    @property
    def export_dir(self) -> Path:
        raw = self._qs.value("export/dir", "", type=str)
        value = (raw or "").strip()
        if value:
            return Path(value)
        return self.app_data_dir / "exports"

    @export_dir.setter
    def export_dir(self, value: str | Path) -> None:
        self._qs.setValue("export/dir", str(value))

    # -- saved mappings --

    @property
    def saved_mappings(self) -> list[SavedMapping]:
        raw = self._qs.value("export/saved_mappings", "", type=str)
        if not raw:
            return []
        try:
            data = json.loads(raw)
        except json.JSONDecodeError:
            return []
        if not isinstance(data, list):
            return []
        mappings: list[SavedMapping] = []
        for item in data:
            if not isinstance(item, dict):
                continue
            name = item.get("name")
            mapping = item.get("mapping")
            if not isinstance(name, str) or not isinstance(mapping, dict):
                continue
            cleaned = {
                key: value
                for key, value in mapping.items()
                if isinstance(key, str) and isinstance(value, str)
            }
            mappings.append(SavedMapping(name=name, mapping=cleaned))
        return mappings

    @saved_mappings.setter
    def saved_mappings(self, value: list[SavedMapping]) -> None:
        payload = [item.to_dict() for item in value]
        self._qs.setValue("export/saved_mappings", json.dumps(payload))

    # -- search --

    @property
    def search_partial(self) -> bool:
        return self._qs.value("search/partial", False, type=bool)

    @search_partial.setter
    def search_partial(self, value: bool) -> None:
        self._qs.setValue("search/partial", bool(value))

    # -- helpers --

    @property
    def app_data_dir(self) -> Path:
        path = self._app_data_dir()
        path.mkdir(parents=True, exist_ok=True)
        return path

    @staticmethod
    def _app_data_dir() -> Path:
        base = Path(os.environ.get("APPDATA", Path.home() / ".config"))
        return base / "themevars"
