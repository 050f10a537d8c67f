"""Service bootstrap for host applications."""

from __future__ import annotations

import logging
from logging.handlers import RotatingFileHandler
from typing import Iterable

from themevars.config.settings import AppSettings
from themevars.constants import default_themes
from themevars.core.values import Theme
from themevars.service import ThemeService


def configure_logger(settings: AppSettings) -> logging.Logger:
    logger = logging.getLogger("themevars")
    if logger.handlers:
        return logger

    logger.setLevel(logging.INFO)
    log_dir = settings.app_data_dir / "logs"
    log_dir.mkdir(parents=True, exist_ok=True)
    handler = RotatingFileHandler(
        log_dir / "themevars.log",
        maxBytes=512_000,
        backupCount=3,
        encoding="utf-8",
    )
    handler.setFormatter(logging.Formatter("%(asctime)s %(levelname)s %(message)s"))
    logger.addHandler(handler)
    logger.propagate = False
    return logger


def create_theme_service(
    settings: AppSettings | None = None,
    themes: Iterable[Theme] | None = None,
) -> ThemeService:
    """Create a service seeded with ``themes``, or the built-in defaults."""
    settings = settings or AppSettings()
    logger = configure_logger(settings)
    seeded = tuple(themes) if themes is not None else default_themes()
    logger.info("starting theme service with %d themes", len(seeded))
    return ThemeService(settings, seeded)
