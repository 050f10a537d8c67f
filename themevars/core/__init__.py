"""Variable resolution and lookup engine exports."""

from themevars.core.cache import ResolutionCache
from themevars.core.chain import (
    CircularReference,
    MissingTheme,
    MissingVariable,
    Resolution,
    Separator,
    Value,
)
from themevars.core.colors import ColorValue, get_color_conversions
from themevars.core.conversions import ValueConversions, convert_value
from themevars.core.exporter import DEFAULT_MAPPING, SavedMapping, generate_css, parse_mapping
from themevars.core.importer import ThemeDraft, build_theme, parse_import_text
from themevars.core.resolver import VariableResolver, resolve_chain
from themevars.core.search import SearchIndex, SearchResult, SearchRow, build_index
from themevars.core.sizes import SizeValue, get_size_conversions
from themevars.core.values import SEPARATOR, Theme

__all__ = [
    "CircularReference",
    "ColorValue",
    "DEFAULT_MAPPING",
    "MissingTheme",
    "MissingVariable",
    "Resolution",
    "ResolutionCache",
    "SEPARATOR",
    "SavedMapping",
    "SearchIndex",
    "SearchResult",
    "SearchRow",
    "Separator",
    "SizeValue",
    "Theme",
    "ThemeDraft",
    "Value",
    "ValueConversions",
    "VariableResolver",
    "build_index",
    "build_theme",
    "convert_value",
    "generate_css",
    "get_color_conversions",
    "get_size_conversions",
    "parse_import_text",
    "parse_mapping",
    "resolve_chain",
]
