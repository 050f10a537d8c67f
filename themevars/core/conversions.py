"""Display conversions for a terminal value."""

from __future__ import annotations

from dataclasses import dataclass, field

from themevars.core.colors import ColorValue, get_color_conversions
from themevars.core.sizes import SizeValue, get_size_conversions


@dataclass(frozen=True, slots=True)
class ValueConversions:
    """Equivalent notations of a value. Colors take precedence over sizes."""

    value: str
    colors: list[ColorValue] = field(default_factory=list)
    sizes: list[SizeValue] = field(default_factory=list)

    @property
    def kind(self) -> str:
        if self.colors:
            return "color"
        if self.sizes:
            return "size"
        return "text"

    @property
    def default(self) -> str:
        """First notation offered, or the value itself for plain text."""
        if self.colors:
            return self.colors[0].value
        if self.sizes:
            return self.sizes[0].value
        return self.value

    def find(self, tag: str) -> str | None:
        """Return the notation for a color format or size unit."""
        for color in self.colors:
            if color.format == tag:
                return color.value
        for size in self.sizes:
            if size.unit == tag:
                return size.value
        return None


def convert_value(value: str) -> ValueConversions:
    colors = get_color_conversions(value)
    if colors:
        return ValueConversions(value=value, colors=colors)
    sizes = get_size_conversions(value)
    return ValueConversions(value=value, sizes=sizes or [])
