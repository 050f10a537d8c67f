"""Color detection and conversion between hex, rgb(a) and hsl(a)."""

from __future__ import annotations

import math
import re
from dataclasses import dataclass
from decimal import Decimal
from typing import Literal

ColorFormat = Literal["hex", "rgb", "rgba", "hsl", "hsla"]

COLOR_FORMATS: tuple[ColorFormat, ...] = ("hex", "rgb", "rgba", "hsl", "hsla")

_HEX_RE = re.compile(r"^#([0-9a-f]{3}|[0-9a-f]{6})$", re.IGNORECASE)
_SWATCH_RE = re.compile(r"^#[0-9a-f]{3,8}$", re.IGNORECASE)
_ALPHA = r"(?:\s*,\s*(\d*\.?\d+))?"
_RGB_RE = re.compile(
    r"^rgba?\(\s*(\d+)\s*,\s*(\d+)\s*,\s*(\d+)" + _ALPHA + r"\s*\)$",
    re.IGNORECASE,
)
_HSL_RE = re.compile(
    r"^hsla?\(\s*(\d+)\s*,\s*(\d+)%?\s*,\s*(\d+)%?" + _ALPHA + r"\s*\)$",
    re.IGNORECASE,
)


@dataclass(frozen=True, slots=True)
class ColorValue:
    format: ColorFormat
    value: str


def round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))


def format_number(value: float) -> str:
    """Shortest text for a number: ``1`` rather than ``1.0``.

    Exponent notation is used only below 1e-6 and from 1e21 up, written as
    ``1e-7`` and ``1e+21``.
    """
    number = float(value)
    if number.is_integer() and abs(number) < 1e21:
        return str(int(number))
    text = repr(number)
    if "e" not in text:
        return text
    mantissa, exponent = text.split("e")
    power = int(exponent)
    if -7 < power < 21:
        return format(Decimal(text), "f")
    return f"{mantissa}e{'+' if power > 0 else '-'}{abs(power)}"


def is_hex_color(value: str) -> bool:
    """True for ``#`` followed by 3 to 8 hex digits."""
    return bool(_SWATCH_RE.match(value.strip()))


def hex_to_rgb(hex_value: str) -> tuple[int, int, int] | None:
    """Parse a 6-digit hex color, with or without the leading ``#``."""
    match = re.match(r"^#?([0-9a-f]{2})([0-9a-f]{2})([0-9a-f]{2})$", hex_value, re.IGNORECASE)
    if match is None:
        return None
    return (int(match.group(1), 16), int(match.group(2), 16), int(match.group(3), 16))


def rgb_to_hex(r: int, g: int, b: int) -> str:
    return "#" + "".join(f"{channel:02x}" for channel in (r, g, b))


def rgb_to_hsl(r: int, g: int, b: int) -> tuple[int, int, int]:
    """Convert 0-255 channels to whole degrees and percents."""
    red, green, blue = r / 255, g / 255, b / 255
    high = max(red, green, blue)
    low = min(red, green, blue)
    hue = 0.0
    saturation = 0.0
    lightness = (high + low) / 2

    if high != low:
        delta = high - low
        if lightness > 0.5:
            saturation = delta / (2 - high - low)
        else:
            saturation = delta / (high + low)

        if high == red:
            hue = ((green - blue) / delta + (6 if green < blue else 0)) / 6
        elif high == green:
            hue = ((blue - red) / delta + 2) / 6
        else:
            hue = ((red - green) / delta + 4) / 6

    return (
        round_half_up(hue * 360),
        round_half_up(saturation * 100),
        round_half_up(lightness * 100),
    )


def _hue_to_rgb(p: float, q: float, t: float) -> float:
    if t < 0:
        t += 1
    if t > 1:
        t -= 1
    if t < 1 / 6:
        return p + (q - p) * 6 * t
    if t < 1 / 2:
        return q
    if t < 2 / 3:
        return p + (q - p) * (2 / 3 - t) * 6
    return p


def hsl_to_rgb(h: int, s: int, l: int) -> tuple[int, int, int]:
    """Convert degrees and percents to 0-255 channels."""
    hue, saturation, lightness = h / 360, s / 100, l / 100

    if saturation == 0:
        red = green = blue = lightness
    else:
        if lightness < 0.5:
            q = lightness * (1 + saturation)
        else:
            q = lightness + saturation - lightness * saturation
        p = 2 * lightness - q
        red = _hue_to_rgb(p, q, hue + 1 / 3)
        green = _hue_to_rgb(p, q, hue)
        blue = _hue_to_rgb(p, q, hue - 1 / 3)

    return (round_half_up(red * 255), round_half_up(green * 255), round_half_up(blue * 255))


def _conversions(
    rgb: tuple[int, int, int],
    hsl: tuple[int, int, int],
    alpha: float,
) -> list[ColorValue]:
    r, g, b = rgb
    h, s, l = hsl
    a = format_number(alpha)
    return [
        ColorValue("hex", rgb_to_hex(r, g, b).upper()),
        ColorValue("rgb", f"rgb({r}, {g}, {b})"),
        ColorValue("rgba", f"rgba({r}, {g}, {b}, {a})"),
        ColorValue("hsl", f"hsl({h}, {s}%, {l}%)"),
        ColorValue("hsla", f"hsla({h}, {s}%, {l}%, {a})"),
    ]


def _parse_alpha(raw: str | None) -> float | None:
    if raw is None:
        return 1.0
    alpha = float(raw)
    if not 0 <= alpha <= 1:
        return None
    return alpha


def get_color_conversions(color: str) -> list[ColorValue] | None:
    """Detect a color and return it in every format, or None if not a color.

    The result is always ordered hex, rgb, rgba, hsl, hsla. An alpha given in
    the input is kept on rgba and hsla only.
    """
    text = color.strip()

    hex_match = _HEX_RE.match(text)
    if hex_match:
        digits = hex_match.group(1)
        if len(digits) == 3:
            digits = "".join(digit * 2 for digit in digits)
        rgb = hex_to_rgb(digits)
        if rgb is None:
            return None
        return _conversions(rgb, rgb_to_hsl(*rgb), 1.0)

    rgb_match = _RGB_RE.match(text)
    if rgb_match:
        channels = tuple(int(rgb_match.group(index)) for index in (1, 2, 3))
        alpha = _parse_alpha(rgb_match.group(4))
        if alpha is None or any(channel > 255 for channel in channels):
            return None
        r, g, b = channels
        return _conversions((r, g, b), rgb_to_hsl(r, g, b), alpha)

    hsl_match = _HSL_RE.match(text)
    if hsl_match:
        h, s, l = (int(hsl_match.group(index)) for index in (1, 2, 3))
        alpha = _parse_alpha(hsl_match.group(4))
        if alpha is None or h > 360 or s > 100 or l > 100:
            return None
        return _conversions(hsl_to_rgb(h, s, l), (h, s, l), alpha)

    return None
