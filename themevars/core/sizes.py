"""Size detection and conversion between px, rem, em and pt."""

from __future__ import annotations

import math
import re
from dataclasses import dataclass
from typing import Literal

from themevars.core.colors import format_number

SizeUnit = Literal["px", "rem", "em", "pt", "vh", "vw", "%"]

ABSOLUTE_UNITS: tuple[SizeUnit, ...] = ("px", "rem", "em", "pt")
RELATIVE_UNITS: tuple[SizeUnit, ...] = ("vh", "vw", "%")

BASE_FONT_SIZE = 16
PX_PER_PT = 1.333333

_SIZE_RE = re.compile(r"^(\d+(?:\.\d+)?|\.\d+)(px|rem|em|pt|vh|vw|%)?$")


@dataclass(frozen=True, slots=True)
class SizeValue:
    unit: SizeUnit
    value: str


def rem_to_px(rem: float) -> float:
    return rem * BASE_FONT_SIZE


def px_to_rem(px: float) -> float:
    return px / BASE_FONT_SIZE


def em_to_px(em: float) -> float:
    return em * BASE_FONT_SIZE


def px_to_em(px: float) -> float:
    return px / BASE_FONT_SIZE


def pt_to_px(pt: float) -> float:
    return pt * PX_PER_PT


def px_to_pt(px: float) -> float:
    return px / PX_PER_PT


def _rounded(value: float, places: int) -> str:
    scale = 10**places
    return format_number(math.floor(value * scale + 0.5) / scale)


_TO_PX = {
    "px": lambda number: number,
    "rem": rem_to_px,
    "em": em_to_px,
    "pt": pt_to_px,
}


def get_size_conversions(size: str) -> list[SizeValue] | None:
    """Detect a size and return it in every absolute unit, or None.

    A bare number is read as px. Relative units (vh, vw, %) cannot be
    converted without a viewport or parent, so the original text is the
    only entry.
    """
    text = size.strip()
    match = _SIZE_RE.match(text)
    if match is None:
        return None

    number = float(match.group(1))
    unit = match.group(2) or "px"

    if unit not in ABSOLUTE_UNITS:
        return [SizeValue(unit, text)]

    px_value = _TO_PX[unit](number)
    return [
        SizeValue("px", f"{_rounded(px_value, 2)}px"),
        SizeValue("rem", f"{_rounded(px_to_rem(px_value), 3)}rem"),
        SizeValue("em", f"{_rounded(px_to_em(px_value), 3)}em"),
        SizeValue("pt", f"{_rounded(px_to_pt(px_value), 2)}pt"),
    ]
