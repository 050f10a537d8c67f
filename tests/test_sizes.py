"""Tests for themevars.core.sizes."""

from __future__ import annotations

from themevars.core.sizes import get_size_conversions, pt_to_px, px_to_rem, rem_to_px


def _as_dict(text: str) -> dict[str, str]:
    conversions = get_size_conversions(text)
    assert conversions is not None
    return {item.unit: item.value for item in conversions}


class TestAbsoluteUnits:
    def test_px_to_all_units(self):
        conversions = get_size_conversions("16px")
        assert conversions is not None
        assert [(item.unit, item.value) for item in conversions] == [
            ("px", "16px"),
            ("rem", "1rem"),
            ("em", "1em"),
            ("pt", "12pt"),
        ]

    def test_rem_to_px(self):
        assert _as_dict("1rem")["px"] == "16px"

    def test_px_rem_px_round_trip(self):
        rem = _as_dict("16px")["rem"]
        assert _as_dict(rem)["px"] == "16px"

    def test_bare_number_defaults_to_px(self):
        assert _as_dict("24") == _as_dict("24px")

    def test_rounding_places(self):
        values = _as_dict("10px")
        assert values["rem"] == "0.625rem"
        assert values["pt"] == "7.5pt"
        assert _as_dict("1px")["rem"] == "0.063rem"

    def test_pt_input(self):
        assert _as_dict("12pt")["px"] == "16px"

    def test_fractional_em(self):
        assert _as_dict("1.5em")["px"] == "24px"


class TestRelativeUnits:
    def test_relative_units_pass_through(self):
        for text in ("100vh", "50vw", "25%"):
            conversions = get_size_conversions(text)
            assert conversions is not None
            assert len(conversions) == 1
            assert conversions[0].value == text

    def test_relative_unit_tag(self):
        conversions = get_size_conversions("50%")
        assert conversions is not None
        assert conversions[0].unit == "%"


def test_not_sizes():
    for text in ("", "px", "auto", "#fff", "1px solid", "-4px", "var(--gap)"):
        assert get_size_conversions(text) is None, text


def test_helpers():
    assert rem_to_px(2) == 32
    assert px_to_rem(8) == 0.5
    assert round(pt_to_px(3), 4) == 4.0
