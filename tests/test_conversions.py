"""Hex parsing/formatting and RGB <-> HSL conversions."""

import itertools

import pytest

from huepass.core.conversions import (
    _linear_to_srgb,
    _srgb_to_linear,
    format_hex,
    hsl_to_rgb,
    is_valid_hex,
    normalize_hex,
    parse_hex,
    rgb_to_hsl,
)


@pytest.mark.parametrize("text, expected", [
    ("#AABBCC", (170, 187, 204)),
    ("aabbcc", (170, 187, 204)),
    ("#abc", (170, 187, 204)),
    ("ABC", (170, 187, 204)),
    ("#000000", (0, 0, 0)),
    ("FFFFFF", (255, 255, 255)),
])
def test_parse_hex_valid(text, expected):
    assert parse_hex(text) == expected


@pytest.mark.parametrize("text", [
    "", "#", "#12", "1234", "12345", "#1234567", "ggg", "#12345g",
    "##abc", "abcdef\n", " abcdef", None, 0xABCDEF,
])
def test_parse_hex_malformed_returns_none(text):
    assert parse_hex(text) is None


def test_format_hex_rounds_clamps_and_uppercases():
    assert format_hex(255, 0, 0.4) == "#FF0000"
    assert format_hex(300, -5, 127.6) == "#FF0080"
    assert format_hex(10, 171, 205) == "#0AABCD"


def test_normalize_hex():
    assert normalize_hex("abc") == "#AABBCC"
    assert normalize_hex("#87ceeb") == "#87CEEB"
    assert normalize_hex("nope") is None


@pytest.mark.parametrize("text, expected", [
    ("#fff", True),
    ("fff", True),
    ("#A1b2C3", True),
    ("#ffff", False),
    ("##fff", False),
    ("#fffffff", False),
    ("xyz", False),
    ("", False),
])
def test_is_valid_hex(text, expected):
    assert is_valid_hex(text) is expected


def test_hex_round_trip():
    for rgb in itertools.product(range(0, 256, 15), repeat=3):
        assert parse_hex(format_hex(*rgb)) == rgb


def test_hsl_round_trip_within_one_unit():
    for rgb in itertools.product(range(0, 256, 17), repeat=3):
        back = hsl_to_rgb(*rgb_to_hsl(*rgb))
        assert all(abs(a - b) <= 1 for a, b in zip(rgb, back)), (rgb, back)


def test_rgb_to_hsl_known_values():
    assert rgb_to_hsl(255, 0, 0) == (0.0, 100.0, 50.0)
    h, s, l = rgb_to_hsl(0, 0, 255)
    assert h == pytest.approx(240.0)
    assert s == pytest.approx(100.0)
    assert l == pytest.approx(50.0)
    assert rgb_to_hsl(128, 128, 128)[:2] == (0.0, 0.0)


def test_hsl_to_rgb_known_values():
    assert hsl_to_rgb(120, 100, 50) == (0, 255, 0)
    assert hsl_to_rgb(0, 0, 100) == (255, 255, 255)
    assert hsl_to_rgb(0, 0, 0) == (0, 0, 0)
    # lightness outside [0, 100] is clamped, hue wraps
    assert hsl_to_rgb(360, 100, 150) == (255, 255, 255)
    assert hsl_to_rgb(480, 100, 50) == hsl_to_rgb(120, 100, 50)


def test_srgb_linear_round_trip():
    for v in range(256):
        assert _linear_to_srgb(_srgb_to_linear(v)) * 255 == pytest.approx(v, abs=1e-6)


def test_exact_halves_round_up():
    # 0.3 * 255 == 76.5 and 0.7 * 255 == 178.5
    assert hsl_to_rgb(0, 0, 30) == (77, 77, 77)
    assert hsl_to_rgb(0, 0, 70) == (179, 179, 179)
    assert format_hex(76.5, 0.5, 254.5) == "#4D01FF"
