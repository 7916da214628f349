"""Relative luminance, contrast ratio and WCAG classification."""

import random

import pytest

from huepass.core.compliance import (
    check_wcag_compliance,
    get_large_text_level,
    get_normal_text_level,
)
from huepass.core.contrast import format_contrast_ratio, get_contrast_ratio
from huepass.core.luminance import get_luminance

BLACK = (0, 0, 0)
WHITE = (255, 255, 255)


def test_luminance_extremes():
    assert get_luminance(*BLACK) == 0.0
    assert get_luminance(*WHITE) == pytest.approx(1.0)


def test_luminance_low_channels_use_linear_segment():
    assert get_luminance(10, 10, 10) == pytest.approx((10 / 255) / 12.92)


def test_black_on_white_is_maximum():
    ratio = get_contrast_ratio(BLACK, WHITE)
    assert ratio == pytest.approx(21.0)
    assert format_contrast_ratio(ratio) == "21.00:1"


def test_same_color_is_one():
    assert get_contrast_ratio(BLACK, BLACK) == 1.0
    assert get_contrast_ratio((18, 52, 86), (18, 52, 86)) == 1.0


def test_gray_777_on_white_just_misses_aa():
    ratio = get_contrast_ratio((0x77, 0x77, 0x77), WHITE)
    assert round(ratio, 2) == 4.48
    result = check_wcag_compliance(ratio)
    assert result.normal_text_aa is False
    assert result.normal_text_aaa is False
    assert result.large_text_aa is True


def test_ratio_is_symmetric_and_bounded():
    rng = random.Random(42)
    for _ in range(500):
        a = tuple(rng.randrange(256) for _ in range(3))
        b = tuple(rng.randrange(256) for _ in range(3))
        ratio = get_contrast_ratio(a, b)
        assert ratio == get_contrast_ratio(b, a)
        assert 1.0 <= ratio <= 21.0 + 1e-9


def test_compliance_thresholds_are_inclusive():
    result = check_wcag_compliance(4.5)
    assert result.ratio == 4.5
    assert result.ratio_string == "4.50:1"
    assert result.normal_text_aa is True
    assert result.normal_text_aaa is False
    assert result.large_text_aa is True
    assert result.large_text_aaa is True
    assert result.ui_components is True

    result = check_wcag_compliance(3.0)
    assert (result.normal_text_aa, result.large_text_aa, result.ui_components) == (False, True, True)

    result = check_wcag_compliance(2.99)
    assert not any([result.large_text_aa, result.ui_components])


@pytest.mark.parametrize("ratio, normal, large", [
    (21.0, "AAA", "AAA"),
    (7.0, "AAA", "AAA"),
    (6.99, "AA", "AAA"),
    (4.5, "AA", "AAA"),
    (4.49, "Fail", "AA"),
    (3.0, "Fail", "AA"),
    (2.99, "Fail", "Fail"),
    (1.0, "Fail", "Fail"),
])
def test_levels(ratio, normal, large):
    assert get_normal_text_level(ratio).level == normal
    assert get_large_text_level(ratio).level == large


def test_level_labels():
    assert get_normal_text_level(8).label == "AAA Pass"
    assert get_normal_text_level(5).label == "AA Pass"
    assert get_normal_text_level(2).label == "Fail"
