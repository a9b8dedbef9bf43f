import random

import numpy as np
import pytest

from palette_studio.colors import (
    canon_hex,
    contrast_color,
    contrast_ratio,
    contrast_report,
    hex_to_rgb,
    hsl_to_hex,
    luminance,
    rgb_to_hex,
    rgb_to_hsl,
    wcag_level,
    wcag_rating,
)


def test_hex_to_rgb_with_and_without_hash():
    assert hex_to_rgb("#FF8000") == (255, 128, 0)
    assert hex_to_rgb("ff8000") == (255, 128, 0)


@pytest.mark.parametrize("bad", ["", "#GG0000", "#fff", "12345", "#1234567", None])
def test_hex_to_rgb_malformed_falls_back_to_black(bad):
    assert hex_to_rgb(bad) == (0, 0, 0)


def test_rgb_to_hsl_primaries():
    assert rgb_to_hsl(255, 0, 0) == (0, 100, 50)
    assert rgb_to_hsl(0, 255, 0) == (120, 100, 50)
    assert rgb_to_hsl(0, 0, 255) == (240, 100, 50)
    assert rgb_to_hsl(128, 128, 128) == (0, 0, 50)
    assert rgb_to_hsl(255, 255, 255) == (0, 0, 100)


def test_hsl_to_hex():
    assert hsl_to_hex(0, 100, 50) == "#ff0000"
    assert hsl_to_hex(120, 100, 50) == "#00ff00"
    assert hsl_to_hex(0, 0, 100) == "#ffffff"
    # 127.5 rounds up
    assert hsl_to_hex(240, 100, 25) == "#000080"


def test_rgb_to_hex_clamps():
    assert rgb_to_hex(300, -4, 16) == "#ff0010"


@pytest.mark.parametrize(
    "hex_str",
    ["#ff0000", "#00ff00", "#0000ff", "#ffff00", "#00ffff", "#ff00ff",
     "#000000", "#ffffff", "#808080"],
)
def test_round_trip_exact_for_pure_colours(hex_str):
    assert hsl_to_hex(*rgb_to_hsl(*hex_to_rgb(hex_str))) == hex_str


def test_round_trip_within_integer_hsl_tolerance():
    rng = random.Random(1234)
    for _ in range(300):
        rgb = np.array([rng.randrange(256) for _ in range(3)])
        back = np.array(hex_to_rgb(hsl_to_hex(*rgb_to_hsl(*rgb))))
        # integer h/s/l quantisation bounds the per-channel error
        assert np.all(np.abs(back - rgb) <= 6)


def test_contrast_color():
    assert contrast_color("#FFFFFF") == "#000000"
    assert contrast_color("#000000") == "#FFFFFF"
    assert contrast_color("#808080") == "#000000"
    assert contrast_color("#0000FF") == "#FFFFFF"
    assert contrast_color("not a colour") == "#FFFFFF"


def test_luminance_bounds():
    assert luminance(0, 0, 0) == 0.0
    assert luminance(255, 255, 255) == pytest.approx(1.0)
    assert luminance(255, 0, 0) == pytest.approx(0.2126)


def test_contrast_ratio_max_and_symmetric():
    assert contrast_ratio("#000000", "#FFFFFF") == pytest.approx(21.0)
    a, b = "#3a7bd5", "#f7c948"
    assert contrast_ratio(a, b) == contrast_ratio(b, a)
    assert contrast_ratio(a, a) == pytest.approx(1.0)


def test_wcag_level_boundaries():
    assert wcag_level(7.0) == "AAA"
    assert wcag_level(4.5) == "AA"
    assert wcag_level(4.49) == "Fail"
    assert wcag_level(21) == "AAA"


def test_wcag_rating_flags():
    r = wcag_rating(3.0)
    assert (r.aa, r.aa_large, r.aaa, r.aaa_large) == (False, True, False, False)
    r = wcag_rating(4.5)
    assert r.to_dict() == {"aa": True, "aaLarge": True, "aaa": False, "aaaLarge": True}
    assert all(wcag_rating(7.0).to_dict().values())


def test_contrast_report():
    rep = contrast_report("#000000", "#ffffff")
    assert rep["ratio"] == 21.0
    assert rep["level"] == "AAA"
    assert rep["rating"]["aaLarge"] is True


def test_canon_hex():
    assert canon_hex("FFF") == "#ffffff"
    assert canon_hex(" #A1b2C3 ") == "#a1b2c3"
    with pytest.raises(ValueError):
        canon_hex("#12")
    with pytest.raises(ValueError):
        canon_hex("zzzzzz")
