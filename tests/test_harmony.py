import random

import pytest

from palette_studio.harmony import Harmony, generate_harmonious_colors, parse_harmony


def test_triadic():
    assert generate_harmonious_colors(0, 3, "triadic") == [0, 120, 240]
    assert generate_harmonious_colors(10, 5, Harmony.TRIADIC) == [10, 130, 250, 25, 145]


def test_complementary():
    assert generate_harmonious_colors(0, 2, "complementary") == [0, 180]
    assert generate_harmonious_colors(100, 5, "complementary") == [100, 280, 115, 85, 130]


def test_analogous_centered_on_base():
    assert generate_harmonious_colors(0, 5, "analogous") == [310, 335, 0, 25, 50]
    assert generate_harmonious_colors(100, 4, "analogous") == [50, 75, 100, 125]
    assert generate_harmonious_colors(10, 3, "analogous") == [345, 10, 35]


def test_split_complementary():
    assert generate_harmonious_colors(0, 5, "split-complementary") == [0, 150, 210, 90, 120]
    assert generate_harmonious_colors(300, 3, "split-complementary") == [300, 90, 150]


@pytest.mark.parametrize("scheme", list(Harmony))
@pytest.mark.parametrize("count", [1, 2, 3, 5, 8])
def test_length_and_range(scheme, count):
    hues = generate_harmonious_colors(359, count, scheme)
    assert len(hues) == count
    assert all(0 <= h < 360 for h in hues)


def test_pure_for_known_schemes():
    a = generate_harmonious_colors(42, 5, "triadic", rng=random.Random(1))
    b = generate_harmonious_colors(42, 5, "triadic", rng=random.Random(2))
    assert a == b


def test_unknown_scheme_falls_back_to_random():
    hues = generate_harmonious_colors(0, 6, "tetradic", rng=random.Random(5))
    assert len(hues) == 6
    assert all(0 <= h < 360 for h in hues)
    assert hues == generate_harmonious_colors(0, 6, "tetradic", rng=random.Random(5))


def test_zero_count():
    assert generate_harmonious_colors(10, 0, "analogous") == []


def test_parse_harmony():
    assert parse_harmony("Split-Complementary") is Harmony.SPLIT_COMPLEMENTARY
    assert parse_harmony(Harmony.ANALOGOUS) is Harmony.ANALOGOUS
    assert parse_harmony("square") is None
