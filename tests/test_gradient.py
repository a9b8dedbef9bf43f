import random
import re

import pytest

from palette_studio.gradient import (
    RANDOM_DIRECTIONS,
    Direction,
    Gradient,
    GradientError,
    GradientStop,
    GradientType,
    add_stop,
    generate_random_gradient,
    gradient_css,
    gradient_from_palette,
    remove_stop,
    sample_gradient,
    set_stop_color,
    set_stop_position,
)
from palette_studio.premade import PREMADE_PALETTES

HEX = re.compile(r"^#[0-9a-f]{6}$")


def _grad(*stops, gtype=GradientType.LINEAR, direction=Direction.TO_RIGHT):
    return Gradient(
        id="g1",
        name="Test",
        type=gtype,
        direction=direction,
        stops=tuple(GradientStop(c, p) for c, p in stops),
    )


def test_css_linear_sorts_stops():
    g = _grad(("#000000", 100), ("#ffffff", 0), direction=Direction.TO_BOTTOM_LEFT)
    assert gradient_css(g) == "linear-gradient(to bottom left, #ffffff 0%, #000000 100%)"


def test_css_radial_and_conic_ignore_direction():
    stops = (("#ff0000", 0), ("#0000ff", 50.5))
    assert (
        gradient_css(_grad(*stops, gtype=GradientType.RADIAL))
        == "radial-gradient(circle, #ff0000 0%, #0000ff 50.5%)"
    )
    assert (
        gradient_css(_grad(*stops, gtype=GradientType.CONIC))
        == "conic-gradient(from 0deg, #ff0000 0%, #0000ff 50.5%)"
    )


def test_random_gradient():
    g = generate_random_gradient(rng=random.Random(21))
    assert g.type is GradientType.LINEAR
    assert g.direction in RANDOM_DIRECTIONS
    assert [s.position for s in g.stops] == [0, 50, 100]
    assert all(HEX.match(s.color) for s in g.stops)
    assert gradient_css(g).startswith(f"linear-gradient({g.direction.value}, ")
    assert len(g.name.split(" ")) == 2


def test_from_palette_takes_first_four():
    palette = PREMADE_PALETTES[0]
    g = gradient_from_palette(palette, rng=random.Random(1))
    assert g.name == "Sunset Vibes Gradient"
    assert g.direction is Direction.TO_RIGHT
    assert [s.color for s in g.stops] == [c.hex for c in palette.colors[:4]]
    assert [s.position for s in g.stops] == pytest.approx([0, 100 / 3, 200 / 3, 100])
    assert gradient_css(g).endswith("#6BCB77 100%)")


@pytest.mark.parametrize("count", [0, 1, 6])
def test_stop_count_invariant(count):
    with pytest.raises(GradientError):
        _grad(*[("#000000", 0)] * count)


def test_position_invariant():
    with pytest.raises(GradientError):
        _grad(("#000000", 0), ("#ffffff", 101))


def test_add_stop():
    g = _grad(("#000000", 0), ("#ffffff", 50))
    g2 = add_stop(g)
    assert g2.stops[-1] == GradientStop("#888888", 70)
    assert len(g.stops) == 2  # original untouched
    g3 = add_stop(add_stop(g2))
    assert g3.stops[-1].position == 100
    with pytest.raises(GradientError):
        add_stop(g3)


def test_remove_stop():
    g = _grad(("#000000", 0), ("#777777", 30), ("#ffffff", 100))
    g2 = remove_stop(g, 1)
    assert [s.color for s in g2.stops] == ["#000000", "#ffffff"]
    with pytest.raises(GradientError):
        remove_stop(g2, 0)
    with pytest.raises(GradientError):
        remove_stop(g, 5)


def test_set_stop_color_and_position():
    g = _grad(("#000000", 0), ("#ffffff", 100))
    assert set_stop_color(g, 0, "F00").stops[0].color == "#ff0000"
    with pytest.raises(ValueError):
        set_stop_color(g, 0, "nope")
    assert set_stop_position(g, 1, 150).stops[1].position == 100
    assert set_stop_position(g, 1, -5).stops[1].position == 0


def test_dict_round_trip_and_validation():
    g = _grad(("#000000", 0), ("#ffffff", 100), gtype=GradientType.CONIC)
    assert Gradient.from_dict(g.to_dict()) == g
    bad = g.to_dict() | {"type": "diamond"}
    with pytest.raises(GradientError):
        Gradient.from_dict(bad)


def test_sample_gradient_endpoints():
    g = _grad(("#000000", 0), ("#ffffff", 100))
    out = sample_gradient(g, 5)
    assert len(out) == 5
    assert out[0] == "#000000"
    assert out[-1] == "#ffffff"
    mid = out[2]
    assert mid[1:3] == mid[3:5] == mid[5:7]


def test_sample_gradient_honours_positions():
    g = _grad(("#ffffff", 50), ("#000000", 0))
    out = sample_gradient(g, 3)
    assert out == ["#000000", "#ffffff", "#ffffff"]


@pytest.mark.parametrize("stops", [[{"position": 0}, {"position": 100}], [1, 2], "ab"])
def test_from_dict_rejects_malformed_stops(stops):
    with pytest.raises(GradientError):
        Gradient.from_dict({"stops": stops})
