import math

import pytest

from hexfield.config import GridSettings
from hexfield.geometry import FLAT, POINTY, CubeCoordinate, InvalidLayout, Layout, Point, pixel_to_hex
from hexfield.grid import (
    Grid,
    RadiusBounded,
    RectangleBounded,
    StrategyKind,
    Viewport,
    build_strategy,
    disk_size,
    fit_radius,
    hex_disk,
    rectangle_fill,
)


@pytest.mark.parametrize(("radius", "expected"), [(0, 1), (1, 7), (2, 19), (3, 37), (6, 127)])
def test_disk_cardinality(radius, expected):
    cells = list(hex_disk(radius))
    assert len(cells) == expected == disk_size(radius)
    assert len(set(cells)) == expected


def test_disk_members_within_radius():
    for c in hex_disk(4):
        assert max(abs(c.q), abs(c.r), abs(c.s)) <= 4
        assert c.q + c.r + c.s == 0


def test_disk_generation_order_starts_at_negative_q():
    first = next(hex_disk(2))
    assert first == CubeCoordinate(-2, 0, 2)


def test_disk_rejects_negative_radius():
    with pytest.raises(ValueError):
        list(hex_disk(-1))


def test_viewport_rejects_negative_dimensions():
    with pytest.raises(ValueError):
        Viewport(-1, 10)


def test_viewport_center():
    assert Viewport(800, 600).center == Point(400.0, 300.0)
    assert Viewport(0, 600).is_empty


def _samples(viewport: Viewport, step: float):
    x = 0.5
    while x < viewport.width:
        y = 0.5
        while y < viewport.height:
            yield x, y
            y += step
        x += step


@pytest.mark.parametrize("orientation", [POINTY, FLAT])
@pytest.mark.parametrize(
    ("width", "height", "size"),
    [(800, 600, 50.0), (100, 900, 20.0), (1200, 80, 15.0), (37, 41, 60.0)],
)
def test_rectangle_fill_covers_every_visible_pixel(orientation, width, height, size):
    viewport = Viewport(width, height)
    layout = Layout(orientation, size, viewport.center)
    grid = Grid.from_coordinates(rectangle_fill(layout, viewport))
    for x, y in _samples(viewport, 9.7):
        assert grid.contains(pixel_to_hex((x, y), layout))


@pytest.mark.parametrize("orientation", [POINTY, FLAT])
def test_rectangle_fill_matches_brute_force_sweep(orientation):
    viewport = Viewport(800, 600)
    layout = Layout(orientation, 50.0, viewport.center)
    pad = 2.0 * layout.size
    expected = set()
    for q in range(-40, 41):
        for r in range(-40, 41):
            x, y = layout.hex_to_pixel(q, r)
            if -pad < x < viewport.width + pad and -pad < y < viewport.height + pad:
                expected.add(CubeCoordinate(q, r, -q - r))
    assert set(rectangle_fill(layout, viewport)) == expected


def test_rectangle_fill_margin_zero_keeps_only_centres_inside():
    viewport = Viewport(300, 200)
    layout = Layout(FLAT, 25.0, viewport.center)
    for c in rectangle_fill(layout, viewport, margin=0.0):
        x, y = layout.hex_to_pixel(c.q, c.r)
        assert 0 < x < 300 and 0 < y < 200


def test_rectangle_fill_rejects_negative_margin():
    layout = Layout(POINTY, 10.0)
    with pytest.raises(ValueError):
        list(rectangle_fill(layout, Viewport(10, 10), margin=-1.0))


def test_fit_radius_pointy_800x600():
    radius, size = fit_radius(Viewport(800, 600), POINTY)
    assert radius == 5
    assert size == pytest.approx(600 / 11 / 2 * 0.9)


def test_fit_radius_flat_800x600():
    radius, size = fit_radius(Viewport(800, 600), FLAT)
    assert radius == 5
    assert size == pytest.approx(600 / 11 / math.sqrt(3.0) * 0.9)


def test_fit_radius_zero_target_gives_single_cell():
    radius, size = fit_radius(Viewport(800, 600), POINTY, target_radius=0)
    assert radius == 0
    assert size == pytest.approx(270.0)


def test_fit_radius_disk_fits_viewport():
    viewport = Viewport(1024, 768)
    radius, size = fit_radius(viewport, POINTY, target_radius=7)
    layout = Layout(POINTY, size, viewport.center)
    for c in hex_disk(radius):
        x, y = layout.hex_to_pixel(c.q, c.r)
        assert 0 <= x <= viewport.width
        assert 0 <= y <= viewport.height


def test_fit_radius_rejects_empty_viewport():
    with pytest.raises(InvalidLayout):
        fit_radius(Viewport(0, 600), POINTY)


@pytest.mark.parametrize("padding", [0.0, 1.5])
def test_fit_radius_rejects_bad_padding(padding):
    with pytest.raises(ValueError):
        fit_radius(Viewport(800, 600), POINTY, padding=padding)


def test_grid_mapping_behaviour():
    a, b = CubeCoordinate(0, 0, 0), CubeCoordinate(1, -1, 0)
    grid = Grid.from_coordinates([a, b, CubeCoordinate(1, -1, 0)])
    assert len(grid) == 2
    assert list(grid) == ["0,0,0", "1,-1,0"]
    assert grid["1,-1,0"] is b
    assert grid.contains(CubeCoordinate(1, -1, 0))
    assert grid.lookup(CubeCoordinate(1, -1, 0)) is b
    assert grid.lookup(CubeCoordinate(5, -5, 0)) is None
    assert "0,0,0" in grid
    assert grid.coordinates() == [a, b]


def test_radius_bounded_with_fixed_radius_uses_configured_size():
    layout, grid = RadiusBounded(radius=2).build(Viewport(800, 600), POINTY, 50.0)
    assert len(grid) == 19
    assert layout.size == 50.0
    assert layout.origin == Point(400.0, 300.0)


def test_radius_bounded_auto_fit():
    layout, grid = RadiusBounded().build(Viewport(800, 600), POINTY, 50.0)
    assert len(grid) == disk_size(5)
    assert layout.size == pytest.approx(24.545454, rel=1e-5)


def test_rectangle_bounded_centres_origin():
    layout, grid = RectangleBounded().build(Viewport(640, 480), FLAT, 30.0)
    assert layout.origin == Point(320.0, 240.0)
    assert grid.contains(CubeCoordinate(0, 0, 0))
    assert RectangleBounded.kind is StrategyKind.RECTANGLE


def test_build_strategy_from_settings():
    radius = build_strategy(GridSettings(radius=3, target_radius=4, fit_padding=0.8))
    assert radius == RadiusBounded(radius=3, target_radius=4, padding=0.8)
    rectangle = build_strategy(GridSettings(strategy="rectangle", margin=1.5))
    assert rectangle == RectangleBounded(margin=1.5)
