import pytest

from hexfield.geometry import ORIGIN, POINTY, CubeCoordinate, Layout, Point, hex_to_pixel
from hexfield.grid import Grid, SelectionState, SelectionTracker, hex_disk


@pytest.fixture
def layout() -> Layout:
    return Layout(POINTY, 50.0, Point(400.0, 300.0))


@pytest.fixture
def grid() -> Grid:
    return Grid.from_coordinates(hex_disk(2))


def test_starts_unselected():
    tracker = SelectionTracker()
    assert tracker.state is SelectionState.UNSELECTED
    assert tracker.selected is None


def test_on_point_selects_grid_member(layout, grid):
    tracker = SelectionTracker()
    hit = tracker.on_point((400.0, 300.0), layout, grid)
    assert hit == ORIGIN
    assert hit is grid["0,0,0"]
    assert tracker.state is SelectionState.SELECTED
    assert tracker.is_selected(ORIGIN)


def test_on_point_outside_grid_keeps_selection(layout, grid):
    tracker = SelectionTracker()
    tracker.on_point((400.0, 300.0), layout, grid)
    assert tracker.on_point((400.0, 900.0), layout, grid) is None
    assert tracker.selected == ORIGIN


def test_on_point_outside_grid_when_unselected(layout, grid):
    tracker = SelectionTracker()
    assert tracker.on_point((-500.0, -500.0), layout, grid) is None
    assert tracker.state is SelectionState.UNSELECTED


def test_on_point_moves_selection(layout, grid):
    tracker = SelectionTracker()
    tracker.on_point((400.0, 300.0), layout, grid)
    target = CubeCoordinate(2, -1, -1)
    assert tracker.on_point(hex_to_pixel(target, layout), layout, grid) == target
    assert not tracker.is_selected(ORIGIN)
    assert tracker.is_selected(target)


def test_rebuild_without_selected_member_clears_selection(layout, grid):
    tracker = SelectionTracker()
    edge = CubeCoordinate(2, -2, 0)
    tracker.on_point(hex_to_pixel(edge, layout), layout, grid)
    assert tracker.selected == edge

    tracker.on_grid_rebuilt(Grid.from_coordinates(hex_disk(1)))
    assert tracker.state is SelectionState.UNSELECTED
    assert tracker.selected is None


def test_rebuild_keeping_member_rebinds_selection(layout, grid):
    tracker = SelectionTracker()
    tracker.on_point((400.0, 300.0), layout, grid)
    rebuilt = Grid.from_coordinates(hex_disk(3))
    tracker.on_grid_rebuilt(rebuilt)
    assert tracker.selected is rebuilt["0,0,0"]


def test_rebuild_when_unselected_is_a_no_op(grid):
    tracker = SelectionTracker()
    tracker.on_grid_rebuilt(grid)
    assert tracker.state is SelectionState.UNSELECTED


def test_clear(layout, grid):
    tracker = SelectionTracker()
    tracker.on_point((400.0, 300.0), layout, grid)
    tracker.clear()
    assert tracker.state is SelectionState.UNSELECTED


def test_select_only_accepts_members(grid):
    tracker = SelectionTracker()
    assert not tracker.select(CubeCoordinate(5, -5, 0), grid)
    assert tracker.selected is None
    assert tracker.select(CubeCoordinate(1, 0, -1), grid)
    assert tracker.selected == CubeCoordinate(1, 0, -1)
