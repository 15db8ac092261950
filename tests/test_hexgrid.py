import math

import pytest

from terrain.hexgrid import HexGrid, WorldPosition, hex_corners, row_parity


def test_position_is_pure():
    grid = HexGrid()
    assert grid.position_for(3, -7) == grid.position_for(3, -7)
    assert grid.position_for(0, 0) == (0.0, 0.0)


def test_odd_rows_shift_half_a_column():
    grid = HexGrid()
    assert grid.position_for(0, 1).x == pytest.approx(0.885)
    assert grid.position_for(2, 3) == pytest.approx(((2 + 0.5) * 1.77, 3 * 1.535))
    # truncated remainder: negative odd rows shift the other way
    assert row_parity(-1) == -1.0
    assert grid.position_for(0, -1).x == pytest.approx(-0.885)
    assert grid.position_for(4, -2).x == pytest.approx(4 * 1.77)


def test_play_area_filter():
    grid = HexGrid()
    assert grid.is_in_bounds(WorldPosition(16.0, 0.0))
    assert not grid.is_in_bounds(WorldPosition(16.01, 0.0))
    assert grid.candidate_count() == 41 * 41
    tiles = list(grid.tiles())
    assert len(tiles) == 301
    assert all(math.hypot(p.x, p.z) <= 16.0 for _, _, p in tiles)


def test_enumeration_is_column_major():
    coords = list(HexGrid().coordinates())
    assert coords[0] == (-20, -20)
    assert coords[1] == (-20, -19)
    assert coords[-1] == (20, 20)


def test_hex_corners():
    center = WorldPosition(2.0, -1.0)
    pts = hex_corners(center)
    assert len(pts) == 6
    assert pts[0] == pytest.approx((2.0, 0.0))
    for x, z in pts:
        assert math.hypot(x - center.x, z - center.z) == pytest.approx(1.0)
