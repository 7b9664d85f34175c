"""Tests for geometry helpers and the control point store."""

from __future__ import annotations

import pytest

from chaikin.core import ControlPath, clamp_point, dist2


class TestGeometry:
    """Tests for dist2 and clamp_point."""

    def test_dist2(self) -> None:
        """Squared distance, no square root."""
        assert dist2((0.0, 0.0), (3.0, 4.0)) == 25.0
        assert dist2((1.0, 1.0), (1.0, 1.0)) == 0.0

    def test_clamp_inside(self) -> None:
        """Points on the canvas are untouched."""
        assert clamp_point((10.0, 20.0), 100.0, 50.0) == (10.0, 20.0)

    def test_clamp_outside(self) -> None:
        """Each coordinate is clamped to its own range."""
        assert clamp_point((-5.0, 80.0), 100.0, 50.0) == (0.0, 50.0)
        assert clamp_point((150.0, -1.0), 100.0, 50.0) == (100.0, 0.0)


class TestControlPath:
    """Tests for ControlPath."""

    def test_add_point_appends(self) -> None:
        """Points keep insertion order."""
        path = ControlPath()
        path.add_point((1.0, 2.0)).add_point((3.0, 4.0))
        assert path.points == [(1.0, 2.0), (3.0, 4.0)]
        assert len(path) == 2

    def test_add_point_stores_floats(self) -> None:
        """Integer input is stored as floats."""
        path = ControlPath().add_point((1, 2))
        assert path.points == [(1.0, 2.0)]
        assert isinstance(path.points[0][0], float)

    def test_find_near_hit(self) -> None:
        """A point within the radius is found."""
        path = ControlPath(points=[(0.0, 0.0), (50.0, 50.0)])
        assert path.find_near((55.0, 52.0), 10.0) == 1

    def test_find_near_miss(self) -> None:
        """Nothing within the radius gives None."""
        path = ControlPath(points=[(0.0, 0.0), (50.0, 50.0)])
        assert path.find_near((30.0, 30.0), 10.0) is None

    def test_find_near_prefers_lowest_index(self) -> None:
        """Ties go to insertion order, not to the nearest point."""
        path = ControlPath(points=[(0.0, 0.0), (5.0, 0.0)])
        assert path.find_near((5.0, 0.0), 10.0) == 0

    def test_find_near_inclusive_radius(self) -> None:
        """A point exactly on the radius counts as a hit."""
        path = ControlPath(points=[(0.0, 0.0)])
        assert path.find_near((6.0, 8.0), 10.0) == 0

    def test_edit_point(self) -> None:
        """Replace in place."""
        path = ControlPath(points=[(0.0, 0.0), (50.0, 50.0)])
        path.edit_point(1, (60.0, 70.0))
        assert path.points == [(0.0, 0.0), (60.0, 70.0)]

    @pytest.mark.parametrize("index", [-1, 2, 10])
    def test_edit_point_out_of_range(self, index: int) -> None:
        """Out-of-range index is a programming error."""
        path = ControlPath(points=[(0.0, 0.0), (50.0, 50.0)])
        with pytest.raises(IndexError):
            path.edit_point(index, (1.0, 1.0))
        assert path.points == [(0.0, 0.0), (50.0, 50.0)]

    def test_clear(self) -> None:
        """Clear empties the store."""
        path = ControlPath(points=[(0.0, 0.0), (50.0, 50.0)])
        path.clear()
        assert path.points == []

    def test_closed_tracks_current_points(self, triangle) -> None:
        """Closedness is derived from the points on every read."""
        path = ControlPath(points=list(triangle))
        assert path.closed
        path.edit_point(3, (200.0, 200.0))
        assert not path.closed
        path.edit_point(3, (0.0, 5.0))
        assert path.closed
        path.clear()
        assert not path.closed

    def test_as_points_is_read_only_copy(self) -> None:
        """as_points returns a tuple snapshot."""
        path = ControlPath(points=[(0.0, 0.0)])
        view = path.as_points()
        path.add_point((1.0, 1.0))
        assert view == ((0.0, 0.0),)
