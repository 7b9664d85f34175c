"""Shared pytest fixtures for curve editor tests."""

from __future__ import annotations

import pytest

from chaikin.config import EditorConfig
from chaikin.core import CurveEditor, Point


@pytest.fixture
def open_points() -> list[Point]:
    """Zig-zag whose ends are far apart (open curve)."""
    return [(0.0, 0.0), (100.0, 0.0), (100.0, 100.0), (300.0, 50.0)]


@pytest.fixture
def closed_square() -> list[Point]:
    """Square whose last click landed near the first vertex."""
    return [(0.0, 0.0), (100.0, 0.0), (100.0, 100.0), (0.0, 100.0), (2.0, 2.0)]


@pytest.fixture
def triangle() -> list[Point]:
    """Triangle closed by a point within the click radius of the first."""
    return [(0.0, 0.0), (100.0, 0.0), (50.0, 86.6), (1.0, 1.0)]


@pytest.fixture
def editor() -> CurveEditor:
    """Editor with the default right-drag bindings."""
    return CurveEditor(EditorConfig())


@pytest.fixture
def left_click_editor() -> CurveEditor:
    """Editor with single-button bindings."""
    return CurveEditor(EditorConfig(interaction="left-click"))


def add_points(editor: CurveEditor, points: list[Point]) -> None:
    """Append points through the editor so the cache is rebuilt each time."""
    for p in points:
        editor.add_point(p)
