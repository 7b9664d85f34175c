from dataclasses import dataclass, field
from typing import Optional, Sequence

from chaikin.config import CLICK_RADIUS
from .math import Point, dist2
from .subdivision import is_closed


@dataclass
class ControlPath:
    """
      - points: control polygon vertices, in insertion order
      - radius: closing distance used to derive `closed`

    Coordinates are stored as given; clamping to the canvas is the caller's job.
    """
    points: list[Point] = field(default_factory=list)
    radius: float = CLICK_RADIUS

    @property
    def closed(self) -> bool:
        return is_closed(self.points, self.radius)

    # read-only views
    def as_points(self) -> Sequence[Point]:
        return tuple(self.points)

    def add_point(self, p: Point) -> "ControlPath":
        self.points.append((float(p[0]), float(p[1])))
        return self

    def find_near(self, p: Point, radius: float) -> Optional[int]:
        """
        Return the lowest index whose point lies within radius of p, or None.
        Ties go to the earliest inserted point, not the nearest one.
        """
        r2 = radius * radius
        for i, q in enumerate(self.points):
            if dist2(q, p) <= r2:
                return i
        return None

    def edit_point(self, index: int, p: Point) -> "ControlPath":
        if not 0 <= index < len(self.points):
            raise IndexError(f"Control point index {index} out of range (0..{len(self.points) - 1})")
        self.points[index] = (float(p[0]), float(p[1]))
        return self

    def clear(self) -> "ControlPath":
        self.points = []
        return self

    def __len__(self):
        return len(self.points)
