import logging
from typing import Sequence

from chaikin.config import CLICK_RADIUS, MAX_STEPS
from .math import Point, dist2

logger = logging.getLogger(__name__)

# corner-cutting ratio: Q sits at 1/4 of each edge, R at 3/4
NEAR = 0.75
FAR = 0.25


def _cut(p0: Point, p1: Point) -> tuple[Point, Point]:
    q = (p0[0] * NEAR + p1[0] * FAR,
         p0[1] * NEAR + p1[1] * FAR)
    r = (p0[0] * FAR + p1[0] * NEAR,
         p0[1] * FAR + p1[1] * NEAR)
    return q, r


def chaikin_step(points: Sequence[Point], closed: bool) -> list[Point]:
    """
    One Chaikin corner-cutting pass.

    Open curves keep both endpoints and cut every edge (p0, p1) into
    (Q, R); a 2-point open curve is already its own limit and is returned
    unchanged. Closed curves are treated as a cycle: the wrap edge
    (n-1 -> 0) is cut like any other and no endpoint is kept.
    """
    n = len(points)
    if n < 2:
        return list(points)

    if closed:
        out: list[Point] = []
        for i in range(n):
            out.extend(_cut(points[i], points[(i + 1) % n]))
        return out

    if n == 2:
        return list(points)

    out = [points[0]]
    for p0, p1 in zip(points, points[1:]):
        out.extend(_cut(p0, p1))
    out.append(points[-1])
    return out


def is_closed(points: Sequence[Point], radius: float = CLICK_RADIUS) -> bool:
    """True when there are at least 3 points and the last one lies within radius of the first."""
    return len(points) >= 3 and dist2(points[0], points[-1]) <= radius * radius


def detect_and_normalize(base: Sequence[Point],
                         hint: bool = False,
                         radius: float = CLICK_RADIUS) -> tuple[list[Point], bool]:
    """
    Decide whether base describes a closed polygon and strip the duplicate
    closing point if it does.

    The proximity test overrides the hint. A closed sequence whose last point
    sits on top of the first has that last point dropped, so a closed curve of
    n vertices is not iterated as n + 1.
    """
    closed = hint or is_closed(base, radius)
    if closed and len(base) >= 2 and dist2(base[0], base[-1]) <= radius * radius:
        return list(base[:-1]), True
    return list(base), closed


def build_cache(base: Sequence[Point],
                max_steps: int = MAX_STEPS,
                closed_hint: bool = False,
                radius: float = CLICK_RADIUS) -> list[list[Point]]:
    """
    Return max_steps + 1 refinement levels of base.

    Level 0 is the normalized base; level k is chaikin_step(level k-1).
    The whole cache is rebuilt from scratch on every call.
    """
    current, closed = detect_and_normalize(base, closed_hint, radius)
    levels: list[list[Point]] = [current]
    for _ in range(max_steps):
        current = chaikin_step(current, closed)
        levels.append(current)

    logger.debug("Rebuilt cache: %d control points, closed=%s, %d points at level %d",
                 len(base), closed, len(levels[-1]), max_steps)
    return levels
