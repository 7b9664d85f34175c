Point = tuple[float, float]


def dist2(a: Point, b: Point) -> float:
    dx = a[0] - b[0]
    dy = a[1] - b[1]
    return dx * dx + dy * dy


def clamp_point(p: Point, width: float, height: float) -> Point:
    """
    Clamp p into the canvas rectangle [0, width] x [0, height].
    """
    x = min(max(float(p[0]), 0.0), float(width))
    y = min(max(float(p[1]), 0.0), float(height))
    return x, y
