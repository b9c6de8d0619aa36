"""Vector and geometry utility functions."""

import math
from collections.abc import Sequence

Point3 = tuple[float, float, float]


def dist3(a: Point3, b: Point3) -> float:
    """Euclidean distance between 3D points."""
    return math.sqrt((a[0] - b[0]) ** 2 + (a[1] - b[1]) ** 2 + (a[2] - b[2]) ** 2)


def clamp(v: float, lo: float, hi: float) -> float:
    """Clamp value to range [lo, hi]."""
    if lo > hi:
        raise ValueError(f"clamp bounds out of order: {lo} > {hi}")
    return max(lo, min(hi, v))


def lerp(start: float, end: float, factor: float) -> float:
    """Linear interpolation from start to end."""
    return start + (end - start) * factor


def lerp3(start: Point3, end: Point3, factor: float) -> Point3:
    """Component-wise linear interpolation of 3D points."""
    return (
        lerp(start[0], end[0], factor),
        lerp(start[1], end[1], factor),
        lerp(start[2], end[2], factor),
    )


def bounding_box2(points: Sequence[Sequence[float]]) -> tuple[float, float, float, float]:
    """Axis-aligned (min_x, min_y, max_x, max_y) of the x/y components."""
    xs = [p[0] for p in points]
    ys = [p[1] for p in points]
    return min(xs), min(ys), max(xs), max(ys)
