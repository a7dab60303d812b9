"""Planar geometry helpers used by the simulation: rectangles, segment tests, units."""

from __future__ import annotations

import math
from dataclasses import dataclass

_PARALLEL_EPSILON = 1e-6


@dataclass(frozen=True)
class Rect:
    """Axis-aligned rectangle given by its top-left corner and its size."""

    x: float
    y: float
    width: float
    height: float

    @classmethod
    def square(cls, center_x: float, center_y: float, size: float) -> Rect:
        """Return a square of side ``size`` centred on the given point."""
        half = size / 2.0
        return cls(center_x - half, center_y - half, size, size)

    @property
    def left(self) -> float:
        return self.x

    @property
    def top(self) -> float:
        return self.y

    @property
    def right(self) -> float:
        return self.x + self.width

    @property
    def bottom(self) -> float:
        return self.y + self.height

    @property
    def center(self) -> tuple[float, float]:
        return (self.x + self.width / 2.0, self.y + self.height / 2.0)

    def adjusted(self, dx1: float, dy1: float, dx2: float, dy2: float) -> Rect:
        """Return a rectangle whose corners are moved by the given offsets."""
        return Rect(
            self.x + dx1,
            self.y + dy1,
            self.width + dx2 - dx1,
            self.height + dy2 - dy1,
        )


def line_intersects_line(
    x1: float,
    y1: float,
    x2: float,
    y2: float,
    x3: float,
    y3: float,
    x4: float,
    y4: float,
) -> bool:
    """Tell whether segment (x1, y1)-(x2, y2) meets segment (x3, y3)-(x4, y4).

    Parallel segments only count as meeting when the second one is horizontal
    or vertical, lies on the same line as the first and their ranges overlap.
    """
    denominator = (y4 - y3) * (x2 - x1) - (x4 - x3) * (y2 - y1)

    if abs(denominator) < _PARALLEL_EPSILON:
        if y4 - y3 == 0:
            if y1 != y3:
                return False
            return max(x1, x2) >= min(x3, x4) and min(x1, x2) <= max(x3, x4)
        if x4 - x3 == 0:
            if x1 != x3:
                return False
            return max(y1, y2) >= min(y3, y4) and min(y1, y2) <= max(y3, y4)
        return False

    ua = ((x4 - x3) * (y1 - y3) - (y4 - y3) * (x1 - x3)) / denominator
    ub = ((x2 - x1) * (y1 - y3) - (y2 - y1) * (x1 - x3)) / denominator
    return 0 <= ua <= 1 and 0 <= ub <= 1


def line_intersects_rect(x1: float, y1: float, x2: float, y2: float, rect: Rect) -> bool:
    """Tell whether the segment crosses any of the four sides of ``rect``.

    A segment lying wholly inside the rectangle touches no side and so does
    not count.
    """
    left, right, top, bottom = rect.left, rect.right, rect.top, rect.bottom
    sides = (
        (left, top, right, top),
        (left, bottom, right, bottom),
        (left, top, left, bottom),
        (right, top, right, bottom),
    )
    return any(line_intersects_line(x1, y1, x2, y2, *side) for side in sides)


def calculate_distance(x1: float, y1: float, x2: float, y2: float) -> float:
    """Euclidean distance between two points."""
    return math.sqrt((x2 - x1) ** 2 + (y2 - y1) ** 2)


def degrees_to_radians(degrees: float) -> float:
    return degrees * math.pi / 180.0


def radians_to_degrees(radians: float) -> float:
    return radians * 180.0 / math.pi


def format_time(seconds: float) -> str:
    """Format a duration in seconds as ``HH:MM:SS``, dropping fractions."""
    hours = int(seconds / 3600)
    minutes = int((seconds - hours * 3600) / 60)
    secs = int(seconds - hours * 3600 - minutes * 60)
    return f"{hours:02d}:{minutes:02d}:{secs:02d}"