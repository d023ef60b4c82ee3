"""Segment-chain path that enemies follow, with arc-length lookup."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, List, Sequence, Tuple

from . import config
from .utils import clamp, distance

Point = Tuple[float, float]


def point_segment_distance(px: float, py: float, ax: float, ay: float, bx: float, by: float) -> float:
    """Distance from point P to the segment AB.

    Projects P onto the line through AB, clamps the projection to the segment
    and measures to the clamped point.
    """
    vx, vy = bx - ax, by - ay
    wx, wy = px - ax, py - ay
    vv = vx * vx + vy * vy
    t = clamp((wx * vx + wy * vy) / vv, 0.0, 1.0) if vv > 0 else 0.0
    return distance(px, py, ax + t * vx, ay + t * vy)


@dataclass(frozen=True)
class Segment:
    start: Point
    end: Point
    length: float
    offset: float

    def point_at(self, t: float) -> Point:
        return (
            self.start[0] + (self.end[0] - self.start[0]) * t,
            self.start[1] + (self.end[1] - self.start[1]) * t,
        )

    def distance_to(self, x: float, y: float) -> float:
        return point_segment_distance(x, y, self.start[0], self.start[1], self.end[0], self.end[1])


class Path:
    """Ordered waypoints joined by straight segments."""

    def __init__(self, waypoints: Iterable[Point]) -> None:
        points: List[Point] = []
        for x, y in waypoints:
            point = (float(x), float(y))
            if points and points[-1] == point:
                continue
            points.append(point)
        if len(points) < 2:
            raise ValueError("a path needs at least two distinct waypoints")

        segments: List[Segment] = []
        total = 0.0
        for start, end in zip(points, points[1:]):
            length = distance(start[0], start[1], end[0], end[1])
            segments.append(Segment(start, end, length, total))
            total += length

        self._points: Tuple[Point, ...] = tuple(points)
        self._segments: Tuple[Segment, ...] = tuple(segments)
        self._length = total

    @property
    def points(self) -> Sequence[Point]:
        return self._points

    @property
    def segments(self) -> Sequence[Segment]:
        return self._segments

    @property
    def length(self) -> float:
        return self._length

    @property
    def start(self) -> Point:
        return self._points[0]

    @property
    def end(self) -> Point:
        return self._points[-1]

    def position_at(self, s: float) -> Point:
        if s <= 0:
            return self.start
        if s >= self._length:
            return self.end
        for segment in self._segments:
            if s <= segment.offset + segment.length:
                return segment.point_at((s - segment.offset) / segment.length)
        return self.end

    def min_distance_to(self, x: float, y: float) -> float:
        return min(segment.distance_to(x, y) for segment in self._segments)


def default_path(width: float = config.CANVAS_WIDTH, height: float = config.CANVAS_HEIGHT) -> Path:
    """Snake path: three horizontal runs entering left, exiting right."""
    top = 80
    bottom = height - 80
    left = 80
    right = width - 80
    return Path(
        [
            (-80, top),
            (right, top),
            (right, top + 120),
            (left, top + 120),
            (left, top + 240),
            (right, top + 240),
            (right, bottom),
            (width + 80, bottom),
        ]
    )
