from __future__ import annotations

import math


def clamp(value: float, low: float, high: float) -> float:
    return max(low, min(high, value))


def distance(ax: float, ay: float, bx: float, by: float) -> float:
    return math.hypot(ax - bx, ay - by)


def round_half_up(value: float) -> int:
    # round() would send 14.5 to 14; costs and wave sizes round .5 upwards
    return int(math.floor(value + 0.5))
