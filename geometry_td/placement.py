"""Spatial legality checks for placing new towers."""

from __future__ import annotations

import logging
from typing import Iterable

from . import config
from .models import Point, TowerType
from .path import Path
from .utils import distance

logger = logging.getLogger(__name__)


def within_bounds(position: Point, margin: float = config.PLACEMENT_MARGIN) -> bool:
    x, y = position
    return margin <= x <= config.CANVAS_WIDTH - margin and margin <= y <= config.CANVAS_HEIGHT - margin


def clear_of_path(position: Point, path: Path) -> bool:
    return path.min_distance_to(position[0], position[1]) >= config.MIN_PATH_CLEARANCE


def clear_of_towers(position: Point, towers: Iterable) -> bool:
    x, y = position
    return all(distance(x, y, tower.x, tower.y) >= config.MIN_TOWER_SPACING for tower in towers)


def placement_problem(position: Point, tower_type: TowerType, path: Path, towers: Iterable, money: int) -> str | None:
    """Return why a tower cannot go here, or None when it can."""
    if not within_bounds(position):
        return "out of bounds"
    if not clear_of_path(position, path):
        return "too close to the path"
    if not clear_of_towers(position, towers):
        return "too close to another tower"
    if money < tower_type.cost:
        return "not enough money"
    return None


def can_place(position: Point, tower_type: TowerType, path: Path, towers: Iterable, money: int) -> bool:
    problem = placement_problem(position, tower_type, path, towers, money)
    if problem:
        logger.debug("Cannot place %s at (%.0f, %.0f): %s", tower_type.value, position[0], position[1], problem)
        return False
    return True
