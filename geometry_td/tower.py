"""Tower system for the tower defense game."""

import math

from .models import TowerStats, TowerType
from .utils import round_half_up


def tower_stats(tower_type, level):
    """Compute the derived stats of a tower.

    Every stat grows linearly with level. Past the type's level cap damage is
    also multiplied once per extra level.

    Args:
        tower_type: TowerType of the tower
        level: Tower level (>= 1)

    Returns:
        TowerStats: Range, damage, fire rate, splash radius and projectile speed
    """
    spec = tower_type.spec
    per_level = spec["per_level"]
    steps = level - 1

    damage = spec["damage"] + per_level["damage"] * steps
    overlevels = level - spec["max_level"]
    if overlevels > 0:
        damage *= spec["overlevel_damage_mult"] ** overlevels

    return TowerStats(
        range=spec["range"] + per_level["range"] * steps,
        damage=damage,
        fire_rate=spec["fire_rate"] + per_level["fire_rate"] * steps,
        splash_radius=spec["splash_radius"] + per_level["splash_radius"] * steps,
        projectile_speed=spec["projectile_speed"],
    )


def upgrade_cost(tower_type, level):
    """Cost to take a tower from ``level`` to ``level + 1``.

    Exponential up to the level cap, then a flat overlevel price.
    """
    spec = tower_type.spec
    if level >= spec["max_level"]:
        return spec["overlevel_cost"]
    return round_half_up(spec["upgrade_base"] * spec["upgrade_growth"] ** (level - 1))


class Tower:
    """Represents a tower in the game."""

    def __init__(self, tower_id, x, y, tower_type=TowerType.BASIC):
        """Initialize a tower.

        Args:
            tower_id: Unique tower identifier
            x: X coordinate
            y: Y coordinate
            tower_type: TowerType of the tower
        """
        self.id = tower_id
        self.x = x
        self.y = y
        self.tower_type = tower_type
        self.level = 1
        self.cooldown = 0.0

    @property
    def stats(self):
        return tower_stats(self.tower_type, self.level)

    @property
    def upgrade_cost(self):
        return upgrade_cost(self.tower_type, self.level)

    def tick_cooldown(self, dt):
        self.cooldown -= dt

    def can_shoot(self):
        """Check if the tower's cooldown has expired."""
        return self.cooldown <= 0

    def reset_cooldown(self):
        """Restart the cooldown after a shot."""
        rate = self.stats.fire_rate
        self.cooldown = 1.0 / rate if rate > 0 else 1.0

    def upgrade(self):
        self.level += 1

    def get_distance_to(self, x, y):
        """Calculate distance to a point.

        Args:
            x: X coordinate
            y: Y coordinate

        Returns:
            float: Distance to the point
        """
        return math.hypot(self.x - x, self.y - y)

    def is_in_range(self, x, y):
        """Check if a point is in tower range.

        Args:
            x: X coordinate
            y: Y coordinate

        Returns:
            bool: True if within range
        """
        return self.get_distance_to(x, y) <= self.stats.range

    def find_target(self, enemies, path):
        """Pick the enemy this tower should shoot at.

        Projectile towers take the enemy furthest along the path. Beam towers
        take the oldest enemy on the field (smallest id).

        Args:
            enemies: Iterable of enemies
            path: Path used to locate enemies

        Returns:
            Enemy: The chosen enemy in range, or None
        """
        best = None
        for enemy in enemies:
            if not enemy.alive:
                continue
            x, y = path.position_at(enemy.s)
            if not self.is_in_range(x, y):
                continue
            if best is None:
                best = enemy
            elif self.tower_type is TowerType.BEAM:
                if enemy.id < best.id:
                    best = enemy
            elif enemy.s > best.s:
                best = enemy
        return best

    def __repr__(self):
        """String representation of the tower."""
        return f"Tower(#{self.id} {self.tower_type.label} L{self.level} at ({self.x}, {self.y}))"
