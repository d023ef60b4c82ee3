"""Projectile system for the tower defense game."""

import math

from . import config
from .models import PayloadKind, TowerType


class Projectile:
    """A homing shot fired by a tower.

    The target is held by enemy id only; the owner looks it up every tick and
    the projectile is dropped once the enemy is gone or dead.
    """

    def __init__(self, tower, target, target_pos):
        """Initialize a projectile.

        Args:
            tower: The tower that fired this projectile
            target: The target enemy
            target_pos: The target's current (x, y) position
        """
        stats = tower.stats
        self.x = float(tower.x)
        self.y = float(tower.y)
        self.speed = stats.projectile_speed
        self.damage = stats.damage
        self.target_id = target.id
        self.source_type = tower.tower_type
        if tower.tower_type is TowerType.SPLASH:
            self.kind = PayloadKind.SPLASH
            self.splash_radius = stats.splash_radius
            self.splash_factor = tower.tower_type.spec["splash_factor"]
        else:
            self.kind = PayloadKind.DIRECT
            self.splash_radius = 0.0
            self.splash_factor = 0.0

        self.vx = 0.0
        self.vy = 0.0
        self.aim_at(target_pos[0], target_pos[1])
        self.dead = False

    def aim_at(self, x, y):
        """Point the velocity at (x, y), keeping the fixed speed."""
        dx = x - self.x
        dy = y - self.y
        d = math.hypot(dx, dy) or 1.0
        self.vx = dx / d * self.speed
        self.vy = dy / d * self.speed

    def distance_to(self, x, y):
        return math.hypot(x - self.x, y - self.y)

    def step(self, dt):
        self.x += self.vx * dt
        self.y += self.vy * dt

    def out_of_bounds(self):
        """Check if the projectile has left the play area."""
        margin = config.PROJECTILE_BOUNDS_MARGIN
        return (
            self.x < -margin
            or self.x > config.CANVAS_WIDTH + margin
            or self.y < -margin
            or self.y > config.CANVAS_HEIGHT + margin
        )

    def __repr__(self):
        """String representation of the projectile."""
        return f"Projectile({self.kind.value} -> enemy #{self.target_id} at ({self.x:.1f}, {self.y:.1f}))"
