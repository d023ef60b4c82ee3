"""Enemy units that walk the path."""

from . import config
from .models import EnemyVariant, SpawnRecord
from .utils import round_half_up


class Enemy:
    """Represents an enemy unit in the game.

    Position is the arc-length progress ``s`` along the path; screen
    coordinates are looked up from the path when needed.
    """

    def __init__(self, enemy_id, hp, speed, variant=EnemyVariant.NORMAL):
        """Initialize an enemy.

        Args:
            enemy_id: Spawn-order identifier (strictly increasing)
            hp: Maximum hit points
            speed: Travel speed in units per second
            variant: Enemy variant tag
        """
        self.id = enemy_id
        self.variant = variant
        self.s = 0.0
        self.max_hp = float(hp)
        self.hp = float(hp)
        self.speed = float(speed)
        self.radius = variant.spec["radius"]

        self.alive = True
        self.leaked = False
        self.dead_for = 0.0

    @classmethod
    def from_spawn(cls, enemy_id, record: SpawnRecord):
        """Build an enemy from a queued spawn record."""
        return cls(enemy_id, record.hp, record.speed, record.variant)

    def advance(self, dt, path_length):
        """Move the enemy along the path.

        Args:
            dt: Simulated seconds elapsed
            path_length: Total length of the path

        Returns:
            bool: True if the enemy reached the end of the path on this step
        """
        if not self.alive:
            self.dead_for += dt
            return False

        self.s += self.speed * dt
        if self.s >= path_length:
            self.s = path_length
            self.alive = False
            self.leaked = True
            return True
        return False

    def take_damage(self, damage, source_type):
        """Apply damage from a tower, scaled by this variant's resistance.

        Args:
            damage: Raw damage amount
            source_type: TowerType that dealt the damage

        Returns:
            bool: True if this hit killed the enemy
        """
        if not self.alive:
            return False

        self.hp -= damage * self.variant.resist_against(source_type)
        if self.hp <= 0:
            self.alive = False
            return True
        return False

    def kill_reward(self):
        """Money awarded when this enemy is killed."""
        flat = self.variant.spec["reward"]
        if flat is not None:
            return flat
        return max(config.KILL_REWARD_MIN, round_half_up(self.max_hp * config.KILL_REWARD_FRACTION))

    def is_expired(self):
        """Check if a dead enemy has outlived its grace period."""
        return not self.alive and self.dead_for >= config.ENEMY_GRACE_SECONDS

    def __repr__(self):
        """String representation of the enemy."""
        return f"Enemy(#{self.id} {self.variant.value} hp={self.hp:.1f}/{self.max_hp:.0f} s={self.s:.1f})"
