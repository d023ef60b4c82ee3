"""Tower firing, projectile flight and damage resolution."""

from __future__ import annotations

import logging
import math
from typing import Callable, Dict, Iterable, List

from . import config
from .economy import Economy
from .enemy import Enemy
from .models import Beam, PayloadKind, TowerType
from .path import Path, point_segment_distance
from .projectile import Projectile
from .tower import Tower

logger = logging.getLogger(__name__)

EventFn = Callable[[str], None]


class CombatResolver:
    def __init__(self, path: Path, economy: Economy, emit: EventFn | None = None) -> None:
        self.path = path
        self.economy = economy
        self._emit = emit or (lambda name: None)
        self.projectiles: List[Projectile] = []
        self.beams: List[Beam] = []
        self.kills = 0

    def apply_damage(self, enemy: Enemy, damage: float, source_type: TowerType) -> bool:
        """Damage an enemy; on a kill, pay its reward. Returns True on the killing hit."""
        if not enemy.take_damage(damage, source_type):
            return False
        reward = enemy.kill_reward()
        self.economy.earn(reward)
        self.kills += 1
        self._emit("enemy_death")
        logger.debug("%r killed by %s tower, +%d", enemy, source_type.value, reward)
        return True

    def fire_towers(self, towers: Iterable[Tower], enemies: Dict[int, Enemy], dt: float) -> None:
        self.beams.clear()
        for tower in towers:
            if tower.tower_type is TowerType.BEAM:
                self._fire_beam(tower, enemies, dt)
                continue
            tower.tick_cooldown(dt)
            if not tower.can_shoot():
                continue
            target = tower.find_target(enemies.values(), self.path)
            if target is None:
                continue
            self.projectiles.append(Projectile(tower, target, self.path.position_at(target.s)))
            tower.reset_cooldown()
            self._emit("shoot")

    def _fire_beam(self, tower: Tower, enemies: Dict[int, Enemy], dt: float) -> None:
        target = tower.find_target(enemies.values(), self.path)
        if target is None:
            return
        stats = tower.stats
        tx, ty = self.path.position_at(target.s)
        dx, dy = tx - tower.x, ty - tower.y
        d = math.hypot(dx, dy) or 1.0
        reach = stats.range * config.BEAM_RANGE_FACTOR
        end = (tower.x + dx / d * reach, tower.y + dy / d * reach)
        beam = Beam(tower.id, (float(tower.x), float(tower.y)), end)
        self.beams.append(beam)

        # The beam pierces: everything under it burns, not just the target.
        for enemy in list(enemies.values()):
            if not enemy.alive:
                continue
            ex, ey = self.path.position_at(enemy.s)
            if point_segment_distance(ex, ey, beam.start[0], beam.start[1], end[0], end[1]) <= config.BEAM_HALF_WIDTH:
                self.apply_damage(enemy, stats.damage * dt, tower.tower_type)

    def update_projectiles(self, enemies: Dict[int, Enemy], dt: float) -> None:
        for projectile in self.projectiles:
            target = enemies.get(projectile.target_id)
            if target is None or not target.alive:
                projectile.dead = True
                continue

            tx, ty = self.path.position_at(target.s)
            if projectile.distance_to(tx, ty) <= config.IMPACT_RADIUS:
                self.apply_damage(target, projectile.damage, projectile.source_type)
                if projectile.kind is PayloadKind.SPLASH:
                    self._splash(projectile, (projectile.x, projectile.y), target.id, enemies)
                projectile.dead = True
                continue

            projectile.aim_at(tx, ty)
            projectile.step(dt)
            if projectile.out_of_bounds():
                projectile.dead = True

        self.projectiles = [p for p in self.projectiles if not p.dead]

    def _splash(self, projectile: Projectile, center, primary_id: int, enemies: Dict[int, Enemy]) -> None:
        damage = projectile.damage * projectile.splash_factor
        for enemy in list(enemies.values()):
            if enemy.id == primary_id or not enemy.alive:
                continue
            ex, ey = self.path.position_at(enemy.s)
            if math.hypot(ex - center[0], ey - center[1]) <= projectile.splash_radius:
                self.apply_damage(enemy, damage, projectile.source_type)

    def clear(self) -> None:
        self.projectiles.clear()
        self.beams.clear()
