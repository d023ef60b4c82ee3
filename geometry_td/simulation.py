"""Frame-stepped game state and the actions the player can take on it."""

from __future__ import annotations

import logging
from typing import Dict, List, Optional

from . import config
from .combat import CombatResolver
from .economy import Economy
from .enemy import Enemy
from .models import (
    Action,
    ActionKind,
    EnemyView,
    GamePhase,
    GameSettings,
    Point,
    ProjectileView,
    Snapshot,
    TowerType,
    TowerView,
    WaveReport,
)
from .path import Path, default_path
from .placement import can_place
from .tower import Tower
from .utils import clamp, distance
from .wave import WaveDirector

logger = logging.getLogger(__name__)


class Simulation:
    """Owns all simulation state and advances it one frame at a time.

    Player actions apply immediately and return whether they were accepted;
    rejected actions leave the state untouched.
    """

    def __init__(self, settings: GameSettings | None = None, path: Path | None = None) -> None:
        self.settings = settings or GameSettings()
        self.path = path or default_path()
        self.auto_wave = self.settings.auto_wave
        self.turbo = self.settings.turbo
        self._events: List[str] = []
        self._init_state()

    def _init_state(self) -> None:
        self.economy = Economy(self.settings.starting_money, self.settings.starting_lives)
        self.director = WaveDirector()
        self.combat = CombatResolver(self.path, self.economy, emit=self._emit)
        self.towers: List[Tower] = []
        self.enemies: Dict[int, Enemy] = {}
        self.wave_index = 0
        self.phase = GamePhase.IDLE
        self.game_over = False
        self.time = 0.0
        self.selected_tower_id: Optional[int] = None
        self.wave_report: Optional[WaveReport] = None
        self.overlay_timer = 0.0
        self.auto_countdown: Optional[float] = config.AUTO_WAVE_DELAY if self.auto_wave else None
        self._next_enemy_id = 1
        self._next_tower_id = 1

    # -- read-only helpers -------------------------------------------------

    @property
    def money(self) -> int:
        return self.economy.money

    @property
    def lives(self) -> int:
        return self.economy.lives

    @property
    def wave_number(self) -> int:
        return self.wave_index + 1

    @property
    def wave_active(self) -> bool:
        return self.phase is GamePhase.WAVE_ACTIVE

    @property
    def speed_multiplier(self) -> float:
        return config.TURBO_MULTIPLIER if self.turbo else 1.0

    @property
    def selected_tower(self) -> Optional[Tower]:
        return self.find_tower(self.selected_tower_id)

    @property
    def projectiles(self):
        return self.combat.projectiles

    def alive_enemies(self) -> List[Enemy]:
        return [enemy for enemy in self.enemies.values() if enemy.alive]

    def find_tower(self, tower_id: Optional[int]) -> Optional[Tower]:
        if tower_id is None:
            return None
        for tower in self.towers:
            if tower.id == tower_id:
                return tower
        return None

    def tower_at(self, x: float, y: float) -> Optional[int]:
        for tower in self.towers:
            if distance(x, y, tower.x, tower.y) <= config.TOWER_PICK_RADIUS:
                return tower.id
        return None

    def drain_events(self) -> List[str]:
        events, self._events = self._events, []
        return events

    def _emit(self, name: str) -> None:
        self._events.append(name)

    # -- frame update --------------------------------------------------------

    def tick(self, frame_dt: float) -> None:
        if self.game_over:
            return

        dt = clamp(frame_dt, 0.0, config.MAX_FRAME_DT) * self.speed_multiplier
        self.time += dt

        for record in self.director.update(dt):
            enemy = Enemy.from_spawn(self._next_enemy_id, record)
            self._next_enemy_id += 1
            self.enemies[enemy.id] = enemy

        for enemy in self.enemies.values():
            if enemy.advance(dt, self.path.length):
                self.economy.lose_life()
                self._emit("leak")
        if self.economy.out_of_lives:
            self._enter_game_over()
            return

        self.enemies = {eid: enemy for eid, enemy in self.enemies.items() if not enemy.is_expired()}

        self.combat.fire_towers(self.towers, self.enemies, dt)
        self.combat.update_projectiles(self.enemies, dt)

        if self.phase is GamePhase.WAVE_ACTIVE and self.director.exhausted and not self.alive_enemies():
            self._complete_wave()

        self._advance_timers(dt)

    def _complete_wave(self) -> None:
        reward, bonus = self.economy.award_wave_clear()
        self.wave_report = WaveReport(wave_number=self.wave_number, reward=reward, bonus=bonus)
        self.director.finish()
        self.wave_index += 1
        self.phase = GamePhase.WAVE_COMPLETE
        self.overlay_timer = config.WAVE_OVERLAY_SECONDS
        if self.auto_wave:
            self.auto_countdown = config.AUTO_WAVE_DELAY
        self._emit("wave_complete")
        logger.info(
            "Wave %d cleared: +%d reward, +%d bonus (money %d, lives %d)",
            self.wave_report.wave_number,
            reward,
            bonus,
            self.money,
            self.lives,
        )

    def _advance_timers(self, dt: float) -> None:
        if self.phase is GamePhase.WAVE_COMPLETE:
            self.overlay_timer -= dt
            if self.overlay_timer <= 0:
                self.overlay_timer = 0.0
                self.phase = GamePhase.IDLE

        if self.auto_countdown is not None and not self.wave_active:
            self.auto_countdown -= dt
            if self.auto_countdown <= 0:
                self.auto_countdown = None
                self.start_wave()

    def _enter_game_over(self) -> None:
        self.game_over = True
        self.auto_countdown = None
        self._emit("game_over")
        logger.info("Game over on wave %d with %d towers", self.wave_number, len(self.towers))

    # -- player actions ------------------------------------------------------

    def place_tower(self, position: Point, tower_type: TowerType | str = TowerType.BASIC) -> bool:
        if self.game_over:
            return False
        tower_type = TowerType(tower_type)
        if not can_place(position, tower_type, self.path, self.towers, self.money):
            return False
        if not self.economy.spend(tower_type.cost):
            return False
        tower = Tower(self._next_tower_id, position[0], position[1], tower_type)
        self._next_tower_id += 1
        self.towers.append(tower)
        self._emit("tower_place")
        logger.debug("Placed %r", tower)
        return True

    def select_tower(self, tower_id: Optional[int]) -> bool:
        if tower_id is not None and self.find_tower(tower_id) is None:
            return False
        self.selected_tower_id = tower_id
        return True

    def upgrade_selected_tower(self) -> bool:
        if self.game_over:
            return False
        tower = self.selected_tower
        if tower is None:
            return False
        cost = tower.upgrade_cost
        if not self.economy.spend(cost):
            logger.debug("Cannot upgrade %r: costs %d, have %d", tower, cost, self.money)
            return False
        tower.upgrade()
        self._emit("upgrade")
        logger.debug("Upgraded %r for %d", tower, cost)
        return True

    def start_wave(self) -> bool:
        if self.game_over or self.wave_active:
            return False
        queued = self.director.start(self.wave_index)
        self.phase = GamePhase.WAVE_ACTIVE
        self.auto_countdown = None
        self.wave_report = None
        self.overlay_timer = 0.0
        self._emit("wave_start")
        logger.info("Wave %d started with %d enemies", self.wave_number, queued)
        return True

    def set_auto_wave(self, enabled: bool) -> bool:
        self.auto_wave = bool(enabled)
        if not self.auto_wave:
            self.auto_countdown = None
        elif not self.game_over and not self.wave_active and self.auto_countdown is None:
            self.auto_countdown = config.AUTO_WAVE_DELAY
        return True

    def set_turbo(self, enabled: bool) -> bool:
        self.turbo = bool(enabled)
        return True

    def reset_game(self) -> bool:
        self.combat.clear()
        self._init_state()
        self._events = []
        self._emit("reset")
        logger.info("Game reset")
        return True

    def dispatch(self, action: Action) -> bool:
        kind = action.kind
        if kind is ActionKind.PLACE_TOWER:
            if action.position is None:
                return False
            return self.place_tower(action.position, action.tower_type or TowerType.BASIC)
        if kind is ActionKind.UPGRADE_SELECTED:
            return self.upgrade_selected_tower()
        if kind is ActionKind.SELECT_TOWER:
            return self.select_tower(action.tower_id)
        if kind is ActionKind.START_WAVE:
            return self.start_wave()
        if kind is ActionKind.SET_AUTO_WAVE:
            return self.set_auto_wave(action.enabled)
        if kind is ActionKind.SET_TURBO:
            return self.set_turbo(action.enabled)
        if kind is ActionKind.RESET:
            return self.reset_game()
        raise ValueError(f"unknown action kind: {kind!r}")

    # -- presentation --------------------------------------------------------

    def snapshot(self) -> Snapshot:
        towers = [
            TowerView(
                id=tower.id,
                position=(tower.x, tower.y),
                tower_type=tower.tower_type,
                level=tower.level,
                stats=tower.stats,
                upgrade_cost=tower.upgrade_cost,
                selected=tower.id == self.selected_tower_id,
            )
            for tower in self.towers
        ]
        enemies = [
            EnemyView(
                id=enemy.id,
                position=self.path.position_at(enemy.s),
                hp=enemy.hp,
                max_hp=enemy.max_hp,
                radius=enemy.radius,
                variant=enemy.variant,
            )
            for enemy in self.alive_enemies()
        ]
        projectiles = [ProjectileView(position=(p.x, p.y), kind=p.kind) for p in self.combat.projectiles]
        return Snapshot(
            money=self.money,
            lives=self.lives,
            wave_number=self.wave_number,
            phase=self.phase,
            game_over=self.game_over,
            auto_wave=self.auto_wave,
            turbo=self.turbo,
            auto_wave_countdown=self.auto_countdown,
            wave_report=self.wave_report if self.phase is GamePhase.WAVE_COMPLETE else None,
            selected_tower_id=self.selected_tower_id,
            towers=towers,
            enemies=enemies,
            projectiles=projectiles,
            beams=list(self.combat.beams),
        )
