from __future__ import annotations

import enum
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Tuple

from . import config

Point = Tuple[float, float]


class TowerType(str, enum.Enum):
    BASIC = "basic"
    SPLASH = "splash"
    BEAM = "beam"

    @property
    def spec(self) -> Dict[str, Any]:
        return config.TOWERS[self.value]

    @property
    def cost(self) -> int:
        return self.spec["cost"]

    @property
    def label(self) -> str:
        return self.spec["name"]

    @property
    def color(self) -> str:
        return self.spec["color"]


class EnemyVariant(str, enum.Enum):
    NORMAL = "normal"
    ARMORED = "armored"
    BOSS = "boss"

    @property
    def spec(self) -> Dict[str, Any]:
        return config.ENEMY_VARIANTS[self.value]

    def resist_against(self, tower_type: TowerType) -> float:
        return self.spec["resist"].get(tower_type.value, 1.0)


class PayloadKind(str, enum.Enum):
    DIRECT = "direct"
    SPLASH = "splash"


class GamePhase(str, enum.Enum):
    IDLE = "idle"
    WAVE_ACTIVE = "wave_active"
    WAVE_COMPLETE = "wave_complete"


class ActionKind(str, enum.Enum):
    PLACE_TOWER = "place_tower"
    UPGRADE_SELECTED = "upgrade_selected"
    SELECT_TOWER = "select_tower"
    START_WAVE = "start_wave"
    SET_AUTO_WAVE = "set_auto_wave"
    SET_TURBO = "set_turbo"
    RESET = "reset"


@dataclass(frozen=True)
class TowerStats:
    range: float
    damage: float
    fire_rate: float
    splash_radius: float
    projectile_speed: float


@dataclass(frozen=True)
class WaveParameters:
    count: int
    hp: int
    speed: float
    gap: float


@dataclass(frozen=True)
class SpawnRecord:
    hp: int
    speed: float
    variant: EnemyVariant = EnemyVariant.NORMAL


@dataclass(frozen=True)
class Beam:
    tower_id: int
    start: Point
    end: Point


@dataclass(frozen=True)
class WaveReport:
    wave_number: int
    reward: int
    bonus: int


@dataclass(frozen=True)
class Action:
    kind: ActionKind
    position: Optional[Point] = None
    tower_type: Optional[TowerType] = None
    tower_id: Optional[int] = None
    enabled: bool = False


@dataclass
class GameSettings:
    auto_wave: bool = False
    turbo: bool = False
    sound: bool = config.ENABLE_SOUND
    starting_money: int = config.INITIAL_MONEY
    starting_lives: int = config.INITIAL_LIVES


@dataclass(frozen=True)
class TowerView:
    id: int
    position: Point
    tower_type: TowerType
    level: int
    stats: TowerStats
    upgrade_cost: int
    selected: bool


@dataclass(frozen=True)
class EnemyView:
    id: int
    position: Point
    hp: float
    max_hp: float
    radius: float
    variant: EnemyVariant


@dataclass(frozen=True)
class ProjectileView:
    position: Point
    kind: PayloadKind


@dataclass(frozen=True)
class Snapshot:
    money: int
    lives: int
    wave_number: int
    phase: GamePhase
    game_over: bool
    auto_wave: bool
    turbo: bool
    auto_wave_countdown: Optional[float]
    wave_report: Optional[WaveReport]
    selected_tower_id: Optional[int]
    towers: List[TowerView] = field(default_factory=list)
    enemies: List[EnemyView] = field(default_factory=list)
    projectiles: List[ProjectileView] = field(default_factory=list)
    beams: List[Beam] = field(default_factory=list)
