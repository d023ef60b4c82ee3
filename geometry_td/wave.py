"""Wave system for the tower defense game."""

import logging
from collections import deque

from . import config
from .models import EnemyVariant, SpawnRecord, WaveParameters
from .utils import round_half_up

logger = logging.getLogger(__name__)


def wave_parameters(index):
    """Scale the base wave to the given wave index.

    Hit points grow geometrically; count and speed grow linearly up to a cap
    while the spawn gap shrinks down to a floor.

    Args:
        index: 0-based wave index

    Returns:
        WaveParameters: count, hp, speed and spawn gap for the wave
    """
    base = config.WAVE_BASE
    n = index + 1
    hp = round_half_up(base["hp"] * config.WAVE_HP_GROWTH ** (n - 1))
    count = round_half_up(base["count"] + min(config.WAVE_COUNT_MAX_EXTRA, (n - 1) * config.WAVE_COUNT_STEP))
    speed = min(config.WAVE_SPEED_MAX, base["speed"] + (n - 1) * config.WAVE_SPEED_STEP)
    gap = max(config.WAVE_GAP_MIN, base["gap"] - (n - 1) * config.WAVE_GAP_STEP)
    return WaveParameters(count=count, hp=hp, speed=speed, gap=gap)


def _variant_record(params, variant):
    spec = variant.spec
    return SpawnRecord(
        hp=round_half_up(params.hp * spec["hp_mult"]),
        speed=params.speed * spec["speed_mult"],
        variant=variant,
    )


def build_spawn_queue(index):
    """Expand a wave into its ordered list of spawn records.

    Args:
        index: 0-based wave index

    Returns:
        list: SpawnRecord entries in spawn order
    """
    params = wave_parameters(index)
    queue = [SpawnRecord(hp=params.hp, speed=params.speed) for _ in range(params.count)]

    if index >= config.ARMORED_FROM_WAVE:
        armored = round_half_up(params.count * config.ARMORED_FRACTION)
        record = _variant_record(params, EnemyVariant.ARMORED)
        for slot in range(armored):
            queue[int((slot + 0.5) * params.count / armored)] = record

    if index >= config.BOSS_FROM_WAVE:
        queue.append(_variant_record(params, EnemyVariant.BOSS))

    return queue


class WaveDirector:
    """Feeds a wave's spawn queue out at a fixed interval."""

    def __init__(self):
        """Initialize the wave director."""
        self.index = 0
        self.queue = deque()
        self.spawn_interval = 0.0
        self.elapsed = 0.0
        self.in_progress = False

    @property
    def exhausted(self):
        return not self.queue

    @property
    def remaining(self):
        return len(self.queue)

    def start(self, index):
        """Load the spawn queue for a wave.

        Args:
            index: 0-based wave index

        Returns:
            int: Number of enemies queued
        """
        params = wave_parameters(index)
        self.index = index
        self.queue = deque(build_spawn_queue(index))
        self.spawn_interval = params.gap
        self.elapsed = 0.0
        self.in_progress = True
        logger.debug("Wave %d queued: %d spawns every %.2fs", index + 1, len(self.queue), params.gap)
        return len(self.queue)

    def finish(self):
        self.in_progress = False
        self.queue.clear()

    def update(self, dt):
        """Release the spawns that are due.

        Args:
            dt: Delta time since last update

        Returns:
            list: SpawnRecord entries to instantiate this tick
        """
        if not self.in_progress:
            return []

        self.elapsed += dt
        due = []
        while self.queue and self.elapsed >= self.spawn_interval:
            self.elapsed -= self.spawn_interval
            due.append(self.queue.popleft())
        return due
