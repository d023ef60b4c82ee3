"""Money and lives bookkeeping."""

from __future__ import annotations

import logging
import math

from . import config

logger = logging.getLogger(__name__)


class Economy:
    def __init__(self, money: int = config.INITIAL_MONEY, lives: int = config.INITIAL_LIVES) -> None:
        self.money = int(money)
        self.lives = int(lives)

    @property
    def out_of_lives(self) -> bool:
        return self.lives <= 0

    def can_afford(self, amount: int) -> bool:
        return self.money >= amount

    def spend(self, amount: int) -> bool:
        if amount < 0 or not self.can_afford(amount):
            logger.debug("Cannot spend %d with %d in the bank", amount, self.money)
            return False
        self.money -= amount
        return True

    def earn(self, amount: int) -> None:
        self.money += int(amount)

    def lose_life(self) -> None:
        self.lives -= 1

    def wave_bonus(self) -> int:
        """Interest on the current balance paid at wave completion."""
        return int(math.floor(self.money * config.WAVE_INTEREST_RATE))

    def award_wave_clear(self) -> tuple[int, int]:
        """Pay the flat clear reward plus interest; return (reward, bonus)."""
        reward = config.WAVE_CLEAR_REWARD
        bonus = self.wave_bonus()
        self.money += reward + bonus
        return reward, bonus
