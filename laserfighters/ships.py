"""The three kinds of ship and their special abilities."""

import random
import time
from typing import Optional

from laserfighters.definitions import GOLIATH_HEALTH
from laserfighters.gamedata import GameData
from laserfighters.player import Clock, Ship


class Goliath(Ship):
    """A heavy ship that repairs itself a little at a time."""

    REPAIR = 2

    def ability(self) -> None:
        """Regain a little health, up to the Goliath's maximum."""
        self.health = min(self.health + self.REPAIR, GOLIATH_HEALTH)


class _RandomShip(Ship):
    """A ship whose ability draws on a random number generator."""

    def __init__(
        self,
        data: GameData,
        r: int,
        x: float,
        y: float,
        hp_x: float,
        hp_y: float,
        texture_path,
        is_flipped: bool,
        health: int,
        speed: int,
        fire_rate: int,
        *,
        clock: Clock = time.monotonic,
        rng: Optional[random.Random] = None,
    ) -> None:
        super().__init__(
            data, r, x, y, hp_x, hp_y, texture_path, is_flipped,
            health, speed, fire_rate, clock=clock,
        )
        self.rng = rng if rng is not None else random.Random()


class Arachne(_RandomShip):
    """A gambler: its ability deals it between -5 and 10 damage."""

    LOW = -5
    HIGH = 10

    def ability(self) -> None:
        """Take a random amount of damage; a negative amount heals."""
        self.take_damage(self.rng.randint(self.LOW, self.HIGH))


class Flea(_RandomShip):
    """A small, quick ship that can jump to a random place on its row."""

    MIN_X = 170
    MAX_X = 830

    def ability(self) -> None:
        """Teleport to a random horizontal position, keeping the row."""
        self.x = self.rng.randint(self.MIN_X, self.MAX_X)