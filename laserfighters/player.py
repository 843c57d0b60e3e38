"""The ships the two players fly, with their shots and health."""

import time
from abc import ABC, abstractmethod
from typing import Callable

import pygame

from laserfighters.gamedata import GameData
from laserfighters.healthbar import HealthBar
from laserfighters.laser import Laser

Clock = Callable[[], float]


class Player(ABC):
    """A ship on screen: a sprite, its lasers, its health and its health bar.

    ``fire_rate`` is the least time between two shots, in milliseconds.
    ``clock`` returns the current time in seconds and decides when the ship
    may fire again.
    """

    MAX_HEALTH = 200
    TEXTURE_NAME = "ship sprite"
    HP_BAR_WIDTH = 80
    HP_BAR_HEIGHT = 20

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
        fire_rate: int,
        *,
        clock: Clock = time.monotonic,
    ) -> None:
        self.data = data
        self.depth = r
        self.health = self.MAX_HEALTH
        self.fire_rate = fire_rate
        self.is_flipped = is_flipped
        self.bullets: list[Laser] = []
        self._clock = clock
        self._last_fired = clock()
        self._pos_x = float(x)
        self._pos_y = float(y)

        data.assets.load_texture(self.TEXTURE_NAME, texture_path)
        texture = data.assets.texture(self.TEXTURE_NAME)
        self.image = pygame.transform.flip(texture, False, True) if is_flipped else texture

        self.hp_bar = HealthBar(
            hp_x, hp_y, self.HP_BAR_WIDTH, self.HP_BAR_HEIGHT, self.health
        )

    @property
    def x(self) -> int:
        return int(self._pos_x)

    @x.setter
    def x(self, value: float) -> None:
        self._pos_x = float(value)

    @property
    def y(self) -> int:
        return int(self._pos_y)

    @property
    def position(self) -> tuple[float, float]:
        return (self._pos_x, self._pos_y)

    def move_left(self, speed: int) -> None:
        self._pos_x -= speed

    def move_right(self, speed: int) -> None:
        self._pos_x += speed

    def draw(self, surface: pygame.Surface) -> None:
        """Draw the ship, advance and draw its fired lasers, then its health bar."""
        rect = self.image.get_rect(center=(round(self._pos_x), round(self._pos_y)))
        surface.blit(self.image, rect)
        for bullet in self.bullets:
            if bullet.fired:
                bullet.move(self._pos_y)
                bullet.draw(surface)
        self.hp_bar.draw(surface)

    def fire(self) -> bool:
        """Shoot a laser if enough time has passed since the last shot.

        Returns whether a laser was fired.
        """
        now = self._clock()
        elapsed_ms = int((now - self._last_fired) * 1000)
        if elapsed_ms < self.fire_rate:
            return False
        bullet = Laser()
        bullet.use(self._pos_x, self._pos_y)
        self.bullets.append(bullet)
        self._last_fired = now
        return True

    def take_damage(self, amount: int) -> None:
        """Lose ``amount`` health, never below zero, and update the bar."""
        self.health = max(0, self.health - amount)
        self.hp_bar.set_health(self.health)

    def is_hit(self, target_x: int, target_y: int, target_depth: int) -> bool:
        """Whether any fired laser of this ship overlaps the given target."""
        return any(
            bullet.fired and bullet.is_hit(target_x, target_y, target_depth)
            for bullet in self.bullets
        )

    @abstractmethod
    def ability(self) -> None:
        """Use the ship's special ability."""


class Ship(Player):
    """A player ship with a speed and a rate of fire of its own kind.

    ``health`` is the kind's rated health; every ship still starts the
    battle at ``Player.MAX_HEALTH``.
    """

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
    ) -> None:
        super().__init__(
            data, r, x, y, hp_x, hp_y, texture_path, is_flipped, fire_rate, clock=clock
        )
        self.rated_health = health
        self.speed = speed