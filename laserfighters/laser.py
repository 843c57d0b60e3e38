"""A single laser shot."""

import math

import pygame

from laserfighters.definitions import SCREEN_HEIGHT, SCREEN_WIDTH


class Laser:
    """A small magenta bolt that travels away from the ship that fired it."""

    WIDTH = 5
    HEIGHT = 10
    SPEED = 4
    COLOR = (255, 0, 255)

    def __init__(self) -> None:
        self._x = -1.0
        self._y = -1.0
        self.fired = False
        self.depth = self.HEIGHT // 2

    @property
    def x(self) -> int:
        return int(self._x)

    @property
    def y(self) -> int:
        return int(self._y)

    @property
    def position(self) -> tuple[float, float]:
        return (self._x, self._y)

    def draw(self, surface: pygame.Surface) -> None:
        """Draw the laser on ``surface``."""
        rect = pygame.Rect(round(self._x), round(self._y), self.WIDTH, self.HEIGHT)
        pygame.draw.rect(surface, self.COLOR, rect)

    def move(self, num: float) -> None:
        """Move one step; ``num`` is the shooter's height, which sets the direction."""
        if num < SCREEN_WIDTH // 2:
            self._y += self.SPEED
        else:
            self._y -= self.SPEED

    def set_position(self, x: float, y: float) -> None:
        self._x = float(x)
        self._y = float(y)

    def use(self, x: float, y: float) -> None:
        """Place the laser at the muzzle and mark it fired."""
        self.set_position(x, y)
        self.fired = True

    def is_off_screen(self) -> bool:
        return self._y > SCREEN_HEIGHT or self._y < 0

    def reset(self) -> None:
        self.fired = False

    def is_hit(self, target_x: int, target_y: int, target_depth: int) -> bool:
        """Whether the laser overlaps a circular target."""
        dx = self.x - target_x
        dy = self.y - target_y
        return math.sqrt(dx * dx + dy * dy) < self.depth + target_depth

    def reset_position(self, x: float, y: float) -> None:
        self.set_position(x, y)