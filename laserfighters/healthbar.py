"""A health bar drawn beside each ship."""

import pygame


class HealthBar:
    """A red bar inside a white frame whose fill follows the current health."""

    OUTLINE = 2
    FRAME_COLOR = (255, 255, 255)
    FILL_COLOR = (255, 0, 0)

    def __init__(self, x: float, y: float, width: float, height: float, max_health: int) -> None:
        self.x = x
        self.y = y
        self.width = width
        self.height = height
        self.max_health = max_health
        self.inner_width = float(width)

    def set_health(self, health: int) -> None:
        """Resize the fill to ``health`` out of the maximum."""
        self.inner_width = self.width * (health / self.max_health)

    def draw(self, surface: pygame.Surface) -> None:
        """Draw the frame around the bar and the fill inside it."""
        x, y = round(self.x), round(self.y)
        frame = pygame.Rect(
            x - self.OUTLINE,
            y - self.OUTLINE,
            round(self.width) + 2 * self.OUTLINE,
            round(self.height) + 2 * self.OUTLINE,
        )
        pygame.draw.rect(surface, self.FRAME_COLOR, frame, self.OUTLINE)
        fill_width = max(0, round(self.inner_width))
        if fill_width:
            pygame.draw.rect(
                surface, self.FILL_COLOR, pygame.Rect(x, y, fill_width, round(self.height))
            )