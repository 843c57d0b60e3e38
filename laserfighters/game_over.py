"""The screen shown when one of the ships has been destroyed."""

import sys
from dataclasses import dataclass
from typing import Callable, Iterable, Optional

import pygame

from laserfighters.definitions import GAMEOVER_BACKGROUND_FILEPATH, GAMEOVER_FONT_PATH
from laserfighters.gamedata import GameData
from laserfighters.state_machine import GameState

WHITE = (255, 255, 255)
BLACK = (0, 0, 0)

StateFactory = Callable[[GameData], GameState]


@dataclass
class TextLabel:
    """A line of rendered text and where it is drawn."""

    text: str
    image: pygame.Surface
    position: tuple[float, float]


def _main_menu(data: GameData) -> GameState:
    from laserfighters.main_menu import MainMenuState

    return MainMenuState(data)


def _present_scene(
    data: GameData,
    background: Optional[pygame.Surface],
    painters: Iterable[Callable[[pygame.Surface], None]] = (),
) -> None:
    """Clear the window, draw the background and each painter, then show it."""
    surface = data.surface
    surface.fill(BLACK)
    if background is not None:
        surface.blit(background, (0, 0))
    for paint in painters:
        paint(surface)
    data.present()


class GameOverState(GameState):
    """Announces the winner and offers another round.

    ``restart`` builds the state to go to when the players choose to play
    again; by default it is the main menu.
    """

    BACKGROUND_NAME = "Game Over Background"
    FONT_NAME = "Game Over Font"
    TITLE_SIZE = 50
    INSTRUCTION_SIZE = 30

    def __init__(
        self, data: GameData, winner: str, *, restart: Optional[StateFactory] = None
    ) -> None:
        self.data = data
        self.winner = winner
        self._restart = restart if restart is not None else _main_menu
        self.background: Optional[pygame.Surface] = None
        self.title: Optional[TextLabel] = None
        self.instruction: Optional[TextLabel] = None

    def _fonts(self, *sizes: int) -> list[pygame.font.Font]:
        assets = self.data.assets
        assets.load_font(self.FONT_NAME, GAMEOVER_FONT_PATH)
        try:
            return [assets.font(self.FONT_NAME, size) for size in sizes]
        except KeyError:
            print("Failed to load font!", file=sys.stderr)
            return [pygame.font.Font(None, size) for size in sizes]

    def _label(self, font: pygame.font.Font, text: str, y: float) -> TextLabel:
        image = font.render(text, True, WHITE)
        width, _ = self.data.window_size()
        return TextLabel(text, image, (width / 2.0 - image.get_width() / 2.0, y))

    def init(self) -> None:
        """Load the background and lay out the two lines of text."""
        title_font, instruction_font = self._fonts(self.TITLE_SIZE, self.INSTRUCTION_SIZE)

        assets = self.data.assets
        assets.load_texture(self.BACKGROUND_NAME, GAMEOVER_BACKGROUND_FILEPATH)
        self.background = assets.texture(self.BACKGROUND_NAME)

        _, height = self.data.window_size()
        self.title = self._label(title_font, f"Game Over, {self.winner} wins!", height / 3.0)
        self.instruction = self._label(instruction_font, "Play again? Y/N", height / 2.0)

    def handle_input(self) -> None:
        """Y starts again from the menu, N or closing the window quits."""
        for event in self.data.poll_events():
            if event.type == pygame.QUIT:
                self.data.close()
            if event.type == pygame.KEYUP:
                if event.key == pygame.K_y:
                    self.data.machine.add_state(self._restart(self.data), True)
                elif event.key == pygame.K_n:
                    self.data.close()

    def update(self, dt: float) -> None:
        """Nothing changes on this screen between frames."""

    def _draw_labels(self, surface: pygame.Surface) -> None:
        for label in (self.title, self.instruction):
            if label is not None:
                x, y = label.position
                surface.blit(label.image, (round(x), round(y)))

    def draw(self, dt: float) -> None:
        _present_scene(self.data, self.background, (self._draw_labels,))