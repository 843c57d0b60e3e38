"""The title screen with its Play and Exit buttons."""

from dataclasses import dataclass
from typing import Callable, Optional

import pygame

from laserfighters.character_select import CharacterSelect
from laserfighters.definitions import MAIN_MENU_BACKGROUND_FILEPATH, MENU_FONT_PATH
from laserfighters.gamedata import GameData
from laserfighters.state_machine import GameState

Color = tuple[int, int, int]

WHITE: Color = (255, 255, 255)
BLUE: Color = (0, 0, 255)
BLACK: Color = (0, 0, 0)


@dataclass
class _Button:
    text: str
    color: Color
    position: tuple[float, float] = (0.0, 0.0)


class MainMenuState(GameState):
    """Up/W and Down/S choose, Enter or Space confirms, Escape quits.

    ``play_factory`` builds the state that Play leads to; by default it is
    player 1's ship selection.
    """

    BACKGROUND_NAME = "Main Menu Background"
    FONT_NAME = "Main Menu Font"
    FONT_SIZE = 70
    PLAY = 0
    EXIT = 1
    UP_KEYS = (pygame.K_UP, pygame.K_w)
    DOWN_KEYS = (pygame.K_DOWN, pygame.K_s)
    SELECT_KEYS = (pygame.K_RETURN, pygame.K_SPACE)

    def __init__(
        self,
        data: GameData,
        *,
        play_factory: Optional[Callable[[GameData], GameState]] = None,
    ) -> None:
        self.data = data
        self._play_factory = play_factory if play_factory is not None else CharacterSelect
        self.selected = self.PLAY
        self.background: Optional[pygame.Surface] = None
        self.font: Optional[pygame.font.Font] = None
        self.buttons = [_Button("PLAY", BLUE), _Button("EXIT", WHITE)]

    def _highlight(self) -> None:
        for index, button in enumerate(self.buttons):
            button.color = BLUE if index == self.selected else WHITE

    def init(self) -> None:
        """Load the background and font and lay out the buttons."""
        assets = self.data.assets
        assets.load_texture(self.BACKGROUND_NAME, MAIN_MENU_BACKGROUND_FILEPATH)
        self.background = assets.texture(self.BACKGROUND_NAME)
        assets.load_font(self.FONT_NAME, MENU_FONT_PATH)
        self.font = assets.font(self.FONT_NAME, self.FONT_SIZE)

        width, height = self.data.window_size()
        for button, divisor in zip(self.buttons, (3.0, 2.0)):
            text_width, _ = self.font.size(button.text)
            button.position = (width / 4.0 - text_width / 2.0, height / divisor)

    def handle_input(self) -> None:
        for event in self.data.poll_events():
            if event.type == pygame.QUIT or getattr(event, "key", None) == pygame.K_ESCAPE:
                self.data.close()
            if event.type == pygame.KEYDOWN:
                if event.key in self.UP_KEYS:
                    self.move_up()
                elif event.key in self.DOWN_KEYS:
                    self.move_down()
                elif event.key in self.SELECT_KEYS:
                    self.select_item()

    def update(self, dt: float) -> None:
        """Nothing changes on this screen between frames."""

    def draw(self, dt: float) -> None:
        surface = self.data.surface
        surface.fill(BLACK)
        if self.background is not None:
            surface.blit(self.background, (0, 0))
        if self.font is not None:
            for button in self.buttons:
                image = self.font.render(button.text, True, button.color)
                surface.blit(image, (round(button.position[0]), round(button.position[1])))
        self.data.present()

    def move_up(self) -> None:
        """Select Play if Exit is selected."""
        if self.selected > self.PLAY:
            self.selected -= 1
            self._highlight()

    def move_down(self) -> None:
        """Select Exit if Play is selected."""
        if self.selected < self.EXIT:
            self.selected += 1
            self._highlight()

    def select_item(self) -> None:
        """Start the ship selection, or close the window on Exit."""
        if self.selected == self.PLAY:
            self.data.machine.add_state(self._play_factory(self.data), True)
        elif self.selected == self.EXIT:
            self.data.close()