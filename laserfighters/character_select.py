"""The two ship selection screens, one for each player."""

from dataclasses import dataclass
from typing import Callable, Optional

import pygame

from laserfighters.battle import Battle
from laserfighters.definitions import (
    CHARACTER_SELECT_BACKGROUND_FILEPATH_P1,
    CHARACTER_SELECT_BACKGROUND_FILEPATH_P2,
    MENU_FONT_PATH,
    ShipKind,
)
from laserfighters.gamedata import GameData
from laserfighters.state_machine import GameState

Color = tuple[int, int, int]

WHITE: Color = (255, 255, 255)
BLUE: Color = (0, 0, 255)
RED: Color = (255, 0, 0)
BLACK: Color = (0, 0, 0)


@dataclass
class _Button:
    text: str
    color: Color
    position: tuple[float, float]

    def draw(self, surface: pygame.Surface, font: pygame.font.Font) -> None:
        image = font.render(self.text, True, self.color)
        surface.blit(image, (round(self.position[0]), round(self.position[1])))


def _is_close_request(event: pygame.event.Event) -> bool:
    return event.type == pygame.QUIT or getattr(event, "key", None) == pygame.K_ESCAPE


class CharacterSelect(GameState):
    """Player 1 picks a ship with A and D and confirms with Space or Enter.

    ``next_factory`` is called with the game data and the chosen ship to
    build the state that follows; by default it is player 2's selection.
    """

    BACKGROUND_NAME = "Character Select Screen Background"
    BACKGROUND_PATH = CHARACTER_SELECT_BACKGROUND_FILEPATH_P1
    FONT_NAME = "Font"
    FONT_SIZE = 40
    HIGHLIGHT: Color = BLUE
    LEFT_KEYS: tuple[int, ...] = (pygame.K_a,)
    RIGHT_KEYS: tuple[int, ...] = (pygame.K_d,)
    SELECT_KEYS: tuple[int, ...] = (pygame.K_SPACE, pygame.K_RETURN)
    POSITIONS = {
        ShipKind.GOLIATH: (115, 370),
        ShipKind.ARACHNE: (380, 370),
        ShipKind.FLEA: (740, 370),
    }

    def __init__(self, data: GameData, *, next_factory: Optional[Callable] = None) -> None:
        self.data = data
        self._next_factory = next_factory
        self.selected = ShipKind.GOLIATH
        self.background: Optional[pygame.Surface] = None
        self.font: Optional[pygame.font.Font] = None
        self.buttons = {
            kind: _Button(kind.display_name, WHITE, self.POSITIONS[kind]) for kind in ShipKind
        }
        self._highlight()

    def _highlight(self) -> None:
        for kind, button in self.buttons.items():
            button.color = self.HIGHLIGHT if kind == self.selected else WHITE

    def init(self) -> None:
        """Load the background and the font for the ship names."""
        assets = self.data.assets
        assets.load_texture(self.BACKGROUND_NAME, self.BACKGROUND_PATH)
        self.background = assets.texture(self.BACKGROUND_NAME)
        assets.load_font(self.FONT_NAME, MENU_FONT_PATH)
        self.font = assets.font(self.FONT_NAME, self.FONT_SIZE)
        self._highlight()

    def handle_input(self) -> None:
        for event in self.data.poll_events():
            if _is_close_request(event):
                self.data.close()
            if event.type == pygame.KEYDOWN:
                if event.key in self.LEFT_KEYS:
                    self.move_left()
                elif event.key in self.RIGHT_KEYS:
                    self.move_right()
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
            for button in self.buttons.values():
                button.draw(surface, self.font)
        self.data.present()

    def move_left(self) -> None:
        """Select the ship to the left, staying put at the first."""
        if self.selected > min(ShipKind):
            self.selected = ShipKind(self.selected - 1)
            self._highlight()

    def move_right(self) -> None:
        """Select the ship to the right, staying put at the last."""
        if self.selected < max(ShipKind):
            self.selected = ShipKind(self.selected + 1)
            self._highlight()

    def _record_choice(self) -> None:
        self.data.player1_character_index = int(self.selected)

    def _next_state(self) -> GameState:
        factory = self._next_factory if self._next_factory is not None else CharacterSelectP2
        return factory(self.data, self.selected)

    def select_item(self) -> None:
        """Confirm the highlighted ship and move on to the next screen."""
        self._record_choice()
        self.data.machine.add_state(self._next_state(), True)


class CharacterSelectP2(CharacterSelect):
    """Player 2 picks a ship with the arrow keys and confirms with Enter.

    ``next_factory`` is called with the game data, player 1's ship and
    player 2's ship; by default it starts the battle.
    """

    BACKGROUND_PATH = CHARACTER_SELECT_BACKGROUND_FILEPATH_P2
    HIGHLIGHT: Color = RED
    LEFT_KEYS = (pygame.K_LEFT,)
    RIGHT_KEYS = (pygame.K_RIGHT,)
    SELECT_KEYS = (pygame.K_RETURN,)

    def __init__(
        self, data: GameData, player1_choice, *, next_factory: Optional[Callable] = None
    ) -> None:
        super().__init__(data, next_factory=next_factory)
        self.player1_choice = ShipKind(player1_choice)

    def _record_choice(self) -> None:
        self.data.player2_character_index = int(self.selected)

    def _next_state(self) -> GameState:
        factory = self._next_factory if self._next_factory is not None else Battle
        return factory(self.data, self.player1_choice, self.selected)