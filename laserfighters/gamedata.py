"""Data shared by every state of a running game."""

from dataclasses import dataclass, field
from typing import Any, Callable, Iterable

import pygame

from laserfighters.assets import AssetManager
from laserfighters.state_machine import StateMachine


@dataclass
class GameData:
    """The window, the state machine, the assets and the chosen ships.

    Event polling, keyboard state and presenting a frame go through
    replaceable callables so states can be driven without a real display.
    """

    surface: pygame.Surface
    machine: StateMachine = field(default_factory=StateMachine)
    assets: AssetManager = field(default_factory=AssetManager)
    player1_character_index: int = 0
    player2_character_index: int = 0
    is_open: bool = True
    poll_events: Callable[[], Iterable[pygame.event.Event]] = pygame.event.get
    pressed_keys: Callable[[], Any] = pygame.key.get_pressed
    present: Callable[[], None] = pygame.display.flip

    def window_size(self) -> tuple[int, int]:
        """Return the width and height of the window."""
        return self.surface.get_size()

    def close(self) -> None:
        """Mark the window closed, which ends the main loop."""
        self.is_open = False