"""The main loop and the command that starts the game."""

import argparse
import time
from typing import Callable, Optional

import pygame

from laserfighters.definitions import SCREEN_HEIGHT, SCREEN_WIDTH
from laserfighters.gamedata import GameData
from laserfighters.main_menu import MainMenuState
from laserfighters.state_machine import GameState

TITLE = "Laser Fighters 2000"


class Game:
    """Runs the states at a fixed update rate, drawing once per loop.

    When no ``data`` is given a window of ``width`` by ``height`` is opened.
    ``first_state`` builds the opening screen, the main menu by default;
    ``clock`` returns the current time in seconds.
    """

    FRAME_RATE = 1.0 / 60.0
    MAX_FRAME_TIME = 0.25

    def __init__(
        self,
        width: int,
        height: int,
        title: str,
        *,
        data: Optional[GameData] = None,
        first_state: Optional[Callable[[GameData], GameState]] = None,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        if data is None:
            pygame.init()
            surface = pygame.display.set_mode((width, height))
            pygame.display.set_caption(title)
            data = GameData(surface)
        self.data = data
        self._clock = clock
        self._accumulator = 0.0
        factory = first_state if first_state is not None else MainMenuState
        self.data.machine.add_state(factory(self.data), True)

    def step(self, frame_time: float) -> float:
        """Advance by ``frame_time`` seconds and draw one frame.

        Returns the interpolation factor passed to the state's draw.
        """
        machine = self.data.machine
        machine.process_state_changes()
        self._accumulator += min(frame_time, self.MAX_FRAME_TIME)
        while self._accumulator >= self.FRAME_RATE:
            machine.active_state().handle_input()
            machine.active_state().update(self.FRAME_RATE)
            self._accumulator -= self.FRAME_RATE
        interpolation = self._accumulator / self.FRAME_RATE
        machine.active_state().draw(interpolation)
        return interpolation

    def run(self) -> None:
        """Loop until the window is closed."""
        current = self._clock()
        while self.data.is_open:
            now = self._clock()
            frame_time, current = now - current, now
            self.step(frame_time)


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(prog="laserfighters", description="A two-player laser duel.")
    parser.parse_args(argv)
    try:
        Game(SCREEN_WIDTH, SCREEN_HEIGHT, TITLE).run()
    finally:
        pygame.quit()
    return 0