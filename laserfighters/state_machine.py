"""Game states and the stack machine that switches between them."""

from abc import ABC, abstractmethod
from typing import Optional


class GameState(ABC):
    """One screen of the game: menu, selection, battle or game over."""

    paused: bool = False

    @abstractmethod
    def init(self) -> None:
        """Prepare the state when it becomes active."""

    @abstractmethod
    def handle_input(self) -> None:
        """Process pending input."""

    @abstractmethod
    def update(self, dt: float) -> None:
        """Advance the state by ``dt`` seconds."""

    @abstractmethod
    def draw(self, dt: float) -> None:
        """Render a frame; ``dt`` is the interpolation factor."""

    def pause(self) -> None:
        """Mark the state as paused when another state is pushed on top."""
        self.paused = True

    def resume(self) -> None:
        """Mark the state as running again when the state on top is removed."""
        self.paused = False


class StateMachine:
    """A stack of states whose changes are applied at the start of each frame."""

    def __init__(self) -> None:
        self._states: list[GameState] = []
        self._new_state: Optional[GameState] = None
        self._is_removing = False
        self._is_adding = False
        self._is_replacing = False

    def add_state(self, new_state: GameState, is_replacing: bool = True) -> None:
        """Schedule ``new_state`` to go on top, replacing or pausing the current one."""
        self._is_adding = True
        self._is_replacing = is_replacing
        self._new_state = new_state

    def remove_state(self) -> None:
        """Schedule the removal of the state on top."""
        self._is_removing = True

    def process_state_changes(self) -> None:
        """Apply the scheduled removal and addition."""
        if self._is_removing and self._states:
            self._states.pop()
            if self._states:
                self._states[-1].resume()
            self._is_removing = False

        if self._is_adding:
            if self._states:
                if self._is_replacing:
                    self._states.pop()
                else:
                    self._states[-1].pause()
            new_state, self._new_state = self._new_state, None
            self._states.append(new_state)
            new_state.init()
            self._is_adding = False

    def active_state(self) -> GameState:
        """Return the state on top; raises IndexError if there is none."""
        if not self._states:
            raise IndexError("no active state")
        return self._states[-1]

    def __len__(self) -> int:
        return len(self._states)