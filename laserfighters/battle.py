"""The battle screen where the two ships fight it out."""

from typing import Callable, Optional

import pygame

from laserfighters.definitions import (
    FLEA_PATH,
    P1_HP_X_COORD,
    P1_HP_Y_COORD,
    P1_X_COORD,
    P1_Y_COORD,
    P2_HP_X_COORD,
    P2_HP_Y_COORD,
    P2_X_COORD,
    P2_Y_COORD,
    PLAY_SCREEN_BACKGROUND_FILEPATH,
    ShipKind,
    stats_for,
)
from laserfighters.game_over import GameOverState, _main_menu, _present_scene
from laserfighters.gamedata import GameData
from laserfighters.player import Ship
from laserfighters.ships import Arachne, Flea, Goliath
from laserfighters.state_machine import GameState

_SHIP_CLASSES = {
    ShipKind.GOLIATH: Goliath,
    ShipKind.ARACHNE: Arachne,
    ShipKind.FLEA: Flea,
}

# x, y, health bar x, health bar y, flipped
_SPAWNS = (
    (P1_X_COORD, P1_Y_COORD, P1_HP_X_COORD, P1_HP_Y_COORD, True),
    (P2_X_COORD, P2_Y_COORD, P2_HP_X_COORD, P2_HP_Y_COORD, False),
)

# left, right, fire, ability
_PLAYER1_KEYS = (pygame.K_LEFT, pygame.K_RIGHT, pygame.K_UP, pygame.K_DOWN)
_PLAYER2_KEYS = (pygame.K_a, pygame.K_d, pygame.K_w, pygame.K_s)


def _kind(index) -> ShipKind:
    try:
        return ShipKind(index)
    except ValueError:
        raise ValueError(f"no ship with index {index!r}") from None


def create_players(data: GameData, player1_index, player2_index) -> tuple[Ship, Ship]:
    """Build the two ships chosen on the selection screens.

    Raises ValueError if either index names no ship.
    """
    kinds = (_kind(player1_index), _kind(player2_index))
    players = []
    for number, (kind, (x, y, hp_x, hp_y, flipped)) in enumerate(zip(kinds, _SPAWNS)):
        stats = stats_for(kind)
        texture = stats.texture_path
        # An Arachne facing a Goliath shows the Goliath with the Flea image.
        if number == 1 and kinds == (ShipKind.ARACHNE, ShipKind.GOLIATH):
            texture = FLEA_PATH
        players.append(
            _SHIP_CLASSES[kind](
                data, stats.hitbox_radius, x, y, hp_x, hp_y, texture, flipped,
                stats.health, stats.speed, stats.fire_rate,
            )
        )
    return players[0], players[1]


class Battle(GameState):
    """Two ships shooting at each other until one runs out of health.

    Player 1 flies at the top with the arrow keys, player 2 at the bottom
    with W, A, S and D.
    """

    BACKGROUND_NAME = "Play Screen Background"
    STEP = 10
    EDGE = 170
    DAMAGE = 10

    def __init__(
        self,
        data: GameData,
        player1_index,
        player2_index,
        *,
        menu_factory: Optional[Callable[[GameData], GameState]] = None,
        game_over_factory: Optional[Callable[[GameData, str], GameState]] = None,
    ) -> None:
        self.data = data
        self.player1_index = player1_index
        self.player2_index = player2_index
        self._menu_factory = menu_factory if menu_factory is not None else _main_menu
        self._game_over_factory = (
            game_over_factory if game_over_factory is not None else GameOverState
        )
        self.player1, self.player2 = create_players(data, player1_index, player2_index)
        self.background: Optional[pygame.Surface] = None

    def init(self) -> None:
        assets = self.data.assets
        assets.load_texture(self.BACKGROUND_NAME, PLAY_SCREEN_BACKGROUND_FILEPATH)
        self.background = assets.texture(self.BACKGROUND_NAME)

    def _steer(self, ship: Ship, keys, controls: tuple[int, int, int, int]) -> None:
        left, right, fire, ability = controls
        width, _ = self.data.window_size()
        if keys[left] and ship.x > self.EDGE:
            ship.move_left(self.STEP)
        elif keys[right] and ship.x < width - self.EDGE:
            ship.move_right(self.STEP)
        if keys[fire]:
            ship.fire()
        if keys[ability] and not keys[fire]:
            ship.ability()

    def handle_input(self) -> None:
        for event in self.data.poll_events():
            if event.type == pygame.QUIT:
                self.data.close()
            if event.type == pygame.KEYUP and event.key == pygame.K_ESCAPE:
                self.data.machine.add_state(self._menu_factory(self.data), True)

        keys = self.data.pressed_keys()
        self._steer(self.player1, keys, _PLAYER1_KEYS)
        self._steer(self.player2, keys, _PLAYER2_KEYS)

    def _resolve_hits(self, shooter: Ship, target: Ship, message: str) -> None:
        for bullet in shooter.bullets:
            if bullet.fired and bullet.is_hit(target.x, target.y, target.depth):
                bullet.reset_position(-1, -1)
                target.take_damage(self.DAMAGE)
                print(message)

    def update(self, dt: float) -> None:
        """Apply laser hits and end the battle when a ship is destroyed."""
        self._resolve_hits(self.player1, self.player2, "Player 1 hit Player 2!")
        self._resolve_hits(self.player2, self.player1, "Player 2 hit Player 1!")

        for loser, winner in ((self.player1, "Player 2"), (self.player2, "Player 1")):
            if loser.health <= 0:
                self.data.machine.add_state(self._game_over_factory(self.data, winner), True)
                break

    def draw(self, dt: float) -> None:
        _present_scene(self.data, self.background, (self.player1.draw, self.player2.draw))