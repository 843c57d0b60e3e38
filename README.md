# laserfighters

A two-player arcade shooter for one keyboard. Each player picks a ship,
then the two face off from the top and bottom of the screen and trade
laser fire until one of them runs out of health.

## Installing

```
pip install .
```

To run the tests as well:

```
pip install ".[test]"
pytest
```

## Playing

```
laserfighters
```

The command opens a 1000 by 600 window titled "Laser Fighters 2000" and
takes no options besides `--help`.

The game reads its images and fonts from an `Assets/` directory in the
working directory:

- `Main_Menu_1000_600_title.jpg`, `char_select_P1.png`,
  `char_select_P2.png`, `PlayBackground.jpg`, `EndScreenBackground.jpg`
- `lf_goliath_white.png`, `lf_arachne_white.png`, `lf_flea_white.png`
- `PLANK___.TTF` (menus) and `MAGNETOB.TTF` (game-over screen)

A missing image or menu font stops the game with a `KeyError` when the
screen that needs it opens. Only the game-over font falls back to
pygame's default font, printing "Failed to load font!" to standard error.

### Menus

- Main menu: `Up`/`W` and `Down`/`S` move between PLAY and EXIT, `Enter`
  or `Space` chooses. `Escape` or closing the window quits.
- Player 1 ship select: `A` and `D` move, `Space` or `Enter` chooses.
- Player 2 ship select: `Left` and `Right` move, `Enter` chooses.

On both ship-select screens `Escape` quits.

### In battle

Player 1 flies at the top of the screen, player 2 at the bottom.

| Action  | Player 1 | Player 2 |
|---------|----------|----------|
| Move    | `Left` / `Right` | `A` / `D` |
| Fire    | `Up`     | `W`      |
| Ability | `Down`   | `S`      |

Ships move 10 pixels per update and cannot go within 170 pixels of the
left or right edge. The ability key does nothing while fire is held.
Releasing `Escape` goes back to the main menu. A hit takes 10 health off
the ship that is hit and prints a line such as `Player 1 hit Player 2!`.
When a ship reaches zero health the game-over screen names the winner
and asks whether to play again (`Y`, back to the main menu) or quit (`N`).

### Ships

Every ship starts the battle with 200 health.

| Ship    | Hitbox radius | Fire delay (ms) | Ability |
|---------|---------------|-----------------|---------|
| Goliath | 40            | 300             | Repairs 2 health, never above 200 |
| Arachne | 30            | 120             | Takes a random -5 to 10 damage; a negative roll heals |
| Flea    | 15            | 150             | Jumps to a random x between 170 and 830, keeping its row |

When player 1 picks Arachne and player 2 picks Goliath, player 2's
Goliath is drawn with the Flea image.

## Using the pieces

The modules can also be used on their own:

- `laserfighters.definitions`: screen size, spawn points, asset paths,
  `ShipKind`, `ShipStats` and `stats_for(kind)`.
- `laserfighters.assets`: `AssetManager`, which caches images and fonts
  by name.
- `laserfighters.state_machine`: `GameState` and a `StateMachine` that
  stacks states and applies changes in `process_state_changes()`.
- `laserfighters.gamedata`: `GameData`, holding the drawing surface, the
  state machine, the assets, the chosen ships, and replaceable callables
  for polling events, reading the keyboard and presenting a frame.
- `laserfighters.laser` (`Laser`), `laserfighters.healthbar`
  (`HealthBar`), `laserfighters.player` (`Player`, `Ship`) and
  `laserfighters.ships` (`Goliath`, `Arachne`, `Flea`).
- The screens: `main_menu.MainMenuState`,
  `character_select.CharacterSelect` and `CharacterSelectP2`,
  `battle.Battle` with `battle.create_players(data, player1_index,
  player2_index)`, and `game_over.GameOverState`.
- `laserfighters.game`: `Game`, which runs the states at 60 updates per
  second; `Game.step(frame_time)` advances one loop by hand.

```python
from laserfighters.definitions import ShipKind, stats_for

stats = stats_for(ShipKind.GOLIATH)
print(stats.hitbox_radius, stats.fire_rate)  # 40 300
```

## What it does not do

The main menu offers only PLAY and EXIT; there is no about or help
screen. There is no single-player mode, no sound, and no record of
scores between rounds.