import pygame
import pytest

from laserfighters.definitions import GAMEOVER_BACKGROUND_FILEPATH
from laserfighters.game_over import GameOverState
from laserfighters.gamedata import GameData
from laserfighters.state_machine import GameState


class _FakeState(GameState):
    def __init__(self):
        self.initialised = False

    def init(self):
        self.initialised = True

    def handle_input(self):
        pass

    def update(self, dt):
        pass

    def draw(self, dt):
        pass


@pytest.fixture
def assets_dir(tmp_path, monkeypatch):
    (tmp_path / "Assets").mkdir()
    background = pygame.Surface((1000, 600))
    background.fill((40, 80, 120))
    pygame.image.save(background, str(tmp_path / GAMEOVER_BACKGROUND_FILEPATH))
    monkeypatch.chdir(tmp_path)
    return tmp_path


def _data(events=(), presents=None):
    return GameData(
        surface=pygame.Surface((1000, 600)),
        poll_events=lambda: list(events),
        pressed_keys=lambda: {},
        present=lambda: presents.append(True) if presents is not None else None,
    )


def _state(winner="Player 1", events=(), presents=None, **kwargs):
    data = _data(events, presents)
    state = GameOverState(data, winner, **kwargs)
    state.init()
    return data, state


def _press(key, **kwargs):
    data, state = _state(events=[pygame.event.Event(pygame.KEYUP, key=key)], **kwargs)
    state.handle_input()
    data.machine.process_state_changes()
    return data


def test_title_names_the_winner(assets_dir):
    _, state = _state("Player 1")
    assert state.title.text == "Game Over, Player 1 wins!"
    assert state.instruction.text == "Play again? Y/N"


def test_text_is_centred_horizontally(assets_dir):
    data, state = _state("Player 2")
    width, height = data.window_size()
    for label in (state.title, state.instruction):
        x, _ = label.position
        assert x + label.image.get_width() / 2.0 == pytest.approx(width / 2.0)
    assert state.title.position[1] == pytest.approx(height / 3.0)
    assert state.instruction.position[1] == pytest.approx(height / 2.0)


def test_missing_background_raises(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    state = GameOverState(_data(), "Player 1")
    with pytest.raises(KeyError):
        state.init()


@pytest.mark.parametrize(
    "event",
    [pygame.event.Event(pygame.KEYUP, key=pygame.K_n), pygame.event.Event(pygame.QUIT)],
)
def test_closing_events_close_window(assets_dir, event):
    data, state = _state(events=[event])
    state.handle_input()
    assert data.is_open is False


def test_y_restarts(assets_dir):
    fake = _FakeState()
    seen = []

    def restart(game_data):
        seen.append(game_data)
        return fake

    data = _press(pygame.K_y, restart=restart)
    assert data.machine.active_state() is fake
    assert fake.initialised is True
    assert seen == [data]
    assert data.is_open is True


def test_other_keys_do_nothing(assets_dir):
    data = _press(pygame.K_a, restart=lambda d: _FakeState())
    assert data.is_open is True
    assert len(data.machine) == 0


def test_draw_presents_background(assets_dir):
    presents = []
    data, state = _state(presents=presents)
    state.draw(0.0)
    assert presents == [True]
    pixel = data.surface.get_at((5, 5))
    assert all(abs(a - b) <= 4 for a, b in zip(pixel[:3], (40, 80, 120)))