import pygame
import pytest

from laserfighters.gamedata import GameData
from laserfighters.laser import Laser
from laserfighters.player import Player, Ship

RED = (255, 0, 0, 255)
GREEN = (0, 255, 0, 255)


class FakeClock:
    def __init__(self) -> None:
        self.now = 100.0

    def __call__(self) -> float:
        return self.now


class _TestShip(Ship):
    def ability(self) -> None:
        self.health = 1


@pytest.fixture
def texture_path(tmp_path):
    image = pygame.Surface((20, 30))
    image.fill(RED)
    image.fill(GREEN, pygame.Rect(0, 0, 20, 5))
    path = tmp_path / "ship.bmp"
    pygame.image.save(image, str(path))
    return path


@pytest.fixture
def data():
    return GameData(surface=pygame.Surface((1000, 600)))


@pytest.fixture
def clock():
    return FakeClock()


def make_ship(data, texture_path, clock, *, x=500, y=50, flipped=False, fire_rate=150):
    return _TestShip(
        data, 15, x, y, 38, 85, texture_path, flipped, 20, 20, fire_rate, clock=clock
    )


@pytest.fixture
def ship(data, texture_path, clock):
    return make_ship(data, texture_path, clock)


def _armed(ship, clock):
    clock.now += 1.0
    assert ship.fire()
    return ship.bullets[0]


def test_initial_state(ship):
    assert (ship.x, ship.y) == (500, 50)
    assert ship.health == Player.MAX_HEALTH
    assert ship.depth == 15
    assert ship.speed == 20
    assert ship.fire_rate == 150
    assert ship.bullets == []


def test_health_ignores_rated_health(ship):
    assert ship.rated_health == 20
    assert ship.health == 200


def test_player_is_abstract(data, texture_path):
    with pytest.raises(TypeError):
        Player(data, 10, 0, 0, 0, 0, texture_path, False, 100)


def test_missing_texture_raises_key_error(data, tmp_path, clock):
    with pytest.raises(KeyError):
        make_ship(data, tmp_path / "absent.png", clock)


def test_move_left_and_right(ship):
    ship.move_left(10)
    assert ship.x == 490
    ship.move_right(25)
    assert ship.x == 515
    assert ship.y == 50


def test_cannot_fire_before_fire_rate_elapsed(ship):
    assert ship.fire() is False
    assert ship.bullets == []


def test_fire_after_fire_rate(ship, clock):
    clock.now += 0.15
    assert ship.fire() is True
    assert len(ship.bullets) == 1
    bullet = ship.bullets[0]
    assert bullet.fired
    assert (bullet.x, bullet.y) == (ship.x, ship.y)


def test_fire_is_rate_limited(ship, clock):
    _armed(ship, clock)
    clock.now += 0.05
    assert not ship.fire()
    clock.now += 0.2
    assert ship.fire()
    assert len(ship.bullets) == 2


def test_changing_fire_rate_changes_threshold(data, texture_path, clock):
    ship = make_ship(data, texture_path, clock, fire_rate=1000)
    clock.now += 0.5
    assert not ship.fire()
    ship.fire_rate = 400
    assert ship.fire()


def test_take_damage(ship):
    ship.take_damage(10)
    assert ship.health == 190
    assert ship.hp_bar.inner_width < ship.hp_bar.width


def test_take_damage_clamps_at_zero(ship):
    ship.take_damage(500)
    assert ship.health == 0
    assert ship.hp_bar.inner_width == 0


def test_setting_health_leaves_bar(ship):
    ship.health = 50
    assert ship.hp_bar.inner_width == ship.hp_bar.width


def test_is_hit_by_fired_laser(ship, clock):
    assert not ship.is_hit(ship.x, ship.y, 10)
    _armed(ship, clock)
    assert ship.is_hit(ship.x, ship.y, 10)
    assert not ship.is_hit(ship.x + 300, ship.y + 300, 10)


def test_is_hit_ignores_reset_laser(ship, clock):
    _armed(ship, clock).reset()
    assert not ship.is_hit(ship.x, ship.y, 10)


@pytest.mark.parametrize("y, step", [(50, Laser.SPEED), (550, -Laser.SPEED)])
def test_draw_moves_bullets_away_from_ship_side(data, texture_path, clock, y, step):
    ship = make_ship(data, texture_path, clock, y=y)
    bullet = _armed(ship, clock)
    ship.draw(data.surface)
    assert bullet.y == y + step


@pytest.mark.parametrize("flipped, green_y, red_y", [(False, 286, 300), (True, 313, 286)])
def test_sprite_is_centred_and_oriented(data, texture_path, clock, flipped, green_y, red_y):
    ship = make_ship(data, texture_path, clock, x=300, y=300, flipped=flipped)
    ship.draw(data.surface)
    assert tuple(data.surface.get_at((300, green_y))) == GREEN
    assert tuple(data.surface.get_at((300, red_y))) == RED