import random
from collections import defaultdict

import pygame
import pytest

from hoodyquest.animation import FRAMES_PER_SHEET
from hoodyquest.player import DEFAULT_SPEED, GREEN, Direction, Player

FRAME_W = 10
FRAME_H = 20


class FakeSound:
    def __init__(self):
        self.plays = 0

    def play(self):
        self.plays += 1


def make_sheet(color):
    sheet = pygame.Surface((FRAME_W * FRAMES_PER_SHEET, FRAME_H))
    sheet.fill(color)
    return sheet


def keys(*pressed):
    return defaultdict(bool, {key: True for key in pressed})


@pytest.fixture
def sheets():
    return make_sheet((200, 0, 0)), make_sheet((0, 200, 0)), make_sheet((0, 0, 200))


@pytest.fixture
def sound():
    return FakeSound()


@pytest.fixture
def player(sheets, sound):
    idle, right, left = sheets
    p = Player(idle, right, left, FRAMES_PER_SHEET, sound, random.Random(1))
    p.move_to(100, 100)
    return p


def test_starts_idle(player, sheets):
    assert player.current_texture is sheets[0]
    assert player.state == Direction.IDLE
    assert player.speed == DEFAULT_SPEED


def test_right_moves_and_faces_right(player, sheets):
    player.handle_input(keys(pygame.K_d))
    assert player.x == 100 + DEFAULT_SPEED
    assert player.state == Direction.RIGHT
    assert player.current_texture is sheets[1]


def test_left_moves_and_faces_left(player, sheets):
    player.handle_input(keys(pygame.K_a))
    assert player.x == 100 - DEFAULT_SPEED
    assert player.current_texture is sheets[2]


def test_right_wins_over_left(player):
    player.handle_input(keys(pygame.K_d, pygame.K_a))
    assert player.x == 100 + DEFAULT_SPEED


def test_vertical_keeps_last_direction(player, sheets):
    player.handle_input(keys(pygame.K_d))
    player.handle_input(keys(pygame.K_w))
    assert player.y == 100 - (DEFAULT_SPEED - 0.5)
    assert player.x == 100 + DEFAULT_SPEED
    assert player.current_texture is sheets[1]


def test_vertical_from_idle_stays_idle_texture(player, sheets):
    player.handle_input(keys(pygame.K_s))
    assert player.y == 100 + (DEFAULT_SPEED - 0.5)
    assert player.current_texture is sheets[0]


def test_no_keys_returns_to_idle_texture(player, sheets):
    player.handle_input(keys(pygame.K_d))
    player.handle_input(keys())
    assert player.current_texture is sheets[0]
    assert player.last_direction == Direction.IDLE


def test_speed_change(player):
    player.speed = 7.0
    player.handle_input(keys(pygame.K_d))
    assert player.x == 107


@pytest.mark.parametrize(
    "key, expected",
    [
        (pygame.K_RIGHT, (100 + 28, 100 + 8, 35, 15)),
        (pygame.K_LEFT, (100 - 28, 100 + 8, 35, 15)),
        (pygame.K_UP, (100 + 8, 100 - 28, 15, 35)),
        (pygame.K_DOWN, (100 + 8, 100 + 28, 15, 35)),
    ],
)
def test_attack_directions(player, sound, key, expected):
    player.handle_input(keys(key))
    assert player.attack == pygame.Rect(expected)
    assert sound.plays == 1


def test_no_attack_gives_small_rect(player, sound):
    player.handle_input(keys())
    assert player.attack == pygame.Rect(100 + 8, 100 + 8, 5, 5)
    assert sound.plays == 0


def test_attack_follows_movement(player):
    player.handle_input(keys(pygame.K_d, pygame.K_RIGHT))
    assert player.attack.x == int(100 + DEFAULT_SPEED + 28)


def test_first_move_resets_animation(player):
    player.current_frame = 3
    player.running_time = 0.05
    player.handle_input(keys(pygame.K_d))
    assert player.current_frame == 0
    assert player.running_time == 0
    player.current_frame = 3
    player.handle_input(keys(pygame.K_d))
    assert player.current_frame == 3


def test_set_state_left(player, sheets):
    player.set_state(Direction.LEFT)
    assert player.current_texture is sheets[2]
    assert player.last_direction == Direction.LEFT


def test_set_state_rejects_unknown(player):
    with pytest.raises(ValueError):
        player.set_state(5)


def test_hitbox_follows_position(player):
    player.handle_input(keys(pygame.K_a))
    assert player.hitbox().topleft == (int(100 - DEFAULT_SPEED), 100)


def test_update_draws_attack_hitbox(player):
    canvas = pygame.Surface((200, 200))
    player.update(canvas, keys(pygame.K_RIGHT), player.update_time)
    assert tuple(canvas.get_at(player.attack.topleft))[:3] == tuple(GREEN)[:3]
    assert player.current_frame == 1