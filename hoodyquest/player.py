"""The player: keyboard movement, facing and sword attacks."""

from __future__ import annotations

from enum import IntEnum

import pygame

from hoodyquest.animation import Animation

DEFAULT_SPEED = 3.0
VERTICAL_SLOWDOWN = 0.5
GREEN = pygame.Color(0, 228, 48)

_IDLE_ATTACK = (8, 8, 5, 5)
_ATTACKS = (
    (pygame.K_RIGHT, (28, 8, 35, 15)),
    (pygame.K_LEFT, (-28, 8, 35, 15)),
    (pygame.K_UP, (8, -28, 15, 35)),
    (pygame.K_DOWN, (8, 28, 15, 35)),
)


class Direction(IntEnum):
    """Which way the player is running."""

    IDLE = 0
    LEFT = 1
    RIGHT = 2


class Player(Animation):
    """An animated sprite steered by the keyboard."""

    def __init__(self, idle, run_right, run_left, frame_count, slash_sound=None, rng=None):
        super().__init__(idle, frame_count, rng)
        self.textures = {
            Direction.IDLE: idle,
            Direction.LEFT: run_left,
            Direction.RIGHT: run_right,
        }
        self.current_texture = idle
        self.state = Direction.IDLE
        self.idle = True
        self.direction = Direction.IDLE
        self.last_direction = Direction.IDLE
        self.speed = DEFAULT_SPEED
        self.slash_sound = slash_sound
        self.attack = pygame.Rect(int(self.x), int(self.y), 0, 0)

    def set_state(self, state):
        """Switch the running texture when the state changes."""
        state = Direction(state)
        if state != self.state:
            self.state = state
            self.last_direction = state
            self.current_texture = self.textures[state]

    def _attack_rect(self, offset):
        dx, dy, w, h = offset
        return pygame.Rect(int(self.x + dx), int(self.y + dy), w, h)

    def handle_input(self, keys):
        """Move, aim the attack and pick the state from the pressed keys."""
        was_idle = self.idle
        self.direction = Direction.IDLE
        self.attack = self._attack_rect(_IDLE_ATTACK)

        if keys[pygame.K_d]:
            self.idle = False
            self.direction = Direction.RIGHT
            self.x += self.speed
        elif keys[pygame.K_a]:
            self.idle = False
            self.direction = Direction.LEFT
            self.x -= self.speed
        if keys[pygame.K_w]:
            self.idle = False
            self.direction = self.last_direction
            self.y -= self.speed - VERTICAL_SLOWDOWN
        elif keys[pygame.K_s]:
            self.idle = False
            self.direction = self.last_direction
            self.y += self.speed - VERTICAL_SLOWDOWN

        for key, offset in _ATTACKS:
            if keys[key]:
                self.attack = self._attack_rect(offset)
                if self.slash_sound is not None:
                    self.slash_sound.play()
                break

        if was_idle != self.idle:
            self.current_frame = 0
            self.running_time = 0.0

        self.set_state(self.direction)

    def draw(self, surface):
        """Draw the current frame of the texture for the current state."""
        self._blit(surface, self.current_texture)

    def draw_attack_hitbox(self, surface):
        """Outline the attack area in green."""
        pygame.draw.rect(surface, GREEN, self.attack, 1)

    def update(self, surface, keys, dt):
        """Handle input, animate and draw the player with its hitboxes."""
        self.handle_input(keys)
        self.animate(dt)
        self.draw(surface)
        self.draw_hitbox(surface)
        self.draw_attack_hitbox(surface)