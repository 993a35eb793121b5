"""An enemy that chases the player and can be hurt."""

from __future__ import annotations

import math

import pygame

from hoodyquest.animation import RED, Animation

DEFAULT_SPEED = 2.0
MAX_HEALTH = 100.0
HEALTH_BAR_HEIGHT = 10
HEALTH_BAR_OFFSET = 13
GRAY = pygame.Color(130, 130, 130)
BLACK = pygame.Color(0, 0, 0)


class Enemy(Animation):
    """An animated sprite with health that walks toward a target."""

    def __init__(self, sheet, frame_count, hurt, rng=None):
        super().__init__(sheet, frame_count, rng)
        self.hurt = hurt
        self.hurt_active = False
        self.speed = DEFAULT_SPEED
        self.health = MAX_HEALTH
        self.health_bar = pygame.Rect(0, 0, int(self.width), HEALTH_BAR_HEIGHT)

    def chase(self, target_x, target_y):
        """Step toward the target at the enemy's speed."""
        dx = target_x - self.x
        dy = target_y - self.y
        length = math.hypot(dx, dy)
        if length > 0:
            dx /= length
            dy /= length
        self.x += dx * self.speed
        self.y += dy * self.speed

    def take_damage(self, damage):
        """Lose health, never below zero, and show the hurt frame next."""
        self.hurt_active = True
        self.health = max(self.health - damage, 0.0)

    def draw_health_bar(self, surface):
        """Draw the health bar: gray background, red fill, black outline."""
        bar = self.health_bar
        pygame.draw.rect(surface, GRAY, bar)
        fill = bar.copy()
        fill.width = int(self.health / MAX_HEALTH * bar.width)
        if fill.width > 0:
            pygame.draw.rect(surface, RED, fill)
        pygame.draw.rect(surface, BLACK, bar, 1)

    def draw_hurt_frame(self, surface):
        """Draw the hurt texture at the enemy's position."""
        surface.blit(self.hurt, (int(self.x), int(self.y)))

    def update(self, surface, dt):
        """Draw the hurt frame or the next animation frame, then the health bar."""
        self.health_bar.topleft = (int(self.x), int(self.y - HEALTH_BAR_OFFSET))
        if self.hurt_active:
            self.draw_hurt_frame(surface)
            self.hurt_active = False
        else:
            self.animate(dt)
            self.draw(surface)
        self.draw_health_bar(surface)