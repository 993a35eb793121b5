"""Sprite-sheet animation with a position and a hitbox."""

from __future__ import annotations

import random
from pathlib import Path

import pygame

FRAMES_PER_SHEET = 6
FRAME_RATE = 12
SPAWN_WIDTH = 540
SPAWN_HEIGHT = 360

WHITE = pygame.Color(255, 255, 255)
RED = pygame.Color(230, 41, 55)


def load_sheet(path):
    """Load an image file as a surface."""
    path = Path(path)
    if not path.is_file():
        raise FileNotFoundError(f"no such image: {path}")
    return pygame.image.load(str(path))


class Animation:
    """A sprite cycling through the frames of a horizontal sheet."""

    def __init__(self, sheet, frame_count, rng=None):
        rng = rng if rng is not None else random.Random()
        self.sheet = sheet
        self.width = sheet.get_width() / FRAMES_PER_SHEET
        self.height = float(sheet.get_height())
        self.source_x = 0.0
        self.current_frame = 0
        self.frame_count = frame_count
        self.running_time = 0.0
        self.update_time = 1.0 / FRAME_RATE
        self.x = float(rng.randrange(SPAWN_WIDTH))
        self.y = float(rng.randrange(SPAWN_HEIGHT))

    def animate(self, dt):
        """Advance the frame once enough time has accumulated."""
        self.running_time += dt
        if self.running_time >= self.update_time:
            self.running_time = 0.0
            self.source_x = self.current_frame * self.width
            self.current_frame += 1
            if self.current_frame > self.frame_count:
                self.current_frame = 0

    def _source_rect(self):
        return pygame.Rect(int(self.source_x), 0, int(self.width), int(self.height))

    def _blit(self, surface, texture):
        surface.blit(texture, (int(self.x), int(self.y)), self._source_rect())

    def draw(self, surface):
        """Draw the current frame at the sprite's position."""
        self._blit(surface, self.sheet)

    def draw_hitbox(self, surface):
        """Outline the hitbox in red."""
        pygame.draw.rect(surface, RED, self.hitbox(), 1)

    def update(self, surface, dt):
        """Animate, then draw the sprite and its hitbox."""
        self.animate(dt)
        self.draw(surface)
        self.draw_hitbox(surface)

    def hitbox(self):
        """The rectangle the sprite occupies at its current position."""
        return pygame.Rect(int(self.x), int(self.y), int(self.width), int(self.height))

    def move_to(self, x, y):
        """Place the sprite at the given position."""
        self.x = float(x)
        self.y = float(y)