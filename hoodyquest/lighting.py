"""Per-pixel lighting demo: a flickering light occluded by a movable box."""

from __future__ import annotations

import argparse
import math
import random
from pathlib import Path

import pygame

from hoodyquest.animation import WHITE, load_sheet
from hoodyquest.player import Player

SCREEN_WIDTH = 128
SCREEN_HEIGHT = 128
SCALE = 3
FPS = 60
TITLE = "Real Pixel Lighting"

FLICKER_RATE = 4.0
FLICKER_AMPLITUDE = 0.003
BASE_INTENSITY = 0.4
RANGE = 0.95
BOUNCE_RATE = 0.9
GLOBAL_ILLUMINATION = 0.3
SAMPLES = 100
OCCLUDER_SIZE = 10

BLUE = pygame.Color(0, 121, 241)
RED = pygame.Color(230, 41, 55)


def within_rect(tx, ty, x, y, w, h):
    """Whether the point lies strictly inside the rectangle."""
    return x < tx < x + w and y < ty < y + h


def pixel_brightness(x, y, clock, occluder=None):
    """Grey level of one pixel lit from the screen centre.

    ``occluder`` is an ``(x, y, w, h)`` box, or None; every ray sample that
    falls inside it dims the light reaching the pixel.
    """
    cx = SCREEN_WIDTH // 2
    cy = SCREEN_HEIGHT // 2
    intensity = BASE_INTENSITY + FLICKER_AMPLITUDE * math.sin(clock * FLICKER_RATE)
    distance = math.hypot(x - cx, y - cy)
    brightness = max(0, min(255, int(255 * intensity - distance / RANGE)))

    emission = 1.0
    if occluder is not None:
        ox, oy, ow, oh = occluder
        for i in range(SAMPLES):
            test_x = int(cx + (x - cx) * i / SAMPLES)
            test_y = int(cy + (y - cy) * i / SAMPLES)
            if within_rect(test_x, test_y, ox, oy, ow, oh):
                emission *= BOUNCE_RATE

    lit = GLOBAL_ILLUMINATION * brightness + (1 - GLOBAL_ILLUMINATION) * brightness * emission
    return max(0, min(255, int(lit)))


def _pixel_rect(surface, x, y, w, h, color):
    surface.fill(color, pygame.Rect(SCALE * x, SCALE * y, SCALE * w, SCALE * h))


def render_lighting(surface, clock, occluder=None):
    """Paint the whole lit field onto the surface, one scaled block per pixel."""
    surface.fill(WHITE)
    for x in range(SCREEN_WIDTH):
        for y in range(SCREEN_HEIGHT):
            b = pixel_brightness(x, y, clock, occluder)
            _pixel_rect(surface, x, y, 1, 1, (b, b, b, 255))


def _parse_args(argv):
    parser = argparse.ArgumentParser(prog="hoodyquest-lighting", description=TITLE)
    parser.add_argument("--resources", default="src/resources", help="directory of game assets")
    return parser.parse_args(argv)


def main(argv=None):
    """Open the lighting demo window and run until it is closed."""
    args = _parse_args(argv)
    resources = Path(args.resources)
    pygame.init()
    try:
        window = pygame.display.set_mode((SCREEN_WIDTH * SCALE, SCREEN_HEIGHT * SCALE))
        pygame.display.set_caption(TITLE)
        player = Player(
            load_sheet(resources / "hoodyIdleAnimation.png"),
            load_sheet(resources / "hoodyRunAnimation.png"),
            load_sheet(resources / "hoodyRunAnimation2.png"),
            6,
            None,
            random.Random(),
        )
        font = pygame.font.Font(None, 20)
        timer = pygame.time.Clock()
        clock = 0
        while True:
            dt = timer.tick(FPS) / 1000.0
            if any(
                event.type == pygame.QUIT
                or (event.type == pygame.KEYDOWN and event.key == pygame.K_ESCAPE)
                for event in pygame.event.get()
            ):
                return 0
            clock += 1
            fps = timer.get_fps()

            mouse_x, mouse_y = (v // SCALE for v in pygame.mouse.get_pos())
            occluder = (
                mouse_x - OCCLUDER_SIZE // 2,
                mouse_y - OCCLUDER_SIZE // 2,
                OCCLUDER_SIZE,
                OCCLUDER_SIZE,
            )
            render_lighting(window, clock, occluder)
            _pixel_rect(window, mouse_x, mouse_y, 1, 1, BLUE)
            _pixel_rect(window, *occluder, RED)
            player.update(window, pygame.key.get_pressed(), dt)
            window.blit(font.render(f"FPS: {fps:02f}", True, WHITE), (10, 10))
            pygame.display.flip()
    finally:
        pygame.quit()