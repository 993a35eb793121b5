"""The arcade game: collect coins, slash the chasing enemy, keep your lives."""

from __future__ import annotations

import argparse
import random
import subprocess
import sys
from array import array
from collections import deque
from enum import IntEnum
from pathlib import Path

import pygame

from hoodyquest.animation import SPAWN_HEIGHT, SPAWN_WIDTH, WHITE, Animation, load_sheet
from hoodyquest.enemy import DEFAULT_SPEED as ENEMY_SPEED
from hoodyquest.enemy import MAX_HEALTH, Enemy
from hoodyquest.player import DEFAULT_SPEED as PLAYER_SPEED
from hoodyquest.player import Player

TITLE = "Texture Test"
WINDOW_SIZE = (640, 360)
FPS = 60
START_LIVES = 3
POWER_UP_SCORE = 5
BOOSTED_ENEMY_SPEED = 5.0
BOOSTED_PLAYER_SPEED = 7.0
ATTACK_DAMAGE = 5.0
RESTART_POSITION = (220.0, 300.0)
BLACK = pygame.Color(0, 0, 0)


class Screen(IntEnum):
    """Which screen the game is showing."""

    SPLASH = 0
    PLAYING = 1
    GAME_OVER = 2


class AudioProcessor:
    """Distorts and scales interleaved stereo samples, tracking average volume."""

    def __init__(self, exponent=1.0, volume=0.5, history=400):
        self.exponent = exponent
        self.volume = volume
        self.average_volume = deque([0.0] * history, maxlen=history)

    def __call__(self, samples):
        """Return the processed samples and record their average loudness."""
        samples = list(samples)
        if len(samples) % 2:
            raise ValueError("a stereo buffer needs an even number of samples")
        frames = len(samples) // 2
        processed = [
            abs(s) ** self.exponent * (-1.0 if s < 0.0 else 1.0) * self.volume
            for s in samples
        ]
        average = sum(abs(v) for v in processed) / frames if frames else 0.0
        self.average_volume.append(average)
        return processed


class GameState:
    """Score, lives, collectable position and power-up flags."""

    def __init__(self, rng=None):
        self.rng = rng if rng is not None else random.Random()
        self.screen = Screen.SPLASH
        self.score = 0
        self.lives = START_LIVES
        self.enemies_killed = 0
        self.spawn_power_up = False
        self.power_up_spawned = False
        self.collectable_x, self.collectable_y = self._random_spot()

    def _random_spot(self):
        return float(self.rng.randrange(SPAWN_WIDTH)), float(self.rng.randrange(SPAWN_HEIGHT))

    def collect(self):
        """Score a point and move the collectable; return the new score."""
        self.score += 1
        self.collectable_x, self.collectable_y = self._random_spot()
        return self.score

    def lose_life(self):
        """Lose a life, ending the game at zero; return the lives left."""
        self.lives -= 1
        if self.lives == 0:
            self.screen = Screen.GAME_OVER
        return self.lives

    def reset(self):
        """Start over from the splash screen."""
        self.score = 0
        self.lives = START_LIVES
        self.spawn_power_up = False
        self.power_up_spawned = False
        self.collectable_x, self.collectable_y = self._random_spot()
        self.screen = Screen.SPLASH


def _clear_console():
    command = "cls" if sys.platform == "win32" else "clear"
    subprocess.run(command, shell=True, check=False)


def _load_sound(path, processor):
    sound = pygame.mixer.Sound(str(path))
    raw = array("h")
    raw.frombytes(sound.get_raw())
    processed = processor(s / 32768.0 for s in raw)
    out = array("h", (max(-32768, min(32767, int(v * 32768.0))) for v in processed))
    return pygame.mixer.Sound(buffer=out.tobytes())


class _Session:
    def __init__(self, resources, rng):
        res = Path(resources)
        self.rng = rng
        pygame.display.set_icon(load_sheet(res / "powerUp.png"))
        self.window = pygame.display.set_mode(WINDOW_SIZE, pygame.RESIZABLE)
        pygame.display.set_caption(TITLE)

        self.processor = AudioProcessor()
        pygame.mixer.music.load(str(res / "03-ye-the_heil_symphony.mp3"))
        self.coin_sound = _load_sound(res / "coin-pickup-98269.mp3", self.processor)
        self.hit_sound = _load_sound(res / "hitSound.mp3", self.processor)
        self.game_over_sound = _load_sound(res / "gameOverSound.mp3", self.processor)
        self.power_up_sound = _load_sound(res / "powerUpSound.mp3", self.processor)
        self.enemy_hurt_sounds = (
            _load_sound(res / "enemyHurtSound.mp3", self.processor),
            _load_sound(res / "enemyHurtSound.mp3", self.processor),
        )
        slash = _load_sound(res / "swordSlash.mp3", self.processor)

        self.state = GameState(rng)
        self.background = load_sheet(res / "gameScreen.png")
        self.collectable = load_sheet(res / "collectable.png")
        self.player = Player(
            load_sheet(res / "hoodyIdleAnimation.png"),
            load_sheet(res / "hoodyRunAnimation.png"),
            load_sheet(res / "hoodyRunAnimation2.png"),
            6,
            slash,
            rng,
        )
        self.gem = Animation(load_sheet(res / "hoodyGemAnimation.png"), 6, rng)
        self.enemy = Enemy(
            load_sheet(res / "hoodyGuyEnemyAnimation.png"),
            6,
            load_sheet(res / "hoodyGuyEnemyHurt.png"),
            rng,
        )
        self.fonts = {}

    def _text(self, text, x, y, size):
        font = self.fonts.get(size)
        if font is None:
            font = self.fonts[size] = pygame.font.Font(None, size)
        self.window.blit(font.render(text, True, BLACK), (x, y))

    def _random_spot(self):
        return self.rng.randrange(SPAWN_WIDTH), self.rng.randrange(SPAWN_HEIGHT)

    def run(self):
        clock = pygame.time.Clock()
        while True:
            dt = clock.tick(FPS) / 1000.0
            pressed = set()
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    return
                if event.type == pygame.KEYDOWN:
                    if event.key == pygame.K_ESCAPE:
                        return
                    pressed.add(event.key)
                elif event.type == pygame.VIDEORESIZE:
                    if event.w < WINDOW_SIZE[0] or event.h < WINDOW_SIZE[1]:
                        size = (max(event.w, WINDOW_SIZE[0]), max(event.h, WINDOW_SIZE[1]))
                        self.window = pygame.display.set_mode(size, pygame.RESIZABLE)
            keys = pygame.key.get_pressed()
            if self.state.screen == Screen.SPLASH:
                self._splash(pressed)
            elif self.state.screen == Screen.PLAYING:
                self._play(pressed, keys, dt)
            else:
                self._game_over(pressed)
            pygame.display.flip()

    def _splash(self, pressed):
        self.window.blit(self.background, (0, 0))
        self._text(TITLE, 225, 100, 80)
        self._text("Press Enter to Start", 280, 300, 40)
        if pygame.K_RETURN in pressed:
            self.state.screen = Screen.PLAYING

    def _play(self, pressed, keys, dt):
        state, player, enemy, gem = self.state, self.player, self.enemy, self.gem
        collectable_rect = pygame.Rect(
            int(state.collectable_x),
            int(state.collectable_y),
            self.collectable.get_width(),
            self.collectable.get_height(),
        )
        if pygame.K_f in pressed:
            pygame.display.toggle_fullscreen()

        if state.score >= POWER_UP_SCORE and not state.power_up_spawned:
            state.spawn_power_up = True
            gem.move_to(*self._random_spot())
            state.power_up_spawned = True
            enemy.speed = BOOSTED_ENEMY_SPEED

        if player.hitbox().colliderect(collectable_rect):
            _clear_console()
            self.coin_sound.play()
            print(f"Score: {state.collect()}")

        if player.hitbox().colliderect(enemy.hitbox()):
            _clear_console()
            self.hit_sound.play()
            print(f"Lives: {state.lose_life()}")
            dx, dy = self._random_spot()
            enemy.move_to(player.x + dx, player.y + dy)

        if state.spawn_power_up and player.hitbox().colliderect(gem.hitbox()):
            _clear_console()
            self.power_up_sound.play()
            print("Speed Up Collected! Speed: ")
            player.speed = BOOSTED_PLAYER_SPEED
            gem.move_to(*self._random_spot())
            state.spawn_power_up = False

        if player.attack.colliderect(enemy.hitbox()):
            _clear_console()
            self.rng.choice(self.enemy_hurt_sounds).play()
            enemy.take_damage(ATTACK_DAMAGE)
            print(f"Enemies health: {int(enemy.health)}")
            if enemy.health <= 0:
                state.enemies_killed += 1
                print(f"Enemies killed: {state.enemies_killed}")
                enemy.health = MAX_HEALTH
                enemy.move_to(*self._random_spot())

        self.window.blit(self.background, (0, 0))
        self._text(f"Score: {state.score:02d}", 380, 30, 40)
        self._text(f"Lives: {state.lives}", 400, 440, 40)
        player.update(self.window, keys, dt)
        enemy.update(self.window, dt)
        enemy.chase(player.x, player.y)
        self.window.blit(self.collectable, (int(state.collectable_x), int(state.collectable_y)))
        if state.spawn_power_up:
            gem.update(self.window, dt)

    def _game_over(self, pressed):
        state = self.state
        self.game_over_sound.stop()
        self.game_over_sound.play()
        if state.lives == 0:
            print("You lose! Try again...")
        state.lives = START_LIVES
        self.window.blit(self.background, (0, 0))
        self._text("GAME OVER!", 270, 100, 80)
        self._text("Press Enter to restart!", 260, 300, 40)
        if pygame.K_RETURN in pressed:
            state.reset()
            self.enemy.speed = ENEMY_SPEED
            self.enemy.move_to(*self._random_spot())
            self.gem.move_to(*self._random_spot())
            self.player.speed = PLAYER_SPEED
            self.player.move_to(*RESTART_POSITION)
            _clear_console()


def _parse_args(argv):
    parser = argparse.ArgumentParser(prog="hoodyquest", description=TITLE)
    parser.add_argument("--resources", default="src/resources", help="directory of game assets")
    return parser.parse_args(argv)


def main(argv=None):
    """Run the game until its window is closed."""
    args = _parse_args(argv)
    pygame.mixer.pre_init(44100, -16, 2)
    pygame.init()
    try:
        session = _Session(args.resources, random.Random())
        _clear_console()
        session.run()
    finally:
        pygame.quit()
    return 0