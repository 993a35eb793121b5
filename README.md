# hoodyquest

hoodyquest is a small top-down arcade game built on pygame. You play a hooded
figure who picks up collectables, grabs a speed power-up, and fights an enemy
that chases you the whole time.

## Installing

```
pip install .
```

To install the test dependencies and run the tests:

```
pip install ".[test]"
pytest
```

## Playing

```
hoodyquest
hoodyquest --resources path/to/assets
```

The game loads its images and sounds from the directory given by
`--resources`. The default is `src/resources`, relative to the directory you
start the game from. If a required image is missing, the game stops with a
`FileNotFoundError`.

Controls:

- **Enter**: start from the title screen, or restart after a game over
- **W / A / S / D**: move. Vertical movement is slightly slower than horizontal.
- **Arrow keys**: slash in that direction
- **F**: toggle fullscreen
- **Escape**, or closing the window: quit

Rules:

- Each collectable you touch adds one point and moves the collectable to a new spot.
- When your score reaches five, a gem power-up appears and the enemy speeds up.
- Picking up the gem raises your speed.
- Touching the enemy costs a life and throws the enemy away from you. When all
  three lives are gone, the game-over screen is shown.
- Each slash that lands takes 5 health from the enemy. When its health reaches
  zero, the kill is counted, its health is restored, and it reappears somewhere
  else.

Score, lives and kills are also printed to the console, which is cleared
before each message.

## Lighting demo

```
hoodyquest-lighting
hoodyquest-lighting --resources path/to/assets
```

This opens a 128×128 scene drawn at three times that size. A flickering light
sits in the centre. A 10×10 occluder follows the mouse and dims every pixel
whose light ray passes through it. The player sprite can be moved around the
scene.

The lighting model can also be used directly:

- `hoodyquest.lighting.within_rect`: tests whether a point lies strictly inside a rectangle.
- `hoodyquest.lighting.pixel_brightness`: returns the grey level (0–255) of one pixel, with an optional occluder.
- `hoodyquest.lighting.render_lighting`: paints the whole field onto a surface.

## Library use

The sprite classes work with any pygame surface:

- `hoodyquest.animation.Animation` and `hoodyquest.animation.load_sheet` handle a sprite sheet with six frames across. Each sprite has a position, a hitbox and `move_to`.
- `hoodyquest.player.Player` is steered by a pressed-keys mapping through `handle_input`. Its facing is a `Direction` (`IDLE`, `LEFT` or `RIGHT`), and its sword reach is available as `attack`.
- `hoodyquest.enemy.Enemy` moves toward a point with `chase` and loses health with `take_damage`. Health never drops below zero. It draws a health bar and shows a hurt frame after each hit.

`hoodyquest.game.GameState` keeps the game's bookkeeping: the current
`Screen`, score, lives, kills, the collectable's position, and the power-up
flags. It provides `collect`, `lose_life` and `reset`.

`hoodyquest.game.AudioProcessor` takes interleaved stereo samples. It applies
a power-law shaping and a fixed volume, and records each buffer's average
level in a bounded history. The game runs every sound effect through it once,
when the effect is loaded.

## What it does not do

- Scores are not saved between runs.
- The background music file is loaded but never played.
- Window size and key bindings cannot be configured.