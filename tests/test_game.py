import random

import pytest

from hoodyquest.animation import SPAWN_HEIGHT, SPAWN_WIDTH
from hoodyquest.game import START_LIVES, AudioProcessor, GameState, Screen


def test_unit_processor_leaves_samples_unchanged():
    processor = AudioProcessor(exponent=1.0, volume=1.0)
    samples = [0.5, -0.25, 0.0, 0.75]
    assert processor(samples) == pytest.approx(samples)


def test_volume_scales_every_sample():
    processor = AudioProcessor()
    samples = [0.5, -0.25, 0.8, -0.6]
    out = processor(samples)
    for before, after in zip(samples, out):
        assert after == pytest.approx(before * processor.volume)


def test_distortion_keeps_sign_and_shrinks_quiet_samples():
    processor = AudioProcessor(exponent=2.0, volume=1.0)
    samples = [0.5, -0.5, 0.9, -0.3]
    out = processor(samples)
    for before, after in zip(samples, out):
        assert (after < 0) == (before < 0)
        assert abs(after) < abs(before)


def test_history_records_newest_average_last():
    processor = AudioProcessor(exponent=1.0, volume=1.0)
    processor([0.5, 0.5, 0.5, 0.5])
    assert len(processor.average_volume) == 400
    assert processor.average_volume[-1] == pytest.approx(1.0)
    assert processor.average_volume[0] == 0.0


def test_history_shifts_out_oldest():
    processor = AudioProcessor(exponent=1.0, volume=1.0, history=2)
    processor([0.5, 0.5])
    processor([0.25, 0.25])
    processor([0.0, 0.0])
    assert list(processor.average_volume) == pytest.approx([0.5, 0.0])


def test_empty_buffer_records_silence():
    processor = AudioProcessor(history=3)
    assert processor([]) == []
    assert list(processor.average_volume) == [0.0, 0.0, 0.0]


def test_odd_buffer_is_rejected():
    with pytest.raises(ValueError):
        AudioProcessor()([0.1, 0.2, 0.3])


def test_new_state_starts_on_splash():
    state = GameState(random.Random(1))
    assert state.screen == Screen.SPLASH
    assert state.score == 0
    assert state.lives == START_LIVES
    assert not state.spawn_power_up
    assert not state.power_up_spawned
    assert 0 <= state.collectable_x < SPAWN_WIDTH
    assert 0 <= state.collectable_y < SPAWN_HEIGHT


def test_same_seed_gives_same_collectable():
    a = GameState(random.Random(42))
    b = GameState(random.Random(42))
    assert (a.collectable_x, a.collectable_y) == (b.collectable_x, b.collectable_y)
    a.collect()
    b.collect()
    assert (a.collectable_x, a.collectable_y) == (b.collectable_x, b.collectable_y)


def test_collect_counts_up_and_respawns_in_bounds():
    state = GameState(random.Random(3))
    for expected in range(1, 8):
        assert state.collect() == expected
        assert 0 <= state.collectable_x < SPAWN_WIDTH
        assert 0 <= state.collectable_y < SPAWN_HEIGHT
    assert state.score == 7


def test_losing_all_lives_ends_the_game():
    state = GameState(random.Random(5))
    state.screen = Screen.PLAYING
    assert state.lose_life() == START_LIVES - 1
    assert state.screen == Screen.PLAYING
    state.lose_life()
    assert state.screen == Screen.PLAYING
    assert state.lose_life() == 0
    assert state.screen == Screen.GAME_OVER


def test_reset_restores_a_fresh_game():
    state = GameState(random.Random(9))
    state.screen = Screen.PLAYING
    for _ in range(6):
        state.collect()
    state.spawn_power_up = True
    state.power_up_spawned = True
    for _ in range(START_LIVES):
        state.lose_life()
    state.reset()
    assert state.screen == Screen.SPLASH
    assert state.score == 0
    assert state.lives == START_LIVES
    assert not state.spawn_power_up
    assert not state.power_up_spawned
    assert 0 <= state.collectable_x < SPAWN_WIDTH
    assert 0 <= state.collectable_y < SPAWN_HEIGHT