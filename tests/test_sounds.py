import random

import numpy as np
import pygame
import pytest

from game import Game2048
from game_events import EventBus, EVENT_WON, EVENT_GAME_OVER
from sounds import SAMPLE_RATE, GameSounds, tone, arpeggio, merge_tone


def test_tone_length_and_range():
    samples = tone(800, 200, 0.15)
    assert samples.dtype == np.int16
    assert len(samples) == int(0.15 * SAMPLE_RATE)
    assert np.abs(samples).max() <= int(0.3 * 32767)


def test_tone_decays():
    samples = tone(440, 440, 0.5).astype(np.int32)
    quarter = len(samples) // 4
    assert np.abs(samples[:quarter]).max() > np.abs(samples[-quarter:]).max()


def test_arpeggio_spans_all_notes():
    samples = arpeggio((523, 659, 784), 0.1, 0.5)
    assert len(samples) == int((0.1 * 2 + 0.5) * SAMPLE_RATE)


def test_merge_tone_rises_with_value():
    def pitch(samples):
        # zero crossings in the first 50 ms
        head = samples[: SAMPLE_RATE // 20].astype(np.int32)
        return np.count_nonzero(np.diff(np.sign(head)))

    assert pitch(merge_tone(2048)) > pitch(merge_tone(8))


@pytest.fixture
def sounds(monkeypatch):
    monkeypatch.setenv("SDL_AUDIODRIVER", "dummy")
    bus = EventBus()
    effects = GameSounds(bus)
    played = []
    monkeypatch.setattr(effects, "play", lambda key, make: played.append(key) if effects.enabled else None)
    yield bus, effects, played
    pygame.mixer.quit()


def test_session_events_play_effects(sounds):
    bus, effects, played = sounds
    board = [[2, 2, 0, 0], [0] * 4, [0] * 4, [0] * 4]
    game = Game2048(board=board, bus=bus, rng=random.Random(0))

    game.make_move('left')

    assert played[:2] == ['slide', 'spawn']
    assert ('merge', 4) in played


def test_win_and_game_over_effects(sounds):
    bus, effects, played = sounds
    bus.emit(EVENT_WON, level=1, score=100, target=2048)
    bus.emit(EVENT_GAME_OVER, level=1, score=100, highest_tile=64, move_count=10)
    assert played == ['win', 'game_over']


def test_toggle_mutes(sounds):
    bus, effects, played = sounds
    assert effects.toggle() is False
    bus.emit(EVENT_WON, level=1, score=100, target=2048)
    assert played == []
    assert effects.toggle() is True
