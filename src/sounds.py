"""
synthesized sound effects that follow a game session's events
"""
import numpy as np
import pygame

from game_events import (
    EVENT_MOVE_RESOLVED,
    EVENT_TILE_SPAWNED,
    EVENT_HIGHEST_TILE,
    EVENT_WON,
    EVENT_GAME_OVER,
)


SAMPLE_RATE = 22050

WIN_NOTES = (523, 659, 784, 1047, 1319, 1568)  # C major arpeggio
GAME_OVER_NOTES = (400, 350, 300, 200)


def tone(start_freq, end_freq, duration, volume=0.3, sample_rate=SAMPLE_RATE):
    """
    sine sweep from start_freq to end_freq with a decaying envelope

    returns int16 samples
    """
    n = int(duration * sample_rate)
    t = np.arange(n) / sample_rate
    freq = start_freq * (end_freq / start_freq) ** (t / duration)
    phase = 2 * np.pi * np.cumsum(freq) / sample_rate
    envelope = volume * (0.01 / volume) ** (t / duration)
    return (np.sin(phase) * envelope * 32767).astype(np.int16)


def arpeggio(freqs, step, note_length, volume=0.3, sample_rate=SAMPLE_RATE):
    """notes starting every `step` seconds, each ringing for note_length"""
    total = int((step * (len(freqs) - 1) + note_length) * sample_rate)
    mix = np.zeros(total, dtype=np.float64)
    for i, freq in enumerate(freqs):
        note = tone(freq, freq, note_length, volume, sample_rate).astype(np.float64)
        start = int(i * step * sample_rate)
        mix[start:start + len(note)] += note
    return np.clip(mix, -32767, 32767).astype(np.int16)


def merge_tone(value):
    """bigger tiles ring higher"""
    pitch = np.log2(value) / 11
    return tone(440 * (1 + pitch), 220 * (1 + pitch), 0.4)


class GameSounds:
    """plays effects for a session's events; S toggles them in the GUI"""

    def __init__(self, bus, enabled=True):
        self.enabled = enabled
        self.available = self._init_mixer()
        self._cache = {}

        bus.subscribe(EVENT_MOVE_RESOLVED, self.on_move)
        bus.subscribe(EVENT_TILE_SPAWNED, self.on_spawn)
        bus.subscribe(EVENT_HIGHEST_TILE, self.on_highest_tile)
        bus.subscribe(EVENT_WON, self.on_won)
        bus.subscribe(EVENT_GAME_OVER, self.on_game_over)

    def _init_mixer(self):
        if pygame.mixer.get_init():
            return True
        try:
            pygame.mixer.init(frequency=SAMPLE_RATE, size=-16, channels=1)
        except pygame.error as e:
            print(f"Sound disabled: {e}")
            return False
        return True

    def toggle(self):
        self.enabled = not self.enabled
        return self.enabled

    def _sound(self, key, make):
        if key not in self._cache:
            samples = make()
            channels = pygame.mixer.get_init()[2]
            if channels > 1:
                samples = np.repeat(samples[:, np.newaxis], channels, axis=1)
            self._cache[key] = pygame.sndarray.make_sound(np.ascontiguousarray(samples))
        return self._cache[key]

    def play(self, key, make):
        """play a cached effect, make() builds its samples on first use"""
        if self.enabled and self.available:
            self._sound(key, make).play()

    def on_move(self, sender, **payload):
        self.play('slide', lambda: tone(800, 200, 0.15))

    def on_spawn(self, sender, **payload):
        self.play('spawn', lambda: tone(1200, 600, 0.1, volume=0.25))

    def on_highest_tile(self, sender, value):
        self.play(('merge', value), lambda: merge_tone(value))

    def on_won(self, sender, **payload):
        self.play('win', lambda: arpeggio(WIN_NOTES, 0.1, 0.5, volume=0.2))

    def on_game_over(self, sender, **payload):
        self.play('game_over', lambda: arpeggio(GAME_OVER_NOTES, 0.15, 0.3))
