"""
events emitted by a game session after each state change

presentation concerns (sound, toasts, score submission) subscribe here
instead of living inside the move logic
"""
from blinker import Signal


class EventBus:
    """named blinker signals, one per event"""

    def __init__(self):
        self._signals = {}

    def subscribe(self, name, fn):
        sig = self._signals.setdefault(name, Signal(name))
        # strong reference so lambdas and bound methods stay connected
        sig.connect(fn, weak=False)

    def unsubscribe(self, name, fn):
        sig = self._signals.get(name)
        if sig:
            sig.disconnect(fn)

    def emit(self, name, **payload):
        sig = self._signals.get(name)
        if sig:
            sig.send(self, **payload)


EVENT_MOVE_RESOLVED = "move_resolved"   # payload: direction, points, score, move_count
EVENT_TILE_SPAWNED = "tile_spawned"     # payload: row, col, value
EVENT_HIGHEST_TILE = "highest_tile"     # payload: value
EVENT_WON = "won"                       # payload: level, score, target
EVENT_GAME_OVER = "game_over"           # payload: level, score, highest_tile, move_count
EVENT_RESTARTED = "restarted"           # payload: level
EVENT_PAUSED = "paused"                 # payload: paused
