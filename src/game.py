"""
game session: board, score and status for one level of 2048 Nexus
"""
import random
import threading
from enum import Enum

from board import (
    new_board,
    validate_board,
    resolve_move,
    spawn_tile,
    max_tile,
    has_won,
    is_game_over,
)
from levels import grid_size_for_level, target_tile_for_level
from game_events import (
    EventBus,
    EVENT_MOVE_RESOLVED,
    EVENT_TILE_SPAWNED,
    EVENT_HIGHEST_TILE,
    EVENT_WON,
    EVENT_GAME_OVER,
    EVENT_RESTARTED,
    EVENT_PAUSED,
)


class GameStatus(Enum):
    IDLE = 'idle'
    PLAYING = 'playing'
    WON = 'won'
    GAME_OVER = 'game_over'


class Game2048:
    def __init__(self, level=1, rng=None, board=None, bus=None, start=True):
        """
        initialize a 2048 session for a level

        args:
            level: 1-based level, decides grid size and target tile
            rng: random source for spawns (random.Random by default)
            board: start from this board instead of two random tiles
            bus: EventBus that receives the session events
            start: spawn the starting tiles right away
        """
        self.level = level
        self.target = target_tile_for_level(level)
        self.rng = rng or random.Random()
        self.bus = bus or EventBus()
        self.high_score = 0

        self._lock = threading.Lock()
        self._clear(grid_size_for_level(level))

        if board is not None:
            self.board = validate_board(board)
            self.size = len(self.board)
            self.highest_tile = max_tile(self.board)
            # a board that already holds the target counts as won, without a won event
            self.is_win = has_won(self.board, self.target)
            if is_game_over(self.board):
                self.status = GameStatus.GAME_OVER
            elif self.is_win:
                self.status = GameStatus.WON
            else:
                self.status = GameStatus.PLAYING
        elif start:
            self.reset()

    def _clear(self, size):
        self.size = size
        self.board = new_board(size)
        self.score = 0
        self.highest_tile = 0
        self.move_count = 0
        self.is_win = False
        self.paused = False
        self.last_spawn = None
        self.status = GameStatus.IDLE

    @property
    def game_over(self):
        return self.status == GameStatus.GAME_OVER

    def reset(self, rng=None):
        """restart the level with two fresh tiles"""
        with self._lock:
            if rng is not None:
                self.rng = rng
            self._clear(grid_size_for_level(self.level))

            spawns = []
            for _ in range(2):
                self.board, position = spawn_tile(self.board, self.rng)
                spawns.append(position)
            self.last_spawn = spawns[-1]
            self.highest_tile = max_tile(self.board)
            self.status = GameStatus.PLAYING

        self.bus.emit(EVENT_RESTARTED, level=self.level)
        for row, col in spawns:
            self.bus.emit(EVENT_TILE_SPAWNED, row=row, col=col, value=self.board[row][col])

    def make_move(self, direction):
        """
        make a move in the specified direction

        returns:
            moved: if the board changed
            points: score gained from merges
        """
        with self._lock:
            if self.status in (GameStatus.IDLE, GameStatus.GAME_OVER) or self.paused:
                return False, 0

            board, points, moved = resolve_move(self.board, direction)
            if not moved:
                return False, 0

            self.score += points
            self.high_score = max(self.high_score, self.score)
            self.move_count += 1

            # a board that just moved always has an empty cell
            self.board, self.last_spawn = spawn_tile(board, self.rng)

            events = [(EVENT_MOVE_RESOLVED, dict(direction=direction, points=points,
                                                 score=self.score, move_count=self.move_count))]
            row, col = self.last_spawn
            events.append((EVENT_TILE_SPAWNED, dict(row=row, col=col, value=self.board[row][col])))

            top = max_tile(self.board)
            if top > self.highest_tile:
                self.highest_tile = top
                events.append((EVENT_HIGHEST_TILE, dict(value=top)))

            # win is latched, it only fires once per session
            if not self.is_win and has_won(self.board, self.target):
                self.is_win = True
                self.status = GameStatus.WON
                events.append((EVENT_WON, dict(level=self.level, score=self.score, target=self.target)))

            if is_game_over(self.board):
                self.status = GameStatus.GAME_OVER
                events.append((EVENT_GAME_OVER, dict(level=self.level, score=self.score,
                                                     highest_tile=self.highest_tile,
                                                     move_count=self.move_count)))

        for name, payload in events:
            self.bus.emit(name, **payload)

        return True, points

    def pause(self):
        self._set_paused(True)

    def resume(self):
        self._set_paused(False)

    def toggle_pause(self):
        self._set_paused(not self.paused)

    def _set_paused(self, paused):
        if self.paused == paused:
            return
        self.paused = paused
        self.bus.emit(EVENT_PAUSED, paused=paused)

    def share_text(self):
        return f"I scored {self.score} with a {self.highest_tile} tile in 2048 Nexus! #2048Nexus"

    def snapshot(self):
        """copy of the session state for drawing or saving"""
        return {
            "level": self.level,
            "size": self.size,
            "target": self.target,
            "board": [list(row) for row in self.board],
            "score": self.score,
            "high_score": self.high_score,
            "highest_tile": self.highest_tile,
            "move_count": self.move_count,
            "status": self.status.value,
            "is_win": self.is_win,
            "game_over": self.game_over,
            "paused": self.paused,
        }

    def print_board(self):
        """print the board to console"""
        width = 6 * self.size + 1
        print(f"Level {self.level}  Score: {self.score}  Moves: {self.move_count}")
        print("-" * width)
        for row in self.board:
            print("|", end="")
            for cell in row:
                if cell == 0:
                    print("     |", end="")
                else:
                    print(f"{cell:5}|", end="")
            print()
        print("-" * width)
        if self.is_win:
            print(f"Reached {self.target}!")
        if self.game_over:
            print("GAME OVER!")
        print()
