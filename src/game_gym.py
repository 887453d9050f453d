import random

import gymnasium as gym
from gymnasium import spaces
import numpy as np

from board import resolve_move
from game import Game2048
from levels import grid_size_for_level


class Game2048Env(gym.Env):
    """
    gymnasium environment for one 2048 Nexus level

    - observation is the raw board (tile values, not log2)
    - reward is the points earned from merges
    - info carries the afterstate: the board after the move, before the
      random tile is placed
    """

    metadata = {"render_modes": ["human"]}

    def __init__(self, level=1, render_mode=None):
        super().__init__()

        self.level = level
        self.size = grid_size_for_level(level)
        self.render_mode = render_mode
        self.game = Game2048(level=level, start=False)

        # actions -> 4 possible moves
        # 0 = up, 1 = down, 2 = left, 3 = right
        self.action_space = spaces.Discrete(4)

        self.observation_space = spaces.Box(
            low=0,
            high=np.iinfo(np.int32).max,
            shape=(self.size, self.size),
            dtype=np.int32
        )

        self.action_to_direction = {
            0: 'up',
            1: 'down',
            2: 'left',
            3: 'right'
        }

    def _get_observation(self):
        return np.array(self.game.board, dtype=np.int32)

    def get_afterstate(self, action):
        """
        board after the move but before the random tile

        args:
            action: 0=up, 1=down, 2=left, 3=right

        returns:
            afterstate_board: board after move (None if the move does nothing)
            points: points earned from merging
            valid: if the move changes the board
        """
        board, points, moved = resolve_move(self.game.board, self.action_to_direction[action])
        if not moved:
            return None, 0, False
        return np.array(board, dtype=np.int32), points, True

    def valid_actions(self):
        """actions that would change the board"""
        return [action for action in self.action_to_direction
                if resolve_move(self.game.board, self.action_to_direction[action]).moved]

    def reset(self, seed=None, options=None):
        """reset the game to start a new episode"""
        super().reset(seed=seed)

        # spawns come from the env's seeded generator
        self.game.reset(rng=random.Random(int(self.np_random.integers(2 ** 32))))

        observation = self._get_observation()
        info = {"score": self.game.score, "max_tile": self.game.highest_tile}

        return observation, info

    def step(self, action):
        """take one step in the environment"""
        afterstate_board, _, valid = self.get_afterstate(action)

        moved, points = self.game.make_move(self.action_to_direction[action])
        reward = float(points)

        observation = self._get_observation()
        terminated = self.game.game_over
        truncated = False

        info = {
            "score": self.game.score,
            "moved": moved,
            "points_gained": points,
            "afterstate": afterstate_board if valid else None,
            "max_tile": int(np.max(observation)),
            "is_win": self.game.is_win,
            "move_count": self.game.move_count,
        }

        if self.render_mode == "human":
            self.render()

        return observation, reward, terminated, truncated, info

    def render(self):
        """print the board to console"""
        self.game.print_board()

    def close(self):
        """clean up resources"""
