"""
Test script for the 2048 Nexus gymnasium environment
"""
import sys
import os

import numpy as np

# Add src directory to path so we can import our modules
sys.path.append(os.path.join(os.path.dirname(__file__), 'src'))

from game_gym import Game2048Env


def test_environment():
    """Play random moves and check the environment contract"""
    env = Game2048Env()

    observation, info = env.reset(seed=0)
    assert observation.shape == (4, 4)
    assert observation.dtype == np.int32
    assert np.count_nonzero(observation) == 2
    assert info["score"] == 0

    for step in range(200):
        action = env.action_space.sample()
        before = observation.copy()

        observation, reward, terminated, truncated, info = env.step(action)

        assert env.observation_space.contains(observation)
        assert truncated is False
        if info["moved"]:
            assert reward == info["points_gained"]
            afterstate = info["afterstate"]
            # afterstate plus one spawned tile is the new observation
            assert np.count_nonzero(observation != afterstate) == 1
        else:
            assert reward == 0.0
            assert info["afterstate"] is None
            assert np.array_equal(before, observation)

        if terminated:
            assert env.valid_actions() == []
            break

    env.close()


def test_seeded_reset_is_reproducible():
    first = Game2048Env()
    second = Game2048Env()
    obs_a, _ = first.reset(seed=123)
    obs_b, _ = second.reset(seed=123)
    assert np.array_equal(obs_a, obs_b)

    for action in (0, 2, 1, 3, 2):
        obs_a, reward_a, _, _, _ = first.step(action)
        obs_b, reward_b, _, _, _ = second.step(action)
        assert np.array_equal(obs_a, obs_b)
        assert reward_a == reward_b


def test_level_sets_board_size():
    env = Game2048Env(level=11)
    observation, _ = env.reset(seed=1)
    assert observation.shape == (6, 6)
    assert env.observation_space.shape == (6, 6)


def test_afterstate_for_merge():
    env = Game2048Env()
    env.reset(seed=0)
    env.game.board = [[2, 2, 0, 0], [0] * 4, [0] * 4, [0] * 4]

    afterstate, points, valid = env.get_afterstate(2)
    assert valid
    assert points == 4
    assert afterstate.tolist()[0] == [4, 0, 0, 0]

    # the tiles already sit on the top edge
    assert env.get_afterstate(0) == (None, 0, False)
    assert sorted(env.valid_actions()) == [1, 2, 3]


if __name__ == "__main__":
    test_environment()
    print("Test completed!")
