import unittest

import numpy as np

from connectfour.game.env import ConnectFourEnv
from connectfour.utils import ROWS, COLS, Mark


class TestConnectFourEnv(unittest.TestCase):
    def setUp(self):
        self.env = ConnectFourEnv(render_mode="ascii")

    def test_given_reset_then_empty_observation_and_all_moves_valid(self):
        observation, info = self.env.reset(seed=0)
        self.assertEqual(observation.shape, (ROWS, COLS))
        self.assertTrue(self.env.observation_space.contains(observation))
        self.assertFalse(observation.any())
        self.assertEqual(info['valid_moves'], list(range(COLS)))
        self.assertEqual(info['current_player'], Mark.ONE.value)
        self.assertEqual(info['game_result'], 'AWAITING_MOVE')

    def test_given_valid_action_then_disc_placed_and_turn_passes(self):
        self.env.reset()
        observation, reward, terminated, truncated, info = self.env.step(3)
        self.assertEqual(observation[ROWS - 1, 3], Mark.ONE.value)
        self.assertEqual(reward, ConnectFourEnv.reward_step)
        self.assertFalse(terminated)
        self.assertFalse(truncated)
        self.assertEqual(info['current_player'], Mark.TWO.value)
        self.assertEqual(info['moves_made'], 1)

    def test_given_invalid_action_then_penalty_and_board_unchanged(self):
        self.env.reset()
        before = self.env.render()
        for action in (-1, COLS):
            observation, reward, terminated, truncated, info = self.env.step(action)
            self.assertEqual(reward, ConnectFourEnv.reward_invalid_move)
            self.assertFalse(terminated)
            self.assertTrue(truncated)
            self.assertTrue(info['invalid_move'])
        self.assertEqual(self.env.render(), before)
        self.assertEqual(info['current_player'], Mark.ONE.value)

    def test_given_non_integer_actions_then_rejected_without_placing_disc(self):
        self.env.reset()
        for action in (True, False, 2.9, 3.0, "3", None):
            with self.subTest(action=action):
                observation, reward, terminated, truncated, info = self.env.step(action)
                self.assertEqual(reward, ConnectFourEnv.reward_invalid_move)
                self.assertTrue(truncated)
                self.assertTrue(info['invalid_move'])
                self.assertEqual(info['moves_made'], 0)
                self.assertFalse(observation.any())

    def test_given_numpy_integer_action_then_disc_placed(self):
        self.env.reset()
        observation, _, _, truncated, info = self.env.step(np.int64(4))
        self.assertFalse(truncated)
        self.assertEqual(observation[ROWS - 1, 4], Mark.ONE.value)
        self.assertEqual(info['moves_made'], 1)

    def test_given_vertical_four_for_player_one_then_win_reward(self):
        self.env.reset()
        for action in [0, 1, 0, 1, 0, 1]:
            _, _, terminated, _, _ = self.env.step(action)
            self.assertFalse(terminated)
        _, reward, terminated, _, info = self.env.step(0)
        self.assertTrue(terminated)
        self.assertEqual(reward, ConnectFourEnv.reward_win)
        self.assertEqual(info['game_result'], 'WON')
        self.assertEqual(info['winning_line'], [(2, 0), (3, 0), (4, 0), (5, 0)])
        self.assertEqual(info['valid_moves'], [])

    def test_given_player_two_wins_then_lose_reward(self):
        self.env.reset()
        for action in [6, 0, 5, 0, 6, 0, 5]:
            self.env.step(action)
        _, reward, terminated, _, _ = self.env.step(0)
        self.assertTrue(terminated)
        self.assertEqual(reward, ConnectFourEnv.reward_lose)

    def test_given_finished_episode_when_reset_then_fresh_board(self):
        self.env.reset()
        for action in [0, 1, 0, 1, 0, 1, 0]:
            self.env.step(action)
        observation, info = self.env.reset()
        self.assertTrue(np.array_equal(observation, np.zeros((ROWS, COLS), dtype=np.int8)))
        self.assertEqual(info['moves_made'], 0)

    def test_given_unknown_render_mode_then_value_error(self):
        with self.assertRaises(ValueError):
            ConnectFourEnv(render_mode="rgb_array")


if __name__ == "__main__":
    unittest.main()
