"""
env.py - Gymnasium environment for scripted Connect Four play

Each episode wraps a fresh GameSession. Actions are 0-indexed columns played
for whichever player is to move, so a driver controls both sides.
"""

import numbers
from typing import Dict, Optional, Tuple

import gymnasium as gym
import numpy as np
from gymnasium import spaces

from connectfour.debug import debug
from connectfour.game.session import GameSession, Phase
from connectfour.utils import ROWS, COLS, Mark


class ConnectFourEnv(gym.Env):
    """
    Connect Four environment following the Gymnasium interface.

    Rewards are given from player one's perspective.
    """

    metadata = {'render_modes': ['ascii', 'human'], 'render_fps': 4}

    reward_win = 1.0
    reward_lose = -1.0
    reward_draw = 0.1
    reward_invalid_move = -0.5
    reward_step = -0.01

    def __init__(self, render_mode: Optional[str] = None,
                 player1_name: str = "Player 1", player2_name: str = "Player 2"):
        """
        Initialize the Connect Four environment.

        Args:
            render_mode: Mode for rendering the environment
            player1_name: Display name for the first player
            player2_name: Display name for the second player
        """
        if render_mode is not None and render_mode not in self.metadata['render_modes']:
            raise ValueError(f"Unsupported render mode: {render_mode}")

        debug.debug("Initializing ConnectFourEnv", "env")

        self.action_space = spaces.Discrete(COLS)
        # Observation space: 6x7 grid of Mark values (0, 1, 2)
        self.observation_space = spaces.Box(
            low=0, high=2, shape=(ROWS, COLS), dtype=np.int8
        )

        self.render_mode = render_mode
        self.player_names = (player1_name, player2_name)
        self.session = GameSession(*self.player_names)

    def reset(self, seed: Optional[int] = None, options: Optional[Dict] = None) -> Tuple[np.ndarray, Dict]:
        """
        Start a new game.

        Returns:
            Initial observation and info dictionary
        """
        debug.debug("Resetting environment", "env")
        super().reset(seed=seed)

        self.session = GameSession(*self.player_names)

        if self.render_mode == "human":
            self.render()

        return self._get_observation(), self._get_info()

    def step(self, action: int) -> Tuple[np.ndarray, float, bool, bool, Dict]:
        """
        Drop a disc for the player to move.

        Args:
            action: Column to drop into (0-indexed)

        Returns:
            Tuple of (observation, reward, terminated, truncated, info)
        """
        debug.debug(f"Environment step with action {action}", "env")

        if self.session.is_over():
            debug.warning("Step called after the game ended", "env")
            info = self._get_info()
            info['invalid_move'] = True
            return self._get_observation(), 0.0, True, False, info

        # Only integer actions map to columns; bools and floats are invalid
        is_integer = isinstance(action, numbers.Integral) and not isinstance(action, bool)
        if not is_integer or not self.session.submit_column(int(action) + 1):
            debug.warning(f"Invalid action: {action}", "env")
            info = self._get_info()
            info['invalid_move'] = True
            return self._get_observation(), self.reward_invalid_move, False, True, info

        reward = self.reward_step
        terminated = False
        state = self.session.state

        if state.phase == Phase.WON:
            terminated = True
            if state.player.mark == Mark.ONE:
                debug.info("Game over: player ONE wins", "env")
                reward = self.reward_win
            else:
                debug.info("Game over: player TWO wins", "env")
                reward = self.reward_lose
        elif state.phase == Phase.DRAW:
            debug.info("Game over: draw", "env")
            terminated = True
            reward = self.reward_draw

        if self.render_mode == "human":
            self.render()

        return self._get_observation(), reward, terminated, False, self._get_info()

    def render(self) -> Optional[str]:
        """
        Render the current board.

        Returns:
            The board text in "ascii" mode, None otherwise
        """
        if self.render_mode == "ascii":
            return self.session.board.display()

        if self.render_mode == "human":
            print(self.session.board.display())

        return None

    def _get_observation(self) -> np.ndarray:
        return self.session.board.get_state()

    def _get_info(self) -> Dict:
        state = self.session.state
        winning_line = []
        if state.phase == Phase.WON:
            winning_line = self.session.board.get_winning_line(state.player.mark)

        valid_moves = [] if self.session.is_over() else self.session.board.get_valid_moves()

        return {
            'valid_moves': valid_moves,
            'num_valid_moves': len(valid_moves),
            'current_player': self.session.current_player.mark.value,
            'game_result': state.phase.name,
            'moves_made': len(self.session.moves_made),
            'winning_line': winning_line,
        }
