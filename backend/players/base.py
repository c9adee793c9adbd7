"""
Base player interface for driving the engine headlessly.
"""

import random
from typing import List, Optional

from domain.constants import UP, DOWN, LEFT, RIGHT
from domain.entities import Point
from domain.game_state import GameState

# Key name sent to SnakeEngine.handle_input for each direction
DIRECTION_KEYS = {
    UP: "ArrowUp",
    DOWN: "ArrowDown",
    LEFT: "ArrowLeft",
    RIGHT: "ArrowRight",
}


class Player:
    """
    Base class/interface for autopilot logic.

    A player looks at a GameState snapshot and returns the key a human would
    press, standing in for the input-capture layer.
    """

    def __init__(self, rng: Optional[random.Random] = None):
        self.rng = rng or random.Random()

    def get_key(self, game_state: GameState) -> Optional[str]:
        """
        Return a key name for the next step, or None to keep going straight.

        Args:
            game_state: Current state of the game

        Returns:
            One of: "ArrowUp", "ArrowDown", "ArrowLeft", "ArrowRight", or None
        """
        raise NotImplementedError

    def safe_moves(self, game_state: GameState) -> List[Point]:
        """
        Directions that do not immediately end the game.

        Filters out moves that:
        1. Reverse into the neck (the engine would drop them)
        2. Hit walls
        3. Hit own body (the tail included, it is still there when the head lands)
        4. Hit an enemy while unshielded
        """
        head = game_state.head
        body = game_state.snake[1:]
        enemy_cells = set() if game_state.shield_active else game_state.enemy_cells()

        valid_moves: List[Point] = []
        for move in DIRECTION_KEYS:
            if move == -game_state.direction:
                continue
            target = head + move
            if not game_state.in_bounds(target):
                continue
            if target in body or target in enemy_cells:
                continue
            valid_moves.append(move)
        return valid_moves
