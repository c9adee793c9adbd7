"""
Random player implementation - picks random safe moves.
"""

from typing import Optional

from domain.game_state import GameState
from .base import DIRECTION_KEYS, Player


class RandomPlayer(Player):
    """
    A random AI that picks a direction that avoids walls, its own body and enemies.
    """

    def get_key(self, game_state: GameState) -> Optional[str]:
        valid_moves = self.safe_moves(game_state)

        # If no valid moves, keep going (we'll die anyway)
        if not valid_moves:
            return None

        return DIRECTION_KEYS[self.rng.choice(valid_moves)]
