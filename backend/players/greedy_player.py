"""
Greedy player implementation - heads for the food along safe moves.
"""

from typing import Optional

from domain.game_state import GameState
from .base import DIRECTION_KEYS, Player


class GreedyPlayer(Player):
    """
    Picks the safe move that brings the head closest to the food.

    Ties are broken at random; with no food on the board it plays randomly.
    """

    def get_key(self, game_state: GameState) -> Optional[str]:
        valid_moves = self.safe_moves(game_state)
        if not valid_moves:
            return None

        if game_state.food is None:
            return DIRECTION_KEYS[self.rng.choice(valid_moves)]

        head = game_state.head
        distances = {move: (head + move).manhattan(game_state.food) for move in valid_moves}
        best = min(distances.values())
        closest = [move for move, dist in distances.items() if dist == best]
        return DIRECTION_KEYS[self.rng.choice(closest)]
