"""
Player implementations for Neon Snake.

This module contains the autopilot abstractions that stand in for the
input-capture layer when the engine is driven headlessly.
"""

from .base import Player, DIRECTION_KEYS
from .random_player import RandomPlayer
from .greedy_player import GreedyPlayer
from .variant_registry import get_player_class, list_players, AVAILABLE_PLAYERS, DEFAULT_PLAYER

__all__ = [
    'Player',
    'DIRECTION_KEYS',
    'RandomPlayer',
    'GreedyPlayer',
    'get_player_class',
    'list_players',
    'AVAILABLE_PLAYERS',
    'DEFAULT_PLAYER',
]
