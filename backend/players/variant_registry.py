"""
Registry for autopilot players.

Maps player names (e.g., 'random', 'greedy') to player classes so the
runners can pick one from a command-line flag or environment variable.
"""

from typing import Callable, Dict, Optional, Type

from .base import Player
from .greedy_player import GreedyPlayer
from .random_player import RandomPlayer

DEFAULT_PLAYER = "greedy"

# Registry: maps player name -> player class
PLAYER_CLASSES: Dict[str, Type[Player]] = {
    "random": RandomPlayer,
    "greedy": GreedyPlayer,
}

# Canonical list of available player names (for CLI choices)
AVAILABLE_PLAYERS = list(PLAYER_CLASSES.keys())


def get_player_class(name: Optional[str] = None) -> Type[Player]:
    """
    Get the player class for a given name.

    Args:
        name: One of 'random', 'greedy'. If None or empty, returns the default.

    Returns:
        The player class (subclass of Player).

    Raises:
        ValueError: If name is not recognized.
    """
    if not name or name.strip() == "":
        name = DEFAULT_PLAYER

    name = name.strip().lower()

    if name not in PLAYER_CLASSES:
        available = ", ".join(AVAILABLE_PLAYERS)
        raise ValueError(f"Unknown player '{name}'. Available players: {available}")

    return PLAYER_CLASSES[name]


def list_players() -> list:
    """
    Return metadata about all available players.

    Returns:
        List of dicts with 'key' and 'description' for each player.
    """
    return [
        {"key": "random", "description": "Random safe moves"},
        {"key": "greedy", "description": "Shortest Manhattan step toward the food, avoiding obstacles"},
    ]
