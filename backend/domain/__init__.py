"""
Domain entities for the Neon Snake game engine.

This module contains the simulation core and the value objects it hands
out. Rendering, input capture and persistence live outside it.
"""

from .constants import UP, DOWN, LEFT, RIGHT, GRID_WIDTH, GRID_HEIGHT, GameMode
from .entities import Point, PowerUp, Enemy, Particle, EffectTimer
from .snake import Snake
from .game_state import GameState
from .engine import SnakeEngine, SessionState

__all__ = [
    'UP', 'DOWN', 'LEFT', 'RIGHT', 'GRID_WIDTH', 'GRID_HEIGHT',
    'GameMode',
    'Point', 'PowerUp', 'Enemy', 'Particle', 'EffectTimer',
    'Snake',
    'GameState',
    'SnakeEngine', 'SessionState',
]
