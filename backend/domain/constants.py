"""
Game constants for Neon Snake.
"""

from enum import Enum

from .entities import Point


class GameMode(str, Enum):
    CLASSIC = "classic"
    SURVIVAL = "survival"
    TIME_ATTACK = "time-attack"


# Board
GRID_WIDTH = 40
GRID_HEIGHT = 30
CELL_SIZE = 20  # Pixels per cell, used for particle coordinates
FPS = 60

# Movement directions (y grows downward)
UP = Point(0, -1)
DOWN = Point(0, 1)
LEFT = Point(-1, 0)
RIGHT = Point(1, 0)

# Key names understood by the engine, lower-cased
KEY_DIRECTIONS = {
    "arrowup": UP,
    "w": UP,
    "arrowdown": DOWN,
    "s": DOWN,
    "arrowleft": LEFT,
    "a": LEFT,
    "arrowright": RIGHT,
    "d": RIGHT,
}
RESTART_KEYS = {"Enter", " "}

# Colors
COLORS = {
    "CYAN": "#00FFFF",
    "PINK": "#FF00FF",
    "PURPLE": "#9D00FF",
    "BLUE": "#0080FF",
    "YELLOW": "#FFFF00",
    "GREEN": "#00FF00",
}

# Step delay per mode (smaller = faster)
MODE_SPEEDS = {
    GameMode.CLASSIC: 120,
    GameMode.SURVIVAL: 100,
    GameMode.TIME_ATTACK: 80,
}
MIN_SPEED = 50

# Scoring
FOOD_SCORE = 10

# Power-ups
SHIELD = "shield"
MAGNET = "magnet"
DASH = "dash"
SLOW = "slow"
POWERUP_TYPES = (SHIELD, MAGNET, DASH, SLOW)
POWERUP_SPAWN_CHANCE = 0.005
POWERUP_LIFE = 600
EFFECT_DURATIONS = {
    SHIELD: 600,
    MAGNET: 600,
    DASH: 300,
    SLOW: 300,
}
POWERUP_COLORS = {
    SHIELD: COLORS["BLUE"],
    MAGNET: COLORS["PURPLE"],
    DASH: COLORS["GREEN"],
    SLOW: COLORS["PINK"],
}
DASH_FACTOR = 0.5
SLOW_FACTOR = 1.5
MAGNET_RANGE = 8

# Spawning
SPAWN_ATTEMPTS = 100
ENEMY_SPAWN_ATTEMPTS = 20
ENEMY_MIN_DISTANCE = 10
ENEMY_COUNT = 2
START_LENGTH = 3

# Particles
EXPLOSION_PARTICLES = 15
FOOD_PARTICLES = 5
PICKUP_PARTICLES = 10
PARTICLE_SHRINK = 0.95
