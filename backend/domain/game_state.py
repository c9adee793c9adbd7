"""
GameState entity - a read-only snapshot of the engine at a point in time.
"""

from typing import Any, Dict, Optional, Tuple

from .constants import POWERUP_COLORS
from .entities import Enemy, Point, PowerUp

POWERUP_SYMBOLS = {
    "shield": "S",
    "magnet": "M",
    "dash": "D",
    "slow": "L",
}


class GameState:
    """
    A snapshot of the game at a specific point in time.

    Attributes:
        mode: game mode value ('classic', 'survival', 'time-attack')
        state: session state value ('ready', 'running', 'paused', 'game_over')
        snake: tuple of Points, head first
        direction: currently applied direction
        food: food position or None
        power_ups: tuple of PowerUp on the board
        enemies: tuple of Enemy bodies
        score: current score
        speed: base step delay
        game_time: accumulated elapsed time
        active_effects: upper-case labels of active power-up effects
        width, height: board dimensions
    """

    def __init__(
        self,
        mode: str,
        state: str,
        snake: Tuple[Point, ...],
        direction: Point,
        food: Optional[Point],
        power_ups: Tuple[PowerUp, ...],
        enemies: Tuple[Enemy, ...],
        score: int,
        speed: float,
        game_time: float,
        active_effects: Tuple[str, ...],
        width: int,
        height: int,
    ):
        self.mode = mode
        self.state = state
        self.snake = snake
        self.direction = direction
        self.food = food
        self.power_ups = power_ups
        self.enemies = enemies
        self.score = score
        self.speed = speed
        self.game_time = game_time
        self.active_effects = active_effects
        self.width = width
        self.height = height

    @property
    def head(self) -> Point:
        return self.snake[0]

    @property
    def shield_active(self) -> bool:
        return "SHIELD" in self.active_effects

    def in_bounds(self, cell: Point) -> bool:
        return 0 <= cell.x < self.width and 0 <= cell.y < self.height

    def enemy_cells(self) -> set:
        return {segment for enemy in self.enemies for segment in enemy.body}

    def print_board(self) -> str:
        """
        Returns a string representation of the board with:
        . = empty space
        * = food
        S/M/D/L = shield/magnet/dash/slow power-up
        X = enemy segment
        o = snake body
        @ = snake head
        Row 0 is printed first, matching the engine's downward y axis.
        """
        board = [['.' for _ in range(self.width)] for _ in range(self.height)]

        def place(cell: Point, symbol: str) -> None:
            # Enemy tails may hang off the bottom edge
            if self.in_bounds(cell):
                board[cell.y][cell.x] = symbol

        if self.food is not None:
            place(self.food, '*')
        for power_up in self.power_ups:
            place(power_up.position, POWERUP_SYMBOLS.get(power_up.type, '?'))
        for cell in self.enemy_cells():
            place(cell, 'X')
        for i, cell in enumerate(self.snake):
            place(cell, '@' if i == 0 else 'o')

        result = [f"{y:2d} {' '.join(row)}" for y, row in enumerate(board)]
        # Only the last digit fits in a one-character column
        result.append("   " + " ".join(str(x % 10) for x in range(self.width)))
        return "\n".join(result)

    def to_dict(self) -> Dict[str, Any]:
        """JSON-friendly representation; points become [x, y] lists."""
        return {
            "mode": self.mode,
            "state": self.state,
            "snake": [list(p) for p in self.snake],
            "direction": list(self.direction),
            "food": list(self.food) if self.food is not None else None,
            "power_ups": [
                {
                    "id": p.id,
                    "position": list(p.position),
                    "type": p.type,
                    "color": POWERUP_COLORS.get(p.type),
                    "life": p.life,
                    "max_life": p.max_life,
                }
                for p in self.power_ups
            ],
            "enemies": [[list(p) for p in e.body] for e in self.enemies],
            "score": self.score,
            "speed": self.speed,
            "game_time": self.game_time,
            "active_effects": list(self.active_effects),
            "width": self.width,
            "height": self.height,
        }

    def __repr__(self):
        return (
            f"<GameState mode={self.mode} state={self.state} score={self.score}, "
            f"length={len(self.snake)}, food={self.food}>"
        )
