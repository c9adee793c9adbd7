"""
Snake entity for the game engine.
"""

from collections import deque
from typing import Iterable

from .entities import Point


class Snake:
    """
    The player's snake.

    Attributes:
        positions: deque of Points from head at index 0 to tail at the end
    """

    def __init__(self, positions: Iterable[Point]):
        self.positions = deque(positions)

    @property
    def head(self) -> Point:
        """Return the head position (first element)."""
        return self.positions[0]

    def hits_body(self, cell: Point) -> bool:
        """
        True if ``cell`` lies on the body behind the current head.

        The current head is skipped because it is vacated by the move that
        is being tested.
        """
        return any(segment == cell for i, segment in enumerate(self.positions) if i > 0)

    def push_head(self, cell: Point) -> None:
        self.positions.appendleft(cell)

    def pop_tail(self) -> Point:
        return self.positions.pop()

    def __contains__(self, cell) -> bool:
        return cell in self.positions

    def __len__(self) -> int:
        return len(self.positions)
