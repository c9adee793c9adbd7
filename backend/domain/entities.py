"""
Value objects placed on the board: points, power-ups, enemies and particles.

Everything here except EffectTimer is immutable, so the engine can hand
collections of them to a renderer without copying.
"""

from dataclasses import dataclass, replace
from typing import NamedTuple, Tuple


class Point(NamedTuple):
    """Integer grid coordinate, also used as a unit direction vector."""

    x: int
    y: int

    def __add__(self, other: "Point") -> "Point":
        return Point(self.x + other.x, self.y + other.y)

    def __neg__(self) -> "Point":
        return Point(-self.x, -self.y)

    def manhattan(self, other: "Point") -> int:
        return abs(self.x - other.x) + abs(self.y - other.y)


@dataclass(frozen=True)
class PowerUp:
    id: str
    position: Point
    type: str
    life: int
    max_life: int

    def aged(self) -> "PowerUp":
        return replace(self, life=self.life - 1)


@dataclass(frozen=True)
class Enemy:
    """
    A rival snake body. Enemies never move, grow or eat; they only block cells.

    Attributes:
        body: segments from head at index 0 to tail
        direction: facing direction, kept for renderers
        color: render color
    """

    body: Tuple[Point, ...]
    direction: Point
    color: str


@dataclass(frozen=True)
class Particle:
    """Cosmetic explosion fragment in pixel space."""

    x: float
    y: float
    vx: float
    vy: float
    life: float
    decay: float
    color: str
    size: float

    def advanced(self, shrink: float) -> "Particle":
        return replace(
            self,
            x=self.x + self.vx,
            y=self.y + self.vy,
            life=self.life - self.decay,
            size=self.size * shrink,
        )


class EffectTimer:
    """
    Remaining duration of one power-up effect.

    Shield and magnet count down on every tick (``counts_while_idle``), so the
    flag is derived from the timer. Dash and slow only count while active.
    """

    def __init__(self, counts_while_idle: bool):
        self.counts_while_idle = counts_while_idle
        self.active = False
        self.remaining = 0

    def activate(self, duration: int) -> None:
        self.active = True
        self.remaining = duration

    def clear(self) -> None:
        self.active = False
        self.remaining = 0

    def tick(self) -> None:
        if self.counts_while_idle:
            if self.remaining > 0:
                self.remaining -= 1
            if self.remaining <= 0:
                self.active = False
        elif self.active:
            self.remaining -= 1
            if self.remaining <= 0:
                self.active = False

    def __repr__(self):
        return f"<EffectTimer active={self.active} remaining={self.remaining}>"
