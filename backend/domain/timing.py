"""
Step timing for the engine.

Kept free of engine state so the stepping rule can be checked without a
clock or a board.
"""

from .constants import DASH_FACTOR, SLOW_FACTOR


def effective_delay(speed: float, dash_active: bool, slow_active: bool) -> float:
    """Step delay after applying dash and slow; both modifiers compose."""
    delay = speed
    if dash_active:
        delay *= DASH_FACTOR
    if slow_active:
        delay *= SLOW_FACTOR
    return delay


def should_step(time: float, last_move_time: float, delay: float) -> bool:
    """
    True when strictly more than ``delay`` has elapsed since the last step.

    Overshoot is not carried over; the caller restarts the interval at
    ``time`` so a long stall produces at most one step.
    """
    return time - last_move_time > delay
