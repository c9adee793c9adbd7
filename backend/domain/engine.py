"""
Snake simulation engine.

Owns every piece of gameplay state and advances it one tick per ``update``
call. Callers interact through ``reset``, ``handle_input`` and ``update``
(plus ``pause``/``resume`` for a driving loop) and read state through
properties; nothing returned here can be used to mutate the engine.
"""

import logging
import random
from enum import Enum
from typing import List, Optional, Tuple, Union

from .constants import (
    COLORS,
    CELL_SIZE,
    DASH,
    EFFECT_DURATIONS,
    ENEMY_COUNT,
    ENEMY_MIN_DISTANCE,
    ENEMY_SPAWN_ATTEMPTS,
    EXPLOSION_PARTICLES,
    FOOD_PARTICLES,
    FOOD_SCORE,
    GRID_HEIGHT,
    GRID_WIDTH,
    KEY_DIRECTIONS,
    MAGNET,
    MAGNET_RANGE,
    MIN_SPEED,
    MODE_SPEEDS,
    PARTICLE_SHRINK,
    PICKUP_PARTICLES,
    POWERUP_LIFE,
    POWERUP_SPAWN_CHANCE,
    POWERUP_TYPES,
    RESTART_KEYS,
    SHIELD,
    SLOW,
    SPAWN_ATTEMPTS,
    START_LENGTH,
    UP,
    GameMode,
)
from .entities import EffectTimer, Enemy, Particle, Point, PowerUp
from .game_state import GameState
from .snake import Snake
from .timing import effective_delay, should_step

logger = logging.getLogger(__name__)


class SessionState(str, Enum):
    READY = "ready"
    RUNNING = "running"
    PAUSED = "paused"
    GAME_OVER = "game_over"


def coerce_mode(mode: Union[GameMode, str]) -> GameMode:
    """Accept a GameMode or its string value."""
    try:
        return GameMode(mode)
    except ValueError:
        available = ", ".join(m.value for m in GameMode)
        raise ValueError(f"Unknown game mode '{mode}'. Available modes: {available}") from None


class SnakeEngine:
    """
    Deterministic, time-stepped snake engine.

    Randomness (spawn cells, power-up types, particle jitter) is drawn from
    ``rng`` only, so a seeded ``random.Random`` reproduces a game exactly.
    """

    def __init__(
        self,
        mode: Union[GameMode, str] = GameMode.CLASSIC,
        rng: Optional[random.Random] = None,
        width: int = GRID_WIDTH,
        height: int = GRID_HEIGHT,
    ):
        if width < 1 or height // 2 + START_LENGTH > height:
            raise ValueError(
                f"Grid {width}x{height} is too small for a {START_LENGTH}-segment snake"
            )
        self._width = width
        self._height = height
        self._rng = rng or random.Random()
        self._mode = coerce_mode(mode)
        self._effects = {
            SHIELD: EffectTimer(counts_while_idle=True),
            MAGNET: EffectTimer(counts_while_idle=True),
            DASH: EffectTimer(counts_while_idle=False),
            SLOW: EffectTimer(counts_while_idle=False),
        }
        self.reset()

    # ------------------------------------------------------------------
    # Commands
    # ------------------------------------------------------------------

    def reset(self, mode: Union[GameMode, str, None] = None) -> None:
        """
        Reinitialize every field, optionally switching mode first.

        Order matters: enemies are placed relative to the snake head and
        food avoids both the snake and the enemies.
        """
        if mode is not None:
            self._mode = coerce_mode(mode)

        self._power_ups: List[PowerUp] = []
        self._particles: List[Particle] = []
        self._enemies: List[Enemy] = []
        self._score = 0
        self._state = SessionState.READY
        self._death_reason: Optional[str] = None

        for timer in self._effects.values():
            timer.clear()

        start_x = self._width // 2
        start_y = self._height // 2
        self._snake = Snake(Point(start_x, start_y + i) for i in range(START_LENGTH))
        self._direction = UP
        self._next_direction = UP

        if self._mode is GameMode.SURVIVAL:
            for _ in range(ENEMY_COUNT):
                self._spawn_enemy()

        self._food: Optional[Point] = self._random_free_cell()

        self._speed = MODE_SPEEDS[self._mode]
        self._last_move_time = 0
        self._game_time = 0
        logger.debug(f"Reset {self._mode.value} game on {self._width}x{self._height} grid")

    def handle_input(self, key: str) -> None:
        """
        Buffer a direction change from a key name.

        After game over only Enter/Space are honoured and restart the game.
        A direction opposite to the applied one is dropped.
        """
        if self._state is SessionState.GAME_OVER:
            if key in RESTART_KEYS:
                self.reset()
            return

        requested = KEY_DIRECTIONS.get(key.lower())
        if requested is None:
            return
        if requested == -self._direction:
            return
        self._next_direction = requested

    def update(self, time: float, delta_time: float) -> None:
        """
        Advance one tick. At most one grid step happens per call.

        Args:
            time: monotonic clock reading in the unit of the step delays
            delta_time: frame duration, only accumulated into game_time
        """
        if self._state in (SessionState.GAME_OVER, SessionState.PAUSED):
            return
        if self._state is SessionState.READY:
            self._state = SessionState.RUNNING

        self._game_time += delta_time

        aged = (p.aged() for p in self._power_ups)
        self._power_ups = [p for p in aged if p.life > 0]

        if self._rng.random() < POWERUP_SPAWN_CHANCE:
            self._spawn_power_up()

        for timer in self._effects.values():
            timer.tick()

        delay = effective_delay(self._speed, self.dash_active, self.slow_active)
        if should_step(time, self._last_move_time, delay):
            self._last_move_time = time
            self._move()

        self._update_particles()

    def pause(self) -> None:
        if self._state is SessionState.RUNNING:
            self._state = SessionState.PAUSED

    def resume(self) -> None:
        if self._state is SessionState.PAUSED:
            self._state = SessionState.RUNNING

    # ------------------------------------------------------------------
    # Read-only surface
    # ------------------------------------------------------------------

    @property
    def mode(self) -> GameMode:
        return self._mode

    @property
    def state(self) -> SessionState:
        return self._state

    @property
    def width(self) -> int:
        return self._width

    @property
    def height(self) -> int:
        return self._height

    @property
    def snake(self) -> Tuple[Point, ...]:
        return tuple(self._snake.positions)

    @property
    def direction(self) -> Point:
        return self._direction

    @property
    def next_direction(self) -> Point:
        return self._next_direction

    @property
    def food(self) -> Optional[Point]:
        return self._food

    @property
    def power_ups(self) -> Tuple[PowerUp, ...]:
        return tuple(self._power_ups)

    @property
    def particles(self) -> Tuple[Particle, ...]:
        return tuple(self._particles)

    @property
    def enemies(self) -> Tuple[Enemy, ...]:
        return tuple(self._enemies)

    @property
    def score(self) -> int:
        return self._score

    @property
    def speed(self) -> float:
        return self._speed

    @property
    def game_time(self) -> float:
        return self._game_time

    @property
    def game_over(self) -> bool:
        return self._state is SessionState.GAME_OVER

    @property
    def paused(self) -> bool:
        return self._state is SessionState.PAUSED

    @property
    def death_reason(self) -> Optional[str]:
        """'wall', 'self' or 'enemy' once the game is over."""
        return self._death_reason

    @property
    def shield_active(self) -> bool:
        return self._effects[SHIELD].active

    @property
    def magnet_active(self) -> bool:
        return self._effects[MAGNET].active

    @property
    def dash_active(self) -> bool:
        return self._effects[DASH].active

    @property
    def slow_active(self) -> bool:
        return self._effects[SLOW].active

    @property
    def active_effects(self) -> Tuple[str, ...]:
        return tuple(name.upper() for name, timer in self._effects.items() if timer.active)

    def effect_remaining(self, power_up_type: str) -> int:
        if power_up_type not in self._effects:
            available = ", ".join(POWERUP_TYPES)
            raise ValueError(
                f"Unknown power-up type '{power_up_type}'. Available types: {available}"
            )
        return self._effects[power_up_type].remaining

    def get_current_state(self) -> GameState:
        """Return a snapshot of the current board as a GameState."""
        return GameState(
            mode=self._mode.value,
            state=self._state.value,
            snake=self.snake,
            direction=self._direction,
            food=self._food,
            power_ups=self.power_ups,
            enemies=self.enemies,
            score=self._score,
            speed=self._speed,
            game_time=self._game_time,
            active_effects=self.active_effects,
            width=self._width,
            height=self._height,
        )

    # ------------------------------------------------------------------
    # Step
    # ------------------------------------------------------------------

    def _move(self) -> None:
        self._direction = self._next_direction
        head = self._snake.head
        new_head = head + self._direction

        if not self._in_bounds(new_head):
            self._end_game(head, "wall")
            return
        if self._snake.hits_body(new_head):
            self._end_game(head, "self")
            return
        if self._on_enemy(new_head) and not self.shield_active:
            self._end_game(head, "enemy")
            return

        self._snake.push_head(new_head)

        ate = False
        if self._food is not None and new_head == self._food:
            ate = True
            self._score += FOOD_SCORE
            self._create_explosion(new_head, COLORS["YELLOW"], FOOD_PARTICLES)
            self._food = self._random_free_cell()
            if self._speed > MIN_SPEED:
                self._speed -= 1

        if self.magnet_active and self._food is not None and not ate:
            self._pull_food(new_head)

        for index, power_up in enumerate(self._power_ups):
            if power_up.position == new_head:
                self._activate_power_up(power_up.type)
                del self._power_ups[index]
                self._create_explosion(new_head, COLORS["PINK"], PICKUP_PARTICLES)
                break

        if not ate:
            self._snake.pop_tail()

    def _pull_food(self, head: Point) -> None:
        food = self._food
        if food.manhattan(head) >= MAGNET_RANGE:
            return
        if food.x < head.x:
            self._food = Point(food.x + 1, food.y)
        elif food.x > head.x:
            self._food = Point(food.x - 1, food.y)
        elif food.y < head.y:
            self._food = Point(food.x, food.y + 1)
        elif food.y > head.y:
            self._food = Point(food.x, food.y - 1)

    def _activate_power_up(self, power_up_type: str) -> None:
        self._effects[power_up_type].activate(EFFECT_DURATIONS[power_up_type])
        logger.debug(f"Activated {power_up_type} for {EFFECT_DURATIONS[power_up_type]} ticks")

    def _end_game(self, at: Point, reason: str) -> None:
        self._state = SessionState.GAME_OVER
        self._death_reason = reason
        self._create_explosion(at, COLORS["CYAN"])
        logger.info(f"Game over ({reason}) at {tuple(at)} with score {self._score}")

    # ------------------------------------------------------------------
    # Spawning
    # ------------------------------------------------------------------

    def _in_bounds(self, cell: Point) -> bool:
        return 0 <= cell.x < self._width and 0 <= cell.y < self._height

    def _on_enemy(self, cell: Point) -> bool:
        return any(cell in enemy.body for enemy in self._enemies)

    def _is_blocked(self, cell: Point) -> bool:
        if not self._in_bounds(cell) or cell in self._snake:
            return True
        return self._on_enemy(cell) and not self.shield_active

    def _random_cell(self) -> Point:
        return Point(self._rng.randrange(self._width), self._rng.randrange(self._height))

    def _random_free_cell(self) -> Point:
        """
        Pick a random unblocked cell within the attempt budget.

        On exhaustion the last candidate is used even if it is occupied.
        """
        cell = self._random_cell()
        for _ in range(SPAWN_ATTEMPTS - 1):
            if not self._is_blocked(cell):
                return cell
            cell = self._random_cell()
        if self._is_blocked(cell):
            logger.debug(f"No free cell after {SPAWN_ATTEMPTS} attempts, using {tuple(cell)}")
        return cell

    def _spawn_power_up(self) -> None:
        power_up_type = self._rng.choice(POWERUP_TYPES)
        power_up = PowerUp(
            id=f"{self._rng.getrandbits(36):09x}",
            position=self._random_free_cell(),
            type=power_up_type,
            life=POWERUP_LIFE,
            max_life=POWERUP_LIFE,
        )
        self._power_ups.append(power_up)
        logger.debug(f"Spawned {power_up_type} at {tuple(power_up.position)}")

    def _spawn_enemy(self) -> None:
        head = self._snake.head
        for _ in range(ENEMY_SPAWN_ATTEMPTS):
            cell = self._random_cell()
            too_close = (
                abs(cell.x - head.x) < ENEMY_MIN_DISTANCE
                and abs(cell.y - head.y) < ENEMY_MIN_DISTANCE
            )
            if not too_close:
                break
        body = tuple(Point(cell.x, cell.y + i) for i in range(START_LENGTH))
        self._enemies.append(Enemy(body=body, direction=UP, color=COLORS["PINK"]))

    # ------------------------------------------------------------------
    # Particles
    # ------------------------------------------------------------------

    def _create_explosion(self, cell: Point, color: str, count: int = EXPLOSION_PARTICLES) -> None:
        center_x = cell.x * CELL_SIZE + CELL_SIZE / 2
        center_y = cell.y * CELL_SIZE + CELL_SIZE / 2
        for _ in range(count):
            self._particles.append(Particle(
                x=center_x,
                y=center_y,
                vx=(self._rng.random() - 0.5) * 8,
                vy=(self._rng.random() - 0.5) * 8,
                life=1.0,
                decay=0.02 + self._rng.random() * 0.03,
                color=color,
                size=2 + self._rng.random() * 4,
            ))

    def _update_particles(self) -> None:
        advanced = (p.advanced(PARTICLE_SHRINK) for p in self._particles)
        self._particles = [p for p in advanced if p.life > 0]

    def __repr__(self):
        return (
            f"<SnakeEngine mode={self._mode.value} state={self._state.value} "
            f"score={self._score} length={len(self._snake)}>"
        )
