"""
Headless runner for the Neon Snake engine.

Drives one engine the way a frame loop would: a fixed frame interval,
``update`` once per frame, and an autopilot player pressing keys whenever
the snake has moved.
"""

import argparse
import json
import logging
import os
import random
import uuid
from typing import Any, Dict, Optional

from dotenv import load_dotenv

from domain.constants import FPS, GameMode
from domain.engine import SnakeEngine
from players import AVAILABLE_PLAYERS, DEFAULT_PLAYER, get_player_class

load_dotenv()
logger = logging.getLogger(__name__)

DEFAULT_MAX_FRAMES = 60 * FPS  # One minute of play at 60 frames per second
DEFAULT_FRAME_MS = 1000 / FPS


def run_simulation(
    mode: str = GameMode.CLASSIC.value,
    player_name: Optional[str] = None,
    max_frames: int = DEFAULT_MAX_FRAMES,
    frame_ms: float = DEFAULT_FRAME_MS,
    seed: Optional[int] = None,
    show_board: bool = False,
) -> Dict[str, Any]:
    """
    Runs a single headless game with an autopilot player.

    Args:
        mode: Game mode value ('classic', 'survival', 'time-attack').
        player_name: Autopilot name from the player registry.
        max_frames: Stop after this many frames even if the snake is alive.
        frame_ms: Simulated frame duration passed as delta_time.
        seed: Seed for the engine and player randomness; None is unseeded.
        show_board: Print the ASCII board after every grid step.

    Returns:
        A dictionary summarizing the game (game_id, mode, player, score, ...).
    """
    engine = SnakeEngine(mode=mode, rng=random.Random(seed))
    player_seed = None if seed is None else seed + 1
    player = get_player_class(player_name)(rng=random.Random(player_seed))

    game_id = str(uuid.uuid4())
    logger.info(f"Game {game_id}: {engine.mode.value} with {player.__class__.__name__}")

    clock = 0.0
    frames = 0
    last_head = None
    while not engine.game_over and frames < max_frames:
        head = engine.snake[0]
        if head != last_head:
            key = player.get_key(engine.get_current_state())
            if key is not None:
                engine.handle_input(key)
            last_head = head

        clock += frame_ms
        engine.update(clock, frame_ms)
        frames += 1

        if show_board and engine.snake[0] != head:
            print("\n" + engine.get_current_state().print_board() + "\n")

    result = {
        "game_id": game_id,
        "mode": engine.mode.value,
        "player": player.__class__.__name__,
        "score": engine.score,
        "length": len(engine.snake),
        "frames": frames,
        "game_time": engine.game_time,
        "game_over": engine.game_over,
        "death_reason": engine.death_reason,
        "final_head": list(engine.snake[0]),
    }
    logger.info(f"Game {game_id} finished after {frames} frames with score {engine.score}")
    return result


def configure_logging() -> None:
    level = os.getenv("SNAKE_LOG_LEVEL", "WARNING").upper()
    logging.basicConfig(level=level, format="%(asctime)s %(levelname)s %(name)s: %(message)s")


# -------------------------------
# Example Usage (Main Entry Point)
# -------------------------------
def main():
    parser = argparse.ArgumentParser(
        description="Run a headless Neon Snake game with an autopilot player."
    )
    parser.add_argument("--mode", type=str, default=os.getenv("SNAKE_MODE", GameMode.CLASSIC.value),
                        choices=[m.value for m in GameMode],
                        help="Game mode")
    parser.add_argument("--player", type=str, default=os.getenv("SNAKE_PLAYER", DEFAULT_PLAYER),
                        choices=AVAILABLE_PLAYERS,
                        help="Autopilot that plays the game")
    parser.add_argument("--max-frames", type=int,
                        default=int(os.getenv("SNAKE_MAX_FRAMES", DEFAULT_MAX_FRAMES)),
                        help="Maximum number of frames to simulate")
    parser.add_argument("--frame-ms", type=float,
                        default=float(os.getenv("SNAKE_FRAME_MS", DEFAULT_FRAME_MS)),
                        help="Simulated milliseconds per frame")
    parser.add_argument("--seed", type=int, default=None,
                        help="Random seed for a reproducible game")
    parser.add_argument("--show-board", action="store_true",
                        help="Print the board after every step")

    args = parser.parse_args()
    configure_logging()

    if args.max_frames <= 0:
        parser.error("--max-frames must be positive")
    if args.frame_ms <= 0:
        parser.error("--frame-ms must be positive")

    try:
        result = run_simulation(
            mode=args.mode,
            player_name=args.player,
            max_frames=args.max_frames,
            frame_ms=args.frame_ms,
            seed=args.seed,
            show_board=args.show_board,
        )
    except ValueError as e:
        parser.error(str(e))

    print("\nSimulation Result Summary:")
    print(json.dumps(result, indent=2))


if __name__ == "__main__":
    main()
