import argparse
import concurrent.futures
import json
import logging
import os
from typing import Any, Dict, List, Optional

import numpy as np
from dotenv import load_dotenv

from domain.constants import GameMode
from main import DEFAULT_FRAME_MS, DEFAULT_MAX_FRAMES, configure_logging, run_simulation
from players import AVAILABLE_PLAYERS, DEFAULT_PLAYER

load_dotenv()
logger = logging.getLogger(__name__)


def summarize_scores(scores: List[int]) -> Dict[str, float]:
    """
    Aggregate statistics over a list of final scores.

    Returns an all-zero summary (count 0) for an empty list.
    """
    if not scores:
        return {"count": 0, "mean": 0.0, "std": 0.0, "min": 0.0, "max": 0.0, "median": 0.0, "p90": 0.0}

    values = np.asarray(scores, dtype=float)
    return {
        "count": int(values.size),
        "mean": float(values.mean()),
        "std": float(values.std()),
        "min": float(values.min()),
        "max": float(values.max()),
        "median": float(np.median(values)),
        "p90": float(np.percentile(values, 90)),
    }


def run_batch(
    num_games: int,
    mode: str = GameMode.CLASSIC.value,
    player_name: Optional[str] = None,
    max_frames: int = DEFAULT_MAX_FRAMES,
    frame_ms: float = DEFAULT_FRAME_MS,
    base_seed: Optional[int] = None,
    max_workers: Optional[int] = None,
) -> Dict[str, Any]:
    """
    Run ``num_games`` independent headless games in parallel.

    Each game gets its own engine and seed (``base_seed + index`` when a
    base seed is given), so a seeded batch is reproducible.

    Returns:
        Dict with the per-game results (sorted by seed order), the number of
        failed games and the score summary.
    """
    if num_games <= 0:
        raise ValueError("num_games must be positive")

    results: List[Optional[Dict[str, Any]]] = [None] * num_games
    failures = 0

    with concurrent.futures.ThreadPoolExecutor(max_workers=max_workers) as executor:
        futures = {}
        for index in range(num_games):
            seed = None if base_seed is None else base_seed + index
            future = executor.submit(
                run_simulation,
                mode=mode,
                player_name=player_name,
                max_frames=max_frames,
                frame_ms=frame_ms,
                seed=seed,
            )
            futures[future] = index

        for future in concurrent.futures.as_completed(futures):
            index = futures[future]
            try:
                result = future.result()
            except Exception as exc:
                failures += 1
                logger.error(f"Game {index + 1}/{num_games} raised: {exc}")
                continue
            results[index] = result
            logger.info(f"Completed game {index + 1}/{num_games}: score {result['score']}")

    completed = [r for r in results if r is not None]
    return {
        "games": completed,
        "failures": failures,
        "summary": summarize_scores([r["score"] for r in completed]),
    }


def run_batch_simulations():
    parser = argparse.ArgumentParser(
        description="Run a batch of headless Neon Snake games and summarize the scores."
    )
    parser.add_argument("--num-games", type=int, required=True,
                        help="Number of games to simulate.")
    parser.add_argument("--max-workers", type=int,
                        default=int(os.getenv("SNAKE_BATCH_WORKERS", os.cpu_count() or 1)),
                        help="Maximum number of parallel simulation workers (threads).")
    parser.add_argument("--base-seed", type=int, default=None,
                        help="Seed of the first game; game i uses base_seed + i.")

    # Game configuration arguments (mirroring main.py)
    parser.add_argument("--mode", type=str, default=os.getenv("SNAKE_MODE", GameMode.CLASSIC.value),
                        choices=[m.value for m in GameMode])
    parser.add_argument("--player", type=str, default=os.getenv("SNAKE_PLAYER", DEFAULT_PLAYER),
                        choices=AVAILABLE_PLAYERS)
    parser.add_argument("--max-frames", type=int,
                        default=int(os.getenv("SNAKE_MAX_FRAMES", DEFAULT_MAX_FRAMES)))
    parser.add_argument("--frame-ms", type=float,
                        default=float(os.getenv("SNAKE_FRAME_MS", DEFAULT_FRAME_MS)))
    parser.add_argument("--show-games", action="store_true",
                        help="Include every game result in the printed output.")

    args = parser.parse_args()
    configure_logging()

    print(f"Starting {args.num_games} {args.mode} games with up to {args.max_workers} workers...")
    try:
        batch = run_batch(
            num_games=args.num_games,
            mode=args.mode,
            player_name=args.player,
            max_frames=args.max_frames,
            frame_ms=args.frame_ms,
            base_seed=args.base_seed,
            max_workers=args.max_workers,
        )
    except ValueError as e:
        parser.error(str(e))

    print("\nAll batch simulations completed.")
    output = batch if args.show_games else {k: v for k, v in batch.items() if k != "games"}
    print(json.dumps(output, indent=2))


if __name__ == "__main__":
    run_batch_simulations()
