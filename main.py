"""
Merge Blocks Solver - Entry Point

Reads a level file, searches for the shortest solution and prints every
step as a box drawing.

Example:
    python main.py levels/two_steps.txt
    python main.py levels/two_steps.txt --images steps/  # Also save PNG snapshots
    python main.py levels/two_steps.txt --settle         # Drop blocks before solving
"""

import sys
import logging
import argparse
from typing import Any, Dict, List, Optional

from mergeblocks.settings import load_settings, save_settings
from mergeblocks.level import load_level
from mergeblocks.solver import (
    DEFAULT_STRATEGY,
    SolutionContext,
    create_strategy,
    strategy_descriptions,
)
from mergeblocks.display import format_solution, save_solution_images


logger = logging.getLogger(__name__)

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"


def configure_logging(level: str, log_file: Optional[str] = None) -> None:
    """
    Configure logging to stderr and optionally a file.

    Args:
        level: Level name (e.g. "INFO", "DEBUG")
        log_file: Optional path of a log file (overwritten each run)
    """
    handlers: List[logging.Handler] = [logging.StreamHandler()]  # stderr
    if log_file:
        handlers.append(logging.FileHandler(log_file, mode='w', encoding='utf-8'))

    logging.basicConfig(
        level=getattr(logging, str(level).upper(), logging.INFO),
        format=LOG_FORMAT,
        datefmt="%H:%M:%S",
        handlers=handlers,
        force=True,
    )


def parse_args(argv: Optional[List[str]] = None):
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        description="Merge Blocks Solver - Shortest solution for a block pushing puzzle"
    )
    parser.add_argument(
        "level",
        help="Level file ('#' wall, '1'-'9' colored block, anything else empty)"
    )
    parser.add_argument(
        "--settle", "-s",
        action="store_true",
        default=None,
        help="Let blocks fall and merge before solving (default: from config.json)"
    )
    parser.add_argument(
        "--images", "-i",
        metavar="DIR",
        help="Save a PNG snapshot of every step into DIR"
    )
    strategies = strategy_descriptions()
    parser.add_argument(
        "--strategy",
        choices=list(strategies),
        help="; ".join(f"{name}: {text}" for name, text in strategies.items())
        + f" (default: config.json strategy_name, else {DEFAULT_STRATEGY})"
    )
    parser.add_argument(
        "--debug", "-d",
        action="store_true",
        help="Enable debug logging"
    )
    parser.add_argument(
        "--save-config",
        action="store_true",
        help="Write the effective settings to config.json"
    )
    return parser.parse_args(argv)


def run(args, settings: Dict[str, Any]) -> int:
    """
    Solve the level named by the arguments.

    Args:
        args: Parsed command line arguments
        settings: Loaded settings

    Returns:
        Exit code
    """
    settle = settings["settle_on_load"] if args.settle is None else args.settle

    try:
        board = load_level(args.level, settle=settle)
    except OSError as e:
        logger.debug(f"Open failed: {e}")
        print(f"Failed to open input file ({args.level})!", file=sys.stderr)
        return 1

    if board is None:
        print("Failed to read level!", file=sys.stderr)
        return 1

    logger.info(
        f"Loaded {args.level}: {board.rows}x{board.cols}, {board.group_count} groups"
        + (" (settled)" if settle else "")
    )

    strategy = create_strategy(args.strategy or settings.get("strategy_name"))
    context = SolutionContext(
        board=board,
        progress_interval=int(settings["progress_interval"]),
        progress_callback=lambda states, message: logger.info(f"Searching: {message}"),
    )
    solution = strategy.solve(context)

    logger.info(
        f"{strategy.name}: {solution.metrics.states_explored} states in "
        f"{solution.metrics.computation_time_ms:.1f}ms"
    )

    sys.stdout.write(format_solution(solution))
    sys.stdout.flush()

    if args.images and solution.is_solved:
        save_solution_images(solution, args.images, int(settings["image_cell_size"]))

    return 0


def main(argv: Optional[List[str]] = None) -> int:
    """Initialize and run the Merge Blocks Solver."""
    args = parse_args(argv)
    settings = load_settings()

    level = "DEBUG" if args.debug else settings["log_level"]
    configure_logging(level, settings.get("log_file"))

    if args.save_config:
        save_settings(settings)

    return run(args, settings)


if __name__ == "__main__":
    sys.exit(main())
