"""
Crucible - Entry Point

Reads a digit grid and reports the minimal cost from the top-left to the
bottom-right cell under each requested set of movement constraints.

Example:
    python main.py input.txt
    python main.py input.txt --preset crucible
    python main.py input.txt --max-run 5 --min-run 2 --debug
"""

import sys
import logging
import argparse
from pathlib import Path
from typing import List, Optional

from crucible.runner import load_grid, run_searches
from crucible.search import (
    MovementConstraints,
    SearchError,
    get_default_strategy_name,
    get_preset,
    get_preset_names,
    get_strategy_info,
    get_strategy_names,
)
from crucible.settings import SETTINGS_FILE, load_settings


logger = logging.getLogger(__name__)


def setup_logging(level: int) -> None:
    """Configure logging - output to both console and file."""
    logging.basicConfig(
        level=level,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%H:%M:%S",
        handlers=[
            logging.StreamHandler(),  # Console output
            logging.FileHandler("crucible.log", mode='w', encoding='utf-8')  # File output
        ]
    )


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Minimal-cost grid routing with run-length limits"
    )
    parser.add_argument("input", type=Path, nargs="?", help="Text file of digit rows")
    parser.add_argument(
        "--preset",
        action="append",
        choices=get_preset_names(),
        help="Constraint preset to run (repeatable, default from settings)"
    )
    parser.add_argument("--max-run", type=int, help="Custom maximum straight run")
    parser.add_argument("--min-run", type=int, help="Custom minimum straight run (default 1)")
    parser.add_argument(
        "--strategy",
        choices=get_strategy_names(),
        help="Search strategy (default from settings, else the registry default)"
    )
    parser.add_argument(
        "--list-strategies",
        action="store_true",
        help="Print the available strategies and exit"
    )
    parser.add_argument("--parallel", action="store_true", help="Run searches on worker threads")
    parser.add_argument("--config", type=Path, default=SETTINGS_FILE, help="Settings JSON file")
    parser.add_argument("--debug", action="store_true", help="Enable debug logging")
    return parser


def resolve_constraints(args: argparse.Namespace, settings: dict) -> List[MovementConstraints]:
    """
    Work out which constraint sets to search under.

    Explicit --preset and --max-run/--min-run flags win; settings presets
    are used only when neither is given.
    """
    constraints = [get_preset(name) for name in (args.preset or [])]
    if args.max_run is not None:
        min_run = args.min_run if args.min_run is not None else 1
        constraints.append(MovementConstraints(max_run=args.max_run, min_run=min_run))
    if not constraints:
        constraints = [get_preset(name) for name in settings["presets"]]
    return constraints


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.list_strategies:
        for info in get_strategy_info():
            print(f"{info['name']}: {info['description']}")
        return 0

    if args.input is None:
        parser.error("the following arguments are required: input")
    if args.min_run is not None and args.max_run is None:
        parser.error("--min-run requires --max-run")

    # Logging first so settings problems land in the configured handlers
    setup_logging(logging.DEBUG if args.debug else logging.INFO)
    settings = load_settings(args.config)

    # Effective log level: CLI flag overrides saved setting
    if not args.debug:
        level = getattr(logging, str(settings["log_level"]).upper(), logging.INFO)
        logging.getLogger().setLevel(level)

    strategy_name = (
        args.strategy or settings["strategy_name"] or get_default_strategy_name()
    )
    parallel = args.parallel or bool(settings["parallel"])

    try:
        constraints = resolve_constraints(args, settings)
        grid = load_grid(args.input)
        results = run_searches(grid, constraints, strategy_name, parallel=parallel)
    except FileNotFoundError as e:
        logger.error(f"Input not found: {e}")
        return 2
    except (SearchError, ValueError) as e:
        logger.error(f"{type(e).__name__}: {e}")
        return 1

    for result in results.values():
        print(result.describe())
    return 0


if __name__ == "__main__":
    sys.exit(main())
