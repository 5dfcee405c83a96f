"""
CLI entry point for league standings.

Parses arguments, reads a results payload, and prints the standings.
"""

import argparse
import sys
from argparse import Namespace
from pathlib import Path
from typing import TypedDict

from prettytable import PrettyTable

from .codec.json_codec import decode_results, encode_standings, Err
from .exceptions import ConfigurationError
from .logging_config import setup_logging, get_logger
from .models import ScoringRule, Standings
from .rankers.points_ranker import PointsRanker
from .results_table import render_match_grid


class CLIArgs(TypedDict):
    """Typed representation of parsed CLI arguments."""
    results: str
    win_points: int
    draw_points: int
    loss_points: int
    json: bool
    grid: bool
    strict: bool
    debug: bool
    log_level: str


def parse_args(argv: list[str] | None = None) -> Namespace:
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        description="League Standings - points table from pairwise match results"
    )

    _ = parser.add_argument(
        "results",
        help="Path to results JSON file, or - to read from stdin"
    )

    # Scoring rule
    _ = parser.add_argument(
        "--win-points",
        type=int,
        default=3,
        help="Points for a win (default: 3)"
    )
    _ = parser.add_argument(
        "--draw-points",
        type=int,
        default=1,
        help="Points for a draw (default: 1)"
    )
    _ = parser.add_argument(
        "--loss-points",
        type=int,
        default=0,
        help="Points for a loss (default: 0)"
    )

    # Output
    _ = parser.add_argument(
        "--json",
        action="store_true",
        help="Print standings as JSON instead of a table"
    )
    _ = parser.add_argument(
        "--grid",
        action="store_true",
        help="Print the match cross-table before the standings"
    )
    _ = parser.add_argument(
        "--strict",
        action="store_true",
        help="Exit with an error on unparseable input instead of printing empty standings"
    )
    _ = parser.add_argument(
        "--debug",
        action="store_true",
        help="Enable debug logging"
    )
    _ = parser.add_argument(
        "--log-level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        default="WARNING",
        help="Set logging level (default: WARNING)"
    )

    return parser.parse_args(argv)


def args_to_typed(ns: Namespace) -> CLIArgs:
    """Convert argparse Namespace to typed CLIArgs."""
    return CLIArgs(
        results=ns.results,
        win_points=ns.win_points,
        draw_points=ns.draw_points,
        loss_points=ns.loss_points,
        json=ns.json,
        grid=ns.grid,
        strict=ns.strict,
        debug=ns.debug,
        log_level=ns.log_level,
    )


def read_payload(source: str) -> str:
    """Read the results payload from a file path or stdin."""
    if source == "-":
        return sys.stdin.read()

    path = Path(source)
    if not path.is_file():
        raise ConfigurationError(f"results file does not exist: {path}")
    return path.read_text(encoding="utf-8")


def render_table(standings: Standings) -> str:
    """Render standings as a text table."""
    table = PrettyTable()
    table.field_names = ["Rank", "Participant", "Points"]
    table.align["Rank"] = "r"
    table.align["Participant"] = "l"
    table.align["Points"] = "r"

    for rank, entry in enumerate(standings, 1):
        table.add_row([rank, entry.participant_id, entry.total_points])

    return table.get_string()


def main(argv: list[str] | None = None) -> None:
    """Main CLI entry point."""
    args = args_to_typed(parse_args(argv))

    setup_logging(level=args["log_level"], debug=args["debug"])
    logger = get_logger("main")

    try:
        rule = ScoringRule(
            win_points=args["win_points"],
            draw_points=args["draw_points"],
            loss_points=args["loss_points"],
        )
        payload = read_payload(args["results"])
    except ConfigurationError as e:
        logger.error(str(e))
        print(f"Error: {e}")
        sys.exit(1)

    decoded = decode_results(payload)
    if isinstance(decoded, Err):
        if args["strict"]:
            logger.error(f"Failed to parse results: {decoded.reason}")
            print(f"Error: {decoded.reason}")
            sys.exit(1)
        logger.warning(f"Failed to parse results: {decoded.reason}")
        standings: Standings = []
    else:
        logger.info(f"Loaded results for {len(decoded.table)} participants")
        standings = PointsRanker(rule).compute_standings(decoded.table)

    if args["grid"] and not isinstance(decoded, Err):
        print(render_match_grid(decoded.table))

    if args["json"]:
        print(encode_standings(standings))
    else:
        print(render_table(standings))


if __name__ == "__main__":
    main()
