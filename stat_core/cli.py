"""Command-line front end: roll one set of ability scores or average many."""

from __future__ import annotations

import argparse
from typing import Optional, Sequence

from .api import compute_averages, roll_outcome, strategy_names
from .strategy import Strategy


def positive_int(raw: str) -> int:
    """argparse type accepting integers greater than zero."""

    try:
        value = int(raw)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(f"expected an integer, got '{raw}'") from exc
    if value < 1:
        raise argparse.ArgumentTypeError(f"expected a positive integer, got {value}")
    return value


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="roll-stats",
        description="Roll six ability scores, or average them over many trials.",
    )
    parser.add_argument(
        "average",
        nargs="?",
        type=positive_int,
        metavar="AVERAGE",
        help="Print average results of the selected strategy over AVERAGE trials.",
    )
    parser.add_argument(
        "--strategy",
        "-s",
        choices=strategy_names(),
        default=Strategy.TRADITIONAL.value,
        help="Rolling strategy (default: traditional).",
    )
    parser.add_argument(
        "--seed",
        type=int,
        default=None,
        help="Seed for a reproducible run (default: fresh entropy).",
    )
    parser.add_argument(
        "--list-strategies",
        action="store_true",
        help="List the available strategies and exit.",
    )
    return parser


def main_from_parsed(args: argparse.Namespace) -> str:
    """Run the selected command and return the line to print."""

    if args.list_strategies:
        return "\n".join(f"{member.value} - {member.description}" for member in Strategy)
    if args.average is None:
        return str(roll_outcome(args.strategy, seed=args.seed))
    result = compute_averages(args.strategy, args.average, seed=args.seed)
    return result.format_means()


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = build_parser()
    opts = parser.parse_args(argv)
    try:
        output = main_from_parsed(opts)
    except ValueError as exc:
        parser.error(str(exc))
    print(output)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
