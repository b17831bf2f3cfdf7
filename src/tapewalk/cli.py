"""Command-line entry point: load a map, walk it, print the step count."""

from __future__ import annotations

import argparse
import logging
import os
import sys
from collections.abc import Sequence
from pathlib import Path

from funlog import log_calls
from rich import print as rprint
from rich.logging import RichHandler
from rich.markup import escape
from rich.table import Table

from tapewalk.core import (
    CycleRecord,
    MissingNodeError,
    NonTerminatingError,
    UnsupportedCycleStructureError,
    Walker,
    analyze_tokens,
    combine,
)
from tapewalk.parse import Puzzle, parse_puzzle

MAX_STEPS_ENV = "TAPEWALK_MAX_STEPS"

_FAILURES = (
    OSError,
    ValueError,
    MissingNodeError,
    NonTerminatingError,
    UnsupportedCycleStructureError,
)


def _default_max_steps() -> str | None:
    # argparse applies ``type=int`` to string defaults and reports bad values.
    raw = os.environ.get(MAX_STEPS_ENV, "").strip()
    return raw or None


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="tapewalk",
        description="Count tape-driven steps through a two-successor map.",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    common = argparse.ArgumentParser(add_help=False)
    common.add_argument("file", nargs="?", default="-", help="Map file, or '-' for stdin")
    common.add_argument(
        "--max-steps",
        type=int,
        default=_default_max_steps(),
        help=f"Abort a walk after this many steps (default: ${MAX_STEPS_ENV} or unbounded)",
    )
    common.add_argument("-v", "--verbose", action="store_true", help="Show per-token detail")

    steps = subparsers.add_parser(
        "steps", parents=[common], help="Steps for one token to reach a target node"
    )
    steps.add_argument("--start", default="AAA")
    steps.add_argument("--target", default="ZZZ")

    cycles = subparsers.add_parser(
        "cycles", parents=[common], help="Steps until every start token accepts at once"
    )
    cycles.add_argument("--start-suffix", default="A")
    cycles.add_argument("--accept-suffix", default="Z")
    return parser


def load_puzzle(path: str) -> Puzzle:
    text = sys.stdin.read() if path == "-" else Path(path).read_text()
    return parse_puzzle(text)


@log_calls(level="info", show_timing_only=True)
def solve_steps(puzzle: Puzzle, start: str, target: str, *, max_steps: int | None) -> int:
    walker = Walker(puzzle.graph, puzzle.tape, max_steps=max_steps)
    return walker.count_steps(start, target)


@log_calls(level="info", show_timing_only=True)
def solve_cycles(
    puzzle: Puzzle,
    start_suffix: str,
    accept_suffix: str,
    *,
    max_steps: int | None,
) -> list[CycleRecord[str]]:
    starts = sorted(node for node in puzzle.graph if node.endswith(start_suffix))
    if not starts:
        raise ValueError(f"No start nodes end with {start_suffix!r}")
    walker = Walker(puzzle.graph, puzzle.tape, max_steps=max_steps)
    return analyze_tokens(walker, starts, lambda node: node.endswith(accept_suffix))


def _print_records(records: list[CycleRecord[str]]) -> None:
    table = Table(title="Token cycles")
    table.add_column("Start")
    table.add_column("Accepting node")
    table.add_column("Cycle length", justify="right")
    for record in records:
        table.add_row(record.start, record.node, str(record.steps))
    rprint(table)


def main(argv: Sequence[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    if args.verbose:
        logging.basicConfig(
            level=logging.INFO, format="%(message)s", handlers=[RichHandler(show_path=False)]
        )

    try:
        puzzle = load_puzzle(args.file)
        if args.command == "steps":
            result = solve_steps(puzzle, args.start, args.target, max_steps=args.max_steps)
        else:
            records = solve_cycles(
                puzzle, args.start_suffix, args.accept_suffix, max_steps=args.max_steps
            )
            if args.verbose:
                _print_records(records)
            result = combine(record.steps for record in records)
    except _FAILURES as e:
        rprint(f"[bold red]Error: {escape(str(e))}[/bold red]")
        return 1

    rprint(result)
    return 0
