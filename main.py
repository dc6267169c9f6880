# main.py
# Command line entry point: pick a date, solve it, print (or show) the board

from __future__ import annotations

import argparse
import logging
import sys
from datetime import date
from typing import List, Optional

from errors import InvalidDate
from render import render_result
from solver import NoSolution, default_solver

EXIT_SOLVED = 0
EXIT_BAD_INPUT = 1
EXIT_NO_SOLUTION = 2

logger = logging.getLogger("main")


def parse_date(text: str) -> date:
    """Parse ``YYYY-MM-DD``; the date has to exist in the calendar."""
    return date.fromisoformat(text)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Solve the calendar puzzle for a date."
    )
    parser.add_argument(
        "-d", "--date",
        default=None,
        help="date to solve, formatted like 2020-03-13 (default: today)",
        metavar="DATE",
    )
    parser.add_argument(
        "-a", "--all",
        action="store_true",
        dest="find_all",
        help="print every solution instead of the first one",
    )
    parser.add_argument(
        "-g", "--gui",
        action="store_true",
        help="show the solution(s) in a window",
    )
    parser.add_argument(
        "-ll", "--log-level",
        default="WARNING",
        choices=["CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG"],
        help="logging output level (default: %(default)s)",
        dest="log_level",
    )
    return parser


def setup_logging(level: str) -> None:
    logging.basicConfig(
        format="{asctime} [{levelname:5}] {name} - {message}",
        datefmt="%H:%M:%S",
        style="{",
        level=getattr(logging, level, logging.WARNING),
        force=True,
    )


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    setup_logging(args.log_level)

    if args.date is None:
        target = date.today()
    else:
        try:
            target = parse_date(args.date)
        except ValueError as exc:
            print(f"cannot parse `{args.date}` as a date because {exc}", file=sys.stderr)
            return EXIT_BAD_INPUT
    logger.info("Solving for %s", target.isoformat())

    solver = default_solver()
    try:
        excluded = solver.board.resolve(target.month, target.day)
    except InvalidDate as exc:
        print(exc, file=sys.stderr)
        return EXIT_BAD_INPUT

    if args.find_all:
        solutions = list(solver.iter_solutions(excluded))
        for idx, solution in enumerate(solutions, start=1):
            print(f"Solution {idx}:")
            print(render_result(solution))
            print()
        print(f"{len(solutions)} solution(s) for {target.isoformat()}")
    else:
        result = solver.solve_cells(excluded)
        solutions = [] if isinstance(result, NoSolution) else [result]
        print(render_result(result))

    if args.gui:
        from gui import run_viewer

        run_viewer(solutions, solver.board, excluded, target.month, target.day)

    if not solutions:
        print(f"No solution for {target.isoformat()}", file=sys.stderr)
        return EXIT_NO_SOLUTION
    return EXIT_SOLVED


if __name__ == "__main__":
    sys.exit(main())
