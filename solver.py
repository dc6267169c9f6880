# solver.py
# Combines everything; solves for a given date

from __future__ import annotations

import logging
from dataclasses import dataclass
from functools import lru_cache
from typing import Iterator, List, Sequence, Union

from board import STANDARD_BOARD, BoardLayout
from pieces import STANDARD_PIECES, Piece, validate_inventory
from placements import Placement, PlacementEngine, PlacementTable

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Solution:
    board: BoardLayout
    excluded: tuple[int, int]  # (month cell, day cell)
    placements: tuple[Placement, ...]

    def cell_map(self) -> dict[int, Placement]:
        """Board cell -> the placement covering it."""
        return {cell: p for p in self.placements for cell in p.cells}

    def covered_mask(self) -> int:
        mask = 0
        for placement in self.placements:
            mask |= placement.mask
        return mask

    def grid(self) -> list[list[str | None]]:
        """Piece name per (row, col); None where nothing is placed."""
        grid: list[list[str | None]] = [
            [None] * self.board.cols for _ in range(self.board.rows)
        ]
        for cell, placement in self.cell_map().items():
            r, c = self.board.position_of(cell)
            grid[r][c] = placement.piece
        return grid


@dataclass(frozen=True)
class NoSolution:
    """The search was exhausted without finding a tiling."""

    board: BoardLayout
    excluded: tuple[int, int]

    def __bool__(self) -> bool:
        return False


SearchResult = Union[Solution, NoSolution]


@dataclass
class _SearchStats:
    nodes: int = 0
    solutions: int = 0


class Solver:
    """Backtracking search over a fixed board and piece inventory.

    The board and pieces are validated and the placement table is built once;
    each search owns its own occupancy mask, so a solver can serve any number
    of searches.
    """

    def __init__(
        self,
        board: BoardLayout = STANDARD_BOARD,
        pieces: Sequence[Piece] = STANDARD_PIECES,
    ):
        validate_inventory(pieces, board)
        self.board = board
        self.pieces = tuple(pieces)
        self.table = PlacementTable.build(board, self.pieces)
        logger.debug(
            "solver ready: %d cells, %d pieces, %d placements",
            board.size,
            len(self.pieces),
            len(self.table),
        )

    def _check_excluded(self, excluded: tuple[int, int]) -> tuple[int, int]:
        month_cell, day_cell = excluded
        for cell in (month_cell, day_cell):
            if not 0 <= cell < self.board.size:
                raise ValueError(f"cell {cell} is not on the board")
        if month_cell == day_cell:
            raise ValueError(f"excluded cells must differ, got {month_cell} twice")
        return month_cell, day_cell

    def _search(
        self, excluded: tuple[int, int], stats: _SearchStats
    ) -> Iterator[tuple[Placement, ...]]:
        month_cell, day_cell = self._check_excluded(excluded)
        engine = PlacementEngine(self.board.mask_of((month_cell, day_cell)))
        full = self.board.full_mask
        names = [piece.name for piece in self.pieces]
        placed: set[str] = set()
        chosen: List[Placement] = []
        occupied = engine.excluded

        def search():
            nonlocal occupied
            stats.nodes += 1
            if len(chosen) == len(names):
                stats.solutions += 1
                yield tuple(chosen)
                return

            free = full & ~occupied
            if not free:
                return
            # Lowest uncovered cell: every candidate must cover it.
            cell = (free & -free).bit_length() - 1

            for name in names:
                if name in placed:
                    continue
                for placement in self.table.starting_at(name, cell):
                    if not engine.can_place(occupied, placement.mask):
                        continue
                    occupied = engine.apply(occupied, placement.mask)
                    placed.add(name)
                    chosen.append(placement)

                    yield from search()

                    chosen.pop()
                    placed.discard(name)
                    occupied = engine.remove(occupied, placement.mask)

        yield from search()

    def iter_solutions(self, excluded: tuple[int, int]) -> Iterator[Solution]:
        """Every tiling leaving exactly ``excluded`` uncovered, in search order."""
        stats = _SearchStats()
        for placements in self._search(excluded, stats):
            yield Solution(self.board, tuple(excluded), placements)
        logger.debug(
            "exhausted search for %s: %d nodes, %d solutions",
            excluded,
            stats.nodes,
            stats.solutions,
        )

    def solve_cells(self, excluded: tuple[int, int]) -> SearchResult:
        stats = _SearchStats()
        search = self._search(excluded, stats)
        try:
            placements = next(search, None)
        finally:
            search.close()

        if placements is None:
            logger.debug("no solution for %s after %d nodes", excluded, stats.nodes)
            return NoSolution(self.board, tuple(excluded))
        logger.debug("solved %s after %d nodes", excluded, stats.nodes)
        return Solution(self.board, tuple(excluded), placements)

    def solve(self, month: int, day: int) -> SearchResult:
        """First solution for the date; InvalidDate is raised before searching."""
        return self.solve_cells(self.board.resolve(month, day))

    def solve_all(self, month: int, day: int) -> list[Solution]:
        return list(self.iter_solutions(self.board.resolve(month, day)))

    def count_solutions(self, month: int, day: int) -> int:
        return sum(1 for _ in self._search(self.board.resolve(month, day), _SearchStats()))


@lru_cache(maxsize=1)
def default_solver() -> Solver:
    return Solver()


def solve_for_date(month: int, day: int) -> SearchResult:
    return default_solver().solve(month, day)


def all_solutions_for_date(month: int, day: int) -> list[Solution]:
    return default_solver().solve_all(month, day)
