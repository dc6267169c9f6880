# placements.py
# Bitmask occupancy checks + precomputed placements of every piece

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Sequence

from board import BoardLayout
from pieces import Piece, placements_of, variants_of

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Placement:
    piece: str
    variant: int
    anchor: tuple[int, int]  # board (row, col) of the variant's top-left corner
    mask: int
    cells: tuple[int, ...]  # board cells covered by this placement


@dataclass(frozen=True)
class PlacementEngine:
    """Occupancy tests for one search; ``excluded`` holds the date cells."""

    excluded: int

    def can_place(self, occupied: int, candidate: int) -> bool:
        return not (occupied & candidate) and not (self.excluded & candidate)

    @staticmethod
    def apply(occupied: int, candidate: int) -> int:
        return occupied | candidate

    @staticmethod
    def remove(occupied: int, candidate: int) -> int:
        return occupied & ~candidate


class PlacementTable:
    """Every placement of every piece, indexed by its lowest covered cell.

    The solver always fills the lowest uncovered cell; since every lower cell
    is already covered, only placements whose lowest cell is that cell can fit.
    """

    def __init__(
        self,
        board: BoardLayout,
        by_piece: dict[str, list[Placement]],
    ):
        self.board = board
        self.by_piece = by_piece
        self.by_lowest_cell: dict[str, list[list[Placement]]] = {}
        for name, placements in by_piece.items():
            buckets: list[list[Placement]] = [[] for _ in range(board.size)]
            for placement in placements:
                buckets[placement.cells[0]].append(placement)
            self.by_lowest_cell[name] = buckets

    @classmethod
    def build(cls, board: BoardLayout, pieces: Sequence[Piece]) -> "PlacementTable":
        by_piece: dict[str, list[Placement]] = {}
        for piece in pieces:
            placements: list[Placement] = []
            for variant in variants_of(piece):
                for anchor, mask in placements_of(variant, board):
                    placements.append(
                        Placement(
                            piece=piece.name,
                            variant=variant.index,
                            anchor=anchor,
                            mask=mask,
                            cells=tuple(board.cells_of(mask)),
                        )
                    )
            by_piece[piece.name] = placements
            logger.debug(
                "piece %s: %d variants, %d placements",
                piece.name,
                len(variants_of(piece)),
                len(placements),
            )
        return cls(board, by_piece)

    def starting_at(self, piece: str, cell: int) -> list[Placement]:
        return self.by_lowest_cell[piece][cell]

    def __len__(self) -> int:
        return sum(len(p) for p in self.by_piece.values())
