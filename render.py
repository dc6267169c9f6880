# render.py
# Plain-text drawing of a board, optionally with a solution on it

from __future__ import annotations

from typing import Sequence

from board import BoardLayout
from pieces import STANDARD_PIECES, Piece
from solver import NoSolution, SearchResult, Solution

FRAME_CHAR = "#"
DATE_CHAR = "•"
BLANK_CHAR = "-"


def render_text(
    board: BoardLayout,
    excluded: tuple[int, int],
    solution: Solution | None = None,
    pieces: Sequence[Piece] = STANDARD_PIECES,
) -> str:
    labels = {piece.name: piece.label for piece in pieces}
    cell_map = solution.cell_map() if solution is not None else {}

    lines = []
    for r in range(board.rows):
        row = []
        for c in range(board.cols):
            cell = board.cell_at(r, c)
            if cell is None:
                row.append(FRAME_CHAR)
            elif cell in excluded:
                row.append(DATE_CHAR)
            elif cell in cell_map:
                name = cell_map[cell].piece
                row.append(labels.get(name, name[0]))
            else:
                row.append(BLANK_CHAR)
        lines.append("".join(row))
    return "\n".join(lines)


def render_result(result: SearchResult, pieces: Sequence[Piece] = STANDARD_PIECES) -> str:
    if isinstance(result, NoSolution):
        return render_text(result.board, result.excluded, None, pieces)
    return render_text(result.board, result.excluded, result, pieces)
