# pieces.py
# Piece definitions + rotations/flips + placements on a board

from __future__ import annotations

from dataclasses import dataclass
from functools import lru_cache
from typing import Iterable, Iterator, Sequence

from board import BoardLayout
from errors import PuzzleDefinitionError


@dataclass(frozen=True)
class Piece:
    name: str
    label: str  # single character used when drawing the board
    cells: tuple[tuple[int, int], ...]  # (row, col) offsets, canonical orientation

    @property
    def size(self) -> int:
        return len(self.cells)


@dataclass(frozen=True)
class Variant:
    piece: str
    index: int
    cells: tuple[tuple[int, int], ...]  # normalized, sorted

    @property
    def height(self) -> int:
        return max(r for r, _ in self.cells) + 1

    @property
    def width(self) -> int:
        return max(c for _, c in self.cells) + 1


# Canonical piece shapes. Names loosely follow the letters they look like.
STANDARD_PIECES: tuple[Piece, ...] = (
    # •••
    # •-•
    Piece("C", "C", ((0, 0), (0, 1), (0, 2), (1, 0), (1, 2))),
    # •••
    # •--
    # •--
    Piece("Gamma", "Γ", ((0, 0), (0, 1), (0, 2), (1, 0), (2, 0))),
    # •-
    # •-
    # •-
    # ••
    Piece("L", "L", ((0, 0), (1, 0), (2, 0), (3, 0), (3, 1))),
    # •-
    # •-
    # ••
    # -•
    Piece("Lamedh", "ל", ((0, 0), (1, 0), (2, 0), (2, 1), (3, 1))),
    # •••
    # •••
    Piece("O", "O", ((0, 0), (0, 1), (0, 2), (1, 0), (1, 1), (1, 2))),
    # •••
    # ••-
    Piece("P", "P", ((0, 0), (0, 1), (0, 2), (1, 0), (1, 1))),
    # •-
    # •-
    # ••
    # •-
    Piece("T", "T", ((0, 0), (1, 0), (2, 0), (2, 1), (3, 0))),
    # ••-
    # -•-
    # -••
    Piece("Z", "Z", ((0, 0), (0, 1), (1, 1), (2, 1), (2, 2))),
)


def normalize(shape: Iterable[tuple[int, int]]) -> tuple[tuple[int, int], ...]:
    """Shift a shape flush to (0, 0) and sort its cells."""
    shape = list(shape)
    min_r = min(r for r, _ in shape)
    min_c = min(c for _, c in shape)
    return tuple(sorted((r - min_r, c - min_c) for r, c in shape))


def rotate90(shape: Iterable[tuple[int, int]]) -> set[tuple[int, int]]:
    # (r, c) -> (c, -r)
    return {(c, -r) for r, c in shape}


def flip_horizontal(shape: Iterable[tuple[int, int]]) -> set[tuple[int, int]]:
    # (r, c) -> (r, -c)
    return {(r, -c) for r, c in shape}


@lru_cache(maxsize=None)
def variants_of(piece: Piece) -> tuple[Variant, ...]:
    """All unique rotations + horizontal flip orientations, normalized to (0,0)."""
    transforms = [set(piece.cells)]
    for _ in range(3):
        transforms.append(rotate90(transforms[-1]))

    # Flips (flip base shape, then rotate)
    transforms.append(flip_horizontal(piece.cells))
    for _ in range(3):
        transforms.append(rotate90(transforms[-1]))

    seen: set[tuple[tuple[int, int], ...]] = set()
    result: list[Variant] = []
    for shape in transforms:
        norm = normalize(shape)
        if norm not in seen:
            seen.add(norm)
            result.append(Variant(piece.name, len(result), norm))
    return tuple(result)


def placements_of(
    variant: Variant, board: BoardLayout
) -> Iterator[tuple[tuple[int, int], int]]:
    """Yield ``(anchor, mask)`` for every anchor where the variant fits.

    Anchors are the top-left of the variant's bounding box, visited row by
    row. An anchor is skipped if any covered cell is unusable.
    """
    for dr in range(board.rows - variant.height + 1):
        for dc in range(board.cols - variant.width + 1):
            mask = 0
            for r, c in variant.cells:
                cell = board.cell_at(r + dr, c + dc)
                if cell is None:
                    break
                mask |= 1 << cell
            else:
                yield (dr, dc), mask


def validate_inventory(pieces: Sequence[Piece], board: BoardLayout) -> None:
    """Piece sizes must add up to every usable cell but the two date cells."""
    names = [piece.name for piece in pieces]
    if len(set(names)) != len(names):
        raise PuzzleDefinitionError(f"duplicate piece names in {names}")

    total = sum(piece.size for piece in pieces)
    expected = board.size - 2
    if total != expected:
        raise PuzzleDefinitionError(
            f"pieces cover {total} cells but the board leaves {expected} to cover"
        )
