# board.py
# Board geometry, month/day coordinate maps, date -> cell resolution

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Iterable, Iterator, NamedTuple

from errors import InvalidDate, PuzzleDefinitionError

BOARD_ROWS = 7
BOARD_COLS = 7

# Month coordinates (1–12)
MONTH_COORDS: dict[int, tuple[int, int]] = {
    1: (0, 0),
    2: (0, 1),
    3: (0, 2),
    4: (0, 3),
    5: (0, 4),
    6: (0, 5),
    7: (1, 0),
    8: (1, 1),
    9: (1, 2),
    10: (1, 3),
    11: (1, 4),
    12: (1, 5),
}

# Day coordinates (1–31), seven per row starting under the months
DAY_COORDS: dict[int, tuple[int, int]] = {
    day: (2 + (day - 1) // 7, (day - 1) % 7) for day in range(1, 32)
}

# Cells of the bounding box that are part of the frame
ILLEGAL_CELLS: set[tuple[int, int]] = {
    (0, 6),
    (1, 6),
    (6, 3),
    (6, 4),
    (6, 5),
    (6, 6),
}


class LabelKind(Enum):
    MONTH = "month"
    DAY = "day"


class DateLabel(NamedTuple):
    kind: LabelKind
    value: int


@dataclass(frozen=True)
class BoardLayout:
    """Immutable description of the usable cells of a board.

    Cells are dense indices ``0..size-1``; ``positions[i]`` is the
    ``(row, col)`` of cell ``i`` and ``labels[i]`` its optional date label.
    """

    rows: int
    cols: int
    positions: tuple[tuple[int, int], ...]
    labels: tuple[DateLabel | None, ...]
    _by_position: dict[tuple[int, int], int] = field(
        init=False, repr=False, compare=False
    )
    _by_label: dict[DateLabel, int] = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        if len(self.positions) != len(self.labels):
            raise PuzzleDefinitionError(
                f"{len(self.positions)} positions but {len(self.labels)} labels"
            )

        by_position: dict[tuple[int, int], int] = {}
        for cell, (r, c) in enumerate(self.positions):
            if not (0 <= r < self.rows and 0 <= c < self.cols):
                raise PuzzleDefinitionError(f"cell {cell} at {(r, c)} is off the board")
            if (r, c) in by_position:
                raise PuzzleDefinitionError(f"two cells share position {(r, c)}")
            by_position[(r, c)] = cell

        by_label: dict[DateLabel, int] = {}
        for cell, label in enumerate(self.labels):
            if label is None:
                continue
            if label in by_label:
                raise PuzzleDefinitionError(
                    f"{label.kind.value} {label.value} appears on more than one cell"
                )
            by_label[label] = cell

        # Frozen dataclass: derived lookups are attached once here
        object.__setattr__(self, "_by_position", by_position)
        object.__setattr__(self, "_by_label", by_label)

    @property
    def size(self) -> int:
        return len(self.positions)

    @property
    def full_mask(self) -> int:
        return (1 << self.size) - 1

    def cell_at(self, row: int, col: int) -> int | None:
        return self._by_position.get((row, col))

    def position_of(self, cell: int) -> tuple[int, int]:
        return self.positions[cell]

    def label_of(self, cell: int) -> DateLabel | None:
        return self.labels[cell]

    def neighbours(self, cell: int) -> list[int]:
        """Orthogonally adjacent usable cells."""
        r, c = self.positions[cell]
        result = []
        for dr, dc in ((-1, 0), (0, -1), (0, 1), (1, 0)):
            other = self.cell_at(r + dr, c + dc)
            if other is not None:
                result.append(other)
        return result

    def mask_of(self, cells: Iterable[int]) -> int:
        mask = 0
        for cell in cells:
            mask |= 1 << cell
        return mask

    def cells_of(self, mask: int) -> Iterator[int]:
        while mask:
            low = mask & -mask
            yield low.bit_length() - 1
            mask ^= low

    def resolve(self, month: int, day: int) -> tuple[int, int]:
        """Map a month/day pair to the two cells that stay uncovered.

        Only the representable range is checked; whether the day exists in
        that month is up to the caller.
        """
        if not 1 <= month <= 12:
            raise InvalidDate(month, day, "month must be between 1 and 12")
        if not 1 <= day <= 31:
            raise InvalidDate(month, day, "day must be between 1 and 31")

        month_cell = self._by_label.get(DateLabel(LabelKind.MONTH, month))
        day_cell = self._by_label.get(DateLabel(LabelKind.DAY, day))
        if month_cell is None:
            raise InvalidDate(month, day, f"no cell for month {month}")
        if day_cell is None:
            raise InvalidDate(month, day, f"no cell for day {day}")
        return month_cell, day_cell


def build_board(
    months: dict[int, tuple[int, int]],
    days: dict[int, tuple[int, int]],
    illegal: set[tuple[int, int]],
    rows: int = BOARD_ROWS,
    cols: int = BOARD_COLS,
) -> BoardLayout:
    """Number every non-illegal cell of a ``rows`` x ``cols`` box row by row."""
    label_at: dict[tuple[int, int], DateLabel] = {}
    for value, coord in months.items():
        label_at[coord] = DateLabel(LabelKind.MONTH, value)
    for value, coord in days.items():
        if coord in label_at:
            raise PuzzleDefinitionError(f"day {value} collides with a month at {coord}")
        label_at[coord] = DateLabel(LabelKind.DAY, value)

    positions: list[tuple[int, int]] = []
    labels: list[DateLabel | None] = []
    for r in range(rows):
        for c in range(cols):
            if (r, c) in illegal:
                continue
            positions.append((r, c))
            labels.append(label_at.get((r, c)))

    stray = set(label_at) - set(positions)
    if stray:
        raise PuzzleDefinitionError(f"labels on unusable cells: {sorted(stray)}")

    return BoardLayout(rows, cols, tuple(positions), tuple(labels))


def validate_calendar_labels(board: BoardLayout) -> None:
    """Every month and every day must be resolvable on a calendar board."""
    present = {label for label in board.labels if label is not None}
    missing = [
        DateLabel(LabelKind.MONTH, m)
        for m in range(1, 13)
        if DateLabel(LabelKind.MONTH, m) not in present
    ] + [
        DateLabel(LabelKind.DAY, d)
        for d in range(1, 32)
        if DateLabel(LabelKind.DAY, d) not in present
    ]
    if missing:
        names = ", ".join(f"{label.kind.value} {label.value}" for label in missing)
        raise PuzzleDefinitionError(f"board is missing date cells: {names}")


STANDARD_BOARD = build_board(MONTH_COORDS, DAY_COORDS, ILLEGAL_CELLS)
validate_calendar_labels(STANDARD_BOARD)
