import pytest

from board import (
    STANDARD_BOARD,
    BoardLayout,
    DateLabel,
    LabelKind,
    build_board,
    validate_calendar_labels,
)
from errors import InvalidDate, PuzzleDefinitionError


def test_standard_board_has_43_dense_cells():
    assert STANDARD_BOARD.size == 43
    assert STANDARD_BOARD.full_mask == (1 << 43) - 1
    for cell, (r, c) in enumerate(STANDARD_BOARD.positions):
        assert STANDARD_BOARD.cell_at(r, c) == cell


def test_frame_cells_are_not_usable():
    for r, c in [(0, 6), (1, 6), (6, 3), (6, 4), (6, 5), (6, 6)]:
        assert STANDARD_BOARD.cell_at(r, c) is None
    assert STANDARD_BOARD.cell_at(7, 0) is None


def test_resolve_corners_of_the_calendar():
    assert STANDARD_BOARD.resolve(1, 1) == (0, 12)
    assert STANDARD_BOARD.resolve(12, 31) == (11, 42)
    assert STANDARD_BOARD.position_of(42) == (6, 2)


def test_resolve_returns_two_distinct_labelled_cells_for_every_pair():
    for month in range(1, 13):
        for day in range(1, 32):
            month_cell, day_cell = STANDARD_BOARD.resolve(month, day)
            assert month_cell != day_cell
            assert STANDARD_BOARD.label_of(month_cell) == DateLabel(LabelKind.MONTH, month)
            assert STANDARD_BOARD.label_of(day_cell) == DateLabel(LabelKind.DAY, day)


@pytest.mark.parametrize("month, day", [(0, 1), (13, 1), (1, 0), (1, 32), (-3, 40)])
def test_resolve_rejects_out_of_range(month, day):
    with pytest.raises(InvalidDate) as excinfo:
        STANDARD_BOARD.resolve(month, day)
    assert isinstance(excinfo.value, ValueError)
    assert excinfo.value.month == month
    assert excinfo.value.day == day


def test_resolve_only_checks_range_not_calendar():
    # February 31st does not exist, but the board can still show it.
    month_cell, day_cell = STANDARD_BOARD.resolve(2, 31)
    assert STANDARD_BOARD.position_of(month_cell) == (0, 1)
    assert STANDARD_BOARD.position_of(day_cell) == (6, 2)


def test_neighbours_are_orthogonal_usable_cells():
    assert STANDARD_BOARD.neighbours(0) == [1, 6]
    # (6, 2) has (5, 2) above and (6, 1) left; (6, 3) is frame
    assert STANDARD_BOARD.neighbours(42) == [STANDARD_BOARD.cell_at(5, 2), 41]


def test_mask_and_cells_round_trip():
    cells = [0, 5, 17, 42]
    mask = STANDARD_BOARD.mask_of(cells)
    assert list(STANDARD_BOARD.cells_of(mask)) == cells


def test_duplicate_positions_fail_fast():
    with pytest.raises(PuzzleDefinitionError):
        BoardLayout(2, 2, ((0, 0), (0, 0)), (None, None))


def test_duplicate_labels_fail_fast():
    label = DateLabel(LabelKind.DAY, 1)
    with pytest.raises(PuzzleDefinitionError):
        BoardLayout(1, 2, ((0, 0), (0, 1)), (label, label))


def test_label_on_frame_cell_fails_fast():
    with pytest.raises(PuzzleDefinitionError):
        build_board({1: (0, 0)}, {1: (0, 1)}, {(0, 1)}, rows=1, cols=2)


def test_missing_calendar_label_is_reported():
    board = build_board({1: (0, 0)}, {1: (0, 1)}, set(), rows=1, cols=3)
    with pytest.raises(PuzzleDefinitionError, match="month 2"):
        validate_calendar_labels(board)


def test_small_board_resolves_only_what_it_has():
    board = build_board({1: (0, 0)}, {1: (0, 1)}, set(), rows=2, cols=3)
    assert board.resolve(1, 1) == (0, 1)
    with pytest.raises(InvalidDate, match="no cell for month 2"):
        board.resolve(2, 1)
