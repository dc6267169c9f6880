import pytest

from board import STANDARD_BOARD
from errors import PuzzleDefinitionError
from pieces import (
    STANDARD_PIECES,
    Piece,
    normalize,
    placements_of,
    validate_inventory,
    variants_of,
)

PIECES = {piece.name: piece for piece in STANDARD_PIECES}


def test_inventory_covers_all_but_two_cells():
    assert len(STANDARD_PIECES) == 8
    assert sum(piece.size for piece in STANDARD_PIECES) == STANDARD_BOARD.size - 2
    validate_inventory(STANDARD_PIECES, STANDARD_BOARD)


@pytest.mark.parametrize(
    "name, expected",
    [("C", 4), ("Gamma", 4), ("L", 8), ("Lamedh", 8), ("O", 2), ("P", 8), ("T", 8), ("Z", 4)],
)
def test_symmetric_pieces_have_fewer_variants(name, expected):
    assert len(variants_of(PIECES[name])) == expected


def test_variants_keep_size_and_are_normalized():
    for piece in STANDARD_PIECES:
        variants = variants_of(piece)
        assert 1 <= len(variants) <= 8
        assert len({v.cells for v in variants}) == len(variants)
        for idx, variant in enumerate(variants):
            assert variant.index == idx
            assert variant.piece == piece.name
            assert len(variant.cells) == piece.size
            assert min(r for r, _ in variant.cells) == 0
            assert min(c for _, c in variant.cells) == 0


def test_first_variant_is_the_canonical_shape():
    for piece in STANDARD_PIECES:
        assert variants_of(piece)[0].cells == normalize(piece.cells)


def test_variants_are_cached():
    piece = PIECES["P"]
    assert variants_of(piece) is variants_of(piece)


def test_square_has_a_single_variant():
    square = Piece("Q", "Q", ((0, 0), (0, 1), (1, 0), (1, 1)))
    assert len(variants_of(square)) == 1


def test_placements_stay_on_usable_cells():
    for piece in STANDARD_PIECES:
        for variant in variants_of(piece):
            for anchor, mask in placements_of(variant, STANDARD_BOARD):
                assert bin(mask).count("1") == piece.size
                assert mask & ~STANDARD_BOARD.full_mask == 0


def test_rectangle_placements_skip_the_frame():
    wide = variants_of(PIECES["O"])[0]
    assert (wide.height, wide.width) == (2, 3)
    found = list(placements_of(wide, STANDARD_BOARD))
    anchors = [anchor for anchor, _ in found]
    assert found[0] == ((0, 0), STANDARD_BOARD.mask_of([0, 1, 2, 6, 7, 8]))
    assert (0, 3) in anchors
    assert (0, 4) not in anchors  # would cover (0, 6)
    assert (5, 3) not in anchors  # would cover (6, 3)
    assert anchors == sorted(anchors)


def test_placements_are_restartable():
    variant = variants_of(PIECES["Z"])[1]
    assert list(placements_of(variant, STANDARD_BOARD)) == list(
        placements_of(variant, STANDARD_BOARD)
    )


def test_inventory_size_mismatch_fails_fast():
    with pytest.raises(PuzzleDefinitionError, match="cover 36 cells"):
        validate_inventory(STANDARD_PIECES[:-1], STANDARD_BOARD)


def test_duplicate_piece_names_fail_fast():
    pieces = STANDARD_PIECES[:-1] + (Piece("C", "C", PIECES["Z"].cells),)
    with pytest.raises(PuzzleDefinitionError, match="duplicate"):
        validate_inventory(pieces, STANDARD_BOARD)
