import pytest

from kpkboard.bitbase import MAX_INDEX, KPKBitbase, index, probe
from kpkboard.bitboard import (
    FILE_A,
    FILE_C,
    FILE_D,
    FILE_E,
    FILE_H,
    RANK_1,
    RANK_2,
    RANK_4,
    RANK_5,
    RANK_6,
    RANK_7,
    RANK_8,
    Color,
    make_square,
)


def sq(f, r):
    return make_square(f, r)


@pytest.fixture(scope="module")
def bitbase():
    return KPKBitbase()


def test_index_covers_whole_range_without_collisions():
    seen = set()
    for stm in Color:
        for f in range(FILE_A, FILE_D + 1):
            for r in range(RANK_2, RANK_7 + 1):
                p = sq(f, r)
                for wk in range(64):
                    for bk in range(64):
                        seen.add(index(stm, bk, wk, p))
    assert seen == set(range(MAX_INDEX))


def test_index_fields_hold_inputs():
    wk, bk, p = sq(FILE_C, RANK_4), sq(FILE_H, RANK_8), sq(FILE_D, RANK_5)
    idx = index(Color.BLACK, bk, wk, p)
    assert idx & 0x3F == wk
    assert (idx >> 6) & 0x3F == bk
    assert (idx >> 12) & 1 == Color.BLACK
    assert (idx >> 13) & 0x3 == FILE_D


def test_index_pawn_rank_counts_down_from_seventh():
    assert index(Color.WHITE, 0, 0, sq(FILE_A, RANK_7)) == 0
    assert index(Color.WHITE, 0, 0, sq(FILE_A, RANK_2)) == 5 << 15


def test_unstoppable_pawn_on_seventh_wins(bitbase):
    assert bitbase.probe(sq(FILE_H, RANK_1), sq(FILE_A, RANK_7),
                         sq(FILE_H, RANK_8), Color.WHITE) is True


def test_rook_pawn_with_defender_in_corner_is_draw(bitbase):
    assert bitbase.probe(sq(FILE_E, RANK_1), sq(FILE_A, RANK_2),
                         sq(FILE_A, RANK_8), Color.WHITE) is False


@pytest.mark.parametrize("stm", list(Color))
def test_king_on_sixth_in_front_of_pawn_wins(bitbase, stm):
    assert bitbase.probe(sq(FILE_D, RANK_6), sq(FILE_D, RANK_5),
                         sq(FILE_D, RANK_8), stm) is True


@pytest.mark.parametrize("bk", [sq(FILE_E, RANK_5), sq(FILE_C, RANK_5), sq(FILE_D, RANK_5)])
def test_black_captures_undefended_pawn(bitbase, bk):
    assert not bitbase.probe(sq(FILE_A, RANK_1), sq(FILE_D, RANK_4), bk, Color.BLACK)


def test_invalid_positions_are_never_wins(bitbase):
    pawn = sq(FILE_A, RANK_2)
    for stm in Color:
        # adjacent kings
        assert not bitbase.probe(sq(FILE_D, RANK_4), pawn, sq(FILE_D, RANK_5), stm)
        # king standing on the pawn square
        assert not bitbase.probe(pawn, pawn, sq(FILE_H, RANK_8), stm)
        assert not bitbase.probe(sq(FILE_H, RANK_1), pawn, pawn, stm)


def test_pawn_on_wrong_half_rejected(bitbase):
    with pytest.raises(ValueError):
        bitbase.probe(sq(FILE_A, RANK_1), sq(FILE_E, RANK_4), sq(FILE_H, RANK_8), Color.WHITE)


def test_pawn_on_back_rank_rejected(bitbase):
    with pytest.raises(ValueError):
        bitbase.probe(sq(FILE_H, RANK_1), sq(FILE_A, RANK_1), sq(FILE_H, RANK_8), Color.WHITE)


def test_shared_probe_matches_instance(bitbase):
    positions = [
        (sq(FILE_H, RANK_1), sq(FILE_A, RANK_7), sq(FILE_H, RANK_8), Color.WHITE),
        (sq(FILE_E, RANK_1), sq(FILE_A, RANK_2), sq(FILE_A, RANK_8), Color.WHITE),
        (sq(FILE_D, RANK_6), sq(FILE_D, RANK_5), sq(FILE_D, RANK_8), Color.BLACK),
        (sq(FILE_A, RANK_1), sq(FILE_D, RANK_4), sq(FILE_E, RANK_5), Color.BLACK),
    ]
    assert [probe(*p) for p in positions] == [bitbase.probe(*p) for p in positions]