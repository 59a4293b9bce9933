"""King and pawn versus king endgame table.

Every position with a white king, a white pawn on files a-d and a black
king is classified by retrograde iteration. A position is a win when
white can force promotion, otherwise it is treated as a draw. Positions
with the pawn on files e-h must be mirrored by the caller before probing.
"""

from __future__ import annotations

from enum import IntEnum
from functools import lru_cache

from .bitboard import (
    FILE_D,
    RANK_2,
    RANK_7,
    Color,
    PieceType,
    distance,
    file_of,
    is_ok,
    iter_squares,
    make_square,
    rank_of,
    tables,
)

# side to move * pawn squares * white king squares * black king squares
MAX_INDEX = 2 * 24 * 64 * 64

_NORTH = 8
_STM_BIT = 1 << 12
_PAWN_FIELD_MASK = ~0x1FFF
_PAWN_RANK_UNIT = 1 << 15


class Result(IntEnum):
    INVALID = 0
    UNKNOWN = 1
    DRAW = 2
    WIN = 4


def index(stm: int, bksq: int, wksq: int, psq: int) -> int:
    """Table index of a position.

    Bits 0-5 hold the white king square, bits 6-11 the black king square,
    bit 12 the side to move, bits 13-14 the pawn file (a-d) and bits 15-17
    the distance of the pawn rank from the seventh rank.
    """
    return (
        int(wksq)
        | (int(bksq) << 6)
        | (int(stm) << 12)
        | (file_of(psq) << 13)
        | ((RANK_7 - rank_of(psq)) << 15)
    )


def _pawn_square(idx: int) -> int:
    return make_square((idx >> 13) & 0x3, RANK_7 - ((idx >> 15) & 0x7))


class KPKBitbase:
    """Fully computed KP vs K table of decisive (winning) positions."""

    def __init__(self) -> None:
        self._results = self._build()

    @staticmethod
    def _build() -> bytearray:
        bb = tables()
        king_att = [bb.pseudo_attacks(PieceType.KING, s) for s in range(64)]
        king_moves = [tuple(iter_squares(a)) for a in king_att]
        pawn_att = [bb.pawn_attacks(Color.WHITE, s) for s in range(64)]

        res = bytearray(MAX_INDEX)
        pending: list[int] = []

        # Known wins, draws and invalid positions.
        for idx in range(MAX_INDEX):
            wk = idx & 0x3F
            bk = (idx >> 6) & 0x3F
            white_to_move = not (idx & _STM_BIT)
            psq = _pawn_square(idx)
            push = psq + _NORTH

            if (distance(wk, bk) <= 1 or wk == psq or bk == psq
                    or (white_to_move and pawn_att[psq] & (1 << bk))):
                result = Result.INVALID
            elif (white_to_move and rank_of(psq) == RANK_7 and wk != push
                  and (distance(bk, push) > 1 or distance(wk, push) == 1)):
                result = Result.WIN
            elif (not white_to_move
                  and (not (king_att[bk] & ~(king_att[wk] | pawn_att[psq]))
                       or king_att[bk] & ~king_att[wk] & (1 << psq))):
                result = Result.DRAW
            else:
                result = Result.UNKNOWN
                pending.append(idx)
            res[idx] = result

        def classify(idx: int) -> int:
            wk = idx & 0x3F
            bk = (idx >> 6) & 0x3F
            pawn_bits = idx & _PAWN_FIELD_MASK
            r = 0
            if not idx & _STM_BIT:
                base = (bk << 6) | _STM_BIT | pawn_bits
                for s in king_moves[wk]:
                    r |= res[s | base]
                rank = RANK_7 - ((idx >> 15) & 0x7)
                if rank < RANK_7:
                    r |= res[wk | (bk << 6) | _STM_BIT | (pawn_bits - _PAWN_RANK_UNIT)]
                if rank == RANK_2:
                    push = _pawn_square(idx) + _NORTH
                    if push != wk and push != bk:
                        r |= res[wk | (bk << 6) | _STM_BIT
                                 | (pawn_bits - 2 * _PAWN_RANK_UNIT)]
                good, bad = Result.WIN, Result.DRAW
            else:
                base = wk | pawn_bits
                for s in king_moves[bk]:
                    r |= res[base | (s << 6)]
                good, bad = Result.DRAW, Result.WIN

            if r & good:
                return good
            if r & Result.UNKNOWN:
                return Result.UNKNOWN
            return bad

        # Iterate until no unknown position can be resolved any more.
        changed = True
        while changed:
            changed = False
            still_unknown = []
            for idx in pending:
                result = classify(idx)
                if result != Result.UNKNOWN:
                    res[idx] = result
                    changed = True
                else:
                    still_unknown.append(idx)
            pending = still_unknown

        return res

    def probe(self, wksq: int, wpsq: int, bksq: int, stm: int) -> bool:
        """True if white wins with the given kings, pawn and side to move."""
        if not (is_ok(wksq) and is_ok(wpsq) and is_ok(bksq)):
            raise ValueError("square out of range")
        if file_of(wpsq) > FILE_D:
            raise ValueError("pawn must be on files a-d; mirror the position first")
        if not RANK_2 <= rank_of(wpsq) <= RANK_7:
            raise ValueError("pawn must be on ranks 2-7")
        return self._results[index(stm, bksq, wksq, wpsq)] == Result.WIN


@lru_cache(maxsize=None)
def _shared() -> KPKBitbase:
    return KPKBitbase()


def probe(wksq: int, wpsq: int, bksq: int, stm: int) -> bool:
    """Probe the shared, lazily built table."""
    return _shared().probe(wksq, wpsq, bksq, stm)