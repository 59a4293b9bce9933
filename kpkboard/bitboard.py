"""Bitboard representation of a chess board and precomputed attack tables.

A square is an integer from 0 (a1) to 63 (h8), numbered file first. A
bitboard is a non-negative integer whose bit ``s`` is set when square
``s`` belongs to the set.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import IntEnum
from functools import lru_cache
from typing import Iterator

MASK64 = (1 << 64) - 1

SQUARE_NB = 64
FILE_NB = 8
RANK_NB = 8

SQ_A1 = 0
SQ_H8 = 63

FILE_A, FILE_B, FILE_C, FILE_D, FILE_E, FILE_F, FILE_G, FILE_H = range(8)
RANK_1, RANK_2, RANK_3, RANK_4, RANK_5, RANK_6, RANK_7, RANK_8 = range(8)


class Color(IntEnum):
    WHITE = 0
    BLACK = 1

    @property
    def other(self) -> "Color":
        """The opposing colour."""
        return Color(self ^ 1)


class PieceType(IntEnum):
    NO_PIECE_TYPE = 0
    ALL_PIECES = 0
    PAWN = 1
    KNIGHT = 2
    BISHOP = 3
    ROOK = 4
    QUEEN = 5
    KING = 6


class Direction(IntEnum):
    NORTH = 8
    EAST = 1
    SOUTH = -8
    WEST = -1
    NORTH_EAST = 9
    SOUTH_EAST = -7
    SOUTH_WEST = -9
    NORTH_WEST = 7


ALL_SQUARES = MASK64
DARK_SQUARES = 0xAA55AA55AA55AA55

FILE_A_BB = 0x0101010101010101
FILE_B_BB = FILE_A_BB << 1
FILE_C_BB = FILE_A_BB << 2
FILE_D_BB = FILE_A_BB << 3
FILE_E_BB = FILE_A_BB << 4
FILE_F_BB = FILE_A_BB << 5
FILE_G_BB = FILE_A_BB << 6
FILE_H_BB = FILE_A_BB << 7

RANK_1_BB = 0xFF
RANK_2_BB = RANK_1_BB << (8 * 1)
RANK_3_BB = RANK_1_BB << (8 * 2)
RANK_4_BB = RANK_1_BB << (8 * 3)
RANK_5_BB = RANK_1_BB << (8 * 4)
RANK_6_BB = RANK_1_BB << (8 * 5)
RANK_7_BB = RANK_1_BB << (8 * 6)
RANK_8_BB = RANK_1_BB << (8 * 7)

QUEEN_SIDE = FILE_A_BB | FILE_B_BB | FILE_C_BB | FILE_D_BB
CENTER_FILES = FILE_C_BB | FILE_D_BB | FILE_E_BB | FILE_F_BB
KING_SIDE = FILE_E_BB | FILE_F_BB | FILE_G_BB | FILE_H_BB
CENTER = (FILE_D_BB | FILE_E_BB) & (RANK_4_BB | RANK_5_BB)

KING_FLANK = (
    QUEEN_SIDE ^ FILE_D_BB, QUEEN_SIDE, QUEEN_SIDE,
    CENTER_FILES, CENTER_FILES,
    KING_SIDE, KING_SIDE, KING_SIDE ^ FILE_E_BB,
)

_KING_STEPS = (-9, -8, -7, -1, 1, 7, 8, 9)
_KNIGHT_STEPS = (-17, -15, -10, -6, 6, 10, 15, 17)
_ROOK_DIRECTIONS = (Direction.NORTH, Direction.SOUTH, Direction.EAST, Direction.WEST)
_BISHOP_DIRECTIONS = (
    Direction.NORTH_EAST, Direction.SOUTH_EAST,
    Direction.SOUTH_WEST, Direction.NORTH_WEST,
)


# --- square geometry -------------------------------------------------------

def file_of(s: int) -> int:
    return s & 7


def rank_of(s: int) -> int:
    return s >> 3


def make_square(f: int, r: int) -> int:
    return (r << 3) + f


def is_ok(s: int) -> bool:
    return 0 <= s < SQUARE_NB


def flip_file(s: int) -> int:
    """Mirror a square horizontally (a1 <-> h1)."""
    return s ^ 7


def flip_rank(s: int) -> int:
    """Mirror a square vertically (a1 <-> a8)."""
    return s ^ 56


def relative_rank(c: int, s: int) -> int:
    """Rank of ``s`` as seen from the side of colour ``c``."""
    return rank_of(s) ^ (int(c) * 7)


def file_distance(s1: int, s2: int) -> int:
    return abs(file_of(s1) - file_of(s2))


def rank_distance(s1: int, s2: int) -> int:
    return abs(rank_of(s1) - rank_of(s2))


def distance(s1: int, s2: int) -> int:
    """Number of king steps needed to go from ``s1`` to ``s2``."""
    return max(file_distance(s1, s2), rank_distance(s1, s2))


def edge_distance(x: int) -> int:
    """Distance of a file or rank from the nearest board edge."""
    return min(x, 7 - x)


# --- basic bitboards -------------------------------------------------------

def square_bb(s: int) -> int:
    if not is_ok(s):
        raise ValueError(f"square out of range: {s}")
    return 1 << s


def rank_bb(r: int) -> int:
    return RANK_1_BB << (8 * r)


def file_bb(f: int) -> int:
    return FILE_A_BB << f


def more_than_one(b: int) -> bool:
    return bool(b & (b - 1))


def opposite_colors(s1: int, s2: int) -> bool:
    """True if the two squares have different colours."""
    return bool((s1 + rank_of(s1) + s2 + rank_of(s2)) & 1)


def shift(b: int, direction: int) -> int:
    """Move every square of ``b`` one or two steps in ``direction``."""
    d = int(direction)
    if d == 8:
        return (b << 8) & MASK64
    if d == -8:
        return b >> 8
    if d == 16:
        return (b << 16) & MASK64
    if d == -16:
        return b >> 16
    if d == 1:
        return ((b & ~FILE_H_BB) << 1) & MASK64
    if d == -1:
        return (b & ~FILE_A_BB) >> 1
    if d == 9:
        return ((b & ~FILE_H_BB) << 9) & MASK64
    if d == 7:
        return ((b & ~FILE_A_BB) << 7) & MASK64
    if d == -7:
        return (b & ~FILE_H_BB) >> 7
    if d == -9:
        return (b & ~FILE_A_BB) >> 9
    return 0


def pawn_attacks_bb(c: int, b: int) -> int:
    """Squares attacked by pawns of colour ``c`` standing on ``b``."""
    if c == Color.WHITE:
        return shift(b, Direction.NORTH_WEST) | shift(b, Direction.NORTH_EAST)
    return shift(b, Direction.SOUTH_WEST) | shift(b, Direction.SOUTH_EAST)


def pawn_double_attacks_bb(c: int, b: int) -> int:
    """Squares attacked twice by pawns of colour ``c`` standing on ``b``."""
    if c == Color.WHITE:
        return shift(b, Direction.NORTH_WEST) & shift(b, Direction.NORTH_EAST)
    return shift(b, Direction.SOUTH_WEST) & shift(b, Direction.SOUTH_EAST)


def adjacent_files_bb(s: int) -> int:
    f = file_bb(file_of(s))
    return shift(f, Direction.EAST) | shift(f, Direction.WEST)


def forward_ranks_bb(c: int, s: int) -> int:
    """All squares on ranks in front of ``s`` from the view of colour ``c``."""
    if c == Color.WHITE:
        return ((MASK64 ^ RANK_1_BB) << (8 * relative_rank(Color.WHITE, s))) & MASK64
    return (MASK64 ^ RANK_8_BB) >> (8 * relative_rank(Color.BLACK, s))


def forward_file_bb(c: int, s: int) -> int:
    return forward_ranks_bb(c, s) & file_bb(file_of(s))


def pawn_attack_span(c: int, s: int) -> int:
    return forward_ranks_bb(c, s) & adjacent_files_bb(s)


def passed_pawn_span(c: int, s: int) -> int:
    return pawn_attack_span(c, s) | forward_file_bb(c, s)


# --- bit scanning ----------------------------------------------------------

def popcount(b: int) -> int:
    return bin(b & MASK64).count("1")


def lsb(b: int) -> int:
    """Least significant square of a non-empty bitboard."""
    if not b:
        raise ValueError("empty bitboard has no least significant square")
    return (b & -b).bit_length() - 1


def msb(b: int) -> int:
    """Most significant square of a non-empty bitboard."""
    if not b:
        raise ValueError("empty bitboard has no most significant square")
    return b.bit_length() - 1


def least_significant_square_bb(b: int) -> int:
    if not b:
        raise ValueError("empty bitboard has no least significant square")
    return b & -b


def iter_squares(b: int) -> Iterator[int]:
    """Yield the squares of ``b`` from lowest to highest."""
    while b:
        low = b & -b
        yield low.bit_length() - 1
        b ^= low


def frontmost_sq(c: int, b: int) -> int:
    """Most advanced square of ``b`` from the view of colour ``c``."""
    return msb(b) if c == Color.WHITE else lsb(b)


# --- attack generation -----------------------------------------------------

def safe_destination(s: int, step: int) -> int:
    """Bitboard of ``s + step`` if it stays on the board, else 0."""
    to = s + step
    return (1 << to) if is_ok(to) and distance(s, to) <= 2 else 0


def sliding_attack(pt: int, sq: int, occupied: int) -> int:
    """Slider attacks from ``sq``, stopping at the first occupied square."""
    directions = _ROOK_DIRECTIONS if pt == PieceType.ROOK else _BISHOP_DIRECTIONS
    attacks = 0
    for d in directions:
        s = sq
        while safe_destination(s, d) and not (occupied & (1 << s)):
            s += d
            attacks |= 1 << s
    return attacks


def pretty(b: int) -> str:
    """ASCII drawing of a bitboard, rank 8 at the top."""
    border = "+---+---+---+---+---+---+---+---+\n"
    lines = [border]
    for r in range(RANK_8, RANK_1 - 1, -1):
        row = "".join(
            "| X " if b & (1 << make_square(f, r)) else "|   " for f in range(FILE_NB)
        )
        lines.append(f"{row}| {1 + r}\n{border}")
    lines.append("  a   b   c   d   e   f   g   h\n")
    return "".join(lines)


@dataclass
class Magic:
    """Attack lookup for one slider on one square.

    The index is the occupancy restricted to ``mask`` with its bits packed
    together, so every relevant occupancy has its own table slot.
    """

    mask: int
    attacks: list[int]
    _bits: tuple[int, ...] = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self._bits = tuple(1 << s for s in iter_squares(self.mask))

    def index(self, occupied: int) -> int:
        idx = 0
        for i, bit in enumerate(self._bits):
            if occupied & bit:
                idx |= 1 << i
        return idx


def _init_magics(pt: PieceType) -> list[Magic]:
    magics = []
    for s in range(SQUARE_NB):
        edges = (((RANK_1_BB | RANK_8_BB) & ~rank_bb(rank_of(s)))
                 | ((FILE_A_BB | FILE_H_BB) & ~file_bb(file_of(s))))
        mask = sliding_attack(pt, s, 0) & ~edges & MASK64
        # Carry-rippler enumeration visits subsets in increasing packed order.
        attacks = []
        b = 0
        while True:
            attacks.append(sliding_attack(pt, s, b))
            b = (b - mask) & mask
            if not b:
                break
        magics.append(Magic(mask, attacks))
    return magics


class Bitboards:
    """Precomputed attack, line and between tables for every square."""

    def __init__(self) -> None:
        self._rook_magics = _init_magics(PieceType.ROOK)
        self._bishop_magics = _init_magics(PieceType.BISHOP)

        self._pseudo = {pt: [0] * SQUARE_NB for pt in (
            PieceType.KNIGHT, PieceType.BISHOP, PieceType.ROOK,
            PieceType.QUEEN, PieceType.KING)}
        self._pawn_attacks = {c: [0] * SQUARE_NB for c in Color}
        self._line = [[0] * SQUARE_NB for _ in range(SQUARE_NB)]
        self._between = [[0] * SQUARE_NB for _ in range(SQUARE_NB)]

        for s1 in range(SQUARE_NB):
            for c in Color:
                self._pawn_attacks[c][s1] = pawn_attacks_bb(c, 1 << s1)

            king = knight = 0
            for step in _KING_STEPS:
                king |= safe_destination(s1, step)
            for step in _KNIGHT_STEPS:
                knight |= safe_destination(s1, step)
            self._pseudo[PieceType.KING][s1] = king
            self._pseudo[PieceType.KNIGHT][s1] = knight

            bishop = self.attacks(PieceType.BISHOP, s1, 0)
            rook = self.attacks(PieceType.ROOK, s1, 0)
            self._pseudo[PieceType.BISHOP][s1] = bishop
            self._pseudo[PieceType.ROOK][s1] = rook
            self._pseudo[PieceType.QUEEN][s1] = bishop | rook

            for pt in (PieceType.BISHOP, PieceType.ROOK):
                for s2 in range(SQUARE_NB):
                    if self._pseudo[pt][s1] & (1 << s2):
                        self._line[s1][s2] = ((self.attacks(pt, s1, 0)
                                               & self.attacks(pt, s2, 0))
                                              | (1 << s1) | (1 << s2))
                        self._between[s1][s2] = (self.attacks(pt, s1, 1 << s2)
                                                 & self.attacks(pt, s2, 1 << s1))
                    self._between[s1][s2] |= 1 << s2

    def attacks(self, pt: int, s: int, occupied: int = 0) -> int:
        """Attacks of a piece of type ``pt`` on ``s`` given the occupancy."""
        if pt == PieceType.PAWN or not is_ok(s):
            raise ValueError(f"no attack table for piece type {pt} on square {s}")
        if pt == PieceType.BISHOP:
            m = self._bishop_magics[s]
            return m.attacks[m.index(occupied)]
        if pt == PieceType.ROOK:
            m = self._rook_magics[s]
            return m.attacks[m.index(occupied)]
        if pt == PieceType.QUEEN:
            return (self.attacks(PieceType.BISHOP, s, occupied)
                    | self.attacks(PieceType.ROOK, s, occupied))
        return self.pseudo_attacks(pt, s)

    def pseudo_attacks(self, pt: int, s: int) -> int:
        """Attacks of a piece of type ``pt`` on ``s`` on an empty board."""
        try:
            table = self._pseudo[PieceType(pt)]
        except (KeyError, ValueError):
            raise ValueError(f"no attack table for piece type {pt}") from None
        if not is_ok(s):
            raise ValueError(f"square out of range: {s}")
        return table[s]

    def pawn_attacks(self, c: int, s: int) -> int:
        if not is_ok(s):
            raise ValueError(f"square out of range: {s}")
        return self._pawn_attacks[Color(c)][s]

    def line(self, s1: int, s2: int) -> int:
        """Full edge-to-edge line through both squares, or 0 if not aligned."""
        if not (is_ok(s1) and is_ok(s2)):
            raise ValueError("square out of range")
        return self._line[s1][s2]

    def between(self, s1: int, s2: int) -> int:
        """Squares between ``s1`` and ``s2``, excluding ``s1``, including ``s2``."""
        if not (is_ok(s1) and is_ok(s2)):
            raise ValueError("square out of range")
        return self._between[s1][s2]

    def aligned(self, s1: int, s2: int, s3: int) -> bool:
        """True if the three squares lie on one straight or diagonal line."""
        return bool(self.line(s1, s2) & square_bb(s3))


@lru_cache(maxsize=None)
def tables() -> Bitboards:
    """Shared, lazily built attack tables."""
    return Bitboards()