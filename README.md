# kpkboard

Chess building blocks in pure Python, with no dependencies outside the
standard library.

## Modules

- **`kpkboard.bitboard`**: squares are integers 0 (a1) to 63 (h8) and
  bitboards are non-negative integers. Provides `Color`, `PieceType` and
  `Direction` enums; square helpers (`file_of`, `rank_of`, `make_square`,
  `flip_file`, `flip_rank`, `relative_rank`, `distance`, `edge_distance`);
  bitboard helpers (`square_bb`, `file_bb`, `rank_bb`, `shift`,
  `pawn_attacks_bb`, `forward_file_bb`, `passed_pawn_span` and others);
  bit scanning (`popcount`, `lsb`, `msb`, `iter_squares`, `frontmost_sq`);
  `sliding_attack`; and `pretty`, which draws a bitboard as ASCII.
  The `Bitboards` class holds precomputed tables: `attacks`,
  `pseudo_attacks`, `pawn_attacks`, `line`, `between` and `aligned`.
  `tables()` returns one shared, lazily built `Bitboards` instance.
- **`kpkboard.bitbase`**: a complete king-and-pawn versus king table built
  by retrograde iteration. `KPKBitbase.probe` (or the module-level `probe`,
  which uses a shared table) returns `True` when white wins. The pawn must
  be on files a to d and ranks 2 to 7; otherwise `ValueError` is raised.
- **`kpkboard.benchmark`**: `setup_bench(current_fen, args)` returns the
  list of UCI commands for a benchmark run. `args` holds up to six tokens:
  hash size, threads, limit, position source (`default`, `current` or a
  file of FENs), limit type and evaluation type (`mixed`, `classical`,
  `NNUE`). The built-in positions are in `DEFAULT_POSITIONS`. A position
  file that cannot be opened raises `FileNotFoundError`.
- **`kpkboard.misc`**: the xorshift64* generator `PRNG` (`rand64`,
  `sparse_rand`), `mul_hi64`, a power-of-two sized `HashTable`,
  `engine_info` and `CommandLine.from_argv`.
- **`kpkboard.dbgstats`**: `DebugStats` collects hit rates, means,
  standard deviations and correlations in 32 slots; `report()` returns a
  text summary.

## Install

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Examples

Attacks and board diagrams:

```python
from kpkboard.bitboard import PieceType, make_square, pretty, tables

bb = tables()
d4 = make_square(3, 3)
print(pretty(bb.attacks(PieceType.ROOK, d4, 0)))
```

KPK probing (white king e6, white pawn d7, black king a8, white to move):

```python
from kpkboard.bitbase import probe
from kpkboard.bitboard import Color, make_square

win = probe(make_square(4, 5), make_square(3, 6), make_square(0, 7), Color.WHITE)
```

The first call builds the table, which takes a little while; later calls
reuse it.

Benchmark command list:

```python
from kpkboard.benchmark import setup_bench

commands = setup_bench("8/8/8/8/8/8/8/8 w - - 0 1", ["16", "1", "13"])
```

## What this package does not do

It is a library of parts, not a playing program. There is no position
class, move generator, search, evaluation or UCI command loop, and no
command-line program. `setup_bench` only builds the list of commands; it
does not run them.