"""Engine identification, hashing helpers and a small pseudo-random generator."""

from __future__ import annotations

import datetime as _dt
import os
from dataclasses import dataclass
from typing import Callable, Generic, TypeVar

ENGINE_NAME = "kpkboard"
VERSION = "dev"

MASK64 = (1 << 64) - 1
_XORSHIFT_MULTIPLIER = 2685821657736338717

T = TypeVar("T")


def engine_info(
    to_uci: bool = False,
    build_date: _dt.date | str | None = None,
    git_sha: str | None = None,
) -> str:
    """Return the full engine name, including version and build tags.

    Development builds are tagged ``dev-YYYYMMDD-SHA``; without a commit
    hash the tag ends in ``nogit``. With ``to_uci`` the author part is
    formatted as a UCI ``id author`` line.
    """
    parts = [f"{ENGINE_NAME} {VERSION}"]

    if VERSION == "dev":
        if build_date is None:
            build_date = _dt.date.today()
        if isinstance(build_date, _dt.date):
            date_tag = build_date.strftime("%Y%m%d")
        else:
            date_tag = str(build_date)
        parts.append(f"-{date_tag}-{git_sha if git_sha else 'nogit'}")

    parts.append("\nid author " if to_uci else " by ")
    parts.append(f"the {ENGINE_NAME} developers")
    return "".join(parts)


def mul_hi64(a: int, b: int) -> int:
    """Return the high 64 bits of the 128-bit product of two 64-bit values."""
    return ((a & MASK64) * (b & MASK64)) >> 64


class PRNG:
    """xorshift64star pseudo-random number generator with 64-bit output."""

    def __init__(self, seed: int) -> None:
        seed &= MASK64
        if not seed:
            raise ValueError("PRNG seed must be non-zero")
        self._state = seed

    def rand64(self) -> int:
        """Return the next 64-bit pseudo-random number."""
        s = self._state
        s ^= s >> 12
        s ^= (s << 25) & MASK64
        s ^= s >> 27
        self._state = s
        return (s * _XORSHIFT_MULTIPLIER) & MASK64

    def sparse_rand(self) -> int:
        """Return a number with about one eighth of its bits set."""
        return self.rand64() & self.rand64() & self.rand64()


class HashTable(Generic[T]):
    """Fixed-size table of entries addressed by the low bits of a key."""

    def __init__(self, factory: Callable[[], T], size: int = 8192) -> None:
        if size <= 0 or size & (size - 1):
            raise ValueError(f"table size must be a power of two, got {size}")
        self._mask = size - 1
        self._table = [factory() for _ in range(size)]

    def __len__(self) -> int:
        return len(self._table)

    def __getitem__(self, key: int) -> T:
        return self._table[(key & 0xFFFFFFFF) & self._mask]


@dataclass(frozen=True)
class CommandLine:
    """Paths derived from how the program was started."""

    argv0: str
    binary_directory: str
    working_directory: str

    @classmethod
    def from_argv(
        cls,
        argv0: str,
        working_directory: str | None = None,
        path_separator: str = os.sep,
    ) -> "CommandLine":
        """Build from the program path, resolving a leading ``./`` to the cwd."""
        if working_directory is None:
            try:
                working_directory = os.getcwd()
            except OSError:
                working_directory = ""

        cut = max(argv0.rfind("\\"), argv0.rfind("/"))
        if cut < 0:
            binary_directory = "." + path_separator
        else:
            binary_directory = argv0[: cut + 1]

        if binary_directory.startswith("." + path_separator):
            binary_directory = working_directory + binary_directory[1:]

        return cls(argv0, binary_directory, working_directory)