"""Chess bitboards, sliding attack tables, a KPK bitbase, benchmark command lists and debug statistics."""

__version__ = "0.1.0"
__all__ = ["bitboard", "bitbase", "benchmark", "misc", "dbgstats"]