"""Run-time statistics collectors for debugging."""

from __future__ import annotations

import math
import threading

MAX_DEBUG_SLOTS = 32


def _div(a: float, b: float) -> float:
    try:
        return a / b
    except ZeroDivisionError:
        return math.nan


def _sqrt(x: float) -> float:
    return math.sqrt(x) if x >= 0 else math.nan


class DebugStats:
    """Hit rates, means, standard deviations and correlations per slot."""

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._hit = [[0, 0] for _ in range(MAX_DEBUG_SLOTS)]
        self._mean = [[0, 0] for _ in range(MAX_DEBUG_SLOTS)]
        self._stdev = [[0, 0, 0] for _ in range(MAX_DEBUG_SLOTS)]
        self._correl = [[0] * 6 for _ in range(MAX_DEBUG_SLOTS)]

    @staticmethod
    def _check(slot: int) -> None:
        if not 0 <= slot < MAX_DEBUG_SLOTS:
            raise IndexError(f"debug slot out of range: {slot}")

    def hit_on(self, cond: bool, slot: int = 0) -> None:
        self._check(slot)
        with self._lock:
            data = self._hit[slot]
            data[0] += 1
            if cond:
                data[1] += 1

    def mean_of(self, value: int, slot: int = 0) -> None:
        self._check(slot)
        with self._lock:
            data = self._mean[slot]
            data[0] += 1
            data[1] += value

    def stdev_of(self, value: int, slot: int = 0) -> None:
        self._check(slot)
        with self._lock:
            data = self._stdev[slot]
            data[0] += 1
            data[1] += value
            data[2] += value * value

    def correl_of(self, value1: int, value2: int, slot: int = 0) -> None:
        self._check(slot)
        with self._lock:
            data = self._correl[slot]
            data[0] += 1
            data[1] += value1
            data[2] += value1 * value1
            data[3] += value2
            data[4] += value2 * value2
            data[5] += value1 * value2

    def report(self) -> str:
        """Text summary of every slot that received data."""
        lines = []
        with self._lock:
            for i, (n, hits) in enumerate(self._hit):
                if n:
                    lines.append(f"Hit #{i}: Total {n} Hits {hits} "
                                 f"Hit Rate (%) {100.0 * hits / n:g}")
            for i, (n, total) in enumerate(self._mean):
                if n:
                    lines.append(f"Mean #{i}: Total {n} Mean {total / n:g}")
            for i, (n, s, s2) in enumerate(self._stdev):
                if n:
                    r = _sqrt(s2 / n - (s / n) ** 2)
                    lines.append(f"Stdev #{i}: Total {n} Stdev {r:g}")
            for i, (n, x, x2, y, y2, xy) in enumerate(self._correl):
                if n:
                    ex, ey = x / n, y / n
                    r = _div(xy / n - ex * ey,
                             _sqrt(x2 / n - ex * ex) * _sqrt(y2 / n - ey * ey))
                    lines.append(f"Correl. #{i}: Total {n} Coefficient {r:g}")
        return "".join(line + "\n" for line in lines)