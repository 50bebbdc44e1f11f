"""Pausable stopwatch used to report how long each side spent thinking."""
from __future__ import annotations

import time
from typing import Callable, Optional

UNITS = ["ns", "μs", "ms", "s"]


def duration_to_string(ns: int) -> str:
    value = ns
    unit = 0
    while unit + 1 < len(UNITS) and value >= 1000:
        unit += 1
        value //= 1000
    return f"{value} {UNITS[unit]}"


class Stopwatch:
    def __init__(self, identifier: str = "", clock: Callable[[], int] = time.perf_counter_ns):
        self.identifier = identifier
        self._clock = clock
        self._counter = 0
        self._beginning: Optional[int] = None

    @property
    def paused(self) -> bool:
        return self._beginning is None

    def start(self) -> None:
        if self._beginning is None:
            self._beginning = self._clock()

    def pause(self) -> None:
        if self._beginning is not None:
            self._counter += self._clock() - self._beginning
            self._beginning = None

    @property
    def elapsed_ns(self) -> int:
        count = self._counter
        if self._beginning is not None:
            count += self._clock() - self._beginning
        return count

    def report(self) -> str:
        who = f"{self.identifier} took" if self.identifier else "Took"
        return f"{who} {duration_to_string(self.elapsed_ns)}."
