"""
Wall-clock timing for elimination phases.

eliminate(timing=True) reports how long pivot search and row reduction
took, keyed by phase name, next to the overall run time.
"""

import time
from contextlib import contextmanager
from typing import Iterator


class Timer:
    """
    Per-phase timer. A phase entered several times accumulates.

        timer = Timer()
        timer.start()
        for i in range(n):
            with timer.section('pivot_search'):
                ...
        timer.stop()
        timer.result()   # {'total_seconds': ..., 'pivot_search': ...}
    """

    def __init__(self):
        self._phases: dict[str, float] = {}
        self._started_at: float | None = None
        self._total: float | None = None

    def start(self) -> None:
        self._started_at = time.perf_counter()

    def stop(self) -> None:
        if self._started_at is None:
            raise RuntimeError("timer was never started")
        self._total = time.perf_counter() - self._started_at

    @contextmanager
    def section(self, name: str) -> Iterator[None]:
        """Add the time spent in the block to phase name."""
        began = time.perf_counter()
        try:
            yield
        finally:
            self._phases[name] = self._phases.get(name, 0.0) + (
                time.perf_counter() - began
            )

    def result(self) -> dict[str, float]:
        """'total_seconds' plus one entry per phase. Only valid after stop()."""
        if self._total is None:
            raise RuntimeError("timer is still running; call stop() first")
        return {'total_seconds': self._total, **self._phases}


@contextmanager
def timed() -> Iterator[Timer]:
    """Time the enclosed block; the timer is stopped on exit."""
    timer = Timer()
    timer.start()
    try:
        yield timer
    finally:
        timer.stop()
