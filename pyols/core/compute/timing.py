"""
Section timing for solves.

A backend times each stage of its computation and stores the totals on the
Result envelope, so callers can see whether a fit went into forming the Gram
matrix or into inverting it.
"""

import time
from contextlib import contextmanager
from typing import Iterator


class Timer:
    """
    Wall-clock timer with named, accumulating sections.

    Example:
        timer = Timer()
        timer.start()
        with timer.section('invert'):
            XtX_inv = invert(XtX)
        timer.stop()
        timer.result()   # {'total_seconds': ..., 'invert': ...}
    """

    def __init__(self):
        self._elapsed: dict[str, float] = {}
        self._t0: float | None = None
        self._total: float | None = None

    def start(self) -> None:
        self._t0 = time.perf_counter()

    def stop(self) -> None:
        if self._t0 is None:
            raise RuntimeError("Timer.stop() called before start()")
        self._total = time.perf_counter() - self._t0

    @contextmanager
    def section(self, name: str) -> Iterator[None]:
        """
        Add the time spent in the block to section `name`.

        Re-entering a name adds to its running total. A block that raises
        is still counted.
        """
        t0 = time.perf_counter()
        try:
            yield
        finally:
            self._elapsed[name] = self._elapsed.get(name, 0.0) + (time.perf_counter() - t0)

    def result(self) -> dict[str, float]:
        """Total plus per-section seconds. Raises RuntimeError before stop()."""
        if self._total is None:
            raise RuntimeError("Timer.result() called before stop()")
        return {'total_seconds': self._total, **self._elapsed}
