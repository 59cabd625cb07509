"""Lucas-Lehmer primality test for Mersenne numbers 2^p - 1."""

from __future__ import annotations

from typing import Callable, Optional

from .reduce import mod_mersenne
from .runtime import CONSOLE_LOCK


ProgressCallback = Callable[[int, int], None]


class TerminalProgress:
    """Progress sink that redraws a single status line on stdout."""

    def __init__(self, stream=None):
        self.stream = stream

    def __call__(self, p: int, percent: int) -> None:
        with CONSOLE_LOCK:
            print(f"\rTesting p = {p}: Progress: {percent}%", end="", file=self.stream, flush=True)
            if percent >= 100:
                print(file=self.stream, flush=True)


def progress_interval(p: int) -> int:
    return max(1, (p - 2) // 100)


def _run_sequence(p: int, progress: Optional[ProgressCallback]) -> int:
    total = p - 2
    interval = progress_interval(p)
    s = 4
    for i in range(1, total + 1):
        s = mod_mersenne(s * s - 2, p)
        if progress is not None and (i % interval == 0 or i == total):
            progress(p, i * 100 // total)
    return s


def lucas_lehmer_residue(p: int) -> int:
    """Final term s_(p-2) of the sequence, reduced mod 2^p - 1."""
    if p <= 2:
        raise ValueError("residue is defined only for p > 2")
    return _run_sequence(p, None)


def is_mersenne_prime(p: int, verbose: bool = False, progress: Optional[ProgressCallback] = None) -> bool:
    """Decide whether 2^p - 1 is prime.

    progress(p, percent) is called roughly every 1% of the p - 2 iterations
    and always on the last one. verbose without a callback draws progress on
    the terminal. Neither affects the result.
    """
    if p < 2:
        return False
    if p == 2:
        return True

    if progress is None and verbose:
        progress = TerminalProgress()
    return _run_sequence(p, progress) == 0
