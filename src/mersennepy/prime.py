"""Primality checks used to prune candidate exponents."""

from __future__ import annotations

import math

import numpy as np


def is_prime(n: int) -> bool:
    if n <= 1:
        return False
    if n <= 3:
        return True
    if n % 2 == 0 or n % 3 == 0:
        return False

    # remaining divisors have the form 6k +/- 1
    i = 5
    while i * i <= n:
        if n % i == 0 or n % (i + 2) == 0:
            return False
        i += 6
    return True


def _base_sieve(limit: int) -> np.ndarray:
    flags = np.ones(limit + 1, dtype=bool)
    flags[:2] = False
    for d in range(2, math.isqrt(limit) + 1):
        if flags[d]:
            flags[d * d : limit + 1 : d] = False
    return flags


def prime_exponents(start: int, end: int) -> list[int]:
    """Return the primes in [start, end] in ascending order.

    Same answer as filtering the range through is_prime. Only the segment
    [start, end] is sieved, using the primes up to isqrt(end), so memory
    follows the width of the range rather than its upper end.
    """
    start = max(start, 2)
    if end < start:
        return []
    base_primes = np.flatnonzero(_base_sieve(math.isqrt(end))).tolist()
    flags = np.ones(end - start + 1, dtype=bool)
    for d in base_primes:
        # first multiple of d in the segment, skipping d itself
        first = max(d * d, -(-start // d) * d)
        if first > end:
            continue
        flags[first - start :: d] = False
    return (np.flatnonzero(flags) + start).tolist()
