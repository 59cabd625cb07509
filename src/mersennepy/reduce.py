"""Reduction modulo a Mersenne number 2^p - 1 without division."""

from __future__ import annotations


def mersenne_modulus(p: int) -> int:
    if p < 1:
        raise ValueError("exponent must be at least 1")
    return (1 << p) - 1


def mod_mersenne(n: int, p: int) -> int:
    """Return n mod (2^p - 1) in the range [0, 2^p - 2].

    Since 2^p == 1 (mod 2^p - 1), the bits above position p can be folded
    back onto the low p bits: n = high * 2^p + low == high + low. Each fold
    shortens n until it fits in p bits.
    """
    if n < 0:
        raise ValueError("n must be non-negative")
    modulus = mersenne_modulus(p)

    while n.bit_length() > p:
        n = (n >> p) + (n & modulus)

    # all ones is the modulus itself
    if n == modulus:
        return 0
    return n
