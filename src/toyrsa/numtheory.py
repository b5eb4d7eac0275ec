"""Euclidean number theory used during key assembly.

Provides the greatest common divisor, the Extended Euclidean Algorithm and the modular inverse built on top of it.
Everything here works on plain non-negative integers and has no side effects.

Typical usage example:

    g, x, y = extended_euclidean(23, 120)
    d = mod_inverse(23, 120)
"""
# Copyright (c) 2025-present Tech. TTGames
# SPDX-License-Identifier: EPL-2.0


def gcd(a: int, b: int) -> int:
    """Greatest common divisor via the Euclidean algorithm."""
    while b != 0:
        a, b = b, a % b
    return a


def extended_euclidean(a: int, b: int) -> tuple[int, int, int]:
    """Implements the Extended Euclidean Algorithm.

    Such that a*x + b*y = g = gcd(a, b). Recursion depth is logarithmic in the smaller operand.

    Args:
        a: The first natural number.
        b: The second natural number.

    Returns:
        Greatest common divisor of two integers.
        As well as the Bezout coefficients.
    """
    if a == 0:
        return b, 0, 1
    g, x1, y1 = extended_euclidean(b % a, a)
    return g, y1 - (b // a) * x1, x1


def mod_inverse(a: int, m: int) -> int | None:
    """Find the inverse of `a` modulo `m`.

    Args:
        a: The value to invert.
        m: The modulus. Must be positive.

    Returns:
        `r` in range [0, m) such that (a * r) % m == 1, or None if `a` and `m` are not coprime.
    """
    g, x, _ = extended_euclidean(a, m)
    if g != 1:
        return None
    return (x % m + m) % m
