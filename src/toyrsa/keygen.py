"""Core Key Generation Utility, focusing on small primes and textbook RSA key pairs.

This module turns two primes and a public exponent into an RSA key pair. It covers primality testing by trial
division, bounded random prime generation, public exponent selection and the final key-pair assembly. Keys built
here are for teaching: the primes are small and no padding is involved.

Typical usage example:

    p, q = generate_primes(100, 1000)
    e = select_exponent(totient(p, q))
    (e, m), (d, m) = generate_key_pair(p, q, e)
"""
# Copyright (c) 2025-present Tech. TTGames
# SPDX-License-Identifier: EPL-2.0
import secrets

from toyrsa.numtheory import gcd
from toyrsa.numtheory import mod_inverse

DEFAULT_PRIME_MIN: int = 100
DEFAULT_PRIME_MAX: int = 1000
_FIRST_EXPONENT: int = 3


def is_prime(n: int) -> bool:
    """Check whether `n` is prime by trial division.

    Handles the small cases directly and then divides by candidates of the form 6k±1 up to the square root of `n`,
    as every prime greater than 3 has that form.

    Args:
        n: The number to check.

    Returns:
        True if `n` is prime, False otherwise.
    """
    if n <= 1:
        return False
    if n <= 3:
        return True
    if n % 2 == 0 or n % 3 == 0:
        return False
    i = 5
    while i * i <= n:
        if n % i == 0 or n % (i + 2) == 0:
            return False
        i += 6
    return True


def create_prime(min_val: int, max_val: int, attempts: int | None = None) -> int:
    """Draw a random prime from the range [min_val, max_val).

    Draws uniformly distributed candidates until one of them passes `is_prime`. Each draw is independent, so a
    candidate may be drawn more than once.

    Args:
        min_val: The inclusive lower bound.
        max_val: The exclusive upper bound. Must be greater than `min_val`.
        attempts: Maximum number of draws. Defaults to None, meaning no limit.
            Without a limit, a range containing no prime never returns.

    Returns:
        A prime in range [min_val, max_val).

    Raises:
        ValueError: If the range is empty or `attempts` is not positive.
        RuntimeError: If `attempts` draws produced no prime.
    """
    if min_val >= max_val:
        raise ValueError("min_val must be smaller than max_val.")
    if attempts is not None and attempts < 1:
        raise ValueError("attempts must be >= 1.")
    span = max_val - min_val
    drawn = 0
    while attempts is None or drawn < attempts:
        candidate = secrets.randbelow(span) + min_val
        if is_prime(candidate):
            return candidate
        drawn += 1
    raise RuntimeError(f"Drew {attempts} candidates in [{min_val}, {max_val}) with no prime found.")


def generate_primes(min_val: int = DEFAULT_PRIME_MIN,
                    max_val: int = DEFAULT_PRIME_MAX,
                    attempts: int | None = None) -> tuple[int, int]:
    """Generates a pair of distinct primes from the same range.

    Args:
        min_val: The inclusive lower bound. Defaults to 100.
        max_val: The exclusive upper bound. Defaults to 1000.
        attempts: Draw limit passed to each `create_prime` call. Defaults to None.

    Returns:
        Two different primes `p` and `q`.
    """
    p = create_prime(min_val, max_val, attempts)
    q = create_prime(min_val, max_val, attempts)
    while p == q:
        q = create_prime(min_val, max_val, attempts)
    return p, q


def totient(p: int, q: int) -> int:
    """Euler's totient of the modulus p*q, for distinct primes `p` and `q`."""
    return (p - 1) * (q - 1)


def select_exponent(phi: int, randomized: bool = False) -> int:
    """Select a public exponent coprime to the totient.

    The deterministic search walks the odd numbers upward from 3. The randomized search samples in [3, phi), moves
    even samples to the next odd number and rejects samples that are out of range or share a factor with `phi`.

    Args:
        phi: The totient of the modulus. Must be greater than 3.
        randomized: Whether to sample the exponent at random. Defaults to False.

    Returns:
        An odd exponent `e` with 1 < e < phi and gcd(e, phi) == 1.

    Raises:
        ValueError: If `phi` leaves no room for an exponent.
    """
    if phi <= _FIRST_EXPONENT:
        raise ValueError(f"Totient must be greater than {_FIRST_EXPONENT}.")
    if randomized:
        while True:
            e = secrets.randbelow(phi - _FIRST_EXPONENT) + _FIRST_EXPONENT
            if e % 2 == 0:
                e += 1
            if e < phi and gcd(e, phi) == 1:
                return e
    e = _FIRST_EXPONENT
    while gcd(e, phi) != 1:
        e += 2
    return e


def generate_key_pair(p: int, q: int, e: int) -> tuple[tuple[int, int], tuple[int | None, int]]:
    """Assembles an RSA key pair from two primes and a public exponent.

    Neither the primality of `p` and `q` nor the coprimality of `e` is checked here. If `e` has no inverse modulo
    the totient, the private exponent is None and the pair must not be used.

    Args:
        p: The first prime.
        q: The second prime, distinct from `p`.
        e: The public exponent, coprime to (p-1)*(q-1).

    Returns:
        A tuple of (public, private) sub-tuples of (exponent, modulus).
    """
    m = p * q
    d = mod_inverse(e, totient(p, q))
    return (e, m), (d, m)
