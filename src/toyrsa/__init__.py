"""Textbook RSA key pairs from small primes.

Provides the number theory behind RSA key construction: primality testing, random prime generation, the Extended
Euclidean Algorithm, modular inverses and public exponent selection. On top of it sit small key classes for
textbook encryption and decryption of integers.

Typical usage example:

    p, q = generate_primes(100, 1000)
    e = select_exponent(totient(p, q))
    pub, priv = generate_key_pair(p, q, e)
    pk = RSAPrivKey.generate()
    c = pk.pub.encrypt(42)
    r = pk.decrypt(c)
"""
# Copyright (c) 2025-present Tech. TTGames
# SPDX-License-Identifier: EPL-2.0
from toyrsa.keygen import create_prime
from toyrsa.keygen import generate_key_pair
from toyrsa.keygen import generate_primes
from toyrsa.keygen import is_prime
from toyrsa.keygen import select_exponent
from toyrsa.keygen import totient
from toyrsa.numtheory import extended_euclidean
from toyrsa.numtheory import gcd
from toyrsa.numtheory import mod_inverse
from toyrsa.rsa import RSAPrivKey
from toyrsa.rsa import RSAPubKey

__version__ = "0.0.1"
__all__ = [
    "RSAPrivKey",
    "RSAPubKey",
    "is_prime",
    "create_prime",
    "generate_primes",
    "totient",
    "select_exponent",
    "generate_key_pair",
    "gcd",
    "extended_euclidean",
    "mod_inverse",
]
