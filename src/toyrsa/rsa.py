"""Key objects for trying out textbook RSA on generated key pairs.

Wraps the ((e, m), (d, m)) tuples from `toyrsa.keygen` so a generated pair can be exercised end to end: encrypt an
integer with the public half, decrypt it with the private half. No padding is applied.

Typical usage example:

    pk = RSAPrivKey.generate(100, 1000)
    c = pk.pub.encrypt(42)
    r = pk.decrypt(c)
"""
# Copyright (c) 2025-present Tech. TTGames
# SPDX-License-Identifier: EPL-2.0
import warnings

from toyrsa import keygen


class RSAKey:
    """One half of a key pair: an exponent paired with the shared modulus.

    Attributes:
        mod: The modulus m = p*q.
        expo: The exponent, e for the public half and d for the private half.
    """

    def __init__(self, mod: int, expo: int) -> None:
        self.mod = mod
        self.expo = expo

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.expo}, {self.mod})"

    def raise_to_key(self, value: int) -> int:
        """Compute value**expo mod m.

        Raises:
            ValueError: If `value` is not a residue of the modulus.
        """
        if value < 0 or value >= self.mod:
            raise ValueError(f"Value must be in range [0, {self.mod}).")
        return pow(value, self.expo, self.mod)


class RSAPubKey(RSAKey):
    """The public half (e, m)."""

    def encrypt(self, message: int) -> int:
        """Encrypt an integer message with no padding.

        Args:
            message: The message, in range [0, m).

        Returns:
            The ciphertext, message**e mod m.
        """
        warnings.warn("Textbook RSA encryption is unsecure! Please use with care.", RuntimeWarning)
        return self.raise_to_key(message)


class RSAPrivKey(RSAKey):
    """The private half (d, m), holding its public counterpart and, when known, the primes.

    Attributes:
        pub: The matching public key.
        p: The first prime, or None.
        q: The second prime, or None.
    """

    def __init__(self, mod: int, pub_exp: int, priv_exp: int, p: int | None = None, q: int | None = None) -> None:
        super().__init__(mod, priv_exp)
        self.pub: RSAPubKey = RSAPubKey(mod, pub_exp)
        self.p = p
        self.q = q

    def decrypt(self, ciphertext: int) -> int:
        """Recover the message from a ciphertext, ciphertext**d mod m."""
        return self.raise_to_key(ciphertext)

    @classmethod
    def from_key_pair(cls,
                      key_pair: tuple[tuple[int, int], tuple[int | None, int]],
                      p: int | None = None,
                      q: int | None = None) -> "RSAPrivKey":
        """Wrap a `keygen.generate_key_pair` result.

        Args:
            key_pair: The ((e, m), (d, m)) key pair.
            p: The first prime, if known.
            q: The second prime, if known.

        Returns:
            The private key, with the public key attached.

        Raises:
            ValueError: If the pair carries no private exponent.
        """
        (e, m), (d, _) = key_pair
        if d is None:
            raise ValueError("Public exponent has no inverse modulo the totient.")
        return cls(m, e, d, p, q)

    @classmethod
    def generate(cls,
                 min_val: int = keygen.DEFAULT_PRIME_MIN,
                 max_val: int = keygen.DEFAULT_PRIME_MAX,
                 randomized: bool = False) -> "RSAPrivKey":
        """Run the full pipeline: two distinct primes, an exponent, then the pair.

        Args:
            min_val: The inclusive lower bound for both primes.
            max_val: The exclusive upper bound for both primes.
            randomized: Whether to pick the public exponent at random.

        Returns:
            A freshly generated private key.
        """
        p, q = keygen.generate_primes(min_val, max_val)
        e = keygen.select_exponent(keygen.totient(p, q), randomized)
        return cls.from_key_pair(keygen.generate_key_pair(p, q, e), p, q)
