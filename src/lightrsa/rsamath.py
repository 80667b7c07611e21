"""Core RSA arithmetic on narrow fixed-width integers.

Covers the four numeric steps of textbook RSA key generation: drawing a random 16-bit prime, computing the totient of
two such primes, picking a public exponent coprime to the totient and deriving the private exponent as its modular
inverse. Widths are kept narrow on purpose; this is demonstration-sized RSA and not suitable for real keys.

Typical usage example:

    rm = RsaMath(random.Random(1337))
    p, q = rm.generate_prime(), rm.generate_prime()
    phi = rm.totient(p, q)
    e = rm.select_public_exponent(phi)
    d = rm.modular_inverse(e, phi)
"""
# Copyright (c) 2025-present Tech. TTGames
# SPDX-License-Identifier: EPL-2.0
import math
import random
import secrets
import warnings

UINT16_MAX: int = 2**16 - 1
UINT32_MAX: int = 2**32 - 1
FERMAT_EXPONENT: int = 65537
DEFAULT_PRIME_ATTEMPTS: int = 10000
DEFAULT_EXPONENT_ATTEMPTS: int = 1000


class RetriesExhaustedError(RuntimeError):
    """A bounded retry loop ran out of attempts without finding a result."""


def _check_int(name: str, value: int, low: int, high: int) -> None:
    """Validate that `value` is a plain int inside `[low, high]`.

    Raises:
        ValueError: If `value` is not an int (bools excluded) or out of range.
    """
    if not isinstance(value, int) or isinstance(value, bool):
        raise ValueError(f"{name} must be an integer")
    if not low <= value <= high:
        raise ValueError(f"{name} must be in range [{low}, {high}]")


def is_prime(number: int) -> bool:
    """Deterministic primality test by 6k±1 trial division.

    Args:
        number: The candidate to test.

    Returns:
        True if `number` is prime, False otherwise.
    """
    if number <= 1:
        return False
    if number <= 3:
        return True
    if number % 2 == 0 or number % 3 == 0:
        return False
    i = 5
    while i * i <= number:
        if number % i == 0 or number % (i + 2) == 0:
            return False
        i += 6
    return True


def extended_euclidean(a: int, b: int) -> tuple[int, int, int]:
    """Implements the Extended Euclidean Algorithm.

    Such that a*x + b*y = g = gcd(a, b).

    Args:
        a: The first natural number.
        b: The second natural number.

    Returns:
        Greatest common divisor of the two integers, followed by the Bezout coefficients x and y.
    """
    r0, r1 = a, b
    x0, x1, y0, y1 = 1, 0, 0, 1
    while r1 != 0:
        q, r = divmod(r0, r1)
        r0, r1 = r1, r
        x0, x1 = x1, x0 - q * x1
        y0, y1 = y1, y0 - q * y1
    return r0, x0, y0


class RsaMath:
    """The four arithmetic operations of textbook RSA key generation.

    All randomness goes through the injected `rng`, so a seeded `random.Random` makes every run reproducible. The
    object holds no other state and may be shared as long as the rng may be.

    Attributes:
        rng: Random source with the `random.Random` interface.
        prime_attempts: Maximum draws per prime generation.
        exponent_attempts: Maximum candidates per public exponent selection.
    """

    def __init__(self,
                 rng: random.Random | None = None,
                 prime_attempts: int = DEFAULT_PRIME_ATTEMPTS,
                 exponent_attempts: int = DEFAULT_EXPONENT_ATTEMPTS) -> None:
        if prime_attempts < 1 or exponent_attempts < 1:
            raise ValueError("Attempt caps must be positive.")
        self.rng = rng if rng is not None else secrets.SystemRandom()
        self.prime_attempts = prime_attempts
        self.exponent_attempts = exponent_attempts

    def generate_prime(self) -> int:
        """Generate a uniformly random prime in the 16-bit range.

        Returns:
            A prime in [2, 65535].

        Raises:
            RetriesExhaustedError: If no prime was drawn in `prime_attempts` tries.
        """
        for _ in range(self.prime_attempts):
            candidate = self.rng.getrandbits(16)
            if is_prime(candidate):
                return candidate
        raise RetriesExhaustedError(
            f"Drew an improbable {self.prime_attempts} candidates with no prime found. Check random number generator.")

    def _generate_prime_below(self, upper: int) -> int:
        """Same as `generate_prime`, but draws uniformly from [2, upper) only."""
        for _ in range(self.prime_attempts):
            candidate = self.rng.randrange(2, upper)
            if is_prime(candidate):
                return candidate
        raise RetriesExhaustedError(
            f"Drew an improbable {self.prime_attempts} candidates below {upper} with no prime found.")

    def totient(self, p: int, q: int) -> int:
        """Euler's totient of `p * q` for two primes.

        Primality of the arguments is the caller's responsibility and is not re-checked.

        Args:
            p: First prime, in [2, 65535].
            q: Second prime, in [2, 65535].

        Returns:
            (p - 1) * (q - 1), always within 32 bits.

        Raises:
            ValueError: If either argument is outside the 16-bit prime range.
        """
        _check_int("p", p, 2, UINT16_MAX)
        _check_int("q", q, 2, UINT16_MAX)
        return (p - 1) * (q - 1)

    def select_public_exponent(self, phi: int) -> int:
        """Pick a public exponent coprime to the totient.

        Returns 65537 straight away when it is smaller than `phi` and coprime to it. Otherwise random primes below
        `phi` are drawn until one shares no factor with it.

        Args:
            phi: The totient, in [3, 2**32 - 1].

        Returns:
            e with 1 < e < phi and gcd(e, phi) == 1.

        Raises:
            ValueError: If `phi` is out of range (no valid exponent exists below 3).
            RetriesExhaustedError: If no exponent was found in `exponent_attempts` candidates.
        """
        _check_int("phi", phi, 3, UINT32_MAX)
        if phi > FERMAT_EXPONENT:
            if math.gcd(FERMAT_EXPONENT, phi) == 1:
                return FERMAT_EXPONENT
            warnings.warn(f"Totient {phi} is a multiple of {FERMAT_EXPONENT}, drawing a random exponent instead.",
                          RuntimeWarning)
        upper = min(phi, UINT16_MAX + 1)
        for _ in range(self.exponent_attempts):
            e = self._generate_prime_below(upper)
            if math.gcd(e, phi) == 1:
                return e
        raise RetriesExhaustedError(
            f"Tried {self.exponent_attempts} exponent candidates for totient {phi} with none coprime.")

    def modular_inverse(self, e: int, phi: int) -> int | None:
        """Derive the private exponent as the inverse of `e` modulo `phi`.

        Args:
            e: The public exponent, in [0, 2**32 - 1].
            phi: The modulus (totient), in [2, 2**32 - 1].

        Returns:
            d in [0, phi - 1] with d * e % phi == 1, or None if gcd(e, phi) != 1.

        Raises:
            ValueError: If either argument is out of range.
        """
        _check_int("e", e, 0, UINT32_MAX)
        _check_int("phi", phi, 2, UINT32_MAX)
        g, x, _ = extended_euclidean(e, phi)
        if g != 1:
            return None
        return (x % phi + phi) % phi


_DEFAULT = RsaMath()


def generate_prime() -> int:
    """Module-level `RsaMath.generate_prime` on the shared system-random instance."""
    return _DEFAULT.generate_prime()


def totient(p: int, q: int) -> int:
    return _DEFAULT.totient(p, q)


def select_public_exponent(phi: int) -> int:
    """Module-level `RsaMath.select_public_exponent` on the shared system-random instance."""
    return _DEFAULT.select_public_exponent(phi)


def modular_inverse(e: int, phi: int) -> int | None:
    return _DEFAULT.modular_inverse(e, phi)
