"""Elementary number theory: Euclid, modular inverses, CRT and fast powers."""

from __future__ import annotations

from collections.abc import Sequence
from math import prod


def gcd(a: int, b: int) -> int:
    """Return the greatest common divisor of ``a`` and ``b`` by Euclid's algorithm."""
    a, b = abs(a), abs(b)
    while a:
        a, b = b % a, a
    return b


def lcm(a: int, b: int) -> int:
    """Return the least common multiple of ``a`` and ``b``.

    Uses ``lcm(a, b) * gcd(a, b) == a * b``.
    """
    divisor = gcd(a, b)
    if divisor == 0:
        raise ValueError("lcm is undefined when both arguments are zero")
    return abs(a * b) // divisor


def extended_euclid(a: int, m: int) -> tuple[int, int]:
    """Return ``(x, y)`` such that ``a*x + m*y == gcd(a, m)``."""
    old_r, r = a, m
    old_x, x = 1, 0
    old_y, y = 0, 1
    while r:
        quotient = old_r // r
        old_r, r = r, old_r - quotient * r
        old_x, x = x, old_x - quotient * x
        old_y, y = y, old_y - quotient * y
    return old_x, old_y


def mod_inverse(a: int, m: int) -> int:
    """Return the multiplicative inverse of ``a`` modulo ``m``.

    Raises ValueError when ``m`` is not positive or ``gcd(a, m) != 1``.
    """
    if m <= 0:
        raise ValueError("modulus must be positive")
    if gcd(a, m) != 1:
        raise ValueError(f"inverse of {a} modulo {m} does not exist")
    x, _ = extended_euclid(a % m, m)
    return x % m


def chinese_remainder(moduli: Sequence[int], remainders: Sequence[int]) -> int:
    """Solve ``x % moduli[i] == remainders[i]`` for pairwise coprime moduli.

    Returns the smallest non-negative solution.
    """
    if len(moduli) != len(remainders):
        raise ValueError("moduli and remainders must have the same length")
    if any(modulus <= 0 for modulus in moduli):
        raise ValueError("moduli must be positive")
    product = prod(moduli)
    total = 0
    for modulus, remainder in zip(moduli, remainders):
        partial = product // modulus
        total += remainder * partial * mod_inverse(partial, modulus)
    return total % product


def fast_power(base: int, exponent: int) -> int:
    """Return ``base ** exponent`` by binary exponentiation."""
    if exponent < 0:
        raise ValueError("exponent must be non-negative")
    result = 1
    while exponent:
        if exponent & 1:
            result *= base
        base *= base
        exponent >>= 1
    return result


def fast_modular_power(base: int, exponent: int, modulus: int) -> int:
    """Return ``base ** exponent % modulus`` by binary exponentiation."""
    if modulus <= 0:
        raise ValueError("modulus must be positive")
    if exponent < 0:
        raise ValueError("exponent must be non-negative")
    result = 1
    base %= modulus
    while exponent:
        if exponent & 1:
            result = (result * base) % modulus
        base = (base * base) % modulus
        exponent >>= 1
    return result % modulus