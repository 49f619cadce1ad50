"""Prime testing, the sieve of Eratosthenes and factorisation by sieved primes."""

from __future__ import annotations

DEFAULT_LIMIT = 100000


def is_prime(n: int) -> bool:
    """Return True if ``n`` is prime, by trial division."""
    if n < 2:
        return False
    divisor = 2
    while divisor * divisor <= n:
        if n % divisor == 0:
            return False
        divisor += 1
    return True


def sieve(limit: int) -> list[bool]:
    """Return a list whose entry ``i`` tells whether ``i`` is prime, for 0..limit."""
    if limit < 0:
        raise ValueError("limit must be non-negative")
    flags = [True] * (limit + 1)
    flags[0] = False
    if limit >= 1:
        flags[1] = False
    candidate = 2
    while candidate * candidate <= limit:
        if flags[candidate]:
            flags[candidate * candidate :: candidate] = [False] * len(
                range(candidate * candidate, limit + 1, candidate)
            )
        candidate += 1
    return flags


def primes_up_to(limit: int) -> list[int]:
    """Return all primes from 0 to ``limit`` inclusive, in ascending order."""
    return [number for number, prime in enumerate(sieve(limit)) if prime]


def prime_factors(n: int, limit: int = DEFAULT_LIMIT) -> list[int]:
    """Return the prime factors of ``n`` in ascending order, with repetition.

    Only primes up to ``limit`` are tried; ValueError is raised if they do
    not suffice to factor ``n`` completely.
    """
    if n < 1:
        raise ValueError("n must be a positive integer")
    factors: list[int] = []
    for prime in primes_up_to(limit):
        if n == 1:
            break
        while n % prime == 0:
            n //= prime
            factors.append(prime)
    if n != 1:
        raise ValueError(f"primes up to {limit} do not factor the number completely")
    return factors