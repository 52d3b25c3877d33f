"""Binomial coefficients modulo any integer, via prime powers and the CRT."""

from __future__ import annotations

from collections import Counter
from collections.abc import Iterable

from algonote.number_theory import crt, factor, is_prime, mod_inverse


def _pairs(queries: Iterable[tuple[int, int]]) -> list[tuple[int, int]]:
    pairs = [(int(n), int(r)) for n, r in queries]
    if any(n < 0 or r < 0 for n, r in pairs):
        raise ValueError("binomial arguments must be non-negative")
    return pairs


def _solve_prime_power(pairs: list[tuple[int, int]], p: int, e: int) -> list[int]:
    mod = p**e
    units = [1] * mod
    for i in range(1, mod):
        units[i] = units[i - 1] if i % p == 0 else units[i - 1] * i % mod

    def legendre(n: int) -> int:
        total = 0
        while n:
            n //= p
            total += n
        return total

    def unit_factorial(n: int) -> int:
        result = 1
        while n:
            cycles, rest = divmod(n, mod)
            result = result * units[rest] * (units[-1] if cycles & 1 else 1) % mod
            n //= p
        return result

    def binom(n: int, r: int) -> int:
        if n < r:
            return 0
        if r in (0, n):
            return 1
        a = legendre(n) - legendre(r) - legendre(n - r)
        if a >= e:
            return 0
        denominator = unit_factorial(r) * unit_factorial(n - r) % mod
        return pow(p, a, mod) * unit_factorial(n) * mod_inverse(denominator, mod) % mod

    return [binom(n, r) for n, r in pairs]


def binomial_mod_prime_power(queries: Iterable[tuple[int, int]], p: int, e: int) -> list[int]:
    """Return ``C(n, r) mod p**e`` for every ``(n, r)`` query."""
    if not is_prime(p):
        raise ValueError(f"{p} is not prime")
    if e < 1:
        raise ValueError("exponent must be at least 1")
    return _solve_prime_power(_pairs(queries), p, e)


def binomial_mod(queries: Iterable[tuple[int, int]], mod: int) -> list[int]:
    """Return ``C(n, r) mod mod`` for every ``(n, r)`` query."""
    if mod < 1:
        raise ValueError("modulus must be positive")
    pairs = _pairs(queries)
    powers = sorted(Counter(factor(mod)).items())
    if not powers:
        return [0] * len(pairs)
    moduli = [p**e for p, e in powers]
    residues = [_solve_prime_power(pairs, p, e) for p, e in powers]
    return [crt(list(column), moduli)[0] for column in zip(*residues)]