"""Number theory: gcd/lcm, modular powers and inverses, the Chinese remainder theorem,
Miller-Rabin primality, Pollard's rho factorisation and palindrome counting."""

from __future__ import annotations

from collections.abc import Iterable

_WITNESSES = (2, 325, 9375, 28178, 450775, 9780504, 1795265022)


def gcd(a: int, b: int) -> int:
    """Return the greatest common divisor of ``a`` and ``b``."""
    while b:
        a, b = b, a % b
    return abs(a)


def lcm(a: int, b: int) -> int:
    """Return the least common multiple; if either argument is 0, return their sum."""
    if a and b:
        return a * (b // gcd(a, b))
    return a + b


def mod_pow(base: int, exponent: int, modulus: int) -> int:
    """Return ``base ** exponent`` reduced by ``modulus``; an exponent of 0 gives 1."""
    if exponent < 0:
        raise ValueError("exponent must be non-negative")
    if modulus <= 0:
        raise ValueError("modulus must be positive")
    if exponent == 0:
        return 1
    return pow(base % modulus, exponent, modulus)


def extended_gcd(a: int, b: int) -> tuple[int, int, int]:
    """Return ``(g, x, y)`` with ``a * x + b * y == g == gcd(a, b)``."""
    if a == 0:
        return b, 0, 1
    g, x, y = extended_gcd(b % a, a)
    return g, y - (b // a) * x, x


def mod_inverse(a: int, m: int) -> int:
    """Return ``x`` in ``[0, m)`` with ``a * x`` congruent to ``gcd(a, m)`` modulo ``m``."""
    if m <= 0:
        raise ValueError("modulus must be positive")
    return extended_gcd(a, m)[1] % m


def crt(remainders: Iterable[int], moduli: Iterable[int]) -> tuple[int, int]:
    """Solve ``x = r_i (mod m_i)`` for every ``i``.

    Returns ``(y, m)`` with ``x = y (mod m)`` and ``m`` the lcm of the moduli,
    or ``(0, 0)`` if the system has no solution.
    """
    rs = list(remainders)
    ms = list(moduli)
    if len(rs) != len(ms):
        raise ValueError("remainders and moduli differ in length")
    r0, m0 = 0, 1
    for r1, m1 in zip(rs, ms):
        if m1 <= 0:
            raise ValueError("moduli must be positive")
        r1 %= m1
        if m0 < m1:
            r0, r1, m0, m1 = r1, r0, m1, m0
        if m0 % m1 == 0:
            if r0 % m1 != r1:
                return 0, 0
            continue
        g = gcd(m0, m1)
        if (r1 - r0) % g:
            return 0, 0
        u0, u1 = m0 // g, m1 // g
        x = (r1 - r0) // g % u1 * mod_inverse(u0, u1) % u1
        r0 += x * m0
        m0 *= u1
    return r0, m0


def is_prime(n: int) -> bool:
    """Deterministic Miller-Rabin test, exact for every ``n`` below 2**64."""
    if n < 2 or n % 2 == 0 or n % 3 == 0:
        return n in (2, 3)
    k = ((n - 1) & -(n - 1)).bit_length() - 1
    d = (n - 1) >> k
    for a in _WITNESSES:
        p = pow(a % n, d, n)
        i = k
        while p not in (1, n - 1) and a % n:
            i -= 1
            if i < 0:
                break
            p = p * p % n
        if p != n - 1 and i != k:
            return False
    return True


def pollard(n: int) -> int:
    """Return a non-trivial divisor of the composite ``n`` using Pollard's rho."""
    if n < 4 or is_prime(n):
        raise ValueError(f"{n} has no non-trivial divisor")

    def step(v: int) -> int:
        return (v * v + 3) % n

    x = y = 0
    t, p, i = 30, 2, 1
    while True:
        keep_going = t % 40 != 0 or gcd(p, n) == 1
        t += 1
        if not keep_going:
            break
        if x == y:
            i += 1
            x = i
            y = step(x)
        q = p * abs(x - y) % n
        if q:
            p = q
        x = step(x)
        y = step(step(y))
    return gcd(p, n)


def factor(n: int) -> list[int]:
    """Return the prime factors of ``n`` in ascending order, repeated by multiplicity."""
    if n < 1:
        raise ValueError("only positive integers can be factored")
    if n == 1:
        return []
    if is_prime(n):
        return [n]
    d = pollard(n)
    return sorted(factor(d) + factor(n // d))


def count_palindromes(n: int | str) -> int:
    """Return how many positive decimal palindromes are at most ``n``."""
    value = int(n)
    if value < 0:
        raise ValueError("n must be non-negative")
    digits = str(value)
    length = len(digits)
    count = sum(9 * 10 ** ((i - 1) // 2) for i in range(1, length))
    half = digits[: (length + 1) // 2]
    count += int(half) - 10 ** ((length - 1) // 2)
    full = half + half[: length // 2][::-1]
    if full <= digits:
        count += 1
    return count