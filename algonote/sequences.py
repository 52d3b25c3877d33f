"""Longest increasing subsequence, permutations and combinations."""

from __future__ import annotations

from bisect import bisect_left
from collections.abc import Iterable, Iterator


def lis(values: Iterable) -> list:
    """Return one longest strictly increasing subsequence of ``values``."""
    items = list(values)
    tails: list = []
    positions = []
    for x in items:
        loc = bisect_left(tails, x)
        tails[loc:loc + 1] = [x]
        positions.append(loc)
    result = list(tails)
    target = len(tails) - 1
    for x, loc in zip(reversed(items), reversed(positions)):
        if loc == target:
            result[target] = x
            target -= 1
    return result


def _step(values: Iterable, ascending: bool) -> list | None:
    items = list(values)

    def before(a, b) -> bool:
        return a < b if ascending else b < a

    i = len(items) - 2
    while i >= 0 and not before(items[i], items[i + 1]):
        i -= 1
    if i < 0:
        return None
    j = len(items) - 1
    while not before(items[i], items[j]):
        j -= 1
    items[i], items[j] = items[j], items[i]
    items[i + 1:] = reversed(items[i + 1:])
    return items


def next_permutation(values: Iterable) -> list | None:
    """Return the next arrangement in lexicographic order, or ``None`` after the last."""
    return _step(values, ascending=True)


def prev_permutation(values: Iterable) -> list | None:
    """Return the previous arrangement in lexicographic order, or ``None`` before the first."""
    return _step(values, ascending=False)


def permutations(values: Iterable) -> Iterator[list]:
    """Yield ``values`` and every later distinct arrangement, in order."""
    current: list | None = list(values)
    while current is not None:
        yield current
        current = next_permutation(current)


def combinations(n: int, k: int) -> Iterator[tuple[int, ...]]:
    """Yield every ``k``-subset of ``1..n`` as a sorted tuple, lexicographically."""
    if not 0 <= k <= n:
        raise ValueError(f"cannot choose {k} items out of {n}")
    for mask in permutations([0] * k + [1] * (n - k)):
        yield tuple(i for i, bit in enumerate(mask, start=1) if bit == 0)