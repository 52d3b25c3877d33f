"""Segment trees: lazy range-add/range-sum, and a persistent point-assign/range-sum tree."""

from __future__ import annotations

from bisect import bisect_right
from collections.abc import Iterable


def _nonempty(values: Iterable[int]) -> list[int]:
    data = list(values)
    if not data:
        raise ValueError("a segment tree needs at least one element")
    return data


class LazySegmentTree:
    """Range add and range sum; bounds are zero-based and inclusive."""

    def __init__(self, values: Iterable[int]) -> None:
        data = _nonempty(values)
        self.n = len(data)
        self._tree = [0] * (4 * self.n)
        self._lazy = [0] * (4 * self.n)
        self._build(1, 0, self.n - 1, data)

    def _build(self, idx: int, s: int, e: int, data: list[int]) -> None:
        if s == e:
            self._tree[idx] = data[s]
            return
        mid = (s + e) // 2
        self._build(2 * idx, s, mid, data)
        self._build(2 * idx + 1, mid + 1, e, data)
        self._tree[idx] = self._tree[2 * idx] + self._tree[2 * idx + 1]

    def _apply(self, idx: int, s: int, e: int, delta: int) -> None:
        self._tree[idx] += (e - s + 1) * delta
        if s != e:
            self._lazy[2 * idx] += delta
            self._lazy[2 * idx + 1] += delta

    def _push(self, idx: int, s: int, e: int) -> None:
        if self._lazy[idx]:
            self._apply(idx, s, e, self._lazy[idx])
            self._lazy[idx] = 0

    def _update(self, idx: int, s: int, e: int, left: int, right: int, delta: int) -> None:
        self._push(idx, s, e)
        if left > e or right < s:
            return
        if left <= s and e <= right:
            self._apply(idx, s, e, delta)
            return
        mid = (s + e) // 2
        self._update(2 * idx, s, mid, left, right, delta)
        self._update(2 * idx + 1, mid + 1, e, left, right, delta)
        self._tree[idx] = self._tree[2 * idx] + self._tree[2 * idx + 1]

    def _query(self, idx: int, s: int, e: int, left: int, right: int) -> int:
        self._push(idx, s, e)
        if left > e or right < s:
            return 0
        if left <= s and e <= right:
            return self._tree[idx]
        mid = (s + e) // 2
        return self._query(2 * idx, s, mid, left, right) + self._query(
            2 * idx + 1, mid + 1, e, left, right
        )

    def update(self, left: int, right: int, delta: int) -> None:
        """Add ``delta`` to every element in ``[left, right]``."""
        if left <= right:
            self._update(1, 0, self.n - 1, left, right, delta)

    def query(self, left: int, right: int) -> int:
        """Return the sum of ``[left, right]``; an empty range sums to 0."""
        if left > right:
            return 0
        return self._query(1, 0, self.n - 1, left, right)


class PersistentSegmentTree:
    """Point assignment and range sum, queryable at any past version.

    Version 0 holds the initial values; update versions must not decrease.
    """

    def __init__(self, values: Iterable[int]) -> None:
        data = _nonempty(values)
        self.n = len(data)
        self._history: list[list[tuple[int, int]]] = [[] for _ in range(4 * self.n)]
        self._latest = 0
        self._build(1, 0, self.n - 1, data)

    def _combine(self, idx: int, version: int) -> None:
        total = self._history[2 * idx][-1][1] + self._history[2 * idx + 1][-1][1]
        self._history[idx].append((version, total))

    def _build(self, idx: int, s: int, e: int, data: list[int]) -> None:
        if s == e:
            self._history[idx].append((0, data[s]))
            return
        mid = (s + e) // 2
        self._build(2 * idx, s, mid, data)
        self._build(2 * idx + 1, mid + 1, e, data)
        self._combine(idx, 0)

    def _update(self, idx: int, s: int, e: int, pos: int, value: int, version: int) -> None:
        if pos < s or pos > e:
            return
        if s == e:
            self._history[idx].append((version, value))
            return
        mid = (s + e) // 2
        self._update(2 * idx, s, mid, pos, value, version)
        self._update(2 * idx + 1, mid + 1, e, pos, value, version)
        self._combine(idx, version)

    def _query(self, idx: int, s: int, e: int, left: int, right: int, version: int) -> int:
        if left > e or right < s:
            return 0
        if left <= s and e <= right:
            history = self._history[idx]
            return history[bisect_right(history, (version, float("inf"))) - 1][1]
        mid = (s + e) // 2
        return self._query(2 * idx, s, mid, left, right, version) + self._query(
            2 * idx + 1, mid + 1, e, left, right, version
        )

    def update(self, pos: int, value: int, version: int) -> None:
        """Set element ``pos`` to ``value`` as of ``version``."""
        if version < self._latest:
            raise ValueError(f"version {version} is older than {self._latest}")
        self._latest = version
        self._update(1, 0, self.n - 1, pos, value, version)

    def query(self, left: int, right: int, version: int) -> int:
        """Return the sum of ``[left, right]`` as it stood at ``version``."""
        if version < 0:
            raise ValueError("versions start at 0")
        if left > right:
            return 0
        return self._query(1, 0, self.n - 1, left, right, version)