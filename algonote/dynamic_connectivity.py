"""Offline dynamic connectivity: edge insertions, deletions and connectivity questions
answered together with a segment tree over time and a rollback union-find."""

from __future__ import annotations

from collections.abc import Iterable
from enum import IntEnum


class QueryType(IntEnum):
    """Kind of an operation in an offline connectivity query list."""

    ADD = 1
    REMOVE = 2
    ASK = 3


class _RollbackDisjointSet:
    def __init__(self, n: int) -> None:
        self.parent = list(range(n))
        self.size = [1] * n

    def find(self, x: int) -> int:
        while self.parent[x] != x:
            x = self.parent[x]
        return x

    def union(self, x: int, y: int) -> tuple[int, int] | None:
        x, y = self.find(x), self.find(y)
        if x == y:
            return None
        if self.size[x] < self.size[y]:
            x, y = y, x
        self.parent[y] = x
        self.size[x] += self.size[y]
        return x, y

    def undo(self, x: int, y: int) -> None:
        self.size[x] -= self.size[y]
        self.parent[y] = y


class OfflineDynamicConnectivity:
    """Record edge additions, removals and connectivity questions, then answer them all.

    Nodes are ``0..n-1``. Edges are undirected; an edge may be present at most once.
    """

    def __init__(self, n: int) -> None:
        if n < 0:
            raise ValueError("node count must be non-negative")
        self.n = n
        self._queries: list[tuple[QueryType, int, int]] = []
        self._present: set[tuple[int, int]] = set()

    def _edge(self, u: int, v: int) -> tuple[int, int]:
        for node in (u, v):
            if not 0 <= node < self.n:
                raise ValueError(f"node {node} is out of range")
        return (u, v) if u <= v else (v, u)

    def add_edge(self, u: int, v: int) -> None:
        """Record the insertion of edge ``u``-``v``."""
        edge = self._edge(u, v)
        if edge in self._present:
            raise ValueError(f"edge {edge} is already present")
        self._present.add(edge)
        self._queries.append((QueryType.ADD, *edge))

    def remove_edge(self, u: int, v: int) -> None:
        """Record the removal of edge ``u``-``v``, which must be present."""
        edge = self._edge(u, v)
        if edge not in self._present:
            raise ValueError(f"edge {edge} is not present")
        self._present.remove(edge)
        self._queries.append((QueryType.REMOVE, *edge))

    def ask(self, u: int, v: int) -> None:
        """Record a question: are ``u`` and ``v`` connected at this point?"""
        self._queries.append((QueryType.ASK, *self._edge(u, v)))

    def run(self) -> list[bool]:
        """Answer every recorded question, in the order they were asked."""
        q = len(self._queries)
        if q == 0:
            return []
        segments: list[list[tuple[int, int]]] = [[] for _ in range(4 * q)]

        def insert(node: int, s: int, e: int, left: int, right: int, edge: tuple[int, int]) -> None:
            if right < s or e < left:
                return
            if left <= s and e <= right:
                segments[node].append(edge)
                return
            mid = (s + e) // 2
            insert(2 * node, s, mid, left, right, edge)
            insert(2 * node + 1, mid + 1, e, left, right, edge)

        opened: dict[tuple[int, int], int] = {}
        for time, (kind, u, v) in enumerate(self._queries):
            if kind is QueryType.ADD:
                opened[(u, v)] = time
            elif kind is QueryType.REMOVE:
                insert(1, 0, q - 1, opened.pop((u, v)), time, (u, v))
        for edge, start in opened.items():
            insert(1, 0, q - 1, start, q - 1, edge)

        dsu = _RollbackDisjointSet(self.n)
        answers: list[bool] = []

        def walk(node: int, s: int, e: int) -> None:
            merged = []
            for u, v in segments[node]:
                joined = dsu.union(u, v)
                if joined is not None:
                    merged.append(joined)
            if s == e:
                kind, u, v = self._queries[s]
                if kind is QueryType.ASK:
                    answers.append(dsu.find(u) == dsu.find(v))
            else:
                mid = (s + e) // 2
                walk(2 * node, s, mid)
                walk(2 * node + 1, mid + 1, e)
            for x, y in reversed(merged):
                dsu.undo(x, y)

        walk(1, 0, q - 1)
        return answers


def offline_connectivity(n: int, queries: Iterable[tuple[int, int, int]]) -> list[bool]:
    """Answer ``(kind, u, v)`` queries, where ``kind`` is a :class:`QueryType` or its value."""
    solver = OfflineDynamicConnectivity(n)
    actions = {
        QueryType.ADD: solver.add_edge,
        QueryType.REMOVE: solver.remove_edge,
        QueryType.ASK: solver.ask,
    }
    for kind, u, v in queries:
        actions[QueryType(kind)](u, v)
    return solver.run()