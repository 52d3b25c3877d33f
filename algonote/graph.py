"""Graph algorithms: SCC, shortest paths, MST, LCA and centroid decomposition."""

from __future__ import annotations

import heapq
from collections.abc import Sequence


def strongly_connected_components(adj: Sequence[Sequence[int]]) -> list[list[int]]:
    """Return sorted SCCs of a directed graph in the order Tarjan's algorithm closes them."""
    n = len(adj)
    order = [0] * n
    low = [0] * n
    done = [False] * n
    stack: list[int] = []
    components: list[list[int]] = []
    counter = 0

    def visit(node: int) -> None:
        nonlocal counter
        counter += 1
        order[node] = low[node] = counter
        stack.append(node)
        work.append((node, iter(adj[node])))

    for root in range(n):
        if order[root]:
            continue
        work: list = []
        visit(root)
        while work:
            node, neighbours = work[-1]
            for nxt in neighbours:
                if not order[nxt]:
                    visit(nxt)
                    break
                if not done[nxt]:
                    low[node] = min(low[node], order[nxt])
            else:
                work.pop()
                if work:
                    parent = work[-1][0]
                    low[parent] = min(low[parent], low[node])
                if low[node] == order[node]:
                    cut = stack.index(node)
                    component = stack[cut:]
                    del stack[cut:]
                    for member in component:
                        done[member] = True
                    components.append(sorted(component))
    return components


def dijkstra(adj: Sequence[Sequence[tuple[int, int]]], source: int) -> list[int]:
    """Return shortest distances from ``source``; unreachable nodes get ``-1``."""
    dist: list[int | None] = [None] * len(adj)
    dist[source] = 0
    heap = [(0, source)]
    while heap:
        d, node = heapq.heappop(heap)
        if d > dist[node]:
            continue
        for nxt, weight in adj[node]:
            if dist[nxt] is None or d + weight < dist[nxt]:
                dist[nxt] = d + weight
                heapq.heappush(heap, (d + weight, nxt))
    return [-1 if d is None else d for d in dist]


def _require_vertices(adj: Sequence) -> int:
    if not adj:
        raise ValueError("graph has no vertices")
    return len(adj)


def prim(adj: Sequence[Sequence[tuple[int, int]]]) -> int:
    """Return the weight of a minimum spanning tree, or ``-1`` if disconnected."""
    n = _require_vertices(adj)
    visited = [False] * n
    heap = [(0, 0)]
    total = count = 0
    while heap:
        weight, node = heapq.heappop(heap)
        if visited[node]:
            continue
        visited[node] = True
        total += weight
        count += 1
        for nxt, cost in adj[node]:
            if not visited[nxt]:
                heapq.heappush(heap, (cost, nxt))
    return total if count == n else -1


def kruskal(adj: Sequence[Sequence[tuple[int, int]]]) -> int:
    """Return the weight of a minimum spanning tree, or ``-1`` if disconnected."""
    n = _require_vertices(adj)
    parent = list(range(n))

    def find(x: int) -> int:
        while parent[x] != x:
            parent[x] = parent[parent[x]]
            x = parent[x]
        return x

    total = 0
    joined = 0
    for weight, u, v in sorted((w, u, v) for u, row in enumerate(adj) for v, w in row):
        ru, rv = find(u), find(v)
        if ru != rv:
            parent[rv] = ru
            total += weight
            joined += 1
    return total if joined == n - 1 else -1


class LowestCommonAncestor:
    """Binary-lifting LCA on a tree given as neighbour lists, rooted at ``root``."""

    def __init__(self, tree: Sequence[Sequence[int]], root: int = 0) -> None:
        n = len(tree)
        if not 0 <= root < n:
            raise ValueError(f"root {root} is not a node of the tree")
        self.n = n
        self._depth = [0] * n
        parent = [root] * n
        seen = [False] * n
        seen[root] = True
        stack = [root]
        while stack:
            node = stack.pop()
            for nxt in tree[node]:
                if not seen[nxt]:
                    seen[nxt] = True
                    self._depth[nxt] = self._depth[node] + 1
                    parent[nxt] = node
                    stack.append(nxt)
        if not all(seen):
            raise ValueError("tree is not connected")
        self._up = [parent]
        for _ in range(1, max(1, (n - 1).bit_length())):
            prev = self._up[-1]
            self._up.append([prev[prev[v]] for v in range(n)])

    def _check(self, *nodes: int) -> None:
        for node in nodes:
            if not 0 <= node < self.n:
                raise ValueError(f"node {node} is not in the tree")

    def depth(self, node: int) -> int:
        """Return the number of edges between ``node`` and the root."""
        self._check(node)
        return self._depth[node]

    def lca(self, u: int, v: int) -> int:
        """Return the lowest common ancestor of ``u`` and ``v``."""
        self._check(u, v)
        if self._depth[u] < self._depth[v]:
            u, v = v, u
        diff = self._depth[u] - self._depth[v]
        for k, row in enumerate(self._up):
            if diff >> k & 1:
                u = row[u]
        if u == v:
            return u
        for row in reversed(self._up):
            if row[u] != row[v]:
                u, v = row[u], row[v]
        return self._up[0][u]


def centroid_decomposition(adj: Sequence[Sequence[int]]) -> tuple[list[int], list[int]]:
    """Return ``(depth, parent)`` of every node in the centroid tree of a tree on ``0..n-1``.

    The first centroid has depth 0 and parent ``-1``.
    """
    n = len(adj)
    if n == 0:
        return [], []
    size = [1] * n
    order = [0]
    dfs_parent = [-1] * n
    seen = [False] * n
    seen[0] = True
    for node in order:
        for nxt in adj[node]:
            if not seen[nxt]:
                seen[nxt] = True
                dfs_parent[nxt] = node
                order.append(nxt)
    if len(order) != n:
        raise ValueError("tree is not connected")
    for node in reversed(order[1:]):
        size[dfs_parent[node]] += size[node]

    level = [0] * n  # 0 while not yet a centroid, otherwise depth + 1
    parent = [-1] * n
    pending = [(0, -1)]
    while pending:
        cur, prev = pending.pop()
        moved = True
        while moved:
            moved = False
            for nxt in adj[cur]:
                if not level[nxt] and size[cur] < 2 * size[nxt]:
                    size[cur] -= size[nxt]
                    size[nxt] += size[cur]
                    cur, moved = nxt, True
                    break
        parent[cur] = prev
        level[cur] = (level[prev] if prev >= 0 else 0) + 1
        pending.extend((nxt, cur) for nxt in adj[cur] if not level[nxt])
    return [lv - 1 for lv in level], parent