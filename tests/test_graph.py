import random
from collections import deque

import pytest

from algonote.graph import (
    LowestCommonAncestor,
    centroid_decomposition,
    dijkstra,
    kruskal,
    prim,
    strongly_connected_components,
)


def _reachable(adj, start):
    seen = {start}
    queue = deque([start])
    while queue:
        node = queue.popleft()
        for nxt in adj[node]:
            if nxt not in seen:
                seen.add(nxt)
                queue.append(nxt)
    return seen


def _random_digraph(rng, n, m):
    adj = [[] for _ in range(n)]
    for _ in range(m):
        adj[rng.randrange(n)].append(rng.randrange(n))
    return adj


def _random_tree(rng, n):
    adj = [[] for _ in range(n)]
    for v in range(1, n):
        u = rng.randrange(v)
        adj[u].append(v)
        adj[v].append(u)
    return adj


def _random_weighted(rng, n, m, connected=True):
    adj = [[] for _ in range(n)]
    if connected:
        for v in range(1, n):
            u = rng.randrange(v)
            w = rng.randint(1, 20)
            adj[u].append((v, w))
            adj[v].append((u, w))
    for _ in range(m):
        u, v = rng.randrange(n), rng.randrange(n)
        w = rng.randint(1, 20)
        adj[u].append((v, w))
        adj[v].append((u, w))
    return adj


def test_scc_single_cycle():
    assert strongly_connected_components([[1], [2], [0]]) == [[0, 1, 2]]


def test_scc_chain_in_reverse_topological_order():
    assert strongly_connected_components([[1], [2], []]) == [[2], [1], [0]]


@pytest.mark.parametrize("seed", range(10))
def test_scc_partition_and_reachability(seed):
    rng = random.Random(seed)
    n = rng.randint(1, 15)
    adj = _random_digraph(rng, n, rng.randint(0, 30))
    components = strongly_connected_components(adj)
    nodes = [v for comp in components for v in comp]
    assert sorted(nodes) == list(range(n))
    reach = [_reachable(adj, v) for v in range(n)]
    index = {v: i for i, comp in enumerate(components) for v in comp}
    for comp in components:
        assert comp == sorted(comp)
        for u in comp:
            for v in comp:
                assert v in reach[u]
    for u in range(n):
        for v in range(n):
            if index[u] != index[v]:
                assert not (v in reach[u] and u in reach[v])
    # edges never point from an earlier-closed component to a later one
    for u in range(n):
        for v in adj[u]:
            assert index[v] <= index[u]


def test_dijkstra_small_graph():
    adj = [[(1, 4), (2, 1)], [], [(1, 2)]]
    assert dijkstra(adj, 0) == [0, 3, 1]


def test_dijkstra_unreachable_is_minus_one():
    adj = [[(1, 5)], [], []]
    result = dijkstra(adj, 0)
    assert result[2] == -1
    assert result[1] == 5


@pytest.mark.parametrize("seed", range(10))
def test_dijkstra_distances_are_tight(seed):
    rng = random.Random(seed)
    n = rng.randint(1, 12)
    adj = [[] for _ in range(n)]
    for _ in range(rng.randint(0, 30)):
        adj[rng.randrange(n)].append((rng.randrange(n), rng.randint(0, 9)))
    dist = dijkstra(adj, 0)
    assert dist[0] == 0
    plain = [[v for v, _ in edges] for edges in adj]
    reach = _reachable(plain, 0)
    for v in range(n):
        assert (dist[v] >= 0) == (v in reach)
    for u in reach:
        for v, w in adj[u]:
            assert dist[v] <= dist[u] + w
    for v in reach - {0}:
        assert any(
            dist[u] >= 0 and dist[u] + w == dist[v]
            for u in range(n)
            for x, w in adj[u]
            if x == v
        )


def test_mst_single_edge_uses_its_weight():
    adj = [[(1, 7)], [(0, 7)]]
    assert prim(adj) == 7
    assert kruskal(adj) == 7


@pytest.mark.parametrize("seed", range(15))
def test_prim_and_kruskal_agree(seed):
    rng = random.Random(seed)
    n = rng.randint(1, 12)
    adj = _random_weighted(rng, n, rng.randint(0, 20))
    total = prim(adj)
    assert total == kruskal(adj)
    assert total >= 0


def test_mst_disconnected_returns_minus_one():
    adj = [[(1, 2)], [(0, 2)], []]
    assert prim(adj) == -1
    assert kruskal(adj) == -1


def test_mst_empty_graph_raises():
    with pytest.raises(ValueError):
        prim([])
    with pytest.raises(ValueError):
        kruskal([])


def _parents(tree, root):
    parent = {root: None}
    queue = deque([root])
    while queue:
        node = queue.popleft()
        for nxt in tree[node]:
            if nxt not in parent:
                parent[nxt] = node
                queue.append(nxt)
    return parent


def _ancestors(parent, node):
    chain = []
    while node is not None:
        chain.append(node)
        node = parent[node]
    return chain


@pytest.mark.parametrize("seed", range(8))
def test_lca_is_deepest_common_ancestor(seed):
    rng = random.Random(seed)
    n = rng.randint(1, 40)
    tree = _random_tree(rng, n)
    root = rng.randrange(n)
    finder = LowestCommonAncestor(tree, root)
    parent = _parents(tree, root)
    for v in range(n):
        assert finder.depth(v) == len(_ancestors(parent, v)) - 1
    for _ in range(50):
        u, v = rng.randrange(n), rng.randrange(n)
        result = finder.lca(u, v)
        common = set(_ancestors(parent, u)) & set(_ancestors(parent, v))
        assert result in common
        assert finder.depth(result) == max(finder.depth(c) for c in common)
        assert finder.lca(v, u) == result


def test_lca_basic_relations():
    tree = [[1, 2], [0, 3], [0], [1]]
    finder = LowestCommonAncestor(tree)
    assert finder.lca(3, 3) == 3
    assert finder.lca(3, 2) == 0
    assert finder.lca(3, 1) == 1


def test_lca_rejects_disconnected_tree():
    with pytest.raises(ValueError):
        LowestCommonAncestor([[1], [0], []])


def test_lca_rejects_unknown_node():
    finder = LowestCommonAncestor([[1], [0]])
    with pytest.raises(ValueError):
        finder.lca(0, 5)


def test_centroid_of_path_is_middle():
    n = 7
    adj = [[v for v in (u - 1, u + 1) if 0 <= v < n] for u in range(n)]
    depth, parent = centroid_decomposition(adj)
    assert parent[3] == -1
    assert depth[3] == 0


@pytest.mark.parametrize("seed", range(10))
def test_centroid_decomposition_properties(seed):
    rng = random.Random(seed)
    n = rng.randint(1, 60)
    adj = _random_tree(rng, n)
    depth, parent = centroid_decomposition(adj)
    roots = [v for v in range(n) if parent[v] == -1]
    assert len(roots) == 1
    assert depth[roots[0]] == 0
    for v in range(n):
        if parent[v] != -1:
            assert depth[v] == depth[parent[v]] + 1
        assert depth[v] <= n.bit_length()
    for c in range(n):
        members = {v for v in range(n) if c in _ancestors({x: (None if parent[x] == -1 else parent[x]) for x in range(n)}, v)}
        # the members minus c split into pieces of at most half the size
        rest = members - {c}
        seen = set()
        for start in rest:
            if start in seen:
                continue
            piece = {start}
            queue = deque([start])
            while queue:
                node = queue.popleft()
                for nxt in adj[node]:
                    if nxt in rest and nxt not in piece:
                        piece.add(nxt)
                        queue.append(nxt)
            seen |= piece
            assert len(piece) <= len(members) // 2


def test_centroid_empty():
    assert centroid_decomposition([]) == ([], [])