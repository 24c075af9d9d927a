"""Single-source and all-pairs shortest paths on weighted graphs.

Vertices are numbered from 1 to ``n``. Distance lists are indexed 0..n with
``INF`` for unreachable vertices; predecessor entries are ``None`` there.
"""

from __future__ import annotations

import heapq
from collections.abc import Callable, Iterable, Sequence
from typing import Optional

from .traversal import INF, Adjacency, _neighbors

Edge = tuple[int, int, float]


def bellman_ford(
    edges: Iterable[Edge], source: int, n: int
) -> tuple[list[float], list[Optional[int]]]:
    """Distances and predecessors from ``source`` over directed ``(u, v, w)`` edges."""
    edges = list(edges)
    dist: list[float] = [INF] * (n + 1)
    pred: list[Optional[int]] = [None] * (n + 1)
    dist[source] = 0
    pred[source] = source
    for _ in range(n - 1):
        changed = False
        for u, v, w in edges:
            if dist[u] < INF and dist[v] > dist[u] + w:
                dist[v] = dist[u] + w
                pred[v] = u
                changed = True
        if not changed:
            break
    return dist, pred


def has_negative_cycle(edges: Iterable[Edge], source: int, n: int) -> bool:
    """Whether a negative cycle is reachable from ``source``."""
    edges = list(edges)
    dist, _ = bellman_ford(edges, source, n)
    return any(dist[u] < INF and dist[v] > dist[u] + w for u, v, w in edges)


def dijkstra(
    adj: Adjacency, source: int, n: int
) -> tuple[list[float], list[Optional[int]]]:
    """Distances and predecessors from ``source``; ``adj[u]`` yields ``(v, w)``, w >= 0."""
    dist: list[float] = [INF] * (n + 1)
    pred: list[Optional[int]] = [None] * (n + 1)
    dist[source] = 0
    pred[source] = source
    processed: set[int] = set()
    heap = [(0, source)]
    while heap:
        d, u = heapq.heappop(heap)
        if u in processed:
            continue
        processed.add(u)
        for v, w in _neighbors(adj, u):
            if dist[v] > d + w:
                dist[v] = d + w
                pred[v] = u
                heapq.heappush(heap, (dist[v], v))
    return dist, pred


def floyd_warshall(
    adj: Adjacency, n: int
) -> tuple[list[list[float]], list[list[Optional[int]]]]:
    """All-pairs distance and predecessor matrices, each indexed 0..n."""
    dist: list[list[float]] = [[INF] * (n + 1) for _ in range(n + 1)]
    pred: list[list[Optional[int]]] = [[None] * (n + 1) for _ in range(n + 1)]
    vertices = range(1, n + 1)
    for u in vertices:
        dist[u][u] = 0
        pred[u][u] = u
        for v, w in _neighbors(adj, u):
            dist[u][v] = w
            pred[u][v] = u
    for k in vertices:
        row_k = dist[k]
        for u in vertices:
            du = dist[u]
            duk = du[k]
            if duk == INF:
                continue
            for v in vertices:
                if row_k[v] < INF and du[v] > duk + row_k[v]:
                    du[v] = duk + row_k[v]
                    pred[u][v] = pred[k][v]
    return dist, pred


def _walk_back(
    lookup: Callable[[int], Optional[int]], source: int, target: int
) -> list[tuple[int, int]]:
    edges: list[tuple[int, int]] = []
    v = target
    while True:
        p = lookup(v)
        if p is None:
            raise ValueError(f"vertex {target} is not reachable from {source}")
        edges.append((p, v))
        v = p
        if v == source:
            break
    edges.reverse()
    return edges


def path(
    pred: Sequence[Optional[int]], source: int, target: int
) -> list[tuple[int, int]]:
    """Edges ``(u, v)`` from ``source`` to ``target`` given single-source predecessors."""
    return _walk_back(lambda v: pred[v], source, target)


def all_pairs_path(
    pred: Sequence[Sequence[Optional[int]]], source: int, target: int
) -> list[tuple[int, int]]:
    """Edges ``(u, v)`` from ``source`` to ``target`` given an all-pairs predecessor matrix."""
    return _walk_back(lambda v: pred[source][v], source, target)