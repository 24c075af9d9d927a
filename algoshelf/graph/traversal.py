"""Breadth-first and depth-first traversals over adjacency structures.

Vertices are numbered from 1 to ``n``. An adjacency structure is either a
sequence indexed by vertex (index 0 unused) or a mapping from vertex to its
neighbours. Unreachable vertices get a distance of ``INF``.
"""

from __future__ import annotations

import math
from collections import deque
from collections.abc import Hashable, Iterable, Mapping, Sequence
from typing import Any, Union

INF = math.inf

Adjacency = Union[Sequence[Iterable[Any]], Mapping[Hashable, Iterable[Any]]]


def _neighbors(adj: Adjacency, u: int) -> Iterable[Any]:
    """Return what ``adj`` lists for ``u``, or nothing if ``u`` is absent."""
    if isinstance(adj, Mapping):
        return adj.get(u, ())
    if 0 <= u < len(adj):
        return adj[u]
    return ()


def bfs(adj: Adjacency, source: int, n: int) -> list[float]:
    """Unweighted distances from ``source``; a list indexed 0..n."""
    dist: list[float] = [INF] * (n + 1)
    dist[source] = 0
    queue = deque([source])
    while queue:
        u = queue.popleft()
        for v in _neighbors(adj, u):
            if dist[v] == INF:
                dist[v] = dist[u] + 1
                queue.append(v)
    return dist


def bfs_01(adj: Adjacency, source: int, n: int) -> list[float]:
    """Distances from ``source`` where every edge ``(v, w)`` has weight 0 or 1."""
    dist: list[float] = [INF] * (n + 1)
    dist[source] = 0
    queue = deque([source])
    while queue:
        u = queue.popleft()
        for v, w in _neighbors(adj, u):
            if dist[v] > dist[u] + w:
                dist[v] = dist[u] + w
                if w == 0:
                    queue.appendleft(v)
                else:
                    queue.append(v)
    return dist


def reachable(adj: Adjacency, start: int) -> set[int]:
    """Every vertex a depth-first search from ``start`` visits."""
    visited: set[int] = set()
    stack = [start]
    while stack:
        u = stack.pop()
        if u in visited:
            continue
        visited.add(u)
        stack.extend(v for v in _neighbors(adj, u) if v not in visited)
    return visited


def connected_components(adj: Adjacency, n: int) -> int:
    """Number of connected components among vertices 1..n."""
    visited: set[int] = set()
    count = 0
    for u in range(1, n + 1):
        if u not in visited:
            count += 1
            visited |= reachable(adj, u)
    return count


def _cycle_from(adj: Adjacency, root: int, visited: set[int]) -> bool:
    visited.add(root)
    stack = [(root, None, iter(_neighbors(adj, root)))]
    while stack:
        u, parent, it = stack[-1]
        for v in it:
            if v in visited:
                if v != parent:
                    return True
                continue
            visited.add(v)
            stack.append((v, u, iter(_neighbors(adj, v))))
            break
        else:
            stack.pop()
    return False


def has_cycle(adj: Adjacency, n: int) -> bool:
    """Whether the undirected graph on vertices 1..n contains a cycle."""
    visited: set[int] = set()
    return any(
        u not in visited and _cycle_from(adj, u, visited) for u in range(1, n + 1)
    )


def is_bipartite(adj: Adjacency, n: int) -> bool:
    """Whether vertices 1..n can be two-coloured with no edge inside a colour."""
    color: dict[int, bool] = {}
    for s in range(1, n + 1):
        if s in color:
            continue
        color[s] = True
        queue = deque([s])
        while queue:
            u = queue.popleft()
            for v in _neighbors(adj, u):
                if v not in color:
                    color[v] = not color[u]
                    queue.append(v)
                elif color[v] == color[u]:
                    return False
    return True