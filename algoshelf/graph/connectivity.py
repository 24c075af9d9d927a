"""Articulation points and bridges of undirected graphs (Tarjan's low-link)."""

from __future__ import annotations

from collections.abc import Iterator
from itertools import count

from .traversal import Adjacency, _neighbors


def _lowlink(adj: Adjacency, n: int) -> Iterator[tuple[int, int, int | None, dict, dict]]:
    """Depth-first search yielding ``(parent, child, root_children, num, low)``.

    One tuple is yielded each time a tree edge finishes, in post-order, with
    ``low[child]`` final. After each search tree a tuple ``(root, root, k, ...)``
    reports the number ``k`` of tree children of that root.
    """
    num: dict[int, int] = {}
    low: dict[int, int] = {}
    counter = count(1)
    for root in range(1, n + 1):
        if root in num:
            continue
        num[root] = low[root] = next(counter)
        root_children = 0
        stack = [(root, root, iter(_neighbors(adj, root)))]
        while stack:
            u, parent, it = stack[-1]
            for v in it:
                if v not in num:
                    if u == root:
                        root_children += 1
                    num[v] = low[v] = next(counter)
                    stack.append((v, u, iter(_neighbors(adj, v))))
                    break
                if v != parent:
                    low[u] = min(low[u], num[v])
            else:
                stack.pop()
                if stack:
                    yield parent, u, None, num, low
                    low[parent] = min(low[parent], low[u])
        yield root, root, root_children, num, low


def articulation_points(adj: Adjacency, n: int) -> set[int]:
    """Vertices among 1..n whose removal disconnects their component."""
    points: set[int] = set()
    for parent, child, root_children, num, low in _lowlink(adj, n):
        if root_children is not None:
            if root_children == 1:
                points.discard(parent)
        elif low[child] >= num[parent]:
            points.add(parent)
    return points


def bridges(adj: Adjacency, n: int) -> list[tuple[int, int]]:
    """Edges ``(u, v)`` whose removal disconnects the graph, in DFS finishing order."""
    return [
        (parent, child)
        for parent, child, root_children, num, low in _lowlink(adj, n)
        if root_children is None and low[child] > num[parent]
    ]