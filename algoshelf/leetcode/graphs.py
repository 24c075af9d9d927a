"""Graph problems given as adjacency matrices and key lists."""

from __future__ import annotations

from collections.abc import Sequence

from ..graph.traversal import reachable


def find_circle_num(is_connected: Sequence[Sequence[int]]) -> int:
    """Number of groups of directly or indirectly connected cities."""
    adj = [
        [v for v, linked in enumerate(row) if linked and v != u]
        for u, row in enumerate(is_connected)
    ]
    visited: set[int] = set()
    provinces = 0
    for u in range(len(adj)):
        if u not in visited:
            provinces += 1
            visited |= reachable(adj, u)
    return provinces


def can_visit_all_rooms(rooms: Sequence[Sequence[int]]) -> bool:
    """Whether starting in room 0 the keys found open every room."""
    if not rooms:
        return True
    return len(reachable(rooms, 0)) == len(rooms)