"""Breadth-first search over residual edges."""
from __future__ import annotations

from collections import deque

from .residual import ResidualView
from .typing import Node

_NO_TARGET = object()


class PathFinder:
    """Find shortest residual paths and residual reachability sets.

    Neighbours are expanded in the network's vertex order, so among several
    shortest paths the one returned is always the same.
    """

    def _search(self, residual: ResidualView, start: Node, target: object) -> dict[Node, Node | None]:
        parents: dict[Node, Node | None] = {start: None}
        queue = deque([start])
        while queue:
            u = queue.popleft()
            for v in residual.neighbors(u):
                if v in parents:
                    continue
                parents[v] = u
                if target is not _NO_TARGET and v == target:
                    return parents
                queue.append(v)
        return parents

    def find_path(self, residual: ResidualView, start: Node, target: Node) -> list[Node] | None:
        """Return ``[start, ..., target]`` along residual edges, or ``None`` if unreachable."""
        if start == target:
            return [start]
        parents = self._search(residual, start, target)
        if target not in parents:
            return None
        path = [target]
        while path[-1] != start:
            path.append(parents[path[-1]])
        path.reverse()
        return path

    def reachable(self, residual: ResidualView, start: Node) -> frozenset:
        """Every vertex reachable from ``start`` by residual edges, ``start`` included."""
        return frozenset(self._search(residual, start, _NO_TARGET))


__all__ = ["PathFinder"]
