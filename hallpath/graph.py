"""Weighted undirected graph of rooms with shortest-path search."""

from __future__ import annotations

import math

from hallpath.course import Course


class Graph:
    """An undirected graph whose edges carry a distance."""

    def __init__(self) -> None:
        self._adjacency: dict[Course, list[tuple[Course, float]]] = {}

    def add_edge(self, u: Course, v: Course, weight: float) -> None:
        """Join ``u`` and ``v`` by an edge of the given weight, both ways."""
        w = float(weight)
        self._adjacency.setdefault(u, []).append((v, w))
        self._adjacency.setdefault(v, []).append((u, w))

    def bellman_ford(self, source: Course, destination: Course) -> list[Course]:
        """Return the shortest path from ``source`` to ``destination``.

        The path starts with ``source`` and ends with ``destination``; it is
        empty when the destination cannot be reached.
        """
        nodes = sorted(self._adjacency)
        distance = {node: math.inf for node in nodes}
        predecessors = {node: Course() for node in nodes}
        distance[source] = 0.0

        for _ in range(len(nodes) - 1):
            changed = False
            for u in nodes:
                for v, weight in self._adjacency[u]:
                    if distance[u] + weight < distance[v]:
                        distance[v] = distance[u] + weight
                        predecessors[v] = u
                        changed = True
            if not changed:
                break

        if distance.get(destination, math.inf) == math.inf:
            return []

        path = []
        at = destination
        while at != source:
            path.append(at)
            at = predecessors[at]
        path.append(source)
        path.reverse()
        return path

    def get_node(self, name: str) -> Course:
        """Find a node by room or teacher name; return an empty Course if none."""
        for node in sorted(self._adjacency):
            if node.room_name == name or node.teacher_name == name:
                return node
        return Course()