"""An undirected graph over numbered vertices with breadth- and depth-first traversal."""

from __future__ import annotations

from collections import deque


class Graph:
    """An undirected graph on the vertices ``0 .. vertices - 1``, kept as adjacency lists."""

    def __init__(self, vertices: int) -> None:
        if vertices < 0:
            raise ValueError("number of vertices must not be negative")
        self.vertices = vertices
        self._adjacency: list[list[int]] = [[] for _ in range(vertices)]

    def _check(self, vertex: int) -> int:
        if not 0 <= vertex < self.vertices:
            raise IndexError(f"vertex {vertex} is not in the graph")
        return vertex

    def add_edge(self, u: int, v: int) -> None:
        """Connect ``u`` and ``v`` in both directions."""
        self._adjacency[self._check(u)].append(self._check(v))
        self._adjacency[v].append(u)

    def bfs(self, start: int) -> list[int]:
        """Return the vertices reachable from ``start`` in breadth-first order.

        Neighbours are visited in the order their edges were added.
        """
        visited = {self._check(start)}
        queue = deque([start])
        order: list[int] = []
        while queue:
            node = queue.popleft()
            order.append(node)
            for neighbor in self._adjacency[node]:
                if neighbor not in visited:
                    visited.add(neighbor)
                    queue.append(neighbor)
        return order

    def dfs(self, start: int) -> list[int]:
        """Return the vertices reachable from ``start`` in depth-first order.

        An explicit stack is used; a vertex is marked as visited when it is
        pushed, and the most recently pushed neighbour is explored first.
        """
        visited = {self._check(start)}
        stack = [start]
        order: list[int] = []
        while stack:
            node = stack.pop()
            order.append(node)
            for neighbor in self._adjacency[node]:
                if neighbor not in visited:
                    visited.add(neighbor)
                    stack.append(neighbor)
        return order

    def __repr__(self) -> str:
        return f"{type(self).__name__}(vertices={self.vertices})"