"""Graph representations: edge set, adjacency map, adjacency matrix and CSR-style list."""

from __future__ import annotations

import argparse
import sys
from abc import ABC, abstractmethod
from collections.abc import Iterable
from itertools import pairwise

Edge = tuple[int, int]

_NO_VERTICES = "Impossible to create any edges without vertexes!"


class GraphTypeError(Exception):
    """Raised when a graph cannot be built from the given description."""


def _normalise_edges(vertex_count: int, edges: Iterable[Edge]) -> list[Edge]:
    if vertex_count < 0:
        raise GraphTypeError("Vertex count cannot be negative")
    edge_list = sorted({(int(a), int(b)) for a, b in edges})
    if vertex_count == 0 and edge_list:
        raise GraphTypeError(_NO_VERTICES)
    return edge_list


class GraphType(ABC):
    """Common interface of every graph representation."""

    def __init__(self, vertex_count: int = 0, edges: Iterable[Edge] = ()) -> None:
        self.vertex_count = 0
        self.fill(vertex_count, edges)

    @abstractmethod
    def fill(self, vertex_count: int, edges: Iterable[Edge]) -> None:
        """Replace the graph with one of ``vertex_count`` vertices and ``edges``."""

    @abstractmethod
    def render(self) -> str:
        """Return the printable description of the graph."""

    @abstractmethod
    def clean(self) -> None:
        """Drop every vertex and edge."""

    def print(self) -> None:
        """Write the rendered graph to standard output."""
        sys.stdout.write(self.render())


class SimpleGraph(GraphType):
    """A graph kept as an ordered set of edges."""

    def fill(self, vertex_count: int, edges: Iterable[Edge]) -> None:
        edge_list = _normalise_edges(vertex_count, edges)
        self.clean()
        self.edges = edge_list
        self.vertex_count = vertex_count

    def render(self) -> str:
        body = "".join(f" {{{a}, {b}}}" for a, b in self.edges)
        return f"\nVertexes amount: {self.vertex_count}\n{{{body} }}\n"

    def clean(self) -> None:
        self.vertex_count = 0
        self.edges: list[Edge] = []


class AdjacencyMapGraph(GraphType):
    """An undirected graph kept as a map from vertex to its neighbours."""

    def fill(self, vertex_count: int, edges: Iterable[Edge]) -> None:
        edge_list = _normalise_edges(vertex_count, edges)
        self.clean()
        self.vertex_count = vertex_count
        for a, b in edge_list:
            self.adjacency.setdefault(a, set()).add(b)
            self.adjacency.setdefault(b, set()).add(a)

    def render(self) -> str:
        lines = [f"\nVertexes amount: {self.vertex_count}\n\n"]
        for vertex in sorted(self.adjacency):
            neighbours = ", ".join(str(n) for n in sorted(self.adjacency[vertex]))
            lines.append(f"{vertex}: [{neighbours}]\n")
        return "".join(lines)

    def clean(self) -> None:
        self.vertex_count = 0
        self.adjacency: dict[int, set[int]] = {}

    def dfs(self, start: int) -> list[int]:
        """Return vertices in depth-first order from ``start``, smaller neighbours first."""
        if not 0 <= start < self.vertex_count:
            raise IndexError(f"start vertex {start} is out of range")
        order: list[int] = []
        visited: set[int] = set()
        stack = [start]
        while stack:
            vertex = stack.pop()
            if vertex in visited:
                continue
            visited.add(vertex)
            order.append(vertex)
            stack.extend(sorted(self.adjacency.get(vertex, ()), reverse=True))
        return order


class AdjacencyMatrixGraph(GraphType):
    """An undirected graph kept as a square boolean matrix."""

    def fill(self, vertex_count: int, edges: Iterable[Edge]) -> None:
        edge_list = _normalise_edges(vertex_count, edges)
        for a, b in edge_list:
            if not (0 <= a < vertex_count and 0 <= b < vertex_count):
                raise GraphTypeError(f"Edge {(a, b)} refers to a vertex outside the graph")
        self.clean()
        self.vertex_count = vertex_count
        self.matrix = [[False] * vertex_count for _ in range(vertex_count)]
        for a, b in edge_list:
            self.matrix[a][b] = True
            self.matrix[b][a] = True

    def render(self) -> str:
        rows = "".join(
            "".join(f" {int(cell)}" for cell in row) + "\n" for row in self.matrix
        )
        return f"\nVertexes amount: {self.vertex_count}\n{{\n{rows}}}\n"

    def clean(self) -> None:
        self.vertex_count = 0
        self.matrix: list[list[bool]] = []


class AdjacencyListGraph(GraphType):
    """A directed graph kept as a flat neighbour list with per-vertex offsets."""

    def fill(self, vertex_count: int, edges: Iterable[Edge]) -> None:
        edge_list = _normalise_edges(vertex_count, edges)
        self.clean()
        self.vertex_count = vertex_count
        self.offsets.append(0)
        for vertex in range(vertex_count):
            self.adjacencies.extend(b for a, b in edge_list if a == vertex)
            self.offsets.append(len(self.adjacencies))

    def render(self) -> str:
        parts = [f"\nVertexes amount: {self.vertex_count}\n"]
        if not self.adjacencies:
            parts.append("Ways amount: 0\n\n")
            return "".join(parts)
        parts.append("\n")
        for vertex, (low, high) in enumerate(pairwise(self.offsets)):
            targets = ", ".join(str(t) for t in self.adjacencies[low:high])
            parts.append(f"ways from: {vertex} to: [{targets}]\n")
        parts.append("\n")
        return "".join(parts)

    def clean(self) -> None:
        self.vertex_count = 0
        self.adjacencies: list[int] = []
        self.offsets: list[int] = []


_DEMO_SUBJECTS: list[tuple[int, set[Edge]]] = [
    (4, {(0, 2), (3, 0), (1, 2), (1, 3), (2, 3)}),
    (3, {(0, 2), (1, 2), (2, 0), (1, 0)}),
    (5, {(0, 1), (3, 2), (2, 0), (1, 0), (2, 3), (1, 4), (4, 1), (0, 2)}),
    (3, set()),
    (0, set()),
    (0, {(1, 3), (2, 3), (3, 1), (2, 1)}),
    (0, {(0, 0)}),
]


def main(argv: list[str] | None = None) -> int:
    """Fill every graph representation with sample data and print it."""
    parser = argparse.ArgumentParser(description="Show the graph representations.")
    parser.parse_args(argv)
    graphs: list[GraphType] = [
        SimpleGraph(),
        AdjacencyMatrixGraph(),
        AdjacencyListGraph(),
        AdjacencyMapGraph(),
    ]
    for graph in graphs:
        print(f"\n ========= Testing of {type(graph).__name__} =========\n")
        for vertex_count, edges in _DEMO_SUBJECTS:
            try:
                graph.fill(vertex_count, edges)
                graph.print()
                if isinstance(graph, AdjacencyMapGraph):
                    print("DFS: " + "->".join(str(v) for v in graph.dfs(0)))
                graph.clean()
            except GraphTypeError as error:
                print(error)
            except (IndexError, ValueError):
                print("Something else wrong")
    return 0


if __name__ == "__main__":
    sys.exit(main())