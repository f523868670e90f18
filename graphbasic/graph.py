"""Directed graph with a fixed number of vertices."""

from __future__ import annotations

import sys
from itertools import islice
from typing import Iterable, Iterator, List, NamedTuple, TextIO, Tuple


class GraphError(Exception):
    """Base class for graph errors."""


class InvalidArgument(GraphError, ValueError):
    """Raised when a graph is constructed with a negative order."""


class OutOfRange(GraphError, IndexError):

    """Raised when a vertex is not in [0, order)."""

    def __init__(self, vertex: int, order: int):
        super().__init__(f"vertex {vertex} out of range for graph of order {order}")
        self.vertex = vertex
        self.order = order


def check_vertex(vertex: int, order: int):
    """Raise unless vertex is an int in [0, order). Booleans are not vertices."""
    if isinstance(vertex, bool) or not isinstance(vertex, int):
        raise TypeError(f"vertex must be an int, not {type(vertex).__name__}")
    if not 0 <= vertex < order:
        raise OutOfRange(vertex, order)


class Edge(NamedTuple):

    """A directed edge from src to dest.

    Edges are plain values: two edges are equal iff both endpoints match.
    """

    src: int
    dest: int

    def __repr__(self) -> str:
        return f"Edge({self.src}, {self.dest})"


class Graph:

    """A directed multigraph on the vertices 0, 1, ..., order - 1.

    The order is fixed at construction. Edges can only be added. Loops and
    parallel edges are allowed and are kept as separate entries. Each vertex
    has an adjacency list of out-neighbors in insertion order.
    """

    def __init__(self, order: int):
        if isinstance(order, bool) or not isinstance(order, int):
            raise TypeError(f"order must be an int, not {type(order).__name__}")
        if order < 0:
            raise InvalidArgument(f"order must not be negative: {order}")
        self._order = order
        self._adjacency: List[List[int]] = [[] for _ in range(order)]

    @staticmethod
    def from_edges(order: int, edges: Iterable[Tuple[int, int]] = ()) -> Graph:
        """Create a graph of the given order and add each (src, dest) pair."""
        graph = Graph(order)
        for src, dest in edges:
            graph.add_edge(src, dest)
        return graph

    def __repr__(self) -> str:
        return f"Graph(order={self._order}, edges={self.edge_count()})"

    @property
    def order(self) -> int:
        """Number of vertices."""
        return self._order

    def vertices(self) -> range:
        return range(self._order)

    def add_edge(self, src: int, dest: int):
        """Add an edge from src to dest.

        Raises OutOfRange, or TypeError for a non-int endpoint, without
        modifying the graph if either endpoint is not a vertex.
        """
        check_vertex(src, self._order)
        check_vertex(dest, self._order)
        self._adjacency[src].append(dest)

    def neighbors(self, src: int) -> Tuple[int, ...]:
        """Return the out-neighbors of src in insertion order."""
        check_vertex(src, self._order)
        return tuple(self._adjacency[src])

    def edges(self) -> Iterator[Edge]:
        """Iterate over all edges, by ascending src and then insertion order.

        Each call returns a new iterator over the edges present at the time of
        the call. Adding edges while an iterator is in use is undefined
        behavior.
        """
        lengths = [len(dests) for dests in self._adjacency]
        return (
            Edge(src, dest)
            for src, (dests, n) in enumerate(zip(self._adjacency, lengths))
            for dest in islice(dests, n)
        )

    def edge_count(self) -> int:
        """Return the number of edges, counting parallel edges separately."""
        return sum(len(dests) for dests in self._adjacency)

    def dump(self, out: TextIO = sys.stdout):
        """Dump the forward neighbors of each vertex to out."""
        for src, dests in enumerate(self._adjacency):
            csv = ", ".join(str(dest) for dest in dests)
            print(f"Forward neighbors of {src}:  {csv}", file=out)
