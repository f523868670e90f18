"""Reachability search.

This is kept outside of Graph on purpose: it only uses the public order and
neighbors methods, so a bug here cannot break the graph's invariants.
"""

import logging
from typing import Iterator, List, Tuple

from graphbasic.graph import Graph, check_vertex


class Traversal:

    """State of a single depth-first search."""

    def __init__(self, order: int):
        self.visited = [False] * order
        self.result: List[int] = []

    def __repr__(self) -> str:
        return f"Traversal(result={self.result!r})"


def visit(graph: Graph, state: Traversal, start: int):
    """Visit start and everything reachable from it that is not yet visited.

    Uses an explicit stack of neighbor iterators so the output matches the
    recursive pre-order without being limited by the recursion limit.
    """
    if state.visited[start]:
        return
    state.visited[start] = True
    state.result.append(start)
    stack: List[Iterator[int]] = [iter(graph.neighbors(start))]
    while stack:
        for dest in stack[-1]:
            if not state.visited[dest]:
                state.visited[dest] = True
                state.result.append(dest)
                stack.append(iter(graph.neighbors(dest)))
                break
        else:
            stack.pop()


def reachable_from(graph: Graph, start: int) -> List[int]:
    """Return the vertices reachable from start, in depth-first pre-order.

    The result includes start and contains each vertex once. Neighbors are
    explored in the order their edges were added, so the result is
    deterministic.
    """
    check_vertex(start, graph.order)
    state = Traversal(graph.order)
    visit(graph, state, start)
    logging.debug(
        "reached %d of %d vertices from %d", len(state.result), graph.order, start
    )
    return state.result


def reachability_table(graph: Graph) -> List[Tuple[int, List[int]]]:
    """Return (start, reachable_from(graph, start)) for every vertex."""
    return [(start, reachable_from(graph, start)) for start in graph.vertices()]
