"""Text reports for the demonstration."""

import sys
from typing import Iterable, Optional, TextIO

from jinja2 import Environment, PackageLoader, select_autoescape

from graphbasic.graph import Graph
from graphbasic.reach import reachability_table, reachable_from


class Report:

    """Renders neighbor and reachability rows for a graph."""

    def __init__(self, graph: Graph):
        self.graph = graph
        self.env = Environment(
            loader=PackageLoader("graphbasic", "templates"),
            autoescape=select_autoescape(["html"]),
        )
        self.neighbors_template = self.env.get_template("neighbors.txt.jinja")
        self.reachable_template = self.env.get_template("reachable.txt.jinja")

    def __repr__(self) -> str:
        return f"Report(graph={self.graph!r})"

    def neighbors(self) -> str:
        rows = [(src, self.graph.neighbors(src)) for src in self.graph.vertices()]
        return self.neighbors_template.render(rows=rows)

    def reachable(self, starts: Optional[Iterable[int]] = None) -> str:
        """Render the reachable vertices from each start (all vertices if None)."""
        if starts is None:
            rows = reachability_table(self.graph)
        else:
            rows = [(start, reachable_from(self.graph, start)) for start in starts]
        return self.reachable_template.render(rows=rows)

    def write(self, out: TextIO = sys.stdout):
        """Write the neighbor rows, a blank line, and the reachable rows."""
        out.write(self.neighbors())
        out.write("\n")
        out.write(self.reachable())
