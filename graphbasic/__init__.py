"""Directed graphs with depth-first reachability search."""

from graphbasic.graph import Edge, Graph, GraphError, InvalidArgument, OutOfRange
from graphbasic.reach import reachability_table, reachable_from
