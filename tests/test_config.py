from pathlib import Path
from unittest import TestCase

from graphbasic import defaults
from graphbasic.config import GraphConfig
from graphbasic.reach import reachable_from

PATH = Path("graphbasic.yml")


def load(content: str) -> GraphConfig:
    cfg = GraphConfig.loads(PATH, content)
    cfg.validate()
    return cfg


class TestGraphConfig(TestCase):
    def test_default_config_matches_builtin_graph(self):
        graph = load(defaults.graphbasic_yml()).build_graph()
        self.assertEqual(graph.order, defaults.order)
        expected = sorted(defaults.edges, key=lambda e: e[0])
        self.assertEqual(list(graph.edges()), expected)
        self.assertEqual(reachable_from(graph, 0), [0, 2, 4, 3, 7, 6, 8, 1])

    def test_edges_are_optional(self):
        cfg = load("order: 3\n")
        self.assertEqual(cfg["edges"], [])
        graph = cfg.build_graph()
        self.assertEqual(graph.order, 3)
        self.assertEqual(graph.edge_count(), 0)

    def test_missing_order(self):
        with self.assertLogs(level="ERROR") as cm:
            cfg = load("edges: []\n")
        self.assertIn("missing 'order'", cm.output[0])
        self.assertEqual(cfg["order"], 0)

    def test_negative_order(self):
        with self.assertLogs(level="ERROR") as cm:
            cfg = load("order: -4\n")
        self.assertIn("non-negative", cm.output[0])
        self.assertEqual(cfg["order"], 0)

    def test_invalid_yaml(self):
        with self.assertLogs(level="ERROR") as cm:
            cfg = GraphConfig.loads(PATH, "order: [\n")
        self.assertIn("cannot parse", cm.output[0])
        self.assertEqual(cfg.data, {})

    def test_not_a_mapping(self):
        with self.assertLogs(level="ERROR") as cm:
            GraphConfig.loads(PATH, "- 1\n- 2\n")
        self.assertIn("invalid YAML", cm.output[0])

    def test_edges_not_a_list(self):
        with self.assertLogs(level="ERROR"):
            cfg = load("order: 2\nedges: 5\n")
        self.assertEqual(cfg["edges"], [])

    def test_malformed_edges_skipped(self):
        cfg = load("order: 3\nedges:\n  - [0, 1]\n  - [1]\n  - [a, 2]\n  - [1, 2]\n")
        with self.assertLogs(level="ERROR") as cm:
            graph = cfg.build_graph()
        self.assertEqual(len(cm.output), 2)
        self.assertEqual(list(graph.edges()), [(0, 1), (1, 2)])

    def test_out_of_range_edges_skipped(self):
        cfg = load("order: 2\nedges:\n  - [0, 1]\n  - [0, 2]\n")
        with self.assertLogs(level="ERROR") as cm:
            graph = cfg.build_graph()
        self.assertIn("cannot add edge (0, 2)", cm.output[0])
        self.assertEqual(list(graph.edges()), [(0, 1)])
