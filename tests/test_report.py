from io import StringIO
from unittest import TestCase

from graphbasic import defaults
from graphbasic.graph import Graph
from graphbasic.report import Report


class TestReport(TestCase):
    def setUp(self):
        self.report = Report(Graph.from_edges(defaults.order, defaults.edges))

    def test_neighbors(self):
        lines = self.report.neighbors().splitlines()
        self.assertEqual(len(lines), 10)
        self.assertEqual(lines[0], "Forward neighbors of 0:  2, 6")
        self.assertEqual(lines[7], "Forward neighbors of 7:  ")
        self.assertEqual(lines[8], "Forward neighbors of 8:  4, 1")

    def test_neighbors_matches_dump(self):
        out = StringIO()
        self.report.graph.dump(out)
        self.assertEqual(self.report.neighbors(), out.getvalue())

    def test_reachable_all(self):
        lines = self.report.reachable().splitlines()
        self.assertEqual(len(lines), 10)
        self.assertEqual(lines[0], "Reachable from 0:  0, 2, 4, 3, 7, 6, 8, 1")
        self.assertEqual(lines[7], "Reachable from 7:  7")

    def test_reachable_selected(self):
        self.assertEqual(self.report.reachable([3, 7]), (
            "Reachable from 3:  3, 7\n"
            "Reachable from 7:  7\n"
        ))

    def test_write(self):
        out = StringIO()
        self.report.write(out)
        text = out.getvalue()
        self.assertEqual(text, self.report.neighbors() + "\n" + self.report.reachable())
        self.assertIn("\n\nReachable from 0:", text)

    def test_empty_graph(self):
        report = Report(Graph(0))
        self.assertEqual(report.neighbors(), "")
        self.assertEqual(report.reachable(), "")
