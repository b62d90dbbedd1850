import unittest
import warnings

import networkx as nx

from adjgraph.adapters.networkx import from_nx, to_nx
from adjgraph.core.graph import Graph
from adjgraph.core.structure import StructureKind

from conftest import build_house


class TestNetworkXAdapter(unittest.TestCase):

    def setUp(self):
        # Mixed graph: undirected A-B, directed B->C, with properties
        G = Graph()
        G.add_vertex("A", label="alpha")
        G.add_vertex("B")
        G.add_edge_undirected("A", "B", 2.0, edge_id="ab", kind="road")
        G.add_edge_directed("B", "C", 3.0, edge_id="bc")
        self.G = G

    def test_export(self):
        nxG = to_nx(self.G)
        self.assertIsInstance(nxG, nx.DiGraph)
        self.assertEqual(set(nxG.nodes), {"A", "B", "C"})
        self.assertEqual(nxG.nodes["A"]["label"], "alpha")
        # undirected edge emitted both ways with one edge_id
        self.assertIn(("A", "B"), nxG.edges)
        self.assertIn(("B", "A"), nxG.edges)
        self.assertEqual(nxG.edges["B", "A"]["edge_id"], "ab")
        self.assertFalse(nxG.edges["A", "B"]["directed"])
        self.assertEqual(nxG.edges["A", "B"]["kind"], "road")
        self.assertIn(("B", "C"), nxG.edges)
        self.assertNotIn(("C", "B"), nxG.edges)
        self.assertEqual(nxG.edges["B", "C"]["weight"], 3.0)

    def test_roundtrip(self):
        H = from_nx(to_nx(self.G), structure="matrix")
        self.assertIs(H.structure_kind, StructureKind.MATRIX)
        self.assertEqual({v.id for v in H.get_vertices()}, {"A", "B", "C"})
        self.assertEqual(H.number_of_edges(), 2)
        self.assertTrue(H.contains_edge_undirected("A", "B"))
        self.assertTrue(H.contains_edge_directed("B", "C"))
        self.assertEqual(H.get_edge("ab").weight, 2.0)
        self.assertEqual(H.get_edge("ab").get_property("kind"), "road")
        self.assertEqual(H.get_vertex("A").get_property("label"), "alpha")

    def test_from_undirected_nx(self):
        H = from_nx(nx.cycle_graph(4))
        self.assertEqual(H.number_of_edges(), 4)
        self.assertTrue(H.contains_edge_undirected(3, 0))
        self.assertTrue(H.is_eulerian_cycle())

    def test_non_scalar_attributes_warn(self):
        nxG = nx.Graph()
        nxG.add_edge(1, 2, tags=["x", "y"], label="ok")
        with self.assertWarns(UserWarning):
            H = from_nx(nxG)
        e = H.get_adjacent_edges(1)[0]
        self.assertEqual(dict(e.properties), {"label": "ok"})

    def test_parallel_edges_warn(self):
        nxG = nx.MultiGraph()
        nxG.add_edge("a", "b")
        nxG.add_edge("a", "b")
        with self.assertWarns(UserWarning):
            H = from_nx(nxG)
        self.assertEqual(H.number_of_edges(), 1)

    def test_clean_conversion_is_silent(self):
        with warnings.catch_warnings():
            warnings.simplefilter("error")
            from_nx(to_nx(self.G))

    def test_cached_conversion(self):
        first = self.G.to_nx()
        self.assertIs(self.G.to_nx(), first)
        self.G.add_vertex("D")
        second = self.G.to_nx()
        self.assertIsNot(second, first)
        self.assertIn("D", second.nodes)
        self.assertIsNot(self.G.to_nx(cache=False), second)

    def test_property_change_on_live_edge_refreshes_cache(self):
        first = self.G.to_nx()
        self.G.get_edge("bc").set_property("kind", "rail")
        second = self.G.to_nx()
        self.assertIsNot(second, first)
        self.assertEqual(second.edges["B", "C"]["kind"], "rail")

    def test_property_change_on_live_vertex_refreshes_cache(self):
        self.G.to_nx()
        self.G.get_vertex("B").update_properties(label="beta")
        self.assertEqual(self.G.to_nx().nodes["B"]["label"], "beta")

    def test_eulerian_matches_networkx(self):
        for structure in ("list", "matrix"):
            G = build_house(structure)
            U = to_nx(G).to_undirected()
            self.assertEqual(G.is_eulerian_cycle(), nx.is_eulerian(U))
            self.assertEqual(G.is_eulerian(), nx.has_eulerian_path(U))
            self.assertEqual(
                sorted(G.odd_degree_vertices()),
                sorted(n for n, d in U.degree() if d % 2),
            )


if __name__ == "__main__":
    unittest.main()
