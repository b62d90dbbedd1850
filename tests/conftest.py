import pathlib
import sys

import pytest

ROOT = pathlib.Path(__file__).resolve().parents[1]  # project root
sys.path.insert(0, str(ROOT))

from adjgraph.core.graph import Graph

# "Das Haus vom Nikolaus": 5 vertices, 8 undirected edges, vertices 1 and 2 odd
HOUSE_EDGES = [
    (1, 1, 2), (2, 1, 3), (3, 1, 4), (4, 2, 4),
    (5, 2, 3), (6, 3, 4), (7, 3, 5), (8, 4, 5),
]

STRUCTURES = ["list", "matrix"]


def build_house(structure="list", capacity=None):
    g = Graph(structure=structure, capacity=capacity)
    for v in range(1, 6):
        g.add_vertex(v)
    for eid, a, b in HOUSE_EDGES:
        g.add_edge_undirected(a, b, 0, edge_id=eid)
    return g


@pytest.fixture(params=STRUCTURES)
def structure(request):
    return request.param


@pytest.fixture
def house(structure):
    return build_house(structure)


@pytest.fixture
def chain(structure):
    """Directed a -> b -> c with weights 1 and 2."""
    g = Graph(structure=structure)
    g.add_edge_directed("a", "b", 1)
    g.add_edge_directed("b", "c", 2)
    return g
