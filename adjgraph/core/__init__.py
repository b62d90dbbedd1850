from .structure import *
from .exceptions import *
from .components import Edge, Vertex
from .base import AdjacencyStructure
from .adjacency_list import AdjacencyList
from .adjacency_matrix import AdjacencyMatrix
from .graph import Graph, create_graph

__all__ = [
    "AdjacencyList",
    "AdjacencyMatrix",
    "AdjacencyStructure",
    "Color",
    "Edge",
    "EdgeType",
    "Graph",
    "GraphError",
    "IllegalStructureError",
    "InvalidCapacityError",
    "NonEmptyGraphError",
    "StructureKind",
    "Vertex",
    "create_graph",
]
