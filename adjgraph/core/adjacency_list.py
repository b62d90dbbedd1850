from __future__ import annotations

from typing import Dict, List, Optional, Tuple

from .base import AdjacencyStructure
from .components import Edge, Vertex


class AdjacencyList(AdjacencyStructure):
    """
    Sparse adjacency storage.

    Vertices live in an insertion-ordered dict; each vertex owns the list of
    ``(neighbour, edge)`` pairs leaving it. Vertex lookup is O(1), edge lookup
    is a linear scan of the source's list.

    Notes
    -----
    An undirected edge is appended to both endpoint lists as the same
    instance; an undirected self-loop is stored once.
    """

    def __init__(self):
        super().__init__()
        self._vertices: Dict[object, Vertex] = {}
        self._adjacent: Dict[object, List[Tuple[object, Edge]]] = {}

    def _insert_vertex(self, vertex: Vertex) -> None:
        self._vertices[vertex.id] = vertex
        self._adjacent[vertex.id] = []

    def _arc(self, a, b) -> Optional[Edge]:
        for nbr, edge in self._adjacent.get(a, ()):
            if nbr == b:
                return edge
        return None

    def _link(self, edge: Edge) -> None:
        a, b = edge.endpoints
        self._adjacent[a].append((b, edge))
        if not edge.directed and a != b:
            self._adjacent[b].append((a, edge))

    def _incident(self, identifier):
        return iter(self._adjacent.get(identifier, ()))

    def size(self) -> int:
        return len(self._vertices)

    def get_vertex(self, identifier) -> Optional[Vertex]:
        return self._vertices.get(identifier)

    def get_vertices(self) -> Tuple[Vertex, ...]:
        return tuple(self._vertices.values())

    def dump(self) -> str:
        lines = []
        for vid, pairs in self._adjacent.items():
            if not pairs:
                continue
            cells = " ".join(f"[{nbr}, {edge.weight}]" for nbr, edge in pairs)
            lines.append(f"{vid} -> {cells}")
        return "\n".join(lines)
