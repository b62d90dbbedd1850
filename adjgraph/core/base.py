from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Hashable, Iterator, List, Optional, Tuple

import numpy as np
import scipy.sparse as sp

from .components import Edge, Vertex, check_weight


def vertex_id(x):
    """Identifier of ``x`` whether it is a :class:`Vertex` or already an id."""
    return x.id if isinstance(x, Vertex) else x


class AdjacencyStructure(ABC):
    """
    Storage strategy for vertices and edges.

    Subclasses supply the four storage primitives (``_insert_vertex``,
    ``_arc``, ``_link``, ``_incident``); every public operation is written
    once here on top of them.

    Notes
    -----
    - An arc ``a -> b`` is any edge reachable from ``a`` that leads to ``b``:
      a directed edge ``a -> b`` or the undirected edge ``{a, b}``.
    - A vertex pair is either unlinked, linked by directed edges, or linked by
      one undirected edge, never a mix of directed and undirected.
    - ``add_*`` operations report duplicates with ``False``/``None``.
    """

    def __init__(self):
        self._num_edges = 0

    # Storage primitives

    @abstractmethod
    def _insert_vertex(self, vertex: Vertex) -> None:
        """Store a vertex known not to be present."""

    @abstractmethod
    def _arc(self, a, b) -> Optional[Edge]:
        """Edge leading from ``a`` to ``b``, or None."""

    @abstractmethod
    def _link(self, edge: Edge) -> None:
        """Make ``edge`` reachable from its source (and target when undirected)."""

    @abstractmethod
    def _incident(self, identifier) -> Iterator[Tuple[Hashable, Edge]]:
        """``(neighbour, edge)`` pairs leaving ``identifier``, in storage order."""

    @abstractmethod
    def get_vertex(self, identifier) -> Optional[Vertex]:
        """Stored vertex for ``identifier``, or None."""

    @abstractmethod
    def get_vertices(self) -> Tuple[Vertex, ...]:
        """All vertices in storage order."""

    @abstractmethod
    def dump(self) -> str:
        """Deterministic textual dump of the structure."""

    # Vertices

    def size(self) -> int:
        return len(self.get_vertices())

    def __len__(self):
        return self.size()

    def is_empty(self) -> bool:
        return self.size() == 0

    def contains_vertex(self, x) -> bool:
        return self.get_vertex(vertex_id(x)) is not None

    def __contains__(self, x):
        return self.contains_vertex(x)

    def add_vertex(self, x) -> bool:
        """
        Add a vertex by identifier or :class:`Vertex` instance.

        Returns
        -------
        bool
            False if the identifier is already present.
        """
        if self.contains_vertex(x):
            return False
        self._insert_vertex(x if isinstance(x, Vertex) else Vertex(x))
        return True

    # Edges

    def add_edge_directed(self, source, target=None, weight=1.0, **kwargs) -> Optional[Edge]:
        """
        Add a directed edge ``source -> target``.

        ``source`` may be an :class:`Edge`, in which case its endpoints and
        weight are copied into a new directed edge.

        Returns
        -------
        Edge or None
            None when an arc ``source -> target`` already exists.
        """
        if isinstance(source, Edge):
            kwargs = {**source.properties, **kwargs}
            return self.add_edge_directed(source.source, source.target, source.weight, **kwargs)
        a, b = vertex_id(source), vertex_id(target)
        check_weight(weight)
        if self._arc(a, b) is not None:
            return None
        return self._create_edge(a, b, weight, directed=True, **kwargs)

    def add_edge_undirected(self, source, target=None, weight=1.0, **kwargs) -> Optional[Edge]:
        """
        Add an undirected edge between ``source`` and ``target``.

        Returns
        -------
        Edge or None
            None when the pair is already linked in either direction.
        """
        if isinstance(source, Edge):
            kwargs = {**source.properties, **kwargs}
            return self.add_edge_undirected(source.source, source.target, source.weight, **kwargs)
        a, b = vertex_id(source), vertex_id(target)
        check_weight(weight)
        if self._arc(a, b) is not None or self._arc(b, a) is not None:
            return None
        return self._create_edge(a, b, weight, directed=False, **kwargs)

    def _create_edge(self, a, b, weight, directed, edge_id=None, **properties) -> Edge:
        self.add_vertex(a)
        self.add_vertex(b)
        edge = Edge(a, b, weight, directed=directed, edge_id=edge_id, **properties)
        self._link(edge)
        self._num_edges += 1
        return edge

    def contains_edge_directed(self, a, b) -> bool:
        """
        True if a directed edge ``a -> b`` exists.

        The arc seen from an undirected edge does not count. An opposite
        directed edge ``b -> a`` is a separate edge and does not change the
        answer: with both present, each direction reports True.
        """
        edge = self._arc(vertex_id(a), vertex_id(b))
        return edge is not None and edge.directed

    def contains_edge_undirected(self, a, b) -> bool:
        """True if ``a`` and ``b`` are joined by one undirected edge."""
        a, b = vertex_id(a), vertex_id(b)
        edge = self._arc(a, b)
        return edge is not None and not edge.directed and self._arc(b, a) is edge

    def get_adjacent_vertices(self, identifier) -> List:
        """Neighbour identifiers of ``identifier`` (empty if unknown)."""
        return [nbr for nbr, _ in self._incident(vertex_id(identifier))]

    def get_adjacent_edges(self, identifier) -> List[Edge]:
        """Edges leaving ``identifier``, same order as the adjacent vertices."""
        return [edge for _, edge in self._incident(vertex_id(identifier))]

    def number_of_edges(self) -> int:
        """Distinct edges; an undirected edge counts once."""
        return self._num_edges

    def get_edges(self) -> List[Edge]:
        """Distinct edges in storage order."""
        seen = set()
        out = []
        for v in self.get_vertices():
            for edge in self.get_adjacent_edges(v.id):
                if id(edge) not in seen:
                    seen.add(id(edge))
                    out.append(edge)
        return out

    # Export

    def to_sparse(self, order=None) -> sp.csr_matrix:
        """
        Weight matrix in CSR format.

        Parameters
        ----------
        order : sequence, optional
            Vertex ids giving row/column order. Defaults to storage order.

        Returns
        -------
        scipy.sparse.csr_matrix
            ``M[i, j]`` is the weight of the arc from vertex ``i`` to vertex ``j``;
            undirected edges fill both cells.
        """
        ids = [v.id for v in self.get_vertices()] if order is None else list(order)
        index = {vid: i for i, vid in enumerate(ids)}
        n = len(ids)
        M = sp.dok_matrix((n, n), dtype=np.float64)
        for vid in ids:
            for nbr, edge in self._incident(vid):
                if nbr in index:
                    M[index[vid], index[nbr]] = edge.weight
        return M.tocsr()

    def __repr__(self):
        return f"{type(self).__name__}(vertices={self.size()}, edges={self.number_of_edges()})"
