from __future__ import annotations

import logging
from typing import Dict, List, Optional, Tuple

import numpy as np

from .base import AdjacencyStructure
from .components import Edge, Vertex
from .exceptions import InvalidCapacityError

logger = logging.getLogger(__name__)


class AdjacencyMatrix(AdjacencyStructure):
    """
    Dense adjacency storage backed by a NumPy object array.

    ``cells[i, j]`` holds the edge leading from the vertex in slot ``i`` to the
    vertex in slot ``j``. An undirected edge occupies ``[i, j]`` and ``[j, i]``
    as the same instance. Slots are assigned in insertion order and never move.

    Parameters
    ----------
    capacity : int, optional
        Initial number of vertex slots. Defaults to ``DEFAULT_CAPACITY``.

    Raises
    ------
    InvalidCapacityError
        If ``capacity`` is not a positive integer.

    Notes
    -----
    When every slot is taken the array is reallocated ``GROWTH_FACTOR`` times
    larger; existing cells keep their indices.
    """

    DEFAULT_CAPACITY = 32
    GROWTH_FACTOR = 2
    PLACEHOLDER = "-"

    def __init__(self, capacity: Optional[int] = None):
        super().__init__()
        if capacity is None:
            capacity = self.DEFAULT_CAPACITY
        if isinstance(capacity, bool) or not isinstance(capacity, (int, np.integer)) or capacity <= 0:
            raise InvalidCapacityError(f"Matrix capacity must be a positive integer, got {capacity!r}")
        self._vertices: List[Vertex] = []
        self._index: Dict[object, int] = {}
        self._cells = np.full((int(capacity), int(capacity)), None, dtype=object)

    @property
    def capacity(self) -> int:
        return self._cells.shape[0]

    def index_of(self, identifier) -> Optional[int]:
        """Storage slot of ``identifier``, or None."""
        return self._index.get(identifier)

    def _grow(self) -> None:
        old = self._cells
        n = len(self._vertices)
        new_capacity = old.shape[0] * self.GROWTH_FACTOR
        cells = np.full((new_capacity, new_capacity), None, dtype=object)
        cells[:n, :n] = old[:n, :n]
        self._cells = cells
        logger.debug("Grew adjacency matrix from %d to %d slots", old.shape[0], new_capacity)

    def _insert_vertex(self, vertex: Vertex) -> None:
        if len(self._vertices) == self.capacity:
            self._grow()
        self._index[vertex.id] = len(self._vertices)
        self._vertices.append(vertex)

    def _arc(self, a, b) -> Optional[Edge]:
        i = self._index.get(a)
        j = self._index.get(b)
        if i is None or j is None:
            return None
        return self._cells[i, j]

    def _link(self, edge: Edge) -> None:
        i = self._index[edge.source]
        j = self._index[edge.target]
        self._cells[i, j] = edge
        if not edge.directed:
            self._cells[j, i] = edge

    def _incident(self, identifier):
        i = self._index.get(identifier)
        if i is None:
            return
        row = self._cells[i, : len(self._vertices)]
        for j, edge in enumerate(row):
            if edge is not None:
                yield self._vertices[j].id, edge

    def size(self) -> int:
        return len(self._vertices)

    def get_vertex(self, identifier) -> Optional[Vertex]:
        i = self._index.get(identifier)
        return None if i is None else self._vertices[i]

    def get_vertices(self) -> Tuple[Vertex, ...]:
        return tuple(self._vertices)

    def dump(self) -> str:
        n = len(self._vertices)
        if n == 0:
            return ""
        lines = ["\t" + "\t".join(str(v.id) for v in self._vertices)]
        for i, v in enumerate(self._vertices):
            row = [self.PLACEHOLDER if e is None else str(e.weight) for e in self._cells[i, :n]]
            lines.append(f"{v.id}\t" + "\t".join(row))
        return "\n".join(lines)
