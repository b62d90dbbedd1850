import inspect
import logging
import time
from collections import deque
from datetime import datetime, timezone
from enum import Enum
from functools import wraps

import numpy as np
import polars as pl

from .. import algorithms
from .adjacency_list import AdjacencyList
from .adjacency_matrix import AdjacencyMatrix
from .base import vertex_id
from .components import Edge, Vertex, _PropertyBag, check_weight
from .exceptions import NonEmptyGraphError
from .structure import StructureKind

logger = logging.getLogger(__name__)


def _make_structure(kind, capacity=None):
    kind = StructureKind.coerce(kind)
    if kind is StructureKind.MATRIX:
        return AdjacencyMatrix(capacity)
    return AdjacencyList()


class Graph:
    """
    Weighted graph over a pluggable adjacency structure.

    The graph owns the authoritative vertex registry and an edge registry keyed
    by edge ID, and forwards topology to one adjacency structure (list or
    matrix) chosen at construction. Supports directed and undirected edges,
    Eulerian classification, exhaustive edge-covering walk enumeration,
    Polars attribute views and an in-memory mutation history.

    Parameters
    ----------
    structure : StructureKind or str, optional
        ``"list"`` (default) or ``"matrix"``.
    capacity : int, optional
        Initial vertex slots for the matrix structure (default 32, grows by
        doubling). Ignored by the list structure.
    history : bool, optional
        Record mutations in the in-memory history.
    history_limit : int, optional
        Keep only the most recent ``history_limit`` events (unbounded when None).

    Raises
    ------
    IllegalStructureError
        If ``structure`` is not a known kind.
    InvalidCapacityError
        If ``capacity`` is given for a matrix and is not positive.

    Notes
    -----
    - Duplicate vertices, edges and edge IDs are rejected with ``False``/``None``
      rather than exceptions.
    - Lookups on unknown identifiers return ``None`` or empty lists.
    - Vertex and edge counts always agree with the adjacency structure.

    See Also
    --------
    add_vertex, add_edge_directed, add_edge_undirected, find_all_paths
    """

    def __init__(self, structure=StructureKind.LIST, capacity=None, history=True, history_limit=None):
        self._structure_kind = StructureKind.coerce(structure)
        self._structure = _make_structure(self._structure_kind, capacity)

        # Registries (independent of the structure so identity survives swaps)
        self._vertices = {}  # vertex id -> Vertex
        self._edges = {}     # edge id -> Edge
        self._next_edge_id = 0

        # Mutation counter and per-backend conversion cache
        self._version = 0
        self._backend_cache = {}

        # History
        self._history_enabled = bool(history)
        self._history = deque(maxlen=history_limit)
        self._history_clock0 = time.perf_counter_ns()
        self._install_history_hooks()

    # Structure

    @property
    def structure(self):
        """The active adjacency structure (read it, do not mutate it directly)."""
        return self._structure

    @property
    def structure_kind(self):
        return self._structure_kind

    def set_structure(self, structure, capacity=None):
        """
        Replace the adjacency structure of an empty graph.

        Parameters
        ----------
        structure : StructureKind or str
        capacity : int, optional
            Matrix capacity hint.

        Raises
        ------
        NonEmptyGraphError
            If the graph already holds vertices.
        """
        if not self.is_empty():
            raise NonEmptyGraphError(
                f"Cannot attach a {StructureKind.coerce(structure).value} structure to a graph "
                f"with {self.number_of_vertices()} vertices"
            )
        self._structure = _make_structure(structure, capacity)
        self._structure_kind = StructureKind.coerce(structure)
        logger.debug("Attached %s structure", self._structure_kind.value)
        return self._structure_kind

    # Size

    def is_empty(self):
        return not self._vertices

    def size(self):
        """Number of vertices, as reported by the adjacency structure."""
        return self._structure.size()

    def number_of_vertices(self):
        return len(self._vertices)

    def number_of_edges(self):
        """Number of logical edges (an undirected edge counts once)."""
        return len(self._edges)

    @property
    def num_vertices(self):
        return self.number_of_vertices()

    @property
    def num_edges(self):
        return self.number_of_edges()

    def __len__(self):
        return self.number_of_vertices()

    def __contains__(self, x):
        return self.contains_vertex(x)

    def __iter__(self):
        return iter(self._vertices)

    # Vertices

    def add_vertex(self, vertex, **properties):
        """
        Add a vertex by identifier or :class:`Vertex` instance.

        Parameters
        ----------
        vertex : hashable or Vertex
            A passed ``Vertex`` instance is stored as is.
        **properties
            Scalar properties set on the new vertex.

        Returns
        -------
        bool
            False (and nothing changes) if the identifier is already present.
        """
        if self.contains_vertex(vertex):
            return False
        if not isinstance(vertex, Vertex):
            vertex = Vertex(vertex)
        vertex.update_properties(**properties)
        self._register_vertex(vertex)
        return True

    def _register_vertex(self, vertex):
        # INTERNAL: put a Vertex in both registry and structure
        self._structure.add_vertex(vertex)
        self._vertices[vertex.id] = self._structure.get_vertex(vertex.id)

    def _sync_vertex(self, identifier):
        # INTERNAL: adopt an endpoint the structure created implicitly
        if identifier not in self._vertices:
            self._vertices[identifier] = self._structure.get_vertex(identifier)

    def get_vertex(self, identifier):
        """Vertex for ``identifier``, or None."""
        return self._vertices.get(vertex_id(identifier))

    def get_vertices(self):
        """All vertices, in insertion order."""
        return tuple(self._vertices.values())

    def contains_vertex(self, x):
        return vertex_id(x) in self._vertices

    # Edges

    def _new_edge_id(self):
        """
        INTERNAL: Generate a fresh ``edge_<n>`` identifier.

        Returns
        -------
        str
        """
        while True:
            edge_id = f"edge_{self._next_edge_id}"
            self._next_edge_id += 1
            if edge_id not in self._edges:
                return edge_id

    def _add_edge(self, directed, source, target, weight, edge_id, properties):
        if isinstance(source, Edge):
            properties = {**source.properties, **properties}
            source, target, weight = source.source, source.target, source.weight
        if target is None:
            raise TypeError("target vertex is required")
        check_weight(weight)
        if edge_id is not None and edge_id in self._edges:
            return None
        for endpoint in (source, target):
            if isinstance(endpoint, Vertex) and not self.contains_vertex(endpoint):
                self._register_vertex(endpoint)
        a, b = vertex_id(source), vertex_id(target)

        insert = self._structure.add_edge_directed if directed else self._structure.add_edge_undirected
        edge = insert(a, b, weight, **properties)
        if edge is None:
            return None
        edge.edge_id = self._new_edge_id() if edge_id is None else edge_id
        self._edges[edge.edge_id] = edge
        self._sync_vertex(a)
        self._sync_vertex(b)
        return edge

    def add_edge_directed(self, source, target=None, weight=1.0, edge_id=None, **properties):
        """
        Add a directed edge ``source -> target``, creating missing endpoints.

        Parameters
        ----------
        source : hashable, Vertex or Edge
            Source vertex. An :class:`Edge` is copied (endpoints, weight and
            properties) into a new directed edge.
        target : hashable or Vertex
            Target vertex.
        weight : int or float, optional
            Edge weight (default 1.0).
        edge_id : hashable, optional
            External identifier; generated as ``edge_<n>`` when omitted.
        **properties
            Scalar edge properties.

        Returns
        -------
        Edge or None
            The created edge, or None if ``edge_id`` is taken or an arc
            ``source -> target`` (directed or undirected) already exists.

        Raises
        ------
        TypeError
            If ``weight`` is not numeric.
        """
        return self._add_edge(True, source, target, weight, edge_id, properties)

    def add_edge_undirected(self, source, target=None, weight=1.0, edge_id=None, **properties):
        """
        Add one undirected edge between ``source`` and ``target``.

        Returns
        -------
        Edge or None
            The created edge, or None if ``edge_id`` is taken or the pair is
            already linked in either direction.

        See Also
        --------
        add_edge_directed
        """
        return self._add_edge(False, source, target, weight, edge_id, properties)

    def get_edge(self, edge_id):
        """Edge registered under ``edge_id``, or None."""
        return self._edges.get(edge_id)

    def get_edges(self):
        """All edges, in insertion order."""
        return tuple(self._edges.values())

    def contains_edge(self, edge_id):
        return edge_id in self._edges

    def contains_edge_directed(self, a, b):
        """True if a one-way edge ``a -> b`` exists."""
        return self._structure.contains_edge_directed(a, b)

    def contains_edge_undirected(self, a, b):
        """True if ``a`` and ``b`` share an undirected edge."""
        return self._structure.contains_edge_undirected(a, b)

    # Adjacency

    def get_adjacent_vertices(self, identifier):
        """
        Neighbours reachable from ``identifier``.

        Returns
        -------
        list[Vertex]
            Insertion order for the list structure, slot order for the matrix.
            Empty for an unknown identifier.
        """
        return [self._vertices[nbr] for nbr in self._structure.get_adjacent_vertices(identifier)]

    def get_adjacent_edges(self, identifier):
        """Edges leaving ``identifier`` (empty for an unknown identifier)."""
        return self._structure.get_adjacent_edges(identifier)

    def degree(self, identifier):
        """Length of the incident-edge list of ``identifier`` (0 if unknown)."""
        return len(self.get_adjacent_edges(identifier))

    # Algorithms

    def odd_degree_vertices(self):
        return algorithms.odd_degree_vertices(self)

    def is_eulerian(self):
        """True if zero or two vertices have odd degree."""
        return algorithms.is_eulerian(self)

    def is_eulerian_trail(self):
        """True if exactly two vertices have odd degree."""
        return algorithms.is_eulerian_trail(self)

    def is_eulerian_cycle(self):
        """True if no vertex has odd degree."""
        return algorithms.is_eulerian_cycle(self)

    def iter_all_paths(self, root):
        return algorithms.iter_all_paths(self, vertex_id(root))

    def find_all_paths(self, root):
        """
        Every walk from ``root`` that uses each edge exactly once.

        Parameters
        ----------
        root : hashable or Vertex

        Returns
        -------
        list[str]
            Paths formatted ``"1->2->4"``; empty if ``root`` is unknown.
        """
        return algorithms.find_all_paths(self, vertex_id(root))

    # Attributes

    def set_vertex_attrs(self, identifier, **attrs):
        """
        Upsert scalar properties on a vertex.

        Raises
        ------
        KeyError
            If the vertex does not exist.
        TypeError
            If a value is not a scalar.
        """
        vertex = self.get_vertex(identifier)
        if vertex is None:
            raise KeyError(f"vertex {identifier} not found")
        vertex.update_properties(**attrs)

    def set_edge_attrs(self, edge_id, **attrs):
        """
        Upsert scalar properties on an edge.

        Raises
        ------
        KeyError
            If the edge does not exist.
        """
        edge = self._edges.get(edge_id)
        if edge is None:
            raise KeyError(f"Edge {edge_id} not found")
        edge.update_properties(**attrs)

    # Materialized views

    def vertices_view(self):
        """
        Polars DF [DataFrame] of vertices.

        Returns
        -------
        polars.DataFrame
            ``vertex_id`` (Utf8), ``degree`` plus one column per property.
        """
        rows = []
        for v in self._vertices.values():
            row = {"vertex_id": str(v.id), "degree": self.degree(v.id)}
            row.update(v.properties)
            rows.append(row)
        if not rows:
            return pl.DataFrame(schema={"vertex_id": pl.Utf8, "degree": pl.Int64})
        return pl.DataFrame(rows, infer_schema_length=None, strict=False)

    def edges_view(self):
        """
        Polars DF [DataFrame] of edges.

        Returns
        -------
        polars.DataFrame
            ``edge_id``, ``source``, ``target`` (Utf8), ``weight`` (Float64),
            ``directed`` (Boolean) plus one column per property.
        """
        rows = []
        for eid, e in self._edges.items():
            row = {
                "edge_id": str(eid),
                "source": str(e.source),
                "target": str(e.target),
                "weight": float(e.weight),
                "directed": e.directed,
            }
            row.update(e.properties)
            rows.append(row)
        if not rows:
            return pl.DataFrame(
                schema={
                    "edge_id": pl.Utf8,
                    "source": pl.Utf8,
                    "target": pl.Utf8,
                    "weight": pl.Float64,
                    "directed": pl.Boolean,
                }
            )
        return pl.DataFrame(rows, infer_schema_length=None, strict=False)

    def adjacency_matrix(self):
        """
        Weight matrix as ``scipy.sparse.csr_matrix``, rows/columns ordered like
        :meth:`get_vertices`.
        """
        return self._structure.to_sparse(order=list(self._vertices))

    # Output

    def dump(self):
        """Deterministic text dump of the adjacency structure."""
        return self._structure.dump()

    def print(self):
        """Emit :meth:`dump` through the module logger at INFO level."""
        logger.info("%s", self.dump())

    def __str__(self):
        return self.dump()

    def __repr__(self):
        return (
            f"<Graph | structure={self._structure_kind.value} · "
            f"V={self.number_of_vertices()} · E={self.number_of_edges()}>"
        )

    # Interop

    def to_nx(self, cache=True):
        """
        NetworkX ``DiGraph`` copy of the graph, cached until the next mutation
        or property change.

        See Also
        --------
        adjgraph.adapters.networkx.to_nx
        """
        from ..adapters.networkx import to_nx

        # Vertex and edge properties can change through the live objects.
        stamp = (self._version, _PropertyBag.revision)
        entry = self._backend_cache.get("networkx")
        if cache and entry is not None and entry["stamp"] == stamp:
            return entry["graph"]
        nxG = to_nx(self)
        self._backend_cache["networkx"] = {"graph": nxG, "stamp": stamp}
        return nxG

    # History and Timeline

    def _utcnow_iso(self):
        return datetime.now(timezone.utc).isoformat(timespec="microseconds").replace("+00:00", "Z")

    def _jsonify(self, x):
        # Make args/return JSON-safe & compact.
        if isinstance(x, Enum):
            return x.value
        if x is None or isinstance(x, (bool, int, float, str)):
            return x
        if isinstance(x, Edge):
            return x.edge_id
        if isinstance(x, Vertex):
            return self._jsonify(x.id)
        if isinstance(x, (list, tuple)):
            return [self._jsonify(v) for v in x]
        if isinstance(x, dict):
            return {str(k): self._jsonify(v) for k, v in x.items()}
        if isinstance(x, np.generic):
            return x.item()
        return f"<<{type(x).__name__}>>"

    def _log_event(self, op, **fields):
        if not self._history_enabled:
            return
        evt = {
            "version": self._version,
            "ts_utc": self._utcnow_iso(),
            "mono_ns": time.perf_counter_ns() - self._history_clock0,
            "op": op,
        }
        for k, v in fields.items():
            evt[k] = self._jsonify(v)
        self._history.append(evt)

    def _log_mutation(self, name=None):
        def deco(fn):
            op = name or fn.__name__
            sig = inspect.signature(fn)

            @wraps(fn)
            def wrapper(*args, **kwargs):
                bound = sig.bind(*args, **kwargs)
                bound.apply_defaults()
                result = fn(*args, **kwargs)
                self._version += 1
                payload = {}
                for k, v in bound.arguments.items():
                    if sig.parameters[k].kind is inspect.Parameter.VAR_KEYWORD:
                        payload.update(v)  # flatten **attrs
                    else:
                        payload[k] = v
                payload["result"] = result
                self._log_event(op, **payload)
                return result
            return wrapper
        return deco

    def _install_history_hooks(self):
        # Mutating methods to wrap. Add here if you add new mutators.
        to_wrap = [
            "add_vertex", "add_edge_directed", "add_edge_undirected",
            "set_vertex_attrs", "set_edge_attrs", "set_structure",
        ]
        for name in to_wrap:
            fn = getattr(self, name)
            # Avoid double-wrapping
            if getattr(fn, "__wrapped__", None) is None:
                setattr(self, name, self._log_mutation(name)(fn))

    def history(self, as_df=False):
        """
        Return the mutation history (oldest first).

        Parameters
        ----------
        as_df : bool, default False
            If True, return a Polars DF [DataFrame]; otherwise a list of dicts.

        Returns
        -------
        list[dict] or polars.DataFrame
            Each event includes ``version``, ``ts_utc`` (ISO-8601 UTC),
            ``mono_ns`` (monotonic nanoseconds since graph creation), ``op``,
            the call arguments and ``result``.
        """
        if as_df:
            if not self._history:
                return pl.DataFrame(schema={"version": pl.Int64, "ts_utc": pl.Utf8, "mono_ns": pl.Int64, "op": pl.Utf8})
            return pl.from_dicts(list(self._history), infer_schema_length=None, strict=False)
        return list(self._history)

    def enable_history(self, flag=True):
        """Start (True) or pause (False) mutation logging."""
        self._history_enabled = bool(flag)

    def clear_history(self):
        self._history.clear()

    def mark(self, label):
        """Insert a manual ``op='mark'`` event into the history."""
        self._log_event("mark", label=label)


def create_graph(structure=StructureKind.LIST, capacity=None, history=True, history_limit=None):
    """
    Build an empty :class:`Graph` over the requested adjacency structure.

    Raises
    ------
    IllegalStructureError
        If ``structure`` is not ``LIST`` or ``MATRIX``.
    """
    return Graph(structure=structure, capacity=capacity, history=history, history_limit=history_limit)
