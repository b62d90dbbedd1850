try:
    import networkx as nx
except ModuleNotFoundError as e:
    raise ModuleNotFoundError(
        "Optional dependency 'networkx' is not installed. "
        "Install with: pip install adjgraph[networkx]"
    ) from e

import warnings

from ..core.graph import Graph
from ..core.structure import StructureKind

_SCALARS = (str, int, float, bool, type(None))
_EDGE_RESERVED = {"weight", "edge_id", "directed"}


def _scalar_attrs(attrs: dict, where: str) -> dict:
    out = {}
    dropped = []
    for k, v in attrs.items():
        if isinstance(k, str) and isinstance(v, _SCALARS):
            out[k] = v
        else:
            dropped.append(k)
    if dropped:
        warnings.warn(
            f"Dropping non-scalar attributes {sorted(map(str, dropped))} on {where}",
            stacklevel=3,
        )
    return out


def to_nx(graph: Graph) -> "nx.DiGraph":
    """
    Export a Graph to a NetworkX ``DiGraph``.

    Parameters
    ----------
    graph : Graph
        Source graph instance.

    Returns
    -------
    networkx.DiGraph
        Nodes carry vertex properties. Every edge carries ``weight``,
        ``edge_id`` and ``directed``; an undirected edge is emitted in both
        directions with the same ``edge_id``.
    """
    G = nx.DiGraph()
    for v in graph.get_vertices():
        G.add_node(v.id, **dict(v.properties))
    for e in graph.get_edges():
        attrs = dict(e.properties)
        attrs.update(weight=e.weight, edge_id=e.edge_id, directed=e.directed)
        G.add_edge(e.source, e.target, **attrs)
        if not e.directed:
            G.add_edge(e.target, e.source, **attrs)
    return G


def from_nx(nxG, structure=StructureKind.LIST, capacity=None) -> Graph:
    """
    Build a Graph from any NetworkX graph.

    Parameters
    ----------
    nxG : networkx.Graph | networkx.DiGraph | networkx.MultiGraph | networkx.MultiDiGraph
        Source graph. Undirected NetworkX edges become undirected edges. In a
        directed source, a reciprocal pair flagged ``directed=False`` with a
        shared ``edge_id`` (as written by :func:`to_nx`) becomes one undirected
        edge; everything else becomes directed edges.
    structure : StructureKind or str, optional
        Adjacency structure of the new graph.
    capacity : int, optional
        Matrix capacity hint.

    Returns
    -------
    Graph

    Notes
    -----
    Parallel edges of multigraphs cannot be represented; only the first edge
    between two vertices is kept and a warning is issued. Non-scalar
    attributes are dropped with a warning.
    """
    G = Graph(structure=structure, capacity=capacity)
    for node, data in nxG.nodes(data=True):
        G.add_vertex(node, **_scalar_attrs(data, f"vertex {node!r}"))

    directed_source = nxG.is_directed()
    skipped = 0
    for u, v, data in nxG.edges(data=True):
        data = dict(data)
        weight = data.get("weight", 1.0)
        edge_id = data.get("edge_id")
        props = _scalar_attrs(
            {k: val for k, val in data.items() if k not in _EDGE_RESERVED},
            f"edge {u!r}-{v!r}",
        )
        if directed_source:
            undirected = data.get("directed") is False
            if undirected:
                if G.contains_edge_undirected(u, v):
                    continue
                edge = G.add_edge_undirected(u, v, weight, edge_id=edge_id, **props)
            else:
                edge = G.add_edge_directed(u, v, weight, edge_id=edge_id, **props)
        else:
            edge = G.add_edge_undirected(u, v, weight, edge_id=edge_id, **props)
        if edge is None:
            skipped += 1
    if skipped:
        warnings.warn(f"Skipped {skipped} edge(s) that duplicate an existing vertex pair", stacklevel=2)
    return G
