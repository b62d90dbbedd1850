"""
Degree-parity classification of Eulerian graphs.

The degree of a vertex is the length of its incident-edge list, so an
undirected edge counts once for each endpoint and a directed edge only for
its source. A graph without vertices has no odd vertex and is therefore
reported as an Eulerian cycle.
"""


def odd_degree_vertices(graph):
    """Identifiers of the vertices whose degree is odd, in storage order."""
    return [v.id for v in graph.get_vertices() if len(graph.get_adjacent_edges(v.id)) % 2]


def odd_degree_count(graph) -> int:
    return len(odd_degree_vertices(graph))


def is_eulerian(graph) -> bool:
    """True if the graph admits an Eulerian trail or cycle (0 or 2 odd vertices)."""
    return odd_degree_count(graph) in (0, 2)


def is_eulerian_trail(graph) -> bool:
    """True if exactly two vertices have odd degree."""
    return odd_degree_count(graph) == 2


def is_eulerian_cycle(graph) -> bool:
    """True if no vertex has odd degree."""
    return odd_degree_count(graph) == 0
