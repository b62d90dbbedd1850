"""
Exhaustive enumeration of edge-covering walks.

A walk is reported when it has consumed every edge of the graph exactly once,
so the results are the Eulerian trails starting at ``root``. Search cost grows
exponentially with the number of edges.
"""
from __future__ import annotations

from typing import Hashable, Iterator, List, Tuple

PATH_SEPARATOR = "->"


def iter_all_paths(graph, root: Hashable) -> Iterator[Tuple[Hashable, ...]]:
    """
    Yield every walk from ``root`` that uses each edge exactly once.

    Parameters
    ----------
    graph : Graph or AdjacencyStructure
        Anything exposing ``contains_vertex``, ``get_adjacent_edges`` and
        ``number_of_edges``.
    root : hashable
        Start vertex identifier.

    Yields
    ------
    tuple
        Vertex identifiers from ``root`` to the end of the walk.

    Notes
    -----
    - Depth-first, driven by an explicit stack of ``(vertex, edge iterator)``
      frames, so recursion depth is never a limit.
    - Edges are taken in adjacency order and leave the current vertex towards
      ``edge.opposite(current)``.
    - Consumed edges are tracked in a set local to this call: edges are never
      mutated and concurrent enumerations do not interfere.
    - A graph without edges yields ``(root,)``; an unknown root yields nothing.
    """
    if not graph.contains_vertex(root):
        return
    total = graph.number_of_edges()
    walk = [root]
    consumed = []
    used = set()
    if total == 0:
        yield tuple(walk)
        return

    frames = [(root, iter(graph.get_adjacent_edges(root)))]
    while frames:
        current, edges = frames[-1]
        for edge in edges:
            if id(edge) in used:
                continue
            used.add(id(edge))
            consumed.append(edge)
            nxt = edge.opposite(current)
            walk.append(nxt)
            if len(consumed) == total:
                yield tuple(walk)
            frames.append((nxt, iter(graph.get_adjacent_edges(nxt))))
            break
        else:
            frames.pop()
            walk.pop()
            if consumed:
                used.discard(id(consumed.pop()))


def format_path(path, separator: str = PATH_SEPARATOR) -> str:
    return separator.join(str(v) for v in path)


def find_all_paths(graph, root: Hashable, separator: str = PATH_SEPARATOR) -> List[str]:
    """
    List every edge-covering walk from ``root`` as ``"a->b->c"`` strings.

    See Also
    --------
    iter_all_paths
    """
    return [format_path(p, separator) for p in iter_all_paths(graph, root)]
