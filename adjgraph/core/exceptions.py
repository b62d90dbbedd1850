"""Exceptions raised while building a graph.

Duplicate insertions and lookup misses are not errors: they are reported
through ``None``/``False``/empty results.
"""


class GraphError(Exception):
    """Base class for graph construction errors."""


class IllegalStructureError(GraphError, ValueError):
    """Unknown adjacency structure kind."""


class InvalidCapacityError(GraphError, ValueError):
    """Matrix capacity is not a positive integer."""


class NonEmptyGraphError(GraphError):
    """An adjacency structure can only be attached to an empty graph."""
