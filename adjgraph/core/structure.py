from enum import Enum

from .exceptions import IllegalStructureError


class StructureKind(str, Enum):
    """Adjacency structure backing a :class:`~adjgraph.core.graph.Graph`.

    Attributes:
        LIST: Sparse, dict-of-lists storage
        MATRIX: Dense, growable 2D array storage
    """

    LIST = "list"
    MATRIX = "matrix"

    @classmethod
    def coerce(cls, value):
        """Return the member for ``value`` (member, value or name, any case)."""
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            key = value.strip()
            for member in cls:
                if key.lower() in (member.value, member.name.lower()):
                    return member
        raise IllegalStructureError(f"Illegal adjacency structure: {value!r}")


class EdgeType(str, Enum):
    """Edge type (DIRECTED, UNDIRECTED).

    Attributes:
        DIRECTED: Represents a directed edge
        UNDIRECTED: Represents an undirected edge
    """

    DIRECTED = "directed"
    UNDIRECTED = "undirected"


class Color(str, Enum):
    """Transient marker for searches run by client code."""

    UNVISITED = "unvisited"
    IN_PROGRESS = "in_progress"
    DONE = "done"
