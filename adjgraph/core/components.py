"""Vertex and edge records stored by the adjacency structures."""
from __future__ import annotations

from types import MappingProxyType
from typing import Any, Hashable, Mapping, Optional, Union

import numpy as np

from .structure import Color, EdgeType

PropertyValue = Union[str, int, float, bool, None]
_PROPERTY_TYPES = (str, int, float, bool, type(None))


def check_weight(weight):
    """Return ``weight`` if it is a real number, raise ``TypeError`` otherwise."""
    if isinstance(weight, bool) or not isinstance(weight, (int, float, np.integer, np.floating)):
        raise TypeError(f"weight must be numeric, got {type(weight).__name__}")
    return weight


class _PropertyBag:
    """String-keyed store of scalar values shared by :class:`Vertex` and :class:`Edge`."""

    __slots__ = ()

    # Bumped on every property write, by any vertex or edge.
    revision = 0

    def set_property(self, key: str, value: PropertyValue) -> None:
        if not isinstance(key, str):
            raise TypeError(f"property key must be str, got {type(key).__name__}")
        if not isinstance(value, _PROPERTY_TYPES):
            raise TypeError(
                f"property {key!r} must be str, int, float, bool or None, "
                f"got {type(value).__name__}"
            )
        self._properties[key] = value
        _PropertyBag.revision += 1

    def get_property(self, key: str, default: Any = None) -> PropertyValue:
        return self._properties.get(key, default)

    def update_properties(self, **properties: PropertyValue) -> None:
        for key, value in properties.items():
            self.set_property(key, value)

    @property
    def properties(self) -> Mapping[str, PropertyValue]:
        """Read-only view of the property bag."""
        return MappingProxyType(self._properties)


class Vertex(_PropertyBag):
    """A graph vertex.

    Identity is the identifier alone: two vertices with the same ``id`` are
    equal and hash alike whatever their color or properties.

    Parameters
    ----------
    id : hashable
        Vertex identifier.
    **properties
        Initial property bag (scalar values only).
    """

    __slots__ = ("_id", "color", "_properties")

    def __init__(self, id: Hashable, **properties: PropertyValue):
        self._id = id
        self.color: Optional[Color] = None
        self._properties: dict = {}
        self.update_properties(**properties)

    @property
    def id(self) -> Hashable:
        return self._id

    def __eq__(self, other):
        if not isinstance(other, Vertex):
            return NotImplemented
        return self._id == other._id

    def __hash__(self):
        return hash((Vertex, self._id))

    def __repr__(self):
        return f"Vertex({self._id!r})"

    def __str__(self):
        return str(self._id)


class Edge(_PropertyBag):
    """A link between two vertex identifiers.

    An undirected edge is a single instance reachable from both endpoints;
    ``source``/``target`` then only record the insertion order. Edges compare
    by identity.

    Parameters
    ----------
    source, target : hashable
        Endpoint identifiers.
    weight : int or float, optional
        Edge weight.
    directed : bool, optional
        False when the edge is the undirected relation between its endpoints.
    edge_id : hashable, optional
        External identifier assigned by the owning graph.
    **properties
        Initial property bag (scalar values only).
    """

    __slots__ = ("_source", "_target", "_weight", "directed", "edge_id", "color", "_properties")

    def __init__(self, source, target, weight=1.0, directed=True, edge_id=None, **properties):
        self._source = source
        self._target = target
        self._weight = check_weight(weight)
        self.directed = bool(directed)
        self.edge_id = edge_id
        self.color: Optional[Color] = None
        self._properties: dict = {}
        self.update_properties(**properties)

    @property
    def source(self):
        return self._source

    @property
    def target(self):
        return self._target

    @property
    def weight(self):
        return self._weight

    @property
    def edge_type(self) -> EdgeType:
        return EdgeType.DIRECTED if self.directed else EdgeType.UNDIRECTED

    @property
    def endpoints(self) -> tuple:
        return (self._source, self._target)

    def opposite(self, vertex_id):
        """Endpoint reached when leaving ``vertex_id`` through this edge."""
        if self._target == vertex_id:
            return self._source
        return self._target

    def __repr__(self):
        arrow = "->" if self.directed else "--"
        return f"Edge({self._source!r} {arrow} {self._target!r}, weight={self._weight!r})"
