# adjgraph/__init__.py
"""adjgraph: single import, full API."""
from __future__ import annotations

import logging
from importlib import import_module
from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as _pkg_version
from typing import Any

logging.getLogger(__name__).addHandler(logging.NullHandler())

# Lazily exposed submodules (imported on first attribute access)
_lazy_submodules = {
    "adapters": "adjgraph.adapters",
    "algorithms": "adjgraph.algorithms",
    "core": "adjgraph.core",
    "networkx": "adjgraph.adapters.networkx",
}

# Curated top-level symbols (lazy). name -> (module, attribute)
_lazy_symbols: dict[str, tuple[str, str]] = {
    # Core
    "Graph": ("adjgraph.core.graph", "Graph"),
    "create_graph": ("adjgraph.core.graph", "create_graph"),
    "Vertex": ("adjgraph.core.components", "Vertex"),
    "Edge": ("adjgraph.core.components", "Edge"),
    "AdjacencyList": ("adjgraph.core.adjacency_list", "AdjacencyList"),
    "AdjacencyMatrix": ("adjgraph.core.adjacency_matrix", "AdjacencyMatrix"),
    "StructureKind": ("adjgraph.core.structure", "StructureKind"),
    "Color": ("adjgraph.core.structure", "Color"),
    "EdgeType": ("adjgraph.core.structure", "EdgeType"),

    # Errors
    "GraphError": ("adjgraph.core.exceptions", "GraphError"),
    "IllegalStructureError": ("adjgraph.core.exceptions", "IllegalStructureError"),
    "InvalidCapacityError": ("adjgraph.core.exceptions", "InvalidCapacityError"),
    "NonEmptyGraphError": ("adjgraph.core.exceptions", "NonEmptyGraphError"),

    # NetworkX adapter
    "to_nx": ("adjgraph.adapters.networkx", "to_nx"),
    "from_nx": ("adjgraph.adapters.networkx", "from_nx"),
}

__all__ = sorted(set(list(_lazy_submodules) + list(_lazy_symbols)))


def __getattr__(name: str) -> Any:  # PEP 562: lazy attribute resolution
    if name in _lazy_submodules:
        return import_module(_lazy_submodules[name])
    if name in _lazy_symbols:
        mod, attr = _lazy_symbols[name]
        return getattr(import_module(mod), attr)
    raise AttributeError(name)


def __dir__() -> list[str]:
    return sorted(list(globals().keys()) + list(__all__))


try:
    __version__ = _pkg_version("adjgraph")
except PackageNotFoundError:
    __version__ = "0.0.0"
