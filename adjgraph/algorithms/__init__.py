from .eulerian import (
    is_eulerian,
    is_eulerian_cycle,
    is_eulerian_trail,
    odd_degree_count,
    odd_degree_vertices,
)
from .paths import PATH_SEPARATOR, find_all_paths, format_path, iter_all_paths

__all__ = [
    "PATH_SEPARATOR",
    "find_all_paths",
    "format_path",
    "is_eulerian",
    "is_eulerian_cycle",
    "is_eulerian_trail",
    "iter_all_paths",
    "odd_degree_count",
    "odd_degree_vertices",
]
