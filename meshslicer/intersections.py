"""
Edge intersection cache.

Maps an undirected mesh edge to the index of the vertex inserted where that
edge crosses the cutting plane. Two triangles sharing an edge therefore share
the same split vertex, and each crossing point is computed once per cut.
"""

from __future__ import annotations

import logging
from typing import Dict, ItemsView, Optional, Tuple

from .geometry import (
    PRECISION,
    Plane,
    check_precision,
    interpolate,
    is_crossing,
    solve_crossing,
)
from .mesh import TriangleMesh

logger = logging.getLogger(__name__)
logger.addHandler(logging.NullHandler())

Edge = Tuple[int, int]


def edge_key(i: int, j: int) -> Edge:
    """Canonical (min, max) key of the undirected edge (i, j)."""
    return (i, j) if i < j else (j, i)


class IntersectionCache:
    """
    Lazily filled ``edge -> split vertex index`` mapping.

    The cache only stores indices into the mesh it was used with. It must be
    cleared before each new cut, otherwise indices from a previous plane
    would be reused.
    """

    def __init__(self, precision: float = PRECISION):
        """
        Raises:
            ValueError: If `precision` is not strictly between 0 and 0.5.
        """
        self.precision = check_precision(precision)
        self._splits: Dict[Edge, int] = {}

    def __len__(self) -> int:
        return len(self._splits)

    def __contains__(self, edge: object) -> bool:
        if not isinstance(edge, tuple) or len(edge) != 2:
            return False
        return edge_key(*edge) in self._splits

    def items(self) -> ItemsView[Edge, int]:
        return self._splits.items()

    def clear(self) -> None:
        self._splits.clear()

    def get_or_create(
        self, mesh: TriangleMesh, i: int, j: int, plane: Plane
    ) -> Optional[int]:
        """
        Return the split vertex on edge (i, j), creating it if needed.

        Args:
            mesh: Mesh owning the vertices; a new vertex may be appended.
            i, j: Edge endpoints, in either order.
            plane: Cutting plane.

        Returns:
            Index of the split vertex, or None if the edge does not cross
            the plane.
        """
        i, j = edge_key(i, j)
        p = mesh.positions[i]
        q = mesh.positions[j]
        lam = solve_crossing(p, q, plane.origin, plane.normal)
        if not is_crossing(lam, self.precision):
            return None

        key = (i, j)
        found = self._splits.get(key)
        if found is not None:
            return found

        m = mesh.add_vertex(interpolate(p, q, lam))
        self._splits[key] = m
        return m
