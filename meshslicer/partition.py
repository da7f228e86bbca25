"""
Splitting a cut mesh into the parts on either side of the plane.

After `PlaneSlicer.cut` every triangle lies on one side of the plane or on
it, so a triangle's side can be read from its centroid. The halves are
returned uncapped: the cross-section is left open.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Dict, List, Tuple

import networkx as nx
import numpy as np

from .geometry import PRECISION, Plane
from .intersections import edge_key
from .mesh import TriangleMesh

logger = logging.getLogger(__name__)
logger.addHandler(logging.NullHandler())

BELOW = -1
ON_PLANE = 0
ABOVE = 1


@dataclass
class Partition:
    """Triangles of a cut mesh grouped by side of the plane."""

    below: TriangleMesh
    above: TriangleMesh
    on_plane: TriangleMesh


def classify_triangles(
    mesh: TriangleMesh, plane: Plane, tol: float = PRECISION
) -> np.ndarray:
    """
    Side of each triangle relative to the plane.

    The centroid's signed distance is scaled by the normal length, so `tol`
    is in mesh units regardless of how the normal is scaled.

    Returns:
        (M,) int array with BELOW (-1), ON_PLANE (0) or ABOVE (+1) per
        triangle. "Above" is the side the normal points to.
    """
    F = mesh.faces_array()
    if F.size == 0:
        return np.zeros(0, dtype=int)
    if plane.is_degenerate:
        raise ValueError("Cannot classify against a plane with a zero normal")
    V = mesh.vertices_array()
    centroids = V[F].mean(axis=1)
    d = plane.signed_distance(centroids) / np.linalg.norm(plane.as_arrays()[1])
    sides = np.zeros(len(F), dtype=int)
    sides[d > tol] = ABOVE
    sides[d < -tol] = BELOW
    return sides


def partition_mesh(
    mesh: TriangleMesh, plane: Plane, tol: float = PRECISION
) -> Partition:
    """Split `mesh` into compacted sub-meshes below, above and on the plane."""
    sides = classify_triangles(mesh, plane, tol=tol)
    parts = Partition(
        below=mesh.submesh(np.flatnonzero(sides == BELOW).tolist()),
        above=mesh.submesh(np.flatnonzero(sides == ABOVE).tolist()),
        on_plane=mesh.submesh(np.flatnonzero(sides == ON_PLANE).tolist()),
    )
    logger.debug(
        "Partition: %d below, %d above, %d on plane",
        parts.below.n_triangles,
        parts.above.n_triangles,
        parts.on_plane.n_triangles,
    )
    return parts


def face_adjacency_graph(mesh: TriangleMesh) -> nx.Graph:
    """
    Graph with one node per triangle and an edge between triangles sharing
    an undirected mesh edge.
    """
    G = nx.Graph()
    G.add_nodes_from(range(mesh.n_triangles))
    edge_faces: Dict[Tuple[int, int], List[int]] = {}
    for tid, tri in enumerate(mesh.triangles):
        for n in range(3):
            key = edge_key(tri[n], tri[(n + 1) % 3])
            edge_faces.setdefault(key, []).append(tid)
    for faces in edge_faces.values():
        for u, v in zip(faces[:-1], faces[1:]):
            G.add_edge(u, v)
    return G


def connected_pieces(mesh: TriangleMesh) -> List[TriangleMesh]:
    """
    Split `mesh` into edge-connected pieces, largest first.

    Triangles touching only at a vertex belong to different pieces.
    """
    G = face_adjacency_graph(mesh)
    comps = sorted(nx.connected_components(G), key=len, reverse=True)
    return [mesh.submesh(sorted(c)) for c in comps]
