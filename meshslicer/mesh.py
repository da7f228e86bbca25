"""
Triangle mesh container used by the slicer.

`TriangleMesh` keeps vertex positions and triangles in plain Python lists so
that both can grow while a cut is running. Vertices and triangles are
identified by their index; indices are never reused or compacted during a
cut. Conversions to numpy arrays and `trimesh.Trimesh` are provided for
analysis and interop.
"""

from __future__ import annotations

import logging
from typing import Dict, Iterable, List, Optional, Sequence, Tuple

import numpy as np
import trimesh

logger = logging.getLogger(__name__)
logger.addHandler(logging.NullHandler())

Position = Tuple[float, float, float]
Triangle = Tuple[int, int, int]


class TriangleMesh:
    """
    Growable vertex and triangle buffers.

    Attributes:
        positions: List of (x, y, z) float tuples.
        triangles: List of (i, j, k) vertex index tuples.
    """

    def __init__(
        self,
        positions: Optional[Iterable[Sequence[float]]] = None,
        triangles: Optional[Iterable[Sequence[int]]] = None,
    ):
        self.positions: List[Position] = []
        self.triangles: List[Triangle] = []
        if positions is not None:
            for p in positions:
                self.add_vertex(p)
        if triangles is not None:
            for t in triangles:
                self.add_triangle(t)

    def __repr__(self) -> str:
        return f"TriangleMesh(n_vertices={self.n_vertices}, n_triangles={self.n_triangles})"

    # ---------------------------------------------------------------------
    # Buffers
    # ---------------------------------------------------------------------
    @property
    def n_vertices(self) -> int:
        return len(self.positions)

    @property
    def n_triangles(self) -> int:
        return len(self.triangles)

    def add_vertex(self, p: Sequence[float]) -> int:
        """Append a vertex and return its index."""
        x, y, z = (float(c) for c in p)
        self.positions.append((x, y, z))
        return len(self.positions) - 1

    def add_triangle(self, t: Sequence[int]) -> int:
        """Append a triangle and return its index."""
        i, j, k = (int(c) for c in t)
        self.triangles.append((i, j, k))
        return len(self.triangles) - 1

    def clear(self) -> None:
        self.positions.clear()
        self.triangles.clear()

    def copy(self) -> "TriangleMesh":
        cp = TriangleMesh()
        cp.positions = list(self.positions)
        cp.triangles = list(self.triangles)
        return cp

    def validate(self) -> None:
        """
        Check that every triangle references existing vertices.

        Raises:
            ValueError: On the first triangle holding an out-of-range index.
        """
        n = len(self.positions)
        for tid, tri in enumerate(self.triangles):
            for idx in tri:
                if idx < 0 or idx >= n:
                    raise ValueError(
                        f"Triangle {tid} {tri} references vertex {idx}, "
                        f"but the mesh has {n} vertices"
                    )

    # ---------------------------------------------------------------------
    # Array views and measurements
    # ---------------------------------------------------------------------
    def vertices_array(self) -> np.ndarray:
        """(N, 3) float array copy of the vertex positions."""
        if not self.positions:
            return np.zeros((0, 3), dtype=float)
        return np.asarray(self.positions, dtype=float)

    def faces_array(self) -> np.ndarray:
        """(M, 3) int array copy of the triangles."""
        if not self.triangles:
            return np.zeros((0, 3), dtype=np.int64)
        return np.asarray(self.triangles, dtype=np.int64)

    def triangle_areas(self) -> np.ndarray:
        V = self.vertices_array()
        F = self.faces_array()
        if F.size == 0:
            return np.zeros(0, dtype=float)
        a, b, c = V[F[:, 0]], V[F[:, 1]], V[F[:, 2]]
        return 0.5 * np.linalg.norm(np.cross(b - a, c - a), axis=1)

    def area(self) -> float:
        """Total surface area."""
        return float(self.triangle_areas().sum())

    def bounds(self) -> Optional[Dict[str, Tuple[float, float]]]:
        if not self.positions:
            return None
        V = self.vertices_array()
        lo = V.min(axis=0)
        hi = V.max(axis=0)
        return {
            "x": (float(lo[0]), float(hi[0])),
            "y": (float(lo[1]), float(hi[1])),
            "z": (float(lo[2]), float(hi[2])),
        }

    def submesh(self, triangle_ids: Iterable[int]) -> "TriangleMesh":
        """
        Build a compacted mesh from a subset of triangles.

        Only the vertices referenced by the selected triangles are kept; they
        are renumbered in order of first use.
        """
        remap: Dict[int, int] = {}
        out = TriangleMesh()
        for tid in triangle_ids:
            new_tri = []
            for idx in self.triangles[tid]:
                if idx not in remap:
                    remap[idx] = out.add_vertex(self.positions[idx])
                new_tri.append(remap[idx])
            out.add_triangle(new_tri)
        return out

    # ---------------------------------------------------------------------
    # Interop
    # ---------------------------------------------------------------------
    @classmethod
    def from_arrays(cls, vertices: np.ndarray, faces: np.ndarray) -> "TriangleMesh":
        """
        Create a mesh from (N, 3) vertex and (M, 3) face arrays.

        Raises:
            ValueError: If either array does not have shape (*, 3).
        """
        V = np.asarray(vertices, dtype=float)
        F = np.asarray(faces, dtype=np.int64)
        if V.size == 0:
            V = V.reshape(0, 3)
        if F.size == 0:
            F = F.reshape(0, 3)
        if V.ndim != 2 or V.shape[1] != 3:
            raise ValueError("vertices must be an (N, 3) array")
        if F.ndim != 2 or F.shape[1] != 3:
            raise ValueError("faces must be an (M, 3) array")
        mesh = cls()
        mesh.positions = [tuple(row) for row in V.tolist()]
        mesh.triangles = [tuple(row) for row in F.tolist()]
        return mesh

    @classmethod
    def from_trimesh(cls, mesh: trimesh.Trimesh) -> "TriangleMesh":
        if not isinstance(mesh, trimesh.Trimesh):
            raise TypeError(f"Expected trimesh.Trimesh, got {type(mesh)}")
        return cls.from_arrays(mesh.vertices, mesh.faces)

    def to_trimesh(self) -> trimesh.Trimesh:
        """
        Convert to `trimesh.Trimesh`.

        Processing is disabled so that vertex and face indices match this
        container one-to-one.
        """
        return trimesh.Trimesh(
            vertices=self.vertices_array(),
            faces=self.faces_array(),
            process=False,
        )
