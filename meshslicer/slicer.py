"""
Plane slicing of triangle meshes.

`PlaneSlicer.cut` walks the triangle list with an explicit index. Each visit
calls `split_triangle`:

- If no edge of the triangle crosses the plane, the triangle is left alone
  and the index advances.
- Otherwise the first crossing edge (j, k), taken in the fixed cyclic order
  opposite vertex 0, 1, 2, receives a split vertex m. The triangle (i, j, k)
  is overwritten with (i, m, k) and (i, j, m) is appended. The index does not
  advance: the rewritten triangle may still cross the plane on another edge.
  Appended triangles are reached later by the same loop, because the loop
  bound is re-read on every iteration.

Each undirected edge is split at most once per cut (see `IntersectionCache`),
so the loop terminates after at most T + E extra triangles for a mesh with T
triangles and E edges. When it finishes, every triangle lies on one side of
the plane or on it.

Example:
    mesh = load_obj("torus.obj")
    plane = read_plane("plane.json")
    mesh, stats = cut_mesh(mesh, plane)
    save_obj(mesh, "output.obj")
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Optional, Tuple

from .geometry import PRECISION, Plane, check_precision
from .intersections import IntersectionCache
from .mesh import TriangleMesh

logger = logging.getLogger(__name__)
logger.addHandler(logging.NullHandler())


# ---------------------------------------------------------------------------
# Configuration and results
# ---------------------------------------------------------------------------
@dataclass
class CutOptions:
    precision: float = PRECISION  # tolerance on lambda at both segment ends
    validate: bool = True  # check triangle indices before mutating
    copy: bool = False  # cut a copy, leaving the input mesh untouched

    def __post_init__(self):
        self.precision = check_precision(self.precision)


@dataclass
class CutStats:
    """Counts recorded around one cut."""

    vertices_before: int
    triangles_before: int
    vertices_after: int
    triangles_after: int
    splits: int = 0
    skipped: bool = False

    @property
    def new_vertices(self) -> int:
        return self.vertices_after - self.vertices_before

    @property
    def new_triangles(self) -> int:
        return self.triangles_after - self.triangles_before


# ---------------------------------------------------------------------------
# Slicer
# ---------------------------------------------------------------------------
class PlaneSlicer:
    """
    Cuts a `TriangleMesh` in place along a plane.

    Attributes:
        mesh: The mesh being cut (mutated in place).
        plane: Current cutting plane.
        cache: Split vertices of the current cut, keyed by edge.
    """

    def __init__(
        self,
        mesh: TriangleMesh,
        plane: Optional[Plane] = None,
        *,
        precision: float = PRECISION,
    ):
        self.mesh = mesh
        self.plane = plane
        self.cache = IntersectionCache(precision=precision)

    @property
    def precision(self) -> float:
        return self.cache.precision

    def cut(self, plane: Optional[Plane] = None, *, validate: bool = True) -> CutStats:
        """
        Slice the mesh by the plane.

        Args:
            plane: Cutting plane; defaults to `self.plane`. When given it
                replaces `self.plane`.
            validate: Check triangle indices before any mutation.

        Returns:
            CutStats with before/after counts.

        Raises:
            ValueError: If no plane is set, or a triangle holds an invalid
                vertex index.
        """
        if plane is not None:
            self.plane = plane
        if self.plane is None:
            raise ValueError("No cutting plane set")

        mesh = self.mesh
        stats = CutStats(
            vertices_before=mesh.n_vertices,
            triangles_before=mesh.n_triangles,
            vertices_after=mesh.n_vertices,
            triangles_after=mesh.n_triangles,
        )

        self.cache.clear()
        if self.plane.is_degenerate:
            logger.debug("Plane normal is the zero vector; nothing to cut")
            stats.skipped = True
            return stats

        if validate:
            mesh.validate()

        tid = 0
        while tid < len(mesh.triangles):
            if self.split_triangle(tid):
                stats.splits += 1
            else:
                tid += 1

        stats.vertices_after = mesh.n_vertices
        stats.triangles_after = mesh.n_triangles
        logger.info(
            "Cut: %d -> %d vertices, %d -> %d triangles (%d splits)",
            stats.vertices_before,
            stats.vertices_after,
            stats.triangles_before,
            stats.triangles_after,
            stats.splits,
        )
        logger.debug("Intersection cache holds %d edges", len(self.cache))
        return stats

    def split_triangle(self, tid: int) -> bool:
        """
        Split triangle `tid` on its first edge crossing the plane.

        Returns:
            True if the triangle was rewritten and a triangle appended,
            False if it does not cross the plane.
        """
        triangles = self.mesh.triangles
        tri = triangles[tid]
        for n in range(3):
            i = tri[n]
            j = tri[(n + 1) % 3]
            k = tri[(n + 2) % 3]
            m = self.cache.get_or_create(self.mesh, j, k, self.plane)
            if m is not None:
                triangles.append((i, j, m))
                triangles[tid] = (i, m, k)
                return True
        return False


def cut_mesh(
    mesh: TriangleMesh,
    plane: Plane,
    *,
    options: Optional[CutOptions] = None,
) -> Tuple[TriangleMesh, CutStats]:
    """
    Cut `mesh` by `plane`.

    Args:
        mesh: Mesh to cut. Modified in place unless `options.copy` is set.
        plane: Cutting plane.
        options: CutOptions; defaults are used when None.

    Returns:
        (cut mesh, stats). The cut mesh is `mesh` itself or its copy.
    """
    if options is None:
        options = CutOptions()
    target = mesh.copy() if options.copy else mesh
    slicer = PlaneSlicer(target, plane, precision=options.precision)
    stats = slicer.cut(validate=options.validate)
    return target, stats
