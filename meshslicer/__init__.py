"""
meshslicer: cut triangle meshes by a plane

Splits every triangle crossing a plane so that each resulting triangle lies on
one side of the plane (or on it). Crossing points are shared between the
triangles meeting at an edge. Includes OBJ and JSON plane I/O, partitioning
of the cut mesh into halves, demo meshes and a command-line tool.
"""

__version__ = "0.1.0"

from .config import plane_from_dict, plane_to_dict, read_plane, write_plane

# Demo meshes
from .demo import create_cylinder_mesh, create_torus_mesh, save_demo_files

# Geometry kernel
from .geometry import (
    PRECISION,
    Plane,
    check_precision,
    interpolate,
    is_crossing,
    solve_crossing,
)
from .intersections import IntersectionCache, edge_key

# Mesh container and I/O
from .mesh import TriangleMesh
from .obj import format_obj, load_obj, parse_obj, save_obj

# Halves and pieces of a cut mesh
from .partition import (
    ABOVE,
    BELOW,
    ON_PLANE,
    Partition,
    classify_triangles,
    connected_pieces,
    face_adjacency_graph,
    partition_mesh,
)
from .path import data_path

# Slicing
from .slicer import CutOptions, CutStats, PlaneSlicer, cut_mesh

__all__ = [
    # Geometry kernel
    "PRECISION",
    "Plane",
    "solve_crossing",
    "is_crossing",
    "check_precision",
    "interpolate",
    # Intersection cache
    "IntersectionCache",
    "edge_key",
    # Slicing
    "PlaneSlicer",
    "CutOptions",
    "CutStats",
    "cut_mesh",
    # Mesh container and I/O
    "TriangleMesh",
    "load_obj",
    "save_obj",
    "parse_obj",
    "format_obj",
    "read_plane",
    "write_plane",
    "plane_from_dict",
    "plane_to_dict",
    # Halves and pieces
    "ABOVE",
    "BELOW",
    "ON_PLANE",
    "Partition",
    "classify_triangles",
    "partition_mesh",
    "connected_pieces",
    "face_adjacency_graph",
    # Demo meshes
    "create_cylinder_mesh",
    "create_torus_mesh",
    "save_demo_files",
    # Path functions
    "data_path",
]
