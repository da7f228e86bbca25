"""
Demo meshes and plane files for trying out the slicer.

Meshes are generated with `trimesh.creation` and returned as
`trimesh.Trimesh` (with a few descriptive metadata entries); use
`TriangleMesh.from_trimesh` to cut them.
"""

import logging
import os
from typing import Dict, Tuple

import numpy as np
import trimesh

from .config import write_plane
from .geometry import Plane
from .mesh import TriangleMesh
from .obj import save_obj

logger = logging.getLogger(__name__)
logger.addHandler(logging.NullHandler())


def _orient(mesh: trimesh.Trimesh, axis: str, center: Tuple[float, float, float]) -> None:
    # Rotate a z-aligned mesh to the requested axis, then move it to center
    if axis.lower() == "x":
        rotation = trimesh.transformations.rotation_matrix(np.pi / 2, [0, 1, 0])
        mesh.apply_transform(rotation)
    elif axis.lower() == "y":
        rotation = trimesh.transformations.rotation_matrix(np.pi / 2, [1, 0, 0])
        mesh.apply_transform(rotation)
    elif axis.lower() != "z":
        raise ValueError("axis must be 'x', 'y' or 'z'")

    if center != (0.0, 0.0, 0.0):
        translation = trimesh.transformations.translation_matrix(center)
        mesh.apply_transform(translation)


def create_cylinder_mesh(
    length: float = 10.0,
    radius: float = 1.0,
    resolution: int = 16,
    center: Tuple[float, float, float] = (0.0, 0.0, 0.0),
    axis: str = "z",
) -> trimesh.Trimesh:
    """
    Create a closed cylinder.

    Args:
        length: Cylinder length
        radius: Cylinder radius
        resolution: Number of circumferential segments
        center: Center position (x, y, z)
        axis: Primary axis ('x', 'y', or 'z')

    Returns:
        Trimesh cylinder object
    """
    cylinder = trimesh.creation.cylinder(radius=radius, height=length, sections=resolution)
    _orient(cylinder, axis, center)

    cylinder.metadata["shape"] = "cylinder"
    cylinder.metadata["length"] = length
    cylinder.metadata["radius"] = radius
    cylinder.metadata["surface_area_theoretical"] = 2 * np.pi * radius * (radius + length)
    cylinder.metadata["center"] = center
    cylinder.metadata["axis"] = axis
    return cylinder


def create_torus_mesh(
    major_radius: float = 2.0,
    minor_radius: float = 0.5,
    major_segments: int = 32,
    minor_segments: int = 16,
    center: Tuple[float, float, float] = (0.0, 0.0, 0.0),
    axis: str = "z",
) -> trimesh.Trimesh:
    """
    Create a torus.

    Args:
        major_radius: Distance from the torus center to the tube center
        minor_radius: Radius of the tube
        major_segments: Number of segments around the major radius
        minor_segments: Number of segments around the tube
        center: Center position (x, y, z)
        axis: Axis of symmetry ('x', 'y', or 'z')

    Returns:
        Trimesh torus object
    """
    torus = trimesh.creation.torus(
        major_radius=major_radius,
        minor_radius=minor_radius,
        major_sections=major_segments,
        minor_sections=minor_segments,
    )
    _orient(torus, axis, center)

    torus.metadata["shape"] = "torus"
    torus.metadata["major_radius"] = major_radius
    torus.metadata["minor_radius"] = minor_radius
    torus.metadata["surface_area_theoretical"] = 4 * np.pi**2 * major_radius * minor_radius
    torus.metadata["center"] = center
    torus.metadata["axis"] = axis
    return torus


def save_demo_files(output_dir: str = "data") -> Dict[str, str]:
    """
    Write a demo torus and a cutting plane through its middle.

    The plane contains the torus axis, so cutting splits the torus into two
    C-shaped halves.

    Args:
        output_dir: Directory for the files (created if missing)

    Returns:
        Dictionary with the "mesh" and "plane" file paths
    """
    os.makedirs(output_dir, exist_ok=True)

    torus = TriangleMesh.from_trimesh(create_torus_mesh())
    mesh_path = os.path.join(output_dir, "torus.obj")
    save_obj(torus, mesh_path)

    plane = Plane(origin=(0.0, 0.0, 0.0), normal=(1.0, 0.25, 0.0))
    plane_path = os.path.join(output_dir, "plane.json")
    write_plane(plane, plane_path)

    logger.info("Demo files written to %s", output_dir)
    return {"mesh": mesh_path, "plane": plane_path}


if __name__ == "__main__":
    paths = save_demo_files()
    print("Demo files created:")
    for name, path in paths.items():
        print(f"  {name}: {path}")
