"""
Basic example: cut a torus by a plane and look at the two halves.

1. Build a torus mesh
2. Cut it by a plane containing its axis
3. Split the cut mesh into the parts below and above the plane
4. Save the results and plot the cut
"""

import matplotlib.pyplot as plt

from meshslicer import (
    Plane,
    PlaneSlicer,
    TriangleMesh,
    connected_pieces,
    create_torus_mesh,
    partition_mesh,
    save_obj,
)
from meshslicer.visualization import plot_cut


def main():
    mesh = TriangleMesh.from_trimesh(create_torus_mesh(major_radius=2.0, minor_radius=0.5))
    plane = Plane(origin=(0.0, 0.0, 0.0), normal=(1.0, 0.25, 0.0))

    print(f"Before: {mesh.n_vertices} vertices and {mesh.n_triangles} triangles")
    stats = PlaneSlicer(mesh, plane).cut()
    print(f"After: {mesh.n_vertices} vertices and {mesh.n_triangles} triangles")
    print(f"{stats.splits} splits, {stats.new_vertices} new vertices on the plane")

    parts = partition_mesh(mesh, plane)
    for name, half in (("below", parts.below), ("above", parts.above)):
        pieces = connected_pieces(half)
        print(f"{name}: {half.n_triangles} triangles, {len(pieces)} piece(s), area {half.area():.4f}")
        save_obj(half, f"torus_{name}.obj")

    save_obj(mesh, "torus_cut.obj")

    plot_cut(mesh, plane, title="Torus cut by a plane")
    plt.show()


if __name__ == "__main__":
    main()
