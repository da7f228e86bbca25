"""
Matplotlib rendering of a cut mesh, with triangles coloured by side.
"""

import logging
from typing import Optional

import matplotlib.pyplot as plt
import numpy as np
from mpl_toolkits.mplot3d.art3d import Poly3DCollection

from .geometry import Plane
from .mesh import TriangleMesh
from .partition import ABOVE, BELOW, classify_triangles

logger = logging.getLogger(__name__)
logger.addHandler(logging.NullHandler())


def plot_cut(
    mesh: TriangleMesh,
    plane: Plane,
    ax=None,
    below_color: str = "tab:blue",
    above_color: str = "tab:orange",
    on_plane_color: str = "tab:gray",
    alpha: float = 0.8,
    edgecolor: Optional[str] = "k",
    linewidth: float = 0.2,
    title: Optional[str] = None,
):
    """
    Draw `mesh` in 3D with each triangle coloured by its side of `plane`.

    Args:
        mesh: Mesh to draw, usually the result of a cut.
        plane: Plane used for the side classification.
        ax: Optional 3D matplotlib Axes; if None, a new figure is created.
        below_color, above_color, on_plane_color: Face colours per side.
        alpha: Face transparency.
        edgecolor: Triangle edge colour (None to hide edges).
        linewidth: Triangle edge width.
        title: Optional axes title.

    Returns:
        The matplotlib Axes used for drawing.
    """
    if ax is None:
        fig = plt.figure()
        ax = fig.add_subplot(projection="3d")

    if mesh.n_triangles == 0:
        logger.info("Mesh has no triangles; nothing to plot")
        return ax

    V = mesh.vertices_array()
    F = mesh.faces_array()
    sides = classify_triangles(mesh, plane)
    colors = np.where(
        sides == BELOW, below_color, np.where(sides == ABOVE, above_color, on_plane_color)
    )

    coll = Poly3DCollection(
        V[F], facecolors=colors.tolist(), alpha=alpha, edgecolor=edgecolor, linewidth=linewidth
    )
    ax.add_collection3d(coll)

    lo = V.min(axis=0)
    hi = V.max(axis=0)
    ax.set_xlim(lo[0], hi[0])
    ax.set_ylim(lo[1], hi[1])
    ax.set_zlim(lo[2], hi[2])
    ax.set_xlabel("X")
    ax.set_ylabel("Y")
    ax.set_zlabel("Z")
    if title is not None:
        ax.set_title(title)
    return ax
