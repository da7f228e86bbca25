"""
Minimal Wavefront OBJ reading and writing.

Only vertex positions (``v x y z``) and faces (``f a b c ...``) are handled.
Face indices are 1-based in the file and 0-based in `TriangleMesh`. Every
other line (comments, normals, texture coordinates, groups, materials) is
ignored on load and nothing but ``v``/``f`` lines is written on save.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Iterable, List, Union

from .mesh import TriangleMesh

logger = logging.getLogger(__name__)
logger.addHandler(logging.NullHandler())

PathLike = Union[str, Path]


def _face_index(token: str, n_vertices: int, line_no: int) -> int:
    # "a", "a/b", "a//c" and "a/b/c" all reference vertex a
    head = token.split("/", 1)[0]
    try:
        idx = int(head)
    except ValueError as e:
        raise ValueError(f"Line {line_no}: invalid face index '{token}'") from e
    if idx == 0:
        raise ValueError(f"Line {line_no}: face indices are 1-based, got 0")
    # Negative indices count back from the last vertex read so far
    return idx - 1 if idx > 0 else n_vertices + idx


def parse_obj(lines: Iterable[str]) -> TriangleMesh:
    """
    Parse OBJ text lines into a `TriangleMesh`.

    Faces with more than three vertices are split into a triangle fan around
    their first vertex.

    Raises:
        ValueError: If a ``v`` or ``f`` line has missing or non-numeric values.
    """
    mesh = TriangleMesh()
    for line_no, line in enumerate(lines, start=1):
        parts = line.split()
        if not parts:
            continue
        prefix = parts[0]
        if prefix == "v":
            if len(parts) < 4:
                raise ValueError(f"Line {line_no}: vertex needs 3 coordinates")
            try:
                mesh.add_vertex([float(c) for c in parts[1:4]])
            except ValueError as e:
                raise ValueError(f"Line {line_no}: invalid vertex coordinates") from e
        elif prefix == "f":
            if len(parts) < 4:
                raise ValueError(f"Line {line_no}: face needs at least 3 vertices")
            idx = [_face_index(tok, mesh.n_vertices, line_no) for tok in parts[1:]]
            for a, b in zip(idx[1:-1], idx[2:]):
                mesh.add_triangle((idx[0], a, b))
    return mesh


def format_obj(mesh: TriangleMesh) -> List[str]:
    """Render `mesh` as OBJ lines (without trailing newlines)."""
    out: List[str] = []
    for x, y, z in mesh.positions:
        out.append(f"v {x:.17g} {y:.17g} {z:.17g}")
    for i, j, k in mesh.triangles:
        out.append(f"f {i + 1} {j + 1} {k + 1}")
    return out


def load_obj(path: PathLike) -> TriangleMesh:
    """
    Load an OBJ file.

    Raises:
        OSError: If the file cannot be opened.
        ValueError: If a vertex or face line is malformed.
    """
    with open(path, "r", encoding="utf-8") as f:
        mesh = parse_obj(f)
    logger.info(
        "Loaded %s: %d vertices, %d triangles", path, mesh.n_vertices, mesh.n_triangles
    )
    return mesh


def save_obj(mesh: TriangleMesh, path: PathLike) -> None:
    """
    Write `mesh` to an OBJ file.

    Raises:
        OSError: If the file cannot be written.
    """
    with open(path, "w", encoding="utf-8") as f:
        for line in format_obj(mesh):
            f.write(line + "\n")
    logger.info(
        "Wrote %s: %d vertices, %d triangles", path, mesh.n_vertices, mesh.n_triangles
    )
