"""
Command-line interface for meshslicer.

    meshslicer torus.obj plane.json

cuts torus.obj by the plane in plane.json and writes the result to
output.obj.
"""

import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional

from . import __version__
from .config import read_plane
from .geometry import PRECISION, Plane
from .mesh import TriangleMesh
from .obj import load_obj, save_obj
from .partition import connected_pieces, partition_mesh
from .slicer import CutOptions, cut_mesh

DEFAULT_OUTPUT = "output.obj"


def create_parser() -> argparse.ArgumentParser:
    """Create command-line argument parser."""
    parser = argparse.ArgumentParser(
        prog="meshslicer",
        description="Cut a triangle mesh (OBJ) by a plane (JSON).",
        formatter_class=argparse.ArgumentDefaultsHelpFormatter,
    )
    parser.add_argument("--version", action="version", version=f"meshslicer {__version__}")
    parser.add_argument("mesh_file", nargs="?", help="Input OBJ mesh")
    parser.add_argument("plane_file", nargs="?", help="JSON file with 'origin' and 'normal'")
    # Further positional arguments are accepted and ignored
    parser.add_argument("extra", nargs="*", help=argparse.SUPPRESS)
    parser.add_argument("-o", "--output", default=DEFAULT_OUTPUT, help="Output OBJ path")
    parser.add_argument(
        "--precision",
        type=float,
        default=PRECISION,
        help="Tolerance on the edge crossing parameter at both edge ends",
    )
    parser.add_argument(
        "--split",
        action="store_true",
        help="Also write the halves below and above the plane as <output>_below/_above",
    )
    parser.add_argument(
        "-v", "--verbose", action="count", default=0, help="Log progress (-vv for debug)"
    )
    return parser


def print_usage(prog: str = "meshslicer", output: str = DEFAULT_OUTPUT) -> None:
    print(f"Usage: {prog} torus.obj plane.json")
    print(f"This will cut torus.obj by plane.json and save the result in {output}")


def _configure_logging(verbosity: int) -> None:
    if verbosity <= 0:
        return
    level = logging.DEBUG if verbosity >= 2 else logging.INFO
    logging.basicConfig(level=level, format="%(levelname)s %(name)s: %(message)s")


def _write_halves(mesh: TriangleMesh, plane: Plane, output: Path) -> int:
    parts = partition_mesh(mesh, plane)
    for name, half in (("below", parts.below), ("above", parts.above)):
        path = output.with_name(f"{output.stem}_{name}{output.suffix or '.obj'}")
        try:
            save_obj(half, path)
        except OSError:
            print(f"Could not write file {path}", file=sys.stderr)
            return 1
        n_pieces = len(connected_pieces(half))
        print(
            f"File {path} written ({half.n_triangles} triangles in {n_pieces} pieces)"
        )
    return 0


def main(argv: Optional[List[str]] = None) -> int:
    """Main CLI entry point."""
    parser = create_parser()
    args = parser.parse_args(argv)
    _configure_logging(args.verbose)

    if args.mesh_file is None or args.plane_file is None:
        print_usage(parser.prog, args.output)
        return 0

    try:
        options = CutOptions(precision=args.precision)
    except ValueError as e:
        print(f"Invalid precision: {e}", file=sys.stderr)
        return 1

    try:
        mesh = load_obj(args.mesh_file)
    except (OSError, ValueError) as e:
        print(f"Could not read file {args.mesh_file}: {e}", file=sys.stderr)
        return 1
    print(f"File {args.mesh_file} loaded")

    try:
        plane = read_plane(args.plane_file)
    except (OSError, ValueError) as e:
        print(f"Could not read file {args.plane_file}: {e}", file=sys.stderr)
        return 1
    print(f"File {args.plane_file} loaded")

    print(f"Before: {mesh.n_vertices} vertices and {mesh.n_triangles} triangles")
    try:
        mesh, _ = cut_mesh(mesh, plane, options=options)
    except ValueError as e:
        print(f"Invalid mesh {args.mesh_file}: {e}", file=sys.stderr)
        return 1
    print(f"After: {mesh.n_vertices} vertices and {mesh.n_triangles} triangles")

    try:
        save_obj(mesh, args.output)
    except OSError as e:
        print(f"Could not write file {args.output}: {e}", file=sys.stderr)
        return 1
    print(f"File {args.output} written")

    if args.split:
        if plane.is_degenerate:
            print("Plane normal is zero; halves not written")
        else:
            return _write_halves(mesh, plane, Path(args.output))

    return 0


if __name__ == "__main__":
    sys.exit(main())
