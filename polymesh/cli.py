"""Command line entry: import a mesh, export it for viewing and check it."""

from __future__ import annotations

import argparse
import sys
from pathlib import Path

from polymesh.mesh import (
    MeshImportError,
    check_edge_lengths,
    check_polygon_areas,
    load_mesh,
)
from polymesh.ucd import export_points, export_segments


def _parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="polymesh",
        description="Import a polygonal mesh, export it as UCD and check it.",
    )
    parser.add_argument(
        "directory",
        nargs="?",
        default=".",
        help="directory holding Cell0Ds.csv, Cell1Ds.csv and Cell2Ds.csv",
    )
    parser.add_argument(
        "-o",
        "--output",
        default=".",
        help="directory where Cell0Ds.inp and Cell1Ds.inp are written",
    )
    return parser


def main(argv: list[str] | None = None) -> int:
    """Run the import, export and checks; return the exit status."""
    args = _parser().parse_args(argv)

    try:
        mesh = load_mesh(args.directory)
    except MeshImportError as exc:
        print(exc, file=sys.stderr)
        print("file not found", file=sys.stderr)
        return 1
    print("File imported successfully")

    output = Path(args.output)
    export_points(str(output / "Cell0Ds.inp"), mesh.points)
    export_segments(str(output / "Cell1Ds.inp"), mesh.points, mesh.edges)

    if not check_edge_lengths(mesh):
        print("Error in the length of the mesh", file=sys.stderr)
        return 1
    print("Length check passed")

    if not check_polygon_areas(mesh):
        print("Error in the area of the mesh", file=sys.stderr)
        return 1
    print("Area check passed")

    return 0


if __name__ == "__main__":
    sys.exit(main())