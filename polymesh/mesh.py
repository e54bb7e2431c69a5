"""Polygonal mesh stored as three semicolon-separated cell files, with sanity checks."""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from pathlib import Path

__all__ = [
    "MeshImportError",
    "PolygonalMesh",
    "read_cell0ds",
    "read_cell1ds",
    "read_cell2ds",
    "load_mesh",
    "check_edge_lengths",
    "check_polygon_areas",
]

CELL0D_FILE = "Cell0Ds.csv"
CELL1D_FILE = "Cell1Ds.csv"
CELL2D_FILE = "Cell2Ds.csv"


class MeshImportError(Exception):
    """Raised when a cell file is missing, empty or malformed."""


@dataclass
class PolygonalMesh:
    """Vertices, edges and polygons of a 2D mesh, with their boundary markers.

    ``points`` holds (x, y, z) triples indexed by vertex id; ``edges`` holds
    (origin, end) pairs indexed by edge id. Markers map a non-zero marker to
    the ids that carry it, in file order.
    """

    points: list[tuple[float, float, float]] = field(default_factory=list)
    edges: list[tuple[int, int]] = field(default_factory=list)
    polygon_vertices: list[list[int]] = field(default_factory=list)
    polygon_edges: list[list[int]] = field(default_factory=list)
    markers0d: dict[int, list[int]] = field(default_factory=dict)
    markers1d: dict[int, list[int]] = field(default_factory=dict)
    markers2d: dict[int, list[int]] = field(default_factory=dict)

    @property
    def num_cell0ds(self) -> int:
        return len(self.points)

    @property
    def num_cell1ds(self) -> int:
        return len(self.edges)

    @property
    def num_cell2ds(self) -> int:
        return len(self.polygon_vertices)


def _read_rows(path: str | Path, kind: str) -> list[list[str]]:
    """Return the whitespace/semicolon separated fields of each data row."""
    path = Path(path)
    try:
        text = path.read_text()
    except OSError as exc:
        raise MeshImportError(f"Error opening file {path.name}") from exc
    lines = text.splitlines()[1:]  # drop the header
    rows = [line.replace(";", " ").split() for line in lines]
    rows = [row for row in rows if row]
    if not rows:
        raise MeshImportError(f"There is no cell {kind}")
    return rows


def _add_marker(markers: dict[int, list[int]], marker: int, cell_id: int) -> None:
    if marker != 0:
        markers.setdefault(marker, []).append(cell_id)


def _check_id(cell_id: int, count: int, kind: str) -> None:
    if not 0 <= cell_id < count:
        raise MeshImportError(f"Cell {kind} id {cell_id} out of range")


def read_cell0ds(path: str | Path, mesh: PolygonalMesh) -> None:
    """Fill ``mesh.points`` and ``mesh.markers0d`` from rows ``id;marker;x;y``."""
    rows = _read_rows(path, "0D")
    points = [(0.0, 0.0, 0.0)] * len(rows)
    markers: dict[int, list[int]] = {}
    try:
        for row in rows:
            cell_id, marker = int(row[0]), int(row[1])
            x, y = float(row[2]), float(row[3])
            _check_id(cell_id, len(rows), "0D")
            points[cell_id] = (x, y, 0.0)
            _add_marker(markers, marker, cell_id)
    except (ValueError, IndexError) as exc:
        raise MeshImportError(f"Malformed cell 0D row: {exc}") from exc
    mesh.points = points
    mesh.markers0d = markers


def read_cell1ds(path: str | Path, mesh: PolygonalMesh) -> None:
    """Fill ``mesh.edges`` and ``mesh.markers1d`` from rows ``id;marker;origin;end``."""
    rows = _read_rows(path, "1D")
    edges = [(0, 0)] * len(rows)
    markers: dict[int, list[int]] = {}
    try:
        for row in rows:
            cell_id, marker = int(row[0]), int(row[1])
            origin, end = int(row[2]), int(row[3])
            _check_id(cell_id, len(rows), "1D")
            edges[cell_id] = (origin, end)
            _add_marker(markers, marker, cell_id)
    except (ValueError, IndexError) as exc:
        raise MeshImportError(f"Malformed cell 1D row: {exc}") from exc
    mesh.edges = edges
    mesh.markers1d = markers


def read_cell2ds(path: str | Path, mesh: PolygonalMesh) -> None:
    """Fill the polygons from rows ``id;marker;nv;v...;ne;e...``."""
    rows = _read_rows(path, "2D")
    vertices_list: list[list[int]] = []
    edges_list: list[list[int]] = []
    markers: dict[int, list[int]] = {}
    try:
        for row in rows:
            values = iter(int(value) for value in row)
            cell_id, marker = next(values), next(values)
            _add_marker(markers, marker, cell_id)
            num_vertices = next(values)
            vertices_list.append([next(values) for _ in range(num_vertices)])
            num_edges = next(values)
            edges_list.append([next(values) for _ in range(num_edges)])
    except (ValueError, StopIteration) as exc:
        raise MeshImportError(f"Malformed cell 2D row: {exc!r}") from exc
    mesh.polygon_vertices = vertices_list
    mesh.polygon_edges = edges_list
    mesh.markers2d = markers


def load_mesh(directory: str | Path = ".") -> PolygonalMesh:
    """Read the three cell files from ``directory`` into a new mesh."""
    directory = Path(directory)
    mesh = PolygonalMesh()
    read_cell0ds(directory / CELL0D_FILE, mesh)
    read_cell1ds(directory / CELL1D_FILE, mesh)
    read_cell2ds(directory / CELL2D_FILE, mesh)
    return mesh


def check_edge_lengths(mesh: PolygonalMesh, tolerance: float = 1e-6) -> bool:
    """True when every edge is at least ``tolerance`` long."""
    for origin, end in mesh.edges:
        x1, y1, _ = mesh.points[origin]
        x2, y2, _ = mesh.points[end]
        if math.hypot(x2 - x1, y2 - y1) < tolerance:
            return False
    return True


def check_polygon_areas(mesh: PolygonalMesh, tolerance: float = 1e-8) -> bool:
    """True when every polygon has an area of at least ``tolerance``."""
    for vertices in mesh.polygon_vertices:
        twice_area = 0.0
        for current, following in zip(vertices, vertices[1:] + vertices[:1]):
            x1, y1, _ = mesh.points[current]
            x2, y2, _ = mesh.points[following]
            twice_area += x1 * y2 - x2 * y1
        if abs(twice_area) / 2 < tolerance:
            return False
    return True