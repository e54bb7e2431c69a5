"""Writing points, segments, polygons and polyhedra as AVS UCD ASCII files."""

from __future__ import annotations

import enum
from collections.abc import Iterable, Sequence
from dataclasses import dataclass, field
from typing import TextIO

__all__ = [
    "CellType",
    "UCDProperty",
    "UCDCell",
    "point_cells",
    "line_cells",
    "polygon_cells",
    "polyhedron_cells",
    "write_ucd",
    "export_points",
    "export_segments",
    "export_polygons",
    "export_polyhedra",
]

_SEP = " "


class CellType(enum.IntEnum):
    """Kinds of UCD cells."""

    UNKNOWN = -1
    POINT = 0
    LINE = 1
    TRIANGLE = 2
    QUADRILATERAL = 3
    HEXAHEDRON = 4
    PRISM = 5
    TETRAHEDRON = 6
    PYRAMID = 7


_LABELS = {
    CellType.LINE: "line",
    CellType.TRIANGLE: "tri",
    CellType.QUADRILATERAL: "quad",
    CellType.HEXAHEDRON: "hex",
    CellType.PRISM: "prism",
    CellType.TETRAHEDRON: "tet",
    CellType.PYRAMID: "pyr",
    CellType.POINT: "pt",
}


@dataclass(frozen=True)
class UCDProperty:
    """A named field attached to points or cells.

    ``data`` is flat: the components of item ``i`` are
    ``data[num_components * i : num_components * (i + 1)]``.
    """

    label: str
    unit_label: str
    num_components: int
    data: Sequence[float] = field(default_factory=tuple)

    @property
    def size(self) -> int:
        return len(self.data)


@dataclass(frozen=True)
class UCDCell:
    """One cell: its type, zero-based point ids and material id."""

    type: CellType
    point_ids: tuple[int, ...]
    material_id: int = 0

    def label(self) -> str:
        """Return the UCD keyword for this cell's type."""
        try:
            return _LABELS[self.type]
        except KeyError:
            raise ValueError("Type not supported") from None


def _material(materials: Sequence[int] | None, count: int, index: int) -> int:
    if materials is not None and len(materials) == count:
        return int(materials[index])
    return 0


def point_cells(
    points: Sequence[Sequence[float]], materials: Sequence[int] | None = None
) -> list[UCDCell]:
    """One point cell per point."""
    count = len(points)
    return [
        UCDCell(CellType.POINT, (p,), _material(materials, count, p))
        for p in range(count)
    ]


def line_cells(
    segments: Sequence[Sequence[int]], materials: Sequence[int] | None = None
) -> list[UCDCell]:
    """One line cell per (origin, end) pair."""
    count = len(segments)
    return [
        UCDCell(
            CellType.LINE,
            (int(segment[0]), int(segment[1])),
            _material(materials, count, index),
        )
        for index, segment in enumerate(segments)
    ]


def polygon_cells(
    polygons: Sequence[Sequence[int]], materials: Sequence[int] | None = None
) -> list[UCDCell]:
    """Triangle or quadrilateral cells; other polygons raise ValueError."""
    count = len(polygons)
    cells = []
    for index, vertices in enumerate(polygons):
        if len(vertices) == 3:
            cell_type = CellType.TRIANGLE
        elif len(vertices) == 4:
            cell_type = CellType.QUADRILATERAL
        else:
            raise ValueError("Polygon type not supported")
        cells.append(
            UCDCell(
                cell_type,
                tuple(int(v) for v in vertices),
                _material(materials, count, index),
            )
        )
    return cells


def polyhedron_cells(
    polyhedra: Sequence[Sequence[int]], materials: Sequence[int] | None = None
) -> list[UCDCell]:
    """Tetrahedron cells; other polyhedra raise ValueError."""
    count = len(polyhedra)
    cells = []
    for index, vertices in enumerate(polyhedra):
        if len(vertices) != 4:
            raise ValueError("Polygon type not supported")
        cells.append(
            UCDCell(
                CellType.TETRAHEDRON,
                tuple(int(v) for v in vertices),
                _material(materials, count, index),
            )
        )
    return cells


def _real(value: float) -> str:
    return f"{float(value):.16e}"


def _write_properties(
    stream: TextIO, properties: Sequence[UCDProperty], item_count: int
) -> None:
    if not properties:
        return
    header = [str(len(properties))] + [str(p.num_components) for p in properties]
    stream.write(_SEP.join(header) + "\n")
    for prop in properties:
        stream.write(f"{prop.label},{_SEP}{prop.unit_label}\n")
    for item in range(item_count):
        values = [str(item + 1)]
        for prop in properties:
            start = prop.num_components * item
            values.extend(
                _real(prop.data[start + component])
                for component in range(prop.num_components)
            )
        stream.write(_SEP.join(values) + "\n")


def write_ucd(
    stream: TextIO,
    points: Sequence[Sequence[float]],
    point_properties: Sequence[UCDProperty],
    cells: Sequence[UCDCell],
    cell_properties: Sequence[UCDProperty],
) -> None:
    """Write a UCD ASCII document to ``stream``.

    Points are (x, y, z) triples; ids in the output are one-based.
    """
    stream.write(
        _SEP.join(
            str(n)
            for n in (
                len(points),
                len(cells),
                len(point_properties),
                len(cell_properties),
                0,
            )
        )
        + "\n"
    )

    for index, point in enumerate(points, start=1):
        stream.write(
            _SEP.join([str(index), _real(point[0]), _real(point[1]), _real(point[2])])
            + "\n"
        )

    for index, cell in enumerate(cells, start=1):
        parts = [str(index), str(cell.material_id), cell.label()]
        parts.extend(str(pid + 1) for pid in cell.point_ids)
        stream.write(_SEP.join(parts) + "\n")

    _write_properties(stream, point_properties, len(points))
    _write_properties(stream, cell_properties, len(cells))


def _export(
    file_path: str,
    points: Sequence[Sequence[float]],
    point_properties: Iterable[UCDProperty] | None,
    cells: Sequence[UCDCell],
    cell_properties: Iterable[UCDProperty] | None,
) -> None:
    with open(file_path, "w", encoding="ascii") as stream:
        write_ucd(
            stream,
            points,
            list(point_properties or ()),
            cells,
            list(cell_properties or ()),
        )


def export_points(
    file_path: str,
    points: Sequence[Sequence[float]],
    point_properties: Iterable[UCDProperty] | None = None,
    materials: Sequence[int] | None = None,
) -> None:
    """Write the points as point cells; properties attach to the cells."""
    _export(file_path, points, (), point_cells(points, materials), point_properties)


def export_segments(
    file_path: str,
    points: Sequence[Sequence[float]],
    segments: Sequence[Sequence[int]],
    point_properties: Iterable[UCDProperty] | None = None,
    segment_properties: Iterable[UCDProperty] | None = None,
    materials: Sequence[int] | None = None,
) -> None:
    """Write the segments as line cells."""
    _export(
        file_path,
        points,
        point_properties,
        line_cells(segments, materials),
        segment_properties,
    )


def export_polygons(
    file_path: str,
    points: Sequence[Sequence[float]],
    polygons: Sequence[Sequence[int]],
    point_properties: Iterable[UCDProperty] | None = None,
    polygon_properties: Iterable[UCDProperty] | None = None,
    materials: Sequence[int] | None = None,
) -> None:
    """Write triangles and quadrilaterals."""
    _export(
        file_path,
        points,
        point_properties,
        polygon_cells(polygons, materials),
        polygon_properties,
    )


def export_polyhedra(
    file_path: str,
    points: Sequence[Sequence[float]],
    polyhedra: Sequence[Sequence[int]],
    point_properties: Iterable[UCDProperty] | None = None,
    polyhedron_properties: Iterable[UCDProperty] | None = None,
    materials: Sequence[int] | None = None,
) -> None:
    """Write tetrahedra."""
    _export(
        file_path,
        points,
        point_properties,
        polyhedron_cells(polyhedra, materials),
        polyhedron_properties,
    )