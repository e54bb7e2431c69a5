import io

import pytest

from polymesh.ucd import (
    CellType,
    UCDCell,
    UCDProperty,
    export_points,
    export_polygons,
    export_polyhedra,
    export_segments,
    line_cells,
    point_cells,
    polygon_cells,
    polyhedron_cells,
    write_ucd,
)

POINTS = [(0.0, 0.0, 0.0), (1.0, 0.0, 0.0), (1.0, 1.0, 0.0), (0.1, 0.7, 2.5)]


def _lines(path):
    return path.read_text(encoding="ascii").splitlines()


@pytest.mark.parametrize(
    "cell_type, label",
    [
        (CellType.LINE, "line"),
        (CellType.TRIANGLE, "tri"),
        (CellType.QUADRILATERAL, "quad"),
        (CellType.HEXAHEDRON, "hex"),
        (CellType.PRISM, "prism"),
        (CellType.TETRAHEDRON, "tet"),
        (CellType.PYRAMID, "pyr"),
        (CellType.POINT, "pt"),
    ],
)
def test_cell_labels(cell_type, label):
    assert UCDCell(cell_type, (0,), 0).label() == label


def test_unknown_label_raises():
    with pytest.raises(ValueError, match="Type not supported"):
        UCDCell(CellType.UNKNOWN, (0,), 0).label()


def test_point_cells_default_materials():
    cells = point_cells(POINTS)
    assert [c.point_ids for c in cells] == [(i,) for i in range(len(POINTS))]
    assert all(c.type is CellType.POINT for c in cells)
    assert all(c.material_id == 0 for c in cells)


def test_point_cells_materials_used_only_when_lengths_match():
    materials = [5, 6, 7, 8]
    assert [c.material_id for c in point_cells(POINTS, materials)] == materials
    assert [c.material_id for c in point_cells(POINTS, [5, 6])] == [0, 0, 0, 0]


def test_line_cells():
    segments = [(0, 1), (1, 2)]
    cells = line_cells(segments, [3, 4])
    assert [c.point_ids for c in cells] == [(0, 1), (1, 2)]
    assert [c.material_id for c in cells] == [3, 4]
    assert all(c.type is CellType.LINE for c in cells)


def test_polygon_cells_types():
    cells = polygon_cells([(0, 1, 2), (0, 1, 2, 3)])
    assert [c.type for c in cells] == [CellType.TRIANGLE, CellType.QUADRILATERAL]
    assert cells[1].point_ids == (0, 1, 2, 3)


def test_polygon_cells_rejects_pentagon():
    with pytest.raises(ValueError, match="Polygon type not supported"):
        polygon_cells([(0, 1, 2, 3, 4)])


def test_polyhedron_cells():
    cells = polyhedron_cells([(0, 1, 2, 3)], [9])
    assert cells[0].type is CellType.TETRAHEDRON
    assert cells[0].material_id == 9
    with pytest.raises(ValueError):
        polyhedron_cells([(0, 1, 2)])


def test_write_ucd_header_and_point_format():
    stream = io.StringIO()
    write_ucd(stream, [(1.0, 0.0, 0.0)], [], point_cells([(1.0, 0.0, 0.0)]), [])
    lines = stream.getvalue().splitlines()
    assert lines[0] == "1 1 0 0 0"
    fields = lines[1].split(" ")
    assert fields[0] == "1"
    assert fields[1] == "1.0000000000000000e+00"
    assert lines[2].split(" ") == ["1", "0", "pt", "1"]


def test_export_points_round_trip(tmp_path):
    path = tmp_path / "Cell0Ds.inp"
    export_points(str(path), POINTS)
    lines = _lines(path)
    assert lines[0].split() == [str(len(POINTS)), str(len(POINTS)), "0", "0", "0"]
    for index, point in enumerate(POINTS):
        fields = lines[1 + index].split(" ")
        assert int(fields[0]) == index + 1
        assert tuple(float(v) for v in fields[1:]) == point
    cell_lines = lines[1 + len(POINTS):]
    assert len(cell_lines) == len(POINTS)
    for index, line in enumerate(cell_lines):
        assert line.split(" ") == [str(index + 1), "0", "pt", str(index + 1)]


def test_export_segments_one_based_ids(tmp_path):
    path = tmp_path / "Cell1Ds.inp"
    segments = [(0, 1), (2, 3), (3, 0)]
    export_segments(str(path), POINTS, segments, materials=[1, 2, 3])
    lines = _lines(path)
    assert lines[0].split()[:2] == [str(len(POINTS)), str(len(segments))]
    cell_lines = lines[1 + len(POINTS):]
    assert len(cell_lines) == len(segments)
    for index, (line, (a, b)) in enumerate(zip(cell_lines, segments)):
        assert line.split(" ") == [
            str(index + 1),
            str(index + 1),
            "line",
            str(a + 1),
            str(b + 1),
        ]


def test_export_polygons_with_properties(tmp_path):
    path = tmp_path / "polys.inp"
    polygons = [(0, 1, 2), (0, 1, 2, 3)]
    point_prop = UCDProperty("Id", "-", 1, [float(i) for i in range(len(POINTS))])
    cell_prop = UCDProperty("Vec", "m", 2, [0.5, 1.5, 2.5, 3.5])
    export_polygons(str(path), POINTS, polygons, [point_prop], [cell_prop])
    lines = _lines(path)
    assert lines[0].split() == [str(len(POINTS)), "2", "1", "1", "0"]
    rest = lines[1 + len(POINTS) + len(polygons):]
    assert rest[0] == "1 1"
    assert rest[1] == "Id, -"
    for index in range(len(POINTS)):
        fields = rest[2 + index].split(" ")
        assert int(fields[0]) == index + 1
        assert float(fields[1]) == point_prop.data[index]
    cell_part = rest[2 + len(POINTS):]
    assert cell_part[0] == "1 2"
    assert cell_part[1] == "Vec, m"
    for index in range(len(polygons)):
        fields = cell_part[2 + index].split(" ")
        assert int(fields[0]) == index + 1
        assert [float(v) for v in fields[1:]] == list(
            cell_prop.data[2 * index : 2 * index + 2]
        )
    assert len(cell_part) == 2 + len(polygons)


def test_export_polygons_labels(tmp_path):
    path = tmp_path / "polys.inp"
    export_polygons(str(path), POINTS, [(0, 1, 2), (0, 1, 2, 3)])
    cell_lines = _lines(path)[1 + len(POINTS):]
    assert [line.split(" ")[2] for line in cell_lines] == ["tri", "quad"]


def test_export_polyhedra(tmp_path):
    path = tmp_path / "tets.inp"
    export_polyhedra(str(path), POINTS, [(0, 1, 2, 3)], materials=[4])
    cell_lines = _lines(path)[1 + len(POINTS):]
    assert cell_lines == ["1 4 tet 1 2 3 4"]


def test_property_size_is_data_length():
    prop = UCDProperty("p", "u", 3, [1.0] * 6)
    assert prop.size == 6


def test_export_to_missing_directory_raises(tmp_path):
    path = tmp_path / "missing" / "out.inp"
    with pytest.raises(OSError):
        export_points(str(path), POINTS)


def test_unsupported_polygon_does_not_create_file(tmp_path):
    path = tmp_path / "bad.inp"
    with pytest.raises(ValueError):
        export_polygons(str(path), POINTS, [(0, 1)])
    assert not path.exists()