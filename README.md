# polymesh

polymesh reads a 2D polygonal mesh stored as three semicolon-separated files.
It checks that the mesh is sound, and it writes the points and segments in the
ASCII UCD format, which ParaView can open.

## Input files

Put the three files in one directory. Each file starts with a header line, and
polymesh skips that line. Blank lines are ignored.

- `Cell0Ds.csv` holds one vertex per row: `Id;Marker;X;Y`. The vertex is stored with z = 0.
- `Cell1Ds.csv` holds one edge per row: `Id;Marker;Origin;End`.
- `Cell2Ds.csv` holds one polygon per row: `Id;Marker;NumVertices;V1;...;NumEdges;E1;...`.

The ids of vertices and edges must lie in the range `0 .. rows - 1`.

When a row has a non-zero marker, its id is added to the mesh's marker map
under that marker. The maps are `markers0d`, `markers1d` and `markers2d`, and
the ids keep the order of the file.

## Command line

```
polymesh [DIRECTORY] [-o OUTPUT]
```

The command runs these steps in order:

1. It loads the mesh from `DIRECTORY`. The default is the current directory.
2. It writes `Cell0Ds.inp` (the points) and `Cell1Ds.inp` (the edges) into `OUTPUT`. The default is the current directory.
3. It checks that every edge has a length of at least `1e-6`.
4. It checks that every polygon has an area of at least `1e-8`.

A message goes out for each step that succeeds. The exit status is 0 when every
step succeeds.

The exit status is 1 in two cases:

- A cell file cannot be read, is empty, or is malformed. The command prints the reason and `file not found` to standard error.
- A check fails. The command prints `Error in the length of the mesh` or `Error in the area of the mesh`.

## Library

```python
from polymesh.mesh import load_mesh, check_edge_lengths, check_polygon_areas
from polymesh.ucd import export_points, export_segments

mesh = load_mesh("path/to/mesh")
export_points("Cell0Ds.inp", mesh.points)
export_segments("Cell1Ds.inp", mesh.points, mesh.edges)

ok = check_edge_lengths(mesh, 1e-6) and check_polygon_areas(mesh, 1e-8)
```

### `polymesh.mesh`

- `PolygonalMesh` is a dataclass with these fields:
  - `points`: (x, y, z) triples.
  - `edges`: (origin, end) pairs.
  - `polygon_vertices` and `polygon_edges`.
  - The three marker maps.

  It also has the counts `num_cell0ds`, `num_cell1ds` and `num_cell2ds`.
- `read_cell0ds(path, mesh)`, `read_cell1ds(path, mesh)` and `read_cell2ds(path, mesh)` each fill one part of an existing mesh from one file.
- `load_mesh(directory=".")` reads all three files into a new mesh.
- Every reader raises `MeshImportError` if a file cannot be opened, has no data rows, or holds a malformed row or an id that is out of range.
- `check_edge_lengths(mesh, tolerance=1e-6)` returns `True` or `False`.
- `check_polygon_areas(mesh, tolerance=1e-8)` returns `True` or `False`. It computes each area with the shoelace formula.

### `polymesh.ucd`

- `export_points`, `export_segments`, `export_polygons` and `export_polyhedra` write a UCD ASCII file.
  - Polygons must be triangles or quadrilaterals.
  - Polyhedra must be tetrahedra.
  - Any other shape raises `ValueError`.
- Each export accepts these optional arguments:
  - Point properties and cell properties, given as `UCDProperty(label, unit_label, num_components, data)` with flat `data`.
  - A `materials` sequence. It is used only when its length matches the number of cells. Otherwise every material id is 0.
- `point_cells`, `line_cells`, `polygon_cells` and `polyhedron_cells` build the `UCDCell` lists.
- `write_ucd(stream, points, point_properties, cells, cell_properties)` writes to any text stream.
- Ids in the output are one-based, and real values are written in scientific notation with 16 digits.

## What it does not do

- It does not read UCD files back.
- It does not check that the edge lists of the polygons match their vertices.
- The command exports only points and edges. It never exports the polygons. To write them, call `export_polygons` from Python.

## Tests

```
pip install -e .[test]
pytest
```