# arlmesh

`arlmesh` takes a terrain mesh and resamples it onto a regular grid of quads
centred on the origin. Each grid point takes its height and normal from the
source vertex nearest to it in the X/Z plane. A two-dimensional k-d tree finds
that vertex. The grid is then written out as an ARL file.

## Installation

```
pip install .
```

## Command line

```
arlmesh --mesh_path <file_path> --output_path <file_path> --rows <int> --columns <int> --stride <float>
```

| Option          | Meaning                                           | Default  |
|-----------------|---------------------------------------------------|----------|
| `--mesh_path`   | Path of the Wavefront OBJ mesh to resample        | required |
| `--output_path` | Path of the ARL file to write                     | required |
| `--rows`        | Number of rows of quads (along +x)                | 1        |
| `--columns`     | Number of columns of quads (along +z)             | 1        |
| `--stride`      | Spacing setting for the grid of quads             | 1.0      |
| `--help`        | Print usage and exit                              |          |

Numbers are read leniently from their leading characters: `--rows 12abc`
reads as 12, and text with no leading number reads as zero. A negative row or
column count is refused.

`--help`, an unknown option, an option with no value or a missing
`--mesh_path`/`--output_path` prints a message and exits with status 0
without writing anything. If the mesh cannot be loaded, the grid cannot be
built (for example zero rows or columns) or the output cannot be written,
an error goes to standard error and the exit status is 1.

The grid spans `rows` x `columns` quads, each `stride / 2` wide, centred on the
origin. It has `(rows + 1) * (columns + 1)` vertices, with texture coordinates
running from 0 to 1 across the grid.

## The ARL file

An ARL file is plain ASCII text of whitespace-separated values:

1. the vertex count, the index count and the triangle strip length;
2. eight numbers per vertex: position x, y, z, normal x, y, z, and u, v;
3. the indices.

The index buffer holds one strip per row of quads, alternating bottom and
top grid indices; every strip has the same length, `(columns + 1) * 2`.

## Library use

The steps the command runs are also available on their own:

- `arlmesh.mesh_import.load_mesh(path)` loads a Wavefront OBJ file into a
  `Mesh` (`vertices`, `indices`, `strip_length`). Polygons are
  fan-triangulated, identical vertices are shared, smooth normals are
  generated for corners without one, and missing texture coordinates read as
  zero. The file must hold exactly one mesh.
- `arlmesh.mesh_import.load_arl_file(path)` reads an ARL file back into a `Mesh`.
- Both raise `MeshImportError` (a `ValueError`) when a file cannot be understood.
- `arlmesh.triangle_strip.build_triangle_strip(vertices, stride, rows, cols)`
  resamples vertices onto the grid and returns a `TriangleStrip`
  (`vertices`, `indices`, `strip_length`).
- `arlmesh.mesh_export.export_arl_file(path, strip_length, vertices, indices)`
  writes an ARL file.
- `arlmesh.kd_tree.KdTree(vertices).nearest(target)` finds the vertex closest
  to `target` in the X/Z plane, as measured by
  `arlmesh.kd_tree.planar_distance`.
- `arlmesh.vertex` provides the immutable `Vector3`, `Vector2` and `Vertex`
  types; `Vertex.to_fields()` and `Vertex.from_fields()` convert a vertex to
  and from its eight numbers.
- `arlmesh.command_parser.parse_args(argv)` turns command-line arguments into
  `Options`, and raises `UsageError` for bad input.
- `arlmesh.cli.main(argv=None)` runs the whole conversion and returns the exit
  status.

## What it does not do

Only Wavefront OBJ files are read as source meshes; other formats are
refused, as are files holding more than one object or group with faces.
Grid normals are copied from the nearest source vertex, not recalculated
for the grid.

## Running the tests

```
pip install .[test]
pytest
```