"""Resampling of a mesh onto a regular grid laid out as triangle strips."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable

from arlmesh.kd_tree import KdTree
from arlmesh.vertex import Vector2, Vector3, Vertex


@dataclass
class TriangleStrip:
    """A grid mesh whose index buffer is a sequence of equal-length strips."""

    vertices: list[Vertex] = field(default_factory=list)
    indices: list[int] = field(default_factory=list)
    strip_length: int = 0


def build_triangle_strip(
    vertices: Iterable[Vertex], stride: float, rows: int, cols: int
) -> TriangleStrip:
    """Sample ``vertices`` onto a grid of ``rows`` x ``cols`` quads centred on the origin.

    Each grid point takes the height and normal of the source vertex nearest
    to it in the X/Z plane. Rows run along +X and columns along +Z; every row
    of quads becomes one strip of alternating bottom/top indices.
    """
    if rows < 1 or cols < 1:
        raise ValueError(f"rows and cols must be at least 1, got {rows} and {cols}")

    tree = KdTree(vertices)

    half_stride = stride / 2.0
    offset_x = (rows / 2.0) * half_stride
    offset_z = (cols / 2.0) * half_stride
    u_stride = 1.0 / rows
    v_stride = 1.0 / cols
    row_points = rows + 1
    col_points = cols + 1

    grid: list[Vertex] = []
    for x in range(row_points):
        for z in range(col_points):
            probe = Vertex.of(x * half_stride - offset_x, 0.0, z * half_stride - offset_z)
            source = tree.nearest(probe)
            grid.append(
                Vertex(
                    Vector3(probe.position.x, source.position.y, probe.position.z),
                    source.normal,
                    Vector2(u_stride * x, v_stride * z),
                )
            )

    indices = [
        index
        for x in range(rows)
        for z in range(col_points)
        for index in (x * col_points + z, (x + 1) * col_points + z)
    ]
    return TriangleStrip(grid, indices, col_points * 2)