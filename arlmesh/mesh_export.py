"""Writing of ARL mesh files."""

from __future__ import annotations

import os
from pathlib import Path
from typing import Iterable

from arlmesh.vertex import Vertex

_UINT32_MAX = 0xFFFFFFFF


def _check_uint32(value: int, what: str) -> int:
    number = int(value)
    if not 0 <= number <= _UINT32_MAX:
        raise ValueError(f"{what} must fit an unsigned 32-bit integer: {value}")
    return number


def export_arl_file(
    path: str | os.PathLike[str],
    strip_length: int,
    vertices: Iterable[Vertex],
    indices: Iterable[int],
) -> None:
    """Write an ARL file.

    The file holds, as whitespace-separated text: the vertex count, the index
    count, the triangle strip length, eight numbers per vertex and then the
    indices.
    """
    vertex_list = list(vertices)
    index_list = [_check_uint32(index, "index") for index in indices]
    strip = _check_uint32(strip_length, "strip length")

    lines = [f"{len(vertex_list)} {len(index_list)} {strip}"]
    lines.extend(
        " ".join(repr(float(value)) for value in vertex.to_fields())
        for vertex in vertex_list
    )
    lines.append(" ".join(str(index) for index in index_list))
    Path(path).write_text("\n".join(lines) + "\n", encoding="ascii")