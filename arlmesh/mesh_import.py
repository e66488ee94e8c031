"""Loading of source meshes (Wavefront OBJ) and of ARL files."""

from __future__ import annotations

import math
import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Iterable, Iterator, TextIO

from arlmesh.vertex import Vector3, Vertex

_UINT32_MAX = 0xFFFFFFFF

# A face corner: indices into positions, texture coordinates and normals.
_Corner = tuple[int, "int | None", "int | None"]


class MeshImportError(ValueError):
    """A mesh or ARL file could not be understood."""


@dataclass
class Mesh:
    """Vertex and index buffers of a loaded mesh."""

    vertices: list[Vertex] = field(default_factory=list)
    indices: list[int] = field(default_factory=list)
    strip_length: int = 0


def _parse_uint(token: str, what: str) -> int:
    try:
        value = int(token)
    except ValueError:
        raise MeshImportError(f"invalid {what}: {token!r}") from None
    if not 0 <= value <= _UINT32_MAX:
        raise MeshImportError(f"{what} out of range: {token!r}")
    return value


def _take(tokens: Iterator[str], what: str) -> str:
    try:
        return next(tokens)
    except StopIteration:
        raise MeshImportError(f"file ends before {what}") from None


def load_arl_file(path: str | os.PathLike[str]) -> Mesh:
    """Read an ARL file as written by ``export_arl_file``."""
    tokens = iter(Path(path).read_text(encoding="ascii").split())
    vertex_count = _parse_uint(_take(tokens, "vertex count"), "vertex count")
    index_count = _parse_uint(_take(tokens, "index count"), "index count")
    strip_length = _parse_uint(_take(tokens, "strip length"), "strip length")

    vertices = []
    for _ in range(vertex_count):
        fields = [_take(tokens, "vertex data") for _ in range(8)]
        try:
            vertices.append(Vertex.from_fields(fields))
        except ValueError:
            raise MeshImportError(f"invalid vertex data: {fields}") from None

    indices = [
        _parse_uint(_take(tokens, "index data"), "index") for _ in range(index_count)
    ]
    return Mesh(vertices, indices, strip_length)


def _floats(args: list[str], minimum: int, lineno: int) -> tuple[float, ...]:
    if len(args) < minimum:
        raise MeshImportError(f"line {lineno}: expected {minimum} numbers")
    try:
        return tuple(float(arg) for arg in args)
    except ValueError:
        raise MeshImportError(f"line {lineno}: invalid number in {args}") from None


def _resolve(token: str, count: int, lineno: int) -> int:
    try:
        number = int(token)
    except ValueError:
        raise MeshImportError(f"line {lineno}: invalid index {token!r}") from None
    index = number - 1 if number > 0 else count + number
    if number == 0 or not 0 <= index < count:
        raise MeshImportError(f"line {lineno}: index {number} out of range")
    return index


def _corner(token: str, counts: tuple[int, int, int], lineno: int) -> _Corner:
    parts = token.split("/")
    if len(parts) > 3 or not parts[0]:
        raise MeshImportError(f"line {lineno}: malformed face corner {token!r}")
    parts += [""] * (3 - len(parts))
    position = _resolve(parts[0], counts[0], lineno)
    uv = _resolve(parts[1], counts[1], lineno) if parts[1] else None
    normal = _resolve(parts[2], counts[2], lineno) if parts[2] else None
    return position, uv, normal


def _unit(vector: Vector3) -> Vector3 | None:
    length = math.sqrt(vector.dot(vector))
    if length == 0.0:
        return None
    return vector * (1.0 / length)


def _smooth_normals(
    triangles: Iterable[tuple[_Corner, _Corner, _Corner]],
    positions: list[tuple[float, ...]],
) -> dict[tuple[float, ...], Vector3]:
    sums: dict[tuple[float, ...], Vector3] = {}
    for triangle in triangles:
        a, b, c = (Vector3(*positions[corner[0]]) for corner in triangle)
        face_normal = _unit((b - a).cross(c - a))
        if face_normal is None:
            continue
        for corner in triangle:
            key = positions[corner[0]]
            sums[key] = sums.get(key, Vector3()) + face_normal
    return {key: _unit(total) or Vector3() for key, total in sums.items()}


def _read_obj(stream: TextIO) -> Mesh:
    positions: list[tuple[float, ...]] = []
    uvs: list[tuple[float, float]] = []
    normals: list[tuple[float, ...]] = []
    current: list[list[_Corner]] = []
    groups = [current]

    for lineno, raw in enumerate(stream, 1):
        line = raw.split("#", 1)[0].strip()
        if not line:
            continue
        keyword, *args = line.split()
        if keyword == "v":
            positions.append(_floats(args, 3, lineno)[:3])
        elif keyword == "vt":
            values = _floats(args, 1, lineno)
            uvs.append((values[0], values[1] if len(values) > 1 else 0.0))
        elif keyword == "vn":
            normals.append(_floats(args, 3, lineno)[:3])
        elif keyword == "f":
            counts = (len(positions), len(uvs), len(normals))
            corners = [_corner(token, counts, lineno) for token in args]
            # Points and lines are dropped; only polygons make triangles.
            if len(corners) >= 3:
                current.append(corners)
        elif keyword in ("o", "g") and current:
            current = []
            groups.append(current)

    meshes = [group for group in groups if group]
    if len(meshes) != 1:
        raise MeshImportError(f"expected exactly one mesh, found {len(meshes)}")

    triangles = [
        (face[0], face[i], face[i + 1])
        for face in meshes[0]
        for i in range(1, len(face) - 1)
    ]

    generated: dict[tuple[float, ...], Vector3] = {}
    if any(corner[2] is None for triangle in triangles for corner in triangle):
        generated = _smooth_normals(triangles, positions)

    mesh = Mesh()
    seen: dict[Vertex, int] = {}
    for triangle in triangles:
        for p, t, n in triangle:
            position = positions[p]
            normal = (
                Vector3(*normals[n])
                if n is not None
                else generated.get(position, Vector3())
            )
            u, v = uvs[t] if t is not None else (0.0, 0.0)
            vertex = Vertex.of(*position, normal.x, normal.y, normal.z, u, v)
            if vertex not in seen:
                seen[vertex] = len(mesh.vertices)
                mesh.vertices.append(vertex)
            mesh.indices.append(seen[vertex])
    return mesh


def load_mesh(path: str | os.PathLike[str]) -> Mesh:
    """Load a single-mesh Wavefront OBJ file as triangles.

    Polygons are fan-triangulated, identical vertices are shared, and smooth
    normals are generated for corners that have none. Missing texture
    coordinates read as zero.
    """
    mesh_path = Path(path)
    if mesh_path.suffix.lower() != ".obj":
        raise MeshImportError(
            f"unsupported mesh format: {mesh_path.suffix or '(no extension)'}"
        )
    with mesh_path.open(encoding="utf-8") as stream:
        return _read_obj(stream)