"""Small vector types and the mesh vertex they make up."""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import Iterable

_VERTEX_FIELD_COUNT = 8


@dataclass(frozen=True)
class Vector3:
    """A three-component vector of floats."""

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0

    def __getitem__(self, index: int) -> float:
        if not 0 <= index < 3:
            raise IndexError(f"Vector3 index out of range: {index}")
        return (self.x, self.y, self.z)[index]

    def __mul__(self, scalar: float) -> Vector3:
        if not isinstance(scalar, (int, float)):
            return NotImplemented
        return Vector3(self.x * scalar, self.y * scalar, self.z * scalar)

    __rmul__ = __mul__

    def __add__(self, other: Vector3) -> Vector3:
        if not isinstance(other, Vector3):
            return NotImplemented
        return Vector3(self.x + other.x, self.y + other.y, self.z + other.z)

    def __sub__(self, other: Vector3) -> Vector3:
        if not isinstance(other, Vector3):
            return NotImplemented
        return Vector3(self.x - other.x, self.y - other.y, self.z - other.z)

    def magnitude(self) -> float:
        """Euclidean length; reported as zero whenever the components sum to zero."""
        if self.x + self.y + self.z == 0.0:
            return 0.0
        return math.sqrt(self.x * self.x + self.y * self.y + self.z * self.z)

    def cross(self, other: Vector3) -> Vector3:
        return Vector3(
            self.y * other.z - self.z * other.y,
            self.z * other.x - self.x * other.z,
            self.x * other.y - self.y * other.x,
        )

    def dot(self, other: Vector3) -> float:
        return self.x * other.x + self.y * other.y + self.z * other.z

    def normalized(self) -> Vector3:
        """The vector scaled to unit length; raises ZeroDivisionError for a zero magnitude."""
        return self * (1.0 / self.magnitude())


@dataclass(frozen=True)
class Vector2:
    """A two-component vector of floats."""

    x: float = 0.0
    y: float = 0.0

    def __getitem__(self, index: int) -> float:
        if not 0 <= index < 2:
            raise IndexError(f"Vector2 index out of range: {index}")
        return (self.x, self.y)[index]


@dataclass(frozen=True)
class Vertex:
    """A mesh vertex: position, normal and texture coordinate."""

    position: Vector3 = field(default_factory=Vector3)
    normal: Vector3 = field(default_factory=Vector3)
    uvcoord: Vector2 = field(default_factory=Vector2)

    @classmethod
    def of(
        cls,
        x: float,
        y: float,
        z: float,
        nx: float = 0.0,
        ny: float = 0.0,
        nz: float = 0.0,
        u: float = 0.0,
        v: float = 0.0,
    ) -> Vertex:
        """Build a vertex from its eight scalar components."""
        return cls(Vector3(x, y, z), Vector3(nx, ny, nz), Vector2(u, v))

    def to_fields(self) -> tuple[float, ...]:
        """The eight scalars in file order: position, normal, uv."""
        p, n, uv = self.position, self.normal, self.uvcoord
        return (p.x, p.y, p.z, n.x, n.y, n.z, uv.x, uv.y)

    @classmethod
    def from_fields(cls, fields: Iterable[float]) -> Vertex:
        """Inverse of :meth:`to_fields`."""
        values = tuple(float(value) for value in fields)
        if len(values) != _VERTEX_FIELD_COUNT:
            raise ValueError(
                f"a vertex needs {_VERTEX_FIELD_COUNT} fields, got {len(values)}"
            )
        return cls.of(*values)