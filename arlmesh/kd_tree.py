"""Two-dimensional k-d tree over the X/Z plane of mesh vertices."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Iterable

from arlmesh.vertex import Vertex


@dataclass
class KdNode:
    """One node of a :class:`KdTree`."""

    vertex: Vertex
    left: KdNode | None = None
    right: KdNode | None = None


def _axis_value(vertex: Vertex, depth: int) -> float:
    # Even depths split on Z, odd depths on X.
    return vertex.position.z if depth % 2 == 0 else vertex.position.x


def planar_distance(left: Vertex, right: Vertex) -> float:
    """Distance between two vertices measured in the X/Z plane only."""
    dz = left.position.z - right.position.z
    dx = left.position.x - right.position.x
    return math.sqrt(dz * dz + dx * dx)


class KdTree:
    """A k-d tree for nearest-vertex lookup, ignoring height (Y)."""

    def __init__(self, vertices: Iterable[Vertex]) -> None:
        self.root = self._build(list(vertices), 0)

    @classmethod
    def _build(cls, vertices: list[Vertex], depth: int) -> KdNode | None:
        if not vertices:
            return None
        ordered = sorted(vertices, key=lambda v: _axis_value(v, depth))
        median = len(ordered) // 2
        return KdNode(
            ordered[median],
            cls._build(ordered[:median], depth + 1),
            cls._build(ordered[median + 1 :], depth + 1),
        )

    def nearest(self, target: Vertex) -> Vertex:
        """The stored vertex closest to ``target`` in the X/Z plane."""
        if self.root is None:
            raise ValueError("cannot search an empty tree")
        found = self._nearest(self.root, target, None, math.inf, 0)
        assert found is not None
        return found.vertex

    def _nearest(
        self,
        node: KdNode | None,
        target: Vertex,
        closest: KdNode | None,
        closest_dist: float,
        depth: int,
    ) -> KdNode | None:
        if node is None:
            return closest

        dist = planar_distance(node.vertex, target)
        if dist < closest_dist:
            closest_dist = dist
            closest = node

        target_pos = _axis_value(target, depth)
        node_pos = _axis_value(node.vertex, depth)
        if target_pos < node_pos:
            next_branch, other_branch = node.left, node.right
        else:
            next_branch, other_branch = node.right, node.left

        closest = self._nearest(next_branch, target, closest, closest_dist, depth + 1)

        if other_branch is not None and closest is not None:
            radius = planar_distance(closest.vertex, target)
            if abs(target_pos - node_pos) < radius:
                closest = self._nearest(
                    other_branch, target, closest, closest_dist, depth + 1
                )
        return closest