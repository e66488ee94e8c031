import pytest

from arlmesh.kd_tree import KdTree, planar_distance
from arlmesh.vertex import Vertex


def _grid(n):
    return [
        Vertex.of(float(x), float(x * 10 + z), float(z))
        for x in range(n)
        for z in range(n)
    ]


def test_planar_distance_ignores_height():
    a = Vertex.of(0.0, 5.0, 0.0)
    b = Vertex.of(3.0, -2.0, 4.0)
    assert planar_distance(a, b) == pytest.approx(5.0)


def test_planar_distance_is_symmetric():
    a = Vertex.of(1.0, 0.0, 2.0)
    b = Vertex.of(-3.0, 9.0, 7.5)
    assert planar_distance(a, b) == planar_distance(b, a)


def test_planar_distance_to_self_is_zero():
    a = Vertex.of(1.0, 2.0, 3.0)
    assert planar_distance(a, a) == 0.0


def test_empty_tree_raises():
    tree = KdTree([])
    assert tree.root is None
    with pytest.raises(ValueError):
        tree.nearest(Vertex())


def test_single_vertex_is_always_nearest():
    only = Vertex.of(1.0, 2.0, 3.0)
    tree = KdTree([only])
    assert tree.nearest(Vertex.of(100.0, 0.0, -50.0)) == only


def test_root_is_median_on_z():
    vertices = [Vertex.of(0.0, 0.0, float(z)) for z in (4, 0, 3, 1, 2)]
    tree = KdTree(vertices)
    assert tree.root.vertex.position.z == 2.0
    assert tree.root.left.vertex.position.z < 2.0
    assert tree.root.right.vertex.position.z > 2.0


def test_input_is_not_modified():
    vertices = [Vertex.of(0.0, 0.0, float(z)) for z in (4, 0, 3, 1, 2)]
    snapshot = list(vertices)
    KdTree(vertices)
    assert vertices == snapshot


def test_exact_lookups_return_the_stored_vertex():
    vertices = _grid(5)
    tree = KdTree(vertices)
    for vertex in vertices:
        query = Vertex.of(vertex.position.x, -999.0, vertex.position.z)
        assert tree.nearest(query) == vertex


def test_nearest_crosses_into_other_branch():
    corners = [
        Vertex.of(0.0, 1.0, 0.0),
        Vertex.of(10.0, 2.0, 0.0),
        Vertex.of(0.0, 3.0, 10.0),
        Vertex.of(10.0, 4.0, 10.0),
    ]
    tree = KdTree(corners)
    assert tree.nearest(Vertex.of(9.0, 0.0, 9.0)) == corners[3]


def test_result_is_always_a_stored_vertex():
    vertices = _grid(4)
    tree = KdTree(vertices)
    for qx in (-1.3, 0.4, 1.7, 2.2, 5.0):
        for qz in (-2.0, 0.6, 1.4, 3.9):
            assert tree.nearest(Vertex.of(qx, 0.0, qz)) in vertices