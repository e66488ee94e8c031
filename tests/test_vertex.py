import math

import pytest

from arlmesh.vertex import Vector2, Vector3, Vertex


def test_vector3_indexing_matches_components():
    v = Vector3(1.5, -2.0, 7.25)
    assert [v[0], v[1], v[2]] == [v.x, v.y, v.z]


@pytest.mark.parametrize("index", [3, -1, 10])
def test_vector3_index_out_of_range(index):
    with pytest.raises(IndexError):
        Vector3(1.0, 2.0, 3.0)[index]


def test_vector2_indexing_and_range():
    v = Vector2(0.25, 0.75)
    assert (v[0], v[1]) == (0.25, 0.75)
    with pytest.raises(IndexError):
        v[2]


def test_add_then_subtract_round_trips():
    a = Vector3(1.0, 2.0, 3.0)
    b = Vector3(-4.0, 0.5, 9.0)
    assert (a + b) - b == a


def test_scalar_multiplication_both_sides():
    a = Vector3(1.0, -2.0, 3.0)
    assert a * 2.0 == 2.0 * a
    assert (a * 2.0).x == a.x * 2.0


def test_dot_is_commutative():
    a = Vector3(1.0, 2.0, 3.0)
    b = Vector3(4.0, -5.0, 6.0)
    assert a.dot(b) == b.dot(a)


def test_cross_is_orthogonal_to_operands():
    a = Vector3(1.0, 2.0, 3.0)
    b = Vector3(4.0, -5.0, 6.0)
    c = a.cross(b)
    assert c.dot(a) == pytest.approx(0.0)
    assert c.dot(b) == pytest.approx(0.0)


def test_cross_is_anticommutative():
    a = Vector3(1.0, 2.0, 3.0)
    b = Vector3(0.0, 1.0, -1.0)
    assert a.cross(b) == b.cross(a) * -1.0


def test_magnitude_of_pythagorean_vector():
    assert Vector3(3.0, 4.0, 0.0).magnitude() == pytest.approx(5.0)


def test_magnitude_is_zero_when_components_sum_to_zero():
    assert Vector3(0.0, 0.0, 0.0).magnitude() == 0.0


def test_normalized_has_unit_length():
    n = Vector3(2.0, 3.0, 6.0).normalized()
    assert math.sqrt(n.dot(n)) == pytest.approx(1.0)


def test_normalized_zero_vector_raises():
    with pytest.raises(ZeroDivisionError):
        Vector3().normalized()


def test_vertex_fields_round_trip():
    vertex = Vertex.of(1.0, 2.0, 3.0, 0.0, 1.0, 0.0, 0.5, 0.25)
    assert Vertex.from_fields(vertex.to_fields()) == vertex


def test_vertex_fields_order():
    vertex = Vertex.of(1.0, 2.0, 3.0, 4.0, 5.0, 6.0, 7.0, 8.0)
    fields = vertex.to_fields()
    assert fields[:3] == (vertex.position.x, vertex.position.y, vertex.position.z)
    assert fields[6:] == (vertex.uvcoord.x, vertex.uvcoord.y)


@pytest.mark.parametrize("count", [0, 7, 9])
def test_from_fields_rejects_wrong_count(count):
    with pytest.raises(ValueError):
        Vertex.from_fields([0.0] * count)


def test_default_vertex_is_all_zero():
    assert set(Vertex().to_fields()) == {0.0}