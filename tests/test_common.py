import dataclasses
import math

import pytest

from shapeforms.common import Color, Position, Vec4, Vertex, degrees_to_radians


def test_vec4_components():
    v = Vec4(1, 2, 3, 4)
    assert (v.x, v.y, v.z, v.w) == (1.0, 2.0, 3.0, 4.0)


def test_vec4_iterates_in_order():
    assert tuple(Vec4(-0.75, 0.75, 0.0, 1.0)) == (-0.75, 0.75, 0.0, 1.0)
    assert len(Vec4(0, 0, 0, 1)) == 4


def test_vec4_components_are_floats():
    v = Vec4(1, 2, 3, 4)
    assert [type(c) for c in v] == [float, float, float, float]
    assert list(v) == [1.0, 2.0, 3.0, 4.0]


def test_vec4_is_immutable():
    v = Vec4(0.5, 0.5, 0.5, 1.0)
    with pytest.raises(dataclasses.FrozenInstanceError):
        v.x = 2.0
    assert v.x == 0.5
    assert v == Vec4(0.5, 0.5, 0.5, 1.0)


def test_vec4_equality():
    assert Vec4(1, 0, 0, 1) == Vec4(1.0, 0.0, 0.0, 1.0)
    assert Vec4(1, 0, 0, 1) != Vec4(0, 1, 0, 1)


def test_vertex_holds_position_and_color():
    vertex = Vertex(Position(0.0, 0.5, 0.0, 1.0), Color(1.0, 0.0, 0.0, 1.0))
    assert vertex.position.y == 0.5
    assert vertex.color.r == 1.0
    assert vertex.color.a == 1.0


def test_degrees_to_radians_half_turn():
    assert degrees_to_radians(180) == pytest.approx(math.pi)


def test_degrees_to_radians_zero():
    assert degrees_to_radians(0) == 0


def test_degrees_to_radians_is_linear():
    assert degrees_to_radians(360) == pytest.approx(2 * degrees_to_radians(180))
    assert degrees_to_radians(-45) == pytest.approx(-degrees_to_radians(45))