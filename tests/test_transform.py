import math

import numpy as np
import pytest

from shapeforms.transform import Transform


def test_starts_as_identity():
    t = Transform()
    assert np.array_equal(t.matrix, np.identity(4))
    assert t.matrix.dtype == np.float32


def test_translation_fills_last_column():
    t = Transform()
    t.set_translation(0, -0.3, 0)
    expected = np.identity(4, dtype=np.float32)
    expected[1, 3] = np.float32(-0.3)
    assert np.allclose(t.matrix, expected)


def test_scale_fills_diagonal():
    t = Transform()
    t.set_scale(0.5, 0.5, 0)
    assert np.allclose(np.diag(t.matrix), [0.5, 0.5, 0.0, 1.0])
    assert np.count_nonzero(t.matrix - np.diag(np.diag(t.matrix))) == 0


def test_half_turn_about_z():
    t = Transform()
    t.set_rotation(-math.pi, 0, 0, 1)
    assert np.allclose(t.matrix, np.diag([-1.0, -1.0, 1.0, 1.0]), atol=1e-6)


def test_quarter_turn_maps_x_to_y():
    t = Transform()
    t.set_rotation(math.pi / 2, 0, 0, 1)
    result = t.matrix @ np.array([1.0, 0.0, 0.0, 1.0])
    assert np.allclose(result, [0.0, 1.0, 0.0, 1.0], atol=1e-6)


def test_rotation_axis_is_normalised():
    a = Transform()
    a.set_rotation(0.7, 0, 0, 5)
    b = Transform()
    b.set_rotation(0.7, 0, 0, 1)
    assert np.allclose(a.matrix, b.matrix, atol=1e-6)


def test_rotation_is_orthonormal():
    t = Transform()
    t.set_rotation(1.234, 1, 2, 3)
    r = t.matrix[:3, :3].astype(np.float64)
    assert np.allclose(r @ r.T, np.identity(3), atol=1e-5)
    assert np.linalg.det(r) == pytest.approx(1.0, abs=1e-5)


def test_zero_angle_is_identity():
    t = Transform()
    t.set_rotation(0.0, 3, -1, 2)
    assert np.allclose(t.matrix, np.identity(4))


def test_later_operations_apply_after_earlier_ones():
    scale_then_move = Transform()
    scale_then_move.set_scale(2, 2, 2)
    scale_then_move.set_translation(1, 0, 0)
    assert scale_then_move.matrix[0, 3] == pytest.approx(1.0)

    move_then_scale = Transform()
    move_then_scale.set_translation(1, 0, 0)
    move_then_scale.set_scale(2, 2, 2)
    assert move_then_scale.matrix[0, 3] == pytest.approx(2.0)


def test_translations_accumulate():
    t = Transform()
    t.set_translation(1, 2, 3)
    t.set_translation(-1, -2, -3)
    assert np.allclose(t.matrix, np.identity(4))


def test_reset_restores_identity():
    t = Transform()
    t.set_rotation(-math.pi, 0, 0, 1)
    t.set_scale(0.5, 0.5, 0.5)
    t.set_translation(0, -0.3, 0)
    t.reset()
    assert np.array_equal(t.matrix, np.identity(4))


def test_matrix_is_read_only():
    t = Transform()
    with pytest.raises(ValueError):
        t.matrix[0, 0] = 5.0
    assert t.matrix[0, 0] == 1.0


def test_str_of_identity():
    assert str(Transform()) == "1 0 0 0\n0 1 0 0\n0 0 1 0\n0 0 0 1"


def test_str_has_four_aligned_rows():
    t = Transform()
    t.set_translation(0, -0.3, 0)
    lines = str(t).splitlines()
    assert len(lines) == 4
    assert len({len(line) for line in lines}) == 1